"""

Exceptions carrying an HTTP status code,
plus the errors raised by failed table lookups

"""
from typing import Union

ExceptionType = Union[str, Exception]


class HTTPStatusException(Exception):
    def __init__(
        self,
        exception: ExceptionType,
        status_code: int = 500,
        is_warning: bool = False,
    ):

        super().__init__(exception)
        self.status_code = status_code or 500
        self.is_warning = is_warning


class BadRequest(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=400, is_warning=is_warning)


class Unauthorized(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=401, is_warning=is_warning)


class Forbidden(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=403, is_warning=is_warning)


class NotFound(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=404, is_warning=is_warning)


class Conflict(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=409, is_warning=is_warning)


class Teapot(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=418, is_warning=is_warning)


class TooManyRequests(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=429, is_warning=is_warning)


class ServerError(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=500, is_warning=is_warning)


class ServiceUnavailable(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=503, is_warning=is_warning)


class GatewayTimeout(HTTPStatusException):
    def __init__(self, exception: ExceptionType, is_warning: bool = False):
        super().__init__(exception, status_code=504, is_warning=is_warning)


# Lookup failures


class UnknownStatusName(KeyError):
    def __init__(self, name: str):
        super().__init__(f"Unknown HTTP status name: {name}")
        self.name = name


class UnknownStatusCode(ValueError):
    def __init__(self, code: int):
        super().__init__(f"Unregistered HTTP status code: {code}")
        self.code = code


class InvalidStatusCode(ValueError):
    def __init__(self, code: int):
        super().__init__(f"Invalid HTTP status code: {code}, expected 100-599")
        self.code = code
