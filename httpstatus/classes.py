"""
Classification of status codes in the five classes defined by RFC 7231, 6,
and mapping of error codes to the exceptions raised for them.
"""
from enum import IntEnum
from typing import Dict, Type

from httpstatus.codes import HTTPStatus
from httpstatus.exceptions import (
    BadRequest,
    Conflict,
    Forbidden,
    GatewayTimeout,
    HTTPStatusException,
    InvalidStatusCode,
    NotFound,
    ServerError,
    ServiceUnavailable,
    Teapot,
    TooManyRequests,
    Unauthorized,
)
from httpstatus.reasons import REASON_PHRASES
from httpstatus.utilities.logs import log


class StatusClass(IntEnum):
    INFORMATIONAL = 1
    SUCCESS = 2
    REDIRECTION = 3
    CLIENT_ERROR = 4
    SERVER_ERROR = 5


MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 599

EXCEPTIONS: Dict[int, Type[HTTPStatusException]] = {
    HTTPStatus.BadRequest: BadRequest,
    HTTPStatus.Unauthorized: Unauthorized,
    HTTPStatus.Forbidden: Forbidden,
    HTTPStatus.NotFound: NotFound,
    HTTPStatus.Conflict: Conflict,
    HTTPStatus.Teapot: Teapot,
    HTTPStatus.TooManyRequests: TooManyRequests,
    HTTPStatus.InternalServerError: ServerError,
    HTTPStatus.ServiceUnavailable: ServiceUnavailable,
    HTTPStatus.GatewayTimeout: GatewayTimeout,
}


def classify(code: int) -> StatusClass:
    # Unregistered codes are classified by their first digit
    if isinstance(code, bool) or not isinstance(code, int):
        raise InvalidStatusCode(code)

    if code < MIN_STATUS_CODE or code > MAX_STATUS_CODE:
        raise InvalidStatusCode(code)

    return StatusClass(code // 100)


def is_class(code: int, status_class: StatusClass) -> bool:
    try:
        return classify(code) == status_class
    except InvalidStatusCode:
        return False


def is_informational(code: int) -> bool:
    return is_class(code, StatusClass.INFORMATIONAL)


def is_success(code: int) -> bool:
    return is_class(code, StatusClass.SUCCESS)


def is_redirect(code: int) -> bool:
    return is_class(code, StatusClass.REDIRECTION)


def is_client_error(code: int) -> bool:
    return is_class(code, StatusClass.CLIENT_ERROR)


def is_server_error(code: int) -> bool:
    return is_class(code, StatusClass.SERVER_ERROR)


def is_error(code: int) -> bool:
    return is_client_error(code) or is_server_error(code)


def exception_for(code: int) -> Type[HTTPStatusException]:
    return EXCEPTIONS.get(code, HTTPStatusException)


def raise_for_status(code: int, message: str = "") -> None:
    """
    Raise the exception matching an error status code (4xx and 5xx).
    Informational, success and redirection codes are accepted silently.
    Client errors are raised as warnings
    """

    status_class = classify(code)
    if status_class < StatusClass.CLIENT_ERROR:
        return None

    is_warning = status_class == StatusClass.CLIENT_ERROR
    message = message or REASON_PHRASES.get(code) or f"HTTP status {code}"

    exception_class = exception_for(code)
    if exception_class is HTTPStatusException:
        e = HTTPStatusException(message, status_code=code, is_warning=is_warning)
    else:
        e = exception_class(message, is_warning=is_warning)

    if e.is_warning:
        log.warning(e)
    else:
        log.error(e)

    raise e
