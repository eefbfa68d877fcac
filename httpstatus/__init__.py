__version__ = "1.0.0"

from httpstatus.classes import (
    StatusClass,
    classify,
    exception_for,
    is_client_error,
    is_error,
    is_informational,
    is_redirect,
    is_server_error,
    is_success,
    raise_for_status,
)
from httpstatus.codes import (
    STATUS_CODES,
    HTTPStatus,
    is_registered,
    lookup,
    resolve,
)
from httpstatus.exceptions import HTTPStatusException
from httpstatus.reasons import REASON_PHRASES, status_text
from httpstatus.utilities.logs import set_logger
