from types import MappingProxyType
from typing import Mapping

from httpstatus import config
from httpstatus.codes import HTTPStatus, is_registered
from httpstatus.exceptions import UnknownStatusCode
from httpstatus.utilities.logs import log

# 306 is reserved and has no reason phrase
REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {
        HTTPStatus.Continue: "Continue",
        HTTPStatus.SwitchingProtocols: "Switching Protocols",
        HTTPStatus.Processing: "Processing",
        HTTPStatus.OK: "OK",
        HTTPStatus.Created: "Created",
        HTTPStatus.Accepted: "Accepted",
        HTTPStatus.NonAuthoritativeInfo: "Non-Authoritative Information",
        HTTPStatus.NoContent: "No Content",
        HTTPStatus.ResetContent: "Reset Content",
        HTTPStatus.PartialContent: "Partial Content",
        HTTPStatus.MultiStatus: "Multi-Status",
        HTTPStatus.AlreadyReported: "Already Reported",
        HTTPStatus.IMUsed: "IM Used",
        HTTPStatus.MultipleChoices: "Multiple Choices",
        HTTPStatus.MovedPermanently: "Moved Permanently",
        HTTPStatus.Found: "Found",
        HTTPStatus.SeeOther: "See Other",
        HTTPStatus.NotModified: "Not Modified",
        HTTPStatus.UseProxy: "Use Proxy",
        HTTPStatus.TemporaryRedirect: "Temporary Redirect",
        HTTPStatus.PermanentRedirect: "Permanent Redirect",
        HTTPStatus.BadRequest: "Bad Request",
        HTTPStatus.Unauthorized: "Unauthorized",
        HTTPStatus.PaymentRequired: "Payment Required",
        HTTPStatus.Forbidden: "Forbidden",
        HTTPStatus.NotFound: "Not Found",
        HTTPStatus.MethodNotAllowed: "Method Not Allowed",
        HTTPStatus.NotAcceptable: "Not Acceptable",
        HTTPStatus.ProxyAuthRequired: "Proxy Authentication Required",
        HTTPStatus.RequestTimeout: "Request Timeout",
        HTTPStatus.Conflict: "Conflict",
        HTTPStatus.Gone: "Gone",
        HTTPStatus.LengthRequired: "Length Required",
        HTTPStatus.PreconditionFailed: "Precondition Failed",
        HTTPStatus.RequestEntityTooLarge: "Request Entity Too Large",
        HTTPStatus.RequestURITooLong: "Request URI Too Long",
        HTTPStatus.UnsupportedMediaType: "Unsupported Media Type",
        HTTPStatus.RequestedRangeNotSatisfiable: "Requested Range Not Satisfiable",
        HTTPStatus.ExpectationFailed: "Expectation Failed",
        HTTPStatus.Teapot: "I'm a teapot",
        HTTPStatus.UnprocessableEntity: "Unprocessable Entity",
        HTTPStatus.Locked: "Locked",
        HTTPStatus.FailedDependency: "Failed Dependency",
        HTTPStatus.UpgradeRequired: "Upgrade Required",
        HTTPStatus.PreconditionRequired: "Precondition Required",
        HTTPStatus.TooManyRequests: "Too Many Requests",
        HTTPStatus.RequestHeaderFieldsTooLarge: "Request Header Fields Too Large",
        HTTPStatus.UnavailableForLegalReasons: "Unavailable For Legal Reasons",
        HTTPStatus.InternalServerError: "Internal Server Error",
        HTTPStatus.NotImplemented: "Not Implemented",
        HTTPStatus.BadGateway: "Bad Gateway",
        HTTPStatus.ServiceUnavailable: "Service Unavailable",
        HTTPStatus.GatewayTimeout: "Gateway Timeout",
        HTTPStatus.HTTPVersionNotSupported: "HTTP Version Not Supported",
        HTTPStatus.VariantAlsoNegotiates: "Variant Also Negotiates",
        HTTPStatus.InsufficientStorage: "Insufficient Storage",
        HTTPStatus.LoopDetected: "Loop Detected",
        HTTPStatus.NotExtended: "Not Extended",
        HTTPStatus.NetworkAuthenticationRequired: "Network Authentication Required",
    }
)


def status_text(code: int) -> str:
    """
    Return the reason phrase of the given code, or an empty string
    if the code is unknown.
    With HTTPSTATUS_STRICT_LOOKUPS enabled unregistered codes raise
    """

    if not is_registered(code):
        if config.STRICT_LOOKUPS:
            raise UnknownStatusCode(code)
        log.debug("No reason phrase for unregistered status code {}", code)
        return ""

    return REASON_PHRASES.get(code, "")
