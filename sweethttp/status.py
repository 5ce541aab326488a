from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Optional, Tuple

from .errors import HTTPStatusError


class ResponseType(Enum):
    """Response class of a status code, grouped by its first digit."""

    INFORMATIONAL = "informational"
    SUCCESS = "success"
    REDIRECTION = "redirection"
    CLIENT_ERROR = "client_error"
    SERVER_ERROR = "server_error"
    UNDEFINED = "undefined"

    @classmethod
    def from_code(cls, code: int) -> "ResponseType":
        if 100 <= code < 200:
            return cls.INFORMATIONAL
        if 200 <= code < 300:
            return cls.SUCCESS
        if 300 <= code < 400:
            return cls.REDIRECTION
        if 400 <= code < 500:
            return cls.CLIENT_ERROR
        if 500 <= code < 600:
            return cls.SERVER_ERROR
        return cls.UNDEFINED


# (attribute, code, reason phrase). Includes a few widely used non-IANA
# codes (nginx 444/495-499, 306, 418).
_STATUS_TABLE: Tuple[Tuple[str, int, str], ...] = (
    ("CONTINUE", 100, "Continue"),
    ("SWITCHING_PROTOCOLS", 101, "Switching Protocols"),
    ("PROCESSING", 102, "Processing"),

    ("OK", 200, "OK"),
    ("CREATED", 201, "Created"),
    ("ACCEPTED", 202, "Accepted"),
    ("NON_AUTHORITATIVE_INFORMATION", 203, "Non-Authoritative Information"),
    ("NO_CONTENT", 204, "No Content"),
    ("RESET_CONTENT", 205, "Reset Content"),
    ("PARTIAL_CONTENT", 206, "Partial Content"),
    ("MULTI_STATUS", 207, "Multi-Status"),
    ("ALREADY_REPORTED", 208, "Already Reported"),
    ("IM_USED", 226, "IM Used"),

    ("MULTIPLE_CHOICES", 300, "Multiple Choices"),
    ("MOVED_PERMANENTLY", 301, "Moved Permanently"),
    ("FOUND", 302, "Found"),
    ("SEE_OTHER", 303, "See Other"),
    ("NOT_MODIFIED", 304, "Not Modified"),
    ("USE_PROXY", 305, "Use Proxy"),
    ("SWITCH_PROXY", 306, "Switch Proxy"),
    ("TEMPORARY_REDIRECT", 307, "Temporary Redirect"),
    ("PERMANENT_REDIRECT", 308, "Permanent Redirect"),

    ("BAD_REQUEST", 400, "Bad Request"),
    ("UNAUTHORIZED", 401, "Unauthorized"),
    ("PAYMENT_REQUIRED", 402, "Payment Required"),
    ("FORBIDDEN", 403, "Forbidden"),
    ("NOT_FOUND", 404, "Not Found"),
    ("METHOD_NOT_ALLOWED", 405, "Method Not Allowed"),
    ("NOT_ACCEPTABLE", 406, "Not Acceptable"),
    ("PROXY_AUTHENTICATION_REQUIRED", 407, "Proxy Authentication Required"),
    ("REQUEST_TIMEOUT", 408, "Request Timeout"),
    ("CONFLICT", 409, "Conflict"),
    ("GONE", 410, "Gone"),
    ("LENGTH_REQUIRED", 411, "Length Required"),
    ("PRECONDITION_FAILED", 412, "Precondition Failed"),
    ("PAYLOAD_TOO_LARGE", 413, "Payload Too Large"),
    ("URI_TOO_LONG", 414, "URI Too Long"),
    ("UNSUPPORTED_MEDIA_TYPE", 415, "Unsupported Media Type"),
    ("RANGE_NOT_SATISFIABLE", 416, "Range Not Satisfiable"),
    ("EXPECTATION_FAILED", 417, "Expectation Failed"),
    ("TEAPOT", 418, "I'm a teapot"),
    ("MISDIRECTED_REQUEST", 421, "Misdirected Request"),
    ("UNPROCESSABLE_ENTITY", 422, "Unprocessable Entity"),
    ("LOCKED", 423, "Locked"),
    ("FAILED_DEPENDENCY", 424, "Failed Dependency"),
    ("UPGRADE_REQUIRED", 426, "Upgrade Required"),
    ("PRECONDITION_REQUIRED", 428, "Precondition Required"),
    ("TOO_MANY_REQUESTS", 429, "Too Many Requests"),
    ("REQUEST_HEADER_FIELDS_TOO_LARGE", 431, "Request Header Fields Too Large"),
    ("NO_RESPONSE", 444, "No Response"),
    ("UNAVAILABLE_FOR_LEGAL_REASONS", 451, "Unavailable For Legal Reasons"),
    ("SSL_CERTIFICATE_ERROR", 495, "SSL Certificate Error"),
    ("SSL_CERTIFICATE_REQUIRED", 496, "SSL Certificate Required"),
    ("HTTP_REQUEST_SENT_TO_HTTPS_PORT", 497, "HTTP Request Sent to HTTPS Port"),
    ("CLIENT_CLOSED_REQUEST", 499, "Client Closed Request"),

    ("INTERNAL_SERVER_ERROR", 500, "Internal Server Error"),
    ("NOT_IMPLEMENTED", 501, "Not Implemented"),
    ("BAD_GATEWAY", 502, "Bad Gateway"),
    ("SERVICE_UNAVAILABLE", 503, "Service Unavailable"),
    ("GATEWAY_TIMEOUT", 504, "Gateway Timeout"),
    ("HTTP_VERSION_NOT_SUPPORTED", 505, "HTTP Version Not Supported"),
    ("VARIANT_ALSO_NEGOTIATES", 506, "Variant Also Negotiates"),
    ("INSUFFICIENT_STORAGE", 507, "Insufficient Storage"),
    ("LOOP_DETECTED", 508, "Loop Detected"),
    ("NOT_EXTENDED", 510, "Not Extended"),
    ("NETWORK_AUTHENTICATION_REQUIRED", 511, "Network Authentication Required"),
)

_NAMES: Dict[int, str] = {code: attr for attr, code, _ in _STATUS_TABLE}
_REASONS: Dict[int, str] = {code: reason for _, code, reason in _STATUS_TABLE}


@dataclass(frozen=True)
class HTTPStatusCode:
    """
    HTTP response status code.

    ``HTTPStatusCode(404)`` is the named ``HTTPStatusCode.NOT_FOUND``.
    Codes missing from the table are kept as an ``other`` status that
    carries the integer unchanged, so ``HTTPStatusCode(n).code == n``
    always holds.
    """

    code: int

    CONTINUE: ClassVar["HTTPStatusCode"]
    SWITCHING_PROTOCOLS: ClassVar["HTTPStatusCode"]
    PROCESSING: ClassVar["HTTPStatusCode"]
    OK: ClassVar["HTTPStatusCode"]
    CREATED: ClassVar["HTTPStatusCode"]
    ACCEPTED: ClassVar["HTTPStatusCode"]
    NON_AUTHORITATIVE_INFORMATION: ClassVar["HTTPStatusCode"]
    NO_CONTENT: ClassVar["HTTPStatusCode"]
    RESET_CONTENT: ClassVar["HTTPStatusCode"]
    PARTIAL_CONTENT: ClassVar["HTTPStatusCode"]
    MULTI_STATUS: ClassVar["HTTPStatusCode"]
    ALREADY_REPORTED: ClassVar["HTTPStatusCode"]
    IM_USED: ClassVar["HTTPStatusCode"]
    MULTIPLE_CHOICES: ClassVar["HTTPStatusCode"]
    MOVED_PERMANENTLY: ClassVar["HTTPStatusCode"]
    FOUND: ClassVar["HTTPStatusCode"]
    SEE_OTHER: ClassVar["HTTPStatusCode"]
    NOT_MODIFIED: ClassVar["HTTPStatusCode"]
    USE_PROXY: ClassVar["HTTPStatusCode"]
    SWITCH_PROXY: ClassVar["HTTPStatusCode"]
    TEMPORARY_REDIRECT: ClassVar["HTTPStatusCode"]
    PERMANENT_REDIRECT: ClassVar["HTTPStatusCode"]
    BAD_REQUEST: ClassVar["HTTPStatusCode"]
    UNAUTHORIZED: ClassVar["HTTPStatusCode"]
    PAYMENT_REQUIRED: ClassVar["HTTPStatusCode"]
    FORBIDDEN: ClassVar["HTTPStatusCode"]
    NOT_FOUND: ClassVar["HTTPStatusCode"]
    METHOD_NOT_ALLOWED: ClassVar["HTTPStatusCode"]
    NOT_ACCEPTABLE: ClassVar["HTTPStatusCode"]
    PROXY_AUTHENTICATION_REQUIRED: ClassVar["HTTPStatusCode"]
    REQUEST_TIMEOUT: ClassVar["HTTPStatusCode"]
    CONFLICT: ClassVar["HTTPStatusCode"]
    GONE: ClassVar["HTTPStatusCode"]
    LENGTH_REQUIRED: ClassVar["HTTPStatusCode"]
    PRECONDITION_FAILED: ClassVar["HTTPStatusCode"]
    PAYLOAD_TOO_LARGE: ClassVar["HTTPStatusCode"]
    URI_TOO_LONG: ClassVar["HTTPStatusCode"]
    UNSUPPORTED_MEDIA_TYPE: ClassVar["HTTPStatusCode"]
    RANGE_NOT_SATISFIABLE: ClassVar["HTTPStatusCode"]
    EXPECTATION_FAILED: ClassVar["HTTPStatusCode"]
    TEAPOT: ClassVar["HTTPStatusCode"]
    MISDIRECTED_REQUEST: ClassVar["HTTPStatusCode"]
    UNPROCESSABLE_ENTITY: ClassVar["HTTPStatusCode"]
    LOCKED: ClassVar["HTTPStatusCode"]
    FAILED_DEPENDENCY: ClassVar["HTTPStatusCode"]
    UPGRADE_REQUIRED: ClassVar["HTTPStatusCode"]
    PRECONDITION_REQUIRED: ClassVar["HTTPStatusCode"]
    TOO_MANY_REQUESTS: ClassVar["HTTPStatusCode"]
    REQUEST_HEADER_FIELDS_TOO_LARGE: ClassVar["HTTPStatusCode"]
    NO_RESPONSE: ClassVar["HTTPStatusCode"]
    UNAVAILABLE_FOR_LEGAL_REASONS: ClassVar["HTTPStatusCode"]
    SSL_CERTIFICATE_ERROR: ClassVar["HTTPStatusCode"]
    SSL_CERTIFICATE_REQUIRED: ClassVar["HTTPStatusCode"]
    HTTP_REQUEST_SENT_TO_HTTPS_PORT: ClassVar["HTTPStatusCode"]
    CLIENT_CLOSED_REQUEST: ClassVar["HTTPStatusCode"]
    INTERNAL_SERVER_ERROR: ClassVar["HTTPStatusCode"]
    NOT_IMPLEMENTED: ClassVar["HTTPStatusCode"]
    BAD_GATEWAY: ClassVar["HTTPStatusCode"]
    SERVICE_UNAVAILABLE: ClassVar["HTTPStatusCode"]
    GATEWAY_TIMEOUT: ClassVar["HTTPStatusCode"]
    HTTP_VERSION_NOT_SUPPORTED: ClassVar["HTTPStatusCode"]
    VARIANT_ALSO_NEGOTIATES: ClassVar["HTTPStatusCode"]
    INSUFFICIENT_STORAGE: ClassVar["HTTPStatusCode"]
    LOOP_DETECTED: ClassVar["HTTPStatusCode"]
    NOT_EXTENDED: ClassVar["HTTPStatusCode"]
    NETWORK_AUTHENTICATION_REQUIRED: ClassVar["HTTPStatusCode"]

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise TypeError(f"Status code must be an int, not {type(self.code).__name__}")

    @classmethod
    def other(cls, code: int) -> "HTTPStatusCode":
        """Build the fallback status for a code that has no name."""
        if code in _NAMES:
            raise ValueError(f"{code} is HTTPStatusCode.{_NAMES[code]}, not an unnamed code")
        return cls(code)

    @property
    def name(self) -> Optional[str]:
        return _NAMES.get(self.code)

    @property
    def is_other(self) -> bool:
        return self.code not in _NAMES

    @property
    def reason(self) -> str:
        return _REASONS.get(self.code, "Unknown")

    @property
    def response_type(self) -> ResponseType:
        return ResponseType.from_code(self.code)

    def raise_for_status(self) -> None:
        """
        Raise HTTPStatusError if the status is a client or server error.
        """
        if self.response_type in (ResponseType.CLIENT_ERROR, ResponseType.SERVER_ERROR):
            raise HTTPStatusError(self.code, f"HTTP {self.code}: {self.reason}", self)

    def __int__(self) -> int:
        return self.code

    def __str__(self) -> str:
        return f"{self.code} {self.reason}"

    def __repr__(self) -> str:
        if self.is_other:
            return f"HTTPStatusCode.other({self.code})"
        return f"HTTPStatusCode.{self.name}"


for _attr, _code, _ in _STATUS_TABLE:
    setattr(HTTPStatusCode, _attr, HTTPStatusCode(_code))
del _attr, _code, _


__all__ = ["HTTPStatusCode", "ResponseType"]
