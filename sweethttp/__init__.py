from .methods import HTTPMethod
from .status import HTTPStatusCode, ResponseType
from .content_types import ContentType
from .headers import HTTPHeader, HTTPHeaders
from .request import Request, URL_PARAMETER_METHODS, encode_json, encode_query
from .logging import get_logger
from .errors import (
    SweetHTTPError,
    RequestError,
    JSONEncodingError,
    HTTPStatusError,
)

__all__ = [
    "HTTPMethod",
    "HTTPStatusCode",
    "ResponseType",
    "ContentType",
    "HTTPHeader",
    "HTTPHeaders",
    "Request",
    "URL_PARAMETER_METHODS",
    "encode_json",
    "encode_query",
    "get_logger",
    "SweetHTTPError",
    "RequestError",
    "JSONEncodingError",
    "HTTPStatusError",
]


__version__ = "0.1.0"
