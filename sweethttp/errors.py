from typing import Optional


class SweetHTTPError(Exception):
    """Base exception for the sweethttp package."""


class RequestError(SweetHTTPError):
    """Raised when building a request fails."""


class JSONEncodingError(RequestError):
    """Raised when a JSON request body cannot be encoded."""


class HTTPStatusError(SweetHTTPError):
    """Raised for an HTTP error status (4xx or 5xx)."""

    def __init__(self, status_code: int, message: str, status: Optional[object] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.status = status
