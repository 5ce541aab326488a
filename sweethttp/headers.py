from dataclasses import dataclass
from typing import ClassVar, Dict, Iterator, Mapping, MutableMapping, Optional, Tuple, Union

from .content_types import ContentType

# Standard request fields, from
# https://en.wikipedia.org/wiki/List_of_HTTP_header_fields#Standard_request_fields
_REQUEST_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("AIM", "A-IM"),
    ("ACCEPT", "Accept"),
    ("ACCEPT_CHARSET", "Accept-Charset"),
    ("ACCEPT_DATETIME", "Accept-Datetime"),
    ("ACCEPT_ENCODING", "Accept-Encoding"),
    ("ACCEPT_LANGUAGE", "Accept-Language"),
    ("ACCESS_CONTROL_REQUEST_METHOD", "Access-Control-Request-Method"),
    ("ACCESS_CONTROL_REQUEST_HEADERS", "Access-Control-Request-Headers"),
    ("AUTHORIZATION", "Authorization"),
    ("CACHE_CONTROL", "Cache-Control"),
    ("CONNECTION", "Connection"),
    ("CONTENT_ENCODING", "Content-Encoding"),
    ("CONTENT_LENGTH", "Content-Length"),
    ("CONTENT_MD5", "Content-MD5"),
    ("CONTENT_TYPE", "Content-Type"),
    ("COOKIE", "Cookie"),
    ("DATE", "Date"),
    ("EXPECT", "Expect"),
    ("FORWARDED", "Forwarded"),
    ("FROM", "From"),
    ("HOST", "Host"),
    ("HTTP2_SETTINGS", "HTTP2-Settings"),
    ("IF_MATCH", "If-Match"),
    ("IF_MODIFIED_SINCE", "If-Modified-Since"),
    ("IF_NONE_MATCH", "If-None-Match"),
    ("IF_RANGE", "If-Range"),
    ("IF_UNMODIFIED_SINCE", "If-Unmodified-Since"),
    ("MAX_FORWARDS", "Max-Forwards"),
    ("ORIGIN", "Origin"),
    ("PRAGMA", "Pragma"),
    ("PROXY_AUTHORIZATION", "Proxy-Authorization"),
    ("RANGE", "Range"),
    ("REFERER", "Referer"),
    ("TE", "TE"),
    ("TRAILER", "Trailer"),
    ("TRANSFER_ENCODING", "Transfer-Encoding"),
    ("USER_AGENT", "User-Agent"),
    ("UPGRADE", "Upgrade"),
    ("VIA", "Via"),
    ("WARNING", "Warning"),
)


@dataclass(frozen=True)
class HTTPHeader:
    """Canonical spelling of a header field name."""

    name: str

    AIM: ClassVar["HTTPHeader"]
    ACCEPT: ClassVar["HTTPHeader"]
    ACCEPT_CHARSET: ClassVar["HTTPHeader"]
    ACCEPT_DATETIME: ClassVar["HTTPHeader"]
    ACCEPT_ENCODING: ClassVar["HTTPHeader"]
    ACCEPT_LANGUAGE: ClassVar["HTTPHeader"]
    ACCESS_CONTROL_REQUEST_METHOD: ClassVar["HTTPHeader"]
    ACCESS_CONTROL_REQUEST_HEADERS: ClassVar["HTTPHeader"]
    AUTHORIZATION: ClassVar["HTTPHeader"]
    CACHE_CONTROL: ClassVar["HTTPHeader"]
    CONNECTION: ClassVar["HTTPHeader"]
    CONTENT_ENCODING: ClassVar["HTTPHeader"]
    CONTENT_LENGTH: ClassVar["HTTPHeader"]
    CONTENT_MD5: ClassVar["HTTPHeader"]
    CONTENT_TYPE: ClassVar["HTTPHeader"]
    COOKIE: ClassVar["HTTPHeader"]
    DATE: ClassVar["HTTPHeader"]
    EXPECT: ClassVar["HTTPHeader"]
    FORWARDED: ClassVar["HTTPHeader"]
    FROM: ClassVar["HTTPHeader"]
    HOST: ClassVar["HTTPHeader"]
    HTTP2_SETTINGS: ClassVar["HTTPHeader"]
    IF_MATCH: ClassVar["HTTPHeader"]
    IF_MODIFIED_SINCE: ClassVar["HTTPHeader"]
    IF_NONE_MATCH: ClassVar["HTTPHeader"]
    IF_RANGE: ClassVar["HTTPHeader"]
    IF_UNMODIFIED_SINCE: ClassVar["HTTPHeader"]
    MAX_FORWARDS: ClassVar["HTTPHeader"]
    ORIGIN: ClassVar["HTTPHeader"]
    PRAGMA: ClassVar["HTTPHeader"]
    PROXY_AUTHORIZATION: ClassVar["HTTPHeader"]
    RANGE: ClassVar["HTTPHeader"]
    REFERER: ClassVar["HTTPHeader"]
    TE: ClassVar["HTTPHeader"]
    TRAILER: ClassVar["HTTPHeader"]
    TRANSFER_ENCODING: ClassVar["HTTPHeader"]
    USER_AGENT: ClassVar["HTTPHeader"]
    UPGRADE: ClassVar["HTTPHeader"]
    VIA: ClassVar["HTTPHeader"]
    WARNING: ClassVar["HTTPHeader"]

    def __str__(self) -> str:
        return self.name


for _attr, _field in _REQUEST_FIELDS:
    setattr(HTTPHeader, _attr, HTTPHeader(_field))
del _attr, _field


HeaderKey = Union[HTTPHeader, str]


def _key(header: HeaderKey) -> str:
    if isinstance(header, HTTPHeader):
        return header.name
    return header


class HTTPHeaders:
    """
    Typed view over a plain ``{name: value}`` header mapping.

    The view does not copy: reads and writes go straight to ``fields``.
    Keys are matched exactly (case-sensitive) on the canonical spelling
    of :class:`HTTPHeader`. Assigning ``None`` or ``""`` removes the key.

    Example:
        headers = HTTPHeaders({})
        headers.accept = ContentType.JSON
        headers.authorization = "Bearer xyz"
        headers[HTTPHeader.USER_AGENT] = "sweethttp"
    """

    __slots__ = ("fields",)

    def __init__(self, fields: Optional[MutableMapping[str, str]] = None) -> None:
        self.fields: MutableMapping[str, str] = fields if fields is not None else {}

    def __getitem__(self, header: HeaderKey) -> Optional[str]:
        return self.fields.get(_key(header))

    def __setitem__(self, header: HeaderKey, value: Optional[str]) -> None:
        name = _key(header)
        if value is None or value == "":
            self.fields.pop(name, None)
        else:
            self.fields[name] = str(value)

    def __delitem__(self, header: HeaderKey) -> None:
        self.fields.pop(_key(header), None)

    def __contains__(self, header: object) -> bool:
        if not isinstance(header, (HTTPHeader, str)):
            return False
        return _key(header) in self.fields

    def __iter__(self) -> Iterator[str]:
        return iter(self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HTTPHeaders):
            return dict(self.fields) == dict(other.fields)
        if isinstance(other, Mapping):
            return dict(self.fields) == dict(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"HTTPHeaders({dict(self.fields)!r})"

    def keys(self):
        return self.fields.keys()

    def items(self):
        return self.fields.items()

    def get(self, header: HeaderKey, default: Optional[str] = None) -> Optional[str]:
        return self.fields.get(_key(header), default)

    def to_dict(self) -> Dict[str, str]:
        return dict(self.fields)

    @property
    def accept(self) -> Optional[ContentType]:
        """
        The `Accept` header: content types the client is able to understand.
        https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Accept
        """
        value = self[HTTPHeader.ACCEPT]
        return ContentType(value) if value is not None else None

    @accept.setter
    def accept(self, value: Optional[Union[ContentType, str]]) -> None:
        self[HTTPHeader.ACCEPT] = ContentType.from_value(value).name if value is not None else None

    @property
    def content_type(self) -> Optional[ContentType]:
        """
        The `Content-Type` header: type of the data sent in the body.
        https://developer.mozilla.org/en-US/docs/Web/HTTP/Headers/Content-Type
        """
        value = self[HTTPHeader.CONTENT_TYPE]
        return ContentType(value) if value is not None else None

    @content_type.setter
    def content_type(self, value: Optional[Union[ContentType, str]]) -> None:
        self[HTTPHeader.CONTENT_TYPE] = ContentType.from_value(value).name if value is not None else None

    @property
    def authorization(self) -> Optional[str]:
        """Credentials, e.g. ``Basic QWxhZGRpbjpvcGVuIHNlc2FtZQ==``."""
        return self[HTTPHeader.AUTHORIZATION]

    @authorization.setter
    def authorization(self, value: Optional[str]) -> None:
        self[HTTPHeader.AUTHORIZATION] = value


__all__ = ["HTTPHeader", "HTTPHeaders"]
