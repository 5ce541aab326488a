import dataclasses
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, FrozenSet, List, Mapping, Optional, Union
from urllib.parse import quote, urlsplit, urlunsplit

import h11

from .content_types import ContentType
from .errors import JSONEncodingError
from .headers import HTTPHeader, HTTPHeaders
from .logging import get_logger
from .methods import HTTPMethod

ParamValue = Union[str, int, float, None]
JSONEncoder = Callable[[Any], Union[bytes, str]]

# Methods whose parameters travel in the URL query; all others send a form body.
URL_PARAMETER_METHODS: FrozenSet[str] = frozenset(
    m.name for m in (HTTPMethod.GET, HTTPMethod.HEAD, HTTPMethod.DELETE)
)

# Query characters left unescaped. '&', '=' and '+' are always escaped.
_QUERY_SAFE = "/?:@!$'()*,;"


def _quote(text: Any) -> str:
    return quote(str(text), safe=_QUERY_SAFE)


def encode_query(parameters: Mapping[str, ParamValue]) -> str:
    """
    Percent-encode parameters as a query string, sorted by raw name.

    A ``None`` value is written as a bare name without ``=``.
    """
    pairs = []
    for name, value in sorted(parameters.items(), key=lambda item: item[0]):
        if value is None:
            pairs.append(_quote(name))
        else:
            pairs.append(f"{_quote(name)}={_quote(value)}")
    return "&".join(pairs)


def _json_default(obj: Any) -> Any:
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def encode_json(obj: Any) -> bytes:
    """Compact UTF-8 JSON; dataclass instances are encoded as objects."""
    return json.dumps(
        obj,
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
        default=_json_default,
    ).encode("utf-8")


@dataclass
class Request:
    method: str
    url: str
    header_fields: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None

    def __post_init__(self) -> None:
        self.method = str(self.method)
        parsed = urlsplit(self.url)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"Invalid URL: {self.url}")
        if isinstance(self.body, str):
            self.body = self.body.encode("utf-8")
        elif isinstance(self.body, (bytearray, memoryview)):
            self.body = bytes(self.body)

    @classmethod
    def build(
        cls,
        method: Union[HTTPMethod, str],
        url: str,
        parameters: Optional[Mapping[str, ParamValue]] = None,
        *,
        logger: Optional[logging.Logger] = None,
    ) -> "Request":
        """
        Create a request, encoding ``parameters`` by method.

        GET, HEAD and DELETE append the parameters to the URL query. Every
        other method sends them as an ``application/x-www-form-urlencoded``
        body and leaves the URL as given. Parameters are sorted by name and
        follow any query already present on the URL.
        """
        log = logger or get_logger()
        request = cls(method=HTTPMethod.from_value(method).name, url=url)
        if not parameters:
            return request

        parts = urlsplit(url)
        query = encode_query(parameters)
        if parts.query:
            query = f"{parts.query}&{query}"

        if request.method in URL_PARAMETER_METHODS:
            request.url = urlunsplit(parts._replace(query=query))
            log.debug(f"{request.method} {url}: {len(parameters)} parameter(s) encoded in the URL")
        else:
            request.body = query.encode("utf-8")
            request.headers.content_type = ContentType.FORM_URL_ENCODED
            log.debug(f"{request.method} {url}: {len(parameters)} parameter(s) encoded as form body")
        return request

    @classmethod
    def build_json(
        cls,
        method: Union[HTTPMethod, str],
        url: str,
        json_body: Any,
        parameters: Optional[Mapping[str, ParamValue]] = None,
        *,
        encoder: Optional[JSONEncoder] = None,
        logger: Optional[logging.Logger] = None,
    ) -> "Request":
        """
        Create a request with a JSON body.

        The body and ``Content-Type`` replace whatever ``parameters`` would
        have produced for a form body. Raises JSONEncodingError when the
        encoder rejects ``json_body``.
        """
        request = cls.build(method, url, parameters, logger=logger)
        encode = encoder or encode_json
        try:
            body = encode(json_body)
        except (TypeError, ValueError) as exc:
            raise JSONEncodingError(f"Cannot encode JSON body: {exc}") from exc
        if isinstance(body, str):
            body = body.encode("utf-8")
        request.headers.content_type = ContentType.JSON
        request.body = body
        return request

    @property
    def headers(self) -> HTTPHeaders:
        return HTTPHeaders(self.header_fields)

    @headers.setter
    def headers(self, value: Union[HTTPHeaders, Mapping[str, str]]) -> None:
        new_fields = dict(value.fields if isinstance(value, HTTPHeaders) else value)
        self.add_header_fields(new_fields)
        # add_header_fields only inserts, stale keys are dropped one by one
        for name in list(self.header_fields):
            if name not in new_fields:
                self.set_header(name, None)

    def set_header(self, name: Union[HTTPHeader, str], value: Optional[str]) -> None:
        key = str(name)
        if value is None or value == "":
            self.header_fields.pop(key, None)
        else:
            self.header_fields[key] = value

    def add_header_fields(self, fields: Mapping[str, str]) -> None:
        for name, value in fields.items():
            self.set_header(name, value)

    @property
    def scheme(self) -> str:
        return urlsplit(self.url).scheme

    @property
    def host(self) -> Optional[str]:
        return urlsplit(self.url).hostname

    @property
    def port(self) -> int:
        parsed = urlsplit(self.url)
        return parsed.port or (443 if parsed.scheme == "https" else 80)

    @property
    def target(self) -> str:
        parsed = urlsplit(self.url)
        target = parsed.path or "/"
        if parsed.query:
            target += f"?{parsed.query}"
        return target

    def _wire_headers(self) -> Dict[str, str]:
        headers = dict(self.header_fields)
        lower_keys = {k.lower() for k in headers}
        if "host" not in lower_keys:
            # netloc keeps IPv6 brackets and the port as written, minus userinfo
            headers[HTTPHeader.HOST.name] = urlsplit(self.url).netloc.rpartition("@")[2]
        if self.body is not None and "content-length" not in lower_keys:
            headers[HTTPHeader.CONTENT_LENGTH.name] = str(len(self.body))
        return headers

    def to_h11(self) -> List[h11.Event]:
        """
        Events an h11 client connection sends for this request.

        ``Host`` and ``Content-Length`` are added to the wire headers when
        missing; the request itself is left unchanged.
        """
        events: List[h11.Event] = [
            h11.Request(
                method=self.method,
                target=self.target,
                headers=list(self._wire_headers().items()),
            )
        ]
        if self.body:
            events.append(h11.Data(data=self.body))
        events.append(h11.EndOfMessage())
        return events


__all__ = ["Request", "URL_PARAMETER_METHODS", "encode_query", "encode_json"]
