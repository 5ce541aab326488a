from dataclasses import dataclass
from typing import ClassVar, Tuple, Union

# Common MIME types, from
# https://developer.mozilla.org/en-US/docs/Web/HTTP/Basics_of_HTTP/MIME_types/Common_types
_COMMON_TYPES: Tuple[Tuple[str, str], ...] = (
    ("AAC", "audio/aac"),
    ("AVI", "video/x-msvideo"),
    ("OCTET_STREAM", "application/octet-stream"),
    ("BMP", "image/bmp"),
    ("BZIP", "application/x-bzip"),
    ("BZIP2", "application/x-bzip2"),
    ("CSS", "text/css"),
    ("CSV", "text/csv"),
    ("WORD", "application/msword"),
    ("EPUB", "application/epub+zip"),
    ("GZIP", "application/gzip"),
    ("GIF", "image/gif"),
    ("HTML", "text/html"),
    ("ICAL", "text/calendar"),
    ("JPEG", "image/jpeg"),
    ("JAVASCRIPT", "text/javascript"),
    ("JSON", "application/json"),
    ("MIDI", "audio/midi"),
    ("MPEG_AUDIO", "audio/mpeg"),
    ("MPEG_VIDEO", "video/mpeg"),
    ("OGG_AUDIO", "audio/ogg"),
    ("OGG_VIDEO", "video/ogg"),
    ("OGG", "application/ogg"),
    ("OPUS_AUDIO", "audio/opus"),
    ("OPEN_TYPE", "font/otf"),
    ("PNG", "image/png"),
    ("PDF", "application/pdf"),
    ("RTF", "application/rtf"),
    ("SVG", "image/svg+xml"),
    ("SWF", "application/x-shockwave-flash"),
    ("TAR", "application/x-tar"),
    ("TIFF", "image/tiff"),
    ("MPEG_STREAM", "video/mp2t"),
    ("TTF", "font/ttf"),
    ("TEXT", "text/plain"),
    ("WAV", "audio/wav"),
    ("WEBM_AUDIO", "audio/webm"),
    ("WEBM_VIDEO", "video/webm"),
    ("WEBP", "image/webp"),
    ("WOFF", "font/woff"),
    ("WOFF2", "font/woff2"),
    ("XHTML", "application/xhtml+xml"),
    ("XML", "application/xml"),
    ("XML_TEXT", "text/xml"),
    ("ZIP", "application/zip"),
    # keys and values URL-encoded in key-value tuples separated by '&'
    ("FORM_URL_ENCODED", "application/x-www-form-urlencoded"),
    # each value is sent as a block of data
    ("FORM_DATA_MULTIPART", "multipart/form-data"),
)


@dataclass(frozen=True)
class ContentType:
    """A MIME type as sent in Accept / Content-Type headers."""

    name: str

    AAC: ClassVar["ContentType"]
    AVI: ClassVar["ContentType"]
    OCTET_STREAM: ClassVar["ContentType"]
    BMP: ClassVar["ContentType"]
    BZIP: ClassVar["ContentType"]
    BZIP2: ClassVar["ContentType"]
    CSS: ClassVar["ContentType"]
    CSV: ClassVar["ContentType"]
    WORD: ClassVar["ContentType"]
    EPUB: ClassVar["ContentType"]
    GZIP: ClassVar["ContentType"]
    GIF: ClassVar["ContentType"]
    HTML: ClassVar["ContentType"]
    ICAL: ClassVar["ContentType"]
    JPEG: ClassVar["ContentType"]
    JAVASCRIPT: ClassVar["ContentType"]
    JSON: ClassVar["ContentType"]
    MIDI: ClassVar["ContentType"]
    MPEG_AUDIO: ClassVar["ContentType"]
    MPEG_VIDEO: ClassVar["ContentType"]
    OGG_AUDIO: ClassVar["ContentType"]
    OGG_VIDEO: ClassVar["ContentType"]
    OGG: ClassVar["ContentType"]
    OPUS_AUDIO: ClassVar["ContentType"]
    OPEN_TYPE: ClassVar["ContentType"]
    PNG: ClassVar["ContentType"]
    PDF: ClassVar["ContentType"]
    RTF: ClassVar["ContentType"]
    SVG: ClassVar["ContentType"]
    SWF: ClassVar["ContentType"]
    TAR: ClassVar["ContentType"]
    TIFF: ClassVar["ContentType"]
    MPEG_STREAM: ClassVar["ContentType"]
    TTF: ClassVar["ContentType"]
    TEXT: ClassVar["ContentType"]
    WAV: ClassVar["ContentType"]
    WEBM_AUDIO: ClassVar["ContentType"]
    WEBM_VIDEO: ClassVar["ContentType"]
    WEBP: ClassVar["ContentType"]
    WOFF: ClassVar["ContentType"]
    WOFF2: ClassVar["ContentType"]
    XHTML: ClassVar["ContentType"]
    XML: ClassVar["ContentType"]
    XML_TEXT: ClassVar["ContentType"]
    ZIP: ClassVar["ContentType"]
    FORM_URL_ENCODED: ClassVar["ContentType"]
    FORM_DATA_MULTIPART: ClassVar["ContentType"]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_value(cls, value: Union["ContentType", str]) -> "ContentType":
        if isinstance(value, cls):
            return value
        return cls(str(value))


for _attr, _mime in _COMMON_TYPES:
    setattr(ContentType, _attr, ContentType(_mime))
del _attr, _mime


__all__ = ["ContentType"]
