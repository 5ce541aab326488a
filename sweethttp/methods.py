from dataclasses import dataclass
from typing import ClassVar, Union


@dataclass(frozen=True)
class HTTPMethod:
    """
    HTTP request method.

    Any name is accepted; the class attributes cover the methods listed on
    https://developer.mozilla.org/en-US/docs/Web/HTTP/Methods
    """

    name: str

    GET: ClassVar["HTTPMethod"]
    HEAD: ClassVar["HTTPMethod"]
    POST: ClassVar["HTTPMethod"]
    PUT: ClassVar["HTTPMethod"]
    DELETE: ClassVar["HTTPMethod"]
    CONNECT: ClassVar["HTTPMethod"]
    TRACE: ClassVar["HTTPMethod"]
    OPTIONS: ClassVar["HTTPMethod"]
    PATCH: ClassVar["HTTPMethod"]

    def __str__(self) -> str:
        return self.name

    @classmethod
    def from_value(cls, value: Union["HTTPMethod", str]) -> "HTTPMethod":
        if isinstance(value, cls):
            return value
        return cls(str(value))


# Requests a representation of the resource. Should only retrieve data.
HTTPMethod.GET = HTTPMethod("GET")
# Same as GET, without the response body.
HTTPMethod.HEAD = HTTPMethod("HEAD")
# Submits an entity to the resource, often changing state on the server.
HTTPMethod.POST = HTTPMethod("POST")
# Replaces all current representations of the resource with the payload.
HTTPMethod.PUT = HTTPMethod("PUT")
HTTPMethod.DELETE = HTTPMethod("DELETE")
# Establishes a tunnel to the server identified by the target.
HTTPMethod.CONNECT = HTTPMethod("CONNECT")
# Message loop-back test along the path to the target.
HTTPMethod.TRACE = HTTPMethod("TRACE")
HTTPMethod.OPTIONS = HTTPMethod("OPTIONS")
# Applies partial modifications to a resource.
HTTPMethod.PATCH = HTTPMethod("PATCH")


__all__ = ["HTTPMethod"]
