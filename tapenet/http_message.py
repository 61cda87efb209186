"""HTTP message: a header together with its body."""

from __future__ import annotations

import os
from typing import Optional, Union

from tapenet.headers import HttpHeader
from tapenet.http_types import HeaderField, Method, Protocol
from tapenet.mime import find_mime_type

__all__ = ["HttpMessage"]

Body = Union[bytes, bytearray, str]


def _as_bytes(body: Body) -> bytes:
    return body.encode("utf-8") if isinstance(body, str) else bytes(body)


class HttpMessage:
    """An HTTP request or response ready to be sent or just received."""

    def __init__(self, header: HttpHeader, body: Body = b"") -> None:
        self.header = header
        self.body = _as_bytes(body)
        self._header_bytes: Optional[bytes] = None

    @classmethod
    def response(cls, status_code: int, body: Body = b"") -> "HttpMessage":
        """Create an HTTP/1.1 response; Content-Length is always set."""
        data = _as_bytes(body)
        header = HttpHeader.response(Protocol.HTTP_1_1, status_code)
        header.set_field(HeaderField.CONTENT_LENGTH, str(len(data)))
        return cls(header, data)

    @classmethod
    def request(cls, method: Method, request_target: str, body: Body = b"") -> "HttpMessage":
        """Create an HTTP/1.1 request; Content-Length is set only for a non-empty body."""
        data = _as_bytes(body)
        header = HttpHeader.request(Protocol.HTTP_1_1, method, request_target)
        if data:
            header.set_field(HeaderField.CONTENT_LENGTH, str(len(data)))
        return cls(header, data)

    @classmethod
    def from_file(cls, path: Union[str, os.PathLike]) -> "HttpMessage":
        """Create a 200 response serving the file at ``path``; OSError if it cannot be read."""
        with open(path, "rb") as handle:
            data = handle.read()
        header = HttpHeader.response(Protocol.HTTP_1_1, 200)
        header.set_field(HeaderField.CONTENT_TYPE, find_mime_type(os.fspath(path)))
        header.set_field(HeaderField.CONTENT_LENGTH, str(len(data)))
        return cls(header, data)

    def _header_data(self) -> bytes:
        if self._header_bytes is None:
            self._header_bytes = self.header.to_string().encode("utf-8")
        return self._header_bytes

    def to_bytes(self) -> bytes:
        """Return the whole message as sent on the wire."""
        return self._header_data() + self.body

    def data_subset(self, max_size: int, offset: int) -> bytes:
        """Return up to ``max_size`` bytes of the wire form starting at ``offset``."""
        if max_size < 0 or offset < 0:
            raise ValueError("max_size and offset must not be negative")
        return self.to_bytes()[offset:offset + max_size]