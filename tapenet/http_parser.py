"""Incremental HTTP parsing: header detection, chunked bodies and message assembly."""

from __future__ import annotations

import re
from enum import Enum, IntEnum, auto
from typing import List, Optional, Tuple, Union

from tapenet.headers import HeaderParseError, HttpHeader
from tapenet.http_message import HttpMessage
from tapenet.http_types import HeaderField

__all__ = [
    "MAX_CHUNK_SIZE",
    "HttpParseError",
    "BuilderState",
    "HttpMessageBuilder",
    "parse_content_header",
    "parse_chunk_header",
]

MAX_CHUNK_SIZE = 65535
HEADER_END = b"\r\n\r\n"
CHUNK_SEPARATOR = b"\r\n"

_HEX = re.compile(r"[0-9a-fA-F]+")

Buffer = Union[bytes, bytearray, memoryview]


class HttpParseError(ValueError):
    """Raised when incoming HTTP data cannot be parsed."""


class BuilderState(IntEnum):
    """Progress of an :class:`HttpMessageBuilder`."""

    AWAITING_HEADER = 0
    HEADER_PARSE_FAILED = auto()
    RECEIVING_CHUNKED = auto()
    RECEIVING_MESSAGE_BODY = auto()
    MESSAGE_COMPLETED = auto()
    CHUNK_SEGMENT_COMPLETED = auto()
    CHUNK_MESSAGE_COMPLETED = auto()


class _Phase(Enum):
    HEADER = auto()
    BODY = auto()
    CHUNK_SIZE = auto()
    CHUNK_DATA = auto()
    CHUNK_DATA_END = auto()
    CHUNK_END = auto()


def parse_content_header(buffer: Buffer) -> Optional[Tuple[HttpHeader, int, int]]:
    """Find a header block at the start of ``buffer``.

    Return ``(header, consumed, body_length)``, or None if the terminating blank
    line has not arrived yet. ``body_length`` is the Content-Length, or 0.
    """
    data = bytes(buffer)
    end = data.find(HEADER_END)
    if end < 0:
        return None
    try:
        header = HttpHeader.parse(data[:end].decode("latin-1"))
    except HeaderParseError as exc:
        raise HttpParseError(f"invalid header: {exc}") from exc
    body_length = 0
    length_text = header.get_field(HeaderField.CONTENT_LENGTH)
    if length_text is not None:
        try:
            body_length = int(length_text)
        except ValueError:
            raise HttpParseError(f"invalid body size: {length_text!r}") from None
        if body_length < 0:
            raise HttpParseError(f"negative body size: {length_text!r}")
    return header, end + len(HEADER_END), body_length


def parse_chunk_header(buffer: Buffer) -> Optional[Tuple[int, int]]:
    """Parse a chunk-size line at the start of ``buffer``.

    Return ``(chunk_size, consumed)``, or None if the line is not complete.
    """
    data = bytes(buffer)
    end = data.find(CHUNK_SEPARATOR)
    if end < 0:
        return None
    line = data[:end].decode("latin-1")
    if not _HEX.fullmatch(line):
        raise HttpParseError(f"cannot parse chunk size: {line!r}")
    size = int(line, 16)
    if size > MAX_CHUNK_SIZE:
        raise HttpParseError(f"chunk size {size} exceeds {MAX_CHUNK_SIZE}")
    return size, end + len(CHUNK_SEPARATOR)


class HttpMessageBuilder:
    """Turn a stream of received bytes into complete :class:`HttpMessage` objects."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._state = BuilderState.AWAITING_HEADER
        self._phase = _Phase.HEADER
        self._header: Optional[HttpHeader] = None
        self._body = bytearray()
        self._remaining = 0

    @property
    def state(self) -> BuilderState:
        """The state reached after the last fed data."""
        return self._state

    def feed(self, data: Buffer) -> List[HttpMessage]:
        """Add received bytes; return the messages completed by them."""
        if self._state is BuilderState.HEADER_PARSE_FAILED:
            raise HttpParseError("builder failed on earlier data")
        self._buffer += data
        messages: List[HttpMessage] = []
        try:
            while self._step(messages):
                pass
        except HttpParseError:
            self._state = BuilderState.HEADER_PARSE_FAILED
            raise
        return messages

    def _step(self, messages: List[HttpMessage]) -> bool:
        if self._phase is _Phase.HEADER:
            return self._read_header()
        if self._phase is _Phase.BODY:
            if not self._take_body():
                self._state = BuilderState.RECEIVING_MESSAGE_BODY
                return False
            self._emit(messages, BuilderState.MESSAGE_COMPLETED)
            return True
        if self._phase is _Phase.CHUNK_SIZE:
            parsed = parse_chunk_header(self._buffer)
            if parsed is None:
                return False
            size, consumed = parsed
            del self._buffer[:consumed]
            if size == 0:
                self._phase = _Phase.CHUNK_END
            else:
                self._remaining = size
                self._phase = _Phase.CHUNK_DATA
            return True
        if self._phase is _Phase.CHUNK_DATA:
            if not self._take_body():
                return False
            self._phase = _Phase.CHUNK_DATA_END
            return True
        if self._phase is _Phase.CHUNK_DATA_END:
            if len(self._buffer) < len(CHUNK_SEPARATOR):
                return False
            if bytes(self._buffer[:2]) != CHUNK_SEPARATOR:
                raise HttpParseError("chunk data is not followed by CRLF")
            del self._buffer[:2]
            self._state = BuilderState.CHUNK_SEGMENT_COMPLETED
            self._phase = _Phase.CHUNK_SIZE
            return True
        return self._read_chunk_end(messages)

    def _read_header(self) -> bool:
        if not self._buffer:
            return False
        self._state = BuilderState.AWAITING_HEADER
        parsed = parse_content_header(self._buffer)
        if parsed is None:
            return False
        header, consumed, body_length = parsed
        del self._buffer[:consumed]
        self._header = header
        self._body = bytearray()
        if header.has_field(HeaderField.CONTENT_LENGTH):
            self._remaining = body_length
            self._phase = _Phase.BODY
            self._state = BuilderState.RECEIVING_MESSAGE_BODY
            return True
        encoding = header.get_field(HeaderField.TRANSFER_ENCODING)
        if encoding is not None:
            if encoding != "chunked":
                raise HttpParseError(f"unknown transfer encoding: {encoding!r}")
            self._phase = _Phase.CHUNK_SIZE
            self._state = BuilderState.RECEIVING_CHUNKED
            return True
        self._remaining = 0
        self._phase = _Phase.BODY
        return True

    def _take_body(self) -> bool:
        take = min(self._remaining, len(self._buffer))
        if take:
            self._body += self._buffer[:take]
            del self._buffer[:take]
            self._remaining -= take
        return self._remaining == 0

    def _read_chunk_end(self, messages: List[HttpMessage]) -> bool:
        if len(self._buffer) < len(CHUNK_SEPARATOR):
            return False
        if bytes(self._buffer[:2]) == CHUNK_SEPARATOR:
            del self._buffer[:2]
        else:
            # Trailer fields are skipped up to the blank line.
            end = bytes(self._buffer).find(HEADER_END)
            if end < 0:
                return False
            del self._buffer[:end + len(HEADER_END)]
        self._emit(messages, BuilderState.CHUNK_MESSAGE_COMPLETED)
        return True

    def _emit(self, messages: List[HttpMessage], state: BuilderState) -> None:
        assert self._header is not None
        messages.append(HttpMessage(self._header, bytes(self._body)))
        self._header = None
        self._body = bytearray()
        self._phase = _Phase.HEADER
        self._state = state