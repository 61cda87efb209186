"""Minimal typed, length-prefixed message framing."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

__all__ = ["HEADER", "SimpleMessage", "SimpleMessageBuilder"]

# One type byte followed by the 64-bit content size.
HEADER = struct.Struct("<BQ")

Buffer = Union[bytes, bytearray, memoryview]


@dataclass
class SimpleMessage:
    """A message of a given type (0-255) carrying raw content."""

    msg_type: int
    content: bytes = field(default=b"")

    def __post_init__(self) -> None:
        if not 0 <= self.msg_type <= 0xFF:
            raise ValueError(f"message type out of range: {self.msg_type}")
        if isinstance(self.content, str):
            self.content = self.content.encode("utf-8")
        else:
            self.content = bytes(self.content)

    def to_bytes(self) -> bytes:
        """Return the header followed by the content."""
        return HEADER.pack(self.msg_type, len(self.content)) + self.content

    def data_subset(self, max_size: int, offset: int) -> bytes:
        """Return up to ``max_size`` bytes of the wire form starting at ``offset``."""
        if max_size < 0 or offset < 0:
            raise ValueError("max_size and offset must not be negative")
        return self.to_bytes()[offset:offset + max_size]


class SimpleMessageBuilder:
    """Turn a stream of received bytes into :class:`SimpleMessage` objects."""

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._pending: Optional[Tuple[int, int]] = None

    def feed(self, data: Buffer) -> List[SimpleMessage]:
        """Add received bytes; return the messages completed by them."""
        self._buffer += data
        messages: List[SimpleMessage] = []
        while True:
            if self._pending is None:
                if len(self._buffer) < HEADER.size:
                    break
                self._pending = HEADER.unpack_from(self._buffer)
                del self._buffer[:HEADER.size]
            msg_type, size = self._pending
            if len(self._buffer) < size:
                break
            content = bytes(self._buffer[:size])
            del self._buffer[:size]
            self._pending = None
            messages.append(SimpleMessage(msg_type, content))
        return messages