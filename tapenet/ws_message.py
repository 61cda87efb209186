"""WebSocket messages and assembly of fragmented payloads."""

from __future__ import annotations

from typing import Union

from tapenet.ws_header import OpCode, WebsocketHeader

__all__ = ["WebsocketMessage", "FragmentAssembler"]

Buffer = Union[bytes, bytearray, memoryview]


class WebsocketMessage:
    """A WebSocket frame header together with its (unmasked) payload."""

    def __init__(self, header: WebsocketHeader, payload: Buffer = b"") -> None:
        self.header = header
        self.payload = bytes(payload)

    @classmethod
    def text(cls, text: str) -> "WebsocketMessage":
        """Create a text message."""
        data = text.encode("utf-8")
        return cls(WebsocketHeader.for_payload(OpCode.TEXT, len(data)), data)

    @classmethod
    def ping(cls) -> "WebsocketMessage":
        """Create an empty ping message."""
        return cls(WebsocketHeader.for_payload(OpCode.PING, 0))

    @classmethod
    def pong(cls, ping_data: Buffer = b"") -> "WebsocketMessage":
        """Create a pong message echoing ``ping_data``."""
        data = bytes(ping_data)
        return cls(WebsocketHeader.for_payload(OpCode.PONG, len(data)), data)

    @classmethod
    def close(cls) -> "WebsocketMessage":
        """Create an empty close message."""
        return cls(WebsocketHeader.for_payload(OpCode.CLOSE, 0))

    def to_bytes(self) -> bytes:
        """Return the message's wire form."""
        return self.header.to_bytes() + self.payload

    def data_subset(self, max_size: int, offset: int) -> bytes:
        """Return up to ``max_size`` bytes of the wire form starting at ``offset``."""
        if max_size < 0 or offset < 0:
            raise ValueError("max_size and offset must not be negative")
        return self.to_bytes()[offset:offset + max_size]

    def __repr__(self) -> str:
        return f"WebsocketMessage(opcode={self.header.opcode!r}, payload={self.payload!r})"


class FragmentAssembler:
    """Collect the fragments of one fragmented message."""

    def __init__(self, opcode: int, fragment: Buffer = b"") -> None:
        self.opcode = opcode
        self._data = bytearray(fragment)

    def add(self, fragment: Buffer) -> None:
        """Append the next fragment."""
        self._data += fragment

    @property
    def payload(self) -> bytes:
        """The payload collected so far."""
        return bytes(self._data)