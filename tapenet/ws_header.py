"""WebSocket frame header: parsing and wire form."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Union

__all__ = ["OpCode", "WebsocketHeader"]

START_SIZE = 2
LONGER_PAYLOAD_SIZE = 2
LONGEST_PAYLOAD_SIZE = 8
MASK_KEY_SIZE = 4
MAX_SHORT_PAYLOAD = 125
PAYLOAD_16_MARKER = 126
PAYLOAD_64_MARKER = 127

Buffer = Union[bytes, bytearray, memoryview]


class OpCode(IntEnum):
    """WebSocket frame opcode."""

    CONTINUE = 0
    TEXT = 1
    BINARY = 2
    CLOSE = 8
    PING = 9
    PONG = 10


@dataclass
class WebsocketHeader:
    """Fields of a WebSocket frame header."""

    fin: bool = False
    rsv1: bool = False
    rsv2: bool = False
    rsv3: bool = False
    opcode: int = OpCode.CONTINUE
    mask: bool = False
    payload_len: int = 0
    final_payload_len: int = 0
    mask_key: bytes = b"\x00\x00\x00\x00"
    header_length: int = 0

    @classmethod
    def for_payload(cls, opcode: int, length: int = 0) -> "WebsocketHeader":
        """Create a final, unmasked frame header for a payload of ``length`` bytes."""
        if length < 0:
            raise ValueError("payload length must not be negative")
        if not 0 <= opcode <= 0x0F:
            raise ValueError(f"opcode out of range: {opcode}")
        if length <= MAX_SHORT_PAYLOAD:
            payload_len, extra = length, 0
        elif length <= 0xFFFF:
            payload_len, extra = PAYLOAD_16_MARKER, LONGER_PAYLOAD_SIZE
        else:
            payload_len, extra = PAYLOAD_64_MARKER, LONGEST_PAYLOAD_SIZE
        return cls(
            fin=True,
            opcode=opcode,
            payload_len=payload_len,
            final_payload_len=length,
            header_length=START_SIZE + extra,
        )

    @classmethod
    def parse(cls, data: Buffer) -> Optional["WebsocketHeader"]:
        """Parse a header at the start of ``data``.

        Return None if ``data`` does not yet hold the whole header; the number
        of bytes the header occupies is in ``header_length``.
        """
        raw = bytes(data)
        if len(raw) < START_SIZE:
            return None
        first, second = raw[0], raw[1]
        header = cls(
            fin=bool(first & 0x80),
            rsv1=bool(first & 0x40),
            rsv2=bool(first & 0x20),
            rsv3=bool(first & 0x10),
            opcode=first & 0x0F,
            mask=bool(second & 0x80),
            payload_len=second & 0x7F,
        )
        try:
            header.opcode = OpCode(header.opcode)
        except ValueError:
            pass

        if header.payload_len == PAYLOAD_16_MARKER:
            extra = LONGER_PAYLOAD_SIZE
        elif header.payload_len == PAYLOAD_64_MARKER:
            extra = LONGEST_PAYLOAD_SIZE
        else:
            extra = 0
        if len(raw) < START_SIZE + extra:
            return None
        if extra:
            header.final_payload_len = int.from_bytes(raw[START_SIZE:START_SIZE + extra], "big")
        else:
            header.final_payload_len = header.payload_len

        header.header_length = START_SIZE + extra + (MASK_KEY_SIZE if header.mask else 0)
        if header.header_length > len(raw):
            return None
        if header.mask:
            header.mask_key = raw[header.header_length - MASK_KEY_SIZE:header.header_length]
        return header

    def is_control(self) -> bool:
        """Return whether the opcode is a control opcode (close, ping, pong)."""
        return OpCode.CLOSE <= self.opcode <= OpCode.PONG

    def to_bytes(self) -> bytes:
        """Return the header's wire form (never masked)."""
        length = self.final_payload_len
        first = (
            (0x80 if self.fin else 0)
            | (0x40 if self.rsv1 else 0)
            | (0x20 if self.rsv2 else 0)
            | (0x10 if self.rsv3 else 0)
            | (int(self.opcode) & 0x0F)
        )
        if length <= MAX_SHORT_PAYLOAD:
            return bytes([first, length])
        if length <= 0xFFFF:
            return bytes([first, PAYLOAD_16_MARKER]) + length.to_bytes(LONGER_PAYLOAD_SIZE, "big")
        return bytes([first, PAYLOAD_64_MARKER]) + length.to_bytes(LONGEST_PAYLOAD_SIZE, "big")