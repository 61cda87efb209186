"""Incremental WebSocket frame parsing and message assembly."""

from __future__ import annotations

from dataclasses import replace
from itertools import cycle
from typing import List, Optional, Union

from tapenet.ws_header import MASK_KEY_SIZE, OpCode, WebsocketHeader
from tapenet.ws_message import FragmentAssembler, WebsocketMessage

__all__ = ["WebsocketParseError", "WebsocketMessageBuilder", "apply_mask"]

Buffer = Union[bytes, bytearray, memoryview]


class WebsocketParseError(ValueError):
    """Raised when incoming WebSocket frames break the framing rules."""


def apply_mask(payload: Buffer, mask_key: Buffer) -> bytes:
    """XOR ``payload`` with the 4-byte ``mask_key``; applying it twice restores the input."""
    key = bytes(mask_key)
    if len(key) != MASK_KEY_SIZE:
        raise ValueError(f"mask key must be {MASK_KEY_SIZE} bytes, got {len(key)}")
    return bytes(byte ^ k for byte, k in zip(bytes(payload), cycle(key)))


class WebsocketMessageBuilder:
    """Turn a stream of received bytes into complete :class:`WebsocketMessage` objects.

    Masked payloads are unmasked. Fragmented data messages are joined and
    emitted once their final fragment arrives; control frames that arrive
    between fragments are emitted on their own.
    """

    def __init__(self) -> None:
        self._buffer = bytearray()
        self._header: Optional[WebsocketHeader] = None
        self._assembler: Optional[FragmentAssembler] = None
        self._failed = False

    def feed(self, data: Buffer) -> List[WebsocketMessage]:
        """Add received bytes; return the messages completed by them."""
        if self._failed:
            raise WebsocketParseError("builder failed on earlier data")
        self._buffer += data
        messages: List[WebsocketMessage] = []
        try:
            while True:
                if self._header is None:
                    header = WebsocketHeader.parse(self._buffer)
                    if header is None:
                        break
                    del self._buffer[:header.header_length]
                    self._header = header
                size = self._header.final_payload_len
                if len(self._buffer) < size:
                    break
                payload = bytes(self._buffer[:size])
                del self._buffer[:size]
                header, self._header = self._header, None
                if header.mask:
                    payload = apply_mask(payload, header.mask_key)
                message = self._complete_frame(header, payload)
                if message is not None:
                    messages.append(message)
        except WebsocketParseError:
            self._failed = True
            raise
        return messages

    def _complete_frame(self, header: WebsocketHeader, payload: bytes) -> Optional[WebsocketMessage]:
        if header.is_control():
            if not header.fin:
                raise WebsocketParseError("control frames must not be fragmented")
            return WebsocketMessage(header, payload)

        is_continuation = header.opcode == OpCode.CONTINUE
        if self._assembler is None:
            if is_continuation:
                raise WebsocketParseError("continuation frame without a message to continue")
            if not header.fin:
                self._assembler = FragmentAssembler(header.opcode, payload)
                return None
            return WebsocketMessage(header, payload)

        if not is_continuation:
            raise WebsocketParseError("new data frame while a fragmented message is open")
        self._assembler.add(payload)
        if not header.fin:
            return None
        joined = self._assembler.payload
        opcode = self._assembler.opcode
        self._assembler = None
        full_header = replace(header, opcode=opcode, final_payload_len=len(joined))
        return WebsocketMessage(full_header, joined)