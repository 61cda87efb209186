import pytest

from tapenet.ws_header import OpCode, WebsocketHeader
from tapenet.ws_message import FragmentAssembler, WebsocketMessage


def _split(wire):
    header = WebsocketHeader.parse(wire)
    return header, wire[header.header_length:]


def test_text_round_trip():
    header, payload = _split(WebsocketMessage.text("hello").to_bytes())
    assert header.opcode == OpCode.TEXT
    assert header.fin is True
    assert payload == b"hello"
    assert header.final_payload_len == len(b"hello")


def test_text_length_counts_bytes():
    text = "zażółć"
    message = WebsocketMessage.text(text)
    assert message.header.final_payload_len == len(text.encode("utf-8"))
    assert message.payload.decode("utf-8") == text


def test_long_text_round_trip():
    text = "x" * 70000
    header, payload = _split(WebsocketMessage.text(text).to_bytes())
    assert header.payload_len == 127
    assert payload == text.encode()


def test_ping_wire_form():
    assert WebsocketMessage.ping().to_bytes() == bytes([128 + OpCode.PING, 0])


def test_close_message():
    message = WebsocketMessage.close()
    assert message.header.opcode == OpCode.CLOSE
    assert message.header.is_control() is True
    assert message.payload == b""


def test_pong_echoes_data():
    message = WebsocketMessage.pong(b"abc")
    header, payload = _split(message.to_bytes())
    assert header.opcode == OpCode.PONG
    assert payload == b"abc"
    assert header.final_payload_len == len(b"abc")


def test_data_subset_pieces_join_to_whole():
    message = WebsocketMessage.text("some message text")
    whole = message.to_bytes()
    pieces = [message.data_subset(4, offset) for offset in range(0, len(whole), 4)]
    assert b"".join(pieces) == whole
    assert message.data_subset(4, len(whole)) == b""


def test_data_subset_rejects_negative():
    with pytest.raises(ValueError):
        WebsocketMessage.ping().data_subset(-1, 0)


def test_fragment_assembler_collects_in_order():
    assembler = FragmentAssembler(OpCode.BINARY, b"ab")
    assembler.add(b"cd")
    assembler.add(bytearray(b"ef"))
    assert assembler.payload == b"abcdef"
    assert assembler.opcode == OpCode.BINARY


def test_fragment_assembler_starts_with_first_fragment():
    assembler = FragmentAssembler(OpCode.TEXT, b"first")
    assert assembler.payload == b"first"