import pytest

from tapenet.ws_header import OpCode, WebsocketHeader


def test_short_payload_wire_form():
    data = WebsocketHeader.for_payload(OpCode.TEXT, 5).to_bytes()
    assert data[0] == 128 + OpCode.TEXT
    assert data[1] == 5
    assert len(data) == WebsocketHeader.parse(data).header_length


def test_sixteen_bit_length():
    data = WebsocketHeader.for_payload(OpCode.BINARY, 126).to_bytes()
    assert data[1] == 126
    assert int.from_bytes(data[2:4], "big") == 126


def test_largest_sixteen_bit_length():
    data = WebsocketHeader.for_payload(OpCode.BINARY, 65535).to_bytes()
    assert data[1] == 126
    assert int.from_bytes(data[2:], "big") == 65535


def test_sixty_four_bit_length():
    data = WebsocketHeader.for_payload(OpCode.BINARY, 65536).to_bytes()
    assert data[1] == 127
    assert int.from_bytes(data[2:10], "big") == 65536


@pytest.mark.parametrize("length", [0, 1, 125, 126, 65535, 65536, 2**40])
@pytest.mark.parametrize("opcode", [OpCode.TEXT, OpCode.BINARY, OpCode.PING])
def test_round_trip(length, opcode):
    data = WebsocketHeader.for_payload(opcode, length).to_bytes()
    parsed = WebsocketHeader.parse(data)
    assert parsed.final_payload_len == length
    assert parsed.opcode == opcode
    assert parsed.fin is True
    assert parsed.mask is False
    assert parsed.header_length == len(data)


def test_parse_ignores_trailing_payload():
    data = WebsocketHeader.for_payload(OpCode.TEXT, 3).to_bytes()
    parsed = WebsocketHeader.parse(data + b"abc")
    assert parsed.header_length == len(data)
    assert parsed.final_payload_len == 3


def test_parse_incomplete_returns_none():
    data = WebsocketHeader.for_payload(OpCode.TEXT, 300).to_bytes()
    assert WebsocketHeader.parse(data[:1]) is None
    assert WebsocketHeader.parse(data[:3]) is None
    assert WebsocketHeader.parse(b"") is None


def test_parse_masked_frame():
    raw = bytes([0x81, 0x80 | 3]) + b"abcd" + b"xyz"
    parsed = WebsocketHeader.parse(raw)
    assert parsed.mask is True
    assert parsed.mask_key == b"abcd"
    assert parsed.header_length == 6
    assert parsed.final_payload_len == 3


def test_masked_frame_missing_key_is_incomplete():
    assert WebsocketHeader.parse(bytes([0x81, 0x80 | 3]) + b"ab") is None


def test_parse_reserved_bits_and_no_fin():
    parsed = WebsocketHeader.parse(bytes([0x70 | OpCode.TEXT, 0]))
    assert parsed.fin is False
    assert (parsed.rsv1, parsed.rsv2, parsed.rsv3) == (True, True, True)
    assert parsed.opcode == OpCode.TEXT


@pytest.mark.parametrize(
    "opcode, expected",
    [
        (OpCode.CONTINUE, False),
        (OpCode.TEXT, False),
        (OpCode.BINARY, False),
        (OpCode.CLOSE, True),
        (OpCode.PING, True),
        (OpCode.PONG, True),
    ],
)
def test_is_control(opcode, expected):
    assert WebsocketHeader.for_payload(opcode).is_control() is expected


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        WebsocketHeader.for_payload(OpCode.TEXT, -1)