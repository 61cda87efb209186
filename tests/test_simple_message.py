import pytest

from tapenet.simple_message import HEADER, SimpleMessage, SimpleMessageBuilder


def test_wire_layout():
    wire = SimpleMessage(7, b"abc").to_bytes()
    assert wire[0] == 7
    assert int.from_bytes(wire[1:HEADER.size], "little") == len(b"abc")
    assert wire[HEADER.size:] == b"abc"


def test_string_content_is_encoded():
    assert SimpleMessage(1, "hi").content == b"hi"


def test_type_out_of_range():
    with pytest.raises(ValueError):
        SimpleMessage(256)
    with pytest.raises(ValueError):
        SimpleMessage(-1)


def test_builder_round_trip():
    message = SimpleMessage(3, b"payload")
    assert SimpleMessageBuilder().feed(message.to_bytes()) == [message]


def test_builder_byte_by_byte():
    message = SimpleMessage(42, b"split across many reads")
    builder = SimpleMessageBuilder()
    received = []
    for byte in message.to_bytes():
        received.extend(builder.feed(bytes([byte])))
    assert received == [message]


def test_builder_many_messages_in_one_read():
    messages = [SimpleMessage(1, b"a"), SimpleMessage(2), SimpleMessage(255, b"xyz")]
    stream = b"".join(m.to_bytes() for m in messages)
    assert SimpleMessageBuilder().feed(stream) == messages


def test_builder_empty_content():
    assert SimpleMessageBuilder().feed(SimpleMessage(9).to_bytes()) == [SimpleMessage(9, b"")]


def test_builder_incomplete_data_waits():
    wire = SimpleMessage(5, b"hello").to_bytes()
    builder = SimpleMessageBuilder()
    assert builder.feed(wire[:4]) == []
    assert builder.feed(wire[4:-1]) == []
    assert builder.feed(wire[-1:]) == [SimpleMessage(5, b"hello")]


def test_data_subset_pieces_join_to_whole():
    message = SimpleMessage(4, b"0123456789")
    whole = message.to_bytes()
    pieces = [message.data_subset(3, offset) for offset in range(0, len(whole), 3)]
    assert b"".join(pieces) == whole


def test_data_subset_rejects_negative():
    with pytest.raises(ValueError):
        SimpleMessage(1).data_subset(1, -1)