import pytest

from tapenet.http_parser import (
    MAX_CHUNK_SIZE,
    BuilderState,
    HttpMessageBuilder,
    HttpParseError,
    parse_chunk_header,
    parse_content_header,
)
from tapenet.http_types import HeaderField, Method

POST = b"POST /upload HTTP/1.1\r\nContent-Length: 5\r\nHost: example.com\r\n\r\nhello"
CHUNKED = (
    b"HTTP/1.1 200 OK\r\nTransfer-Encoding: chunked\r\n\r\n"
    b"5\r\nhello\r\n6\r\n world\r\n0\r\n\r\n"
)


def test_parse_content_header_incomplete_returns_none():
    assert parse_content_header(b"GET / HTTP/1.1\r\nHost: x\r\n") is None


def test_parse_content_header_consumes_header_block():
    head = b"GET /index.html HTTP/1.1\r\nHost: example.com\r\n\r\n"
    header, consumed, length = parse_content_header(head + b"rest")
    assert consumed == len(head)
    assert length == 0
    assert header.method is Method.GET
    assert header.request_target == "/index.html"


def test_parse_content_header_reads_length():
    header, consumed, length = parse_content_header(POST)
    assert length == 5
    assert POST[consumed:] == b"hello"
    assert header.get_field(HeaderField.HOST) == "example.com"


def test_parse_content_header_bad_length():
    with pytest.raises(HttpParseError):
        parse_content_header(b"GET / HTTP/1.1\r\nContent-Length: abc\r\n\r\n")


def test_parse_content_header_bad_start_line():
    with pytest.raises(HttpParseError):
        parse_content_header(b"NOPE\r\n\r\n")


def test_parse_chunk_header_values():
    assert parse_chunk_header(b"FFFF\r\n") == (MAX_CHUNK_SIZE, 6)
    assert parse_chunk_header(b"0\r\n") == (0, 3)
    assert parse_chunk_header(b"1a") is None


def test_parse_chunk_header_too_large():
    with pytest.raises(HttpParseError):
        parse_chunk_header(b"10000\r\n")


def test_parse_chunk_header_not_hex():
    with pytest.raises(HttpParseError):
        parse_chunk_header(b"zz\r\n")


def test_builder_content_length_message():
    builder = HttpMessageBuilder()
    messages = builder.feed(POST)
    assert len(messages) == 1
    assert messages[0].body == b"hello"
    assert messages[0].header.method is Method.POST
    assert builder.state is BuilderState.MESSAGE_COMPLETED


def test_builder_byte_by_byte_matches_whole():
    builder = HttpMessageBuilder()
    collected = []
    for i in range(len(POST)):
        collected.extend(builder.feed(POST[i:i + 1]))
    assert [m.body for m in collected] == [b"hello"]
    assert collected[0].to_bytes() == HttpMessageBuilder().feed(POST)[0].to_bytes()


def test_builder_partial_body_state():
    builder = HttpMessageBuilder()
    assert builder.feed(POST[:-2]) == []
    assert builder.state is BuilderState.RECEIVING_MESSAGE_BODY
    assert [m.body for m in builder.feed(POST[-2:])] == [b"hello"]


def test_builder_awaiting_header_state():
    builder = HttpMessageBuilder()
    assert builder.feed(b"GET / HT") == []
    assert builder.state is BuilderState.AWAITING_HEADER


def test_builder_message_without_length_has_empty_body():
    builder = HttpMessageBuilder()
    messages = builder.feed(b"GET / HTTP/1.1\r\nHost: example.com\r\n\r\n")
    assert [m.body for m in messages] == [b""]


def test_builder_pipelined_messages():
    builder = HttpMessageBuilder()
    messages = builder.feed(POST + POST)
    assert [m.body for m in messages] == [b"hello", b"hello"]


def test_builder_chunked_message():
    builder = HttpMessageBuilder()
    messages = builder.feed(CHUNKED)
    assert [m.body for m in messages] == [b"hello world"]
    assert messages[0].header.status_code == 200
    assert builder.state is BuilderState.CHUNK_MESSAGE_COMPLETED


def test_builder_chunked_split_and_states():
    builder = HttpMessageBuilder()
    head_end = CHUNKED.index(b"\r\n\r\n") + 4
    assert builder.feed(CHUNKED[:head_end]) == []
    assert builder.state is BuilderState.RECEIVING_CHUNKED
    first_chunk_end = CHUNKED.index(b"6\r\n")
    assert builder.feed(CHUNKED[head_end:first_chunk_end]) == []
    assert builder.state is BuilderState.CHUNK_SEGMENT_COMPLETED
    messages = builder.feed(CHUNKED[first_chunk_end:])
    assert [m.body for m in messages] == [b"hello world"]


def test_builder_chunked_followed_by_next_message():
    builder = HttpMessageBuilder()
    messages = builder.feed(CHUNKED + POST)
    assert [m.body for m in messages] == [b"hello world", b"hello"]


def test_builder_unknown_transfer_encoding_fails():
    builder = HttpMessageBuilder()
    with pytest.raises(HttpParseError):
        builder.feed(b"HTTP/1.1 200 OK\r\nTransfer-Encoding: gzip\r\n\r\n")
    assert builder.state is BuilderState.HEADER_PARSE_FAILED


def test_builder_stays_failed():
    builder = HttpMessageBuilder()
    with pytest.raises(HttpParseError):
        builder.feed(b"BOGUS LINE HERE\r\n\r\n")
    with pytest.raises(HttpParseError):
        builder.feed(POST)


def test_builder_chunk_too_large_fails():
    builder = HttpMessageBuilder()
    with pytest.raises(HttpParseError):
        builder.feed(b"HTTP/1.1 200 OK\r\nTransfer-Encoding: chunked\r\n\r\n10000\r\n")
    assert builder.state is BuilderState.HEADER_PARSE_FAILED