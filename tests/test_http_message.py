import pytest

from tapenet.headers import HttpHeader
from tapenet.http_message import HttpMessage
from tapenet.http_types import HeaderField, Method


def test_response_sets_content_length():
    msg = HttpMessage.response(200, "hello")
    assert msg.header.status_code == 200
    assert msg.header.get_field(HeaderField.CONTENT_LENGTH) == str(len("hello"))
    assert msg.body == b"hello"


def test_empty_response_has_zero_length():
    msg = HttpMessage.response(500)
    assert msg.header.get_field(HeaderField.CONTENT_LENGTH) == "0"
    assert msg.to_bytes().startswith(b"HTTP/1.1 500 Internal Server Error\r\n")


def test_request_without_body_has_no_length():
    msg = HttpMessage.request(Method.GET, "/")
    assert not msg.header.has_field(HeaderField.CONTENT_LENGTH)
    assert msg.to_bytes() == b"GET / HTTP/1.1\r\n\r\n"


def test_request_with_body_uses_byte_length():
    body = "zażółć"
    msg = HttpMessage.request(Method.POST, "/x", body)
    assert msg.header.get_field(HeaderField.CONTENT_LENGTH) == str(len(body.encode("utf-8")))


def test_wire_form_parses_back():
    msg = HttpMessage.response(404, b"missing")
    wire = msg.to_bytes()
    head, _, body = wire.partition(b"\r\n\r\n")
    parsed = HttpHeader.parse(head.decode())
    assert parsed.status_code == 404
    assert body == b"missing"
    assert parsed.expected_data_size == len(b"missing")


def test_data_subset_covers_wire_form():
    msg = HttpMessage.response(200, b"x" * 50)
    wire = msg.to_bytes()
    pieces = [msg.data_subset(7, offset) for offset in range(0, len(wire), 7)]
    assert b"".join(pieces) == wire
    assert all(len(piece) <= 7 for piece in pieces)
    assert msg.data_subset(10, len(wire)) == b""


def test_data_subset_rejects_negative():
    with pytest.raises(ValueError):
        HttpMessage.response(200).data_subset(-1, 0)


def test_from_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_bytes(b"<p>hi</p>")
    msg = HttpMessage.from_file(path)
    assert msg.header.status_code == 200
    assert msg.header.get_field(HeaderField.CONTENT_TYPE) == "text/html"
    assert msg.header.get_field(HeaderField.CONTENT_LENGTH) == str(len(b"<p>hi</p>"))
    assert msg.to_bytes().endswith(b"<p>hi</p>")


def test_from_missing_file(tmp_path):
    with pytest.raises(OSError):
        HttpMessage.from_file(tmp_path / "absent.txt")