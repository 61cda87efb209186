"""HTTP message header: parsing, field storage and serialisation."""

from __future__ import annotations

import re
from typing import Dict, Optional, Union

from tapenet.http_types import (
    STATUS_REASONS,
    HeaderField,
    Method,
    Protocol,
    field_from_string,
    field_to_string,
    method_from_string,
    method_to_string,
    protocol_from_string,
    protocol_to_string,
)

__all__ = ["INVALID_HEADER_STR", "HeaderParseError", "HttpHeader"]

INVALID_HEADER_STR = "Invalid Header"

FieldName = Union[HeaderField, str]

_LEADING_INT = re.compile(r"\s*[+-]?\d+")


class HeaderParseError(ValueError):
    """Raised when a header block cannot be parsed."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def _split(text: str, separator: str, maxsplit: int = -1) -> list:
    return [part for part in text.split(separator, maxsplit) if part]


class HttpHeader:
    """Start line and fields of an HTTP request or response."""

    def __init__(
        self,
        protocol: Protocol = Protocol.UNKNOWN_TYPE,
        status_code: int = 0,
        method: Method = Method.UNKNOWN_TYPE,
        request_target: str = "",
    ) -> None:
        self.protocol = Protocol(protocol)
        self.status_code = status_code
        self.method = Method(method)
        self.request_target = request_target
        self.was_received = False
        self.message_completed = False
        self.loaded_data_size = 0
        self.expected_data_size = 0
        self._fields: Dict[HeaderField, str] = {}
        self._unknown: Dict[str, str] = {}

    @classmethod
    def response(cls, protocol: Protocol, status_code: int) -> "HttpHeader":
        """Create a response header with the given status code."""
        return cls(protocol=protocol, status_code=status_code)

    @classmethod
    def request(cls, protocol: Protocol, method: Method, request_target: str) -> "HttpHeader":
        """Create a request header for ``method`` on ``request_target``."""
        return cls(protocol=protocol, method=method, request_target=request_target)

    @classmethod
    def parse(cls, text: str) -> "HttpHeader":
        """Parse a header block (without the terminating blank line)."""
        lines = _split(text, "\r\n")
        if not lines:
            raise HeaderParseError("empty header")
        header = cls()
        header._parse_start_line(lines[0])
        for line in lines[1:]:
            parts = line.split(":", 1)
            if len(parts) != 2:
                continue
            key, value = parts[0].strip(), parts[1].strip()
            try:
                header.set_field(field_from_string(key), value)
            except ValueError:
                header.set_field(key, value)
        length = header.get_field(HeaderField.CONTENT_LENGTH)
        if length is not None:
            try:
                header.expected_data_size = int(length)
            except ValueError:
                pass
        return header

    def _parse_start_line(self, line: str) -> None:
        elements = _split(line, " ")
        if len(elements) < 2:
            raise HeaderParseError(f"malformed start line: {line!r}")
        try:
            self.protocol = protocol_from_string(elements[0])
        except ValueError:
            pass
        else:
            self.status_code = _atoi(elements[1])
            if self.status_code not in STATUS_REASONS:
                raise HeaderParseError(f"unknown status code in: {line!r}")
            return
        try:
            self.method = method_from_string(elements[0])
        except ValueError:
            raise HeaderParseError(f"unknown message type: {line!r}") from None
        if len(elements) != 3:
            raise HeaderParseError(f"malformed request line: {line!r}")
        try:
            self.protocol = protocol_from_string(elements[2])
        except ValueError:
            raise HeaderParseError(f"unknown protocol in: {line!r}") from None
        self.request_target = elements[1]

    def set_field(self, name: FieldName, value: str) -> None:
        """Set a field; a string name is stored as a non-standard field."""
        if isinstance(name, str):
            self._unknown[name] = value
        else:
            self._fields[HeaderField(name)] = value

    def remove_field(self, name: FieldName) -> None:
        """Remove a field if it is present."""
        if isinstance(name, str):
            self._unknown.pop(name, None)
        else:
            self._fields.pop(HeaderField(name), None)

    def has_field(self, name: FieldName) -> bool:
        """Return whether the field is set."""
        if isinstance(name, str):
            return name in self._unknown
        return HeaderField(name) in self._fields

    def get_field(self, name: FieldName) -> Optional[str]:
        """Return the field's value, or None if it is not set."""
        if isinstance(name, str):
            return self._unknown.get(name)
        return self._fields.get(HeaderField(name))

    def unknown_fields(self) -> Dict[str, str]:
        """Return the non-standard fields, ordered by name."""
        return dict(sorted(self._unknown.items()))

    def is_valid(self) -> bool:
        """Return whether the header has a protocol and, if any, a known status."""
        if self.protocol is Protocol.UNKNOWN_TYPE:
            return False
        return not (self.status_code > 0 and self.status_code not in STATUS_REASONS)

    def to_string(self) -> str:
        """Serialise the header, including the terminating blank line."""
        if self.method is not Method.UNKNOWN_TYPE:
            lines = [
                f"{method_to_string(self.method)} {self.request_target} "
                f"{protocol_to_string(self.protocol)}"
            ]
        elif self.status_code in STATUS_REASONS:
            lines = [
                f"{protocol_to_string(self.protocol)} {self.status_code} "
                f"{STATUS_REASONS[self.status_code]}"
            ]
        else:
            return INVALID_HEADER_STR
        lines.extend(
            f"{field_to_string(field)}: {value}" for field, value in sorted(self._fields.items())
        )
        lines.extend(f"{key}: {value}" for key, value in sorted(self._unknown.items()))
        return "".join(line + "\r\n" for line in lines) + "\r\n"

    def __repr__(self) -> str:
        return (
            f"HttpHeader(protocol={self.protocol.name}, status_code={self.status_code}, "
            f"method={self.method.name}, request_target={self.request_target!r})"
        )