"""Bounded JSON generation into a caller-owned buffer.

The buffer is never grown. Every emission is checked against the declared
capacity first, with one byte kept back for the terminating NUL, so a
too-small buffer is reported as a ``0`` result and nothing is ever written
at or beyond ``capacity``.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from mtojson.types import Array, JsonType, Member

# Containers, the top-level object included
MAX_DEPTH = 128

_ESCAPE_RE = re.compile(r'[\x00-\x1f"\\]')
_ESCAPE_MAP = {
    '"': '\\"',
    "\\": "\\\\",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


class DepthLimitError(ValueError):
    """Raised when a member tree nests deeper than MAX_DEPTH (e.g. a cycle)."""


class _BufferFull(Exception):
    pass


def _replace(match: re.Match) -> str:
    ch = match.group(0)
    return _ESCAPE_MAP.get(ch) or f"\\u{ord(ch):04x}"


def _escape(text: str) -> str:
    return _ESCAPE_RE.sub(_replace, text)


class _BoundedWriter:
    """Writes into ``out[0:capacity - 1]``; the last byte is the terminator's."""

    def __init__(self, out, capacity: int) -> None:
        self._out = out
        self._limit = capacity - 1
        self.pos = 0

    def write(self, data: bytes) -> None:
        end = self.pos + len(data)
        if end > self._limit:
            raise _BufferFull()
        self._out[self.pos:end] = data
        self.pos = end

    def terminate(self) -> None:
        self._out[self.pos:self.pos + 1] = b"\0"


class _Counter:
    """Counts what would be written, without a buffer."""

    def __init__(self) -> None:
        self.pos = 0

    def write(self, data: bytes) -> None:
        self.pos += len(data)


class _Emitter:
    def __init__(self, sink) -> None:
        self._sink = sink
        self._depth = 0

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > MAX_DEPTH:
            raise DepthLimitError(f"nesting exceeds {MAX_DEPTH} levels")

    def _string(self, text: str) -> None:
        self._sink.write(b'"' + _escape(text).encode("utf-8") + b'"')

    def object(self, members: Sequence[Member]) -> None:
        self._enter()
        self._sink.write(b"{")
        for i, member in enumerate(members):
            if i:
                self._sink.write(b", ")
            self._string(member.key)
            self._sink.write(b": ")
            self.value(member.value, member.type)
        self._sink.write(b"}")
        self._depth -= 1

    def array(self, array: Array) -> None:
        self._enter()
        self._sink.write(b"[")
        for i, item in enumerate(array.items()):
            if i:
                self._sink.write(b", ")
            self.value(item, array.type)
        self._sink.write(b"]")
        self._depth -= 1

    def value(self, value, type: JsonType) -> None:
        if type is JsonType.OBJECT:
            self.object(value)
        elif type is JsonType.ARRAY:
            self.array(value)
        elif type is JsonType.STRING:
            self._string(value)
        elif type is JsonType.BOOLEAN:
            self._sink.write(b"true" if value else b"false")
        elif type in (JsonType.INTEGER, JsonType.UINTEGER):
            self._sink.write(b"%d" % value)
        elif type is JsonType.VALUE:
            self._sink.write(value.encode("utf-8"))
        else:
            raise TypeError(f"unknown value type: {type!r}")


def generate_json(out, members: Sequence[Member], capacity: int | None = None) -> int:
    """Render *members* as a JSON object into *out*, NUL-terminated.

    *out* is any writable bytes-like buffer. *capacity* (default ``len(out)``)
    is the number of bytes that may be used, terminator included; it may be
    smaller than the buffer but never larger.

    Returns the length of the document without the terminator, or ``0`` when
    the document does not fit. On ``0`` the buffer may hold a truncated
    document, but no byte at index ``capacity`` or above has been touched.
    Raises DepthLimitError when the tree nests deeper than MAX_DEPTH.
    """
    with memoryview(out) as raw, raw.cast("B") as view:
        if capacity is None:
            capacity = len(view)
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        if capacity > len(view):
            raise ValueError(
                f"capacity {capacity} exceeds the {len(view)}-byte buffer"
            )

        writer = _BoundedWriter(view, capacity)
        try:
            _Emitter(writer).object(members)
        except _BufferFull:
            return 0
        writer.terminate()
        return writer.pos


def required_capacity(members: Sequence[Member]) -> int:
    """Exact capacity generate_json needs for *members*, terminator included."""
    counter = _Counter()
    _Emitter(counter).object(members)
    return counter.pos + 1


def render(members: Sequence[Member]) -> bytes:
    """Render *members* into a freshly sized buffer and return the document."""
    buf = bytearray(required_capacity(members))
    length = generate_json(buf, members)
    return bytes(buf[:length])
