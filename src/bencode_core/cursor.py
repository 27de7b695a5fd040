"""ByteCursor: a peekable byte source with one byte of lookahead."""

from __future__ import annotations

import io
from typing import BinaryIO

from .errors import DecodeIOError, UnexpectedEndOfInput

# Largest single read() request issued by take().
_CHUNK_SIZE = 1 << 16


class ByteCursor:
    """Reads a binary stream one byte at a time with single-byte lookahead.

    At most one byte is held back in ``_pending``; after a complete value has
    been read nothing is held back, so the wrapped stream is positioned
    immediately after that value.
    """

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        self._pending: int | None = None
        self._eof = False
        self.position = 0

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> ByteCursor:
        return cls(io.BytesIO(bytes(data)))

    def _fetch(self, n: int) -> bytes:
        try:
            chunk = self._stream.read(n)
        except OSError as exc:
            raise DecodeIOError(exc, self.position) from exc
        if isinstance(chunk, str):
            raise TypeError("cannot decode a text stream, open it in binary mode")
        if not chunk:
            self._eof = True
        return chunk

    def peek(self) -> int | None:
        """Next byte without consuming it, or ``None`` at end of input."""
        if self._pending is None and not self._eof:
            chunk = self._fetch(1)
            if chunk:
                self._pending = chunk[0]
        return self._pending

    def at_end(self) -> bool:
        return self.peek() is None

    def advance(self, context: str = "a value") -> int:
        """Consume one byte; *context* names what was being read."""
        byte = self.peek()
        if byte is None:
            raise UnexpectedEndOfInput(context, self.position)
        self._pending = None
        self.position += 1
        return byte

    def take(self, n: int, context: str = "a string") -> bytes:
        """Consume exactly *n* bytes."""
        parts: list[bytes] = []
        remaining = n
        if remaining and self._pending is not None:
            parts.append(bytes((self._pending,)))
            self._pending = None
            remaining -= 1
        while remaining:
            chunk = self._fetch(min(remaining, _CHUNK_SIZE)) if not self._eof else b""
            if not chunk:
                self.position += n - remaining
                raise UnexpectedEndOfInput(context, self.position)
            parts.append(chunk)
            remaining -= len(chunk)
        self.position += n
        return b"".join(parts)
