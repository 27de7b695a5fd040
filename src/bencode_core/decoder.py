"""Decoder: recursive-descent parser from bencoded bytes to Value trees."""

from __future__ import annotations

import logging
from typing import BinaryIO, Iterator, Union

from .cursor import ByteCursor
from .errors import (
    DecodeError,
    IntegerOverflow,
    NestingTooDeep,
    UnexpectedCharacter,
    UnexpectedEndOfInput,
)
from .values import INT64_MAX, Value, VDict, VInteger, VList, VString

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100

_INT = ord("i")
_LIST = ord("l")
_DICT = ord("d")
_END = ord("e")
_COLON = ord(":")
_MINUS = ord("-")
_ZERO = ord("0")
_NINE = ord("9")

Source = Union[ByteCursor, BinaryIO, bytes, bytearray, memoryview]


def _is_digit(byte: int) -> bool:
    return _ZERO <= byte <= _NINE


def _as_cursor(source: Source) -> ByteCursor:
    if isinstance(source, ByteCursor):
        return source
    if isinstance(source, (bytes, bytearray, memoryview)):
        return ByteCursor.from_bytes(source)
    if isinstance(source, str):
        raise TypeError("cannot decode str, encode it to bytes first")
    return ByteCursor(source)


# ---------------------------------------------------------------------------
# Decoder
# ---------------------------------------------------------------------------

class Decoder:
    """Configurable bencode parser.

    - ``strict``: reject integers with leading zeros (``i03e``), negative
      zero (``i-0e``) and string lengths with leading zeros (``03:abc``).
    - ``max_depth``: maximum nesting of lists and dictionaries.

    Integers outside the signed 64-bit range are always rejected.
    """

    def __init__(self, *, strict: bool = True, max_depth: int = DEFAULT_MAX_DEPTH) -> None:
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        self.strict = strict
        self.max_depth = max_depth

    def decode(self, data: bytes | bytearray | memoryview) -> Value:
        """Decode the value at the start of *data*; trailing bytes are ignored."""
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"expected bytes, got {type(data).__name__}")
        return self.read(ByteCursor.from_bytes(data))

    def read(self, source: Source) -> Value:
        """Read one value from *source*, leaving whatever follows unread."""
        cursor = _as_cursor(source)
        start = cursor.position
        try:
            return self._read_value(cursor, 0)
        except DecodeError as exc:
            logger.debug("decode failed for value starting at byte %d: %s", start, exc)
            raise

    def iter_decode(self, source: Source) -> Iterator[Value]:
        """Yield consecutive values from *source* until it is exhausted."""
        cursor = _as_cursor(source)
        while not cursor.at_end():
            yield self.read(cursor)

    # -- Productions ----------------------------------------------------

    def _read_value(self, cursor: ByteCursor, depth: int) -> Value:
        byte = cursor.peek()
        if byte is None:
            raise UnexpectedEndOfInput("the first byte of an object", cursor.position)
        if byte == _INT:
            cursor.advance()
            return VInteger(self._read_integer(cursor))
        if byte == _LIST:
            self._enter(cursor, depth)
            cursor.advance()
            return VList(self._read_list(cursor, depth + 1))
        if byte == _DICT:
            self._enter(cursor, depth)
            cursor.advance()
            return VDict(self._read_dict(cursor, depth + 1))
        if _is_digit(byte):
            return VString(self._read_string(cursor))
        raise UnexpectedCharacter(byte, "instead of the first byte of an object", cursor.position)

    def _enter(self, cursor: ByteCursor, depth: int) -> None:
        if depth >= self.max_depth:
            raise NestingTooDeep(
                f"nesting deeper than {self.max_depth} levels", cursor.position
            )

    def _read_integer(self, cursor: ByteCursor) -> int:
        """Parse ``[-]digits e`` after the leading ``i`` has been consumed."""
        start = cursor.position - 1
        negative = False
        if cursor.peek() == _MINUS:
            cursor.advance()
            negative = True

        limit = INT64_MAX + 1 if negative else INT64_MAX
        result = 0
        ndigits = 0
        while True:
            pos = cursor.position
            byte = cursor.advance("an integer")
            if byte == _END and ndigits:
                break
            if not _is_digit(byte):
                raise UnexpectedCharacter(byte, "while reading an integer", pos)
            if self.strict and ndigits and result == 0:
                raise UnexpectedCharacter(byte, "after a leading zero in an integer", pos)
            if self.strict and negative and not ndigits and byte == _ZERO:
                raise UnexpectedCharacter(byte, "at the start of a negative integer", pos)
            result = result * 10 + (byte - _ZERO)
            ndigits += 1
            if result > limit:
                raise IntegerOverflow("integer does not fit in 64 bits", start)

        return -result if negative else result

    def _read_string(self, cursor: ByteCursor) -> bytes:
        """Parse ``length:bytes``; the cursor is on the first length digit."""
        length = 0
        ndigits = 0
        while True:
            pos = cursor.position
            byte = cursor.advance("a string length")
            if byte == _COLON and ndigits:
                break
            if not _is_digit(byte):
                raise UnexpectedCharacter(byte, "while reading a string length", pos)
            if self.strict and ndigits and length == 0:
                raise UnexpectedCharacter(byte, "after a leading zero in a string length", pos)
            length = length * 10 + (byte - _ZERO)
            ndigits += 1
        return cursor.take(length, f"a string of {length} bytes")

    def _read_list(self, cursor: ByteCursor, depth: int) -> list[Value]:
        items: list[Value] = []
        while True:
            byte = cursor.peek()
            if byte is None:
                raise UnexpectedEndOfInput("a list", cursor.position)
            if byte == _END:
                cursor.advance()
                return items
            items.append(self._read_value(cursor, depth))

    def _read_dict(self, cursor: ByteCursor, depth: int) -> dict[bytes, Value]:
        # Key order is not checked; a repeated key overwrites the earlier one.
        entries: dict[bytes, Value] = {}
        while True:
            byte = cursor.peek()
            if byte is None:
                raise UnexpectedEndOfInput("a dictionary", cursor.position)
            if byte == _END:
                cursor.advance()
                return entries
            if not _is_digit(byte):
                raise UnexpectedCharacter(
                    byte, "instead of the first byte of a dictionary key", cursor.position
                )
            key = self._read_string(cursor)
            entries[key] = self._read_value(cursor, depth)


# ---------------------------------------------------------------------------
# Module-level entry points
# ---------------------------------------------------------------------------

def decode(
    data: bytes | bytearray | memoryview,
    *,
    strict: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Value:
    """Decode the first value in *data*.

    Bytes after the first complete value are ignored::

        decode(b"i1234eaaaa")   # → VInteger(1234)
    """
    return Decoder(strict=strict, max_depth=max_depth).decode(data)


def read(
    source: Source,
    *,
    strict: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Value:
    """Read one value from a ByteCursor or binary stream.

    The stream is left positioned immediately after the value.
    """
    return Decoder(strict=strict, max_depth=max_depth).read(source)


def iter_decode(
    source: Source,
    *,
    strict: bool = True,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Iterator[Value]:
    """Yield every value of a buffer or stream holding concatenated values."""
    return Decoder(strict=strict, max_depth=max_depth).iter_decode(source)
