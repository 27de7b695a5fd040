"""Exception hierarchy for bencode_core."""

from __future__ import annotations


class BencodeError(Exception):
    """Base class for every error raised by bencode_core."""


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

class DecodeError(BencodeError):
    """The input could not be decoded into a value.

    ``position`` is the byte offset at which the problem was detected.
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        self.message = message
        self.position = position
        if position is not None:
            message = f"{message} (at byte {position})"
        super().__init__(message)


class UnexpectedEndOfInput(DecodeError):
    """Input ended where more bytes were required."""

    def __init__(self, context: str, position: int | None = None) -> None:
        self.context = context
        super().__init__(f"unexpected end of input while reading {context}", position)


class DecodeIOError(DecodeError):
    """The underlying byte source failed."""

    def __init__(self, cause: OSError, position: int | None = None) -> None:
        self.cause = cause
        super().__init__(f"I/O error: {cause}", position)


class UnexpectedCharacter(DecodeError):
    """A byte that violates the grammar at the current position."""

    def __init__(self, byte: int, context: str, position: int | None = None) -> None:
        self.byte = byte
        self.context = context
        super().__init__(f"unexpected {_show_byte(byte)} {context}", position)


class IntegerOverflow(DecodeError):
    """An integer literal does not fit in a signed 64-bit integer."""


class NestingTooDeep(DecodeError):
    """Lists/dictionaries are nested deeper than the decoder allows."""


def _show_byte(byte: int) -> str:
    if 0x20 <= byte < 0x7F:
        return f"{chr(byte)!r}"
    return f"byte 0x{byte:02x}"


# ---------------------------------------------------------------------------
# Typed accessors
# ---------------------------------------------------------------------------

class HelperError(BencodeError):
    """A dictionary entry could not be extracted as the requested type."""

    def __init__(self, message: str, key: str) -> None:
        self.key = key
        super().__init__(message)


class MissingKey(HelperError):
    def __init__(self, key: str) -> None:
        super().__init__(f"missing key {key!r}", key)


class BadType(HelperError):
    def __init__(self, key: str, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"expected {expected} for key {key!r}, got {actual!r}", key)


class MalformedText(HelperError):
    """A byte-string entry is not valid UTF-8."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"value for key {key!r} is not valid UTF-8: {reason}", key)
