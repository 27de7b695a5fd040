"""bencode-dump: decode bencoded files and pretty-print their values.

Also usable as ``python -m bencode_core.cli``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .cursor import ByteCursor
from .decoder import Decoder
from .encoder import encode
from .errors import BencodeError
from .values import Value, VDict, VInteger, VList, VString

logger = logging.getLogger(__name__)

# Byte-strings longer than this are summarised unless they are plain text.
MAX_INLINE_BYTES = 64


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _is_text(raw: bytes) -> bool:
    return all(0x20 <= b < 0x7F for b in raw)


def _fmt_bytes(raw: bytes) -> str:
    if len(raw) <= MAX_INLINE_BYTES or _is_text(raw):
        return repr(raw)
    return f"<{len(raw)} bytes>"


def _fmt_inline(value: Value) -> str:
    """Format a scalar or an empty container on one line."""
    if isinstance(value, VString):
        return _fmt_bytes(value.value)
    if isinstance(value, VInteger):
        return str(value.value)
    return "[]" if isinstance(value, VList) else "{}"


def format_value(value: Value, indent: str = "") -> str:
    """Pretty-print *value* as an indented tree.

    Dictionary keys are listed in canonical order::

        {
          b'cow': b'moo'
          b'list': [
            1
            b'two'
          ]
        }
    """
    inner = indent + "  "
    if isinstance(value, VList) and value.items:
        lines = ["["]
        for item in value.items:
            lines.append(inner + format_value(item, inner))
        lines.append(indent + "]")
        return "\n".join(lines)

    if isinstance(value, VDict) and value.entries:
        lines = ["{"]
        for key, item in value.sorted_items():
            lines.append(f"{inner}{_fmt_bytes(key)}: {format_value(item, inner)}")
        lines.append(indent + "}")
        return "\n".join(lines)

    return _fmt_inline(value)


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _read_input(name: str) -> bytes:
    if name == "-":
        return sys.stdin.buffer.read()
    with open(name, "rb") as fh:
        return fh.read()


def _dump(name: str, data: bytes, args: argparse.Namespace, dest: IO[str]) -> None:
    """Decode *data* and print its values (or canonical status) to *dest*."""
    decoder = Decoder(strict=not args.lenient)
    cursor = ByteCursor.from_bytes(data)
    if args.all:
        values = list(decoder.iter_decode(cursor))
    else:
        values = [decoder.read(cursor)]

    if cursor.position < len(data):
        logger.info("%s: ignored %d trailing bytes", name, len(data) - cursor.position)

    if args.check_canonical:
        canonical = b"".join(encode(v) for v in values) == data[:cursor.position]
        print(f"{name}: {'canonical' if canonical else 'not canonical'}", file=dest)
        return

    for value in values:
        print(format_value(value), file=dest)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bencode-dump",
        description="Decode bencoded files and print their contents",
    )
    parser.add_argument("files", nargs="+", metavar="FILE", help="input file, or - for stdin")
    parser.add_argument("-a", "--all", action="store_true",
                        help="decode every concatenated value, not only the first")
    parser.add_argument("-c", "--check-canonical", action="store_true",
                        help="report whether the input is in canonical form")
    parser.add_argument("--lenient", action="store_true",
                        help="accept leading zeros and negative zero")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Entry point for ``bencode-dump``; returns the process exit status."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    status = 0
    for name in args.files:
        try:
            data = _read_input(name)
        except OSError as exc:
            print(f"Error reading '{name}': {exc}", file=sys.stderr)
            status = 1
            continue
        try:
            _dump(name, data, args, sys.stdout)
        except BencodeError as exc:
            print(f"{name}: {exc}", file=sys.stderr)
            status = 1
    return status


if __name__ == "__main__":
    sys.exit(main())
