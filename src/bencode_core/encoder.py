"""Encoder: canonical serialization of Value trees."""

from __future__ import annotations

import io
from typing import BinaryIO

from .values import Value, VDict, VInteger, VList, VString


def _write_string(s: bytes, sink: BinaryIO) -> None:
    sink.write(b"%d:" % len(s))
    sink.write(s)


def _write_integer(i: int, sink: BinaryIO) -> None:
    sink.write(b"i%de" % i)


def _write_list(items: tuple[Value, ...], sink: BinaryIO) -> None:
    sink.write(b"l")
    for item in items:
        write(item, sink)
    sink.write(b"e")


def _write_dict(d: VDict, sink: BinaryIO) -> None:
    sink.write(b"d")
    for key, item in d.sorted_items():
        _write_string(key, sink)
        write(item, sink)
    sink.write(b"e")


def write(value: Value, sink: BinaryIO) -> None:
    """Write the canonical encoding of *value* to the binary stream *sink*.

    Errors raised by ``sink.write`` propagate unchanged.
    """
    if isinstance(value, VString):
        _write_string(value.value, sink)
    elif isinstance(value, VInteger):
        _write_integer(value.value, sink)
    elif isinstance(value, VList):
        _write_list(value.items, sink)
    elif isinstance(value, VDict):
        _write_dict(value, sink)
    else:
        raise TypeError(f"cannot encode {type(value).__name__}")


def encode(value: Value) -> bytes:
    """Return the canonical encoding of *value*.

    Dictionary keys are always emitted in ascending byte order, so equal
    values encode to identical bytes::

        encode(VDict({b"spam": VString(b"eggs"), b"cow": VString(b"moo")}))
        # → b"d3:cow3:moo4:spam4:eggse"
    """
    buf = io.BytesIO()
    write(value, buf)
    return buf.getvalue()
