"""Typed accessors for decoded dictionaries.

Each ``pop_value_*`` function removes *key* from a mutable working copy of a
decoded dictionary and returns the entry as a plain Python value::

    entries = decode(data).to_dict()
    length = pop_value_integer(entries, "length")
    name = pop_value_utf8_string(entries, "name")
    comment = pop_value_utf8_string_option(entries, "comment")   # may be None
    # whatever is left in ``entries`` was not consumed

- absent key → MissingKey (the ``_option`` variants return ``None`` instead)
- entry of another variant → BadType (the entry is removed all the same)
- byte-string that is not UTF-8 → MalformedText
"""

from __future__ import annotations

from typing import MutableMapping

from .errors import BadType, MalformedText, MissingKey
from .values import Value, VInteger, VString

Entries = MutableMapping[bytes, Value]


def _pop(entries: Entries, key: str) -> Value:
    try:
        return entries.pop(key.encode("utf-8"))
    except KeyError:
        raise MissingKey(key) from None


def pop_value_integer(entries: Entries, key: str) -> int:
    value = _pop(entries, key)
    if not isinstance(value, VInteger):
        raise BadType(key, "integer", value)
    return value.value


def pop_value_integer_option(entries: Entries, key: str) -> int | None:
    try:
        return pop_value_integer(entries, key)
    except MissingKey:
        return None


def pop_value_bytestring(entries: Entries, key: str) -> bytes:
    value = _pop(entries, key)
    if not isinstance(value, VString):
        raise BadType(key, "byte-string", value)
    return value.value


def pop_value_bytestring_option(entries: Entries, key: str) -> bytes | None:
    try:
        return pop_value_bytestring(entries, key)
    except MissingKey:
        return None


def pop_value_utf8_string(entries: Entries, key: str) -> str:
    """Pop a byte-string entry and decode it as UTF-8 text."""
    raw = pop_value_bytestring(entries, key)
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise MalformedText(key, exc.reason) from exc


def pop_value_utf8_string_option(entries: Entries, key: str) -> str | None:
    try:
        return pop_value_utf8_string(entries, key)
    except MissingKey:
        return None
