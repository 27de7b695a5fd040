"""Value types for bencode data."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Union

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VString:
    """An uninterpreted byte-string."""

    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError(
                f"VString expects bytes, got {type(self.value).__name__}"
            )

    def __len__(self) -> int:
        return len(self.value)


@dataclass(frozen=True, slots=True)
class VInteger:
    """A signed 64-bit integer."""

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass but never a bencode integer
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"VInteger expects int, got {type(self.value).__name__}"
            )
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise OverflowError(f"{self.value} does not fit in 64 bits")


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class VList:
    """An ordered sequence of values, stored as a tuple."""

    items: tuple[Value, ...]

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, _VALUE_TYPES):
                raise TypeError(
                    f"VList items must be values, got {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class VDict:
    """A byte-string keyed mapping of values.

    ``entries`` is a read-only copy of the mapping given at construction.
    Insertion order carries no meaning: equality compares key/value sets and
    the encoder always emits keys in ascending byte order.
    """

    entries: Mapping[bytes, Value]

    def __post_init__(self) -> None:
        entries = dict(self.entries)
        for key, item in entries.items():
            if not isinstance(key, bytes):
                raise TypeError(
                    f"VDict keys must be bytes, got {type(key).__name__}"
                )
            if not isinstance(item, _VALUE_TYPES):
                raise TypeError(
                    f"VDict value for {key!r} must be a value, "
                    f"got {type(item).__name__}"
                )
        object.__setattr__(self, "entries", MappingProxyType(entries))

    def __repr__(self) -> str:
        return f"VDict({dict(self.entries)!r})"

    def __hash__(self) -> int:
        return hash(frozenset(self.entries.items()))

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __getitem__(self, key: bytes) -> Value:
        return self.entries[key]

    def sorted_items(self) -> list[tuple[bytes, Value]]:
        """Entries in canonical (ascending byte-wise key) order."""
        return sorted(self.entries.items(), key=lambda kv: kv[0])

    def to_dict(self) -> dict[bytes, Value]:
        """Return a mutable shallow copy of the entries."""
        return dict(self.entries)


Value = Union[VString, VInteger, VList, VDict]

_VALUE_TYPES = (VString, VInteger, VList, VDict)

