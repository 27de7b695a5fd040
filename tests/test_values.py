"""Tests for bencode_core.values."""

import dataclasses

import pytest

from bencode_core.values import (
    INT64_MAX,
    INT64_MIN,
    VDict,
    VInteger,
    VList,
    VString,
)


class TestVString:
    def test_bytes(self):
        assert VString(b"abc").value == b"abc"

    def test_bytearray_copied(self):
        raw = bytearray(b"abc")
        s = VString(raw)
        raw[0] = ord("x")
        assert s.value == b"abc"
        assert type(s.value) is bytes

    def test_str_rejected(self):
        with pytest.raises(TypeError):
            VString("abc")

    def test_len(self):
        assert len(VString(b"")) == 0
        assert len(VString(b"spam")) == 4


class TestVInteger:
    def test_bounds(self):
        assert VInteger(INT64_MAX).value == 2 ** 63 - 1
        assert VInteger(INT64_MIN).value == -(2 ** 63)

    def test_overflow(self):
        with pytest.raises(OverflowError):
            VInteger(INT64_MAX + 1)
        with pytest.raises(OverflowError):
            VInteger(INT64_MIN - 1)

    def test_bool_rejected(self):
        with pytest.raises(TypeError):
            VInteger(True)

    def test_float_rejected(self):
        with pytest.raises(TypeError):
            VInteger(1.0)


class TestVList:
    def test_items_become_tuple(self):
        lst = VList([VInteger(1), VInteger(2)])
        assert lst.items == (VInteger(1), VInteger(2))
        assert len(lst) == 2

    def test_equality_ignores_container_type(self):
        assert VList([VInteger(1)]) == VList((VInteger(1),))

    def test_order_matters(self):
        assert VList([VInteger(1), VInteger(2)]) != VList([VInteger(2), VInteger(1)])

    def test_non_value_rejected(self):
        with pytest.raises(TypeError):
            VList([1, 2])


class TestVDict:
    def test_lookup(self):
        d = VDict({b"cow": VString(b"moo")})
        assert d[b"cow"] == VString(b"moo")
        assert b"cow" in d
        assert b"pig" not in d

    def test_equality_ignores_insertion_order(self):
        a = VDict({b"spam": VString(b"eggs"), b"cow": VString(b"moo")})
        b = VDict({b"cow": VString(b"moo"), b"spam": VString(b"eggs")})
        assert a == b

    def test_sorted_items_bytewise(self):
        d = VDict({b"b": VInteger(1), b"B": VInteger(2), b"a": VInteger(3), b"\xff": VInteger(4)})
        assert [k for k, _ in d.sorted_items()] == [b"B", b"a", b"b", b"\xff"]

    def test_str_key_rejected(self):
        with pytest.raises(TypeError):
            VDict({"cow": VString(b"moo")})

    def test_non_value_rejected(self):
        with pytest.raises(TypeError):
            VDict({b"cow": b"moo"})

    def test_iterates_keys(self):
        d = VDict({b"a": VInteger(1), b"b": VInteger(2)})
        assert sorted(d) == [b"a", b"b"]
        assert list(VDict({})) == []

    def test_hash_ignores_insertion_order(self):
        a = VDict({b"x": VInteger(1), b"y": VString(b"z")})
        b = VDict({b"y": VString(b"z"), b"x": VInteger(1)})
        assert hash(a) == hash(b)
        assert len({a, b}) == 1

    def test_list_holding_dict_is_hashable(self):
        hash(VList([VDict({b"k": VList([])})]))

    def test_to_dict_is_a_copy(self):
        d = VDict({b"x": VInteger(1)})
        copy = d.to_dict()
        copy.pop(b"x")
        assert b"x" in d


class TestImmutability:
    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            VInteger(1).value = 2

    def test_entries_read_only(self):
        d = VDict({b"x": VInteger(1)})
        with pytest.raises(TypeError):
            d.entries[b"y"] = VInteger(2)

    def test_source_mapping_not_shared(self):
        src = {b"x": VInteger(1)}
        d = VDict(src)
        src[b"y"] = VInteger(2)
        assert len(d) == 1
