"""Tests for the bencode-dump CLI and value formatting."""

import pytest

from bencode_core import VDict, VInteger, VList, VString
from bencode_core.cli import _fmt_inline, format_value, main


# ---------------------------------------------------------------------------
# _fmt_inline
# ---------------------------------------------------------------------------

def test_fmt_inline_string():
    assert _fmt_inline(VString(b"moo")) == "b'moo'"

def test_fmt_inline_integer():
    assert _fmt_inline(VInteger(-3)) == "-3"

def test_fmt_inline_long_binary():
    assert _fmt_inline(VString(b"\x00" * 100)) == "<100 bytes>"

def test_fmt_inline_long_text_kept():
    assert _fmt_inline(VString(b"a" * 100)) == repr(b"a" * 100)

def test_fmt_inline_empty_containers():
    assert _fmt_inline(VList([])) == "[]"
    assert _fmt_inline(VDict({})) == "{}"


# ---------------------------------------------------------------------------
# format_value
# ---------------------------------------------------------------------------

def test_format_value_scalar():
    assert format_value(VInteger(5)) == "5"

def test_format_value_tree():
    value = VDict({
        b"list": VList([VInteger(1), VString(b"two")]),
        b"cow": VString(b"moo"),
    })
    assert format_value(value) == "\n".join([
        "{",
        "  b'cow': b'moo'",
        "  b'list': [",
        "    1",
        "    b'two'",
        "  ]",
        "}",
    ])


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def test_main_dump(tmp_path, capsys):
    f = tmp_path / "a.torrent"
    f.write_bytes(b"d3:cow3:mooe")
    assert main([str(f)]) == 0
    assert "b'cow': b'moo'" in capsys.readouterr().out

def test_main_all(tmp_path, capsys):
    f = tmp_path / "multi.bin"
    f.write_bytes(b"i1ei2e")
    assert main(["--all", str(f)]) == 0
    assert capsys.readouterr().out.split() == ["1", "2"]

def test_main_first_value_only(tmp_path, capsys):
    f = tmp_path / "multi.bin"
    f.write_bytes(b"i1ei2e")
    assert main([str(f)]) == 0
    assert capsys.readouterr().out.split() == ["1"]

def test_main_check_canonical(tmp_path, capsys):
    good = tmp_path / "good.bin"
    good.write_bytes(b"d1:ai1e1:bi2ee")
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"d1:bi2e1:ai1ee")
    assert main(["-c", str(good), str(bad)]) == 0
    out = capsys.readouterr().out
    assert f"{good}: canonical" in out
    assert f"{bad}: not canonical" in out

def test_main_decode_error(tmp_path, capsys):
    f = tmp_path / "broken.bin"
    f.write_bytes(b"i12a34e")
    assert main([str(f)]) == 1
    assert "unexpected 'a'" in capsys.readouterr().err

def test_main_lenient(tmp_path, capsys):
    f = tmp_path / "zeros.bin"
    f.write_bytes(b"i007e")
    assert main([str(f)]) == 1
    assert main(["--lenient", str(f)]) == 0
    assert capsys.readouterr().out.strip() == "7"

def test_main_missing_file(tmp_path, capsys):
    missing = tmp_path / "nope.bin"
    assert main([str(missing)]) == 1
    assert "Error reading" in capsys.readouterr().err

def test_main_continues_after_error(tmp_path, capsys):
    bad = tmp_path / "bad.bin"
    bad.write_bytes(b"x")
    good = tmp_path / "good.bin"
    good.write_bytes(b"i9e")
    assert main([str(bad), str(good)]) == 1
    assert capsys.readouterr().out.strip() == "9"

def test_main_requires_files():
    with pytest.raises(SystemExit):
        main([])
