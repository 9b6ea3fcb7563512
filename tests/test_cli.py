"""Tests for CLI helpers: _fmt_inline, _fmt_section, _show_document, main."""

import io

import pytest

from thetha_core import Document
from thetha_core.cli import _fmt_inline, _fmt_section, _show_document, main
from thetha_core.values import Null, VBool, VDict, VFloat, VInteger, VList, VString


EXAMPLE = """
<general>
app_name == "TestApp"
version == 1.0
<database<advanced>>
pool_size == 10
"""


# ---------------------------------------------------------------------------
# _fmt_inline
# ---------------------------------------------------------------------------

def test_fmt_inline_string():
    assert _fmt_inline(VString("hello")) == '"hello"'

def test_fmt_inline_numbers():
    assert _fmt_inline(VInteger(42)) == "42"
    assert _fmt_inline(VFloat(1.0)) == "1.0"

def test_fmt_inline_literals():
    assert _fmt_inline(VBool(True)) == "True"
    assert _fmt_inline(Null) == "Null"

def test_fmt_inline_composites():
    value = VList([VInteger(1), VDict({"k": VString("v")})])
    assert _fmt_inline(value) == '[1, {k == "v"}]'


# ---------------------------------------------------------------------------
# _fmt_section / _show_document
# ---------------------------------------------------------------------------

def test_fmt_section_aligned():
    out = _fmt_section("general", {"a": VInteger(1), "long_key": VBool(False)})
    assert out.splitlines() == [
        "general {",
        "  a        : 1",
        "  long_key : False",
        "}",
    ]

def test_fmt_section_empty():
    assert _fmt_section("empty", {}) == "empty {}"

def test_show_document_empty():
    buf = io.StringIO()
    _show_document(Document(), buf)
    assert "no sections" in buf.getvalue()


# ---------------------------------------------------------------------------
# main
# ---------------------------------------------------------------------------

def _write(tmp_path, text):
    path = tmp_path / "example.thtc"
    path.write_text(text, encoding="utf-8")
    return str(path)

def test_main_prints_all_sections(tmp_path, capsys):
    assert main([_write(tmp_path, EXAMPLE)]) == 0
    out = capsys.readouterr().out
    assert "general {" in out
    assert 'app_name : "TestApp"' in out
    assert "database/advanced {" in out
    assert "pool_size : 10" in out

def test_main_single_section(tmp_path, capsys):
    assert main([_write(tmp_path, EXAMPLE), "--section", "database/advanced"]) == 0
    out = capsys.readouterr().out
    assert "database/advanced {" in out
    assert "general" not in out

def test_main_unknown_section(tmp_path, capsys):
    assert main([_write(tmp_path, EXAMPLE), "--section", "nope"]) == 2
    assert "no section 'nope'" in capsys.readouterr().err

def test_main_parse_error(tmp_path, capsys):
    assert main([_write(tmp_path, "<s>\nbroken line\n")]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Syntax error on line 2")

def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.thtc")]) == 1
    assert "Could not read file" in capsys.readouterr().err

def test_main_max_depth(tmp_path, capsys):
    path = _write(tmp_path, "<s>\na == [[1]]\n")
    assert main([path, "--max-depth", "1"]) == 1
    assert "nested deeper" in capsys.readouterr().err

def test_main_large_max_depth_reports_error(tmp_path, capsys):
    path = _write(tmp_path, "<s>\na == " + "[" * 3000 + "]" * 3000 + "\n")
    assert main([path, "--max-depth", "100000"]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: Syntax error on line 2")
    assert "nested too deeply" in err

def test_main_rejects_bad_max_depth(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        main([_write(tmp_path, EXAMPLE), "--max-depth", "0"])
    assert exc_info.value.code == 2
