"""Tests for orx.manifest.lines -- line normalization."""

from orx.manifest.lines import normalize_lines


def test_normalize_drops_blank_lines():
    """Blank and whitespace-only lines are removed."""
    text = "include a\n\n   \n\t\ndefine b c\n"
    assert normalize_lines(text) == ["include a", "define b c"]


def test_normalize_trims_each_line():
    """Leading and trailing whitespace is stripped, inner spacing kept."""
    text = "   palette  skin  \n\tlight = #fff\t\n"
    assert normalize_lines(text) == ["palette  skin", "light = #fff"]


def test_normalize_empty_text():
    """Empty input yields an empty sequence."""
    assert normalize_lines("") == []
    assert normalize_lines("\n\n  \n") == []


def test_normalize_handles_crlf():
    """Windows line endings leave no stray carriage returns."""
    assert normalize_lines("include a\r\ninclude b\r\n") == ["include a", "include b"]


def test_normalize_output_invariants():
    """No empty strings and no surrounding whitespace in the output."""
    text = " a \n\n b\t\n\r\n  c  d  \n"
    lines = normalize_lines(text)
    assert lines == ["a", "b", "c  d"]
    for line in lines:
        assert line
        assert line == line.strip()


def test_normalize_splits_only_on_newline():
    """Form feeds and Unicode separators do not break a line."""
    assert normalize_lines("a b\x0cc\nd\u2028e\x85f") == ["a b\x0cc", "d\u2028e\x85f"]


def test_normalize_trims_byte_order_mark():
    """A leading byte order mark is removed with the whitespace."""
    assert normalize_lines("\ufeffinclude base\ninclude other") == ["include base", "include other"]
