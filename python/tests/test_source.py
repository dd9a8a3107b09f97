"""Tests for orx.manifest.source -- discovery and reading."""

import tempfile
from pathlib import Path

import pytest

from orx.manifest.entries import Include
from orx.manifest.errors import SourceError
from orx.manifest.parser import parse_document
from orx.manifest.source import discover, document_path, load_documents, read_document


def test_document_path_strips_root_and_extension():
    """Segments are relative to the root and drop the extension."""
    root = Path("manifest")
    assert document_path(root, root / "people" / "hands.orx") == ("people", "hands")
    assert document_path(root, root / "faces.v2.orx") == ("faces",)


def test_discover_finds_nested_documents():
    """Documents are found recursively, sorted, ignoring other files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)
        (d / "people").mkdir()
        (d / "b.orx").write_text("include a\n")
        (d / "a.orx").write_text("include b\n")
        (d / "people" / "hands.orx").write_text("include c\n")
        (d / "notes.txt").write_text("not a document")
        (d / ".hidden").mkdir()
        (d / ".hidden" / "x.orx").write_text("include d\n")

        files = discover(d)
        assert [f.relative_to(d).as_posix() for f in files] == [
            "a.orx", "b.orx", "people/hands.orx",
        ]


def test_discover_custom_extension():
    """Another extension can be scanned for."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)
        (d / "a.orx").write_text("")
        (d / "b.emo").write_text("")
        assert [f.name for f in discover(d, ".emo")] == ["b.emo"]


def test_discover_missing_root():
    """A missing manifest directory is a SourceError."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(SourceError):
            discover(Path(tmpdir) / "nope")


def test_read_document_rejects_invalid_utf8():
    """Undecodable bytes are a SourceError for that document."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)
        (d / "bad.orx").write_bytes(b"\xff\xfe\xfa")
        with pytest.raises(SourceError):
            read_document(d, d / "bad.orx")


def test_load_documents():
    """Documents come back with their path and text."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)
        (d / "flags").mkdir()
        (d / "flags" / "eu.orx").write_text("include base\n")
        [doc] = load_documents(d)
        assert doc.path == ("flags", "eu")
        assert doc.text == "include base\n"


def test_read_document_with_byte_order_mark():
    """A BOM-prefixed file keeps its first entry."""
    with tempfile.TemporaryDirectory() as tmpdir:
        d = Path(tmpdir)
        (d / "bom.orx").write_bytes("include base\ninclude other\n".encode("utf-8-sig"))
        source = read_document(d, d / "bom.orx")
        assert not source.text.startswith("\ufeff")
        doc = parse_document(source.path, source.text)
        assert doc.entries == (Include("base"), Include("other"))
