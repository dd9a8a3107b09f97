"""orx.manifest -- Orx markup parsing and the manifest document tree."""

from .entries import (
    VS16,
    ZWJ,
    Colormap,
    Define,
    Emoji,
    Entry,
    EntryType,
    Include,
    Palette,
    PaletteEntry,
    ParsedDocument,
    entry_from_pair,
    entry_to_pair,
)
from .errors import (
    ConfigError,
    DocumentError,
    MalformedLine,
    MissingRequiredField,
    OrxError,
    SinkError,
    SourceError,
)
from .lines import normalize_lines
from .parser import parse_document, parse_entries
from .sink import OutputFormat, load_tree, serialize_tree, write_tree
from .source import SourceDocument, discover, load_documents, read_document

__all__ = [
    "VS16",
    "ZWJ",
    "Colormap",
    "Define",
    "Emoji",
    "Entry",
    "EntryType",
    "Include",
    "Palette",
    "PaletteEntry",
    "ParsedDocument",
    "entry_from_pair",
    "entry_to_pair",
    "ConfigError",
    "DocumentError",
    "MalformedLine",
    "MissingRequiredField",
    "OrxError",
    "SinkError",
    "SourceError",
    "normalize_lines",
    "parse_document",
    "parse_entries",
    "OutputFormat",
    "load_tree",
    "serialize_tree",
    "write_tree",
    "SourceDocument",
    "discover",
    "load_documents",
    "read_document",
]
