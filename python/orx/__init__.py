"""Orx -- parser for the Orx emoji manifest markup."""

from pathlib import Path

from .build import build
from .config import OrxConfig, load_config
from .manifest import Entry, ParsedDocument, normalize_lines, parse_document, parse_entries
from .manifest.source import read_document


def parse(text: str, lenient: bool = False) -> list[Entry]:
    """Parse Orx text into its entries."""
    return parse_entries(normalize_lines(text), lenient=lenient)


def parse_file(path, root=None, lenient: bool = False) -> ParsedDocument:
    """Parse one ``.orx`` file.

    The document path is taken relative to ``root`` when given, else it is
    just the file's stem.
    """
    path = Path(path)
    root = Path(root) if root is not None else path.parent
    source = read_document(root, path)
    return parse_document(source.path, source.text, lenient=lenient)


__all__ = [
    'OrxConfig', 'ParsedDocument', 'Entry',
    'build', 'load_config',
    'parse', 'parse_file',
]
