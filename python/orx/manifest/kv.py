"""Inline key/value tokenization for Orx entries.

Two encodings appear in Orx documents:
- inline chunks: ``short=:d: src=x.png desc=a longer sentence`` (Emoji, Colormap)
- palette lines: ``name = value`` (continuation lines under a ``palette`` header)

Inline values are not quoted or escaped. A new chunk starts right before any
word followed by an optional space and ``=``, so multi-word values survive as
long as they contain no ``word=`` of their own.
"""

from __future__ import annotations

import re

# Zero-width split point right before `\w+ = `
_CHUNK_START = re.compile(r"(?=\b\w+ ?= ?)", re.ASCII)

PALETTE_SEPARATOR = " = "


# ---------------------------------------------------------------------------
# Inline chunks
# ---------------------------------------------------------------------------

def split_chunks(text: str) -> list[str]:
    """Split rejoined entry arguments into ``key=value`` chunks."""
    return [chunk for chunk in _CHUNK_START.split(text) if chunk.strip()]


def split_pair(chunk: str) -> tuple[str, str] | None:
    """Split one chunk at its first ``=`` into a trimmed (key, value).

    Returns None for a chunk with no ``=``.
    """
    pos = chunk.find("=")
    if pos < 0:
        return None
    return chunk[:pos].strip(), chunk[pos + 1:].strip()


def parse_inline_kv(text: str, keys: frozenset[str] | None = None) -> dict[str, str]:
    """Parse inline ``key=value`` chunks into a dict.

    The first occurrence of a key wins. When ``keys`` is given, any other key
    is dropped.
    """
    fields: dict[str, str] = {}
    for chunk in split_chunks(text):
        pair = split_pair(chunk)
        if pair is None:
            continue
        key, value = pair
        if not key or (keys is not None and key not in keys):
            continue
        fields.setdefault(key, value)
    return fields


# ---------------------------------------------------------------------------
# Palette lines
# ---------------------------------------------------------------------------

def split_palette_line(line: str) -> tuple[str, str | None]:
    """Split a palette continuation line on the first spaced ``=``.

    The spaces are significant: ``a=b`` is a bare name, not a pair. Without a
    separator the whole line is the name and the value is None. Later
    separators stay in the value, so ``a = b = c`` gives ``("a", "b = c")``
    rather than dropping ``= c``.
    """
    pos = line.find(PALETTE_SEPARATOR)
    if pos < 0:
        return line.strip(), None
    return line[:pos].strip(), line[pos + len(PALETTE_SEPARATOR):].strip()
