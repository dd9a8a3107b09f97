"""Entry parser -- normalized Orx lines into typed entries.

Each line is classified by its first whitespace-separated token, matched
case-insensitively against the entry keywords::

    include common
    define skin_tone #f5c07a
    emoji short=:grin: src=grin.png code=1F600 cat=faces desc=Grinning face
    palette skin
        light = #f5c07a
        dark = #8d5524
    colormap yellow src=#ffcc4d dst=#f5c07a short=:y: code=#f5c07a desc=Skin

Lines that match no keyword are skipped, which is also how comments are
ignored. Only ``palette`` reads past its own line.
"""

from __future__ import annotations

import re
from typing import Callable, Sequence

from .entries import (
    Colormap,
    Define,
    Emoji,
    Entry,
    EntryType,
    Include,
    Palette,
    PaletteEntry,
    ParsedDocument,
)
from .errors import DocumentError, MalformedLine, MissingRequiredField
from .kv import parse_inline_kv, split_palette_line
from .lines import normalize_lines

# A line that opens a new entry, or a comment, ends a palette block
_ENTRY_START = re.compile(r"^(palette|include|define|emoji|colormap|#)", re.IGNORECASE)

EMOJI_KEYS = frozenset({"short", "src", "code", "cat", "desc", "color", "root"})
COLORMAP_KEYS = frozenset({"src", "dst", "short", "code", "desc"})

MISSING_CODE = "Entry.Emoji.MissingCode"
MISSING_INCLUDE = "Entry.Include.MissingTarget"

SkipHandler = Callable[[MalformedLine], None]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def match_keyword(line: str) -> EntryType | None:
    """Return the entry type named by the line's first token, if any."""
    tokens = line.split(maxsplit=1)
    if not tokens:
        return None
    try:
        return EntryType(tokens[0].lower())
    except ValueError:
        return None


def is_entry_start(line: str) -> bool:
    """True if a line would end a palette block."""
    return _ENTRY_START.match(line) is not None


def parse_entries(
    lines: Sequence[str],
    *,
    lenient: bool = False,
    on_skip: SkipHandler | None = None,
) -> list[Entry]:
    """Parse normalized lines into entries, in source order.

    In strict mode a missing required field raises MissingRequiredField. In
    lenient mode the field is defaulted (or the entry dropped) instead.
    ``on_skip`` receives every line that matched no keyword.
    """
    entries: list[Entry] = []
    index = 0

    while index < len(lines):
        line = lines[index]
        entry_type = match_keyword(line)
        if entry_type is None:
            if on_skip is not None:
                on_skip(MalformedLine(index=index, line=line))
            index += 1
            continue

        args = line.split()[1:]

        if entry_type == EntryType.PALETTE:
            entry, consumed = _decode_palette(args, lines, index)
            entries.append(entry)
            index += 1 + consumed
            continue

        if entry_type == EntryType.INCLUDE:
            entry = _decode_include(args, index, line, lenient)
        elif entry_type == EntryType.DEFINE:
            entry = _decode_define(args)
        elif entry_type == EntryType.EMOJI:
            entry = _decode_emoji(args, index, line, lenient)
        else:
            entry = _decode_colormap(args)

        if entry is not None:
            entries.append(entry)
        index += 1

    return entries


def parse_document(
    path: Sequence[str],
    text: str,
    *,
    lenient: bool = False,
    on_skip: SkipHandler | None = None,
) -> ParsedDocument:
    """Normalize and parse one document.

    Raises DocumentError, wrapping the decode error, if the document fails.
    """
    try:
        entries = parse_entries(normalize_lines(text), lenient=lenient, on_skip=on_skip)
    except MissingRequiredField as exc:
        raise DocumentError(list(path), exc) from exc
    return ParsedDocument(path=tuple(path), entries=tuple(entries))


# ---------------------------------------------------------------------------
# Decoders
# ---------------------------------------------------------------------------

def _decode_include(
    args: list[str],
    index: int,
    line: str,
    lenient: bool,
) -> Include | None:
    if not args:
        if lenient:
            return None
        raise MissingRequiredField(MISSING_INCLUDE, "target", index, line)
    return Include(target=args[0])


def _decode_define(args: list[str]) -> Define:
    name = args[0] if args else ""
    value = args[1] if len(args) > 1 else None
    return Define(name=name, value=value)


def _decode_palette(
    args: list[str],
    lines: Sequence[str],
    index: int,
) -> tuple[Palette, int]:
    """Decode a palette header and its continuation lines.

    Returns (palette, number of continuation lines consumed).
    """
    palette_entries: list[PaletteEntry] = []
    cursor = index + 1
    while cursor < len(lines) and not is_entry_start(lines[cursor]):
        name, value = split_palette_line(lines[cursor])
        palette_entries.append(PaletteEntry(name=name, value=value))
        cursor += 1

    name = args[0] if args else ""
    return Palette(name=name, entries=tuple(palette_entries)), cursor - index - 1


def _decode_emoji(
    args: list[str],
    index: int,
    line: str,
    lenient: bool,
) -> Emoji:
    fields = parse_inline_kv(" ".join(args), EMOJI_KEYS)

    code = fields.get("code")
    if code is None:
        if not lenient:
            raise MissingRequiredField(MISSING_CODE, "code", index, line)
        shortcode: tuple[str, ...] = ()
    else:
        shortcode = tuple(code.split())

    return Emoji(
        short=fields.get("short", ""),
        src=fields.get("src", ""),
        code=shortcode,
        cat=fields.get("cat", ""),
        desc=fields.get("desc", ""),
        color=fields.get("color"),
        root=fields.get("root"),
    )


def _decode_colormap(args: list[str]) -> Colormap:
    name = args[0] if args else ""
    fields = parse_inline_kv(" ".join(args[1:]), COLORMAP_KEYS)
    return Colormap(
        name=name,
        src=fields.get("src", ""),
        dst=fields.get("dst", ""),
        short=fields.get("short", ""),
        code=fields.get("code", ""),
        desc=fields.get("desc", ""),
    )
