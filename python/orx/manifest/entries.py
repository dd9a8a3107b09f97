"""Entry records -- the decoded form of each Orx entry kind.

Every entry kind is its own frozen dataclass; ``Entry`` is the union of them.
``to_dict``/``from_dict`` produce and read the payload half of the
``[tag, payload]`` pairs written to ``orx.json``.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


# Reserved shortcode tokens
VS16 = "$vs16"
ZWJ = "$zwj"


class EntryType(Enum):
    INCLUDE = "include"
    DEFINE = "define"
    EMOJI = "emoji"
    PALETTE = "palette"
    COLORMAP = "colormap"


@dataclass(frozen=True)
class Include:
    target: str

    entry_type = EntryType.INCLUDE

    def to_dict(self) -> str:
        return self.target

    @classmethod
    def from_dict(cls, d: str) -> Include:
        return cls(target=d)


@dataclass(frozen=True)
class Define:
    """A named value: a shortcode sequence, a hex color or any other raw token."""

    name: str
    value: str | None = None

    entry_type = EntryType.DEFINE

    def to_dict(self) -> dict:
        d: dict = {"name": self.name}
        if self.value is not None:
            d["value"] = self.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Define:
        return cls(name=d["name"], value=d.get("value"))


@dataclass(frozen=True)
class Emoji:
    short: str
    src: str
    code: tuple[str, ...]
    cat: str
    desc: str
    color: str | None = None
    root: str | None = None

    entry_type = EntryType.EMOJI

    def to_dict(self) -> dict:
        """Absent ``color``/``root`` are left out rather than written as null."""
        d: dict = {
            "short": self.short,
            "src": self.src,
            "code": list(self.code),
            "cat": self.cat,
            "desc": self.desc,
        }
        if self.color is not None:
            d["color"] = self.color
        if self.root is not None:
            d["root"] = self.root
        return d

    @classmethod
    def from_dict(cls, d: dict) -> Emoji:
        return cls(
            short=d.get("short", ""),
            src=d.get("src", ""),
            code=tuple(d.get("code", [])),
            cat=d.get("cat", ""),
            desc=d.get("desc", ""),
            color=d.get("color"),
            root=d.get("root"),
        )


@dataclass(frozen=True)
class PaletteEntry:
    name: str
    value: str | None = None

    def to_dict(self) -> dict:
        d: dict = {"name": self.name}
        if self.value is not None:
            d["value"] = self.value
        return d

    @classmethod
    def from_dict(cls, d: dict) -> PaletteEntry:
        return cls(name=d["name"], value=d.get("value"))


@dataclass(frozen=True)
class Palette:
    """A named, ordered list of colors. Names may repeat."""

    name: str
    entries: tuple[PaletteEntry, ...] = ()

    entry_type = EntryType.PALETTE

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "entries": [e.to_dict() for e in self.entries],
        }

    @classmethod
    def from_dict(cls, d: dict) -> Palette:
        return cls(
            name=d["name"],
            entries=tuple(PaletteEntry.from_dict(e) for e in d.get("entries", [])),
        )


@dataclass(frozen=True)
class Colormap:
    """A color remapping. Unlike Emoji, every field defaults to ``""``."""

    name: str = ""
    src: str = ""
    dst: str = ""
    short: str = ""
    code: str = ""
    desc: str = ""

    entry_type = EntryType.COLORMAP

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "src": self.src,
            "dst": self.dst,
            "short": self.short,
            "code": self.code,
            "desc": self.desc,
        }

    @classmethod
    def from_dict(cls, d: dict) -> Colormap:
        return cls(
            name=d.get("name", ""),
            src=d.get("src", ""),
            dst=d.get("dst", ""),
            short=d.get("short", ""),
            code=d.get("code", ""),
            desc=d.get("desc", ""),
        )


Entry = Union[Include, Define, Emoji, Palette, Colormap]

_ENTRY_CLASSES: dict[EntryType, type] = {
    EntryType.INCLUDE: Include,
    EntryType.DEFINE: Define,
    EntryType.EMOJI: Emoji,
    EntryType.PALETTE: Palette,
    EntryType.COLORMAP: Colormap,
}


def entry_to_pair(entry: Entry) -> list:
    """Serialize an entry to its ``[tag, payload]`` wire form."""
    return [entry.entry_type.value, entry.to_dict()]


def entry_from_pair(pair: list) -> Entry:
    """Rebuild an entry from its ``[tag, payload]`` wire form.

    Raises ValueError for an unknown tag or a malformed pair.
    """
    if not isinstance(pair, (list, tuple)) or len(pair) != 2:
        raise ValueError(f"Expected [tag, payload] pair, got {pair!r}")
    tag, payload = pair
    entry_type = EntryType(tag)
    return _ENTRY_CLASSES[entry_type].from_dict(payload)


@dataclass(frozen=True)
class ParsedDocument:
    """The parse result for one document, entries in source line order."""

    path: tuple[str, ...]
    entries: tuple[Entry, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict:
        return {
            "src": list(self.path),
            "content": [entry_to_pair(e) for e in self.entries],
        }

    @classmethod
    def from_dict(cls, d: dict) -> ParsedDocument:
        return cls(
            path=tuple(d["src"]),
            entries=tuple(entry_from_pair(p) for p in d.get("content", [])),
        )
