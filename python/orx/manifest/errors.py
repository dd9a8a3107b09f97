"""Error taxonomy for Orx parsing and building."""

from __future__ import annotations

from dataclasses import dataclass


class OrxError(Exception):
    """Base class for every error raised by the orx package."""


@dataclass(frozen=True)
class MalformedLine:
    """A line that matched no entry keyword and was skipped.

    Not raised. Handed to the parser's ``on_skip`` callback.
    """

    index: int
    line: str


class MissingRequiredField(OrxError, ValueError):
    """A decoder's mandatory field is absent."""

    def __init__(self, code: str, field: str, line_index: int, line: str) -> None:
        super().__init__(f"{code}: missing '{field}' at line {line_index}: {line!r}")
        self.code = code
        self.field = field
        self.line_index = line_index
        self.line = line


class DocumentError(OrxError):
    """A document failed to parse."""

    def __init__(self, path: list[str], cause: Exception) -> None:
        super().__init__(f"{'/'.join(path)}: {cause}")
        self.path = path
        self.cause = cause


class SourceError(OrxError, OSError):
    """A document could not be discovered or read."""


class SinkError(OrxError, OSError):
    """The output tree could not be written."""


class ConfigError(OrxError, ValueError):
    """Invalid build configuration."""
