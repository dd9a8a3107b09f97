"""Line normalizer -- raw document text to the non-blank line sequence."""

from __future__ import annotations

BOM = "\ufeff"


def normalize_lines(text: str) -> list[str]:
    """Split on ``\\n``, trim each line, and drop the empty ones.

    Only ``\\n`` breaks a line; a trailing ``\\r`` and a byte order mark are
    trimmed away with the other edge whitespace.
    """
    lines: list[str] = []
    for raw_line in text.split("\n"):
        trimmed = raw_line.strip().strip(BOM).strip()
        if trimmed:
            lines.append(trimmed)
    return lines
