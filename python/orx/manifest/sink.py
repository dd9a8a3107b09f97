"""Output sink -- writes the parsed document tree to disk.

Two formats:
- json: the ``out/orx.json`` layout, indented 4 spaces
- yaml: the same tree as a YAML document
"""

from __future__ import annotations

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Sequence

import yaml

from .entries import ParsedDocument
from .errors import SinkError

_log = logging.getLogger(__name__)


class OutputFormat(Enum):
    JSON = "json"
    YAML = "yaml"

    @classmethod
    def from_path(cls, path: Path) -> OutputFormat:
        """Pick a format from a file suffix, defaulting to JSON."""
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.YAML
        return cls.JSON


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def to_tree(documents: Sequence[ParsedDocument]) -> list[dict]:
    return [doc.to_dict() for doc in documents]


def serialize_tree(
    documents: Sequence[ParsedDocument],
    fmt: OutputFormat = OutputFormat.JSON,
    indent: int = 4,
) -> str:
    """Serialize documents to text in the given format."""
    tree = to_tree(documents)
    if fmt == OutputFormat.YAML:
        return yaml.safe_dump(tree, sort_keys=False, allow_unicode=True, indent=indent)
    return json.dumps(tree, indent=indent, ensure_ascii=False)


def write_tree(
    documents: Sequence[ParsedDocument],
    output: Path,
    fmt: OutputFormat | None = None,
    indent: int = 4,
    logger: logging.Logger | None = None,
) -> Path:
    """Write documents to ``output``, creating its directory if needed.

    Raises SinkError if the directory or file cannot be written.
    """
    log = logger or _log
    fmt = fmt or OutputFormat.from_path(output)
    text = serialize_tree(documents, fmt, indent)
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise SinkError(f"Could not write {output}: {exc}") from exc
    log.info("Wrote %d document(s) to %s", len(documents), output)
    return output


def load_tree(path: Path, fmt: OutputFormat | None = None) -> list[ParsedDocument]:
    """Read a tree written by ``write_tree`` back into documents."""
    fmt = fmt or OutputFormat.from_path(path)
    text = path.read_text(encoding="utf-8")
    if fmt == OutputFormat.YAML:
        data = yaml.safe_load(text)
    else:
        data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"Expected a list of documents in {path}")
    return [ParsedDocument.from_dict(d) for d in data]
