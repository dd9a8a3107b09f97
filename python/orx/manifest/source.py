"""Document source -- discovers ``.orx`` files and reads their text.

A document's path is its location relative to the manifest root, split into
segments, with everything from the first ``.`` of the file name dropped::

    manifest/people/hands.orx  ->  ["people", "hands"]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import SourceError

ORX_EXTENSION = ".orx"

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceDocument:
    path: tuple[str, ...]
    file: Path
    text: str


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def document_path(root: Path, file: Path) -> tuple[str, ...]:
    """Derive the path segments of ``file`` relative to ``root``."""
    parts = list(file.relative_to(root).parts)
    parts[-1] = parts[-1].split(".")[0]
    return tuple(parts)


def discover(
    root: Path,
    extension: str = ORX_EXTENSION,
    logger: logging.Logger | None = None,
) -> list[Path]:
    """Find every document file under ``root``, in sorted walk order.

    Raises SourceError if ``root`` is not a readable directory.
    """
    log = logger or _log
    if not root.is_dir():
        raise SourceError(f"Manifest directory not found: {root}")
    files: list[Path] = []
    _discover_recursive(root, extension, files, log)
    log.debug("Discovered %d document(s) under %s", len(files), root)
    return files


def read_document(root: Path, file: Path, logger: logging.Logger | None = None) -> SourceDocument:
    """Read one document as UTF-8, dropping a leading byte order mark.

    Raises SourceError if the file cannot be read or decoded.
    """
    log = logger or _log
    try:
        text = file.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceError(f"Could not read {file}: {exc}") from exc
    log.debug("Read %s (%d bytes)", file, len(text))
    return SourceDocument(path=document_path(root, file), file=file, text=text)


def load_documents(
    root: Path,
    extension: str = ORX_EXTENSION,
    logger: logging.Logger | None = None,
) -> list[SourceDocument]:
    """Discover and read every document under ``root``."""
    return [read_document(root, f, logger) for f in discover(root, extension, logger)]


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _discover_recursive(
    dir_path: Path,
    extension: str,
    results: list[Path],
    log: logging.Logger,
) -> None:
    try:
        entries = sorted(dir_path.iterdir())
    except OSError as exc:
        raise SourceError(f"Could not list {dir_path}: {exc}") from exc

    for entry in entries:
        if entry.name.startswith("."):
            continue
        if entry.is_dir():
            _discover_recursive(entry, extension, results, log)
        elif entry.name.endswith(extension):
            results.append(entry)
        else:
            log.debug("Skipping non-document file %s", entry)
