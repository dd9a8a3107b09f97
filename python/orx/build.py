"""Manifest build -- discover, parse and write every Orx document.

Usage::

    orx-build --manifest manifest --output out/orx.json
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .config import OrxConfig, load_config
from .manifest.entries import ParsedDocument
from .manifest.errors import ConfigError, DocumentError, MalformedLine, OrxError, SourceError
from .manifest.parser import parse_document
from .manifest.sink import OutputFormat, write_tree
from .manifest.source import discover, read_document

_log = logging.getLogger(__name__)


@dataclass
class BuildResult:
    documents: list[ParsedDocument] = field(default_factory=list)
    failures: list[OrxError] = field(default_factory=list)
    output: Path | None = None

    @property
    def ok(self) -> bool:
        return not self.failures


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def build(config: OrxConfig, logger: logging.Logger | None = None) -> BuildResult:
    """Run a full build.

    Each document is parsed on its own; a failing document is logged and left
    out of the output unless ``config.fail_fast`` is set, in which case the
    error is raised. Discovery and write errors are always raised.
    """
    log = logger or _log
    result = BuildResult()

    for file in discover(config.manifest_dir, config.extension, log):
        try:
            source = read_document(config.manifest_dir, file, log)
            doc = parse_document(
                source.path,
                source.text,
                lenient=config.lenient,
                on_skip=_skip_logger(log, file),
            )
        except (SourceError, DocumentError) as exc:
            if config.fail_fast:
                raise
            log.error("Skipping %s: %s", file, exc)
            result.failures.append(exc)
            continue
        log.debug("Parsed %s: %d entries", file, len(doc.entries))
        result.documents.append(doc)

    result.output = write_tree(
        result.documents,
        config.output,
        config.effective_format,
        config.indent,
        log,
    )
    return result


def main(argv: list[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("orx")

    try:
        config = load_config(args.config).with_overrides(
            manifest_dir=args.manifest,
            output=args.output,
            output_format=OutputFormat(args.format) if args.format else None,
            lenient=True if args.lenient else None,
            fail_fast=True if args.fail_fast else None,
        )
    except ConfigError as exc:
        log.error("%s", exc)
        return 2

    try:
        result = build(config, log)
    except OrxError as exc:
        log.error("%s", exc)
        return 1

    if not result.ok:
        log.warning("%d document(s) failed", len(result.failures))
        return 1
    return 0


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _skip_logger(log: logging.Logger, file: Path):
    def on_skip(skipped: MalformedLine) -> None:
        log.debug("%s: ignoring line %d: %s", file, skipped.index, skipped.line)
    return on_skip


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orx-build",
        description="Parse Orx manifest documents into a single structured tree.",
    )
    parser.add_argument("--config", type=Path, help="config file (default: ./orx.yaml if present)")
    parser.add_argument("--manifest", type=Path, help="manifest directory to scan")
    parser.add_argument("--output", type=Path, help="output file")
    parser.add_argument("--format", choices=[f.value for f in OutputFormat], help="output format")
    parser.add_argument("--lenient", action="store_true", help="default missing required fields")
    parser.add_argument("--fail-fast", action="store_true", help="stop at the first failing document")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="warnings and errors only")
    return parser


if __name__ == "__main__":
    sys.exit(main())
