"""Build configuration, loaded from an optional ``orx.yaml``.

Example::

    manifest-dir: manifest
    output: out/orx.json
    lenient: false
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml

from .manifest.errors import ConfigError
from .manifest.sink import OutputFormat
from .manifest.source import ORX_EXTENSION

DEFAULT_CONFIG_FILE = "orx.yaml"


@dataclass(frozen=True)
class OrxConfig:
    manifest_dir: Path = Path("manifest")
    output: Path = Path("out/orx.json")
    output_format: OutputFormat | None = None
    extension: str = ORX_EXTENSION
    lenient: bool = False
    fail_fast: bool = False
    indent: int = 4

    @property
    def effective_format(self) -> OutputFormat:
        return self.output_format or OutputFormat.from_path(self.output)

    def with_overrides(self, **overrides: object) -> OrxConfig:
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    @classmethod
    def from_dict(cls, data: dict) -> OrxConfig:
        """Build a config from a mapping with hyphenated or underscored keys.

        Raises ConfigError for unknown keys or ill-typed values.
        """
        known = {f.name for f in fields(cls)}
        values: dict = {}
        for raw_key, value in data.items():
            key = str(raw_key).replace("-", "_")
            if key not in known:
                raise ConfigError(f"Unknown config key: '{raw_key}'")
            values[key] = _coerce(key, value)
        return cls(**values)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def load_config(path: Path | None = None) -> OrxConfig:
    """Load config from ``path``, or from ``orx.yaml`` if it exists.

    An explicit path must exist. Without one, a missing default file yields
    the defaults.
    """
    if path is None:
        path = Path(DEFAULT_CONFIG_FILE)
        if not path.exists():
            return OrxConfig()
    try:
        text = path.read_text(encoding="utf-8-sig")
    except OSError as exc:
        raise ConfigError(f"Could not read config {path}: {exc}") from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc
    if data is None:
        return OrxConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")
    return OrxConfig.from_dict(data)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _coerce(key: str, value: object) -> object:
    if key in ("manifest_dir", "output"):
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string path")
        return Path(value)
    if key == "output_format":
        try:
            return OutputFormat(str(value).lower())
        except ValueError:
            raise ConfigError(f"Unknown output format: '{value}'")
    if key in ("lenient", "fail_fast"):
        if not isinstance(value, bool):
            raise ConfigError(f"'{key}' must be true or false")
        return value
    if key == "indent":
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError("'indent' must be a non-negative integer")
        return value
    if key == "extension":
        ext = str(value)
        return ext if ext.startswith(".") else f".{ext}"
    return value
