"""Tests for orx.config -- defaults, YAML loading, overrides."""

import tempfile
from pathlib import Path

import pytest

from orx.config import OrxConfig, load_config
from orx.manifest.errors import ConfigError
from orx.manifest.sink import OutputFormat


def test_defaults():
    """Defaults reproduce the manifest -> out/orx.json build."""
    config = OrxConfig()
    assert config.manifest_dir == Path("manifest")
    assert config.output == Path("out/orx.json")
    assert config.effective_format == OutputFormat.JSON
    assert config.extension == ".orx"
    assert not config.lenient


def test_load_config_from_yaml():
    """Hyphenated and underscored keys are both accepted."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orx.yaml"
        path.write_text(
            "manifest-dir: src/manifest\n"
            "output: build/orx.yml\n"
            "lenient: true\n"
            "fail_fast: true\n"
            "extension: emo\n"
        )
        config = load_config(path)
        assert config.manifest_dir == Path("src/manifest")
        assert config.effective_format == OutputFormat.YAML
        assert config.lenient
        assert config.fail_fast
        assert config.extension == ".emo"


def test_load_config_empty_file():
    """An empty file gives the defaults."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orx.yaml"
        path.write_text("")
        assert load_config(path) == OrxConfig()


def test_load_config_rejects_unknown_key():
    """Unknown keys are reported."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orx.yaml"
        path.write_text("outptu: x.json\n")
        with pytest.raises(ConfigError):
            load_config(path)


def test_load_config_rejects_bad_values():
    """Ill-typed values are reported."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orx.yaml"
        for text in ("lenient: maybe\n", "indent: -1\n", "output-format: xml\n", "- a\n- b\n"):
            path.write_text(text)
            with pytest.raises(ConfigError):
                load_config(path)


def test_load_config_missing_explicit_path():
    """An explicit config path must exist."""
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ConfigError):
            load_config(Path(tmpdir) / "missing.yaml")


def test_with_overrides_skips_none():
    """None overrides leave values untouched."""
    config = OrxConfig().with_overrides(output=Path("x.yaml"), lenient=None)
    assert config.output == Path("x.yaml")
    assert config.effective_format == OutputFormat.YAML
    assert not config.lenient


def test_load_config_with_byte_order_mark():
    """A BOM-prefixed config file reads its first key."""
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "orx.yaml"
        path.write_bytes("lenient: true\n".encode("utf-8-sig"))
        assert load_config(path).lenient
