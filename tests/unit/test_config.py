"""Tests for configuration loading (config.py).

Covers:
- Defaults and validation
- YAML file: section parsing, casing, unknown keys, bad shapes
- Environment overrides and precedence (env > file > defaults)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from ftvec.config import FtvecConfig, load_config, load_env_config, load_yaml_config
from ftvec.env_parse import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

ENV_VARS = ("FTVEC_COLUMN", "FTVEC_COMPRESSION", "FTVEC_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestDefaults:
    """FtvecConfig defaults and checks."""

    def test_defaults(self) -> None:
        config = FtvecConfig()
        assert config.column == "features"
        assert config.compression == "snappy"
        assert config.log_level == "INFO"
        assert config.parquet_compression == "snappy"

    def test_none_compression(self) -> None:
        assert FtvecConfig(compression="none").parquet_compression is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"column": ""}, {"compression": "lz4"}, {"log_level": "TRACE"}],
    )
    def test_invalid_values(self, kwargs: dict[str, str]) -> None:
        with pytest.raises(ConfigError):
            FtvecConfig(**kwargs)

    def test_to_dict(self) -> None:
        assert FtvecConfig().to_dict() == {
            "column": "features",
            "compression": "snappy",
            "log_level": "INFO",
        }


class TestYamlConfig:
    """YAML file loading."""

    def test_section_applied(self, tmp_path: Path) -> None:
        path = tmp_path / "ftvec.yaml"
        path.write_text("ftvec:\n  column: vec\n  compression: ZSTD\n  log_level: debug\n")
        config = load_yaml_config(path)
        assert config == FtvecConfig(column="vec", compression="zstd", log_level="DEBUG")

    def test_partial_section_keeps_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "ftvec.yaml"
        path.write_text("ftvec:\n  column: vec\n")
        config = load_yaml_config(path)
        assert config.column == "vec"
        assert config.compression == "snappy"

    @pytest.mark.parametrize("content", ["", "other: 1\n", "ftvec:\n"])
    def test_empty_or_missing_section(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "ftvec.yaml"
        path.write_text(content)
        assert load_yaml_config(path) == FtvecConfig()

    @pytest.mark.parametrize(
        ("content", "match"),
        [
            ("- a\n- b\n", "expected a mapping"),
            ("ftvec: [1, 2]\n", "'ftvec' must be a mapping"),
            ("ftvec:\n  colum: vec\n", "unknown keys"),
            ("ftvec:\n  column: 5\n", "must be a string"),
            ("ftvec:\n  compression: lz4\n", "invalid compression"),
        ],
    )
    def test_invalid(self, tmp_path: Path, content: str, match: str) -> None:
        path = tmp_path / "ftvec.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError, match=match):
            load_yaml_config(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_yaml_config(tmp_path / "nope.yaml")


class TestEnvConfig:
    """Environment overrides."""

    def test_env_applied(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FTVEC_COLUMN", "vec")
        monkeypatch.setenv("FTVEC_COMPRESSION", "gzip")
        monkeypatch.setenv("FTVEC_LOG_LEVEL", "warning")
        config = load_env_config()
        assert config == FtvecConfig(column="vec", compression="gzip", log_level="WARNING")

    def test_invalid_env_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FTVEC_COMPRESSION", "lz4")
        with pytest.raises(ConfigError, match="FTVEC_COMPRESSION"):
            load_env_config()

    def test_env_wins_over_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = tmp_path / "ftvec.yaml"
        path.write_text("ftvec:\n  column: from_file\n  compression: zstd\n")
        monkeypatch.setenv("FTVEC_COLUMN", "from_env")
        config = load_config(path)
        assert config.column == "from_env"
        assert config.compression == "zstd"

    def test_no_file_no_env(self) -> None:
        assert load_config() == FtvecConfig()
