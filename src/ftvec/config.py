"""Configuration for ftvec tools.

Resolution order (later wins):
    1. FtvecConfig defaults
    2. YAML file, keys under a top-level ``ftvec:`` mapping
    3. Environment: FTVEC_COLUMN, FTVEC_COMPRESSION, FTVEC_LOG_LEVEL

Example YAML:

    ftvec:
      column: features
      compression: zstd
      log_level: DEBUG
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

import yaml

from ftvec.env_parse import ConfigError, match_enum, parse_enum, parse_str

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

COMPRESSIONS: frozenset[str] = frozenset({"snappy", "zstd", "gzip", "none"})
LOG_LEVELS: frozenset[str] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR"})


@dataclass(frozen=True)
class FtvecConfig:
    """Settings for reading, sorting and writing feature datasets.

    Attributes:
        column: Name of the map<int,float> feature column
        compression: Parquet compression codec ("none" disables compression)
        log_level: Root log level for the CLI
    """

    column: str = "features"
    compression: str = "snappy"
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if not self.column:
            raise ConfigError("column must be a non-empty string")
        if self.compression not in COMPRESSIONS:
            raise ConfigError(
                f"invalid compression: {self.compression!r} (allowed: {sorted(COMPRESSIONS)})"
            )
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(
                f"invalid log_level: {self.log_level!r} (allowed: {sorted(LOG_LEVELS)})"
            )

    @property
    def parquet_compression(self) -> str | None:
        """Codec argument for pyarrow.parquet.write_table."""
        return None if self.compression == "none" else self.compression

    def to_dict(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def _from_mapping(base: FtvecConfig, data: dict[str, Any], source: str) -> FtvecConfig:
    known = {f.name for f in fields(FtvecConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"unknown keys in {source}: {unknown}")

    updates: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, str):
            raise ConfigError(f"{source}: {key} must be a string, got {type(value).__name__}")
        updates[key] = value
    # Canonical casing; unmatched values are left for __post_init__ to reject
    for key, allowed in (("compression", COMPRESSIONS), ("log_level", LOG_LEVELS)):
        if key in updates:
            updates[key] = match_enum(updates[key], set(allowed)) or updates[key]
    return replace(base, **updates)


def load_yaml_config(path: Path, base: FtvecConfig | None = None) -> FtvecConfig:
    """Load settings from a YAML file on top of *base*.

    Raises:
        ConfigError: If the file is not a mapping or holds invalid values.
        FileNotFoundError: If the file does not exist.
    """
    base = base or FtvecConfig()
    with path.open() as f:
        doc = yaml.safe_load(f)
    if doc is None:
        return base
    if not isinstance(doc, dict):
        raise ConfigError(f"{path}: expected a mapping at top level")
    section = doc.get("ftvec", {})
    if section is None:
        return base
    if not isinstance(section, dict):
        raise ConfigError(f"{path}: 'ftvec' must be a mapping")
    logger.debug("Loaded config from %s: %s", path, sorted(section))
    return _from_mapping(base, section, str(path))


def load_env_config(base: FtvecConfig | None = None) -> FtvecConfig:
    """Apply FTVEC_* environment overrides on top of *base*."""
    base = base or FtvecConfig()
    column = parse_str("FTVEC_COLUMN", base.column)
    compression = parse_enum("FTVEC_COMPRESSION", set(COMPRESSIONS), base.compression)
    log_level = parse_enum("FTVEC_LOG_LEVEL", set(LOG_LEVELS), base.log_level)
    return replace(
        base,
        column=column or base.column,
        compression=compression or base.compression,
        log_level=log_level or base.log_level,
    )


def load_config(path: Path | None = None) -> FtvecConfig:
    """Resolve configuration: defaults <- YAML file <- environment."""
    config = FtvecConfig()
    if path is not None:
        config = load_yaml_config(path, config)
    return load_env_config(config)
