"""Read and write feature datasets.

Supported formats (by file suffix):
- ``.parquet``: any table; the feature column must be map<int32, float32>.
- ``.jsonl``: one JSON object per line. The feature column holds a JSON
  object whose keys are decimal feature ids, e.g. ``{"features": {"3": 1.0}}``.
  Other fields are carried through as ordinary columns.

Parquet is written with ``write_statistics=False`` so output is
byte-for-byte reproducible for the same input.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import pyarrow as pa
import pyarrow.parquet as pq

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

FEATURE_MAP_ARROW_TYPE = pa.map_(pa.int32(), pa.float32())

PARQUET_SUFFIX = ".parquet"
JSONL_SUFFIX = ".jsonl"


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in (PARQUET_SUFFIX, JSONL_SUFFIX):
        raise ValueError(f"unsupported file type: {path.name} (expected .parquet or .jsonl)")
    return suffix


def _json_to_pairs(value: Any, line_no: int) -> list[tuple[int, float | None]] | None:
    if value is None:
        return None
    if not isinstance(value, dict):
        raise ValueError(f"line {line_no}: feature map must be a JSON object")
    try:
        return [(int(k), None if v is None else float(v)) for k, v in value.items()]
    except (TypeError, ValueError) as e:
        raise ValueError(f"line {line_no}: invalid feature entry: {e}") from e


def read_jsonl_table(path: Path, column: str) -> pa.Table:
    """Load a JSON Lines feature file into a table.

    Raises:
        ValueError: On malformed lines or feature maps.
    """
    columns: dict[str, list[Any]] = {}
    n_rows = 0
    with path.open(encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip():
                continue
            try:
                record = json.loads(line)
            except json.JSONDecodeError as e:
                raise ValueError(f"line {line_no}: invalid JSON: {e.msg}") from e
            if not isinstance(record, dict):
                raise ValueError(f"line {line_no}: expected a JSON object")
            if column in record:
                record[column] = _json_to_pairs(record[column], line_no)
            for name in record:
                columns.setdefault(name, [None] * n_rows)
            for name, values in columns.items():
                values.append(record.get(name))
            n_rows += 1

    arrays: dict[str, pa.Array] = {}
    for name, values in columns.items():
        if name == column:
            arrays[name] = pa.array(values, type=FEATURE_MAP_ARROW_TYPE)
        else:
            arrays[name] = pa.array(values)
    if column not in arrays:
        arrays[column] = pa.array([None] * n_rows, type=FEATURE_MAP_ARROW_TYPE)

    logger.debug("Read %d rows from %s", n_rows, path)
    return pa.table(arrays)


def write_jsonl_table(table: pa.Table, path: Path) -> None:
    """Write a table as JSON Lines; map columns become JSON objects in entry order."""
    map_cols = {f.name for f in table.schema if pa.types.is_map(f.type)}
    with path.open("w", encoding="utf-8") as f:
        for row in table.to_pylist():
            for name in map_cols:
                pairs = row[name]
                if pairs is not None:
                    row[name] = {str(k): v for k, v in pairs}
            f.write(json.dumps(row))
            f.write("\n")


def read_feature_table(path: Path, column: str) -> pa.Table:
    """Read a feature dataset from .parquet or .jsonl.

    Raises:
        ValueError: If the suffix is unsupported or the file is malformed.
        FileNotFoundError: If path does not exist.
    """
    suffix = _check_suffix(path)
    if not path.exists():
        raise FileNotFoundError(f"input not found: {path}")
    if suffix == JSONL_SUFFIX:
        return read_jsonl_table(path, column)
    return pq.read_table(path)


def write_feature_table(
    table: pa.Table,
    path: Path,
    *,
    compression: str | None = "snappy",
) -> None:
    """Write a feature dataset to .parquet or .jsonl.

    Args:
        table: Table to write.
        path: Output path; parent directories are created.
        compression: Parquet codec, None for uncompressed. Ignored for .jsonl.
    """
    suffix = _check_suffix(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if suffix == JSONL_SUFFIX:
        write_jsonl_table(table, path)
    else:
        pq.write_table(table, path, compression=compression or "none", write_statistics=False)
    logger.debug("Wrote %d rows to %s", table.num_rows, path)


__all__ = [
    "FEATURE_MAP_ARROW_TYPE",
    "read_feature_table",
    "read_jsonl_table",
    "write_feature_table",
    "write_jsonl_table",
]
