"""Tests for dataset IO (dataset.py).

Covers:
- JSON Lines: string ids -> map<int32,float32>, extra columns, null rows,
  missing feature column, malformed input
- Parquet: write/read preserves rows and schema, deterministic bytes
- Unsupported suffixes
- JSON Lines output keeps entry order
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pyarrow as pa
import pytest

from ftvec.dataset import (
    FEATURE_MAP_ARROW_TYPE,
    read_feature_table,
    read_jsonl_table,
    write_feature_table,
)

if TYPE_CHECKING:
    from pathlib import Path


def write_lines(path: Path, records: list[object]) -> Path:
    path.write_text("".join(json.dumps(r) + "\n" for r in records))
    return path


class TestReadJsonl:
    """JSON Lines input."""

    def test_feature_column_typed(self, tmp_path: Path) -> None:
        path = write_lines(tmp_path / "in.jsonl", [{"features": {"3": 1.0, "1": 2.5}}])
        table = read_jsonl_table(path, "features")
        assert table.schema.field("features").type == FEATURE_MAP_ARROW_TYPE
        assert table.column("features").to_pylist() == [[(3, 1.0), (1, 2.5)]]

    def test_negative_ids(self, tmp_path: Path) -> None:
        path = write_lines(tmp_path / "in.jsonl", [{"features": {"-5": 0.5, "0": 1.0}}])
        table = read_jsonl_table(path, "features")
        assert [k for k, _ in table.column("features")[0].as_py()] == [-5, 0]

    def test_extra_columns_carried(self, tmp_path: Path) -> None:
        path = write_lines(
            tmp_path / "in.jsonl",
            [
                {"id": "a", "features": {"1": 1.0}},
                {"id": "b", "label": 1, "features": {}},
            ],
        )
        table = read_jsonl_table(path, "features")
        assert table.column("id").to_pylist() == ["a", "b"]
        assert table.column("label").to_pylist() == [None, 1]
        assert table.column("features").to_pylist() == [[(1, 1.0)], []]

    def test_null_and_missing_rows(self, tmp_path: Path) -> None:
        path = write_lines(tmp_path / "in.jsonl", [{"features": None}, {"other": 1}])
        table = read_jsonl_table(path, "features")
        assert table.column("features").to_pylist() == [None, None]

    def test_column_absent_everywhere(self, tmp_path: Path) -> None:
        path = write_lines(tmp_path / "in.jsonl", [{"x": 1}, {"x": 2}])
        table = read_jsonl_table(path, "features")
        assert table.column("features").type == FEATURE_MAP_ARROW_TYPE
        assert table.column("features").null_count == 2

    def test_blank_lines_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "in.jsonl"
        path.write_text('{"features": {"1": 1.0}}\n\n   \n{"features": {}}\n')
        assert read_jsonl_table(path, "features").num_rows == 2

    @pytest.mark.parametrize(
        ("content", "match"),
        [
            ("not json\n", "line 1: invalid JSON"),
            ("[1, 2]\n", "line 1: expected a JSON object"),
            ('{"features": [1, 2]}\n', "line 1: feature map must be a JSON object"),
            ('{"features": {"abc": 1.0}}\n', "line 1: invalid feature entry"),
            ('{"features": {}}\n{"features": {"1": "x"}}\n', "line 2: invalid feature entry"),
        ],
    )
    def test_malformed(self, tmp_path: Path, content: str, match: str) -> None:
        path = tmp_path / "bad.jsonl"
        path.write_text(content)
        with pytest.raises(ValueError, match=match):
            read_jsonl_table(path, "features")


class TestParquet:
    """Parquet round trip and determinism."""

    def test_write_then_read(self, tmp_path: Path, feature_map_array: pa.MapArray) -> None:
        table = pa.table({"features": feature_map_array})
        path = tmp_path / "out" / "data.parquet"
        write_feature_table(table, path)
        loaded = read_feature_table(path, "features")
        assert loaded.schema.field("features").type == FEATURE_MAP_ARROW_TYPE
        assert loaded.column("features").to_pylist() == feature_map_array.to_pylist()

    @pytest.mark.parametrize("compression", ["snappy", "zstd", "gzip", None])
    def test_deterministic_bytes(
        self, tmp_path: Path, feature_map_array: pa.MapArray, compression: str | None
    ) -> None:
        table = pa.table({"features": feature_map_array})
        p1, p2 = tmp_path / "a.parquet", tmp_path / "b.parquet"
        write_feature_table(table, p1, compression=compression)
        write_feature_table(table, p2, compression=compression)
        assert p1.read_bytes() == p2.read_bytes()


class TestWriteJsonl:
    """JSON Lines output."""

    def test_entry_order_kept(self, tmp_path: Path) -> None:
        table = pa.table(
            {
                "id": ["a", "b"],
                "features": pa.array([[(1, 0.5), (3, 2.0)], None], type=FEATURE_MAP_ARROW_TYPE),
            }
        )
        path = tmp_path / "out.jsonl"
        write_feature_table(table, path)
        lines = path.read_text().splitlines()
        assert lines[0] == '{"id": "a", "features": {"1": 0.5, "3": 2.0}}'
        assert json.loads(lines[1]) == {"id": "b", "features": None}


class TestSuffix:
    """Unsupported file types."""

    @pytest.mark.parametrize("name", ["data.csv", "data.json", "data"])
    def test_read_rejects(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(ValueError, match="unsupported file type"):
            read_feature_table(tmp_path / name, "features")

    def test_write_rejects(self, tmp_path: Path) -> None:
        with pytest.raises(ValueError, match="unsupported file type"):
            write_feature_table(pa.table({"x": [1]}), tmp_path / "out.csv")

    def test_read_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            read_feature_table(tmp_path / "missing.parquet", "features")
