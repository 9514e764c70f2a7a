#!/usr/bin/env python3
"""
Generate a synthetic feature-vector dataset for sort testing.

Each row holds a sparse map<int32, float32> whose entries are written in
random (unsorted) order, so the output exercises `ftvec sort`.

Usage:
    python -m scripts.generate_fixture --rows 1000 --out /tmp/features.parquet
    python -m scripts.generate_fixture --rows 10 --out /tmp/features.jsonl --null-rate 0.1
"""

import argparse
import sys
from pathlib import Path

import numpy as np
import pyarrow as pa

from ftvec.dataset import FEATURE_MAP_ARROW_TYPE, write_feature_table


def generate_rows(
    n_rows: int,
    max_features: int = 32,
    id_range: int = 1 << 20,
    null_rate: float = 0.0,
    seed: int = 42,
) -> list[list[tuple[int, float]] | None]:
    """Generate feature vectors with unique, shuffled ids (signed range)."""
    rng = np.random.default_rng(seed)
    rows: list[list[tuple[int, float]] | None] = []
    for _ in range(n_rows):
        if null_rate > 0 and rng.random() < null_rate:
            rows.append(None)
            continue
        n = int(rng.integers(0, max_features + 1))
        ids = rng.choice(2 * id_range, size=n, replace=False) - id_range
        weights = rng.standard_normal(n).astype(np.float32)
        rows.append([(int(i), float(w)) for i, w in zip(ids, weights, strict=True)])
    return rows


def build_table(rows: list[list[tuple[int, float]] | None], column: str = "features") -> pa.Table:
    """Wrap rows in a table with a row_id column and the feature column."""
    return pa.table(
        {
            "row_id": pa.array(range(len(rows)), type=pa.int64()),
            column: pa.array(rows, type=FEATURE_MAP_ARROW_TYPE),
        }
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic feature dataset")
    parser.add_argument("--rows", type=int, default=100, help="Number of rows")
    parser.add_argument("--max-features", type=int, default=32, help="Max entries per row")
    parser.add_argument("--null-rate", type=float, default=0.0, help="Fraction of null rows")
    parser.add_argument("--column", default="features", help="Feature column name")
    parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Output .parquet or .jsonl path",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility",
    )
    args = parser.parse_args()

    print(f"Generating {args.rows} rows (max {args.max_features} features)")

    rows = generate_rows(args.rows, args.max_features, null_rate=args.null_rate, seed=args.seed)
    write_feature_table(build_table(rows, args.column), args.out)

    print(f"Generated {len(rows)} rows -> {args.out}")
    sys.exit(0)


if __name__ == "__main__":
    main()
