"""Project CLI entrypoint.

Provides CLI commands for ftvec:
- ftvec sort: Sort the feature column of a .parquet/.jsonl dataset
- ftvec describe: Bind a function against a type name and show the plan string
- ftvec list: List registered functions

Exit codes: 0 ok, 1 input not found, 2 usage, bind-time or data error.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from ftvec.env_parse import ConfigError
from ftvec.udf.errors import UDFError

logger = logging.getLogger("ftvec")


def _pkg_version() -> str:
    try:
        return version("ftvec")
    except PackageNotFoundError:
        return "0.0.0"


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _cmd_sort(args: argparse.Namespace) -> int:
    """Sort the feature column of a dataset."""
    # Lazy imports for fast CLI startup
    from ftvec.columnar import sort_table_column  # noqa: PLC0415
    from ftvec.config import load_config  # noqa: PLC0415
    from ftvec.dataset import read_feature_table, write_feature_table  # noqa: PLC0415

    config = load_config(Path(args.config) if args.config else None)
    if args.column:
        config = replace(config, column=args.column)
    if args.compression:
        config = replace(config, compression=args.compression)
    _setup_logging("DEBUG" if args.verbose else config.log_level)

    in_path = Path(args.input)
    out_path = Path(args.out)
    if not in_path.exists():
        print(f"Input not found: {in_path}", file=sys.stderr)
        return 1

    logger.info("Reading %s (column=%s)", in_path, config.column)
    table = read_feature_table(in_path, config.column)
    result = sort_table_column(table, config.column)
    write_feature_table(result, out_path, compression=config.parquet_compression)

    print(f"Sorted {result.num_rows} rows: {in_path} -> {out_path}")
    return 0


def _cmd_describe(args: argparse.Namespace) -> int:
    """Bind a function against argument type names."""
    from ftvec.udf import create_udf, parse_type_name  # noqa: PLC0415

    udf = create_udf(args.name)
    out_type = udf.initialize([parse_type_name(t) for t in args.types])
    children = args.children or [f"_col{i}" for i in range(len(args.types))]
    print(udf.display_string(children))
    print(f"returns: {out_type.type_name}")
    return 0


def _cmd_list(_args: argparse.Namespace) -> int:
    from ftvec.udf import list_udfs  # noqa: PLC0415

    for name in list_udfs():
        print(name)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ftvec", description="ftvec feature vector CLI")
    parser.add_argument("--version", action="version", version=f"ftvec {_pkg_version()}")

    sub = parser.add_subparsers(dest="cmd", required=True)

    p_sort = sub.add_parser("sort", help="Sort the feature column of a dataset by feature id")
    p_sort.add_argument("--input", required=True, help="Input .parquet or .jsonl file")
    p_sort.add_argument("--out", required=True, help="Output .parquet or .jsonl file")
    p_sort.add_argument("--column", help="Feature column name (default: features)")
    p_sort.add_argument(
        "--compression",
        choices=["snappy", "zstd", "gzip", "none"],
        help="Parquet compression (default: snappy)",
    )
    p_sort.add_argument("--config", help="YAML config file")
    p_sort.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    p_desc = sub.add_parser("describe", help="Bind a function and print its plan string")
    p_desc.add_argument("types", nargs="+", help="Argument type names, e.g. 'map<int,float>'")
    p_desc.add_argument("--name", default="sort_by_feature", help="Function name")
    p_desc.add_argument(
        "--children", nargs="*", help="Argument expressions for the plan string"
    )

    sub.add_parser("list", help="List registered functions")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    handlers = {
        "sort": _cmd_sort,
        "describe": _cmd_describe,
        "list": _cmd_list,
    }
    try:
        return handlers[args.cmd](args)
    except (UDFError, ConfigError, KeyError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2
    except FileNotFoundError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
