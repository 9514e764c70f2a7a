"""ftvec - sparse feature vector transforms for UDF hosts.

Core:
- sort_by_feature: feature vector -> feature vector sorted by feature id

Host boundary lives in ftvec.udf (row-at-a-time) and ftvec.columnar
(Arrow column-at-a-time).

Note: version is sourced from package metadata (pyproject.toml).
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from ftvec.sorting import sort_by_feature, sort_by_feature_arrays


def _pkg_version() -> str:
    try:
        return version("ftvec")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _pkg_version()

__all__ = ["__version__", "sort_by_feature", "sort_by_feature_arrays"]
