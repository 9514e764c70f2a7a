"""Sort a sparse feature vector by feature id.

Provides:
- sort_by_feature: mapping form, one feature vector per call
- sort_by_feature_arrays: parallel-array form (NumPy ids + weights)

Both are pure: the argument is never mutated, a new result is allocated on
every call, and nothing is cached between calls. Weights are passed through
unchanged (zero, negative, NaN and infinities included).
"""

from __future__ import annotations

import numpy as np

from ftvec.types import FEATURE_ID_DTYPE, WEIGHT_DTYPE, FeatureVector, SortedFeatureVector


def sort_by_feature(vector: FeatureVector) -> SortedFeatureVector:
    """Return the feature vector with keys in ascending order.

    Args:
        vector: Mapping of feature id -> weight. May be empty.

    Returns:
        New dict holding exactly the same (id, weight) pairs, iterated in
        strictly ascending id order.

    Example:
        >>> list(sort_by_feature({3: 1.0, 1: 2.5, 2: 0.0}).items())
        [(1, 2.5), (2, 0.0), (3, 1.0)]
    """
    return {k: vector[k] for k in sorted(vector)}


def sort_by_feature_arrays(
    ids: np.ndarray,
    weights: np.ndarray,
) -> tuple[np.ndarray, np.ndarray]:
    """Sort parallel id/weight arrays by id.

    Args:
        ids: 1D array of feature ids (unique).
        weights: 1D array of weights, same length as ids.

    Returns:
        Tuple of new (int32 ids, float32 weights) arrays in ascending id order.

    Raises:
        ValueError: If the arrays are not 1D or differ in length.
    """
    ids = np.asarray(ids)
    weights = np.asarray(weights)
    if ids.ndim != 1 or weights.ndim != 1:
        raise ValueError(f"expected 1D arrays, got shapes {ids.shape} and {weights.shape}")
    if len(ids) != len(weights):
        raise ValueError(f"ids length {len(ids)} != weights length {len(weights)}")

    order = np.argsort(ids, kind="stable")
    return (
        ids[order].astype(FEATURE_ID_DTYPE, copy=True),
        weights[order].astype(WEIGHT_DTYPE, copy=True),
    )


__all__ = ["sort_by_feature", "sort_by_feature_arrays"]
