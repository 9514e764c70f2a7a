"""Feature vector types.

A feature vector is a sparse mapping from feature id (signed 32-bit int)
to weight (32-bit IEEE-754 float). Keys are unique by construction of the
mapping; iteration order of the input carries no meaning.

A sorted feature vector holds the same pairs, with keys iterated in strictly
ascending numeric order. Python dicts preserve insertion order, so a dict
built in key order is the sorted carrier.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TypeAlias

FeatureId: TypeAlias = int
Weight: TypeAlias = float

FeatureVector: TypeAlias = Mapping[FeatureId, Weight]
SortedFeatureVector: TypeAlias = dict[FeatureId, Weight]

# int32 key domain
FEATURE_ID_MIN: int = -(2**31)
FEATURE_ID_MAX: int = 2**31 - 1

# NumPy dtype names for the columnar form
FEATURE_ID_DTYPE = "int32"
WEIGHT_DTYPE = "float32"

__all__ = [
    "FEATURE_ID_DTYPE",
    "FEATURE_ID_MAX",
    "FEATURE_ID_MIN",
    "WEIGHT_DTYPE",
    "FeatureId",
    "FeatureVector",
    "SortedFeatureVector",
    "Weight",
]
