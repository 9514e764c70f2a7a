"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

import pyarrow as pa
import pytest

from ftvec.dataset import FEATURE_MAP_ARROW_TYPE
from ftvec.types import FEATURE_ID_MAX, FEATURE_ID_MIN

if TYPE_CHECKING:
    from collections.abc import Callable


@pytest.fixture
def rng() -> random.Random:
    """Seeded RNG so property checks are reproducible."""
    return random.Random(20240607)


@pytest.fixture
def random_vector(rng: random.Random) -> Callable[[], dict[int, float]]:
    """Factory for random feature vectors.

    Ids are unique int32 values inserted in random order; about one vector
    in five carries an id at the int32 boundary.
    """

    def _make(max_features: int = 50) -> dict[int, float]:
        n = rng.randint(0, max_features)
        ids = rng.sample(range(-1000, 1000), n)
        if n and rng.random() < 0.2:
            ids[0] = rng.choice([FEATURE_ID_MIN, FEATURE_ID_MAX])
        return {i: rng.uniform(-10.0, 10.0) for i in ids}

    return _make


@pytest.fixture
def feature_map_array() -> pa.MapArray:
    """Map column with unsorted rows, an empty row and a null row."""
    return pa.array(
        [
            [(3, 1.0), (1, 2.5), (2, 0.0)],
            [],
            None,
            [(-5, 0.1), (5, 0.2), (0, 0.3)],
            [(42, 7.0)],
        ],
        type=FEATURE_MAP_ARROW_TYPE,
    )
