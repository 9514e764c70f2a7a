"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def unsorted_vector() -> dict[int, float]:
    """Feature vector built in non-ascending key order."""
    return {3: 1.0, 1: 2.5, 2: 0.0}


@pytest.fixture
def signed_vector() -> dict[int, float]:
    """Feature vector with negative, zero and positive ids."""
    return {-5: 0.1, 5: 0.2, 0: 0.3}
