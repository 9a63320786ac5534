"""
Pytest configuration and global fixtures.

This module provides shared test fixtures used across the test suite,
including engine configurations and sample weight sets.
"""

import random

import numpy as np
import pytest

from src.config.parameters import EqualizerParameters
from src.equalizer.engine import WeightEqualizer


SEED = 42


def _apply_global_seed():
    """Apply global deterministic seed for tests.

    Ensures repeatable outcomes for any test relying on random or numpy generation.
    """
    random.seed(SEED)
    np.random.seed(SEED)


_apply_global_seed()


@pytest.fixture()
def default_parameters():
    """
    Provide default equalizer parameters for testing.

    Examples:
        >>> def test_something(default_parameters):
        ...     assert default_parameters.rounding_dp == 1
    """
    return EqualizerParameters()


@pytest.fixture()
def engine(default_parameters):
    """Provide a WeightEqualizer with default parameters."""
    return WeightEqualizer(default_parameters)


@pytest.fixture()
def outlier_weights():
    """Weights needing both floor and ceiling correction."""
    return {"a": 1.0, "b": 2.0, "c": -3.0}


@pytest.fixture()
def uniform_weights():
    """Equal weights whose rescale leaves rounding drift for a target of 10."""
    return {"x": 1.0, "y": 1.0, "z": 1.0}


@pytest.fixture()
def random_weight_sets():
    """
    Provide a factory for seeded random weight sets.

    Returns:
        Callable(count, size) returning a list of dicts with mixed-sign weights.

    Examples:
        >>> def test_many(random_weight_sets):
        ...     for weights in random_weight_sets(count=5, size=4):
        ...         assert len(weights) == 4
    """

    def _create(count: int = 50, size: int = 6) -> list[dict[str, float]]:
        rng = np.random.default_rng(SEED)
        sets = []
        for _ in range(count):
            values = rng.uniform(-20.0, 80.0, size=size)
            sets.append({f"k{i}": float(v) for i, v in enumerate(values)})
        return sets

    return _create
