"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinalg.dense import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_2x2():
    """[[1, 2], [3, 4]]: det = -2, trace = 5."""
    return Matrix.from_array([[1.0, 2.0], [3.0, 4.0]])


@pytest.fixture
def symmetric_2x2():
    """[[2, 1], [1, 2]]: eigenvalues 3 and 1."""
    return Matrix.from_array([[2.0, 1.0], [1.0, 2.0]])


@pytest.fixture
def well_conditioned(rng):
    """Random 5x5 matrix with a dominant diagonal (safely invertible)."""
    data = rng.standard_normal((5, 5)) + 5.0 * np.eye(5)
    return Matrix.from_array(data)
