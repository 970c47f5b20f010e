"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from matrixmath.matrix import SquareMatrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned(rng):
    """Factory for diagonally dominant (hence invertible) square matrices."""
    def make(n):
        A = rng.uniform(-1.0, 1.0, (n, n)) + n * np.eye(n)
        return SquareMatrix(A)
    return make


@pytest.fixture
def worked_example_7x7():
    """The 7x7 matrix from the worked inversion example."""
    return SquareMatrix([
        [1,  2,  3,  4,  0, -1,  0],
        [0,  1,  1,  0,  1,  0,  0],
        [1,  0,  0,  0,  0,  1,  0],
        [0,  2,  2,  2, -2,  1,  3],
        [1,  3,  5,  7,  0, -1,  1],
        [0,  0,  1,  0,  1,  0,  0],
        [9, -2,  0,  0,  0,  2,  0],
    ])
