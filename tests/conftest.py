"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pymatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def m3():
    """Invertible 3x3 matrix with an integer inverse."""
    return Matrix([
        [1, 3, 3],
        [1, 4, 3],
        [1, 3, 4],
    ])


@pytest.fixture
def m3_inverse():
    """Exact inverse of the m3 fixture."""
    return Matrix([
        [7, -3, -3],
        [-1, 1, 0],
        [-1, 0, 1],
    ])


@pytest.fixture
def m4():
    """4x4 parent matrix for view tests."""
    return Matrix([
        [1, 2, 42, 21],
        [12, 52, 32, 21],
        [3, 22, 22, 1],
        [4, 23, 12, 1],
    ])


@pytest.fixture
def random_invertible(rng):
    """Diagonally dominant (hence invertible) random matrices."""
    def make(n):
        a = rng.standard_normal((n, n))
        a += np.diag(np.abs(a).sum(axis=1) + 1.0)
        return a
    return make
