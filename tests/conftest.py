"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pyalgebra import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def well_conditioned_matrix(rng):
    """Diagonally dominant 4x4 float matrix (always invertible)."""
    a = rng.standard_normal((4, 4))
    a += np.diag(np.abs(a).sum(axis=1) + 1.0)
    return Matrix(a)


@pytest.fixture
def singular_matrix():
    """3x3 integer matrix whose third row is the sum of the first two."""
    return Matrix([[1, 2, 3], [4, 5, 6], [5, 7, 9]])
