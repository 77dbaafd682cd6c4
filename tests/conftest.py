"""
pytest configuration and shared fixtures.
"""

import numpy as np
import pytest

from pylinalg.elements import DOUBLE, RATIONAL
from pylinalg.matrix import Matrix
from pylinalg.vector import Vector


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def q():
    """Shorthand for building rationals: q('1/2'), q(3)."""
    return RATIONAL.get


@pytest.fixture
def rational_matrix():
    """Invertible 3x3 rational matrix with determinant -3."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 10]], RATIONAL)


@pytest.fixture
def singular_matrix():
    """Rank 2 rational matrix (third row = 2*second - first)."""
    return Matrix([[1, 2, 3], [4, 5, 6], [7, 8, 9]], RATIONAL)


@pytest.fixture
def rational_vector():
    return Vector([1, '1/2', -3], RATIONAL)


@pytest.fixture
def double_matrix(rng):
    """Well-conditioned random 4x4 matrix of DoubleWrappers."""
    values = rng.standard_normal((4, 4)) + 4 * np.eye(4)
    return Matrix(values.tolist(), DOUBLE)
