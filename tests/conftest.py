"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylean import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def int_matrix():
    """2 rows x 3 columns of int64: [[1, 2, 3], [4, 5, 6]]."""
    return Matrix(np.int64, rows=[[1, 2, 3], [4, 5, 6]])


@pytest.fixture
def square_float():
    """Invertible 3x3 float64 matrix, determinant -45."""
    return Matrix(np.float64, rows=[[2, 2, 5], [4, 5, 6], [5, 2, 2]])


@pytest.fixture
def unimodular_int():
    """3x3 int64 matrix with determinant 1 (integer inverse is exact)."""
    return Matrix(np.int64, rows=[[1, 2, 3], [0, 1, 4], [5, 6, 0]])
