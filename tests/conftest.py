"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from genmatrix import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def a22():
    """[[1, 2], [3, 4]] integer matrix."""
    return Matrix.from_data([[1, 2], [3, 4]])


@pytest.fixture
def b22():
    """[[5, 6], [7, 8]] integer matrix."""
    return Matrix.from_data([[5, 6], [7, 8]])


@pytest.fixture
def int_matrix_factory(rng):
    """Build random small-integer matrices of a requested shape."""
    def make(rows, columns):
        return Matrix.from_numpy(rng.integers(-9, 10, size=(rows, columns)))
    return make


@pytest.fixture
def float_matrix_factory(rng):
    """Build random standard-normal float matrices of a requested shape."""
    def make(rows, columns):
        return Matrix.from_numpy(rng.standard_normal((rows, columns)))
    return make
