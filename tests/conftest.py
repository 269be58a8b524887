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
def x23():
    """2x3 matrix |0 1 2| / |10 11 12|."""
    return Matrix(2, 3, [0.0, 1.0, 2.0, 10.0, 11.0, 12.0])


@pytest.fixture
def well_conditioned():
    """Classic 3x3 QR example with full rank."""
    return Matrix(3, 3, [12.0, -51.0, 4.0, 6.0, 167.0, -68.0, -4.0, 24.0, -41.0])


@pytest.fixture
def zero_column():
    """3x3 matrix whose middle column is all zeros."""
    return Matrix(3, 3, [1.0, 0.0, 2.0, 3.0, 0.0, 4.0, 5.0, 0.0, 7.0])
