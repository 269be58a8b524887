"""
Convenience constructors: zeros, ones, identity, random fill, nested rows.
"""

from typing import Any, Sequence

import numpy as np
from numpy.typing import DTypeLike

from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.validation import check_positive_int
from pymatrix.matrix.storage import Matrix


def zeros(rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
    return Matrix(rows, cols, dtype=dtype)


def ones(rows: int, cols: int, dtype: DTypeLike = np.float64) -> Matrix:
    rows = check_positive_int(rows, 'rows')
    cols = check_positive_int(cols, 'cols')
    return Matrix(rows, cols, np.ones(rows * cols, dtype=dtype))


def eye(n: int, dtype: DTypeLike = np.float64) -> Matrix:
    """n x n identity matrix."""
    n = check_positive_int(n, 'n')
    result = Matrix(n, n, dtype=dtype)
    for i in range(n):
        result[i, i] = 1
    return result


def random(
    rows: int,
    cols: int,
    *,
    rng: np.random.Generator | None = None,
    seed: int | None = None,
) -> Matrix:
    """
    Matrix of float64 samples drawn uniformly from [0, 1).

    Args:
        rows, cols: Shape
        rng: Generator to draw from; takes precedence over `seed`
        seed: Seed for a fresh default_rng when `rng` is None
    """
    rows = check_positive_int(rows, 'rows')
    cols = check_positive_int(cols, 'cols')
    if rng is None:
        rng = np.random.default_rng(seed)
    return Matrix(rows, cols, rng.random(rows * cols))


def from_rows(rows: Sequence[Sequence[Any]], dtype: DTypeLike = None) -> Matrix:
    """
    Build a matrix from nested row sequences, e.g. [[0, 1, 2], [10, 11, 12]].

    Raises:
        DimensionMismatchError: If rows are ragged or the input is not 2-D
    """
    try:
        grid = np.array(rows, dtype=dtype)
    except ValueError as e:
        # NumPy refuses ragged nested sequences
        raise DimensionMismatchError(f"rows: cannot build a rectangular array: {e}") from e
    return Matrix.from_numpy(grid)
