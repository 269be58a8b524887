"""
Shared helpers for QR backends.
"""

import warnings

import numpy as np
from numpy.typing import NDArray
from typing import Any

from pymatrix.core.compute.tolerances import rank_tolerance


def numerical_rank(diagonal: NDArray[Any], shape: tuple[int, int]) -> int:
    """
    Count diagonal entries of R that are distinguishable from zero.

    Tolerance is max(n, m) * eps * max|diag(R)|, with eps taken from the
    dtype of `diagonal`.
    """
    diag_abs = np.abs(diagonal)
    if len(diag_abs) == 0 or diag_abs.max() == 0:
        return 0
    tol = rank_tolerance(shape, float(diag_abs.max()), diag_abs.dtype)
    return int(np.sum(diag_abs > tol))


def rank_warnings(rank: int, shape: tuple[int, int]) -> tuple[str, ...]:
    """
    Emit and return a RuntimeWarning message when rank < min(n, m).

    The message is also returned so backends can record it on the Result.
    """
    expected = min(shape)
    if rank >= expected:
        return ()
    message = (
        f"Matrix is numerically rank-deficient: rank={rank}, expected={expected}. "
        f"R has near-zero diagonal entries and Q is not uniquely determined."
    )
    warnings.warn(message, RuntimeWarning, stacklevel=3)
    return (message,)
