"""
Tolerance constants for matrix comparison and QR.

Comparison is absolute by default: APPROX_EPS is not scale-invariant and
will misclassify very large or very small matrices. Callers that need a
scale-aware comparison opt in through `rtol` or the RELATIVE tier.

Used by the comparator, the QR backends and the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Default absolute threshold for equals_approx
APPROX_EPS = 5e-10

# Absolute comparison, the comparator default
ABSOLUTE = ToleranceTier(
    rtol=0.0,
    atol=APPROX_EPS,
    name='absolute',
    description='Absolute elementwise tolerance of 5e-10',
)

# Scale-aware comparison for large-magnitude data
RELATIVE = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='relative',
    description='Relative tolerance with a small absolute floor',
)

# Householder normalization factors at or below this abort the decomposition
QR_DEGENERACY_ATOL = 1e-300


def rank_tolerance(
    shape: tuple[int, int],
    max_diagonal: float,
    dtype: DTypeLike = np.float64,
) -> float:
    """
    Threshold below which a diagonal entry of R counts as zero.

    Scales machine epsilon of `dtype` by max(n, m) * max|diag(R)|, so
    float32 factors get a correspondingly looser bound.
    """
    return max(shape) * float(np.finfo(dtype).eps) * max_diagonal
