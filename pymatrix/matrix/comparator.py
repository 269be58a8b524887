"""
Exact and tolerance-based matrix equality.

Both predicates are total: matrices of different logical shape compare
unequal instead of raising.
"""

import numpy as np

from pymatrix.core.compute.tolerances import ABSOLUTE, ToleranceTier
from pymatrix.core.validation import check_tolerance
from pymatrix.matrix.storage import Matrix


def equals_exact(a: Matrix, b: Matrix) -> bool:
    """True iff `a` and `b` have the same logical shape and equal elements."""
    if a.shape != b.shape:
        return False
    return bool(np.array_equal(a.to_numpy(), b.to_numpy()))


def equals_approx(
    a: Matrix,
    b: Matrix,
    eps: float | None = None,
    *,
    rtol: float | None = None,
    tier: ToleranceTier = ABSOLUTE,
) -> bool:
    """
    Tolerance-based equality.

    True iff the shapes match and every pair of elements satisfies
    ``|a_ij - b_ij| <= eps + rtol * |b_ij|``. The default ABSOLUTE tier
    (``eps=5e-10``, ``rtol=0``) is a purely absolute test, which is not
    scale-invariant; pass ``tier=RELATIVE`` for large-magnitude data.

    Args:
        a, b: Matrices to compare
        eps: Absolute tolerance, overriding ``tier.atol``
        rtol: Relative tolerance measured against `b`, overriding ``tier.rtol``
        tier: ToleranceTier supplying the tolerances not given explicitly

    Raises:
        ValidationError: If eps or rtol is negative or not finite
    """
    if eps is None:
        eps = tier.atol
    if rtol is None:
        rtol = tier.rtol
    check_tolerance(eps, 'eps')
    check_tolerance(rtol, 'rtol')
    if a.shape != b.shape:
        return False

    left = a.to_numpy()
    right = b.to_numpy()
    bound = eps + rtol * np.abs(right)
    return bool(np.all(np.abs(left - right) <= bound))
