"""
Matrix product.

Plain inner-product triple loop. No blocking, no BLAS.
"""

import numpy as np

from pymatrix.core.capabilities import TIER_RING, require_tier
from pymatrix.core.validation import check_conformant
from pymatrix.matrix.storage import Matrix


def multiply(a: Matrix, b: Matrix) -> Matrix:
    """
    Compute the matrix product a @ b.

    result[i, j] = sum_k a[i, k] * b[k, j]

    Args:
        a: Left operand (n x p)
        b: Right operand (p x m)

    Returns:
        New n x m matrix; dtype is the NumPy promotion of both operands

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    require_tier(a.dtype, TIER_RING, 'multiply')
    require_tier(b.dtype, TIER_RING, 'multiply')
    check_conformant(a.shape, b.shape, 'multiply')

    left = a.to_numpy()
    right = b.to_numpy()
    n, inner = left.shape
    m = right.shape[1]

    out = np.zeros((n, m), dtype=np.result_type(left.dtype, right.dtype))
    for i in range(n):
        for j in range(m):
            acc = out.dtype.type(0)
            for k in range(inner):
                acc += left[i, k] * right[k, j]
            out[i, j] = acc
    return Matrix.from_numpy(out)
