"""
Solver dispatch for QR decomposition.

This module provides the qr() function (public API) and backend selection.
"""

from typing import Literal

from numpy.typing import ArrayLike

from pymatrix.core.capabilities import TIER_REAL_FIELD, require_tier
from pymatrix.core.compute.tolerances import QR_DEGENERACY_ATOL
from pymatrix.core.validation import check_finite
from pymatrix.decomposition.backends.householder import HouseholderQRBackend
from pymatrix.decomposition.solution import QRSolution
from pymatrix.matrix.storage import Matrix


# Type alias for backend selection
BackendChoice = Literal['householder', 'lapack']


def qr(
    a: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'householder',
    degeneracy_tol: float = QR_DEGENERACY_ATOL,
) -> QRSolution:
    """
    QR decomposition of an n x m matrix.

    Computes A = QR where Q (n x n) is orthogonal and R (n x m) is upper
    triangular. All input validation and backend selection happen here.

    Args:
        a: Matrix to decompose, or a 2-D array-like
        backend: Computational backend to use:
            - 'householder': Householder reflections (default)
            - 'lapack': LAPACK via SciPy, for cross-checking
        degeneracy_tol: Absolute threshold on the Householder normalization
            factor (ignored by 'lapack')

    Returns:
        QRSolution with Q, R, rank and diagnostics. Unpacks as (Q, R).

    Raises:
        CapabilityError: If the element type is not real floating point
        ValidationError: If the matrix contains NaN or Inf
        NumericDegeneracyError: If a column vanishes during reflection
        ValueError: If an unknown backend is specified

    Example:
        >>> from pymatrix import Matrix, qr
        >>> a = Matrix(3, 3, [12.0, -51.0, 4.0, 6.0, 167.0, -68.0, -4.0, 24.0, -41.0])
        >>> Q, R = qr(a)
        >>> (Q @ R).approx_equal(a)
        True
    """
    # === Input Validation ===
    # This is the boundary - validate here, trust everywhere else
    matrix = a if isinstance(a, Matrix) else Matrix.from_numpy(a)
    require_tier(matrix.dtype, TIER_REAL_FIELD, 'qr')
    check_finite(matrix.to_numpy(), 'a')

    # === Select Backend ===
    backend_impl = _get_backend(backend, degeneracy_tol)

    # === Solve ===
    result = backend_impl.solve(matrix)

    # === Wrap and Return ===
    return QRSolution(_result=result)


def _get_backend(choice: BackendChoice, degeneracy_tol: float):
    """
    Select and instantiate the appropriate backend.

    Raises:
        ValueError: If unknown backend specified
    """
    if choice == 'householder':
        return HouseholderQRBackend(degeneracy_tol=degeneracy_tol)

    elif choice == 'lapack':
        from pymatrix.decomposition.backends.lapack import LapackQRBackend
        return LapackQRBackend()

    else:
        raise ValueError(f"Unknown backend: {choice!r}")
