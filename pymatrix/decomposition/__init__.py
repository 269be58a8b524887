"""
Matrix decompositions.

Public API:
    qr(a, ...) -> QRSolution

Example:
    >>> from pymatrix.decomposition import qr
    >>> Q, R = qr(a)
    >>> print(qr(a).summary())
"""

from pymatrix.decomposition.solution import QRParams, QRSolution
from pymatrix.decomposition.solvers import qr

__all__ = [
    "qr",
    "QRParams",
    "QRSolution",
]
