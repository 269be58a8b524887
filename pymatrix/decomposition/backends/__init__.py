"""
QR backends.

Available backends:
    HouseholderQRBackend: Pure Householder reflections over NumPy buffers (default)
    LapackQRBackend: LAPACK reference implementation via SciPy
"""

from pymatrix.decomposition.backends.householder import HouseholderQRBackend
from pymatrix.decomposition.backends.lapack import LapackQRBackend

__all__ = [
    "HouseholderQRBackend",
    "LapackQRBackend",
]
