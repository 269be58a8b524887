"""
PyMatrix: dense, element-type-generic matrices.

Matrices store a flat row-major NumPy buffer plus a transpose flag, and
support elementwise and scalar arithmetic, transcendental maps, the
matrix product and a Householder QR decomposition.

Submodules:
    matrix: Storage, comparison, arithmetic, product, constructors
    decomposition: QR decomposition
    core: Exceptions, capability tiers, validation, result envelope
"""

from pymatrix._version import __version__

from pymatrix import matrix
from pymatrix import decomposition
from pymatrix.matrix import (
    Matrix,
    equals_exact,
    equals_approx,
    multiply,
    zeros,
    ones,
    eye,
    format_matrix,
)
from pymatrix.decomposition import qr, QRSolution
from pymatrix.core.exceptions import (
    PyMatrixError,
    ValidationError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    CapabilityError,
    NumericalError,
    NumericDegeneracyError,
)

__all__ = [
    "__version__",
    "matrix",
    "decomposition",
    "Matrix",
    "equals_exact",
    "equals_approx",
    "multiply",
    "zeros",
    "ones",
    "eye",
    "format_matrix",
    "qr",
    "QRSolution",
    "PyMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "CapabilityError",
    "NumericalError",
    "NumericDegeneracyError",
]
