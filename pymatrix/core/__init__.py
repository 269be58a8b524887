"""
Core infrastructure for PyMatrix.

This module provides shared abstractions and utilities used by the matrix
storage, arithmetic and decomposition subpackages.

Key components:
    capabilities: Element type capability tiers
    protocols: Ring, RealField, DecompositionBackend protocols
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing and tolerance constants
"""

from pymatrix.core.protocols import Ring, RealField, DecompositionBackend
from pymatrix.core.result import Result
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
    # Protocols
    "Ring",
    "RealField",
    "DecompositionBackend",
    # Result
    "Result",
    # Exceptions
    "PyMatrixError",
    "ValidationError",
    "DimensionMismatchError",
    "ShapeMismatchError",
    "IndexOutOfRangeError",
    "CapabilityError",
    "NumericalError",
    "NumericDegeneracyError",
]
