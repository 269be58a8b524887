"""
Exception hierarchy for PyMatrix.

All exceptions inherit from PyMatrixError to allow catching any
library-specific error.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

from typing import Any


class PyMatrixError(Exception):
    """Base exception for all PyMatrix errors."""
    pass


class ValidationError(PyMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionMismatchError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when constructor data has the wrong length or when the
    operands of a matrix product are not conformant.

    Attributes:
        expected: Expected size or shape, if known
        actual: Size or shape that was supplied, if known
    """

    def __init__(
        self,
        message: str,
        expected: Any = None,
        actual: Any = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class ShapeMismatchError(DimensionMismatchError):
    """Operands of an elementwise operation have different logical shapes."""
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Element access outside the logical bounds of a matrix.

    Attributes:
        index: The (row, col) pair that was requested
        shape: Logical (rows, cols) of the matrix
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class CapabilityError(ValidationError, TypeError):
    """
    Element type lacks a capability required by an operation.

    Raised, for example, when sin() or qr() is called on an integer
    matrix.

    Attributes:
        dtype: The element dtype that was rejected
        required_tier: Name of the capability tier the operation needs
    """

    def __init__(
        self,
        message: str,
        dtype: Any = None,
        required_tier: str | None = None,
    ):
        super().__init__(message)
        self.dtype = dtype
        self.required_tier = required_tier


class NumericalError(PyMatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class NumericDegeneracyError(NumericalError):
    """
    QR normalization factor is zero or too small to divide by.

    Raised when a column's trailing segment vanishes during Householder
    QR, which would otherwise propagate non-finite values.

    Attributes:
        column: Index of the column being reflected
        factor: The normalization factor that was rejected
        threshold: Absolute threshold the factor fell below
    """

    def __init__(
        self,
        message: str,
        column: int | None = None,
        factor: float | None = None,
        threshold: float | None = None,
    ):
        super().__init__(message)
        self.column = column
        self.factor = factor
        self.threshold = threshold
