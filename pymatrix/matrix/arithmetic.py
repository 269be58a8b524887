"""
Elementwise and scalar arithmetic.

Every function returns a fresh matrix of the operand's logical shape.
Binary elementwise operations require identical shapes. Result dtypes
follow NumPy promotion of the operands.

Capability requirements:
    ring:       add, subtract, hadamard, scalar +, -, *, absolute
    real_field: scalar division and the transcendental maps
"""

from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from pymatrix.core.capabilities import TIER_RING, TIER_REAL_FIELD, require_tier
from pymatrix.core.validation import check_same_shape, check_scalar
from pymatrix.matrix.storage import Matrix


def _elementwise(a: Matrix, b: Matrix, op: Callable[[Any, Any], Any], name: str) -> Matrix:
    require_tier(a.dtype, TIER_RING, name)
    require_tier(b.dtype, TIER_RING, name)
    check_same_shape(a.shape, b.shape, name)
    return Matrix.from_numpy(op(a.to_numpy(), b.to_numpy()))


def _with_scalar(a: Matrix, s: Any, op: Callable[[Any, Any], Any], name: str) -> Matrix:
    require_tier(a.dtype, TIER_RING, name)
    check_scalar(s, 'scalar')
    return Matrix.from_numpy(op(a.to_numpy(), s))


# ═══════════════════════════════════════════════════════════════════════
# Matrix-matrix
# ═══════════════════════════════════════════════════════════════════════


def add(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a + b."""
    return _elementwise(a, b, np.add, 'add')


def subtract(a: Matrix, b: Matrix) -> Matrix:
    """Elementwise a - b."""
    return _elementwise(a, b, np.subtract, 'subtract')


def hadamard(a: Matrix, b: Matrix) -> Matrix:
    """Hadamard (elementwise) product."""
    return _elementwise(a, b, np.multiply, 'hadamard')


# ═══════════════════════════════════════════════════════════════════════
# Matrix-scalar
# ═══════════════════════════════════════════════════════════════════════


def matrix_plus_scalar(a: Matrix, s: Any) -> Matrix:
    return _with_scalar(a, s, lambda x, y: x + y, 'matrix_plus_scalar')


def scalar_plus_matrix(s: Any, a: Matrix) -> Matrix:
    return _with_scalar(a, s, lambda x, y: y + x, 'scalar_plus_matrix')


def matrix_minus_scalar(a: Matrix, s: Any) -> Matrix:
    """a_ij - s"""
    return _with_scalar(a, s, lambda x, y: x - y, 'matrix_minus_scalar')


def scalar_minus_matrix(s: Any, a: Matrix) -> Matrix:
    """s - a_ij"""
    return _with_scalar(a, s, lambda x, y: y - x, 'scalar_minus_matrix')


def matrix_times_scalar(a: Matrix, s: Any) -> Matrix:
    return _with_scalar(a, s, lambda x, y: x * y, 'matrix_times_scalar')


def scalar_times_matrix(s: Any, a: Matrix) -> Matrix:
    return _with_scalar(a, s, lambda x, y: y * x, 'scalar_times_matrix')


def matrix_divided_by_scalar(a: Matrix, s: Any) -> Matrix:
    """
    a_ij / s. The only supported division form.

    Raises:
        CapabilityError: If the element type is not real floating point
        ZeroDivisionError: If s is zero
    """
    require_tier(a.dtype, TIER_REAL_FIELD, 'matrix_divided_by_scalar')
    check_scalar(s, 'scalar')
    if s == 0:
        raise ZeroDivisionError("matrix_divided_by_scalar: division by zero")
    return Matrix.from_numpy(a.to_numpy() / s)


# ═══════════════════════════════════════════════════════════════════════
# Unary maps
# ═══════════════════════════════════════════════════════════════════════


def _apply(a: Matrix, fn: Callable[[NDArray[Any]], NDArray[Any]], name: str, tier: str) -> Matrix:
    # Domain errors (sqrt(-1), log(0)) follow IEEE semantics: nan/inf
    # with a NumPy RuntimeWarning.
    require_tier(a.dtype, tier, name)
    return Matrix.from_numpy(fn(a.to_numpy()))


def sin(a: Matrix) -> Matrix:
    return _apply(a, np.sin, 'sin', TIER_REAL_FIELD)


def cos(a: Matrix) -> Matrix:
    return _apply(a, np.cos, 'cos', TIER_REAL_FIELD)


def tan(a: Matrix) -> Matrix:
    return _apply(a, np.tan, 'tan', TIER_REAL_FIELD)


def arcsin(a: Matrix) -> Matrix:
    return _apply(a, np.arcsin, 'arcsin', TIER_REAL_FIELD)


def arccos(a: Matrix) -> Matrix:
    return _apply(a, np.arccos, 'arccos', TIER_REAL_FIELD)


def arctan(a: Matrix) -> Matrix:
    return _apply(a, np.arctan, 'arctan', TIER_REAL_FIELD)


def sinh(a: Matrix) -> Matrix:
    return _apply(a, np.sinh, 'sinh', TIER_REAL_FIELD)


def cosh(a: Matrix) -> Matrix:
    return _apply(a, np.cosh, 'cosh', TIER_REAL_FIELD)


def tanh(a: Matrix) -> Matrix:
    return _apply(a, np.tanh, 'tanh', TIER_REAL_FIELD)


def sqrt(a: Matrix) -> Matrix:
    return _apply(a, np.sqrt, 'sqrt', TIER_REAL_FIELD)


def ln(a: Matrix) -> Matrix:
    """Natural logarithm."""
    return _apply(a, np.log, 'ln', TIER_REAL_FIELD)


def log10(a: Matrix) -> Matrix:
    return _apply(a, np.log10, 'log10', TIER_REAL_FIELD)


def log2(a: Matrix) -> Matrix:
    return _apply(a, np.log2, 'log2', TIER_REAL_FIELD)


def exp(a: Matrix) -> Matrix:
    return _apply(a, np.exp, 'exp', TIER_REAL_FIELD)


def absolute(a: Matrix) -> Matrix:
    """|a_ij|. Complex elements map to their real modulus."""
    return _apply(a, np.abs, 'absolute', TIER_RING)
