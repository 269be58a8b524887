"""
Input validation utilities for PyMatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numbers
import operator

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionMismatchError,
    ShapeMismatchError,
    IndexOutOfRangeError,
    CapabilityError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: Any = None,
) -> NDArray[Any]:
    """
    Validate and convert input to a numeric numpy array.

    Unlike a float-only validator, the element dtype is preserved so that
    integer and complex matrices stay integer and complex.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Optional dtype to convert to

    Returns:
        numpy.ndarray with an integer, floating or complex dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        result = np.asarray(array, dtype=dtype)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # np.bool_ is not a subtype of np.number, so booleans are rejected here too
    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


def check_positive_int(value: Any, name: str) -> int:
    """
    Verify value is a positive integer.

    Args:
        value: Value to check
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is < 1
    """
    if isinstance(value, bool):
        raise ValidationError(f"{name}: expected positive integer, got bool")
    try:
        result = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected positive integer, got {type(value).__name__}"
        ) from e
    if result < 1:
        raise ValidationError(f"{name}: expected positive integer, got {result}")
    return result


def check_data_length(array: NDArray[Any], expected: int, name: str) -> None:
    """
    Verify a flat data buffer has exactly the expected number of elements.

    Args:
        array: Flattened data
        expected: Required element count (rows * cols)
        name: Parameter name for error messages

    Raises:
        DimensionMismatchError: If the length differs
    """
    if array.size != expected:
        raise DimensionMismatchError(
            f"{name}: expected {expected} elements, got {array.size}",
            expected=expected,
            actual=array.size,
        )


def check_index(index: Any, shape: tuple[int, int]) -> tuple[int, int]:
    """
    Verify a (row, col) key lies inside a logical shape.

    Negative indices are out of range; they never wrap around.

    Args:
        index: Key passed to __getitem__/__setitem__
        shape: Logical (rows, cols)

    Returns:
        (row, col) as plain ints

    Raises:
        TypeError: If index is not a pair of integers
        IndexOutOfRangeError: If either coordinate is out of range
    """
    if not isinstance(index, tuple) or len(index) != 2:
        raise TypeError(f"matrix index must be a (row, col) pair, got {index!r}")
    try:
        r, c = operator.index(index[0]), operator.index(index[1])
    except TypeError as e:
        raise TypeError(f"matrix indices must be integers, got {index!r}") from e

    rows, cols = shape
    if not (0 <= r < rows and 0 <= c < cols):
        raise IndexOutOfRangeError(
            f"matrix index ({r}, {c}) out of range for shape {rows}x{cols}",
            index=(r, c),
            shape=shape,
        )
    return r, c


def check_same_shape(
    a_shape: tuple[int, int],
    b_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have the same shape.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if a_shape != b_shape:
        raise ShapeMismatchError(
            f"{operation}: operand shapes differ, "
            f"{a_shape[0]}x{a_shape[1]} vs {b_shape[0]}x{b_shape[1]}",
            expected=a_shape,
            actual=b_shape,
        )


def check_conformant(
    a_shape: tuple[int, int],
    b_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    if a_shape[1] != b_shape[0]:
        raise DimensionMismatchError(
            f"{operation}: left operand has {a_shape[1]} columns but "
            f"right operand has {b_shape[0]} rows",
            expected=a_shape[1],
            actual=b_shape[0],
        )


def check_scalar(value: Any, name: str) -> None:
    """
    Verify value is a real or complex number usable as a scalar operand.

    Raises:
        ValidationError: If value is not a number (bool is rejected)
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Number):
        raise ValidationError(
            f"{name}: expected a numeric scalar, got {type(value).__name__}"
        )


def check_assignable(value: Any, dtype: Any, name: str) -> None:
    """
    Verify a scalar can be stored in a buffer of `dtype` without changing kind.

    Storing 1.5 in an integer buffer would truncate it, and storing a
    complex value in a real buffer would drop the imaginary part.

    Raises:
        ValidationError: If value is not a number
        CapabilityError: If value's kind does not fit dtype
    """
    check_scalar(value, name)
    dtype = np.dtype(dtype)
    if not np.can_cast(np.min_scalar_type(value), dtype, casting='same_kind'):
        raise CapabilityError(
            f"{name}: cannot store {type(value).__name__} {value!r} "
            f"in a {dtype} matrix without losing information",
            dtype=dtype,
        )


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_tolerance(value: float, name: str) -> None:
    """
    Verify a tolerance is a finite, non-negative real number.

    Raises:
        ValidationError: If the tolerance is negative, NaN or infinite
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {type(value).__name__}")
    if not np.isfinite(value) or value < 0:
        raise ValidationError(f"{name}: must be finite and >= 0, got {value}")
