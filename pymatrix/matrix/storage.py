"""
Dense matrix storage.

A Matrix owns a flat, row-major NumPy buffer over its *physical* shape and
a transpose flag. Logical (row, col) access is resolved to a physical
offset using the original physical column count as stride, so flipping
the flag is all a transpose has to do to the layout.

Every matrix owns its buffer exclusively. transpose() flips the flag over
an eagerly copied buffer instead of sharing one, so mutating a matrix
never changes another live matrix.
"""

from __future__ import annotations

import numbers
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.compute.tolerances import ABSOLUTE, ToleranceTier
from pymatrix.core.exceptions import DimensionMismatchError
from pymatrix.core.protocols import Ring
from pymatrix.core.validation import (
    check_array,
    check_data_length,
    check_index,
    check_positive_int,
    check_assignable,
)

T = TypeVar('T', bound=Ring)


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Number) and not isinstance(value, (bool, np.bool_))


class Matrix(Generic[T]):
    """
    Dense, element-type-generic matrix.

    Construction:
        Matrix(2, 3, [0, 1, 2, 10, 11, 12])    # row-major data
        Matrix(2, 3)                           # zero-filled float64
        Matrix(2, 3, dtype=np.int64)           # zero-filled int64
        Matrix.from_numpy(np.eye(3))           # from a 2-D array

    Operators follow NumPy conventions: `*` is the Hadamard product (or
    scalar broadcast), `@` is the matrix product, and `/` only divides
    by a scalar.

    Raises:
        ValidationError: If rows/cols are not positive ints or data is not numeric
        DimensionMismatchError: If non-empty data has length != rows * cols
    """

    __slots__ = ('_data', '_physical_rows', '_physical_cols', '_transposed')

    # Make NumPy scalars and arrays defer to our reflected operators
    __array_ufunc__ = None
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        rows: int,
        cols: int,
        data: ArrayLike | None = None,
        *,
        dtype: DTypeLike = None,
    ):
        rows = check_positive_int(rows, 'rows')
        cols = check_positive_int(cols, 'cols')

        if data is None:
            values = check_array(np.zeros(0, dtype=dtype), 'dtype')
        else:
            values = check_array(data, 'data', dtype=dtype).ravel()

        if values.size == 0:
            buffer = np.zeros(rows * cols, dtype=values.dtype)
        else:
            check_data_length(values, rows * cols, 'data')
            buffer = values.copy()

        self._data: NDArray[Any] = buffer
        self._physical_rows = rows
        self._physical_cols = cols
        self._transposed = False

    @classmethod
    def _wrap(
        cls,
        buffer: NDArray[Any],
        physical_rows: int,
        physical_cols: int,
        transposed: bool = False,
    ) -> Matrix[Any]:
        """Adopt an already-owned flat buffer without copying or validating."""
        obj = cls.__new__(cls)
        obj._data = buffer
        obj._physical_rows = physical_rows
        obj._physical_cols = physical_cols
        obj._transposed = transposed
        return obj

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a matrix from a 2-D array-like. The data is always copied.

        Raises:
            DimensionMismatchError: If the input is not 2-D
            ValidationError: If the input is empty or non-numeric
        """
        arr = check_array(array, 'array')
        if arr.ndim != 2:
            raise DimensionMismatchError(
                f"array: expected 2D array, got {arr.ndim}D with shape {arr.shape}",
                expected=2,
                actual=arr.ndim,
            )
        rows = check_positive_int(arr.shape[0], 'rows')
        cols = check_positive_int(arr.shape[1], 'cols')
        return cls._wrap(arr.flatten(), rows, cols)

    # ------------------------------------------------------------------
    # Shape
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        """Number of logical rows."""
        return self._physical_cols if self._transposed else self._physical_rows

    @property
    def cols(self) -> int:
        """Number of logical columns."""
        return self._physical_rows if self._transposed else self._physical_cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def size(self) -> int:
        return self._data.size

    @property
    def physical_shape(self) -> tuple[int, int]:
        """Shape of the row-major backing buffer."""
        return (self._physical_rows, self._physical_cols)

    @property
    def transposed(self) -> bool:
        return self._transposed

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def data(self) -> NDArray[Any]:
        """Copy of the flat physical buffer."""
        return self._data.copy()

    def resize(self, rows: int, cols: int) -> None:
        """
        Reallocate the buffer to `rows` x `cols`, zero-filled.

        Prior contents are discarded and the transpose flag is reset.
        The element dtype is kept.
        """
        rows = check_positive_int(rows, 'rows')
        cols = check_positive_int(cols, 'cols')
        self._data = np.zeros(rows * cols, dtype=self._data.dtype)
        self._physical_rows = rows
        self._physical_cols = cols
        self._transposed = False

    # ------------------------------------------------------------------
    # Element access
    # ------------------------------------------------------------------

    def _offset(self, r: int, c: int) -> int:
        if self._transposed:
            return c * self._physical_cols + r
        return r * self._physical_cols + c

    def __getitem__(self, key: tuple[int, int]) -> T:
        r, c = check_index(key, self.shape)
        return self._data[self._offset(r, c)].item()

    def __setitem__(self, key: tuple[int, int], value: T) -> None:
        r, c = check_index(key, self.shape)
        check_assignable(value, self.dtype, 'value')
        self._data[self._offset(r, c)] = value

    # ------------------------------------------------------------------
    # Copies and views
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix[T]:
        """Return the transpose: flipped flag over an independent buffer copy."""
        return Matrix._wrap(
            self._data.copy(),
            self._physical_rows,
            self._physical_cols,
            not self._transposed,
        )

    @property
    def T(self) -> Matrix[T]:
        return self.transpose()

    def copy(self) -> Matrix[T]:
        return Matrix._wrap(
            self._data.copy(),
            self._physical_rows,
            self._physical_cols,
            self._transposed,
        )

    def astype(self, dtype: DTypeLike) -> Matrix[Any]:
        """Copy with elements converted to `dtype`."""
        check_array(np.zeros(0, dtype=dtype), 'dtype')
        return Matrix._wrap(
            self._data.astype(dtype),
            self._physical_rows,
            self._physical_cols,
            self._transposed,
        )

    def to_numpy(self) -> NDArray[Any]:
        """Logical 2-D array (always a C-contiguous copy)."""
        grid = self._data.reshape(self._physical_rows, self._physical_cols)
        if self._transposed:
            grid = grid.T
        return grid.copy()

    def to_list(self) -> list[list[Any]]:
        return self.to_numpy().tolist()

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.matrix.comparator import equals_exact
        return equals_exact(self, other)

    def approx_equal(
        self,
        other: Matrix[Any],
        eps: float | None = None,
        *,
        rtol: float | None = None,
        tier: ToleranceTier = ABSOLUTE,
    ) -> bool:
        """Tolerance-based equality; see comparator.equals_approx."""
        from pymatrix.matrix.comparator import equals_approx
        return equals_approx(self, other, eps, rtol=rtol, tier=tier)

    # ------------------------------------------------------------------
    # Arithmetic operators
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.add(self, other)
        if _is_scalar(other):
            return arithmetic.matrix_plus_scalar(self, other)
        return NotImplemented

    def __radd__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if _is_scalar(other):
            return arithmetic.scalar_plus_matrix(other, self)
        return NotImplemented

    def __sub__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.subtract(self, other)
        if _is_scalar(other):
            return arithmetic.matrix_minus_scalar(self, other)
        return NotImplemented

    def __rsub__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if _is_scalar(other):
            return arithmetic.scalar_minus_matrix(other, self)
        return NotImplemented

    def __mul__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if isinstance(other, Matrix):
            return arithmetic.hadamard(self, other)
        if _is_scalar(other):
            return arithmetic.matrix_times_scalar(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if _is_scalar(other):
            return arithmetic.scalar_times_matrix(other, self)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        if _is_scalar(other):
            return arithmetic.matrix_divided_by_scalar(self, other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix[Any]:
        from pymatrix.matrix.multiply import multiply
        if isinstance(other, Matrix):
            return multiply(self, other)
        return NotImplemented

    def __abs__(self) -> Matrix[Any]:
        from pymatrix.matrix import arithmetic
        return arithmetic.absolute(self)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        from pymatrix.matrix.formatting import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return (
            f"Matrix(rows={self.rows}, cols={self.cols}, dtype={self.dtype}, "
            f"transposed={self._transposed})"
        )
