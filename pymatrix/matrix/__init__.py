"""
Dense matrices.

Public API:
    Matrix                  - storage, element access, transpose, operators
    equals_exact/approx     - comparison
    add, subtract, ...      - elementwise and scalar arithmetic
    sin, cos, ..., absolute - elementwise maps
    multiply                - matrix product
    zeros, ones, eye, ...   - convenience constructors
    format_matrix           - text rendering
"""

from pymatrix.matrix.storage import Matrix
from pymatrix.matrix.comparator import equals_exact, equals_approx
from pymatrix.matrix.arithmetic import (
    add,
    subtract,
    hadamard,
    matrix_plus_scalar,
    scalar_plus_matrix,
    matrix_minus_scalar,
    scalar_minus_matrix,
    matrix_times_scalar,
    scalar_times_matrix,
    matrix_divided_by_scalar,
    sin,
    cos,
    tan,
    arcsin,
    arccos,
    arctan,
    sinh,
    cosh,
    tanh,
    sqrt,
    ln,
    log10,
    log2,
    exp,
    absolute,
)
from pymatrix.matrix.multiply import multiply
from pymatrix.matrix.constructors import zeros, ones, eye, random, from_rows
from pymatrix.matrix.formatting import format_matrix, format_matrices

__all__ = [
    "Matrix",
    # Comparison
    "equals_exact",
    "equals_approx",
    # Elementwise and scalar arithmetic
    "add",
    "subtract",
    "hadamard",
    "matrix_plus_scalar",
    "scalar_plus_matrix",
    "matrix_minus_scalar",
    "scalar_minus_matrix",
    "matrix_times_scalar",
    "scalar_times_matrix",
    "matrix_divided_by_scalar",
    # Unary maps
    "sin",
    "cos",
    "tan",
    "arcsin",
    "arccos",
    "arctan",
    "sinh",
    "cosh",
    "tanh",
    "sqrt",
    "ln",
    "log10",
    "log2",
    "exp",
    "absolute",
    # Product
    "multiply",
    # Constructors
    "zeros",
    "ones",
    "eye",
    "random",
    "from_rows",
    # Rendering
    "format_matrix",
    "format_matrices",
]
