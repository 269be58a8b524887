"""
Tests for PyMatrix exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyMatrixError)
    - Builtin compatibility (IndexError, TypeError)
    - Diagnostic attributes and their None defaults
"""

import pytest

from pymatrix.core.exceptions import (
    CapabilityError,
    DimensionMismatchError,
    IndexOutOfRangeError,
    NumericDegeneracyError,
    NumericalError,
    PyMatrixError,
    ShapeMismatchError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyMatrixError."""

    @pytest.mark.parametrize("exc_type", [
        ValidationError,
        DimensionMismatchError,
        ShapeMismatchError,
        IndexOutOfRangeError,
        CapabilityError,
        NumericalError,
        NumericDegeneracyError,
    ])
    def test_is_pymatrix_error(self, exc_type):
        with pytest.raises(PyMatrixError):
            raise exc_type("boom")

    def test_shape_mismatch_is_dimension_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            raise ShapeMismatchError("shapes differ")

    def test_index_out_of_range_is_index_error(self):
        with pytest.raises(IndexError):
            raise IndexOutOfRangeError("out of range")

    def test_capability_error_is_type_error(self):
        with pytest.raises(TypeError):
            raise CapabilityError("no sqrt for int")

    def test_degeneracy_is_numerical_not_validation(self):
        err = NumericDegeneracyError("zero column")
        assert isinstance(err, NumericalError)
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:
    """Exceptions carry diagnostic information."""

    def test_dimension_mismatch_attributes(self):
        err = DimensionMismatchError("data: expected 6 elements, got 5", expected=6, actual=5)
        assert str(err) == "data: expected 6 elements, got 5"
        assert err.expected == 6
        assert err.actual == 5

    def test_dimension_mismatch_defaults_are_none(self):
        err = DimensionMismatchError("bad")
        assert err.expected is None
        assert err.actual is None

    def test_index_out_of_range_attributes(self):
        err = IndexOutOfRangeError("out", index=(2, 0), shape=(2, 3))
        assert err.index == (2, 0)
        assert err.shape == (2, 3)

    def test_capability_attributes(self):
        err = CapabilityError("no", dtype="int64", required_tier="real_field")
        assert err.dtype == "int64"
        assert err.required_tier == "real_field"

    def test_degeneracy_attributes(self):
        err = NumericDegeneracyError("zero", column=1, factor=0.0, threshold=1e-300)
        assert err.column == 1
        assert err.factor == 0.0
        assert err.threshold == 1e-300

    def test_degeneracy_defaults_are_none(self):
        err = NumericDegeneracyError("zero")
        assert err.column is None
        assert err.factor is None
        assert err.threshold is None
