"""
Tests for exact and approximate matrix equality.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.compute.tolerances import ABSOLUTE, RELATIVE, ToleranceTier
from pymatrix.core.exceptions import ValidationError
from pymatrix.matrix.comparator import equals_approx, equals_exact


class TestEqualsExact:

    def test_reflexive(self, x23):
        assert equals_exact(x23, x23)
        assert x23 == x23

    def test_different_value(self, x23):
        other = x23.copy()
        other[1, 1] = 11.5
        assert not equals_exact(x23, other)
        assert x23 != other

    def test_shape_mismatch_is_false(self, x23):
        assert not equals_exact(x23, x23.transpose())
        assert not equals_exact(x23, Matrix(2, 2))

    def test_compares_logical_not_physical(self):
        physical = Matrix(3, 2, [0.0, 10.0, 1.0, 11.0, 2.0, 12.0])
        flagged = Matrix(2, 3, [0.0, 1.0, 2.0, 10.0, 11.0, 12.0]).transpose()
        assert equals_exact(physical, flagged)

    def test_int_and_float_values_compare_equal(self):
        assert Matrix(1, 2, [1, 2]) == Matrix(1, 2, [1.0, 2.0])

    def test_nan_is_never_equal(self):
        m = Matrix(1, 1, [float("nan")])
        assert not equals_exact(m, m.copy())

    def test_eq_with_non_matrix(self, x23):
        assert (x23 == 3) is False


class TestEqualsApprox:

    def test_within_default_eps(self, x23):
        other = x23 + 4e-10
        assert equals_approx(x23, other)
        assert x23.approx_equal(other)

    def test_outside_default_eps(self, x23):
        other = x23.copy()
        other[0, 1] = 1.0 + 1e-9
        assert not equals_approx(x23, other)

    def test_boundary_is_inclusive(self):
        a = Matrix(1, 1, [0.0])
        b = Matrix(1, 1, [0.25])
        assert equals_approx(a, b, eps=0.25)
        assert not equals_approx(a, b, eps=0.125)

    def test_custom_eps(self, x23):
        assert equals_approx(x23, x23 + 0.01, eps=0.1)

    def test_shape_mismatch_is_false(self, x23):
        assert not equals_approx(x23, x23.transpose(), eps=1e6)

    def test_absolute_tolerance_is_not_scale_invariant(self):
        big = Matrix(1, 1, [1e12])
        nudged = Matrix(1, 1, [1e12 + 1e-3])
        assert not equals_approx(big, nudged)
        assert equals_approx(big, nudged, rtol=1e-10)

    def test_matches_elementwise_definition(self, rng):
        a = rng.standard_normal((4, 3))
        b = a + rng.uniform(-1e-3, 1e-3, size=(4, 3))
        eps = 5e-4
        expected = bool(np.all(np.abs(a - b) <= eps))
        assert equals_approx(Matrix.from_numpy(a), Matrix.from_numpy(b), eps) == expected

    def test_complex_elements(self):
        a = Matrix(1, 2, [1 + 1j, 2j])
        assert equals_approx(a, a + 1e-12)

    @pytest.mark.parametrize("kwargs", [{"eps": -1.0}, {"rtol": -0.1}, {"eps": float("nan")}])
    def test_rejects_bad_tolerance(self, x23, kwargs):
        with pytest.raises(ValidationError):
            equals_approx(x23, x23, **kwargs)


class TestToleranceTiers:

    def test_default_tier_is_absolute(self):
        assert ABSOLUTE.atol == 5e-10
        assert ABSOLUTE.rtol == 0.0
        a = Matrix(1, 1, [1e-11])
        b = Matrix(1, 1, [0.0])
        assert equals_approx(a, b)
        assert equals_approx(a, b, tier=ABSOLUTE)

    def test_relative_tier_scales_with_magnitude(self):
        big = Matrix(1, 1, [1e12])
        nudged = Matrix(1, 1, [1e12 + 1e-3])
        assert not equals_approx(big, nudged)
        assert equals_approx(big, nudged, tier=RELATIVE)
        assert big.approx_equal(nudged, tier=RELATIVE)

    def test_relative_tier_is_strict_near_zero(self):
        a = Matrix(1, 1, [1e-11])
        b = Matrix(1, 1, [0.0])
        assert not equals_approx(a, b, tier=RELATIVE)

    def test_explicit_values_override_tier(self):
        a = Matrix(1, 1, [0.0])
        b = Matrix(1, 1, [0.4])
        assert not equals_approx(a, b, tier=RELATIVE)
        assert equals_approx(a, b, eps=0.5, tier=RELATIVE)
        assert equals_approx(a, b, rtol=1.0, tier=RELATIVE)

    def test_custom_tier(self, x23):
        loose = ToleranceTier(rtol=0.0, atol=0.1, name="loose", description="test tier")
        assert equals_approx(x23, x23 + 0.05, tier=loose)
        assert not equals_approx(x23, x23 + 0.2, tier=loose)
