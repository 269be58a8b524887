"""
Tests for tolerance tiers and the QR rank tolerance.
"""

import numpy as np
import pytest

from pymatrix.core.compute.tolerances import (
    ABSOLUTE,
    APPROX_EPS,
    RELATIVE,
    ToleranceTier,
    rank_tolerance,
)


class TestToleranceTiers:

    def test_absolute_uses_approx_eps(self):
        assert ABSOLUTE.atol == APPROX_EPS
        assert ABSOLUTE.rtol == 0.0

    def test_relative_has_relative_component(self):
        assert RELATIVE.rtol > 0.0
        assert RELATIVE.atol < ABSOLUTE.atol

    def test_frozen(self):
        with pytest.raises(AttributeError):
            ABSOLUTE.atol = 1.0

    def test_names(self):
        assert isinstance(ABSOLUTE, ToleranceTier)
        assert ABSOLUTE.name == "absolute"
        assert RELATIVE.name == "relative"


class TestRankTolerance:

    def test_float64_default(self):
        expected = 3 * np.finfo(np.float64).eps * 10.0
        assert rank_tolerance((3, 2), 10.0) == pytest.approx(expected)

    def test_scales_with_dtype_eps(self):
        t64 = rank_tolerance((2, 2), 1.0, np.float64)
        t32 = rank_tolerance((2, 2), 1.0, np.float32)
        assert t32 == pytest.approx(2 * float(np.finfo(np.float32).eps))
        assert t32 > t64
