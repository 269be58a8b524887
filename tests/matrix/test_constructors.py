"""
Tests for convenience constructors and text rendering.
"""

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.core.exceptions import DimensionMismatchError, ValidationError
from pymatrix.matrix.constructors import eye, from_rows, ones, random, zeros
from pymatrix.matrix.formatting import format_matrices, format_matrix


class TestConstructors:

    def test_ones(self):
        assert ones(2, 3) == Matrix(2, 3, [1.0, 1.0, 1.0, 1.0, 1.0, 1.0])

    def test_zeros(self):
        assert zeros(2, 3) == Matrix(2, 3, [0.0] * 6)

    def test_eye(self):
        e = Matrix(3, 3, [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0])
        assert eye(3) == e

    def test_int_dtype(self):
        assert eye(2, dtype=np.int64).dtype == np.int64
        assert ones(1, 2, dtype=np.int32).to_list() == [[1, 1]]

    def test_random_seeded_is_reproducible(self):
        assert random(3, 4, seed=7) == random(3, 4, seed=7)

    def test_random_range(self, rng):
        m = random(5, 5, rng=rng)
        values = m.to_numpy()
        assert np.all((values >= 0.0) & (values < 1.0))

    def test_from_rows(self):
        assert from_rows([[0, 1, 2], [10, 11, 12]]) == Matrix(2, 3, [0, 1, 2, 10, 11, 12])

    def test_from_rows_ragged(self):
        with pytest.raises(DimensionMismatchError):
            from_rows([[1, 2], [3]])

    @pytest.mark.parametrize("factory", [
        lambda: ones(0, 2),
        lambda: eye(-1),
        lambda: random(2, 0),
    ])
    def test_bad_shape(self, factory):
        with pytest.raises(ValidationError):
            factory()


class TestFormatting:

    def test_single_matrix(self, x23):
        assert format_matrix(x23) == "|0.0, 1.0, 2.0|\n|10.0, 11.0, 12.0|"

    def test_int_matrix(self):
        assert format_matrix(Matrix(1, 2, [3, 4])) == "|3, 4|"

    def test_transposed(self, x23):
        assert format_matrix(x23.T) == "|0.0, 10.0|\n|1.0, 11.0|\n|2.0, 12.0|"

    def test_blank_line_between_matrices(self):
        a = Matrix(1, 1, [1])
        b = Matrix(1, 2, [2, 3])
        assert format_matrices(a, b) == "|1|\n\n|2, 3|"
