"""
Tests for the unpivoted Doolittle LU decomposition.
"""

import warnings

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionMismatchError,
    NotSquareError,
    SingularMatrixError,
    ValidationError,
)
from pylinalg.decomposition import lu_decompose
from pylinalg.dense import Matrix, Vector


def _assert_unit_lower(L):
    np.testing.assert_array_equal(np.triu(L, k=1), 0.0)
    np.testing.assert_array_equal(np.diag(L), 1.0)


def _assert_upper(U):
    np.testing.assert_array_equal(np.tril(U, k=-1), 0.0)


class TestLUDecomposition:

    def test_three_by_three(self):
        A = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
        lu = lu_decompose(A)
        _assert_unit_lower(lu.L.data)
        _assert_upper(lu.U.data)
        np.testing.assert_allclose(lu.reconstruct().data, A, atol=1e-10)

    def test_known_factors(self):
        lu = lu_decompose([[4, 3], [6, 3]])
        np.testing.assert_allclose(lu.L.data, [[1, 0], [1.5, 1]])
        np.testing.assert_allclose(lu.U.data, [[4, 3], [0, -1.5]])

    def test_last_pivot_zero_is_not_flagged(self):
        """[[1,2,3],[4,5,6],[7,8,9]] has U[2,2] == 0, never divided by."""
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            lu = lu_decompose([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        assert lu.U[2, 2] == 0.0
        assert not lu.has_zero_pivot

    def test_random_reconstruction(self, well_conditioned):
        lu = lu_decompose(well_conditioned)
        assert lu.reconstruct().allclose(well_conditioned)
        assert lu.lower is lu.L
        assert lu.upper is lu.U

    def test_one_by_one(self):
        lu = lu_decompose([[5.0]])
        assert lu.L == Matrix.from_array([[1.0]])
        assert lu.U == Matrix.from_array([[5.0]])

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            lu_decompose([[1, 2, 3], [4, 5, 6]])

    def test_metadata(self):
        lu = lu_decompose([[2, 1], [1, 2]])
        assert lu.backend_name == 'cpu_doolittle'
        assert lu.info['pivoting'] is False
        assert 'elimination' in lu.timing


class TestZeroPivot:
    """Known limitation: no pivoting, a zero pivot yields inf/NaN."""

    def test_zero_leading_pivot_warns(self):
        with pytest.warns(RuntimeWarning, match="zero pivot at row 0"):
            lu = lu_decompose([[0, 1], [1, 0]])
        assert lu.has_zero_pivot
        assert lu.zero_pivots == (0,)
        assert any("zero pivot" in w for w in lu.warnings)
        assert not np.all(np.isfinite(lu.L.data))

    def test_zero_pivot_does_not_raise(self):
        with pytest.warns(RuntimeWarning):
            lu = lu_decompose([[0, 2, 1], [1, 1, 1], [2, 1, 0]])
        assert np.isinf(lu.L[1, 0]) or np.isnan(lu.L[1, 0])

    def test_solve_after_zero_pivot_is_singular(self):
        with pytest.warns(RuntimeWarning):
            lu = lu_decompose([[0, 1], [1, 0]])
        with pytest.raises(SingularMatrixError):
            lu.solve([1.0, 1.0])

    def test_summary_lists_pivots(self):
        with pytest.warns(RuntimeWarning):
            lu = lu_decompose([[0, 1], [1, 0]])
        assert "Zero pivots at rows: [0]" in lu.summary()
        assert repr(lu) == "LUSolution(n=2, zero_pivots=[0])"


class TestLUSolve:

    def test_solve(self, well_conditioned, rng):
        b = rng.standard_normal(5)
        x = lu_decompose(well_conditioned).solve(b)
        assert isinstance(x, Vector)
        np.testing.assert_allclose(well_conditioned.data @ x.data, b, atol=1e-10)

    def test_solve_known(self):
        x = lu_decompose([[4, 3], [6, 3]]).solve([10, 12])
        np.testing.assert_allclose(x.data, [1.0, 2.0])

    def test_solve_length_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            lu_decompose([[4, 3], [6, 3]]).solve([1, 2, 3])

    @pytest.mark.parametrize("bad", [np.nan, np.inf])
    def test_solve_non_finite_rhs(self, bad):
        with pytest.raises(ValidationError, match="non-finite"):
            lu_decompose([[4, 3], [6, 3]]).solve([1.0, bad])

    def test_solve_singular_last_pivot(self):
        lu = lu_decompose([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
        with pytest.raises(SingularMatrixError, match="row 2"):
            lu.solve([1, 2, 3])
