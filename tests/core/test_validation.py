"""
Tests for input validation utilities.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    ValidationError,
)
from pylinalg.core.validation import (
    check_1d,
    check_2d,
    check_array,
    check_finite,
    check_index,
    check_inner_dimensions,
    check_nonempty,
    check_positive_int,
    check_same_length,
    check_same_shape,
    check_square,
    check_tolerance,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:

    def test_list_to_float64(self):
        result = check_array([1, 2, 3], "X")
        assert result.dtype == np.float64
        np.testing.assert_array_equal(result, [1.0, 2.0, 3.0])

    def test_returns_copy(self):
        arr = np.array([1.0, 2.0])
        result = check_array(arr, "X")
        result[0] = 99.0
        assert arr[0] == 1.0

    def test_ragged_rejected(self):
        with pytest.raises(ValidationError, match="X"):
            check_array([[1, 2], [3]], "X")

    def test_strings_rejected(self):
        with pytest.raises(ValidationError, match="non-numeric"):
            check_array(["a", "b"], "X")

    def test_complex_rejected(self):
        with pytest.raises(ValidationError, match="complex"):
            check_array([1 + 2j], "X")

    def test_nan_allowed(self):
        result = check_array([1.0, np.nan], "X")
        assert np.isnan(result[1])


class TestCheckFinite:

    def test_finite_passes(self):
        check_finite(np.array([1.0, 2.0]), "X")

    def test_counts_reported(self):
        with pytest.raises(ValidationError, match=r"1 NaN, 2 Inf"):
            check_finite(np.array([np.nan, np.inf, -np.inf]), "X")


# ═══════════════════════════════════════════════════════════════════════
# Shape checks
# ═══════════════════════════════════════════════════════════════════════


class TestShapeChecks:

    def test_check_1d(self):
        check_1d(np.zeros(3), "v")
        with pytest.raises(DimensionError, match="expected 1D"):
            check_1d(np.zeros((2, 2)), "v")

    def test_check_2d(self):
        check_2d(np.zeros((2, 3)), "A")
        with pytest.raises(DimensionError, match="expected 2D"):
            check_2d(np.zeros(3), "A")

    def test_check_nonempty(self):
        with pytest.raises(DimensionError, match="at least 1"):
            check_nonempty(np.zeros((0, 3)), "A")

    def test_check_square(self):
        check_square((3, 3), "inverse")
        with pytest.raises(NotSquareError) as excinfo:
            check_square((2, 3), "inverse")
        assert excinfo.value.shape == (2, 3)
        assert excinfo.value.operation == "inverse"

    def test_check_same_shape(self):
        check_same_shape((2, 2), (2, 2), "add")
        with pytest.raises(DimensionMismatchError) as excinfo:
            check_same_shape((2, 2), (3, 2), "add")
        assert excinfo.value.left_shape == (2, 2)
        assert excinfo.value.right_shape == (3, 2)

    def test_check_inner_dimensions_matrix(self):
        check_inner_dimensions((2, 3), (3, 4), "multiply")
        with pytest.raises(DimensionMismatchError, match="3 columns but right has 2 rows"):
            check_inner_dimensions((2, 3), (2, 2), "multiply")

    def test_check_inner_dimensions_vector(self):
        check_inner_dimensions((2, 3), (3,), "multiply_vector")
        with pytest.raises(DimensionMismatchError):
            check_inner_dimensions((2, 3), (2,), "multiply_vector")

    def test_check_same_length(self):
        check_same_length(3, 3, "dot")
        with pytest.raises(DimensionMismatchError, match="same length"):
            check_same_length(3, 2, "dot")


# ═══════════════════════════════════════════════════════════════════════
# Scalar arguments
# ═══════════════════════════════════════════════════════════════════════


class TestScalarChecks:

    def test_check_index(self):
        assert check_index(np.int64(1), 3, "i") == 1
        with pytest.raises(ValidationError, match="out of range"):
            check_index(3, 3, "i")
        with pytest.raises(ValidationError, match="out of range"):
            check_index(-1, 3, "i")
        with pytest.raises(ValidationError, match="integer"):
            check_index(1.0, 3, "i")

    def test_check_positive_int(self):
        assert check_positive_int(4, "n") == 4
        with pytest.raises(ValidationError, match="positive"):
            check_positive_int(0, "n")
        with pytest.raises(ValidationError, match="integer"):
            check_positive_int(True, "n")

    def test_check_positive_int_allow_zero(self):
        assert check_positive_int(0, "max_iters", allow_zero=True) == 0
        with pytest.raises(ValidationError, match="non-negative"):
            check_positive_int(-1, "max_iters", allow_zero=True)

    def test_check_tolerance(self):
        assert check_tolerance(1e-10, "tolerance") == 1e-10
        for bad in (0.0, -1.0, float("inf"), float("nan")):
            with pytest.raises(ValidationError):
                check_tolerance(bad, "tolerance")
        with pytest.raises(ValidationError, match="real number"):
            check_tolerance("1e-3", "tolerance")
