"""
Tests for arithmetic and structural operations.
"""

import numpy as np
import pytest

from pylinalg.core.exceptions import DimensionMismatchError
from pylinalg.dense import Matrix, Vector
from pylinalg.ops import (
    add,
    dot,
    kronecker_product,
    magnitude,
    multiply,
    multiply_vector,
    normalize,
    transpose,
    vector_add,
)


# ═══════════════════════════════════════════════════════════════════════
# Matrix arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestAdd:

    def test_basic(self, square_2x2):
        result = add(square_2x2, [[4, 3], [2, 1]])
        assert result == Matrix.from_array([[5, 5], [5, 5]])

    def test_commutative(self, rng):
        a = Matrix.from_array(rng.standard_normal((3, 4)))
        b = Matrix.from_array(rng.standard_normal((3, 4)))
        assert add(a, b) == add(b, a)

    def test_shape_mismatch(self, square_2x2):
        with pytest.raises(DimensionMismatchError) as excinfo:
            add(square_2x2, [[1, 2], [3, 4], [5, 6]])
        assert excinfo.value.operation == "add"
        assert excinfo.value.right_shape == (3, 2)

    def test_inputs_unchanged(self, square_2x2):
        add(square_2x2, square_2x2)
        assert square_2x2 == Matrix.from_array([[1, 2], [3, 4]])


class TestMultiply:

    def test_basic(self, square_2x2):
        result = multiply(square_2x2, [[2, 0], [1, 2]])
        assert result == Matrix.from_array([[4, 4], [10, 8]])

    def test_rectangular_shape(self):
        a = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        b = Matrix.from_array([[1], [0], [-1]])
        result = multiply(a, b)
        assert result.shape == (2, 1)
        np.testing.assert_array_equal(result.data, [[-2], [-2]])

    def test_inner_mismatch(self):
        a = Matrix.from_array([[1, 2, 3], [4, 5, 6]])
        with pytest.raises(DimensionMismatchError):
            multiply(a, [[1, 2], [3, 4]])

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((6, 4))
        b = rng.standard_normal((4, 5))
        np.testing.assert_allclose(multiply(a, b).data, a @ b, rtol=1e-12)

    def test_workers_bit_identical(self, rng):
        a = Matrix.from_array(rng.standard_normal((20, 7)))
        b = Matrix.from_array(rng.standard_normal((7, 9)))
        serial = multiply(a, b)
        threaded = multiply(a, b, workers=4)
        np.testing.assert_array_equal(serial.data, threaded.data)


class TestTranspose:

    def test_basic(self):
        result = transpose([[1, 2, 3], [4, 5, 6]])
        assert result == Matrix.from_array([[1, 4], [2, 5], [3, 6]])

    def test_involution(self, rng):
        a = Matrix.from_array(rng.standard_normal((3, 5)))
        assert transpose(transpose(a)) == a


class TestKronecker:

    def test_two_by_two(self):
        a = Matrix.from_array([[1, 2], [3, 4]])
        b = Matrix.from_array([[0, 5], [6, 7]])
        result = kronecker_product(a, b)
        assert result.shape == (4, 4)
        assert result[0, 0] == a[0, 0] * b[0, 0]
        expected = [
            [0, 5, 0, 10],
            [6, 7, 12, 14],
            [0, 15, 0, 20],
            [18, 21, 24, 28],
        ]
        np.testing.assert_array_equal(result.data, expected)

    def test_index_formula(self, rng):
        a = Matrix.from_array(rng.standard_normal((2, 3)))
        b = Matrix.from_array(rng.standard_normal((4, 2)))
        result = kronecker_product(a, b)
        assert result.shape == (8, 6)
        for ar in range(2):
            for ac in range(3):
                for br in range(4):
                    for bc in range(2):
                        assert result[ar * 4 + br, ac * 2 + bc] == a[ar, ac] * b[br, bc]

    def test_matches_numpy(self, rng):
        a = rng.standard_normal((3, 2))
        b = rng.standard_normal((2, 3))
        np.testing.assert_allclose(kronecker_product(a, b).data, np.kron(a, b))


class TestMultiplyVector:

    def test_basic(self, square_2x2):
        assert multiply_vector(square_2x2, [1, 1]) == Vector.from_array([3, 7])

    def test_length_mismatch(self, square_2x2):
        with pytest.raises(DimensionMismatchError):
            multiply_vector(square_2x2, [1, 2, 3])

    def test_workers_bit_identical(self, rng):
        a = Matrix.from_array(rng.standard_normal((12, 12)))
        v = Vector.from_array(rng.standard_normal(12))
        assert multiply_vector(a, v) == multiply_vector(a, v, workers=3)


# ═══════════════════════════════════════════════════════════════════════
# Vector arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestVectorOps:

    def test_vector_add(self):
        assert vector_add([1, 2, 3], [4, 5, 6]) == Vector.from_array([5, 7, 9])

    def test_vector_add_mismatch(self):
        with pytest.raises(DimensionMismatchError):
            vector_add([1, 2, 3], [4, 5])

    def test_dot(self):
        assert dot([1, 2, 3], [4, 5, 6]) == 32.0

    def test_dot_mismatch(self):
        with pytest.raises(DimensionMismatchError) as excinfo:
            dot([1, 2, 3], [4, 5])
        assert excinfo.value.operation == "dot"

    @pytest.mark.parametrize("values, expected", [
        ([0.0, 0.0, 0.0], 0.0),
        ([3.0, 4.0], 5.0),
        ([-3.0, -4.0], 5.0),
        ([0.5, 0.5, 0.5, 0.5], 1.0),
    ])
    def test_magnitude(self, values, expected):
        assert magnitude(values) == pytest.approx(expected, abs=1e-12)

    def test_normalize(self):
        result = normalize([3, 4])
        np.testing.assert_allclose(result.data, [0.6, 0.8], rtol=1e-15)
        assert magnitude(result) == pytest.approx(1.0)

    def test_magnitude_large_components(self):
        assert magnitude([3e200, 4e200]) == pytest.approx(5e200)

    def test_normalize_large_components(self):
        result = normalize([3e200, 4e200])
        np.testing.assert_allclose(result.data, [0.6, 0.8], rtol=1e-14)

    def test_normalize_zero_vector_unchanged(self):
        v = Vector.from_array([0, 0, 0])
        result = normalize(v)
        assert result is v
        assert result == Vector.from_array([0, 0, 0])
