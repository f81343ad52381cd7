"""
Arithmetic and structural operations on Matrix and Vector.

All functions are pure: they validate shapes first, then build a new
container. Row-wise products fan out through map_indexed() and are
reassembled by row index.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy import linalg

from pylinalg.core.compute.parallel import map_indexed
from pylinalg.core.validation import (
    check_same_shape,
    check_inner_dimensions,
    check_same_length,
)
from pylinalg.dense.design import Matrix, Vector, as_matrix, as_vector


def add(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Elementwise sum of two matrices of identical shape.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    a, b = as_matrix(a), as_matrix(b)
    check_same_shape(a.shape, b.shape, "add")
    return Matrix._wrap(a.data + b.data)


def multiply(
    a: Matrix | ArrayLike,
    b: Matrix | ArrayLike,
    *,
    workers: int | None = None,
) -> Matrix:
    """
    Matrix product A @ B.

    Each output row i is sum_k A[i, k] * B[k, :]. Rows are independent
    and may be computed on separate workers.

    Args:
        a: Left operand (n x p)
        b: Right operand (p x m)
        workers: Worker count for the row fan-out (None for serial)

    Returns:
        n x m Matrix

    Raises:
        DimensionMismatchError: If a.cols != b.rows
    """
    a, b = as_matrix(a), as_matrix(b)
    check_inner_dimensions(a.shape, b.shape, "multiply")

    left, right = a.data, b.data

    def row_product(i: int) -> np.ndarray:
        return left[i] @ right

    rows = map_indexed(row_product, a.rows, workers)
    return Matrix._wrap(np.vstack(rows))


def transpose(a: Matrix | ArrayLike) -> Matrix:
    """Transpose: result[j, i] = a[i, j]."""
    a = as_matrix(a)
    return Matrix._wrap(a.data.T.copy())


def kronecker_product(a: Matrix | ArrayLike, b: Matrix | ArrayLike) -> Matrix:
    """
    Kronecker product A ⊗ B.

    The result has shape (A.rows * B.rows, A.cols * B.cols) and
    result[ar * B.rows + br, ac * B.cols + bc] = A[ar, ac] * B[br, bc].
    """
    a, b = as_matrix(a), as_matrix(b)
    b_rows, b_cols = b.shape
    right = b.data

    result = np.zeros((a.rows * b_rows, a.cols * b_cols), dtype=np.float64)
    for a_row in range(a.rows):
        for a_col in range(a.cols):
            block_r = a_row * b_rows
            block_c = a_col * b_cols
            result[block_r:block_r + b_rows, block_c:block_c + b_cols] = (
                a.data[a_row, a_col] * right
            )
    return Matrix._wrap(result)


def multiply_vector(
    a: Matrix | ArrayLike,
    v: Vector | ArrayLike,
    *,
    workers: int | None = None,
) -> Vector:
    """
    Matrix-vector product A @ v, one independent unit per row.

    Raises:
        DimensionMismatchError: If a.cols != len(v)
    """
    a, v = as_matrix(a), as_vector(v)
    check_inner_dimensions(a.shape, (len(v),), "multiply_vector")

    left, x = a.data, v.data

    def row_dot(i: int) -> float:
        return float(left[i] @ x)

    return Vector._wrap(np.array(map_indexed(row_dot, a.rows, workers)))


# --- Vector operations ---

def vector_add(v1: Vector | ArrayLike, v2: Vector | ArrayLike) -> Vector:
    """
    Componentwise sum of two vectors.

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    v1, v2 = as_vector(v1), as_vector(v2)
    check_same_length(len(v1), len(v2), "vector_add")
    return Vector._wrap(v1.data + v2.data)


def dot(v1: Vector | ArrayLike, v2: Vector | ArrayLike) -> float:
    """
    Inner product sum_i v1[i] * v2[i].

    Raises:
        DimensionMismatchError: If the lengths differ
    """
    v1, v2 = as_vector(v1), as_vector(v2)
    check_same_length(len(v1), len(v2), "dot")
    return float(np.dot(v1.data, v2.data))


def magnitude(v: Vector | ArrayLike) -> float:
    """
    Euclidean length of v (same value as the vector L2 norm).

    BLAS nrm2 scales as it accumulates, so components beyond ~1e154 give
    a finite length instead of overflowing to inf.
    """
    v = as_vector(v)
    return float(linalg.norm(v.data, check_finite=False))


def normalize(v: Vector | ArrayLike) -> Vector:
    """
    Scale v to unit length.

    A vector whose magnitude is exactly 0.0 is returned unchanged.
    """
    v = as_vector(v)
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return Vector._wrap(v.data / mag)
