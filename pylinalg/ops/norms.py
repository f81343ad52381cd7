"""
Norms and reductions.

l1_norm and l2_norm accept a Matrix (entrywise over all cells) or a
Vector; raw array-likes are built into one by their dimensionality.
infinity_norm and trace are matrix-only.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike
from scipy import linalg

from pylinalg.core.compute.parallel import map_indexed
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.validation import check_array
from pylinalg.dense.design import Matrix, Vector, as_matrix


def _values(x: Matrix | Vector | ArrayLike, operation: str) -> np.ndarray:
    if isinstance(x, (Matrix, Vector)):
        return x.data
    array = check_array(x, operation)
    if array.ndim == 1:
        return Vector(array).data
    if array.ndim == 2:
        return Matrix.from_array(array).data
    raise DimensionError(
        f"{operation}: expected a 1D or 2D array, got {array.ndim}D with shape {array.shape}"
    )


def _matrix(a: Matrix | ArrayLike, operation: str) -> Matrix:
    if isinstance(a, Vector):
        raise ValidationError(f"{operation}: expected Matrix, got Vector")
    return as_matrix(a)


def l1_norm(x: Matrix | Vector | ArrayLike) -> float:
    """Sum of absolute values over every entry."""
    return float(np.sum(np.abs(_values(x, "l1_norm"))))


def l2_norm(x: Matrix | Vector | ArrayLike) -> float:
    """
    Square root of the sum of squares (Frobenius norm for a Matrix).

    Computed by BLAS nrm2, which rescales internally so entries above
    ~1e154 do not overflow the intermediate sum of squares.
    """
    values = _values(x, "l2_norm")
    return float(linalg.norm(values.ravel(), check_finite=False))


def infinity_norm(a: Matrix | ArrayLike, *, workers: int | None = None) -> float:
    """
    Maximum absolute row sum.

    Each row's L1 norm is an independent unit. A NaN row sum makes the
    result NaN regardless of where the row sits.
    """
    a = _matrix(a, "infinity_norm")
    data = a.data

    def row_sum(i: int) -> float:
        return float(np.sum(np.abs(data[i])))

    return float(np.max(np.asarray(map_indexed(row_sum, a.rows, workers))))


def trace(a: Matrix | ArrayLike) -> float:
    """Sum of the min(rows, cols) diagonal entries."""
    a = _matrix(a, "trace")
    return float(np.sum(np.diagonal(a.data)))
