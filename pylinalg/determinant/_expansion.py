"""
Cofactor (Laplace) expansion kernels on raw arrays.

These functions assume validated square input and do no checking of
their own. They are shared by the determinant queries and by the
adjugate-based inverse.

The expansion is deliberately the textbook recursive definition, with
factorial cost in the matrix dimension. The sign/ordering of the sum is
fixed: expand along row 0, columns left to right, signs +, -, +, ...
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylinalg.core.compute.parallel import map_indexed


def minor_array(
    data: NDArray[np.floating[Any]],
    exclude_row: int,
    exclude_col: int,
) -> NDArray[np.float64]:
    """
    Copy of data without one row and one column.

    The remaining rows and columns keep their relative order.
    """
    without_row = np.delete(data, exclude_row, axis=0)
    return np.delete(without_row, exclude_col, axis=1)


def laplace_determinant(data: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by recursive expansion along the first row.

    det = sum_col (-1)^col * data[0, col] * det(minor(data, 0, col))

    The empty (0 x 0) minor left by a 1 x 1 cofactor has determinant 1.0.
    """
    n = data.shape[0]
    if n == 0:
        return 1.0
    if n == 1:
        return float(data[0, 0])

    determinant = 0.0
    sign = 1.0
    for col in range(n):
        sub = laplace_determinant(minor_array(data, 0, col))
        determinant += sign * float(data[0, col]) * sub
        sign = -sign
    return determinant


def cofactor_value(data: NDArray[np.floating[Any]], i: int, j: int) -> float:
    """Signed minor determinant (-1)^(i+j) * det(minor(data, i, j))."""
    sign = -1.0 if (i + j) % 2 else 1.0
    return laplace_determinant(minor_array(data, i, j)) * sign


def cofactor_array(
    data: NDArray[np.floating[Any]],
    workers: int | None = None,
) -> NDArray[np.float64]:
    """
    Full cofactor matrix.

    Each of the n*n cofactors is an independent unit; results are placed
    by (i, j), never by completion order.
    """
    n = data.shape[0]

    def cell(index: int) -> float:
        i, j = divmod(index, n)
        return cofactor_value(data, i, j)

    values = map_indexed(cell, n * n, workers)
    return np.array(values, dtype=np.float64).reshape(n, n)


def adjugate_array(
    data: NDArray[np.floating[Any]],
    workers: int | None = None,
) -> NDArray[np.float64]:
    """Adjugate: adj[j, i] = cofactor(i, j)."""
    return cofactor_array(data, workers).T.copy()
