"""
Determinant queries and cofactor constructions.

determinant() is defined only for square matrices; for any other shape
it returns None (the value is mathematically undefined, which is not a
computational failure). The cofactor helpers require a square matrix
and raise NotSquareError otherwise.
"""

from __future__ import annotations

from numpy.typing import ArrayLike

from pylinalg.core.exceptions import DimensionError
from pylinalg.core.validation import check_square, check_index
from pylinalg.dense.design import Matrix, as_matrix
from pylinalg.determinant._expansion import (
    minor_array,
    laplace_determinant,
    cofactor_value,
    cofactor_array,
    adjugate_array,
)


def determinant(matrix: Matrix | ArrayLike) -> float | None:
    """
    Determinant by cofactor expansion along row 0.

    Parameters
    ----------
    matrix : Matrix or array-like

    Returns
    -------
    float, or None if the matrix is not square.

    Notes
    -----
    Cost grows factorially with the dimension. Matrices beyond roughly
    10 x 10 are impractical.
    """
    matrix = as_matrix(matrix)
    if not matrix.is_square:
        return None
    return laplace_determinant(matrix.data)


def minor(matrix: Matrix | ArrayLike, exclude_row: int, exclude_col: int) -> Matrix:
    """
    (rows-1) x (cols-1) matrix without one row and one column.

    Raises
    ------
    DimensionError
        If the matrix has a single row or column (the minor would be empty).
    ValidationError
        If an index is out of range.
    """
    matrix = as_matrix(matrix)
    row = check_index(exclude_row, matrix.rows, "exclude_row")
    col = check_index(exclude_col, matrix.cols, "exclude_col")
    if matrix.rows < 2 or matrix.cols < 2:
        raise DimensionError(
            f"minor: a {matrix.rows}x{matrix.cols} matrix has no non-empty minor"
        )
    return Matrix._wrap(minor_array(matrix.data, row, col))


def cofactor(matrix: Matrix | ArrayLike, i: int, j: int) -> float:
    """
    Cofactor (-1)^(i+j) * det(minor(matrix, i, j)).

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    matrix = as_matrix(matrix)
    check_square(matrix.shape, "cofactor")
    i = check_index(i, matrix.rows, "i")
    j = check_index(j, matrix.cols, "j")
    return cofactor_value(matrix.data, i, j)


def cofactor_matrix(matrix: Matrix | ArrayLike, *, workers: int | None = None) -> Matrix:
    """
    Matrix of all cofactors.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    matrix = as_matrix(matrix)
    check_square(matrix.shape, "cofactor_matrix")
    return Matrix._wrap(cofactor_array(matrix.data, workers))


def adjugate(matrix: Matrix | ArrayLike, *, workers: int | None = None) -> Matrix:
    """
    Adjugate (transpose of the cofactor matrix).

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    """
    matrix = as_matrix(matrix)
    check_square(matrix.shape, "adjugate")
    return Matrix._wrap(adjugate_array(matrix.data, workers))
