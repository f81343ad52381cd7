"""
Solver dispatch for matrix inversion and LU decomposition.

Provides inverse() and lu_decompose() as the solution-returning entry
points, plus inverse_matrix() for callers that only want the Matrix.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.exceptions import ValidationError
from pylinalg.dense.design import Matrix, as_matrix
from pylinalg.decomposition.solution import InverseSolution, LUSolution
from pylinalg.decomposition.backends.cpu import CPUInverseBackend, CPULUBackend


BackendChoice = Literal['auto', 'cpu']


def _check_backend(backend: BackendChoice) -> None:
    if backend not in ('auto', 'cpu'):
        raise ValidationError(f"Unknown backend: {backend!r}")


def inverse(
    matrix: Matrix | ArrayLike,
    *,
    workers: int | None = None,
    backend: BackendChoice = 'auto',
) -> InverseSolution:
    """
    Invert a square matrix with the adjugate method.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square matrix to invert.
    workers : int, optional
        Worker count for the per-cell cofactor fan-out. None runs serially.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    InverseSolution with inverse, determinant and adjugate.

    Raises
    ------
    NotSquareError
        If the matrix is not square.
    SingularMatrixError
        If the determinant is exactly 0.0.
    """
    _check_backend(backend)
    matrix = as_matrix(matrix)
    be = CPUInverseBackend(workers=workers)
    result = be.solve(matrix)
    return InverseSolution(_result=result, _matrix=matrix)


def inverse_matrix(
    matrix: Matrix | ArrayLike,
    *,
    workers: int | None = None,
) -> Matrix:
    """Inverse of a square matrix as a plain Matrix. See inverse()."""
    return inverse(matrix, workers=workers).inverse


def lu_decompose(
    matrix: Matrix | ArrayLike,
    *,
    backend: BackendChoice = 'auto',
) -> LUSolution:
    """
    Doolittle LU decomposition without pivoting.

    Parameters
    ----------
    matrix : Matrix or array-like
        Square matrix to factor.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    LUSolution with unit lower-triangular L and upper-triangular U.

    Raises
    ------
    NotSquareError
        If the matrix is not square.

    Warns
    -----
    RuntimeWarning
        If elimination divides by a zero pivot. The factors then contain
        inf/NaN; no pivoting is attempted.
    """
    _check_backend(backend)
    matrix = as_matrix(matrix)
    be = CPULUBackend()
    result = be.solve(matrix)

    for message in result.warnings:
        warnings.warn(
            f"LU decomposition without pivoting: {message}",
            RuntimeWarning,
            stacklevel=2,
        )

    return LUSolution(_result=result, _matrix=matrix)
