"""
Solver dispatch for the dominant eigenpair.

power_iteration() returns the full EigenSolution; eigenvector() and
eigenvalue() are the plain-value forms.
"""

from __future__ import annotations

import warnings
from typing import Literal
from numpy.typing import ArrayLike

from pylinalg.core.compute.tolerances import DEFAULT_MAX_ITERS, DEFAULT_POWER_TOLERANCE
from pylinalg.core.exceptions import ValidationError
from pylinalg.dense.design import Matrix, Vector, as_matrix, as_vector
from pylinalg.eigen.design import PowerIterationDesign
from pylinalg.eigen.solution import EigenSolution
from pylinalg.eigen.backends.cpu import CPUPowerIterationBackend
from pylinalg.eigen._rayleigh import rayleigh_quotient


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice, workers: int | None) -> CPUPowerIterationBackend:
    if backend in ('auto', 'cpu'):
        return CPUPowerIterationBackend(workers=workers)
    raise ValidationError(f"Unknown backend: {backend!r}")


def _emit(messages: tuple[str, ...]) -> None:
    for message in messages:
        warnings.warn(f"Power iteration: {message}", RuntimeWarning, stacklevel=3)


def power_iteration(
    matrix: Matrix | ArrayLike | PowerIterationDesign,
    *,
    max_iters: int = DEFAULT_MAX_ITERS,
    tolerance: float = DEFAULT_POWER_TOLERANCE,
    workers: int | None = None,
    backend: BackendChoice = 'auto',
) -> EigenSolution:
    """
    Dominant eigenvector and Rayleigh-quotient eigenvalue.

    Parameters
    ----------
    matrix : Matrix, array-like, or PowerIterationDesign
        Square matrix. A design carries its own max_iters/tolerance and
        the keyword values are ignored.
    max_iters : int
        Maximum number of iterations.
    tolerance : float
        Converged when every component changes by less than this.
    workers : int, optional
        Worker count for the row-wise matrix-vector product.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    EigenSolution

    Raises
    ------
    DimensionMismatchError
        If the matrix is not square (its columns do not match the iterate).
    ConvergenceError
        If max_iters iterations do not converge.

    Examples
    --------
    >>> sol = power_iteration([[2, 1], [1, 2]])
    >>> sol.eigenvalue   # ~3.0
    """
    if isinstance(matrix, PowerIterationDesign):
        design = matrix
    else:
        design = PowerIterationDesign.from_matrix(
            matrix, max_iters=max_iters, tolerance=tolerance
        )
    be = _get_backend(backend, workers)
    result = be.solve(design)
    _emit(result.warnings)
    return EigenSolution(_result=result, _design=design)


def eigenvector(
    matrix: Matrix | ArrayLike,
    max_iters: int = DEFAULT_MAX_ITERS,
    tolerance: float = DEFAULT_POWER_TOLERANCE,
    *,
    workers: int | None = None,
) -> Vector:
    """
    Dominant eigenvector by power iteration (unit length, sign not fixed).

    Raises
    ------
    DimensionMismatchError
        If the matrix is not square.
    ConvergenceError
        If max_iters iterations do not converge.
    """
    design = PowerIterationDesign.from_matrix(
        matrix, max_iters=max_iters, tolerance=tolerance
    )
    result = _get_backend('cpu', workers).solve(design, compute_eigenvalue=False)
    _emit(result.warnings)
    return result.params.eigenvector


def eigenvalue(
    matrix: Matrix | ArrayLike,
    v: Vector | ArrayLike,
    *,
    workers: int | None = None,
) -> float:
    """
    Rayleigh quotient (A v)·v / (v·v).

    Raises
    ------
    DimensionMismatchError
        If matrix.cols != len(v).
    DegenerateQuotientError
        If v·v is exactly 0.0.
    """
    return rayleigh_quotient(as_matrix(matrix), as_vector(v), workers)
