"""
PowerIterationDesign: validated input for the power-iteration solver.
"""

from __future__ import annotations

from dataclasses import dataclass
from numpy.typing import ArrayLike

from pylinalg.core.compute.tolerances import DEFAULT_MAX_ITERS, DEFAULT_POWER_TOLERANCE
from pylinalg.core.validation import (
    check_inner_dimensions,
    check_positive_int,
    check_tolerance,
)
from pylinalg.dense.design import Matrix, as_matrix


@dataclass(frozen=True)
class PowerIterationDesign:
    """
    Matrix plus iteration settings, validated together.

    The iterate has one component per matrix row, so the matrix columns
    must match the row count (the matrix must be square). A mismatch is
    reported as a DimensionMismatchError from the matrix-vector product,
    before the first iteration runs.

    Construction:
        PowerIterationDesign.from_matrix(A, max_iters=1000, tolerance=1e-10)
    """
    _matrix: Matrix
    _max_iters: int
    _tolerance: float

    @classmethod
    def from_matrix(
        cls,
        matrix: Matrix | ArrayLike,
        *,
        max_iters: int = DEFAULT_MAX_ITERS,
        tolerance: float = DEFAULT_POWER_TOLERANCE,
    ) -> PowerIterationDesign:
        """
        Parameters
        ----------
        matrix : Matrix or array-like
            Square matrix.
        max_iters : int
            Maximum number of iterations (0 allowed: fails immediately).
        tolerance : float
            Per-component convergence threshold, > 0.
        """
        matrix = as_matrix(matrix)
        check_inner_dimensions(matrix.shape, (matrix.rows,), "multiply_vector")
        max_iters = check_positive_int(max_iters, "max_iters", allow_zero=True)
        tolerance = check_tolerance(tolerance, "tolerance")
        return cls(_matrix=matrix, _max_iters=max_iters, _tolerance=tolerance)

    @property
    def matrix(self) -> Matrix:
        return self._matrix

    @property
    def n(self) -> int:
        """Length of the iterate."""
        return self._matrix.rows

    @property
    def max_iters(self) -> int:
        return self._max_iters

    @property
    def tolerance(self) -> float:
        return self._tolerance

    def __repr__(self) -> str:
        return (
            f"PowerIterationDesign(n={self.n}, max_iters={self._max_iters}, "
            f"tolerance={self._tolerance:g})"
        )
