"""
Rayleigh quotient eigenvalue estimate.
"""

from __future__ import annotations

from pylinalg.core.exceptions import DegenerateQuotientError
from pylinalg.dense.design import Matrix, Vector
from pylinalg.ops.arithmetic import dot, multiply_vector


def rayleigh_quotient(matrix: Matrix, v: Vector, workers: int | None = None) -> float:
    """
    (A v)·v / (v·v).

    Raises:
        DimensionMismatchError: If matrix.cols != len(v)
        DegenerateQuotientError: If v·v is exactly 0.0
    """
    numerator = dot(multiply_vector(matrix, v, workers=workers), v)
    denominator = dot(v, v)
    if denominator == 0.0:
        raise DegenerateQuotientError(
            "Rayleigh quotient denominator v·v is zero", denominator=denominator
        )
    return numerator / denominator
