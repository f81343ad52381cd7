"""
Dense containers.

Public API:
    Matrix          - immutable rows x cols matrix of doubles
    Vector          - immutable vector of doubles
    identity(n)     - n x n identity
    zero(r, c)      - r x c zeros
    ones(n)         - vector of ones
"""

from pylinalg.dense.design import (
    Matrix,
    Vector,
    identity,
    zero,
    ones,
    as_matrix,
    as_vector,
)

__all__ = [
    "Matrix",
    "Vector",
    "identity",
    "zero",
    "ones",
    "as_matrix",
    "as_vector",
]
