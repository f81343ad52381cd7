"""
Determinant engine.

Public API:
    determinant(A)        - cofactor expansion; None for non-square A
    minor(A, i, j)        - A without row i and column j
    cofactor(A, i, j)     - signed minor determinant
    cofactor_matrix(A)    - all cofactors
    adjugate(A)           - transpose of the cofactor matrix
"""

from pylinalg.determinant.solvers import (
    determinant,
    minor,
    cofactor,
    cofactor_matrix,
    adjugate,
)

__all__ = [
    "determinant",
    "minor",
    "cofactor",
    "cofactor_matrix",
    "adjugate",
]
