"""
Inversion engine and LU decomposer.

Public API:
    inverse(A)          - adjugate inverse -> InverseSolution
    inverse_matrix(A)   - adjugate inverse -> Matrix
    lu_decompose(A)     - Doolittle LU, no pivoting -> LUSolution

Example:
    >>> from pylinalg.decomposition import inverse, lu_decompose
    >>> inverse([[4, 7], [2, 6]]).inverse
    >>> lu = lu_decompose([[4, 3], [6, 3]])
    >>> lu.L, lu.U
"""

from pylinalg.decomposition.solution import (
    InverseParams,
    InverseSolution,
    LUParams,
    LUSolution,
)
from pylinalg.decomposition.solvers import inverse, inverse_matrix, lu_decompose

__all__ = [
    "inverse",
    "inverse_matrix",
    "lu_decompose",
    "InverseParams",
    "InverseSolution",
    "LUParams",
    "LUSolution",
]
