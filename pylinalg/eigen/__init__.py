"""
Power-iteration eigensolver.

Computes only the dominant eigenpair.

Public API:
    power_iteration(A, max_iters, tolerance) -> EigenSolution
    eigenvector(A, max_iters, tolerance)     -> Vector
    eigenvalue(A, v)                         -> float (Rayleigh quotient)
"""

from pylinalg.eigen.design import PowerIterationDesign
from pylinalg.eigen.solution import EigenParams, EigenSolution
from pylinalg.eigen.solvers import power_iteration, eigenvector, eigenvalue

__all__ = [
    "power_iteration",
    "eigenvector",
    "eigenvalue",
    "PowerIterationDesign",
    "EigenParams",
    "EigenSolution",
]
