"""
Core infrastructure for pylinalg.

Shared abstractions used by every algorithm package (dense, ops,
determinant, decomposition, eigen).

Key components:
    protocols: Backend protocol
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    compute: Timing, tolerances, data-parallel fan-out
"""

from pylinalg.core.protocols import Backend
from pylinalg.core.result import Result
from pylinalg.core.exceptions import (
    PyLinalgError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
    DegenerateQuotientError,
    ConvergenceError,
)

__all__ = [
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "PyLinalgError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    "DegenerateQuotientError",
    "ConvergenceError",
]
