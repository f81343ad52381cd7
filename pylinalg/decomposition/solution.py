"""
Decomposition solution types.

Contains the parameter payloads and user-facing solution wrappers for
the adjugate inverse and the Doolittle LU factorization.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike

from pylinalg.core.result import Result
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.validation import check_finite, check_same_length
from pylinalg.dense.design import Matrix, Vector, as_vector


@dataclass(frozen=True)
class InverseParams:
    """
    Parameter payload for the adjugate inverse.

    This is the immutable data computed by backends.
    """
    inverse: Matrix
    determinant: float
    adjugate: Matrix


@dataclass
class InverseSolution:
    """
    User-facing inverse result.

    Wraps Result[InverseParams] and the matrix that was inverted.
    """
    _result: Result[InverseParams]
    _matrix: Matrix

    @property
    def inverse(self) -> Matrix:
        return self._result.params.inverse

    @property
    def determinant(self) -> float:
        """Determinant of the input matrix."""
        return self._result.params.determinant

    @property
    def adjugate(self) -> Matrix:
        """Transpose of the cofactor matrix of the input."""
        return self._result.params.adjugate

    @property
    def matrix(self) -> Matrix:
        """The matrix that was inverted."""
        return self._matrix

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        n = self._matrix.rows
        lines = [
            f"Inverse of {n}x{n} matrix (adjugate method)",
            f"Determinant: {self.determinant:.6g}",
            "Inverse:",
        ]
        for row in self.inverse.data:
            lines.append("  " + "  ".join(f"{x:12.6f}" for x in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        n = self._matrix.rows
        return f"InverseSolution(n={n}, determinant={self.determinant:.6g})"


@dataclass(frozen=True)
class LUParams:
    """
    Parameter payload for LU decomposition.

    Attributes:
        lower: Unit lower-triangular factor L
        upper: Upper-triangular factor U
        zero_pivots: Rows whose pivot U[i, i] was exactly 0.0 and was
            divided by; entries below such pivots are inf/NaN
    """
    lower: Matrix
    upper: Matrix
    zero_pivots: tuple[int, ...] = ()


@dataclass
class LUSolution:
    """
    User-facing LU decomposition result.

    Wraps Result[LUParams] and provides accessors, reconstruction and a
    triangular solve.
    """
    _result: Result[LUParams]
    _matrix: Matrix

    @property
    def L(self) -> Matrix:
        """Unit lower-triangular factor."""
        return self._result.params.lower

    @property
    def U(self) -> Matrix:
        """Upper-triangular factor."""
        return self._result.params.upper

    @property
    def lower(self) -> Matrix:
        return self._result.params.lower

    @property
    def upper(self) -> Matrix:
        return self._result.params.upper

    @property
    def zero_pivots(self) -> tuple[int, ...]:
        return self._result.params.zero_pivots

    @property
    def has_zero_pivot(self) -> bool:
        """True if elimination divided by a zero pivot."""
        return len(self._result.params.zero_pivots) > 0

    @property
    def matrix(self) -> Matrix:
        """The matrix that was factored."""
        return self._matrix

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def reconstruct(self) -> Matrix:
        """L @ U, which approximates the decomposed matrix."""
        return Matrix._wrap(self.L.data @ self.U.data)

    def solve(self, b: Vector | ArrayLike) -> Vector:
        """
        Solve A x = b using the stored factors.

        Forward substitution on L (unit diagonal), then back substitution
        on U. No pivoting is performed.

        Raises:
            DimensionMismatchError: If len(b) != n
            SingularMatrixError: If U has a zero on its diagonal
            ValidationError: If b or the factors contain NaN or Inf
        """
        from scipy.linalg import solve_triangular

        b = as_vector(b)
        n = self._matrix.rows
        check_same_length(n, len(b), "lu_solve")

        diag_U = np.diag(self.U.data)
        zero_diag = np.flatnonzero(diag_U == 0.0)
        if self.has_zero_pivot or zero_diag.size > 0:
            first = self.zero_pivots[0] if self.has_zero_pivot else int(zero_diag[0])
            raise SingularMatrixError(
                f"LU factors are singular: zero pivot at row {first}",
                matrix_name='U',
            )

        check_finite(b.data, "b")
        check_finite(self.L.data, "L")
        check_finite(self.U.data, "U")

        # L y = b, then U x = y
        y = solve_triangular(self.L.data, b.data, lower=True, unit_diagonal=True, check_finite=False)
        x = solve_triangular(self.U.data, y, lower=False, check_finite=False)
        return Vector._wrap(x)

    def summary(self) -> str:
        n = self._matrix.rows
        lines = [f"LU decomposition of {n}x{n} matrix (Doolittle, no pivoting)"]
        if self.has_zero_pivot:
            lines.append(f"Zero pivots at rows: {list(self.zero_pivots)}")
        lines.append("L:")
        for row in self.L.data:
            lines.append("  " + "  ".join(f"{x:12.6f}" for x in row))
        lines.append("U:")
        for row in self.U.data:
            lines.append("  " + "  ".join(f"{x:12.6f}" for x in row))
        return "\n".join(lines)

    def __repr__(self) -> str:
        n = self._matrix.rows
        pivots = f", zero_pivots={list(self.zero_pivots)}" if self.has_zero_pivot else ""
        return f"LUSolution(n={n}{pivots})"
