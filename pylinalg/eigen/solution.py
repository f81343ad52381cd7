"""
Eigen solution types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING

from pylinalg.core.result import Result
from pylinalg.dense.design import Vector

if TYPE_CHECKING:
    from pylinalg.eigen.design import PowerIterationDesign


@dataclass(frozen=True)
class EigenParams:
    """
    Parameter payload for power iteration.

    Attributes:
        eigenvector: Converged unit iterate (or the zero vector, if the
            iterate collapsed)
        eigenvalue: Rayleigh quotient of the eigenvector, None when the
            eigenvector is the zero vector
        iterations: Number of transitions performed
        final_change: Largest |b_{k+1} - b_k| component on the last step
    """
    eigenvector: Vector
    eigenvalue: float | None
    iterations: int
    final_change: float


@dataclass
class EigenSolution:
    """
    User-facing dominant eigenpair.

    Only converged runs produce an EigenSolution; exhausting max_iters
    raises ConvergenceError instead.
    """
    _result: Result[EigenParams]
    _design: 'PowerIterationDesign'

    @property
    def eigenvector(self) -> Vector:
        return self._result.params.eigenvector

    @property
    def eigenvalue(self) -> float | None:
        return self._result.params.eigenvalue

    @property
    def iterations(self) -> int:
        return self._result.params.iterations

    @property
    def final_change(self) -> float:
        return self._result.params.final_change

    @property
    def converged(self) -> bool:
        return bool(self._result.info.get('converged', False))

    @property
    def tolerance(self) -> float:
        return self._design.tolerance

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
        value = "undefined" if self.eigenvalue is None else f"{self.eigenvalue:.10g}"
        vector = ", ".join(f"{x:.10g}" for x in self.eigenvector)
        lines = [
            f"Power iteration on {self._design.n}x{self._design.n} matrix",
            f"Converged in {self.iterations} iterations "
            f"(tolerance {self.tolerance:g}, final change {self.final_change:.3g})",
            f"Eigenvalue: {value}",
            f"Eigenvector: [{vector}]",
        ]
        return "\n".join(lines)

    def __repr__(self) -> str:
        value = "None" if self.eigenvalue is None else f"{self.eigenvalue:.6g}"
        return (
            f"EigenSolution(n={self._design.n}, eigenvalue={value}, "
            f"iterations={self.iterations})"
        )
