"""
Generic result container for pylinalg computations.

Backends return a Result envelope; solution wrappers (InverseSolution,
LUSolution, EigenSolution) sit on top of it and expose friendly
accessors. Keeping the envelope generic lets timing, warnings and
backend identification work the same way for every algorithm.

Design decisions:
    - Generic over parameter payload P
    - info dict for algorithm metadata (iterations, converged, pivots)
    - timing is optional so unit tests can build results by hand
    - Immutable (frozen=True), like every other value in the library
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for linear algebra computations.

    Type Parameters:
        P: The algorithm-specific parameter payload type

    Attributes:
        params: Algorithm output (inverse, LU factors, eigenpair)
        info: Structured metadata (method, convergence, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> # Direct method
        >>> Result(
        ...     params=InverseParams(inverse=inv, determinant=-2.0, adjugate=adj),
        ...     info={'method': 'adjugate', 'n': 2},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='cpu_adjugate'
        ... )

        >>> # Iterative method
        >>> Result(
        ...     params=EigenParams(eigenvector=v, eigenvalue=3.0, ...),
        ...     info={'method': 'power_iteration', 'converged': True, 'iterations': 2},
        ...     timing={'total_seconds': 0.002, 'iteration': 0.0015},
        ...     backend_name='cpu_power'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
