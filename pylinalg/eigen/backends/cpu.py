"""
CPU power-iteration backend.

State machine over a fixed-size iterate:

    Iterating(k), k = 0 .. max_iters-1
        b_{k+1} = normalize(A b_k)
        every |b_{k+1} - b_k| < tolerance  ->  Converged(b_{k+1})
    after max_iters transitions            ->  NotConverged (ConvergenceError)

The initial iterate b_0 is a vector of ones. The only bound on the loop
is the iteration count; there is no wall-clock timeout.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.parallel import resolve_workers
from pylinalg.core.exceptions import ConvergenceError
from pylinalg.dense.design import ones
from pylinalg.ops.arithmetic import multiply_vector, normalize
from pylinalg.eigen.design import PowerIterationDesign
from pylinalg.eigen.solution import EigenParams
from pylinalg.eigen._rayleigh import rayleigh_quotient


class CPUPowerIterationBackend:
    """Dominant eigenpair by power iteration and the Rayleigh quotient."""

    def __init__(self, workers: int | None = None):
        self._workers = resolve_workers(workers)

    @property
    def name(self) -> str:
        return 'cpu_power'

    def solve(
        self,
        design: PowerIterationDesign,
        *,
        compute_eigenvalue: bool = True,
    ) -> Result[EigenParams]:
        """
        Run power iteration to convergence.

        Args:
            design: Validated matrix and iteration settings
            compute_eigenvalue: If False, skip the Rayleigh quotient

        Returns:
            Result containing EigenParams

        Raises:
            ConvergenceError: If max_iters transitions do not converge
        """
        timer = Timer()
        timer.start()

        matrix = design.matrix
        tol = design.tolerance
        warnings_list: list[str] = []

        b_k = ones(design.n)
        final_change: float | None = None
        converged_vector = None
        iterations = 0

        for k in range(design.max_iters):
            with timer.section('iteration'):
                b_next = normalize(multiply_vector(matrix, b_k, workers=self._workers))
                change = np.abs(b_next.data - b_k.data)
            iterations = k + 1
            final_change = float(np.max(change))
            if np.all(change < tol):
                converged_vector = b_next
                break
            b_k = b_next

        if converged_vector is None:
            timer.stop()
            raise ConvergenceError(
                f"Power iteration did not converge in {design.max_iters} iterations "
                f"(tolerance {tol:g}, last change "
                f"{'n/a' if final_change is None else f'{final_change:.3g}'})",
                iterations=iterations,
                final_change=final_change,
                reason='max_iterations',
                threshold=tol,
            )

        eigenvalue = None
        if not np.any(converged_vector.data):
            warnings_list.append(
                "iterate collapsed to the zero vector; eigenvalue is undefined"
            )
        elif compute_eigenvalue:
            with timer.section('rayleigh'):
                eigenvalue = rayleigh_quotient(matrix, converged_vector, self._workers)

        timer.stop()

        params = EigenParams(
            eigenvector=converged_vector,
            eigenvalue=eigenvalue,
            iterations=iterations,
            final_change=final_change,
        )
        return Result(
            params=params,
            info={
                'method': 'power_iteration',
                'converged': True,
                'iterations': iterations,
                'tolerance': tol,
                'max_iters': design.max_iters,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
