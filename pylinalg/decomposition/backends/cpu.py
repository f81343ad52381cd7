"""
CPU backends for matrix inversion and LU decomposition.

Both implement the Backend protocol with a Matrix as input. Square
checks happen before any arithmetic so invalid input never starts the
(possibly concurrent) cofactor fan-out.
"""

from __future__ import annotations

import numpy as np

from pylinalg.core.result import Result
from pylinalg.core.compute.timing import Timer
from pylinalg.core.compute.parallel import resolve_workers
from pylinalg.core.exceptions import SingularMatrixError
from pylinalg.core.validation import check_square
from pylinalg.dense.design import Matrix
from pylinalg.determinant._expansion import laplace_determinant, adjugate_array
from pylinalg.decomposition.solution import InverseParams, LUParams


class CPUInverseBackend:
    """
    Inverse via the adjugate method.

    Algorithm:
        1. det = cofactor expansion of A
        2. det == 0.0 exactly -> SingularMatrixError (no tolerance)
        3. adj[j, i] = (-1)^(i+j) det(minor(A, i, j)), cells in parallel
        4. inverse = adj / det
    """

    def __init__(self, workers: int | None = None):
        self._workers = resolve_workers(workers)

    @property
    def name(self) -> str:
        return 'cpu_adjugate'

    def solve(self, design: Matrix) -> Result[InverseParams]:
        """
        Invert a square matrix.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the determinant is exactly 0.0
        """
        check_square(design.shape, "inverse")

        timer = Timer()
        timer.start()

        data = design.data
        n = design.rows

        with timer.section('determinant'):
            det = laplace_determinant(data)

        if det == 0.0:
            raise SingularMatrixError(
                f"Matrix is not invertible: determinant is exactly 0.0 ({n}x{n})",
                matrix_name='A',
                determinant=det,
            )

        with timer.section('cofactors'):
            adj = adjugate_array(data, self._workers)

        with timer.section('scale'):
            inv = adj / det

        timer.stop()

        params = InverseParams(
            inverse=Matrix._wrap(inv),
            determinant=det,
            adjugate=Matrix._wrap(adj),
        )
        return Result(
            params=params,
            info={'method': 'adjugate', 'n': n, 'workers': self._workers},
            timing=timer.result(),
            backend_name=self.name,
        )


class CPULUBackend:
    """
    Doolittle LU decomposition without pivoting.

    For each pivot row i:
        U[i, k] = A[i, k] - sum_{j<i} L[i, j] U[j, k]            (k >= i)
        L[k, i] = (A[k, i] - sum_{j<i} L[k, j] U[j, i]) / U[i, i] (k > i)
        L[i, i] = 1

    A zero pivot is not an error. Division by it yields inf/NaN entries,
    the row is recorded in LUParams.zero_pivots, and a warning is
    attached to the result.
    """

    @property
    def name(self) -> str:
        return 'cpu_doolittle'

    def solve(self, design: Matrix) -> Result[LUParams]:
        """
        Factor a square matrix into L and U.

        Raises:
            NotSquareError: If the matrix is not square
        """
        check_square(design.shape, "lu_decompose")

        timer = Timer()
        timer.start()

        a = design.data
        n = design.rows
        lower = np.zeros((n, n), dtype=np.float64)
        upper = np.zeros((n, n), dtype=np.float64)
        zero_pivots: list[int] = []
        warnings_list: list[str] = []

        # inf/NaN after a zero pivot propagate silently; reported below
        with timer.section('elimination'), np.errstate(divide='ignore', invalid='ignore'):
            for i in range(n):
                for k in range(i, n):
                    upper[i, k] = a[i, k] - lower[i, :i] @ upper[:i, k]

                lower[i, i] = 1.0
                if i + 1 < n and upper[i, i] == 0.0:
                    zero_pivots.append(i)
                    warnings_list.append(
                        f"zero pivot at row {i}; L below the pivot contains inf/NaN"
                    )

                for k in range(i + 1, n):
                    lower[k, i] = (a[k, i] - lower[k, :i] @ upper[:i, i]) / upper[i, i]

        timer.stop()

        params = LUParams(
            lower=Matrix._wrap(lower),
            upper=Matrix._wrap(upper),
            zero_pivots=tuple(zero_pivots),
        )
        return Result(
            params=params,
            info={'method': 'doolittle', 'n': n, 'pivoting': False},
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
