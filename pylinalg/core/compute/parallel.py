"""
Index-ordered data-parallel fan-out.

Several operations decompose into independent per-index units: rows of
a matrix product, cells of a cofactor matrix, rows of a norm. These run
through map_indexed(), which may dispatch them to a thread pool but
always places each result at its originating index. The output is
therefore identical whatever the worker count or completion order.

Worker counts:
    None or 1   evaluate serially in the calling thread
    n > 1       evaluate on a ThreadPoolExecutor with n workers
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Callable, TypeVar

from pylinalg.core.validation import check_positive_int

T = TypeVar('T')

# Serial evaluation unless a caller asks for workers
DEFAULT_WORKERS: int | None = None


def resolve_workers(workers: int | None) -> int:
    """
    Normalize a worker-count argument.

    Returns:
        Number of workers to use (1 means serial)

    Raises:
        ValidationError: If workers is not a positive integer or None
    """
    if workers is None:
        workers = DEFAULT_WORKERS
    if workers is None:
        return 1
    return check_positive_int(workers, "workers")


def map_indexed(
    func: Callable[[int], T],
    n: int,
    workers: int | None = None,
) -> list[T]:
    """
    Evaluate func(i) for i in range(n) and return results by index.

    Args:
        func: Pure function of the unit index
        n: Number of units
        workers: Worker count (None or 1 for serial)

    Returns:
        List whose i-th element is func(i)

    Raises:
        ValidationError: If workers is invalid
        Exception: The first exception raised by func, re-raised as is
    """
    n_workers = resolve_workers(workers)

    if n_workers == 1 or n <= 1:
        return [func(i) for i in range(n)]

    results: list[T | None] = [None] * n
    with ThreadPoolExecutor(max_workers=min(n_workers, n)) as pool:
        futures = {pool.submit(func, i): i for i in range(n)}
        for future in as_completed(futures):
            results[futures[future]] = future.result()
    return results  # type: ignore[return-value]
