"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle: every
precondition of an operation is checked before any (possibly
concurrent) work starts, so invalid input never produces partial work.

Design principles:
    - No silent type coercion beyond promotion to float64
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter or operation names included in all error messages
"""

import math
import numbers

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinalg.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    NotSquareError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Convert array-like input to a float64 numpy array.

    Rejects inputs that produce object dtype (ragged or mixed data) and
    non-numeric dtypes such as strings or datetimes. Complex input is
    rejected because only real double-precision values are supported.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with dtype float64 (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged or non-numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if not (np.issubdtype(result.dtype, np.number) or result.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_nonempty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify every axis of the array has at least one element.

    Raises:
        DimensionError: If any axis has length zero
    """
    if any(extent < 1 for extent in array.shape):
        raise DimensionError(
            f"{name}: every dimension must be at least 1, got shape {array.shape}"
        )


def check_square(shape: tuple[int, int], operation: str) -> None:
    """
    Verify a matrix shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{operation}: requires a square matrix, got {rows}x{cols}",
            operation=operation,
            shape=shape,
        )


def check_same_shape(
    left: tuple[int, ...],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: operands must have the same shape, got {left} and {right}",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_inner_dimensions(
    left: tuple[int, int],
    right: tuple[int, ...],
    operation: str,
) -> None:
    """
    Verify the left operand's columns match the right operand's rows.

    The right operand may be a matrix (rows, cols) or a vector (n,).

    Raises:
        DimensionMismatchError: If inner dimensions differ
    """
    if left[1] != right[0]:
        raise DimensionMismatchError(
            f"{operation}: inner dimensions must match, "
            f"left has {left[1]} columns but right has {right[0]} rows",
            operation=operation,
            left_shape=left,
            right_shape=right,
        )


def check_same_length(left: int, right: int, operation: str) -> None:
    """
    Verify two vectors have the same length.

    Raises:
        DimensionMismatchError: If lengths differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"{operation}: vectors must have the same length, got {left} and {right}",
            operation=operation,
            left_shape=(left,),
            right_shape=(right,),
        )


def check_index(index: Any, size: int, name: str) -> int:
    """
    Verify an index is an integer in range(size).

    Negative indices are rejected; row/column exclusion is positional.

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer or out of range
    """
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer index, got {index!r}")
    if not 0 <= index < size:
        raise ValidationError(f"{name}: index {index} out of range for size {size}")
    return int(index)


def check_positive_int(value: Any, name: str, *, allow_zero: bool = False) -> int:
    """
    Verify a count-like argument is a positive (or non-negative) integer.

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is out of range
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise ValidationError(f"{name}: expected an integer, got {value!r}")
    lower = 0 if allow_zero else 1
    if value < lower:
        qualifier = "non-negative" if allow_zero else "positive"
        raise ValidationError(f"{name}: must be {qualifier}, got {value}")
    return int(value)


def check_tolerance(value: Any, name: str) -> float:
    """
    Verify a convergence tolerance is a finite number greater than zero.

    Returns:
        The tolerance as a plain float

    Raises:
        ValidationError: If the tolerance is not positive and finite
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ValidationError(f"{name}: expected a real number, got {value!r}")
    tol = float(value)
    if not math.isfinite(tol) or tol <= 0.0:
        raise ValidationError(f"{name}: must be positive and finite, got {tol}")
    return tol
