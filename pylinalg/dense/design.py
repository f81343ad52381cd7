"""
Matrix and Vector: immutable dense containers.

Both wrap a private float64 numpy array that is flagged read-only at
construction. Every operation in the library returns a new container;
nothing is ever updated in place.

Construction:
    Matrix.from_array([[1, 2], [3, 4]])
    Matrix.from_buffer([1, 2, 3, 4, 5, 6], shape=(2, 3))   # row-major
    Vector.from_array([1, 2, 3])
    identity(3), zero(2, 3), ones(4)
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.core.compute.tolerances import ToleranceTier, select_tolerance
from pylinalg.core.validation import (
    check_array,
    check_1d,
    check_2d,
    check_nonempty,
    check_positive_int,
)


def _freeze(data: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mark an owned array read-only and return it."""
    data.setflags(write=False)
    return data


def _trusted(cls, data: NDArray[np.float64]):
    # Skips __init__/__post_init__: data is owned and already validated.
    obj = object.__new__(cls)
    object.__setattr__(obj, '_data', _freeze(np.ascontiguousarray(data, dtype=np.float64)))
    return obj


def _tier(tolerance: ToleranceTier | None, ill_conditioned: bool) -> ToleranceTier:
    if tolerance is not None:
        return tolerance
    return select_tolerance(is_ill_conditioned=ill_conditioned)


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense rows x cols matrix of doubles with row-major [i, j] indexing.

    Immutable after construction: the underlying array is a private copy
    with its write flag cleared. rows >= 1 and cols >= 1.
    """
    _data: NDArray[np.float64]

    def __post_init__(self) -> None:
        array = check_array(self._data, "data")
        check_2d(array, "data")
        check_nonempty(array, "data")
        object.__setattr__(self, '_data', _freeze(np.ascontiguousarray(array)))

    @classmethod
    def from_array(cls, data: ArrayLike) -> Matrix:
        """
        Build a Matrix from 2D array-like data.

        Parameters
        ----------
        data : array-like
            Nested sequence or numpy array of shape (rows, cols).
            The values are copied.
        """
        if isinstance(data, Matrix):
            return data
        array = check_array(data, "data")
        return cls._build(array)

    @classmethod
    def from_buffer(cls, buffer: ArrayLike, shape: tuple[int, int]) -> Matrix:
        """
        Build a Matrix from a flat row-major buffer and a shape.

        Parameters
        ----------
        buffer : array-like
            Flat sequence of rows * cols numbers.
        shape : tuple of int
            (rows, cols).
        """
        if len(shape) != 2:
            raise DimensionError(f"shape: expected (rows, cols), got {shape!r}")
        rows = check_positive_int(shape[0], "rows")
        cols = check_positive_int(shape[1], "cols")

        flat = check_array(buffer, "buffer")
        check_1d(flat, "buffer")
        if flat.size != rows * cols:
            raise DimensionError(
                f"buffer: {flat.size} values cannot fill a {rows}x{cols} matrix "
                f"(expected {rows * cols})"
            )
        return cls._build(flat.reshape(rows, cols))

    @classmethod
    def _build(cls, data: NDArray[np.float64]) -> Matrix:
        """Internal builder with validation. Takes ownership of data."""
        check_2d(data, "data")
        check_nonempty(data, "data")
        return cls._wrap(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Matrix:
        """Wrap an array produced inside the library without re-validating."""
        return _trusted(cls, data)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._data

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the values."""
        return self._data.copy()

    def to_list(self) -> list[list[float]]:
        return self._data.tolist()

    def __getitem__(self, key: tuple[int, int]) -> float:
        if not (isinstance(key, tuple) and len(key) == 2):
            raise ValidationError(f"Matrix index must be (row, col), got {key!r}")
        return float(self._data[key])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Matrix | ArrayLike,
        tolerance: ToleranceTier | None = None,
        *,
        ill_conditioned: bool = False,
    ) -> bool:
        """
        Elementwise comparison within tolerance (shapes must match).

        Uses CPU_FP64 unless a tier is given; ill_conditioned=True selects
        the looser tier for results of long cancelling computations.
        """
        tier = _tier(tolerance, ill_conditioned)
        other_data = other.data if isinstance(other, Matrix) else check_array(other, "other")
        if other_data.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, other_data, rtol=tier.rtol, atol=tier.atol))

    def __repr__(self) -> str:
        return f"Matrix({self.rows}x{self.cols}, {self.to_list()})"


@dataclass(frozen=True, eq=False)
class Vector:
    """
    Dense vector of n >= 1 doubles.

    Immutable after construction, like Matrix.
    """
    _data: NDArray[np.float64]

    def __post_init__(self) -> None:
        array = check_array(self._data, "data")
        check_1d(array, "data")
        check_nonempty(array, "data")
        object.__setattr__(self, '_data', _freeze(np.ascontiguousarray(array)))

    @classmethod
    def from_array(cls, data: ArrayLike) -> Vector:
        """
        Build a Vector from 1D array-like data. The values are copied.
        """
        if isinstance(data, Vector):
            return data
        return cls(data)

    @classmethod
    def _wrap(cls, data: NDArray[np.float64]) -> Vector:
        """Wrap an array produced inside the library without re-validating."""
        return _trusted(cls, data)

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the underlying array."""
        return self._data

    def __len__(self) -> int:
        return self._data.shape[0]

    def to_numpy(self) -> NDArray[np.float64]:
        """Writable copy of the values."""
        return self._data.copy()

    def to_list(self) -> list[float]:
        return self._data.tolist()

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __iter__(self):
        return iter(self.to_list())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return len(self) == len(other) and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # type: ignore[assignment]

    def allclose(
        self,
        other: Vector | ArrayLike,
        tolerance: ToleranceTier | None = None,
        *,
        ill_conditioned: bool = False,
    ) -> bool:
        """Componentwise comparison within tolerance (lengths must match)."""
        tier = _tier(tolerance, ill_conditioned)
        other_data = other.data if isinstance(other, Vector) else check_array(other, "other")
        if other_data.shape != self._data.shape:
            return False
        return bool(np.allclose(self._data, other_data, rtol=tier.rtol, atol=tier.atol))

    def __repr__(self) -> str:
        return f"Vector({self.to_list()})"


def identity(n: int) -> Matrix:
    """n x n identity matrix."""
    n = check_positive_int(n, "n")
    return Matrix._wrap(np.eye(n, dtype=np.float64))


def zero(rows: int, cols: int) -> Matrix:
    """rows x cols matrix of zeros."""
    rows = check_positive_int(rows, "rows")
    cols = check_positive_int(cols, "cols")
    return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))


def ones(n: int) -> Vector:
    """Vector of n ones (the power-iteration starting iterate)."""
    n = check_positive_int(n, "n")
    return Vector._wrap(np.ones(n, dtype=np.float64))


def as_matrix(data: Matrix | ArrayLike) -> Matrix:
    """Return data unchanged if it is a Matrix, else build one."""
    if isinstance(data, Matrix):
        return data
    return Matrix.from_array(data)


def as_vector(data: Vector | ArrayLike) -> Vector:
    """Return data unchanged if it is a Vector, else build one."""
    if isinstance(data, Vector):
        return data
    return Vector.from_array(data)
