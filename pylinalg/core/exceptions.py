"""
Exception hierarchy for pylinalg.

All exceptions inherit from PyLinalgError so callers can catch any
library failure with a single clause. Each failure kind raised by the
public operations has its own class:

    DimensionMismatchError   add, multiply, dot, vector_add, multiply_vector
    NotSquareError           inverse, lu_decompose, cofactor operations
    SingularMatrixError      inverse (determinant exactly 0.0)
    ConvergenceError         power_iteration (max_iters exhausted)
    DegenerateQuotientError  eigenvalue (v·v exactly 0.0)

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages state the actual and expected values
    - Preconditions are checked before any work starts
"""


class PyLinalgError(Exception):
    """Base exception for all pylinalg errors."""
    pass


class ValidationError(PyLinalgError):
    """
    Input validation failed.

    Raised when user-provided inputs cannot be turned into a matrix or
    vector, or when a keyword argument is out of range.
    """
    pass


class DimensionError(ValidationError):
    """
    Array dimensions are incorrect or inconsistent.

    Base class for the shape failures below. Raised directly for
    structural problems such as a 3D buffer or an empty matrix.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Operand shapes are incompatible for an operation.

    Attributes:
        operation: Name of the operation that rejected its operands
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, ...] | None = None,
        right_shape: tuple[int, ...] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Attributes:
        operation: Name of the operation that requires a square matrix
        shape: Shape of the offending matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.shape = shape


class NumericalError(PyLinalgError):
    """
    Numerical computation failed.

    Base class for failures that depend on the values in a matrix rather
    than its shape.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    The check is bit-exact: only a determinant (or pivot) of exactly 0.0
    is treated as singular. No near-singularity tolerance is applied.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the failure, if known
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant


class DegenerateQuotientError(NumericalError):
    """
    Rayleigh quotient denominator is zero.

    Attributes:
        denominator: The value of v·v (always 0.0)
    """

    def __init__(self, message: str, denominator: float = 0.0):
        super().__init__(message)
        self.denominator = denominator


class ConvergenceError(PyLinalgError):
    """
    Iterative algorithm failed to converge.

    Raised when power iteration does not meet its tolerance within the
    allowed number of iterations. Retrying with a larger budget is left
    to the caller.

    Attributes:
        iterations: Number of iterations completed
        final_change: Largest component change on the last iteration
        reason: Why convergence failed (e.g., 'max_iterations')
        threshold: The tolerance that was not met
    """

    def __init__(
        self,
        message: str,
        iterations: int,
        final_change: float | None = None,
        reason: str | None = None,
        threshold: float | None = None
    ):
        super().__init__(message)
        self.iterations = iterations
        self.final_change = final_change
        self.reason = reason
        self.threshold = threshold
