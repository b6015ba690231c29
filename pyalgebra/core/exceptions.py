"""
Exception hierarchy for pyalgebra.

All exceptions inherit from PyAlgebraError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Every error is raised before any operand is read or mutated
"""


class PyAlgebraError(Exception):
    """Base exception for all pyalgebra errors."""
    pass


class ValidationError(PyAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks, e.g. a
    non-numeric element type or too few operands for a variadic operation.
    """
    pass


class DimensionError(ValidationError):
    """
    Operand dimensions are incorrect or inconsistent.

    Raised when an operation requires equal shapes (elementwise arithmetic,
    Hadamard product) or a chained shape (matrix product inner dimension)
    that the operands do not satisfy, or when an operation is only defined
    for particular shapes (cross product, determinant, trace).
    """
    pass


class SizeMismatchError(DimensionError):
    """
    A dynamically-sized collection does not match a fixed size.

    Attributes:
        expected: Required number of elements
        actual: Number of elements supplied
    """

    def __init__(
        self,
        message: str,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class RowCountMismatchError(SizeMismatchError):
    """
    A list of rows does not match the fixed row count of a matrix.

    Attributes are inherited from SizeMismatchError and count rows.
    """
    pass


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    An index or range falls outside the bound of its container.

    Also an IndexError so that generic Python code handling index failures
    keeps working.

    Attributes:
        index: The offending index (first or last index for ranges)
        bound: The exclusive upper bound of the container axis
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound


class NumericalError(PyAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular or nearly singular.

    Raised when a matrix operation requires invertibility but the
    determinant magnitude is below the singularity threshold.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that failed the threshold, if computed
        rank: Numerical rank, if computed
        expected_rank: Expected rank (the matrix order)
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
        rank: int | None = None,
        expected_rank: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
        self.rank = rank
        self.expected_rank = expected_rank
