"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. The set is closed: every failure the matrix
engine can report maps to exactly one class below.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when caller-provided inputs or matrix contents fail
    validation checks.
    """
    pass


class UninitializedError(ValidationError):
    """
    Operation requires an allocated matrix.

    Raised when validating the uninitialized matrix (``Matrix(None)``),
    the equivalent of an absent matrix reference.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for all shape related failures.
    """
    pass


class InconsistentShapeError(DimensionError):
    """
    Rows of a matrix have differing lengths.

    Attributes:
        row: Index of the first offending row
        expected: Length of the reference (first) row
        actual: Length of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected: int | None = None,
        actual: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


class DimMismatchError(DimensionError):
    """
    Operand shapes are incompatible for the requested operation.

    Attributes:
        left: Shape of the left operand
        right: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left: tuple[int, int] | None = None,
        right: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left = left
        self.right = right


class NotSquareError(DimensionError):
    """
    Identity or inversion requested on a non-square matrix.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NotAVectorError(DimensionError):
    """
    Single column constraint violated.

    Attributes:
        shape: Shape of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class OutOfBoundsError(ValidationError, IndexError):
    """
    View or in-place write indices exceed the container's bounds.

    Also an IndexError so generic sequence handling keeps working.

    Attributes:
        index: The offending (row, col) start, when applicable
        shape: Shape of the container that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, ...] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class NegativeIndexError(OutOfBoundsError):
    """Negative start offset or count passed to a view or write."""
    pass


class NumericalError(MatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gauss-Jordan elimination finds an exactly zero pivot.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        column: Pivot column at which elimination failed
        size: Order n of the n x n matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        column: int | None = None,
        size: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.column = column
        self.size = size
