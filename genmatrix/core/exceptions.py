"""
Exception hierarchy for genmatrix.

All exceptions inherit from GenMatrixError to allow catching any
library-specific error. Every failure a Matrix can produce is a
ValidationError: the caller handed in something malformed, and the
operation refused it before building anything.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class GenMatrixError(Exception):
    """Base exception for all genmatrix errors."""
    pass


class ValidationError(GenMatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class ShapeError(ValidationError):
    """
    Nested input data is not rectangular.

    Raised by Matrix.from_data when the rows of the supplied grid have
    inconsistent lengths.

    Attributes:
        row: Index of the first offending row
        expected_columns: Column count established by row 0
        actual_columns: Column count of the offending row
    """

    def __init__(
        self,
        message: str,
        row: int | None = None,
        expected_columns: int | None = None,
        actual_columns: int | None = None
    ):
        super().__init__(message)
        self.row = row
        self.expected_columns = expected_columns
        self.actual_columns = actual_columns


class InvalidDimensionError(ValidationError):
    """
    Requested dimensions are not allowed.

    Raised when a constructor receives a dimension that is not a pair of
    non-negative integers. Zero is a valid dimension and yields an
    empty matrix.

    Attributes:
        dimension: The rejected dimension value, as passed in
    """

    def __init__(self, message: str, dimension: object = None):
        super().__init__(message)
        self.dimension = dimension


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element index lies outside the matrix.

    Also an IndexError, so code written against plain sequences keeps
    working.

    Attributes:
        index: The (row, column) pair that was requested
        shape: The (rows, columns) shape of the matrix
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    Addition and subtraction need identical shapes; multiplication needs
    the left operand's column count to equal the right operand's row count.

    Attributes:
        operation: 'add', 'subtract', 'multiply' or 'allclose'
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
