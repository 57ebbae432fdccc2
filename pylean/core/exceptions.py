"""
Exception hierarchy for pylean.

All recoverable exceptions inherit from PyLeanError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information

ArithmeticFault is deliberately outside the PyLeanError tree: it is the
hard stop raised by the Safe arithmetic mode, and ``except PyLeanError``
must never swallow it.
"""


class PyLeanError(Exception):
    """Base exception for all recoverable pylean errors."""
    pass


class ValidationError(PyLeanError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidTypeInitialization(ValidationError):
    """
    Element type is neither an integer nor a floating-point type.

    Attributes:
        dtype: The rejected type, as given by the caller
    """

    def __init__(self, message: str, dtype: object | None = None):
        super().__init__(message)
        self.dtype = dtype


class UninitializedMatrix(ValidationError):
    """Operation requires a matrix with at least one element."""
    pass


class StatNotAvailable(ValidationError):
    """
    Statistic has no well-defined position in the matrix.

    Attributes:
        kind: The statistic that was asked for coordinates
    """

    def __init__(self, message: str, kind: str | None = None):
        super().__init__(message)
        self.kind = kind


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when shapes don't match expected dimensions or when
    multiple matrices have inconsistent shapes.
    """
    pass


class WrongMatrixScheme(DimensionError):
    """
    Input rows do not form a rectangle.

    Attributes:
        row_lengths: Lengths of the offending input rows, if known
    """

    def __init__(self, message: str, row_lengths: tuple[int, ...] | None = None):
        super().__init__(message)
        self.row_lengths = row_lengths


class UnmatchedScheme(DimensionError):
    """
    Shape or length mismatch between two operands.

    Attributes:
        expected: Expected scheme or length
        actual: Scheme or length that was supplied
    """

    def __init__(
        self,
        message: str,
        expected: object | None = None,
        actual: object | None = None,
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual


class NonSquareMatrix(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        scheme: The (columns, rows) scheme of the rejected matrix
    """

    def __init__(self, message: str, scheme: tuple[int, int] | None = None):
        super().__init__(message)
        self.scheme = scheme


class IndexOutOfRange(ValidationError, IndexError):
    """
    Row or column index is not below its bound.

    Attributes:
        index: The requested index
        bound: Number of rows or columns available
    """

    def __init__(self, message: str, index: int | None = None, bound: int | None = None):
        super().__init__(message)
        self.index = index
        self.bound = bound


class RowOutOfRange(IndexOutOfRange):
    """Row index is not below the row count."""
    pass


class ColumnOutOfRange(IndexOutOfRange):
    """Column index is not below the column count."""
    pass


class OperationNotSupported(PyLeanError):
    """
    Operation is declared but not available for the given configuration.

    Raised for non-integer matrix powers, for cofactor-based operations on
    unsigned element types, and whenever the multi-threaded or GPU compute
    configurations are selected.
    """
    pass


class NumericalError(PyLeanError):
    """
    Numerical computation failed.

    Base class for recoverable errors arising from numerical issues.
    """
    pass


class DeterminantEqualToZero(NumericalError):
    """
    Matrix is singular.

    Raised when inversion is requested for a matrix whose determinant
    is exactly zero.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        scheme: The (columns, rows) scheme of the matrix
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        scheme: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.scheme = scheme


class ArithmeticFault(ArithmeticError):
    """
    Unrecoverable arithmetic failure in Safe mode.

    Raised on integer overflow, non-finite floating results and division
    by zero. The operation has no meaningful value to return; callers are
    not expected to recover.

    Attributes:
        operation: Name of the scalar operation ('add', 'div', ...)
        dtype: Name of the element type
    """

    def __init__(self, message: str, operation: str | None = None, dtype: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.dtype = dtype
