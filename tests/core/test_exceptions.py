"""
Tests for the pylean exception hierarchy.

Validates:
    - Inheritance chain (recoverable errors catchable via PyLeanError)
    - ArithmeticFault stays outside PyLeanError
    - Diagnostic attributes and their defaults
"""

import pytest

from pylean.core.exceptions import (
    ArithmeticFault,
    ColumnOutOfRange,
    DeterminantEqualToZero,
    DimensionError,
    IndexOutOfRange,
    InvalidTypeInitialization,
    NonSquareMatrix,
    NumericalError,
    OperationNotSupported,
    PyLeanError,
    RowOutOfRange,
    StatNotAvailable,
    UninitializedMatrix,
    UnmatchedScheme,
    ValidationError,
    WrongMatrixScheme,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every recoverable exception is catchable via PyLeanError."""

    @pytest.mark.parametrize("exc", [
        ValidationError,
        InvalidTypeInitialization,
        UninitializedMatrix,
        StatNotAvailable,
        DimensionError,
        WrongMatrixScheme,
        UnmatchedScheme,
        NonSquareMatrix,
        RowOutOfRange,
        ColumnOutOfRange,
        OperationNotSupported,
        NumericalError,
        DeterminantEqualToZero,
    ])
    def test_is_pylean_error(self, exc):
        with pytest.raises(PyLeanError):
            raise exc("failed")

    @pytest.mark.parametrize("exc", [WrongMatrixScheme, UnmatchedScheme, NonSquareMatrix])
    def test_shape_errors_are_dimension_errors(self, exc):
        assert issubclass(exc, DimensionError)
        assert issubclass(exc, ValidationError)

    def test_out_of_range_errors_are_index_errors(self):
        """Row/column errors can be caught as the builtin IndexError too."""
        assert issubclass(RowOutOfRange, IndexOutOfRange)
        assert issubclass(ColumnOutOfRange, IndexOutOfRange)
        with pytest.raises(IndexError):
            raise RowOutOfRange("row 3 out of range", index=3, bound=2)

    def test_determinant_zero_is_numerical_error(self):
        assert issubclass(DeterminantEqualToZero, NumericalError)

    def test_arithmetic_fault_is_not_pylean_error(self):
        """A Safe-mode fault must escape `except PyLeanError`."""
        err = ArithmeticFault("add: integer overflow for int8")
        assert not isinstance(err, PyLeanError)
        assert isinstance(err, ArithmeticError)

        with pytest.raises(ArithmeticFault):
            try:
                raise err
            except PyLeanError:
                pytest.fail("ArithmeticFault was caught as PyLeanError")


# ═══════════════════════════════════════════════════════════════════════
# Diagnostic attributes
# ═══════════════════════════════════════════════════════════════════════


class TestAttributes:

    def test_index_out_of_range(self):
        err = ColumnOutOfRange("column 5 out of range", index=5, bound=3)
        assert str(err) == "column 5 out of range"
        assert err.index == 5
        assert err.bound == 3

    def test_index_defaults_are_none(self):
        err = RowOutOfRange("bad row")
        assert err.index is None
        assert err.bound is None

    def test_unmatched_scheme(self):
        err = UnmatchedScheme("mismatch", expected=(2, 2), actual=(3, 2))
        assert err.expected == (2, 2)
        assert err.actual == (3, 2)

    def test_wrong_matrix_scheme(self):
        err = WrongMatrixScheme("ragged", row_lengths=(2, 3))
        assert err.row_lengths == (2, 3)
        assert WrongMatrixScheme("ragged").row_lengths is None

    def test_non_square(self):
        err = NonSquareMatrix("not square", scheme=(3, 2))
        assert err.scheme == (3, 2)

    def test_determinant_zero(self):
        err = DeterminantEqualToZero("singular", matrix_name="a", scheme=(2, 2))
        assert err.matrix_name == "a"
        assert err.scheme == (2, 2)
        assert DeterminantEqualToZero("singular").matrix_name is None

    def test_stat_not_available(self):
        err = StatNotAvailable("no position", kind="avg")
        assert err.kind == "avg"

    def test_invalid_type(self):
        err = InvalidTypeInitialization("bad type", dtype=complex)
        assert err.dtype is complex

    def test_arithmetic_fault(self):
        err = ArithmeticFault("div: division by zero for int32", operation="div", dtype="int32")
        assert err.operation == "div"
        assert err.dtype == "int32"
        assert "division by zero" in str(err)
