"""
Matrix: a dense, mutable, row-major container.

A Matrix owns a list of independent 1D numpy row buffers of a single
element type. The content is always rectangular or empty; structural
edits allocate replacement rows instead of resizing in place, so no two
live matrices ever share a row buffer.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylean.core.constants import AXIS_COLUMNS, AXIS_ROWS
from pylean.core.dtypes import coerce_values, is_float, resolve_dtype
from pylean.core.exceptions import UnmatchedScheme, ValidationError, WrongMatrixScheme
from pylean.core.modes import ComputeMode, select_mode
from pylean.core.validation import (
    check_index,
    check_non_empty,
    check_rectangular,
)
from pylean.matrix import _axis, _reshape


class Matrix:
    """
    Dense matrix over one integer or floating-point element type.

    Construction:
        Matrix(np.int32)                          # empty
        Matrix(np.float64, rows=[[1, 2], [3, 4]])
        Matrix(np.int16, mode='fast', capacity=64)
        Matrix.random(3, 3, -5, 5, dtype=np.int64, rng=rng)

    Parameters
    ----------
    dtype : dtype-like
        Element type. Integers and floats only; anything else raises
        InvalidTypeInitialization.
    mode : ComputeMode or str, optional
        Arithmetic mode used by calc/return_calc, linalg and the sum/prod
        statistics. Defaults to Safe. Multi-threaded and GPU modes raise
        OperationNotSupported.
    capacity : int, optional
        Expected number of rows. Recorded only; it never changes what
        any operation returns.
    rows : array-like, optional
        Initial content, passed to set().
    """

    def __init__(
        self,
        dtype: DTypeLike = np.float64,
        *,
        mode: ComputeMode | str | None = None,
        capacity: int | None = None,
        rows: ArrayLike | None = None,
    ):
        self._dtype = resolve_dtype(dtype)
        self._mode = select_mode(mode)
        if capacity is not None and (
            isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 0
        ):
            raise ValidationError(f"capacity: expected non-negative int, got {capacity!r}")
        self._capacity = capacity or 0
        self._rows: list[NDArray[Any]] = []
        if rows is not None:
            self.set(rows)

    @classmethod
    def random(
        cls,
        rows: int,
        columns: int,
        low: float,
        high: float,
        *,
        dtype: DTypeLike = np.float64,
        mode: ComputeMode | str | None = None,
        rng: np.random.Generator | None = None,
    ) -> Matrix:
        """
        Matrix filled with random values in range.

        Integers are drawn from [low, high] inclusive, floats uniformly
        from [low, high).
        """
        dt = resolve_dtype(dtype)
        if rows < 1 or columns < 1:
            raise ValidationError(
                f"random: need at least 1 row and 1 column, got {rows}x{columns}"
            )
        if low > high:
            raise ValidationError(f"random: low ({low}) is greater than high ({high})")
        if rng is None:
            rng = np.random.default_rng()

        if is_float(dt):
            data = rng.uniform(low, high, size=(rows, columns)).astype(dt)
        else:
            data = rng.integers(low, high, size=(rows, columns), dtype=dt, endpoint=True)
        return cls(dt, mode=mode, rows=data)

    # --- Queries ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return len(self._rows)

    @property
    def columns(self) -> int:
        """Number of columns (0 when the matrix has no rows)."""
        return _axis.n_columns(self._rows)

    @property
    def size(self) -> int:
        """Number of elements, rows x columns."""
        return self.rows * self.columns

    @property
    def scheme(self) -> tuple[int, int]:
        """Shape as (columns, rows)."""
        return self.columns, self.rows

    @property
    def dtype(self) -> np.dtype:
        return self._dtype

    @property
    def mode(self) -> ComputeMode:
        return self._mode

    @property
    def capacity(self) -> int:
        return self._capacity

    def set_mode(self, mode: ComputeMode | str) -> None:
        """Switch the arithmetic mode used by later computations."""
        self._mode = select_mode(mode)

    # --- Whole-content access ---

    def set(self, rows: ArrayLike) -> None:
        """
        Replace all content.

        When the new content has exactly the current scheme the existing
        row buffers are overwritten; otherwise they are discarded and the
        input is copied into fresh rows.

        Raises:
            WrongMatrixScheme: If the input rows differ in length
            ValidationError: If values are non-numeric or out of range
        """
        n_rows, n_columns = check_rectangular(rows)
        if n_rows == 0:
            self.destroy()
            return

        values = coerce_values(rows, self._dtype, 'rows')
        if (n_columns, n_rows) == self.scheme:
            for buffer, new in zip(self._rows, values):
                buffer[:] = new
            return

        self.destroy()
        self._rows = [row.copy() for row in values]

    def set_fill(self, value: Any, count: int) -> None:
        """Replace all content with a single row of ``count`` copies of value."""
        if isinstance(count, bool) or not isinstance(count, (int, np.integer)) or count < 0:
            raise ValidationError(f"count: expected non-negative int, got {count!r}")
        if count == 0:
            self.destroy()
            return
        fill = coerce_values(value, self._dtype, 'value')
        if fill.ndim != 0:
            raise ValidationError(f"value: expected a scalar, got shape {fill.shape}")
        self.destroy()
        self._rows = [np.full(count, fill, dtype=self._dtype)]

    def insert(self, rows: ArrayLike) -> None:
        """
        Append rows at the bottom.

        On an empty matrix this is set(); otherwise every new row must
        have ``columns`` values.
        """
        n_rows, n_columns = check_rectangular(rows)
        if n_rows == 0:
            return
        if self.rows and n_columns != self.columns:
            raise WrongMatrixScheme(
                f"insert: rows have {n_columns} values, matrix has {self.columns} columns",
                row_lengths=(n_columns,),
            )
        values = coerce_values(rows, self._dtype, 'rows')
        self._rows.extend(row.copy() for row in values)

    def get(self, column: int, row: int) -> Any:
        """
        Value at (column, row).

        Raises:
            RowOutOfRange, ColumnOutOfRange: If either index is out of bounds
        """
        check_index(row, self.rows, AXIS_ROWS)
        check_index(column, self.columns, AXIS_COLUMNS)
        return self._rows[row][column]

    def change_value(self, value: Any, column: int, row: int) -> None:
        """
        Overwrite the value at (column, row).

        Raises:
            UninitializedMatrix: If the matrix is empty
            UnmatchedScheme: If either index is out of bounds
        """
        check_non_empty(self, 'change_value')
        for name, index, bound in (("column", column, self.columns), ("row", row, self.rows)):
            if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
                raise ValidationError(f"{name}: expected int, got {type(index).__name__}")
            if not 0 <= index < bound:
                raise UnmatchedScheme(
                    f"change_value: {name} {index} outside scheme {self.scheme}",
                    expected=self.scheme,
                    actual=(column, row),
                )
        fill = coerce_values(value, self._dtype, 'value')
        if fill.ndim != 0:
            raise ValidationError(f"value: expected a scalar, got shape {fill.shape}")
        self._rows[row][column] = fill

    def as_flat_sequence(self) -> NDArray[Any]:
        """
        All elements in row-major order, as a new 1D array.

        Raises:
            UninitializedMatrix: If the matrix is empty
        """
        check_non_empty(self, 'as_flat_sequence')
        return np.concatenate(self._rows)

    def to_array(self) -> NDArray[Any]:
        """Content as a new 2D array, shape (rows, columns)."""
        if not self._rows:
            return np.empty((0, 0), dtype=self._dtype)
        return np.array(self._rows, dtype=self._dtype)

    def tolist(self) -> list[list[Any]]:
        return [row.tolist() for row in self._rows]

    def copy(self) -> Matrix:
        """Deep copy with the same element type, mode and capacity."""
        clone = Matrix(self._dtype, mode=self._mode, capacity=self._capacity)
        clone._rows = [row.copy() for row in self._rows]
        return clone

    def destroy(self) -> None:
        """Release all row storage, leaving an empty matrix."""
        self._rows.clear()

    # --- Axis editor ---

    def get_axis(self, axis: str, index: int) -> NDArray[Any]:
        """
        Fresh copy of row ``index`` or column ``index``.

        Raises:
            RowOutOfRange, ColumnOutOfRange: If index is out of bounds
        """
        return _axis.get_axis(self._rows, axis, index)

    def change_axis(self, axis: str, values: ArrayLike, index: int) -> None:
        """
        Overwrite row or column ``index`` with values.

        Raises:
            RowOutOfRange, ColumnOutOfRange: If index is out of bounds
            UnmatchedScheme: If len(values) does not match the other dimension
        """
        _axis.change_axis(self._rows, axis, self._axis_values(values), index)

    def remove_axis(self, axis: str, index: int) -> None:
        """Remove row or column ``index``, keeping the order of the rest."""
        _axis.remove_axis(self._rows, axis, index)

    def add_axis(self, axis: str, values: ArrayLike, index: int) -> None:
        """
        Insert a row or column at ``index`` (clamped to the current bound).

        Inserting a column into an empty matrix creates one row of length
        one per value. A row inserted into a non-empty matrix must have
        ``columns`` values.
        """
        _axis.add_axis(self._rows, axis, self._axis_values(values), index)

    def reverse(self, axis: str, index: int | None = None) -> None:
        """Reverse one row or column in place, or all of them when index is None."""
        _axis.reverse(self._rows, axis, index)

    def _axis_values(self, values: ArrayLike) -> NDArray[Any]:
        converted = coerce_values(values, self._dtype, 'values')
        if converted.ndim != 1:
            raise ValidationError(
                f"values: expected 1D sequence, got shape {converted.shape}"
            )
        return converted

    # --- Reshape / transpose ---

    def rescheme(self, new_columns: int, new_rows: int) -> None:
        """
        Reinterpret the elements with a new (columns, rows) scheme.

        Raises:
            UninitializedMatrix: If the matrix is empty
            UnmatchedScheme: If new_columns * new_rows != size
        """
        _reshape.rescheme(self._rows, new_columns, new_rows)

    def transpose(self) -> None:
        """Transpose in place: element (i, j) moves to (j, i)."""
        _reshape.transpose(self._rows)

    # --- Arithmetic and statistics ---

    def return_calc(self, op: str, other: Matrix) -> Matrix:
        """Elementwise ``op`` with other under this matrix's mode, as a new matrix."""
        from pylean.compute.solvers import return_calc
        return return_calc(op, self, other)

    def calc(self, op: str, other: Matrix) -> None:
        """Elementwise ``op`` with other, written into this matrix."""
        from pylean.compute.solvers import calc
        calc(op, self, other)

    def stat(self, kind: str, axis: str | None = None, index: int | None = None) -> Any:
        """See pylean.stats.stat()."""
        from pylean.stats.solvers import stat
        return stat(self, kind, axis, index)

    def stat_coordinates(
        self, kind: str, axis: str | None = None, index: int | None = None
    ) -> tuple[int, int]:
        """See pylean.stats.stat_coordinates()."""
        from pylean.stats.solvers import stat_coordinates
        return stat_coordinates(self, kind, axis, index)

    # --- Python protocol ---

    def __len__(self) -> int:
        return self.rows

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.scheme == other.scheme and all(
            np.array_equal(a, b) for a, b in zip(self._rows, other._rows)
        )

    __hash__ = None

    def __enter__(self) -> Matrix:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return (
            f"Matrix(dtype={self._dtype}, mode={self._mode}, "
            f"columns={self.columns}, rows={self.rows})"
        )

    def __str__(self) -> str:
        return np.array2string(self.to_array())
