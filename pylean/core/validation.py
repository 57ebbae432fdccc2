"""
Input validation utilities for pylean.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, TYPE_CHECKING
import numpy as np

from pylean.core.constants import (
    ALL_AXES,
    ALL_OPERATIONS,
    ALL_STATS,
    AXIS_ROWS,
)
from pylean.core.exceptions import (
    ColumnOutOfRange,
    NonSquareMatrix,
    RowOutOfRange,
    UninitializedMatrix,
    UnmatchedScheme,
    ValidationError,
    WrongMatrixScheme,
)

if TYPE_CHECKING:
    from pylean.matrix.container import Matrix


def check_axis(axis: str, name: str = "axis") -> None:
    """
    Verify axis is one of the known axis selectors.

    Raises:
        ValidationError: If axis is not 'rows' or 'columns'
    """
    if axis not in ALL_AXES:
        raise ValidationError(
            f"{name}: unknown axis {axis!r}, expected one of {sorted(ALL_AXES)}"
        )


def check_operation(
    op: str,
    allowed: frozenset[str] = ALL_OPERATIONS,
    name: str = "op",
) -> None:
    """
    Verify op names a known operation.

    Raises:
        ValidationError: If op is not in ``allowed``
    """
    if op not in allowed:
        raise ValidationError(
            f"{name}: unknown operation {op!r}, expected one of {sorted(allowed)}"
        )


def check_stat_kind(kind: str, name: str = "kind") -> None:
    """
    Verify kind names a known statistic.

    Raises:
        ValidationError: If kind is not a known statistic
    """
    if kind not in ALL_STATS:
        raise ValidationError(
            f"{name}: unknown statistic {kind!r}, expected one of {sorted(ALL_STATS)}"
        )


def check_index(index: int, bound: int, axis: str) -> None:
    """
    Verify a row or column index is below its bound.

    Args:
        index: Requested index
        bound: Number of rows (axis='rows') or columns (axis='columns')
        axis: Which dimension the index refers to

    Raises:
        ValidationError: If index is not a non-negative integer
        RowOutOfRange: If axis is 'rows' and index >= bound
        ColumnOutOfRange: If axis is 'columns' and index >= bound
    """
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"index: expected int, got {type(index).__name__}"
        )
    if index < 0:
        raise ValidationError(f"index: must be non-negative, got {index}")

    if index >= bound:
        if axis == AXIS_ROWS:
            raise RowOutOfRange(
                f"row {index} out of range for matrix with {bound} rows",
                index=int(index), bound=bound,
            )
        raise ColumnOutOfRange(
            f"column {index} out of range for matrix with {bound} columns",
            index=int(index), bound=bound,
        )


def check_rectangular(rows: Any, name: str = "rows") -> tuple[int, int]:
    """
    Verify nested input forms a rectangle.

    Accepts a 2D numpy array or any sequence of sequences. An empty
    outer sequence is a valid (empty) rectangle.

    Args:
        rows: Candidate matrix content
        name: Parameter name for error messages

    Returns:
        (n_rows, n_columns) of the input

    Raises:
        ValidationError: If rows is not a sequence of sequences
        WrongMatrixScheme: If rows have different (or zero) lengths
    """
    if isinstance(rows, np.ndarray):
        if rows.ndim != 2:
            raise WrongMatrixScheme(
                f"{name}: expected 2D array, got {rows.ndim}D with shape {rows.shape}"
            )
        if rows.shape[0] > 0 and rows.shape[1] == 0:
            raise WrongMatrixScheme(f"{name}: rows must not be empty")
        return rows.shape[0], rows.shape[1] if rows.shape[0] else 0

    if isinstance(rows, (str, bytes)) or not isinstance(rows, Sequence):
        raise ValidationError(
            f"{name}: expected a sequence of rows, got {type(rows).__name__}"
        )

    lengths = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not isinstance(row, (Sequence, np.ndarray)):
            raise ValidationError(
                f"{name}[{i}]: expected a sequence of values, got {type(row).__name__}"
            )
        if isinstance(row, np.ndarray):
            nested = row.ndim != 1
        else:
            nested = any(
                isinstance(value, (Sequence, np.ndarray)) and not isinstance(value, (str, bytes))
                for value in row
            )
        if nested:
            raise WrongMatrixScheme(
                f"{name}[{i}]: rows must be flat sequences of values, got nested data"
            )
        lengths.append(len(row))

    if not lengths:
        return 0, 0

    if len(set(lengths)) > 1:
        raise WrongMatrixScheme(
            f"{name}: rows have different lengths {lengths}",
            row_lengths=tuple(lengths),
        )
    if lengths[0] == 0:
        raise WrongMatrixScheme(f"{name}: rows must not be empty", row_lengths=tuple(lengths))

    return len(lengths), lengths[0]


def check_non_empty(matrix: Matrix, operation: str) -> None:
    """
    Verify the matrix holds at least one element.

    Raises:
        UninitializedMatrix: If the matrix is empty
    """
    if matrix.size == 0:
        raise UninitializedMatrix(f"{operation}: matrix has no elements")


def check_same_scheme(left: Matrix, right: Matrix, operation: str) -> None:
    """
    Verify two matrices have identical (columns, rows) schemes.

    Raises:
        UnmatchedScheme: If the schemes differ
    """
    if left.scheme != right.scheme:
        raise UnmatchedScheme(
            f"{operation}: scheme mismatch, left is {left.scheme} "
            f"(columns, rows), right is {right.scheme}",
            expected=left.scheme,
            actual=right.scheme,
        )


def check_square(matrix: Matrix, operation: str) -> None:
    """
    Verify the matrix is square and non-empty.

    Raises:
        UninitializedMatrix: If the matrix is empty
        NonSquareMatrix: If rows != columns
    """
    check_non_empty(matrix, operation)
    if matrix.rows != matrix.columns:
        raise NonSquareMatrix(
            f"{operation}: requires a square matrix, got {matrix.rows} rows "
            f"x {matrix.columns} columns",
            scheme=matrix.scheme,
        )
