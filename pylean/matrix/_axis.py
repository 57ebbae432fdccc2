"""
Axis editing on a row list.

Every function works on the list of row buffers owned by a Matrix and
is parameterized by axis ('rows' or 'columns'), so no operation is
written twice. Values passed in are already converted to the element
type. Structural edits always store freshly allocated rows.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylean.core.constants import AXIS_COLUMNS, AXIS_ROWS
from pylean.core.exceptions import UnmatchedScheme, ValidationError
from pylean.core.validation import check_axis, check_index


Rows = list[NDArray[Any]]


def n_columns(rows: Rows) -> int:
    return len(rows[0]) if rows else 0


def _check_position(index: int) -> int:
    """Insert positions may exceed the bound (they clamp) but must be >= 0."""
    if isinstance(index, bool) or not isinstance(index, (int, np.integer)):
        raise ValidationError(f"index: expected int, got {type(index).__name__}")
    if index < 0:
        raise ValidationError(f"index: must be non-negative, got {index}")
    return int(index)


def _check_length(values: NDArray[Any], expected: int, axis: str) -> None:
    if len(values) != expected:
        other = AXIS_COLUMNS if axis == AXIS_ROWS else AXIS_ROWS
        raise UnmatchedScheme(
            f"{axis[:-1]} has {len(values)} values, matrix has {expected} {other}",
            expected=expected,
            actual=len(values),
        )


def get_axis(rows: Rows, axis: str, index: int) -> NDArray[Any]:
    """Copy of one row, or one column gathered across rows."""
    check_axis(axis)
    if axis == AXIS_ROWS:
        check_index(index, len(rows), AXIS_ROWS)
        return rows[index].copy()

    check_index(index, n_columns(rows), AXIS_COLUMNS)
    return np.array([row[index] for row in rows], dtype=rows[0].dtype)


def change_axis(rows: Rows, axis: str, values: NDArray[Any], index: int) -> None:
    """Replace a row's buffer, or scatter values into a column."""
    check_axis(axis)
    if axis == AXIS_ROWS:
        check_index(index, len(rows), AXIS_ROWS)
        _check_length(values, n_columns(rows), axis)
        rows[index] = values.copy()
        return

    check_index(index, n_columns(rows), AXIS_COLUMNS)
    _check_length(values, len(rows), axis)
    for row, value in zip(rows, values):
        row[index] = value


def remove_axis(rows: Rows, axis: str, index: int) -> None:
    """
    Ordered removal of a row, or of one slot from every row.

    Removing the last column leaves an empty matrix rather than rows of
    length zero.
    """
    check_axis(axis)
    if axis == AXIS_ROWS:
        check_index(index, len(rows), AXIS_ROWS)
        del rows[index]
        return

    width = n_columns(rows)
    check_index(index, width, AXIS_COLUMNS)
    if width == 1:
        rows.clear()
        return
    rows[:] = [np.delete(row, index) for row in rows]


def add_axis(rows: Rows, axis: str, values: NDArray[Any], index: int) -> None:
    """
    Insert a row or column at ``index``, clamped to the current bound.

    Inserting a column into an empty matrix creates one single-element
    row per value.
    """
    check_axis(axis)
    position = _check_position(index)
    if len(values) == 0:
        raise UnmatchedScheme(f"cannot insert an empty {axis[:-1]}", actual=0)

    if axis == AXIS_ROWS:
        if rows:
            _check_length(values, n_columns(rows), axis)
        rows.insert(min(position, len(rows)), values.copy())
        return

    if not rows:
        rows.extend(values[i:i + 1].copy() for i in range(len(values)))
        return

    _check_length(values, len(rows), axis)
    position = min(position, n_columns(rows))
    rows[:] = [np.insert(row, position, value) for row, value in zip(rows, values)]


def reverse(rows: Rows, axis: str, index: int | None = None) -> None:
    """Reverse one row or column in place; every one when index is None."""
    check_axis(axis)
    bound = len(rows) if axis == AXIS_ROWS else n_columns(rows)
    if index is None:
        targets = range(bound)
    else:
        check_index(index, bound, axis)
        targets = [index]

    for i in targets:
        if axis == AXIS_ROWS:
            rows[i][:] = rows[i][::-1].copy()
        else:
            column = get_axis(rows, AXIS_COLUMNS, i)
            change_axis(rows, AXIS_COLUMNS, column[::-1], i)
