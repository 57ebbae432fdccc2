"""
Whole-matrix structural transforms built on the axis editor.
"""

from __future__ import annotations

import numpy as np

from pylean.core.constants import AXIS_COLUMNS, AXIS_ROWS
from pylean.core.exceptions import UninitializedMatrix, UnmatchedScheme, ValidationError
from pylean.matrix._axis import Rows, add_axis


def rescheme(rows: Rows, new_columns: int, new_rows: int) -> None:
    """
    Reinterpret the row-major element sequence with a new scheme.

    The elements are flattened in row-major order, the content is
    discarded and ``new_rows`` rows of ``new_columns`` consecutive
    elements are inserted back.
    """
    size = sum(len(row) for row in rows)
    if size < 1:
        raise UninitializedMatrix("rescheme: matrix has no elements")

    for name, value in (("new_columns", new_columns), ("new_rows", new_rows)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(f"{name}: expected int, got {type(value).__name__}")

    if new_columns < 1 or new_rows < 1 or new_columns * new_rows != size:
        raise UnmatchedScheme(
            f"rescheme: {new_columns} columns x {new_rows} rows does not hold "
            f"{size} elements",
            expected=size,
            actual=new_columns * new_rows,
        )

    flat = np.concatenate(rows)
    rows.clear()
    for i in range(new_rows):
        add_axis(rows, AXIS_ROWS, flat[i * new_columns:(i + 1) * new_columns], i)


def transpose(rows: Rows) -> None:
    """
    Destructive transpose: row i of the original becomes column i.

    The content is copied before it is cleared; the copy is then
    inserted column by column.
    """
    snapshot = [row.copy() for row in rows]
    rows.clear()
    for i, row in enumerate(snapshot):
        add_axis(rows, AXIS_COLUMNS, row, i)
