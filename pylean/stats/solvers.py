"""
Statistics over a whole matrix or one row/column.

Provides stat() for the value of a statistic and stat_coordinates() for
the (row, column) position it was found at.
"""

from __future__ import annotations

from typing import Any, Callable, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pylean.compute.arithmetic import get_arithmetic
from pylean.core.constants import (
    AXIS_ROWS,
    POSITIONAL_STATS,
    STAT_AVG,
    STAT_MAX,
    STAT_MED,
    STAT_MIN,
    STAT_PROD,
    STAT_SUM,
)
from pylean.core.exceptions import StatNotAvailable, ValidationError
from pylean.core.validation import check_axis, check_non_empty, check_stat_kind

if TYPE_CHECKING:
    from pylean.matrix.container import Matrix


Locator = Callable[[int], tuple[int, int]]


def _select(matrix: Matrix, axis: str | None, index: int | None) -> tuple[NDArray[Any], Locator]:
    """
    Values the statistic runs over, and a map from their positions back
    to (row, column) in the matrix.
    """
    check_non_empty(matrix, 'stat')

    if axis is None:
        if index is not None:
            raise ValidationError("index: given without an axis")
        columns = matrix.columns
        return matrix.as_flat_sequence(), lambda pos: (pos // columns, pos % columns)

    check_axis(axis)
    if index is None:
        raise ValidationError(f"index: required when axis={axis!r}")
    values = matrix.get_axis(axis, index)
    if axis == AXIS_ROWS:
        return values, lambda pos: (index, pos)
    return values, lambda pos: (pos, index)


def _median(values: NDArray[Any]) -> Any:
    """Middle of the sorted values; mean of the two middle ones for even counts."""
    ordered = np.sort(values)
    mid = len(ordered) // 2
    if len(ordered) % 2:
        return ordered[mid]
    return (np.float64(ordered[mid - 1]) + np.float64(ordered[mid])) / 2


def stat(
    matrix: Matrix,
    kind: str,
    axis: str | None = None,
    index: int | None = None,
) -> Any:
    """
    Compute a statistic.

    Parameters
    ----------
    matrix : Matrix
    kind : str
        'max', 'min', 'avg' (mean, float64), 'med' (median), 'sum' or
        'prod'. Sum and product fold with the matrix's arithmetic mode.
    axis : str, optional
        'rows' or 'columns' to restrict to one slice; None for the
        whole matrix.
    index : int, optional
        Which row or column, required when axis is given.

    Returns
    -------
    The statistic as a numpy scalar.

    Raises
    ------
    UninitializedMatrix
        If the matrix is empty.
    RowOutOfRange, ColumnOutOfRange
        If index is out of bounds.
    """
    check_stat_kind(kind)
    values, _ = _select(matrix, axis, index)

    if kind == STAT_MAX:
        return values.max()
    if kind == STAT_MIN:
        return values.min()
    if kind == STAT_AVG:
        return np.mean(values, dtype=np.float64)
    if kind == STAT_MED:
        return _median(values)

    arithmetic = get_arithmetic(matrix.mode, matrix.dtype)
    if kind == STAT_SUM:
        return arithmetic.total(values)
    if kind == STAT_PROD:
        return arithmetic.product(values)

    raise ValidationError(f"kind: unhandled statistic {kind!r}")


def stat_coordinates(
    matrix: Matrix,
    kind: str,
    axis: str | None = None,
    index: int | None = None,
) -> tuple[int, int]:
    """
    (row, column) of the first element equal to the statistic.

    Only 'max', 'min' and 'med' have a position. For the median the
    first exact match is returned; an even-length median that is not
    itself an element has no position.

    Raises
    ------
    StatNotAvailable
        For 'avg', 'sum' and 'prod', or a median absent from the values.
    """
    check_stat_kind(kind)
    if kind not in POSITIONAL_STATS:
        raise StatNotAvailable(
            f"stat_coordinates: {kind!r} has no position in the matrix",
            kind=kind,
        )
    values, locate = _select(matrix, axis, index)

    if kind == STAT_MAX:
        return locate(int(np.argmax(values)))
    if kind == STAT_MIN:
        return locate(int(np.argmin(values)))

    matches = np.flatnonzero(values == _median(values))
    if len(matches) == 0:
        raise StatNotAvailable(
            "stat_coordinates: median is not an element of the selection",
            kind=kind,
        )
    return locate(int(matches[0]))
