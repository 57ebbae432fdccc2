"""
Recursive cofactor expansion.

Works on 2D numpy snapshots so that minors are fresh arrays built by
index removal, never views into the caller's matrix. Every scalar step
goes through the arithmetic strategy, so the overflow policy applies to
intermediate products and sums as well as to the final value.

Cost is O(n!) in the matrix order: each level expands n minors of order
n - 1. Keep inputs small.
"""

from __future__ import annotations

from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray

from pylean.core.constants import COFACTOR_WARN_SIZE
from pylean.core.protocols import ArithmeticMode


def warn_cost(order: int, operation: str) -> None:
    """Warn when cofactor expansion is asked to handle a large matrix."""
    if order > COFACTOR_WARN_SIZE:
        warnings.warn(
            f"{operation}: cofactor expansion of a {order}x{order} matrix "
            f"takes O(n!) steps and may not finish in reasonable time",
            RuntimeWarning,
            stacklevel=3,
        )


def minor(x: NDArray[Any], row: int, column: int) -> NDArray[Any]:
    """Matrix with ``row`` and ``column`` removed."""
    return np.delete(np.delete(x, row, axis=0), column, axis=1)


def det(x: NDArray[Any], arithmetic: ArithmeticMode) -> Any:
    """Determinant by first-row expansion; x must be square."""
    order = x.shape[0]
    if order == 0:
        return x.dtype.type(1)
    if order == 1:
        return x[0, 0]
    if order == 2:
        return arithmetic.sub(
            arithmetic.mul(x[0, 0], x[1, 1]),
            arithmetic.mul(x[0, 1], x[1, 0]),
        )

    total = x.dtype.type(0)
    for j in range(order):
        term = arithmetic.mul(x[0, j], cofactor(x, 0, j, arithmetic))
        total = arithmetic.add(total, term)
    return total


def cofactor(x: NDArray[Any], row: int, column: int, arithmetic: ArithmeticMode) -> Any:
    """(-1)**(row + column) times the determinant of the minor."""
    sign = 1 if (row + column) % 2 == 0 else -1
    return arithmetic.mul(sign, det(minor(x, row, column), arithmetic))


def adjugate(x: NDArray[Any], arithmetic: ArithmeticMode) -> NDArray[Any]:
    """Transposed cofactor matrix; closed form for orders 1 and 2."""
    order = x.shape[0]
    if order == 1:
        return np.ones((1, 1), dtype=x.dtype)
    if order == 2:
        return np.array(
            [
                [x[1, 1], arithmetic.sub(0, x[0, 1])],
                [arithmetic.sub(0, x[1, 0]), x[0, 0]],
            ],
            dtype=x.dtype,
        )

    adj = np.zeros_like(x)
    for r in range(order):
        for c in range(order):
            adj[c, r] = cofactor(x, r, c, arithmetic)
    return adj
