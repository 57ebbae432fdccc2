"""
Solver dispatch for elementwise matrix arithmetic.

Provides return_calc() (fresh result matrix) and calc() (in-place).
Pow is not an elementwise operation here; matrix powers live in
pylean.linalg.scalar().
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pylean.compute.arithmetic import get_arithmetic
from pylean.compute.backends.cpu import CPUComputeBackend
from pylean.core.constants import OP_ADD, OP_DIV, OP_MUL, OP_POW, OP_SUB
from pylean.core.dtypes import coerce_values
from pylean.core.exceptions import OperationNotSupported
from pylean.core.modes import ComputeMode
from pylean.core.protocols import ComputeBackend
from pylean.core.validation import (
    check_non_empty,
    check_operation,
    check_same_scheme,
)

if TYPE_CHECKING:
    from pylean.matrix.container import Matrix


ELEMENTWISE_OPERATIONS = frozenset({OP_ADD, OP_SUB, OP_MUL, OP_DIV})


def _get_backend(mode: ComputeMode | str, dtype) -> ComputeBackend:
    """
    Select the backend for a mode.

    Multi-threaded and GPU modes are rejected by get_arithmetic() with
    OperationNotSupported before any work is done.
    """
    return CPUComputeBackend(get_arithmetic(mode, dtype))


def return_calc(
    op: str,
    left: Matrix,
    right: Matrix,
    *,
    mode: ComputeMode | str | None = None,
) -> Matrix:
    """
    Apply an arithmetic operation elementwise between two matrices.

    Parameters
    ----------
    op : str
        'add', 'sub', 'mul' or 'div'.
    left, right : Matrix
        Operands with identical (columns, rows) schemes. ``right`` is
        converted to ``left``'s element type.
    mode : ComputeMode or str, optional
        Arithmetic mode. Defaults to ``left.mode``.

    Returns
    -------
    Matrix
        A new matrix with ``left``'s element type and mode.

    Raises
    ------
    OperationNotSupported
        For 'pow', or when a multi-threaded/GPU mode is selected.
    UninitializedMatrix
        If ``left`` is empty.
    UnmatchedScheme
        If the schemes differ.
    ArithmeticFault
        Safe mode only: overflow or division by zero.
    """
    from pylean.matrix.container import Matrix

    if op == OP_POW:
        raise OperationNotSupported(
            "return_calc: 'pow' is not an elementwise operation, "
            "use pylean.linalg.scalar(m, 'pow', k)"
        )
    check_operation(op, ELEMENTWISE_OPERATIONS)
    check_non_empty(left, 'return_calc')
    check_same_scheme(left, right, 'return_calc')

    backend = _get_backend(mode if mode is not None else left.mode, left.dtype)

    left_rows = list(left.to_array())
    right_rows = list(coerce_values(right.to_array(), left.dtype, 'right'))
    result = backend.solve(op, left_rows, right_rows)

    return Matrix(left.dtype, mode=left.mode, rows=result)


def calc(
    op: str,
    left: Matrix,
    right: Matrix,
    *,
    mode: ComputeMode | str | None = None,
) -> None:
    """
    In-place variant of return_calc(): ``left`` takes the result.

    The result is computed in full before ``left`` is touched, so a
    Safe-mode fault leaves ``left`` unchanged.
    """
    result = return_calc(op, left, right, mode=mode)
    left.set(result.to_array())
