"""
Linear algebra on square matrices.

Provides matmul(), scalar(), determinant(), cofactor(), inverse(),
transpose(), plus identity() and is_identity(). All functions return new
matrices and never modify their inputs.

determinant(), cofactor() and inverse() use recursive cofactor expansion
and cost O(n!) in the matrix order; a RuntimeWarning is issued above
8x8. They require a signed or floating-point element type.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylean.compute.arithmetic import get_arithmetic
from pylean.core.constants import (
    ALL_OPERATIONS,
    AXIS_COLUMNS,
    AXIS_ROWS,
    OP_MUL,
    OP_POW,
)
from pylean.core.dtypes import coerce_values, require_signed, resolve_dtype
from pylean.core.exceptions import (
    DeterminantEqualToZero,
    OperationNotSupported,
    ValidationError,
)
from pylean.core.modes import ComputeMode, select_mode
from pylean.core.tolerances import select_tolerance
from pylean.core.validation import (
    check_index,
    check_non_empty,
    check_operation,
    check_same_scheme,
    check_square,
)
from pylean.linalg import _cofactor
from pylean.matrix.container import Matrix


Mode = ComputeMode | str | None


def _arithmetic(matrix: Matrix, mode: Mode):
    return get_arithmetic(mode if mode is not None else matrix.mode, matrix.dtype)


def _like(template: Matrix, data: NDArray[Any]) -> Matrix:
    """New matrix with the template's element type and mode."""
    return Matrix(template.dtype, mode=template.mode, rows=data)


def identity(order: int, *, dtype: DTypeLike = np.float64, mode: Mode = None) -> Matrix:
    """Identity matrix of the given order."""
    if isinstance(order, bool) or not isinstance(order, (int, np.integer)) or order < 1:
        raise ValidationError(f"order: expected positive int, got {order!r}")
    dt = resolve_dtype(dtype)
    return Matrix(dt, mode=select_mode(mode), rows=np.eye(order, dtype=dt))


def is_identity(matrix: Matrix) -> bool:
    """
    True if matrix is square and equal to the identity.

    Integer matrices compare exactly; float matrices use the tolerance
    tier of their element type.
    """
    if matrix.size == 0 or matrix.rows != matrix.columns:
        return False
    tier = select_tolerance(matrix.dtype)
    return bool(np.allclose(
        matrix.to_array().astype(np.float64),
        np.eye(matrix.rows),
        rtol=tier.rtol,
        atol=tier.atol,
    ))


def matmul(a: Matrix, b: Matrix, *, mode: Mode = None) -> Matrix:
    """
    Matrix product of two square matrices of the same order.

    Each cell is the sum over k of a[i, k] * b[k, j], accumulated with
    the arithmetic mode's mul and add.

    Raises:
        UninitializedMatrix: If a is empty
        UnmatchedScheme: If a and b have different schemes
        NonSquareMatrix: If a is not square
    """
    check_non_empty(a, 'matmul')
    check_same_scheme(a, b, 'matmul')
    check_square(a, 'matmul')

    arithmetic = _arithmetic(a, mode)
    x = a.to_array()
    y = coerce_values(b.to_array(), a.dtype, 'b')
    order = a.rows

    out = np.zeros((order, order), dtype=a.dtype)
    for i in range(order):
        for j in range(order):
            out[i, j] = arithmetic.total(arithmetic.mul(x[i, :], y[:, j]))
    return _like(a, out)


def _power(a: Matrix, k: Any, mode: Mode) -> Matrix:
    if isinstance(k, bool) or not isinstance(k, (int, float, np.integer, np.floating)):
        raise ValidationError(f"k: expected a number, got {type(k).__name__}")
    if not float(k).is_integer():
        raise OperationNotSupported(f"scalar: matrix power needs an integer exponent, got {k}")
    k = int(k)

    if k == 1:
        return a.copy()
    check_square(a, 'scalar')
    if k == 0:
        return identity(a.rows, dtype=a.dtype, mode=a.mode)

    base = inverse(a, mode=mode) if k < 0 else a.copy()
    result = base
    for _ in range(abs(k) - 1):
        result = matmul(result, base, mode=mode)
    return result


def scalar(a: Matrix, op: str, k: Any, *, mode: Mode = None) -> Matrix:
    """
    Apply a scalar to every element, or raise a matrix to a power.

    Parameters
    ----------
    a : Matrix
    op : str
        'add', 'sub', 'mul', 'div' broadcast ``k`` elementwise. 'pow'
        is the matrix power: k == 1 copies, k == 0 gives the identity,
        k > 1 multiplies a by itself, k < 0 multiplies inverse(a) by
        itself.
    k : number
        Scalar operand, converted to a's element type. Must be an
        integer for 'pow'.
    mode : ComputeMode or str, optional
        Defaults to ``a.mode``.

    Raises
    ------
    OperationNotSupported
        For 'pow' with a non-integer k.
    NonSquareMatrix
        For 'pow' with k != 1 on a non-square matrix.
    """
    check_non_empty(a, 'scalar')
    check_operation(op, ALL_OPERATIONS)
    if op == OP_POW:
        return _power(a, k, mode)

    arithmetic = _arithmetic(a, mode)
    func = getattr(arithmetic, op)
    return _like(a, func(a.to_array(), k))


def determinant(a: Matrix, *, mode: Mode = None) -> Any:
    """
    Determinant by recursive cofactor expansion along the first row.

    O(n!) in the matrix order.

    Raises:
        OperationNotSupported: For unsigned element types
        UninitializedMatrix: If a is empty
        NonSquareMatrix: If a is not square
    """
    require_signed(a.dtype, 'determinant')
    check_square(a, 'determinant')
    _cofactor.warn_cost(a.rows, 'determinant')
    return _cofactor.det(a.to_array(), _arithmetic(a, mode))


def cofactor(a: Matrix, row: int, column: int, *, mode: Mode = None) -> Any:
    """
    Signed determinant of the minor without ``row`` and ``column``.

    Raises:
        OperationNotSupported: For unsigned element types
        RowOutOfRange, ColumnOutOfRange: If an index is out of bounds
        NonSquareMatrix: If a is not square
    """
    require_signed(a.dtype, 'cofactor')
    check_non_empty(a, 'cofactor')
    check_index(row, a.rows, AXIS_ROWS)
    check_index(column, a.columns, AXIS_COLUMNS)
    check_square(a, 'cofactor')
    _cofactor.warn_cost(a.rows - 1, 'cofactor')
    return _cofactor.cofactor(a.to_array(), row, column, _arithmetic(a, mode))


def inverse(a: Matrix, *, mode: Mode = None) -> Matrix:
    """
    Inverse as adjugate(a) scaled by 1 / determinant(a).

    The scale factor is computed with the arithmetic mode's division, so
    integer element types give an integer result (exact only when the
    determinant is 1 or -1).

    Raises:
        OperationNotSupported: For unsigned element types
        NonSquareMatrix: If a is not square
        DeterminantEqualToZero: If a is singular
    """
    require_signed(a.dtype, 'inverse')
    check_square(a, 'inverse')
    _cofactor.warn_cost(a.rows, 'inverse')

    arithmetic = _arithmetic(a, mode)
    x = a.to_array()
    det = _cofactor.det(x, arithmetic)
    if det == 0:
        raise DeterminantEqualToZero(
            "inverse: determinant is zero, matrix is singular",
            matrix_name='a',
            scheme=a.scheme,
        )

    adj = _like(a, _cofactor.adjugate(x, arithmetic))
    return scalar(adj, OP_MUL, arithmetic.div(1, det), mode=mode)


def transpose(a: Matrix) -> Matrix:
    """New matrix with element (i, j) at (j, i); a is left untouched."""
    x = a.to_array()
    out = np.empty((x.shape[1], x.shape[0]), dtype=a.dtype)
    for i in range(x.shape[0]):
        for j in range(x.shape[1]):
            out[j, i] = x[i, j]
    return _like(a, out)
