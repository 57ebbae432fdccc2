"""
Arithmetic strategies: Safe, Fast and Fixed.

All three share one element type and the same operation set; they differ
only in what an out-of-range, non-finite or divide-by-zero result turns
into.

Integer operations are evaluated exactly on Python ints (object arrays)
and then settled against the dtype's range, so overflow is detected
rather than inferred from wrapped bits. Floating-point operations run
natively in the element type with numpy's error reporting silenced and
are then checked with np.isfinite where the policy asks for it.
"""

from __future__ import annotations

import operator
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pylean.core.constants import (
    OP_ADD,
    OP_DIV,
    OP_MUL,
    OP_POW,
    OP_SUB,
    POLICY_FAST,
    POLICY_FIXED,
    POLICY_SAFE,
)
from pylean.core.dtypes import coerce_values, is_float, resolve_dtype
from pylean.core.exceptions import ArithmeticFault, UnmatchedScheme
from pylean.core.modes import ComputeMode, select_mode


_EXACT_OPS = {
    OP_ADD: operator.add,
    OP_SUB: operator.sub,
    OP_MUL: operator.mul,
}

_FLOAT_OPS = {
    OP_ADD: np.add,
    OP_SUB: np.subtract,
    OP_MUL: np.multiply,
}


def _trunc_div(x: NDArray[Any], y: NDArray[Any]) -> NDArray[Any]:
    """Integer division rounding toward zero, on object arrays of ints."""
    q = x // y
    inexact = q * y != x
    return np.where((q < 0) & inexact, q + 1, q)


def _int_power(base: int, exponent: int, bits: int, modulus: int | None) -> int:
    """
    Exact integer power with the short-circuits of the power routine.

    With ``modulus`` the result is reduced (used by wrapping arithmetic);
    without it, powers that cannot fit ``bits`` return a value one bit
    wider instead of being computed in full.
    """
    if exponent == 0 or base == 1:
        return 1
    if base == 0:
        return 0
    if exponent == 1:
        return base
    if exponent == 2:
        return base * base
    if base == -1:
        return 1 if exponent % 2 == 0 else -1
    if exponent < 0:
        # |base| >= 2, so 1 / base**|exponent| truncates to zero
        return 0
    if modulus is not None:
        return pow(base, exponent, modulus)
    if exponent > bits:
        return 1 << (bits + 1)
    return base ** exponent


class _BaseArithmetic:
    """
    Shared operand handling for the three strategies.

    Subclasses define ``policy``, ``_settle_int`` and ``_settle_float``,
    and may override ``div``.
    """

    policy: str = ''

    def __init__(self, dtype: Any):
        self.dtype = resolve_dtype(dtype)
        self._is_float = is_float(self.dtype)
        if not self._is_float:
            info = np.iinfo(self.dtype)
            self._lo = int(info.min)
            self._hi = int(info.max)
            self._bits = info.bits
            self._span = 1 << info.bits

    @property
    def name(self) -> str:
        return f"{self.policy}_{self.dtype}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(dtype={self.dtype})"

    # --- Operand plumbing ---

    def _operands(self, a: ArrayLike, b: ArrayLike) -> tuple[NDArray, NDArray, tuple[int, ...]]:
        """Coerce to the element type and broadcast, returning flat views."""
        left = coerce_values(a, self.dtype, 'a')
        right = coerce_values(b, self.dtype, 'b')
        try:
            left, right = np.broadcast_arrays(left, right)
        except ValueError as e:
            raise UnmatchedScheme(
                f"{self.name}: operand shapes {left.shape} and {right.shape} "
                f"do not broadcast",
                expected=left.shape,
                actual=right.shape,
            ) from e
        return left.ravel(), right.ravel(), left.shape

    def _pack(self, flat: NDArray[Any], shape: tuple[int, ...]) -> Any:
        with np.errstate(over='ignore'):
            out = np.asarray(flat).astype(self.dtype).reshape(shape)
        return out[()] if shape == () else out

    def _in_range(self, exact: NDArray[Any]) -> NDArray[np.bool_]:
        return (exact >= self._lo) & (exact <= self._hi)

    def _wrap(self, exact: NDArray[Any]) -> NDArray[Any]:
        """Reduce exact integers modulo 2**bits into the dtype's range."""
        return (exact - self._lo) % self._span + self._lo

    def _fault(self, op: str, detail: str) -> ArithmeticFault:
        return ArithmeticFault(
            f"{op}: {detail} for {self.dtype}",
            operation=op,
            dtype=str(self.dtype),
        )

    def _settle_int(self, op: str, exact: NDArray[Any], left: NDArray[Any]) -> NDArray[Any]:
        raise NotImplementedError

    def _settle_float(self, op: str, result: NDArray[Any], left: NDArray[Any]) -> NDArray[Any]:
        raise NotImplementedError

    def _binary(self, op: str, a: ArrayLike, b: ArrayLike) -> Any:
        x, y, shape = self._operands(a, b)
        if self._is_float:
            with np.errstate(all='ignore'):
                result = _FLOAT_OPS[op](x, y)
            return self._pack(self._settle_float(op, result, x), shape)
        exact = _EXACT_OPS[op](x.astype(object), y.astype(object))
        return self._pack(self._settle_int(op, exact, x), shape)

    # --- Public operations ---

    def add(self, a: ArrayLike, b: ArrayLike) -> Any:
        """a + b under this strategy's overflow policy."""
        return self._binary(OP_ADD, a, b)

    def sub(self, a: ArrayLike, b: ArrayLike) -> Any:
        """a - b under this strategy's overflow policy."""
        return self._binary(OP_SUB, a, b)

    def mul(self, a: ArrayLike, b: ArrayLike) -> Any:
        """a * b under this strategy's overflow policy."""
        return self._binary(OP_MUL, a, b)

    def div(self, a: ArrayLike, b: ArrayLike) -> Any:
        """
        Truncating division; division by zero returns ``a``.

        Shared by Fast and Fixed. Integer results wrap (the only overflow
        is dtype.min / -1).
        """
        x, y, shape = self._operands(a, b)
        zero = y == 0
        if self._is_float:
            with np.errstate(all='ignore'):
                result = np.where(zero, x, x / np.where(zero, 1, y))
            return self._pack(result, shape)
        xo = x.astype(object)
        yo = np.where(zero, 1, y).astype(object)
        exact = np.where(zero, xo, _trunc_div(xo, yo))
        return self._pack(self._wrap(exact), shape)

    def pow(self, a: ArrayLike, b: ArrayLike) -> Any:
        """
        a ** b with short-circuits ahead of the generic power.

        ``b == 0`` or ``a == 1`` gives 1, ``a == 0`` gives 0, ``b == 1``
        gives a, ``b == 2`` gives a * a and, for floats, ``b == 0.5``
        gives sqrt(a). The result is settled under the overflow policy.
        """
        x, y, shape = self._operands(a, b)
        if self._is_float:
            with np.errstate(all='ignore'):
                result = np.power(x, y)
                result = np.where(y == 0.5, np.sqrt(x), result)
                result = np.where(y == 2, x * x, result)
                result = np.where(y == 1, x, result)
                result = np.where(x == 0, 0, result)
                result = np.where((y == 0) | (x == 1), 1, result)
                result = result.astype(self.dtype)
            return self._pack(self._settle_float(OP_POW, result, x), shape)

        modulus = self._span if self.policy == POLICY_FAST else None
        power = np.frompyfunc(
            lambda p, q: _int_power(p, q, self._bits, modulus), 2, 1
        )
        exact = power(x.astype(object), y.astype(object))
        return self._pack(self._settle_int(OP_POW, np.asarray(exact, dtype=object), x), shape)

    def total(self, values: ArrayLike) -> Any:
        """Left fold of ``add`` over values; 0 for an empty sequence."""
        flat = coerce_values(values, self.dtype, 'values').ravel()
        if flat.size == 0:
            return self.dtype.type(0)
        acc = flat[0]
        for value in flat[1:]:
            acc = self.add(acc, value)
        return acc

    def product(self, values: ArrayLike) -> Any:
        """Left fold of ``mul`` over values; 1 for an empty sequence."""
        flat = coerce_values(values, self.dtype, 'values').ravel()
        if flat.size == 0:
            return self.dtype.type(1)
        acc = flat[0]
        for value in flat[1:]:
            acc = self.mul(acc, value)
        return acc


class SafeArithmetic(_BaseArithmetic):
    """
    Exact arithmetic that refuses to return a corrupted value.

    Integer overflow, NaN/Inf results and division by zero raise
    ArithmeticFault. Integer division rounds to nearest:
    ``trunc((a + trunc(b / 2)) / b)``.
    """

    policy = POLICY_SAFE

    def _settle_int(self, op, exact, left):
        if not np.all(self._in_range(exact)):
            raise self._fault(op, "integer overflow")
        return exact

    def _settle_float(self, op, result, left):
        if not np.all(np.isfinite(result)):
            raise self._fault(op, "overflow or invalid result")
        return result

    def div(self, a: ArrayLike, b: ArrayLike) -> Any:
        x, y, shape = self._operands(a, b)
        if np.any(y == 0):
            raise self._fault(OP_DIV, "division by zero")
        if self._is_float:
            with np.errstate(all='ignore'):
                result = x / y
            return self._pack(self._settle_float(OP_DIV, result, x), shape)
        xo = x.astype(object)
        yo = y.astype(object)
        numerator = self._settle_int(OP_DIV, xo + _trunc_div(yo, 2), x)
        return self._pack(self._settle_int(OP_DIV, _trunc_div(numerator, yo), x), shape)


class FastArithmetic(_BaseArithmetic):
    """
    Platform-style arithmetic with no validation.

    Integers wrap modulo 2**bits; floats follow IEEE (Inf and NaN pass
    through). Division truncates and returns ``a`` when ``b == 0``.
    Nothing is ever reported.
    """

    policy = POLICY_FAST

    def _settle_int(self, op, exact, left):
        return self._wrap(exact)

    def _settle_float(self, op, result, left):
        return result


class FixedArithmetic(_BaseArithmetic):
    """
    Exact arithmetic that falls back to the left operand.

    Where add/sub/mul/pow would overflow (or, for floats, produce NaN or
    Inf) the left operand is returned unchanged for that element.
    Division is the Fast strategy's division.
    """

    policy = POLICY_FIXED

    def _settle_int(self, op, exact, left):
        return np.where(self._in_range(exact), exact, left.astype(object))

    def _settle_float(self, op, result, left):
        return np.where(np.isfinite(result), result, left)


_STRATEGIES = {
    POLICY_SAFE: SafeArithmetic,
    POLICY_FAST: FastArithmetic,
    POLICY_FIXED: FixedArithmetic,
}


def get_arithmetic(mode: ComputeMode | str | None, dtype: Any) -> _BaseArithmetic:
    """
    Build the arithmetic strategy for a mode and element type.

    Raises:
        ValidationError: If the mode is malformed
        OperationNotSupported: If a multi-threaded or GPU mode is selected
        InvalidTypeInitialization: If dtype is not integer or floating
    """
    resolved = select_mode(mode)
    return _STRATEGIES[resolved.policy](dtype)
