"""
Element-type capability checks.

A matrix holds exactly one numpy element type, restricted to fixed-width
signed/unsigned integers and IEEE floating point. Everything else is
rejected at construction with InvalidTypeInitialization.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylean.core.exceptions import (
    InvalidTypeInitialization,
    OperationNotSupported,
    ValidationError,
)


def resolve_dtype(dtype: DTypeLike) -> np.dtype:
    """
    Validate and normalize an element type.

    Args:
        dtype: Anything numpy accepts as a dtype (np.int32, 'float64', ...)

    Returns:
        The normalized numpy dtype

    Raises:
        InvalidTypeInitialization: If the type is not an integer or
            floating-point type (bool, complex, str, object, ...)
    """
    try:
        dt = np.dtype(dtype)
    except TypeError as e:
        raise InvalidTypeInitialization(
            f"dtype: cannot interpret {dtype!r} as an element type: {e}",
            dtype=dtype,
        ) from e

    if np.issubdtype(dt, np.integer) or np.issubdtype(dt, np.floating):
        return dt

    raise InvalidTypeInitialization(
        f"dtype: {dt} is neither an integer nor a floating-point type",
        dtype=dtype,
    )


def is_float(dtype: np.dtype) -> bool:
    """True for floating-point element types."""
    return bool(np.issubdtype(dtype, np.floating))


def is_unsigned(dtype: np.dtype) -> bool:
    """True for unsigned integer element types."""
    return bool(np.issubdtype(dtype, np.unsignedinteger))


def require_signed(dtype: np.dtype, operation: str) -> None:
    """
    Reject unsigned element types for sign-dependent operations.

    Cofactor signs alternate, so determinant, cofactor and inverse need
    an element type that admits negative values.

    Raises:
        OperationNotSupported: If dtype is unsigned
    """
    if is_unsigned(dtype):
        raise OperationNotSupported(
            f"{operation}: not available for unsigned element type {dtype}"
        )


def coerce_values(values: ArrayLike, dtype: np.dtype, name: str) -> NDArray[Any]:
    """
    Convert values to a fresh array of the element type.

    Values that the element type cannot represent are rejected rather
    than wrapped, clipped or truncated.

    Args:
        values: Scalar or array-like of numbers
        dtype: Target element type (already resolved)
        name: Parameter name for error messages

    Returns:
        A new numpy array with dtype ``dtype``; never a view of the input

    Raises:
        ValidationError: If values are non-numeric, fractional for an
            integer type, or out of range
    """
    try:
        raw = np.asarray(values)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if raw.size == 0:
        return np.array(raw, dtype=dtype)

    if raw.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or "
            f"values outside every fixed-width type"
        )

    if raw.dtype == np.bool_ or not np.issubdtype(raw.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected numeric data"
        )

    if np.issubdtype(raw.dtype, np.complexfloating):
        raise ValidationError(f"{name}: complex values are not supported")

    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        if np.issubdtype(raw.dtype, np.floating):
            if not np.all(np.isfinite(raw)):
                raise ValidationError(
                    f"{name}: non-finite values cannot be stored as {dtype}"
                )
            if not np.all(raw == np.trunc(raw)):
                raise ValidationError(
                    f"{name}: fractional values cannot be stored as {dtype}"
                )
        lo, hi = int(raw.min()), int(raw.max())
        if lo < info.min or hi > info.max:
            raise ValidationError(
                f"{name}: values in [{lo}, {hi}] do not fit {dtype} "
                f"range [{info.min}, {info.max}]"
            )
        return raw.astype(dtype)

    with np.errstate(over='ignore'):
        result = raw.astype(dtype)
    if np.any(np.isfinite(raw) & ~np.isfinite(result)):
        raise ValidationError(f"{name}: values overflow {dtype}")
    return result
