"""
Tolerance tiers for floating-point comparison.

Cofactor expansion accumulates rounding error with every level of
recursion, so float results (inverse, matmul against an inverse) are
compared with a tolerance chosen from the element type. Integer element
types always compare exactly.
"""

from dataclasses import dataclass
import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Integer element types: exact equality',
)

FLOAT64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='float64',
    description='Double precision',
)

FLOAT32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='float32',
    description='Single precision',
)

FLOAT16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='float16',
    description='Half precision',
)


def select_tolerance(dtype: np.dtype) -> ToleranceTier:
    """Select the tolerance tier for a given element type."""
    dt = np.dtype(dtype)
    if not np.issubdtype(dt, np.floating):
        return EXACT
    if dt.itemsize >= 8:
        return FLOAT64
    if dt.itemsize >= 4:
        return FLOAT32
    return FLOAT16
