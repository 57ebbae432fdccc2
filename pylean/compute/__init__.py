"""
Elementwise arithmetic: strategies and the compute engine.

Public API:
    return_calc(op, left, right)  - Elementwise result as a new matrix
    calc(op, left, right)         - Elementwise result written into left
    get_arithmetic(mode, dtype)   - Strategy for a mode and element type
    SafeArithmetic, FastArithmetic, FixedArithmetic
"""

from pylean.compute.arithmetic import (
    SafeArithmetic,
    FastArithmetic,
    FixedArithmetic,
    get_arithmetic,
)
from pylean.compute.solvers import return_calc, calc, ELEMENTWISE_OPERATIONS

__all__ = [
    "return_calc",
    "calc",
    "get_arithmetic",
    "SafeArithmetic",
    "FastArithmetic",
    "FixedArithmetic",
    "ELEMENTWISE_OPERATIONS",
]
