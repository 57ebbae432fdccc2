"""
Linear algebra module.

Public API:
    matmul(a, b)            - Matrix product (square, same order)
    scalar(a, op, k)        - Scalar add/sub/mul/div, or integer matrix power
    determinant(a)          - Recursive cofactor expansion, O(n!)
    cofactor(a, row, col)   - Signed minor determinant
    inverse(a)              - Adjugate / determinant
    transpose(a)            - Non-destructive transpose
    identity(n)             - Identity matrix
    is_identity(a)          - Tolerance-aware identity check
"""

from pylean.linalg.solvers import (
    matmul,
    scalar,
    determinant,
    cofactor,
    inverse,
    transpose,
    identity,
    is_identity,
)

__all__ = [
    "matmul",
    "scalar",
    "determinant",
    "cofactor",
    "inverse",
    "transpose",
    "identity",
    "is_identity",
]
