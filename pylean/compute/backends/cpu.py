"""
Single-threaded CPU backend for elementwise matrix arithmetic.
"""

from __future__ import annotations

from typing import Any
import numpy as np
from numpy.typing import NDArray

from pylean.core.protocols import ArithmeticMode


class CPUComputeBackend:
    """
    Applies one arithmetic strategy row by row on the caller's thread.

    Every result row is a freshly allocated array; nothing in the output
    aliases the input rows.
    """

    def __init__(self, arithmetic: ArithmeticMode):
        self._arithmetic = arithmetic

    @property
    def name(self) -> str:
        return f'cpu_{self._arithmetic.name}'

    @property
    def arithmetic(self) -> ArithmeticMode:
        return self._arithmetic

    def solve(
        self,
        op: str,
        left: list[NDArray[Any]],
        right: list[NDArray[Any]],
    ) -> list[NDArray[Any]]:
        func = getattr(self._arithmetic, op)
        return [np.array(func(lrow, rrow), dtype=self._arithmetic.dtype) for lrow, rrow in zip(left, right)]
