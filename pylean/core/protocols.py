"""
Core protocols for pylean.

These define structural interfaces that the arithmetic strategies and
compute backends must satisfy. We use Protocol (structural typing) rather
than ABC (nominal typing) to allow flexibility while maintaining type
safety.
"""

from typing import Protocol, Any, runtime_checkable
import numpy as np
from numpy.typing import ArrayLike, NDArray


@runtime_checkable
class ArithmeticMode(Protocol):
    """
    Elementwise binary-operation strategy over one element type.

    Each method broadcasts its operands numpy-style and returns values of
    ``dtype``: an array for array inputs, a numpy scalar for scalar
    inputs. What happens on overflow, non-finite results and division by
    zero is the whole point of a strategy:

        safe:  raise ArithmeticFault
        fast:  wrap (integers) or pass IEEE results through (floats)
        fixed: return the left operand unchanged
    """

    dtype: np.dtype

    @property
    def name(self) -> str:
        """
        Strategy identifier.

        Convention: '{policy}_{dtype}'
        Examples: 'safe_int32', 'fast_float64', 'fixed_uint8'
        """
        ...

    def add(self, a: ArrayLike, b: ArrayLike) -> Any: ...

    def sub(self, a: ArrayLike, b: ArrayLike) -> Any: ...

    def mul(self, a: ArrayLike, b: ArrayLike) -> Any: ...

    def div(self, a: ArrayLike, b: ArrayLike) -> Any: ...

    def pow(self, a: ArrayLike, b: ArrayLike) -> Any: ...


@runtime_checkable
class ComputeBackend(Protocol):
    """
    Protocol for elementwise compute backends.

    A backend applies one arithmetic strategy between two same-shaped
    row lists and produces freshly allocated result rows. Backends are
    stateless apart from the strategy given at construction.
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{strategy name}'
        Examples: 'cpu_safe_int32', 'cpu_fast_float64'
        """
        ...

    def solve(
        self,
        op: str,
        left: list[NDArray[Any]],
        right: list[NDArray[Any]],
    ) -> list[NDArray[Any]]:
        """
        Apply ``op`` elementwise, row by row.

        Raises:
            ArithmeticFault: Safe strategy hit overflow or division by zero
        """
        ...
