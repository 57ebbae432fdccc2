"""
Core infrastructure for pylean.

This module provides shared abstractions and utilities used by the
domain-specific submodules (matrix, compute, linalg, stats).

Key components:
    exceptions: Exception hierarchy
    constants: Axis/operation/statistic/mode strings
    dtypes: Element-type capability checks
    modes: ComputeMode configuration
    validation: Input validators
    tolerances: Float comparison tiers
"""

from pylean.core.modes import ComputeMode, select_mode, SAFE, FAST, FIXED
from pylean.core.exceptions import (
    PyLeanError,
    ValidationError,
    InvalidTypeInitialization,
    UninitializedMatrix,
    StatNotAvailable,
    DimensionError,
    WrongMatrixScheme,
    UnmatchedScheme,
    NonSquareMatrix,
    IndexOutOfRange,
    RowOutOfRange,
    ColumnOutOfRange,
    OperationNotSupported,
    NumericalError,
    DeterminantEqualToZero,
    ArithmeticFault,
)

__all__ = [
    # Modes
    "ComputeMode",
    "select_mode",
    "SAFE",
    "FAST",
    "FIXED",
    # Exceptions
    "PyLeanError",
    "ValidationError",
    "InvalidTypeInitialization",
    "UninitializedMatrix",
    "StatNotAvailable",
    "DimensionError",
    "WrongMatrixScheme",
    "UnmatchedScheme",
    "NonSquareMatrix",
    "IndexOutOfRange",
    "RowOutOfRange",
    "ColumnOutOfRange",
    "OperationNotSupported",
    "NumericalError",
    "DeterminantEqualToZero",
    "ArithmeticFault",
]
