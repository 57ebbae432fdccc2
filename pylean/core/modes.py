"""
Compute mode configuration.

A ComputeMode selects the arithmetic policy (Safe, Fast, Fixed) together
with the threading and device axes of the configuration space. Only
single-threaded CPU execution exists; the other combinations are
declared so callers can name them, and selecting one raises
OperationNotSupported instead of silently running single-threaded code.
"""

from __future__ import annotations

from dataclasses import dataclass

from pylean.core.constants import (
    ALL_DEVICES,
    ALL_POLICIES,
    ALL_THREADING,
    DEVICE_CPU,
    DEVICE_GPU,
    POLICY_FAST,
    POLICY_FIXED,
    POLICY_SAFE,
    THREADING_MULTI,
    THREADING_SINGLE,
)
from pylean.core.exceptions import OperationNotSupported, ValidationError


@dataclass(frozen=True)
class ComputeMode:
    """
    Arithmetic configuration attached to a matrix.

    Attributes:
        policy: Overflow/division policy ('safe', 'fast', 'fixed')
        threading: 'single' (implemented) or 'multi' (declared only)
        device: 'cpu' (implemented) or 'gpu' (declared only)
    """
    policy: str = POLICY_SAFE
    threading: str = THREADING_SINGLE
    device: str = DEVICE_CPU

    def __post_init__(self) -> None:
        if self.policy not in ALL_POLICIES:
            raise ValidationError(
                f"policy: unknown arithmetic policy {self.policy!r}, "
                f"expected one of {sorted(ALL_POLICIES)}"
            )
        if self.threading not in ALL_THREADING:
            raise ValidationError(
                f"threading: unknown value {self.threading!r}, "
                f"expected one of {sorted(ALL_THREADING)}"
            )
        if self.device not in ALL_DEVICES:
            raise ValidationError(
                f"device: unknown value {self.device!r}, "
                f"expected one of {sorted(ALL_DEVICES)}"
            )

    def __str__(self) -> str:
        suffix = ""
        if self.threading == THREADING_MULTI:
            suffix += "-mt"
        if self.device == DEVICE_GPU:
            suffix += "-gpu"
        return f"{self.policy}{suffix}"

    @property
    def is_supported(self) -> bool:
        """True if this combination has an implementation."""
        return self.threading == THREADING_SINGLE and self.device == DEVICE_CPU


SAFE = ComputeMode(POLICY_SAFE)
FAST = ComputeMode(POLICY_FAST)
FIXED = ComputeMode(POLICY_FIXED)


def _parse(mode: str) -> ComputeMode:
    """Parse 'fast', 'safe-mt', 'fixed-gpu', ... into a ComputeMode."""
    policy, *flags = mode.lower().split('-')
    threading = THREADING_SINGLE
    device = DEVICE_CPU
    for flag in flags:
        if flag == 'mt':
            threading = THREADING_MULTI
        elif flag == 'gpu':
            device = DEVICE_GPU
        else:
            raise ValidationError(f"mode: unknown flag {flag!r} in {mode!r}")
    return ComputeMode(policy, threading, device)


def select_mode(mode: ComputeMode | str | None = None) -> ComputeMode:
    """
    Resolve a compute mode and make sure it can actually run.

    Args:
        mode: A ComputeMode, a shorthand string ('safe', 'fast', 'fixed',
            optionally with '-mt' and/or '-gpu'), or None for Safe

    Returns:
        A supported ComputeMode

    Raises:
        ValidationError: If the mode is malformed
        OperationNotSupported: If the multi-threaded or GPU variant
            was selected
    """
    if mode is None:
        return SAFE

    if isinstance(mode, str):
        resolved = _parse(mode)
    elif isinstance(mode, ComputeMode):
        resolved = mode
    else:
        raise ValidationError(
            f"mode: expected ComputeMode or str, got {type(mode).__name__}"
        )

    if not resolved.is_supported:
        missing = "multi-threaded" if resolved.threading == THREADING_MULTI else "GPU"
        raise OperationNotSupported(
            f"mode {resolved}: {missing} computation is not implemented"
        )

    return resolved
