"""Compute backends. Only the single-threaded CPU backend is implemented."""

from pylean.compute.backends.cpu import CPUComputeBackend

__all__ = ["CPUComputeBackend"]
