"""
Matrix container.

Public API:
    Matrix  - Dense row-major container with axis editing and reshaping
"""

from pylean.matrix.container import Matrix

__all__ = ["Matrix"]
