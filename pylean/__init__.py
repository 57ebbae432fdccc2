"""
pylean: dense matrices with pluggable overflow policies.

A mutable row-major matrix container with row/column editing, an
elementwise arithmetic engine with three overflow policies (Safe, Fast,
Fixed), cofactor-expansion linear algebra and simple statistics.

Submodules:
    core: Exceptions, constants, compute modes, validation
    matrix: The Matrix container
    compute: Arithmetic strategies and the elementwise engine
    linalg: matmul, determinant, cofactor, inverse, transpose, powers
    stats: max/min/avg/median and their coordinates
"""

__version__ = "0.1.0"

from pylean.matrix import Matrix
from pylean.core.modes import ComputeMode, SAFE, FAST, FIXED
from pylean import core
from pylean import compute
from pylean import linalg
from pylean import stats

__all__ = [
    "__version__",
    "Matrix",
    "ComputeMode",
    "SAFE",
    "FAST",
    "FIXED",
    "core",
    "compute",
    "linalg",
    "stats",
]
