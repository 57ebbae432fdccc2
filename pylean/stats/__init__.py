"""
Statistics module.

Public API:
    stat(m, kind, axis, index)              - max/min/avg/med/sum/prod
    stat_coordinates(m, kind, axis, index)  - (row, column) of max/min/med
"""

from pylean.stats.solvers import stat, stat_coordinates

__all__ = ["stat", "stat_coordinates"]
