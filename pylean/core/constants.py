"""
String constants for pylean.

This module is the SINGLE SOURCE OF TRUTH for axis, operation, statistic,
policy, threading and device strings. Import from here, never use raw
strings.

Usage:
    from pylean.core.constants import AXIS_ROWS, OP_ADD

    row = m.get_axis(AXIS_ROWS, 0)
    total = m.return_calc(OP_ADD, other)
"""

# Axis selectors
AXIS_ROWS = 'rows'
AXIS_COLUMNS = 'columns'

ALL_AXES = frozenset({AXIS_ROWS, AXIS_COLUMNS})

# Elementwise / scalar operations
OP_ADD = 'add'
OP_SUB = 'sub'
OP_MUL = 'mul'
OP_DIV = 'div'
OP_POW = 'pow'

ALL_OPERATIONS = frozenset({OP_ADD, OP_SUB, OP_MUL, OP_DIV, OP_POW})

# Statistics
STAT_MAX = 'max'
STAT_MIN = 'min'
STAT_AVG = 'avg'
STAT_MED = 'med'
STAT_SUM = 'sum'
STAT_PROD = 'prod'

ALL_STATS = frozenset({STAT_MAX, STAT_MIN, STAT_AVG, STAT_MED, STAT_SUM, STAT_PROD})

# Statistics that map to a single position in the matrix
POSITIONAL_STATS = frozenset({STAT_MAX, STAT_MIN, STAT_MED})

# Arithmetic policies
POLICY_SAFE = 'safe'
POLICY_FAST = 'fast'
POLICY_FIXED = 'fixed'

ALL_POLICIES = frozenset({POLICY_SAFE, POLICY_FAST, POLICY_FIXED})

# Threading (only single-threaded execution is implemented)
THREADING_SINGLE = 'single'
THREADING_MULTI = 'multi'

ALL_THREADING = frozenset({THREADING_SINGLE, THREADING_MULTI})

# Devices (only the CPU is implemented)
DEVICE_CPU = 'cpu'
DEVICE_GPU = 'gpu'

ALL_DEVICES = frozenset({DEVICE_CPU, DEVICE_GPU})

# Square matrices above this size trigger a cost warning on cofactor
# expansion; the recursion is O(n!).
COFACTOR_WARN_SIZE = 8

__all__ = [
    'AXIS_ROWS',
    'AXIS_COLUMNS',
    'ALL_AXES',
    'OP_ADD',
    'OP_SUB',
    'OP_MUL',
    'OP_DIV',
    'OP_POW',
    'ALL_OPERATIONS',
    'STAT_MAX',
    'STAT_MIN',
    'STAT_AVG',
    'STAT_MED',
    'STAT_SUM',
    'STAT_PROD',
    'ALL_STATS',
    'POSITIONAL_STATS',
    'POLICY_SAFE',
    'POLICY_FAST',
    'POLICY_FIXED',
    'ALL_POLICIES',
    'THREADING_SINGLE',
    'THREADING_MULTI',
    'ALL_THREADING',
    'DEVICE_CPU',
    'DEVICE_GPU',
    'ALL_DEVICES',
    'COFACTOR_WARN_SIZE',
]
