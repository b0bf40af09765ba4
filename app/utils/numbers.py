"""
FitFlow - Numeric Helpers.

Rounding and range helpers shared by the plan engine.
"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer with halves rounded up.

    Python's built-in round() uses banker's rounding (2.5 -> 2); plan
    targets expect 2.5 -> 3.

    Example:
        >>> round_half_up(1648.5)
        1649
    """
    return int(math.floor(value + 0.5))


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
