"""Half-up rounding helpers.

``round()`` rounds halves to even; plan numbers round halves up.
"""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up."""
    return math.floor(value + 0.5)


def round_tenth(value: float) -> float:
    """Round to one decimal place, halves up."""
    return math.floor(value * 10 + 0.5) / 10
