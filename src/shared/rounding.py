"""Half-up rounding shared by the generator and the weather payload."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves up (``2.5`` -> ``3``)."""
    return int(math.floor(value + 0.5))


def round_half_up_tenths(value: float) -> float:
    """Round to one decimal place, halves up (``2.25`` -> ``2.3``)."""
    return math.floor(value * 10 + 0.5) / 10
