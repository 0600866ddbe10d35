import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (toward +inf).

    Python's built-in round() uses banker's rounding, so round(2.5) == 2.
    Profile values must round 2.5 to 3 and -2.5 to -2.
    """
    return int(math.floor(value + 0.5))


def round2(value: float) -> float:
    """Round half-up to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))
