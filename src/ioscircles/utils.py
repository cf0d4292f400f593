import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards +inf (browser Math.round)."""
    return math.floor(value + 0.5)

def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(value, upper))
