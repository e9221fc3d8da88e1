"""Small numeric helpers: clamping, remapping, angles and approximate equality."""

from __future__ import annotations

import math
from typing import Sequence


def bound_max(value, maximum):
    """Return value, capped at maximum."""
    return maximum if value > maximum else value


def bound_min(value, minimum):
    """Return value, raised to at least minimum."""
    return minimum if value < minimum else value


def scope(value, minimum, maximum):
    """Clamp value into [minimum, maximum]."""
    if value > maximum:
        return maximum
    if value < minimum:
        return minimum
    return value


def scope01(value):
    """Clamp value into [0, 1]."""
    return scope(value, 0.0, 1.0)


def remap(value, in_min, in_max, out_min, out_max):
    """Map value proportionally from [in_min, in_max] to [out_min, out_max]."""
    return out_min + (value - in_min) * (out_max - out_min) / (in_max - in_min)


def angle_2d(x1, y1, x2, y2) -> float:
    """Angle in radians of the direction from (x1, y1) to (x2, y2)."""
    return math.atan2(y2 - y1, x2 - x1)


def angle_between(a: Sequence[float], b: Sequence[float]) -> float:
    """Angle in radians of the direction from a to b in the XY plane."""
    return math.atan2(b[1] - a[1], b[0] - a[0])


def approximately(a, b, epsilon=0.001) -> bool:
    """True when a and b differ by less than epsilon."""
    return abs(a - b) < epsilon