"""Scalar helpers used by the crop geometry engine."""

from __future__ import annotations

import math
import sys
from functools import reduce

from .types import Point

EPSILON = sys.float_info.epsilon


def degrees_to_radians(degrees: float) -> float:
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / math.pi


def clamp(a: float, minimum: float, maximum: float) -> float:
    """Return *a* bounded to ``[minimum, maximum]``.

    *minimum* must not exceed *maximum*; all three values must be finite.
    """

    assert maximum >= minimum, f"clamp bounds inverted: {minimum} > {maximum}"
    return min(max(a, minimum), maximum)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2.0, (a.y + b.y) / 2.0)


def sign(a: float) -> int:
    """Return -1, 0 or 1. Undefined for NaN."""

    if a == 0:
        return 0
    if a < 0:
        return -1
    return 1


def signs_match(a: float, b: float) -> bool:
    """Return ``True`` when *a* and *b* share a sign; zero matches either sign."""

    if a == 0 or b == 0:
        return True
    return (a < 0) == (b < 0)


def max_magnitude(*values: float) -> float:
    """Return the value with the largest absolute magnitude.

    Ties keep the earliest value.
    """

    return reduce(lambda kept, candidate: candidate if abs(candidate) > abs(kept) else kept, values)


def approx_equal(a: float, b: float) -> bool:
    """Relative equality within one machine epsilon.

    Not meaningful near zero: ``approx_equal(0.0, 0.0)`` is ``False``.
    """

    return abs(a - b) < abs(max_magnitude(a, b)) * EPSILON


def zero_if_nan(a: float) -> float:
    """Replace NaN and infinities with ``0.0``."""

    return a if math.isfinite(a) else 0.0


__all__ = [
    "EPSILON",
    "approx_equal",
    "clamp",
    "degrees_to_radians",
    "max_magnitude",
    "midpoint",
    "radians_to_degrees",
    "sign",
    "signs_match",
    "zero_if_nan",
]
