"""Boundary fitting for a single dragged crop corner.

Given the corner being moved and its diagonal opposite, :func:`fit_point`
finds the closest admissible position for the corner inside the image (on the
aspect-ratio line when a ratio is active) and rebuilds the crop around the
two points.
"""

from __future__ import annotations

import math
from typing import NamedTuple

from .. import config
from .math_ext import clamp, max_magnitude, midpoint, signs_match
from .projection import get_inverse_corner
from .types import AspectRatio, CropState, Dimension, Point, Ratio

# Direction components smaller than this are treated as axis-aligned.
_AXIS_EPSILON = 1e-12


class Shift(NamedTuple):
    """Displacement that brings a point back inside the image."""

    dx: float
    dy: float


def _axis_shift(value: float, size: float) -> float:
    upper = size - 1.0
    if value > upper + config.BOUNDS_TOLERANCE:
        return upper - value
    if value < -config.BOUNDS_TOLERANCE:
        return -value
    return 0.0


def shift_required(point: Point, image: Dimension) -> Shift:
    """Return the signed shift pulling *point* into ``[0, w-1] x [0, h-1]``."""

    return Shift(_axis_shift(point.x, image.width), _axis_shift(point.y, image.height))


def is_within(point: Point, image: Dimension) -> bool:
    shift = shift_required(point, image)
    return shift.dx == 0.0 and shift.dy == 0.0


def nearest_point_in_bounds(point: Point, image: Dimension) -> Point:
    return Point(
        clamp(point.x, 0.0, image.width - 1.0),
        clamp(point.y, 0.0, image.height - 1.0),
    )


def aspect_direction(ratio: float, angle: float, diagonal: int) -> Point:
    """Unit vector along a crop diagonal for *ratio* rotated by *angle*."""

    cos_t = math.cos(angle)
    sin_t = math.sin(angle)
    dx = ratio * cos_t - diagonal * sin_t
    dy = ratio * sin_t + diagonal * cos_t
    length = math.hypot(dx, dy)
    return Point(dx / length, dy / length)


def parameter_interval(origin: Point, direction: Point, image: Dimension) -> tuple[float, float]:
    """Return ``(lower, upper)`` for ``origin + t * direction`` inside the image.

    Axis-aligned directions only consult the bounds they can reach, which
    keeps the divisions away from zero components. The bounds may come back
    in either order.
    """

    ux, uy = direction.x, direction.y
    max_x = image.width - 1.0
    max_y = image.height - 1.0

    if abs(ux) <= _AXIS_EPSILON:
        # vertical
        return (-origin.y / uy, (max_y - origin.y) / uy)
    if abs(uy) <= _AXIS_EPSILON:
        # horizontal
        return (-origin.x / ux, (max_x - origin.x) / ux)

    t1x = -origin.x / ux
    t2x = (max_x - origin.x) / ux
    t1y = -origin.y / uy
    t2y = (max_y - origin.y) / uy

    if ux > 0 and uy > 0:
        return (max(t1x, t1y), min(t2x, t2y))
    if ux < 0 and uy > 0:
        return (max(t1y, t2x), min(t2y, t1x))
    if ux < 0 and uy < 0:
        return (max(t2y, t2x), min(t1y, t1x))
    return (max(t2y, t1x), min(t1y, t2x))


def _positive_extents(width: float, height: float, aspect: AspectRatio) -> tuple[float, float]:
    floor = config.MIN_EXTENT
    if width >= floor and height >= floor:
        return width, height
    if isinstance(aspect, Ratio):
        height = max(height, floor, floor / aspect.value)
        return height * aspect.value, height
    return max(width, floor), max(height, floor)


def set_corner(p_prime: Point, opposite: Point, angle: float, aspect: AspectRatio) -> CropState:
    """Build the crop whose diagonal runs from *p_prime* to *opposite*."""

    center = midpoint(p_prime, opposite)
    local = get_inverse_corner(p_prime, center, angle)
    width, height = _positive_extents(abs(local.x * 2.0), abs(local.y * 2.0), aspect)
    return CropState(x=center.x, y=center.y, width=width, height=height, angle=angle)


def fit_point(
    p: Point,
    o: Point,
    image: Dimension,
    aspect: AspectRatio,
    angle: float,
    diagonal: int,
) -> CropState:
    """Fit corner *p* into *image*, keeping *o* as the opposite corner.

    Parameters
    ----------
    p:
        Requested position of the corner being moved, in image pixels.
    o:
        Diagonally opposite corner. Only moved when it overflows the image on
        the same side as *p*.
    image:
        Image bounds to fit within.
    aspect:
        Aspect constraint for the resulting crop.
    angle:
        Rotation of the crop in radians; carried through unchanged.
    diagonal:
        ``1`` when *p*/*o* lie on the A–C diagonal, ``-1`` for B–D.

    Returns
    -------
    CropState
        New crop with strictly positive extents.
    """

    # Both points past the same edge: shift them together first, otherwise the
    # fit below would collapse the rectangle against that edge.
    p_shift = shift_required(p, image)
    o_shift = shift_required(o, image)
    if p_shift.dx and o_shift.dx and signs_match(p_shift.dx, o_shift.dx):
        dx = max_magnitude(p_shift.dx, o_shift.dx)
        p = p.translated(dx, 0.0)
        o = o.translated(dx, 0.0)
    if p_shift.dy and o_shift.dy and signs_match(p_shift.dy, o_shift.dy):
        dy = max_magnitude(p_shift.dy, o_shift.dy)
        p = p.translated(0.0, dy)
        o = o.translated(0.0, dy)

    if isinstance(aspect, Ratio):
        direction = aspect_direction(aspect.value, angle, diagonal)
        lower, upper = parameter_interval(o, direction, image)
        # closest point to p on the line (direction is a unit vector)
        t = direction.x * (p.x - o.x) + direction.y * (p.y - o.y)
        t_fit = clamp(t, min(lower, upper), max(lower, upper))
        p_prime = Point(o.x + t_fit * direction.x, o.y + t_fit * direction.y)
    else:
        p_prime = nearest_point_in_bounds(p, image)

    return set_corner(p_prime, o, angle, aspect)


__all__ = [
    "Shift",
    "aspect_direction",
    "fit_point",
    "is_within",
    "nearest_point_in_bounds",
    "parameter_interval",
    "set_corner",
    "shift_required",
]
