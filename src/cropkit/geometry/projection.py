"""Corner projection for rotated crop rectangles."""

from __future__ import annotations

from .affine import Affine2D
from .types import Corner, Corners, CropState, Point


def get_corners(crop: CropState) -> Corners:
    """Return the four image-space corners of *crop*.

    The local corners ``(±w/2, ±h/2)`` are rotated by ``crop.angle`` and then
    moved to the crop center. ``a`` is the top-left corner before rotation and
    ``b``, ``c``, ``d`` follow clockwise, so ``a``/``c`` and ``b``/``d`` are
    the diagonals.
    """

    placement = Affine2D.identity().rotate(crop.angle).translate(crop.x, crop.y)
    half_w = crop.width / 2.0
    half_h = crop.height / 2.0
    points = []
    for corner in Corner:
        sx, sy = corner.local_signs
        points.append(placement.apply(Point(sx * half_w, sy * half_h)))
    return Corners(*points)


def get_canvas_corners(crop: CropState, transform: Affine2D) -> Corners:
    """Return the corners of *crop* mapped into view space by *transform*."""

    return Corners(*(transform.apply(point) for point in get_corners(crop)))


def get_inverse_corner(point: Point, center: Point, angle: float) -> Point:
    """Express *point* in the unrotated frame of a crop centered on *center*."""

    frame = Affine2D.identity().translate(-center.x, -center.y).rotate(-angle)
    return frame.apply(point)


__all__ = ["get_canvas_corners", "get_corners", "get_inverse_corner"]
