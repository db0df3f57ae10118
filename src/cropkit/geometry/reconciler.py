"""Re-fit a whole crop rectangle into the image after an edit."""

from __future__ import annotations

import enum
import math

from .. import config
from ..utils.logging import get_logger
from .fitter import fit_point, is_within, shift_required
from .math_ext import max_magnitude, signs_match
from .projection import get_corners
from .types import AspectRatio, Corner, CropState, Dimension, Ratio

LOGGER = get_logger(__name__)

_AXIS_ANGLE_EPSILON = 1e-12


class Transformation(enum.Enum):
    """Preferred way of bringing a crop back inside the image."""

    TRANSLATE = "translate"
    SCALE = "scale"


def _is_axis_aligned(angle: float) -> bool:
    return abs(math.remainder(angle, math.pi / 2.0)) <= _AXIS_ANGLE_EPSILON


def _scale_aspect(crop: CropState, aspect: AspectRatio) -> AspectRatio:
    """Return the aspect to hold while shrinking *crop*.

    Clamping one corner of a rotated crop on each axis independently can
    collapse it, so a free rotated crop keeps its current proportions.
    """

    if isinstance(aspect, Ratio) or _is_axis_aligned(crop.angle):
        return aspect
    ratio = crop.width / crop.height if crop.height > 0 else math.nan
    if not math.isfinite(ratio) or ratio <= 0.0:
        return aspect
    return Ratio(ratio)


def _scale_to_fit(crop: CropState, image: Dimension, aspect: AspectRatio) -> CropState:
    aspect = _scale_aspect(crop, aspect)
    current = crop
    for _ in range(config.MAX_FIT_PASSES):
        changed = False
        for corner in Corner:
            corners = get_corners(current)
            if is_within(corners[corner], image):
                continue
            current = fit_point(
                corners[corner],
                corners[corner.opposite],
                image,
                aspect,
                current.angle,
                corner.diagonal,
            )
            changed = True
        if not changed:
            break
    else:
        LOGGER.debug("Scale fit stopped after %d passes for %s", config.MAX_FIT_PASSES, current)
    return current


def _translate_to_fit(crop: CropState, image: Dimension) -> tuple[CropState, bool]:
    """Return the translated crop and whether a scale fit is still required."""

    corners = get_corners(crop)
    dx = 0.0
    dy = 0.0
    for point in corners:
        shift = shift_required(point, image)
        if not signs_match(dx, shift.dx):
            # one corner needs to move left, another right: the crop is wider
            # than the image and no translation helps
            LOGGER.debug("Translate fit impossible on x; falling back to scale")
            return crop, True
        if not signs_match(dy, shift.dy):
            LOGGER.debug("Translate fit impossible on y; falling back to scale")
            return crop, True
        dx = max_magnitude(dx, shift.dx)
        dy = max_magnitude(dy, shift.dy)

    if dx == 0.0 and dy == 0.0:
        return crop, False

    moved = crop.translated(dx, dy)
    for point in corners:
        if not is_within(point.translated(dx, dy), image):
            LOGGER.debug("Translation by (%g, %g) pushed a corner out; falling back to scale", dx, dy)
            return moved, True
    return moved, False


def fit_crop(
    crop: CropState,
    image: Dimension,
    aspect: AspectRatio,
    preferred: Transformation,
) -> CropState:
    """Fit *crop* into *image* using the smallest change possible.

    Parameters
    ----------
    crop:
        Crop to fit.
    image:
        Image bounds.
    aspect:
        Aspect constraint to preserve while scaling.
    preferred:
        Transformation tried first. ``TRANSLATE`` falls back to ``SCALE``
        when moving the crop cannot make it fit; ``SCALE`` never falls back.

    Returns
    -------
    CropState
        The fitted crop. A crop that already fits is returned unchanged.
    """

    mode = preferred
    current = crop
    while True:
        if mode is Transformation.SCALE:
            return _scale_to_fit(current, image, aspect)
        current, needs_scale = _translate_to_fit(current, image)
        if not needs_scale:
            return current
        mode = Transformation.SCALE


__all__ = ["Transformation", "fit_crop"]
