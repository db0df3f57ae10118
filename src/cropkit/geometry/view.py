"""Mapping between image space and the display surface.

The view transform keeps the crop centered in the viewport, cancels its
rotation so the crop edges are axis-aligned on screen, and scales it so the
whole crop fits inside the viewport with a margin on every side.
"""

from __future__ import annotations

from dataclasses import dataclass

from .. import config
from ..utils.logging import get_logger
from .affine import Affine2D
from .math_ext import clamp, zero_if_nan
from .projection import get_canvas_corners
from .types import CropState, Dimension, Point

LOGGER = get_logger(__name__)


def _ratio(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return float("nan")
    return numerator / denominator


def fit_scale(crop: CropState, viewport: Dimension, margin: float = config.CROP_BUFFER) -> float:
    """Return the view scale that fits *crop* into *viewport*.

    Degenerate sizes yield ``0.0`` instead of NaN or infinity.
    """

    shrink = 1.0 - margin * 2.0 - config.FIT_SAFETY
    scale = min(
        zero_if_nan(_ratio(viewport.width, crop.width)),
        zero_if_nan(_ratio(viewport.height, crop.height)),
    )
    return scale * shrink


def transform_to_fit(
    crop: CropState, viewport: Dimension, margin: float = config.CROP_BUFFER
) -> Affine2D:
    """Return the image-to-view transform that frames *crop* in *viewport*.

    Parameters
    ----------
    crop:
        Crop to frame, in image pixels.
    viewport:
        Size of the display surface.
    margin:
        Fraction of the viewport left empty on each side.

    Returns
    -------
    Affine2D
        Transform moving the crop center to the viewport center with the
        crop upright. While the image or viewport has no size yet the
        identity is returned so the result stays invertible.
    """

    scale = fit_scale(crop, viewport, margin)
    if scale <= 0.0:
        LOGGER.debug("Degenerate fit for crop %s in viewport %s; using identity", crop, viewport)
        return Affine2D.identity()
    return (
        Affine2D.identity()
        .translate(-crop.x, -crop.y)
        .rotate(-crop.angle)
        .scale(scale)
        .translate(viewport.width / 2.0, viewport.height / 2.0)
    )


def image_to_canvas(point: Point, transform: Affine2D) -> Point:
    return transform.apply(point)


def canvas_to_image(point: Point, transform: Affine2D) -> Point:
    """Map a view-space *point* back to image space. *transform* must be invertible."""
    return transform.invert().apply(point)


def clamp_to_viewport(
    point: Point, viewport: Dimension, margin: float = config.CROP_BUFFER
) -> Point:
    """Clamp a view-space point into the viewport minus its margin band."""

    return Point(
        clamp(zero_if_nan(point.x), margin * viewport.width, (1.0 - margin) * viewport.width),
        clamp(zero_if_nan(point.y), margin * viewport.height, (1.0 - margin) * viewport.height),
    )


@dataclass(frozen=True)
class ViewState:
    """Image-to-view transform together with the sizes it was built for."""

    transform: Affine2D
    viewport: Dimension
    image: Dimension

    @classmethod
    def fit(
        cls,
        crop: CropState,
        viewport: Dimension,
        image: Dimension,
        margin: float = config.CROP_BUFFER,
    ) -> ViewState:
        return cls(transform_to_fit(crop, viewport, margin), viewport, image)


def needs_refit(crop: CropState, view: ViewState, margin: float = config.CROP_BUFFER) -> bool:
    """Return ``True`` when a crop corner has entered the viewport's margin band."""

    width = view.viewport.width
    height = view.viewport.height
    for corner in get_canvas_corners(crop, view.transform):
        if corner.x < margin * width or corner.x > (1.0 - margin) * width:
            return True
        if corner.y < margin * height or corner.y > (1.0 - margin) * height:
            return True
    return False


__all__ = [
    "ViewState",
    "canvas_to_image",
    "clamp_to_viewport",
    "fit_scale",
    "image_to_canvas",
    "needs_refit",
    "transform_to_fit",
]
