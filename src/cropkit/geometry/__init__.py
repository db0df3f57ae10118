"""Pure crop geometry: projection, view fitting and boundary constraints."""

from .affine import Affine2D
from .fitter import Shift, fit_point, is_within, nearest_point_in_bounds, shift_required
from .math_ext import (
    approx_equal,
    clamp,
    degrees_to_radians,
    max_magnitude,
    midpoint,
    radians_to_degrees,
    sign,
    signs_match,
    zero_if_nan,
)
from .projection import get_canvas_corners, get_corners, get_inverse_corner
from .reconciler import Transformation, fit_crop
from .reset import reset_crop
from .types import (
    FREE,
    AspectRatio,
    Corner,
    Corners,
    CropState,
    Dimension,
    FreeAspect,
    Point,
    Ratio,
    aspect_from_value,
)
from .view import (
    ViewState,
    canvas_to_image,
    clamp_to_viewport,
    image_to_canvas,
    needs_refit,
    transform_to_fit,
)

__all__ = [
    "FREE",
    "Affine2D",
    "AspectRatio",
    "Corner",
    "Corners",
    "CropState",
    "Dimension",
    "FreeAspect",
    "Point",
    "Ratio",
    "Shift",
    "Transformation",
    "ViewState",
    "approx_equal",
    "aspect_from_value",
    "canvas_to_image",
    "clamp",
    "clamp_to_viewport",
    "degrees_to_radians",
    "fit_crop",
    "fit_point",
    "get_canvas_corners",
    "get_corners",
    "get_inverse_corner",
    "image_to_canvas",
    "is_within",
    "max_magnitude",
    "midpoint",
    "nearest_point_in_bounds",
    "needs_refit",
    "radians_to_degrees",
    "reset_crop",
    "shift_required",
    "sign",
    "signs_match",
    "transform_to_fit",
    "zero_if_nan",
]
