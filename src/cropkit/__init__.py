"""cropkit: crop rectangle geometry for image editors."""

from .geometry import (
    FREE,
    Affine2D,
    Corner,
    CropState,
    Dimension,
    Point,
    Ratio,
    Transformation,
    fit_crop,
    fit_point,
    reset_crop,
    transform_to_fit,
)
from .session import CropSessionModel

__version__ = "0.1.0"

__all__ = [
    "FREE",
    "Affine2D",
    "Corner",
    "CropSessionModel",
    "CropState",
    "Dimension",
    "Point",
    "Ratio",
    "Transformation",
    "__version__",
    "fit_crop",
    "fit_point",
    "reset_crop",
    "transform_to_fit",
]
