"""Initial crop for a freshly loaded image."""

from __future__ import annotations

from .types import AspectRatio, CropState, Dimension, Ratio


def reset_crop(image: Dimension, aspect: AspectRatio) -> CropState:
    """Return the largest unrotated crop of *aspect* centered in *image*.

    With a free aspect the crop covers the whole image.
    """

    if not isinstance(aspect, Ratio):
        return CropState(x=image.width / 2.0, y=image.height / 2.0, width=image.width, height=image.height)

    if image.aspect > aspect.value:
        # image is wider than the requested ratio: height is the limit
        height = float(image.height)
        width = height * aspect.value
    else:
        width = float(image.width)
        height = width / aspect.value
    return CropState(x=image.width / 2.0, y=image.height / 2.0, width=width, height=height)


__all__ = ["reset_crop"]
