"""
Rotate strategy: horizontal drags straighten the crop.
"""

from __future__ import annotations

from collections.abc import Callable

from ...geometry.math_ext import degrees_to_radians
from ...geometry.types import Point
from ..model import CropSessionModel
from .abstract import InteractionStrategy


class RotateStrategy(InteractionStrategy):
    """Strategy for rotating the crop with a horizontal drag."""

    def __init__(
        self,
        *,
        model: CropSessionModel,
        on_crop_changed: Callable[[], None],
        degrees_per_pixel: float | None = None,
    ) -> None:
        """Initialize rotate strategy.

        Parameters
        ----------
        model:
            Crop session model.
        on_crop_changed:
            Callback when crop values change.
        degrees_per_pixel:
            Rotation applied per viewport pixel of horizontal movement.
            Defaults to the model's ``rotation_step`` setting.
        """
        self._model = model
        self._on_crop_changed = on_crop_changed
        if degrees_per_pixel is None:
            degrees_per_pixel = model.settings.rotation_step
        self._degrees_per_pixel = float(degrees_per_pixel)
        crop = model.crop
        self._start_angle = crop.angle if crop is not None else 0.0
        self._travel = 0.0

    def on_drag(self, delta_view: Point) -> None:
        """Accumulate horizontal travel and apply the resulting angle."""
        self._travel += float(delta_view.x)
        angle = self._start_angle + degrees_to_radians(self._travel * self._degrees_per_pixel)
        if self._model.set_rotation(angle):
            self._on_crop_changed()

    def on_end(self) -> None:
        """Anchor the next drag at the angle reached so far."""
        crop = self._model.crop
        self._start_angle = crop.angle if crop is not None else 0.0
        self._travel = 0.0
