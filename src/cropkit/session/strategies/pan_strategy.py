"""
Pan strategy: drag the image underneath the crop frame.
"""

from __future__ import annotations

from collections.abc import Callable

from ...geometry.types import Point
from ..model import CropSessionModel
from .abstract import InteractionStrategy


class PanStrategy(InteractionStrategy):
    """Strategy for moving the crop across the image."""

    def __init__(
        self,
        *,
        model: CropSessionModel,
        on_crop_changed: Callable[[], None],
    ) -> None:
        """Initialize pan strategy.

        Parameters
        ----------
        model:
            Crop session model.
        on_crop_changed:
            Callback when crop values change.
        """
        self._model = model
        self._on_crop_changed = on_crop_changed

    def on_drag(self, delta_view: Point) -> None:
        """Handle pan drag movement."""
        if self._model.pan(delta_view):
            self._on_crop_changed()

    def on_end(self) -> None:
        """Handle end of pan interaction."""
        # pan reframes on every move
