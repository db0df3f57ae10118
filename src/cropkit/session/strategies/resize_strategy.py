"""
Resize strategy for crop corner dragging.
"""

from __future__ import annotations

from collections.abc import Callable

from ...geometry.types import Corner, Point
from ..model import CropSessionModel
from .abstract import InteractionStrategy


class ResizeStrategy(InteractionStrategy):
    """Strategy for resizing the crop by dragging one of its corners."""

    def __init__(
        self,
        *,
        corner: Corner,
        model: CropSessionModel,
        on_crop_changed: Callable[[], None],
    ) -> None:
        """Initialize resize strategy.

        Parameters
        ----------
        corner:
            The crop corner being dragged.
        model:
            Crop session model.
        on_crop_changed:
            Callback when crop values change.
        """
        self._corner = corner
        self._model = model
        self._on_crop_changed = on_crop_changed

    @property
    def corner(self) -> Corner:
        return self._corner

    def on_drag(self, delta_view: Point) -> None:
        """Move the dragged handle by *delta_view* from where it is drawn now."""
        if not self._model.is_ready:
            return
        handle = self._model.handle_positions()[self._corner]
        target = handle.translated(delta_view.x, delta_view.y)
        if self._model.drag_corner(self._corner, target):
            self._on_crop_changed()

    def on_end(self) -> None:
        """Reframe the crop once the handle is released."""
        self._model.commit()
