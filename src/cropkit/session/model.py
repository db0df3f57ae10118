"""
Crop session model for state management.

This module owns the current crop and view values for one editing session and
turns interaction requests (pan, corner drag, rotation, aspect change) into
calls to the pure geometry engine. It never draws and never reads input
devices; every edit replaces the stored values wholesale.

The model is meant to be driven from a single thread.
"""

from __future__ import annotations

from dataclasses import replace

from ..geometry.affine import Affine2D
from ..geometry.fitter import fit_point
from ..geometry.projection import get_canvas_corners
from ..geometry.reconciler import Transformation, fit_crop
from ..geometry.reset import reset_crop
from ..geometry.types import AspectRatio, Corner, Corners, CropState, Dimension, Point, Ratio
from ..geometry.view import (
    ViewState,
    canvas_to_image,
    clamp_to_viewport,
    image_to_canvas,
    needs_refit,
)
from ..settings.manager import CropSettings
from ..utils.logging import get_logger

LOGGER = get_logger(__name__)


class CropSessionModel:
    """Manages crop session data and validation logic."""

    def __init__(self, settings: CropSettings | None = None) -> None:
        """Initialize the crop session model."""
        self._settings = settings or CropSettings()
        self._aspect: AspectRatio = self._settings.aspect
        self._image: Dimension | None = None
        self._viewport: Dimension | None = None
        self._crop: CropState | None = None
        self._view: ViewState | None = None

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def settings(self) -> CropSettings:
        return self._settings

    @property
    def crop(self) -> CropState | None:
        return self._crop

    @property
    def view(self) -> ViewState | None:
        return self._view

    @property
    def aspect(self) -> AspectRatio:
        return self._aspect

    @property
    def image(self) -> Dimension | None:
        return self._image

    @property
    def viewport(self) -> Dimension | None:
        return self._viewport

    @property
    def transform(self) -> Affine2D:
        """Return the current image-to-view transform (identity until ready)."""
        if self._view is None:
            return Affine2D.identity()
        return self._view.transform

    @property
    def is_ready(self) -> bool:
        """Return True once both an image and a viewport are known."""
        return self._crop is not None and self._view is not None

    # ------------------------------------------------------------------
    # Snapshots
    # ------------------------------------------------------------------
    def create_snapshot(self) -> CropState | None:
        """Return the current crop. Crop states are immutable."""
        return self._crop

    def restore_snapshot(self, snapshot: CropState | None) -> None:
        """Restore the crop from *snapshot* and refit the view."""
        self._crop = snapshot
        self._refit_view()

    def has_changed(self, snapshot: CropState | None) -> bool:
        """Return True when the current crop differs from *snapshot*."""
        current = self._crop
        if current is None or snapshot is None:
            return current is not snapshot
        before = (snapshot.x, snapshot.y, snapshot.width, snapshot.height, snapshot.angle)
        after = (current.x, current.y, current.width, current.height, current.angle)
        return any(abs(a - b) > 1e-6 for a, b in zip(before, after, strict=True))

    # ------------------------------------------------------------------
    # Session inputs
    # ------------------------------------------------------------------
    def load_image(self, image: Dimension) -> None:
        """Start a crop for a newly loaded *image*.

        An image without a usable size clears the session until a valid one
        arrives.
        """
        if not image.is_valid:
            LOGGER.debug("load_image ignored: invalid image size %s", image)
            self._image = None
            self._crop = None
            self._view = None
            return
        self._image = image
        self._crop = reset_crop(image, self._aspect)
        self._refit_view()

    def resize_viewport(self, viewport: Dimension) -> None:
        """Record the display surface size and reframe the crop."""
        self._viewport = viewport
        self._refit_view()

    def reset(self) -> bool:
        """Reset the crop to the largest centered crop for the current aspect.

        Returns
        -------
        bool:
            True if the crop changed, False otherwise.
        """
        if self._image is None:
            LOGGER.debug("reset ignored: no image loaded")
            return False
        snapshot = self._crop
        self._crop = reset_crop(self._image, self._aspect)
        self._refit_view()
        return self.has_changed(snapshot)

    def set_aspect(self, aspect: AspectRatio) -> bool:
        """Switch the aspect constraint without resetting the crop.

        A fixed ratio trims the longer side of the current crop around its
        center before the crop is scaled back inside the image.
        """
        self._aspect = aspect
        if self._crop is None or self._image is None:
            return False
        snapshot = self._crop
        crop = self._crop
        if isinstance(aspect, Ratio):
            if crop.ratio > aspect.value:
                crop = replace(crop, width=crop.height * aspect.value)
            else:
                crop = replace(crop, height=crop.width / aspect.value)
        self._crop = fit_crop(crop, self._image, aspect, Transformation.SCALE)
        self._refit_view()
        return self.has_changed(snapshot)

    def set_rotation(self, angle: float) -> bool:
        """Rotate the crop to *angle* radians, shrinking it to stay in the image.

        Without an aspect constraint the crop's current proportions are kept
        while it shrinks.
        """
        if self._crop is None or self._image is None:
            LOGGER.debug("set_rotation ignored: no image loaded")
            return False
        snapshot = self._crop
        aspect = self._aspect if isinstance(self._aspect, Ratio) else Ratio(self._crop.ratio)
        self._crop = fit_crop(self._crop.with_angle(angle), self._image, aspect, Transformation.SCALE)
        self._refit_view()
        return self.has_changed(snapshot)

    def pan(self, delta_view: Point) -> bool:
        """Drag the image by *delta_view* viewport pixels under a fixed crop frame.

        The crop moves the opposite way in image space and is translated back
        inside the image when needed.
        """
        if not self.is_ready:
            LOGGER.debug("pan ignored: session not ready")
            return False
        assert self._crop is not None and self._image is not None
        snapshot = self._crop
        transform = self.transform
        screen = image_to_canvas(self._crop.center, transform)
        target = canvas_to_image(screen.translated(-delta_view.x, -delta_view.y), transform)
        moved = self._crop.with_center(target)
        self._crop = fit_crop(moved, self._image, self._aspect, Transformation.TRANSLATE)
        self._refit_view()
        return self.has_changed(snapshot)

    def drag_corner(self, corner: Corner, view_pos: Point) -> bool:
        """Move *corner* of the crop to *view_pos* (viewport pixels).

        The request is limited so the crop keeps at least the configured
        minimum size on screen, then fitted into the image. The view is only
        reframed when the crop grows into the viewport margin; shrinking is
        reframed by :meth:`commit`.
        """
        if not self.is_ready:
            LOGGER.debug("drag_corner ignored: session not ready")
            return False
        assert self._crop is not None and self._image is not None
        snapshot = self._crop
        corners = self.canvas_corners()
        opposite = corners[corner.opposite]
        limited = self._limit_to_min_size(corner, view_pos, opposite)

        transform = self.transform
        fitted = fit_point(
            canvas_to_image(limited, transform),
            canvas_to_image(opposite, transform),
            self._image,
            self._aspect,
            self._crop.angle,
            corner.diagonal,
        )
        self._crop = fit_crop(fitted, self._image, self._aspect, Transformation.TRANSLATE)
        if self._view is not None and needs_refit(self._crop, self._view, self._settings.buffer):
            self._refit_view()
        return self.has_changed(snapshot)

    def commit(self) -> None:
        """Reframe the crop at the end of an interaction."""
        self._refit_view()

    # ------------------------------------------------------------------
    # View-space queries
    # ------------------------------------------------------------------
    def canvas_corners(self) -> Corners:
        """Return the crop corners in viewport pixels."""
        if self._crop is None:
            origin = Point(0.0, 0.0)
            return Corners(origin, origin, origin, origin)
        return get_canvas_corners(self._crop, self.transform)

    def handle_positions(self) -> Corners:
        """Return corner handle positions clamped into the viewport margin."""
        corners = self.canvas_corners()
        if self._viewport is None:
            return corners
        return Corners(
            *(clamp_to_viewport(point, self._viewport, self._settings.buffer) for point in corners)
        )

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _min_size_view(self) -> tuple[float, float]:
        min_x = min_y = self._settings.min_size
        if isinstance(self._aspect, Ratio):
            if self._aspect.value < 1.0:
                # portrait: width is the short side
                min_y = min_x / self._aspect.value
            elif self._aspect.value > 1.0:
                min_x = min_y * self._aspect.value
        return min_x, min_y

    def _limit_to_min_size(self, corner: Corner, pos: Point, opposite: Point) -> Point:
        min_x, min_y = self._min_size_view()
        sign_x, sign_y = corner.local_signs
        x = max(pos.x, opposite.x + min_x) if sign_x > 0 else min(pos.x, opposite.x - min_x)
        y = max(pos.y, opposite.y + min_y) if sign_y > 0 else min(pos.y, opposite.y - min_y)
        return Point(x, y)

    def _refit_view(self) -> None:
        if self._crop is None or self._viewport is None or self._image is None:
            return
        self._view = ViewState.fit(self._crop, self._viewport, self._image, self._settings.buffer)


__all__ = ["CropSessionModel"]
