"""Value types for the crop geometry engine.

Every type here is immutable. Edits produce new instances through
:func:`dataclasses.replace` or the small ``with_*`` helpers, so callers can
hold on to a snapshot without worrying about it changing underneath them.
"""

from __future__ import annotations

import enum
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import NamedTuple, Union

from ..errors import InvalidAspectRatioError


@dataclass(frozen=True)
class Point:
    """A 2D coordinate. The frame (image or view space) is implied by context."""

    x: float
    y: float

    def translated(self, dx: float, dy: float) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Dimension:
    """Size of an image or viewport in pixels."""

    width: float
    height: float

    @property
    def is_valid(self) -> bool:
        return (
            math.isfinite(self.width)
            and math.isfinite(self.height)
            and self.width > 0
            and self.height > 0
        )

    @property
    def aspect(self) -> float:
        """Width over height, or ``0.0`` while either side is not a positive size."""
        if not self.is_valid:
            return 0.0
        return float(self.width) / float(self.height)


@dataclass(frozen=True)
class CropState:
    """Crop rectangle in image pixels.

    ``x``/``y`` locate the center, ``width``/``height`` the full extents and
    ``angle`` the rotation in radians. A positive angle turns the +x axis
    towards +y, which reads as clockwise in y-down image space.
    """

    x: float
    y: float
    width: float
    height: float
    angle: float = 0.0

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    @property
    def ratio(self) -> float:
        return float(self.width) / float(self.height)

    def translated(self, dx: float, dy: float) -> CropState:
        return replace(self, x=self.x + dx, y=self.y + dy)

    def with_center(self, center: Point) -> CropState:
        return replace(self, x=center.x, y=center.y)

    def with_angle(self, angle: float) -> CropState:
        return replace(self, angle=angle)

    def as_mapping(self) -> dict[str, float]:
        """Export the crop as a mapping of adjustment values."""
        return {
            "Crop_CX": float(self.x),
            "Crop_CY": float(self.y),
            "Crop_W": float(self.width),
            "Crop_H": float(self.height),
            "Crop_Angle": float(self.angle),
        }

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> CropState:
        """Build a crop from a mapping produced by :meth:`as_mapping`."""
        return cls(
            x=float(values["Crop_CX"]),
            y=float(values["Crop_CY"]),
            width=float(values["Crop_W"]),
            height=float(values["Crop_H"]),
            angle=float(values.get("Crop_Angle", 0.0)),
        )


class Corner(enum.IntEnum):
    """Crop rectangle corners in clockwise order (y-down image space).

    ``A`` is the top-left corner before rotation. ``A``/``C`` and ``B``/``D``
    are the two diagonals.
    """

    A = 0
    B = 1
    C = 2
    D = 3

    @property
    def opposite(self) -> Corner:
        return _OPPOSITES[self]

    @property
    def diagonal(self) -> int:
        """``1`` for the A–C diagonal, ``-1`` for B–D."""
        return _DIAGONALS[self]

    @property
    def local_signs(self) -> tuple[int, int]:
        """Signs of this corner's offset from the center in the crop's own frame."""
        return _LOCAL_SIGNS[self]


_OPPOSITES: dict[Corner, Corner] = {
    Corner.A: Corner.C,
    Corner.B: Corner.D,
    Corner.C: Corner.A,
    Corner.D: Corner.B,
}

_DIAGONALS: dict[Corner, int] = {
    Corner.A: 1,
    Corner.B: -1,
    Corner.C: 1,
    Corner.D: -1,
}

_LOCAL_SIGNS: dict[Corner, tuple[int, int]] = {
    Corner.A: (-1, -1),
    Corner.B: (1, -1),
    Corner.C: (1, 1),
    Corner.D: (-1, 1),
}


class Corners(NamedTuple):
    """The four corners of a crop, indexable by :class:`Corner`."""

    a: Point
    b: Point
    c: Point
    d: Point


@dataclass(frozen=True)
class FreeAspect:
    """No aspect-ratio constraint."""


@dataclass(frozen=True)
class Ratio:
    """Fixed aspect ratio expressed as width / height."""

    value: float

    def __post_init__(self) -> None:
        try:
            value = float(self.value)
        except (TypeError, ValueError) as exc:
            raise InvalidAspectRatioError(f"aspect ratio must be a number, got {self.value!r}") from exc
        if not math.isfinite(value) or value <= 0.0:
            raise InvalidAspectRatioError(f"aspect ratio must be finite and positive, got {self.value!r}")
        object.__setattr__(self, "value", value)


AspectRatio = Union[FreeAspect, Ratio]

FREE = FreeAspect()


def aspect_from_value(value: float | None) -> AspectRatio:
    """Translate an optional width/height ratio into an :data:`AspectRatio`."""

    if value is None:
        return FREE
    return Ratio(value)


__all__ = [
    "FREE",
    "AspectRatio",
    "Corner",
    "Corners",
    "CropState",
    "Dimension",
    "FreeAspect",
    "Point",
    "Ratio",
    "aspect_from_value",
]
