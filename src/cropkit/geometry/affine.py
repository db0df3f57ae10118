"""Immutable 2D affine transform backed by a homogeneous 3x3 matrix."""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np

from ..errors import DegenerateGeometryError
from .types import Point

_SINGULAR_EPSILON = 1e-12


class Affine2D:
    """Affine transform of the plane.

    The builder methods (:meth:`translate`, :meth:`rotate`, :meth:`scale`)
    return a new transform that applies the extra step *after* the existing
    ones, so a chain reads in the order the steps happen to a point::

        Affine2D.identity().translate(-cx, -cy).rotate(-angle).scale(s)

    moves a point so ``(cx, cy)`` lands on the origin, then rotates, then
    scales. Angles are in radians.
    """

    __slots__ = ("_matrix",)

    def __init__(self, matrix: np.ndarray | Iterable[Iterable[float]] | None = None) -> None:
        if matrix is None:
            data = np.identity(3, dtype=np.float64)
        else:
            data = np.array(matrix, dtype=np.float64)
            if data.shape != (3, 3):
                raise ValueError(f"expected a 3x3 matrix, got shape {data.shape}")
        data.setflags(write=False)
        self._matrix = data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def identity(cls) -> Affine2D:
        return cls()

    @classmethod
    def from_components(cls, a: float, b: float, c: float, d: float, e: float, f: float) -> Affine2D:
        """Build from the six ``(a, b, c, d, e, f)`` canvas-style components."""
        return cls([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]])

    def then(self, other: Affine2D) -> Affine2D:
        """Return the transform that applies ``self`` followed by *other*."""
        return Affine2D(other._matrix @ self._matrix)

    def translate(self, dx: float, dy: float) -> Affine2D:
        step = np.array(
            [
                [1.0, 0.0, dx],
                [0.0, 1.0, dy],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return Affine2D(step @ self._matrix)

    def rotate(self, radians: float) -> Affine2D:
        cos_t = math.cos(radians)
        sin_t = math.sin(radians)
        step = np.array(
            [
                [cos_t, -sin_t, 0.0],
                [sin_t, cos_t, 0.0],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return Affine2D(step @ self._matrix)

    def scale(self, sx: float, sy: float | None = None, origin: Point | None = None) -> Affine2D:
        """Scale by ``(sx, sy)`` about *origin* (the coordinate origin by default)."""
        sy = sx if sy is None else sy
        ox, oy = (0.0, 0.0) if origin is None else (origin.x, origin.y)
        step = np.array(
            [
                [sx, 0.0, ox - sx * ox],
                [0.0, sy, oy - sy * oy],
                [0.0, 0.0, 1.0],
            ],
            dtype=np.float64,
        )
        return Affine2D(step @ self._matrix)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def matrix(self) -> np.ndarray:
        """Read-only view of the homogeneous matrix."""
        return self._matrix

    @property
    def determinant(self) -> float:
        m = self._matrix
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])

    @property
    def is_invertible(self) -> bool:
        det = self.determinant
        return math.isfinite(det) and abs(det) > _SINGULAR_EPSILON

    def components(self) -> tuple[float, float, float, float, float, float]:
        """Return ``(a, b, c, d, e, f)`` as consumed by 2D canvas APIs."""
        m = self._matrix
        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    def invert(self) -> Affine2D:
        if not self.is_invertible:
            raise DegenerateGeometryError(f"transform is not invertible (det={self.determinant!r})")
        try:
            inverse = np.linalg.inv(self._matrix)
        except np.linalg.LinAlgError as exc:  # pragma: no cover - guarded by is_invertible
            raise DegenerateGeometryError(str(exc)) from exc
        return Affine2D(inverse)

    def apply(self, point: Point) -> Point:
        m = self._matrix
        return Point(
            float(m[0, 0] * point.x + m[0, 1] * point.y + m[0, 2]),
            float(m[1, 0] * point.x + m[1, 1] * point.y + m[1, 2]),
        )

    def approx_equals(self, other: Affine2D, tolerance: float = 1e-9) -> bool:
        return bool(np.allclose(self._matrix, other._matrix, rtol=0.0, atol=tolerance))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Affine2D):
            return NotImplemented
        return bool(np.array_equal(self._matrix, other._matrix))

    def __hash__(self) -> int:
        return hash(self._matrix.tobytes())

    def __repr__(self) -> str:
        a, b, c, d, e, f = self.components()
        return f"Affine2D(a={a:.6g}, b={b:.6g}, c={c:.6g}, d={d:.6g}, e={e:.6g}, f={f:.6g})"


__all__ = ["Affine2D"]
