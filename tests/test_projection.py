"""Tests for crop corner projection."""

import math

import pytest

from cropkit.geometry.affine import Affine2D
from cropkit.geometry.math_ext import midpoint
from cropkit.geometry.projection import get_canvas_corners, get_corners, get_inverse_corner
from cropkit.geometry.types import Corner, CropState, Point


def _assert_point(actual, expected, tolerance=1e-9):
    assert actual.x == pytest.approx(expected.x, abs=tolerance)
    assert actual.y == pytest.approx(expected.y, abs=tolerance)


def test_unrotated_corners_run_clockwise_from_top_left():
    corners = get_corners(CropState(x=50, y=40, width=20, height=10))
    _assert_point(corners.a, Point(40, 35))
    _assert_point(corners.b, Point(60, 35))
    _assert_point(corners.c, Point(60, 45))
    _assert_point(corners.d, Point(40, 45))


def test_quarter_turn_rotates_top_left_corner():
    corners = get_corners(CropState(x=0, y=0, width=4, height=2, angle=math.pi / 2))
    _assert_point(corners.a, Point(1, -2))
    _assert_point(corners.c, Point(-1, 2))


def test_corners_are_indexable_by_corner_enum():
    corners = get_corners(CropState(x=10, y=10, width=4, height=2, angle=0.3))
    assert corners[Corner.A] == corners.a
    assert corners[Corner.B] == corners.b
    assert corners[Corner.C] == corners.c
    assert corners[Corner.D] == corners.d


@pytest.mark.parametrize("angle", [0.0, 0.3, math.pi / 4, -1.2, math.pi, 7.0])
def test_diagonals_meet_at_center(angle):
    crop = CropState(x=321.0, y=123.0, width=150.0, height=80.0, angle=angle)
    corners = get_corners(crop)
    _assert_point(midpoint(corners.a, corners.c), crop.center)
    _assert_point(midpoint(corners.b, corners.d), crop.center)


@pytest.mark.parametrize("angle", [0.0, 0.7, -2.1])
def test_edges_keep_crop_extents(angle):
    crop = CropState(x=10.0, y=-5.0, width=30.0, height=12.0, angle=angle)
    corners = get_corners(crop)
    assert math.dist((corners.a.x, corners.a.y), (corners.b.x, corners.b.y)) == pytest.approx(30.0)
    assert math.dist((corners.b.x, corners.b.y), (corners.c.x, corners.c.y)) == pytest.approx(12.0)


@pytest.mark.parametrize("angle", [0.0, 0.7, -2.1])
def test_inverse_corner_recovers_local_offsets(angle):
    crop = CropState(x=200.0, y=100.0, width=60.0, height=20.0, angle=angle)
    corners = get_corners(crop)
    _assert_point(get_inverse_corner(corners.c, crop.center, angle), Point(30, 10))
    _assert_point(get_inverse_corner(corners.a, crop.center, angle), Point(-30, -10))
    _assert_point(get_inverse_corner(corners.b, crop.center, angle), Point(30, -10))


def test_canvas_corners_apply_transform():
    crop = CropState(x=50, y=40, width=20, height=10)
    transform = Affine2D.identity().translate(100, 200)
    corners = get_canvas_corners(crop, transform)
    _assert_point(corners.a, Point(140, 235))
    _assert_point(corners.c, Point(160, 245))


def test_opposite_and_diagonal_tables():
    assert Corner.A.opposite is Corner.C
    assert Corner.B.opposite is Corner.D
    assert Corner.C.opposite is Corner.A
    assert Corner.D.opposite is Corner.B
    assert Corner.A.diagonal == Corner.C.diagonal == 1
    assert Corner.B.diagonal == Corner.D.diagonal == -1
