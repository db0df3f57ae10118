"""Tests for whole-crop reconciliation."""

import logging

import pytest

from cropkit.geometry import (
    FREE,
    CropState,
    Dimension,
    Ratio,
    Transformation,
    fit_crop,
    get_corners,
)


def _assert_inside(crop, image, slack=1e-6):
    for point in get_corners(crop):
        assert -slack <= point.x <= image.width - 1 + slack
        assert -slack <= point.y <= image.height - 1 + slack


def _assert_crop(crop, x, y, width, height):
    assert crop.x == pytest.approx(x)
    assert crop.y == pytest.approx(y)
    assert crop.width == pytest.approx(width)
    assert crop.height == pytest.approx(height)


def test_fitting_crop_is_returned_unchanged(landscape_image, small_crop):
    for mode in Transformation:
        assert fit_crop(small_crop, landscape_image, FREE, mode) == small_crop


def test_translate_moves_crop_back_inside(landscape_image):
    crop = CropState(x=20, y=250, width=100, height=100)
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)
    _assert_crop(fitted, 50.0, 250.0, 100.0, 100.0)


def test_translate_uses_largest_shift_per_axis(landscape_image):
    crop = CropState(x=980, y=480, width=100, height=100)
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)
    _assert_crop(fitted, 949.0, 449.0, 100.0, 100.0)


def test_translate_falls_back_to_scale_when_push_overshoots(landscape_image, caplog):
    crop = CropState(x=550, y=250, width=1000, height=500)
    with caplog.at_level(logging.DEBUG, logger="cropkit.geometry.reconciler"):
        fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)

    _assert_crop(fitted, 499.5, 249.5, 999.0, 499.0)
    assert fitted.angle == 0.0
    assert "falling back to scale" in caplog.text


def test_opposing_shifts_fall_back_to_scale(landscape_image):
    crop = CropState(x=500, y=250, width=1200, height=400)
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)
    _assert_crop(fitted, 499.5, 250.0, 999.0, 400.0)


def test_scale_keeps_fixed_ratio(landscape_image):
    crop = CropState(x=500, y=250, width=1200, height=600)
    fitted = fit_crop(crop, landscape_image, Ratio(2.0), Transformation.SCALE)
    _assert_crop(fitted, 448.5, 274.75, 897.0, 448.5)
    assert fitted.width / fitted.height == pytest.approx(2.0)
    _assert_inside(fitted, landscape_image)


@pytest.mark.parametrize("angle", [0.1, -0.3, 0.7])
def test_scale_fits_rotated_crop(landscape_image, angle):
    crop = CropState(x=500, y=250, width=1000, height=500, angle=angle)
    fitted = fit_crop(crop, landscape_image, Ratio(2.0), Transformation.SCALE)

    assert fitted.angle == angle
    assert fitted.width / fitted.height == pytest.approx(2.0)
    assert fitted.width < crop.width
    _assert_inside(fitted, landscape_image)


def test_fit_is_idempotent(landscape_image):
    crop = CropState(x=500, y=250, width=1000, height=500, angle=0.3)
    once = fit_crop(crop, landscape_image, Ratio(2.0), Transformation.SCALE)
    twice = fit_crop(once, landscape_image, Ratio(2.0), Transformation.SCALE)
    _assert_crop(twice, once.x, once.y, once.width, once.height)


def test_translate_preserves_rotation_and_size(landscape_image):
    crop = CropState(x=30, y=250, width=100, height=50, angle=0.2)
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)

    assert fitted.width == crop.width
    assert fitted.height == crop.height
    assert fitted.angle == crop.angle
    assert fitted.x > crop.x
    _assert_inside(fitted, landscape_image)


@pytest.mark.parametrize(
    "crop",
    [
        CropState(x=478.08, y=136.51, width=960.41, height=129.13, angle=-0.743),
        CropState(x=500, y=250, width=1000, height=500, angle=0.35),
        CropState(x=500, y=250, width=1000, height=500, angle=-0.7),
        CropState(x=600, y=200, width=700, height=300, angle=0.2),
    ],
)
def test_scale_keeps_rotated_free_crop_proportions(landscape_image, crop):
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.SCALE)

    _assert_inside(fitted, landscape_image)
    assert fitted.width > 1.0
    assert fitted.height > 1.0
    assert fitted.width / fitted.height == pytest.approx(crop.width / crop.height)
    assert fitted.angle == crop.angle


def test_translate_fallback_keeps_rotated_free_crop_open(landscape_image):
    crop = CropState(x=478.08, y=136.51, width=960.41, height=129.13, angle=-0.743)
    fitted = fit_crop(crop, landscape_image, FREE, Transformation.TRANSLATE)

    _assert_inside(fitted, landscape_image)
    assert fitted.height > 1.0
