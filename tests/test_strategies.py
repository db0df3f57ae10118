"""Tests for the crop interaction strategies."""

from unittest.mock import Mock

import pytest

from cropkit.geometry import Corner, Point
from cropkit.session import CropSessionModel, PanStrategy, ResizeStrategy, RotateStrategy
from cropkit.session.strategies import InteractionStrategy
from cropkit.settings import CropSettings

SCALE = 4.0 * (1.0 - 2 * 0.05 - 1e-4)


@pytest.fixture
def model(landscape_image, viewport, small_crop):
    session = CropSessionModel()
    session.load_image(landscape_image)
    session.resize_viewport(viewport)
    session.restore_snapshot(small_crop)
    return session


def test_strategies_share_interface(model):
    strategies = [
        PanStrategy(model=model, on_crop_changed=Mock()),
        ResizeStrategy(corner=Corner.A, model=model, on_crop_changed=Mock()),
        RotateStrategy(model=model, on_crop_changed=Mock(), degrees_per_pixel=0.25),
    ]
    assert all(isinstance(strategy, InteractionStrategy) for strategy in strategies)


def test_pan_strategy_notifies_on_change(model):
    callback = Mock()
    strategy = PanStrategy(model=model, on_crop_changed=callback)

    strategy.on_drag(Point(20, 0))
    callback.assert_called_once_with()
    assert model.crop.x == pytest.approx(500 - 20 / SCALE)


def test_pan_strategy_is_quiet_without_change(model):
    callback = Mock()
    strategy = PanStrategy(model=model, on_crop_changed=callback)
    strategy.on_drag(Point(0, 0))
    strategy.on_end()
    callback.assert_not_called()


def test_resize_strategy_moves_handle(model):
    callback = Mock()
    strategy = ResizeStrategy(corner=Corner.C, model=model, on_crop_changed=callback)
    assert strategy.corner is Corner.C

    strategy.on_drag(Point(20, 10))
    callback.assert_called_once_with()
    assert model.crop.width == pytest.approx(200 + 20 / SCALE)
    assert model.crop.height == pytest.approx(100 + 10 / SCALE)


def test_resize_strategy_commits_on_end(model):
    strategy = ResizeStrategy(corner=Corner.C, model=model, on_crop_changed=Mock())
    with_commit = Mock(wraps=model.commit)
    model.commit = with_commit
    strategy.on_end()
    with_commit.assert_called_once_with()


def test_rotate_strategy_accumulates_travel(model):
    callback = Mock()
    strategy = RotateStrategy(model=model, on_crop_changed=callback, degrees_per_pixel=0.25)

    strategy.on_drag(Point(30, 5))
    strategy.on_drag(Point(10, -5))
    assert model.crop.angle == pytest.approx(0.17453292519943295)
    assert callback.call_count == 2

    strategy.on_end()
    strategy.on_drag(Point(4, 0))
    assert model.crop.angle == pytest.approx(0.19198621771937624)


def test_rotate_strategy_uses_rotation_step_setting(landscape_image, viewport, small_crop):
    session = CropSessionModel(CropSettings(rotation_step=0.5))
    session.load_image(landscape_image)
    session.resize_viewport(viewport)
    session.restore_snapshot(small_crop)
    strategy = RotateStrategy(model=session, on_crop_changed=Mock())

    strategy.on_drag(Point(20, 0))
    assert session.crop.angle == pytest.approx(0.17453292519943295)


def test_rotate_strategy_defaults_to_configured_step(model):
    strategy = RotateStrategy(model=model, on_crop_changed=Mock())
    strategy.on_drag(Point(40, 0))
    assert model.crop.angle == pytest.approx(0.17453292519943295)
