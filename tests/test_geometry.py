import math

import pytest

from spinningdonut.config import RenderSettings
from spinningdonut.model.geometry import GeometryError, RotationState, SweepResolution, TorusGeometry


def test_default_geometry():
    geometry = TorusGeometry()
    assert geometry.tube_radius == 1.0
    assert geometry.ring_radius == 2.0
    assert geometry.scale == 150.0
    assert geometry.offset == 5.0
    assert geometry.min_depth == pytest.approx(2.0)


@pytest.mark.parametrize("kwargs", [
    {"tube_radius": 0.0},
    {"tube_radius": -1.0},
    {"ring_radius": 1.0},
    {"scale": 0.0},
    {"offset": 3.0},
    {"offset": -5.0},
    {"ring_radius": 4.5, "offset": 5.0},
    {"tube_radius": math.nan},
    {"ring_radius": math.nan},
    {"scale": math.nan},
    {"offset": math.nan},
    {"offset": math.inf},
    {"ring_radius": math.inf},
    {"scale": math.inf},
    {"tube_radius": -math.inf},
])
def test_geometry_rejects_configurations_that_reach_zero_depth(kwargs):
    with pytest.raises(GeometryError):
        TorusGeometry(**kwargs)


def test_geometry_error_is_a_value_error():
    with pytest.raises(ValueError):
        TorusGeometry(offset=1.0)


@pytest.mark.parametrize("kwargs", [
    {"theta_step": 0.0},
    {"phi_step": -0.02},
    {"theta_step": 2 * math.pi},
])
def test_sweep_resolution_validation(kwargs):
    with pytest.raises(ValueError):
        SweepResolution(**kwargs)


def test_rotation_advanced_returns_new_state():
    start = RotationState()
    nxt = start.advanced(0.04, 0.02)
    assert start == RotationState(0.0, 0.0)
    assert nxt == RotationState(0.04, 0.02)


def test_rotation_trig():
    cos_a, sin_a, cos_b, sin_b = RotationState(0.0, math.pi / 2).trig()
    assert (cos_a, sin_a) == (1.0, 0.0)
    assert cos_b == pytest.approx(0.0)
    assert sin_b == pytest.approx(1.0)


@pytest.mark.parametrize("kwargs", [
    {"width": 0},
    {"height": -10},
    {"tick_interval_ms": 0},
    {"workers": 0},
    {"background": (0, 0, 300)},
    {"background": (0, 0)},
    {"delta_a": math.nan},
    {"delta_b": math.inf},
])
def test_render_settings_validation(kwargs):
    with pytest.raises(ValueError):
        RenderSettings(**kwargs)


def test_render_settings_defaults():
    settings = RenderSettings()
    assert (settings.width, settings.height) == (400, 400)
    assert settings.tick_interval_ms == 30
    assert (settings.delta_a, settings.delta_b) == (0.04, 0.02)
    assert settings.background == (0, 0, 0)
