import pytest

from printsafe.domain.models import ControlValues
from printsafe.rendering.filters import (
    FilterDescriptor,
    IDENTITY_FILTER,
    compose_filter,
    noise_opacity,
)
from printsafe.simulation.state import SimulationState


def test_identity_descriptor():
    assert IDENTITY_FILTER == FilterDescriptor(0, 100, 0)
    assert IDENTITY_FILTER.is_identity
    assert IDENTITY_FILTER.css_filter() == "none"
    assert IDENTITY_FILTER.noise_overlay_css() == ""


@pytest.mark.parametrize(
    "values",
    [ControlValues(0, 100, 0), ControlValues(4, 70, 30), ControlValues(1.5, 95, 12)],
)
def test_before_mode_always_identity(values):
    assert compose_filter(values, before_mode=True) == IDENTITY_FILTER


def test_after_mode_maps_controls():
    descriptor = compose_filter(ControlValues(1.5, 95, 12), before_mode=False)
    assert descriptor.blur_px == 1.5
    assert descriptor.contrast_percent == 95
    assert descriptor.noise_overlay_opacity == pytest.approx(0.12)
    assert descriptor.has_noise_overlay


def test_no_overlay_without_noise():
    descriptor = compose_filter(SimulationState(blur=2, contrast=90, noise=0))
    assert descriptor.noise_overlay_opacity == 0
    assert not descriptor.has_noise_overlay
    assert descriptor.noise_overlay_css() == ""
    assert descriptor.css_filter() == "blur(2px) contrast(90%)"


def test_noise_opacity_bounds():
    assert noise_opacity(-5) == 0.0
    assert noise_opacity(0) == 0.0
    assert noise_opacity(30) == pytest.approx(0.3)
    assert noise_opacity(250) == 1.0


def test_css_output():
    descriptor = compose_filter(ControlValues(1.5, 95, 12))
    assert descriptor.css_filter() == "blur(1.5px) contrast(95%)"
    assert descriptor.noise_overlay_css() == (
        "linear-gradient(rgba(0,0,0,0.12), rgba(0,0,0,0.12))"
    )


def test_as_dict():
    assert compose_filter(ControlValues(3, 90, 8)).as_dict() == {
        "blur_px": 3,
        "contrast_percent": 90,
        "noise_overlay_opacity": pytest.approx(0.08),
    }
