import pytest

from printsafe.domain.exceptions import UnknownPresetError
from printsafe.domain.models import ControlValues
from printsafe.rendering.filters import IDENTITY_FILTER
from printsafe.scoring.models import ConfidenceLabel
from printsafe.session import PreviewSession

SVG = '<svg xmlns="http://www.w3.org/2000/svg"><rect width="1" height="1"/></svg>'


@pytest.fixture
def session() -> PreviewSession:
    return PreviewSession(markup=SVG)


def test_initial_frame(session):
    frame = session.render()
    assert frame.values == ControlValues(0, 100, 0)
    assert frame.confidence.score == 100
    assert frame.confidence.label is ConfidenceLabel.HIGH
    assert frame.markup is SVG
    assert not frame.before_mode


def test_setters_clamp(session):
    assert session.set_blur(10) == 4
    assert session.set_contrast(50) == 70
    assert session.set_noise(31) == 30


def test_render_reflects_latest_state(session):
    session.apply_preset("Noisy")
    frame = session.render()
    assert frame.values == ControlValues(1.5, 95, 12)
    assert frame.confidence.label is ConfidenceLabel.MEDIUM
    assert frame.filter.noise_overlay_opacity == pytest.approx(0.12)

    session.set_blur(0)
    assert session.render().filter.blur_px == 0


def test_before_mode_shows_identity_but_keeps_score(session):
    session.apply_preset("Blurred")
    assert session.toggle_label == "Show before"
    assert session.toggle_before() is True
    assert session.toggle_label == "Show after"

    frame = session.render()
    assert frame.filter == IDENTITY_FILTER
    assert frame.confidence.label is ConfidenceLabel.LOW

    assert session.toggle_before() is False
    assert session.render().filter.blur_px == 3


def test_unknown_preset_propagates(session):
    session.set_noise(10)
    with pytest.raises(UnknownPresetError):
        session.apply_preset("Glossy")
    assert session.state.noise == 10
