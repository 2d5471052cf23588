import pytest

from printsafe.domain.models import ControlValues
from printsafe.scoring.confidence import (
    ConfidenceScorer,
    compute_confidence,
    clamp,
    penalties,
    _label_for,
)
from printsafe.scoring.models import ConfidenceResult, ConfidenceLabel
from printsafe.simulation.presets import PRESETS
from printsafe.simulation.state import SimulationState, BLUR_RANGE, CONTRAST_RANGE, NOISE_RANGE


@pytest.fixture
def scorer() -> ConfidenceScorer:
    return ConfidenceScorer()


def test_clamp_limits_values():
    assert clamp(-5) == 0.0
    assert clamp(42.5) == 42.5
    assert clamp(130) == 100.0


def test_label_thresholds_are_strict():
    assert _label_for(100) is ConfidenceLabel.HIGH
    assert _label_for(75.1) is ConfidenceLabel.HIGH
    assert _label_for(75) is ConfidenceLabel.MEDIUM
    assert _label_for(50.1) is ConfidenceLabel.MEDIUM
    assert _label_for(50) is ConfidenceLabel.LOW
    assert _label_for(0) is ConfidenceLabel.LOW


def test_penalties():
    p = penalties(blur=2, contrast=80, noise=10)
    assert p["blur*18"] == pytest.approx(36)
    assert p["noise*1.2"] == pytest.approx(12)
    assert p["contrast_deviation*0.6"] == pytest.approx(12)


def test_contrast_penalty_is_symmetric(scorer: ConfidenceScorer):
    low = scorer.score(0, 80, 0)
    high = scorer.score(0, 120, 0)
    assert low.score == pytest.approx(high.score)
    assert low.score == pytest.approx(88)


def test_undistorted_state_scores_full_marks():
    result = compute_confidence(SimulationState())
    assert result.score == 100
    assert result.label is ConfidenceLabel.HIGH


def test_worst_blur_and_noise_score_zero():
    result = compute_confidence(ControlValues(blur=4, contrast=100, noise=30))
    assert result.score == 0
    assert result.label is ConfidenceLabel.LOW


@pytest.mark.parametrize(
    "name, expected, label",
    [
        ("Print Safe", 82.6, ConfidenceLabel.HIGH),
        ("High Contrast", 82.0, ConfidenceLabel.HIGH),
        ("Noisy", 55.6, ConfidenceLabel.MEDIUM),
        ("Blurred", 30.4, ConfidenceLabel.LOW),
    ],
)
def test_preset_scores(name, expected, label):
    result = compute_confidence(PRESETS[name])
    assert result.score == pytest.approx(expected)
    assert result.label is label


def test_score_stays_in_range_across_grid():
    for blur in BLUR_RANGE.values():
        for contrast in CONTRAST_RANGE.values():
            for noise in NOISE_RANGE.values():
                score = compute_confidence(ControlValues(blur, contrast, noise)).score
                assert 0 <= score <= 100


def test_result_as_dict():
    result = compute_confidence(ControlValues(1, 100, 0))
    d = result.as_dict()
    assert d["score"] == pytest.approx(82)
    assert d["label"] == "High"
    assert set(d["contributors"]) == {"blur*18", "noise*1.2", "contrast_deviation*0.6"}


def test_result_is_frozen():
    result = ConfidenceResult(score=10, label=ConfidenceLabel.LOW)
    with pytest.raises(Exception):
        result.score = 20


def test_result_is_hashable():
    first = compute_confidence(SimulationState())
    second = compute_confidence(ControlValues(0, 100, 0))
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
