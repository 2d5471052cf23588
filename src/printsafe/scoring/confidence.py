# printsafe/scoring/confidence.py
"""Core scan confidence scoring logic."""

from typing import Dict

from .models import ConfidenceResult, ConfidenceLabel

BLUR_WEIGHT = 18.0          # points per px of blur
NOISE_WEIGHT = 1.2          # points per percent of noise
CONTRAST_WEIGHT = 0.6       # points per percent away from the baseline
CONTRAST_BASELINE = 100.0

def clamp(x: float, lo: float = 0.0, hi: float = 100.0) -> float:
    return max(lo, min(hi, x))

# strict lower bounds, checked top-down
LABEL_RULES = [
    (ConfidenceLabel.HIGH,   75),
    (ConfidenceLabel.MEDIUM, 50),
]

def _label_for(score: float) -> ConfidenceLabel:
    """Bin a score: High above 75, Medium above 50, Low otherwise."""
    for label, thr in LABEL_RULES:
        if score > thr:
            return label
    return ConfidenceLabel.LOW

def penalties(blur: float, contrast: float, noise: float) -> Dict[str, float]:
    """Points each control takes off a perfect score."""
    return {
        "blur*18": blur * BLUR_WEIGHT,
        "noise*1.2": noise * NOISE_WEIGHT,
        "contrast_deviation*0.6": abs(CONTRAST_BASELINE - contrast) * CONTRAST_WEIGHT,
    }

class ConfidenceScorer:
    """Main confidence scoring engine."""

    def score(self, blur: float, contrast: float, noise: float) -> ConfidenceResult:
        """
        Heuristic scan confidence for one set of control values.

        Blur is penalised hardest, noise linearly, and contrast symmetrically
        for deviating from 100% in either direction.
        """
        contributors = penalties(blur, contrast, noise)
        raw = (
            100
            - contributors["blur*18"]
            - contributors["noise*1.2"]
            - contributors["contrast_deviation*0.6"]
        )
        value = clamp(raw)
        return ConfidenceResult(
            score=value,
            label=_label_for(value),
            contributors=contributors,
        )

_scorer = ConfidenceScorer()

def compute_confidence(state) -> ConfidenceResult:
    """Score anything exposing ``blur``, ``contrast`` and ``noise``."""
    return _scorer.score(state.blur, state.contrast, state.noise)
