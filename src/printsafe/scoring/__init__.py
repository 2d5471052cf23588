"""Confidence scoring and labelling."""

from .confidence import ConfidenceScorer, compute_confidence
from .models import ConfidenceResult, ConfidenceLabel

__all__ = [
    "ConfidenceScorer",
    "compute_confidence",
    "ConfidenceResult",
    "ConfidenceLabel",
]
