"""Print-safety simulation for generated visual codes."""

from printsafe.domain.exceptions import UnknownPresetError
from printsafe.rendering.filters import FilterDescriptor, compose_filter
from printsafe.scoring.confidence import compute_confidence
from printsafe.scoring.models import ConfidenceLabel, ConfidenceResult
from printsafe.session import PreviewFrame, PreviewSession
from printsafe.simulation.presets import PRESETS, apply_preset
from printsafe.simulation.state import SimulationState

__version__ = "0.1.0"

__all__ = [
    "UnknownPresetError",
    "FilterDescriptor",
    "compose_filter",
    "compute_confidence",
    "ConfidenceLabel",
    "ConfidenceResult",
    "PreviewFrame",
    "PreviewSession",
    "PRESETS",
    "apply_preset",
    "SimulationState",
]
