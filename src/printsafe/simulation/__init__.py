"""Simulation state, control ranges and presets."""

from .state import (
    ControlRange,
    SimulationState,
    BLUR_RANGE,
    CONTRAST_RANGE,
    NOISE_RANGE,
    CONTROL_RANGES,
)
from .presets import Preset, PRESETS, apply_preset, get_preset, preset_names

__all__ = [
    "ControlRange",
    "SimulationState",
    "BLUR_RANGE",
    "CONTRAST_RANGE",
    "NOISE_RANGE",
    "CONTROL_RANGES",
    "Preset",
    "PRESETS",
    "apply_preset",
    "get_preset",
    "preset_names",
]
