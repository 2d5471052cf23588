"""Named control presets for quick scenario switching."""

import logging
from types import MappingProxyType
from typing import Mapping, List

from printsafe.domain.models import ControlValues
from printsafe.domain.exceptions import UnknownPresetError
from .state import SimulationState

logger = logging.getLogger(__name__)

# Presets are plain control triples.
Preset = ControlValues

PRESETS: Mapping[str, Preset] = MappingProxyType({
    "Print Safe":    Preset(blur=0.5, contrast=110, noise=2),
    "High Contrast": Preset(blur=0, contrast=130, noise=0),
    "Noisy":         Preset(blur=1.5, contrast=95, noise=12),
    "Blurred":       Preset(blur=3, contrast=90, noise=8),
})

def preset_names() -> List[str]:
    return list(PRESETS)

def get_preset(name: str) -> Preset:
    """Look up a preset by its exact name."""
    try:
        return PRESETS[name]
    except KeyError:
        raise UnknownPresetError(name, available=PRESETS) from None

def apply_preset(state: SimulationState, name: str) -> SimulationState:
    """
    Write a preset into ``state`` in one step and return the state.

    An unknown name raises UnknownPresetError before anything is written.
    """
    try:
        preset = get_preset(name)
    except UnknownPresetError:
        logger.warning("Rejected unknown preset %r", name)
        raise
    state.apply(preset)
    logger.info("Applied preset %r: %s", name, preset.as_dict())
    return state
