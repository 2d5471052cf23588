"""Interactive preview session: state, before/after toggle and markup passthrough."""

import logging
from dataclasses import dataclass
from typing import Optional

from printsafe.domain.models import ControlValues
from printsafe.rendering.filters import FilterDescriptor, compose_filter
from printsafe.scoring.confidence import compute_confidence
from printsafe.scoring.models import ConfidenceResult
from printsafe.simulation.state import SimulationState
from printsafe.simulation.presets import apply_preset

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PreviewFrame:
    """Everything the renderer needs to draw one frame."""
    values: ControlValues
    before_mode: bool
    confidence: ConfidenceResult
    filter: FilterDescriptor
    markup: str


class PreviewSession:
    """
    Owns the simulation state of one preview panel.

    The markup is an opaque string (e.g. an SVG QR code) and is handed back
    untouched. Frames are computed on demand from a snapshot, never cached.
    """

    def __init__(self, markup: str = "", state: Optional[SimulationState] = None):
        self.markup = markup
        self.state = state if state is not None else SimulationState()
        self.before_mode = False

    def set_blur(self, value: float) -> float:
        return self.state.set_blur(value)

    def set_contrast(self, value: float) -> float:
        return self.state.set_contrast(value)

    def set_noise(self, value: float) -> float:
        return self.state.set_noise(value)

    def apply_preset(self, name: str) -> SimulationState:
        return apply_preset(self.state, name)

    def toggle_before(self) -> bool:
        self.before_mode = not self.before_mode
        logger.debug("Before mode %s", "on" if self.before_mode else "off")
        return self.before_mode

    @property
    def toggle_label(self) -> str:
        return "Show after" if self.before_mode else "Show before"

    def render(self) -> PreviewFrame:
        values = self.state.snapshot()
        return PreviewFrame(
            values=values,
            before_mode=self.before_mode,
            confidence=compute_confidence(values),
            filter=compose_filter(values, self.before_mode),
            markup=self.markup,
        )
