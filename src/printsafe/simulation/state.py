"""Control ranges and the mutable simulation state."""

import math
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

import numpy as np

from printsafe.domain.models import ControlValues
from printsafe.domain.exceptions import OutOfRangeInputError

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ControlRange:
    """Bounds, step and display metadata for one slider control."""
    name: str
    minimum: float
    maximum: float
    step: float
    default: float
    unit: str = ""
    hint: str = ""
    display_format: str = "{:g}"

    def check(self, value: float) -> float:
        """Return ``value`` as a float, raising OutOfRangeInputError when out of bounds."""
        value = float(value)
        if math.isnan(value) or value < self.minimum or value > self.maximum:
            raise OutOfRangeInputError(self.name, value, self.minimum, self.maximum)
        return value

    def clamp(self, value: float, fallback: Optional[float] = None) -> float:
        """
        Clamp ``value`` into [minimum, maximum].

        NaN has no meaningful position in the range and resolves to ``fallback``
        (or the control default when no fallback is given).
        """
        try:
            return self.check(value)
        except OutOfRangeInputError as exc:
            if math.isnan(exc.value):
                clamped = self.default if fallback is None else fallback
            else:
                clamped = max(self.minimum, min(self.maximum, exc.value))
            logger.debug("Clamped %s from %s to %s", self.name, exc.value, clamped)
            return clamped

    def snap(self, value: float) -> float:
        """Clamp, then round to the nearest step."""
        clamped = self.clamp(value)
        steps = round((clamped - self.minimum) / self.step)
        return min(self.maximum, round(self.minimum + steps * self.step, 10))

    def fill_percent(self, value: float) -> float:
        """Share of the slider track filled at ``value`` (0..100)."""
        return (self.clamp(value) - self.minimum) / (self.maximum - self.minimum) * 100

    def values(self) -> List[float]:
        """Every step-aligned value in the range, ascending."""
        n_steps = int(round((self.maximum - self.minimum) / self.step))
        grid = self.minimum + np.arange(n_steps + 1) * self.step
        return [float(v) for v in np.round(grid, 10)]

    def format(self, value: float) -> str:
        return f"{self.display_format.format(value)}{self.unit}"


BLUR_RANGE = ControlRange(
    name="blur", minimum=0.0, maximum=4.0, step=0.5, default=0.0,
    unit=" px", hint="Simulate printer blur / camera shake",
    display_format="{:.1f}",
)
CONTRAST_RANGE = ControlRange(
    name="contrast", minimum=70.0, maximum=140.0, step=5.0, default=100.0,
    unit="%", hint="High contrast ensures scanning reliability",
)
NOISE_RANGE = ControlRange(
    name="noise", minimum=0.0, maximum=30.0, step=5.0, default=0.0,
    unit="%", hint="Simulates printing artifacts",
)

CONTROL_RANGES: Dict[str, ControlRange] = {
    r.name: r for r in (BLUR_RANGE, CONTRAST_RANGE, NOISE_RANGE)
}


class SimulationState:
    """
    Holds the three control values of one preview session.

    Every write goes through the owning ControlRange, so the stored values
    never leave their declared bounds. Writes do not trigger any recomputation.
    """

    def __init__(
        self,
        blur: float = BLUR_RANGE.default,
        contrast: float = CONTRAST_RANGE.default,
        noise: float = NOISE_RANGE.default,
    ):
        self._blur = BLUR_RANGE.clamp(blur)
        self._contrast = CONTRAST_RANGE.clamp(contrast)
        self._noise = NOISE_RANGE.clamp(noise)

    @property
    def blur(self) -> float:
        return self._blur

    @property
    def contrast(self) -> float:
        return self._contrast

    @property
    def noise(self) -> float:
        return self._noise

    def set_blur(self, value: float) -> float:
        self._blur = BLUR_RANGE.clamp(value, fallback=self._blur)
        return self._blur

    def set_contrast(self, value: float) -> float:
        self._contrast = CONTRAST_RANGE.clamp(value, fallback=self._contrast)
        return self._contrast

    def set_noise(self, value: float) -> float:
        self._noise = NOISE_RANGE.clamp(value, fallback=self._noise)
        return self._noise

    def set_value(self, name: str, value: float) -> float:
        """Set a control by name ("blur", "contrast" or "noise")."""
        setters = {
            "blur": self.set_blur,
            "contrast": self.set_contrast,
            "noise": self.set_noise,
        }
        if name not in setters:
            raise KeyError(f"Unknown control: {name}")
        return setters[name](value)

    def apply(self, values: ControlValues) -> "SimulationState":
        """Overwrite all three controls at once."""
        # resolve everything before assigning so a failure leaves no partial write
        blur = BLUR_RANGE.clamp(values.blur, fallback=self._blur)
        contrast = CONTRAST_RANGE.clamp(values.contrast, fallback=self._contrast)
        noise = NOISE_RANGE.clamp(values.noise, fallback=self._noise)
        self._blur, self._contrast, self._noise = blur, contrast, noise
        return self

    def reset(self) -> "SimulationState":
        return self.apply(ControlValues(
            BLUR_RANGE.default, CONTRAST_RANGE.default, NOISE_RANGE.default
        ))

    def snapshot(self) -> ControlValues:
        """Immutable copy of the current values."""
        return ControlValues(self._blur, self._contrast, self._noise)

    def __eq__(self, other) -> bool:
        if not isinstance(other, SimulationState):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    def __repr__(self) -> str:
        return (
            f"SimulationState(blur={self._blur}, contrast={self._contrast}, "
            f"noise={self._noise})"
        )
