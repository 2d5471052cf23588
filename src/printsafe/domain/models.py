"""Core domain models shared by the simulation, scoring and rendering layers."""

from typing import NamedTuple, Dict


class ControlValues(NamedTuple):
    """An immutable (blur, contrast, noise) triple.

    Used for presets and for read-only snapshots of a SimulationState.
    """
    blur: float
    contrast: float
    noise: float

    def as_dict(self) -> Dict[str, float]:
        return dict(self._asdict())
