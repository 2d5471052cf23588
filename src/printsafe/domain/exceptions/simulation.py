"""Simulation-related exceptions."""

from typing import Optional, Iterable
from .base import PrintSafeError

class SimulationError(PrintSafeError):
    """Base class for simulation state errors."""

    def __init__(
        self,
        message: str,
        *,
        field_name: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if field_name:
            self.add_context('field_name', field_name)

    def _get_default_error_code(self) -> str:
        return "SIMULATION_ERROR"


class OutOfRangeInputError(SimulationError):
    """Raised when a control value falls outside its range.

    Setters resolve this by clamping, so callers of the state never see it.
    """

    def __init__(
        self,
        field_name: str,
        value: float,
        minimum: float,
        maximum: float,
        **kwargs
    ):
        message = f"{field_name}={value} is outside [{minimum}, {maximum}]"
        super().__init__(message, field_name=field_name, recoverable=True, **kwargs)
        self.field_name = field_name
        self.value = value
        self.add_context('field_value', value)
        self.add_context('minimum', minimum)
        self.add_context('maximum', maximum)

    def _get_default_error_code(self) -> str:
        return "OUT_OF_RANGE_INPUT"


class UnknownPresetError(SimulationError):
    """Raised when a preset name is not in the catalog."""

    def __init__(
        self,
        preset_name: str,
        *,
        available: Optional[Iterable[str]] = None,
        **kwargs
    ):
        super().__init__(f"Unknown preset: {preset_name!r}", **kwargs)
        self.preset_name = preset_name
        self.add_context('preset_name', preset_name)
        if available:
            names = list(available)
            self.add_context('available_presets', names)
            self.add_suggestion(f"Use one of: {', '.join(names)}")

    def _get_default_error_code(self) -> str:
        return "UNKNOWN_PRESET"
