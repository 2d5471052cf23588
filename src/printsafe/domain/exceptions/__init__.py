"""Custom exceptions for the printsafe package."""

# Base exceptions
from .base import (
    PrintSafeError,
    ConfigurationError,
)

# Simulation exceptions
from .simulation import (
    SimulationError,
    OutOfRangeInputError,
    UnknownPresetError,
)

__all__ = [
    # Base
    "PrintSafeError",
    "ConfigurationError",

    # Simulation
    "SimulationError",
    "OutOfRangeInputError",
    "UnknownPresetError",
]
