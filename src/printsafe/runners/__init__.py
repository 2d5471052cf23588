"""Batch runners."""

from .sweep import SweepConfig, SweepResult, SweepRunner, run_sweep

__all__ = [
    "SweepConfig",
    "SweepResult",
    "SweepRunner",
    "run_sweep",
]
