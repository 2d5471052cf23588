"""Core domain models and exceptions."""

from .models import ControlValues

__all__ = [
    "ControlValues",
]
