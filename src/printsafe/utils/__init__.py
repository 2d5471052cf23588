"""Utility functions and helpers."""

from .timing import timeit
from .logging import setup_logging

__all__ = [
    "timeit",
    "setup_logging",
]
