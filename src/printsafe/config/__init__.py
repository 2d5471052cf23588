"""Configuration management."""

from .settings import Settings, get_settings, set_settings
from .loader import ConfigurationLoader, configure_from_cli

__all__ = [
    "Settings",
    "get_settings",
    "set_settings",
    "ConfigurationLoader",
    "configure_from_cli",
]
