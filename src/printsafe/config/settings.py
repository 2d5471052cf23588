"""Core configuration settings for printsafe."""

import logging
from pathlib import Path
from typing import Optional, Dict
from dataclasses import dataclass, field
from enum import Enum

from printsafe.domain.exceptions import ConfigurationError
from printsafe.simulation.presets import PRESETS
from printsafe.simulation.state import CONTROL_RANGES

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

class OutputFormat(Enum):
    """Supported output formats."""
    TEXT = "text"
    JSON = "json"

@dataclass
class SimulationSettings:
    """Simulation-related configuration."""
    initial_preset: Optional[str] = None
    snap_inputs: bool = False

    def validate(self) -> None:
        """Validate simulation settings."""
        if self.initial_preset is not None and self.initial_preset not in PRESETS:
            raise ConfigurationError(
                f"Unknown preset: {self.initial_preset}",
                config_field="simulation.initial_preset"
            ).add_suggestion(f"Use one of: {', '.join(PRESETS)}")

@dataclass
class OutputSettings:
    """Output-related configuration."""
    format: OutputFormat = OutputFormat.TEXT
    include_contributors: bool = False

    def validate(self) -> None:
        """Validate output settings."""
        if not isinstance(self.format, OutputFormat):
            raise ConfigurationError(
                f"Invalid output format: {self.format}",
                config_field="output.format"
            ).add_suggestion(f"Use one of: {[f.value for f in OutputFormat]}")

@dataclass
class SweepSettings:
    """Grid sweep configuration."""
    show_progress: bool = True
    pinned: Dict[str, float] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate sweep settings."""
        unknown = sorted(set(self.pinned) - set(CONTROL_RANGES))
        if unknown:
            raise ConfigurationError(
                f"Unknown controls pinned: {', '.join(unknown)}",
                config_field="sweep.pinned"
            ).add_suggestion(f"Pin only: {', '.join(CONTROL_RANGES)}")

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    file_path: Optional[Path] = None
    console_output: bool = True
    format_string: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    def validate(self) -> None:
        """Validate logging settings."""
        if self.file_path and not self.file_path.parent.exists():
            raise ConfigurationError(
                f"Log directory does not exist: {self.file_path.parent}",
                config_field="logging.file_path"
            ).add_suggestion("Create the directory or use console logging only")

@dataclass
class Settings:
    """Main configuration settings for printsafe."""

    simulation: SimulationSettings = field(default_factory=SimulationSettings)
    output: OutputSettings = field(default_factory=OutputSettings)
    sweep: SweepSettings = field(default_factory=SweepSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    # Debug/development settings
    debug_mode: bool = False

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.simulation.validate()
            self.output.validate()
            self.sweep.validate()
            self.logging.validate()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'simulation': {
                'initial_preset': self.simulation.initial_preset,
                'snap_inputs': self.simulation.snap_inputs,
            },
            'output': {
                'format': self.output.format.value,
                'include_contributors': self.output.include_contributors,
            },
            'sweep': {
                'show_progress': self.sweep.show_progress,
                'pinned': dict(self.sweep.pinned),
            },
            'logging': {
                'level': self.logging.level.value,
                'file_path': str(self.logging.file_path) if self.logging.file_path else None,
                'format_string': self.logging.format_string,
            },
            'runtime': {
                'debug_mode': self.debug_mode,
            }
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings instance."""
    global _settings
    if _settings is None:
        raise ConfigurationError(
            "Settings not initialized. Call set_settings() first."
        ).add_suggestion("Initialize settings in your application startup")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()  # Validate before setting
    _settings = settings
    logger.info("Configuration loaded and validated successfully")
