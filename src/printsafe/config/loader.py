"""Configuration loading from CLI and programmatic sources."""

import logging
from pathlib import Path
from dataclasses import replace
from printsafe.config.settings import (
    Settings, SimulationSettings, OutputSettings, SweepSettings,
    LoggingSettings, LogLevel, OutputFormat
)
from printsafe.domain.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class ConfigurationLoader:
    """Loads configuration from CLI args and system defaults."""

    def load_from_cli_args(self, args) -> Settings:
        """Load configuration from CLI arguments."""
        try:
            settings = self.load_defaults()

            simulation_updates = {}
            if getattr(args, 'preset', None):
                simulation_updates['initial_preset'] = args.preset
            if getattr(args, 'snap', False):
                simulation_updates['snap_inputs'] = True

            output_updates = {}
            if getattr(args, 'format', None):
                output_updates['format'] = OutputFormat(args.format)
            if getattr(args, 'contributors', False):
                output_updates['include_contributors'] = True

            # Sweep: controls given on the command line are held fixed
            sweep_updates = {}
            if getattr(args, 'no_progress', False):
                sweep_updates['show_progress'] = False
            if getattr(args, 'cmd', None) == 'sweep':
                sweep_updates['pinned'] = {
                    name: float(getattr(args, name))
                    for name in ('blur', 'contrast', 'noise')
                    if getattr(args, name, None) is not None
                }

            logging_updates = {}
            if getattr(args, 'log_file', None):
                logging_updates['file_path'] = Path(args.log_file)
            if getattr(args, 'debug', False):
                logging_updates['level'] = LogLevel.DEBUG

            return replace(
                settings,
                simulation=replace(settings.simulation, **simulation_updates),
                output=replace(settings.output, **output_updates),
                sweep=replace(settings.sweep, **sweep_updates),
                logging=replace(settings.logging, **logging_updates),
                debug_mode=bool(getattr(args, 'debug', False)),
            )

        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Failed to load configuration from CLI arguments: {str(e)}"
            ) from e

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            simulation=SimulationSettings(
                initial_preset=None,
                snap_inputs=False,
            ),
            output=OutputSettings(
                format=OutputFormat.TEXT,
                include_contributors=False,
            ),
            sweep=SweepSettings(
                show_progress=True,
                pinned={},
            ),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                file_path=None,
                console_output=True,
                format_string="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            ),
            debug_mode=False,
        )

def configure_from_cli(args) -> Settings:
    """Main entry point to configure settings from CLI args."""
    loader = ConfigurationLoader()
    settings = loader.load_from_cli_args(args)
    settings.validate()
    return settings
