import pytest
from argparse import Namespace
from pathlib import Path

from printsafe.config.loader import ConfigurationLoader, configure_from_cli
from printsafe.config.settings import LogLevel, OutputFormat
from printsafe.domain.exceptions import ConfigurationError


class TestConfigurationLoader:

    def test_load_defaults(self):
        """Test that load_defaults returns correct default settings."""
        settings = ConfigurationLoader().load_defaults()

        assert settings.simulation.initial_preset is None
        assert settings.simulation.snap_inputs is False
        assert settings.output.format == OutputFormat.TEXT
        assert settings.output.include_contributors is False
        assert settings.sweep.show_progress is True
        assert settings.sweep.pinned == {}
        assert settings.logging.level == LogLevel.INFO
        assert settings.logging.console_output is True
        assert settings.debug_mode is False

    def test_load_from_cli_args_empty_args(self):
        settings = ConfigurationLoader().load_from_cli_args(Namespace())
        assert settings.output.format == OutputFormat.TEXT
        assert settings.sweep.pinned == {}

    def test_simulation_args(self):
        args = Namespace(cmd="score", preset="Noisy", snap=True, blur=1.0)
        settings = ConfigurationLoader().load_from_cli_args(args)
        assert settings.simulation.initial_preset == "Noisy"
        assert settings.simulation.snap_inputs is True
        # controls only pin for sweeps
        assert settings.sweep.pinned == {}

    def test_output_args(self):
        args = Namespace(format="json", contributors=True)
        settings = ConfigurationLoader().load_from_cli_args(args)
        assert settings.output.format is OutputFormat.JSON
        assert settings.output.include_contributors is True

    def test_sweep_args(self):
        args = Namespace(cmd="sweep", blur=2.0, contrast=None, noise=10.0, no_progress=True)
        settings = ConfigurationLoader().load_from_cli_args(args)
        assert settings.sweep.pinned == {"blur": 2.0, "noise": 10.0}
        assert settings.sweep.show_progress is False

    def test_logging_args(self):
        args = Namespace(log_file="/tmp/printsafe.log", debug=True)
        settings = ConfigurationLoader().load_from_cli_args(args)
        assert settings.logging.file_path == Path("/tmp/printsafe.log")
        assert settings.logging.level == LogLevel.DEBUG
        assert settings.debug_mode is True

    def test_bad_format_wrapped(self):
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigurationLoader().load_from_cli_args(Namespace(format="xml"))
        assert "Failed to load configuration" in str(exc_info.value)


def test_configure_from_cli_validates():
    with pytest.raises(ConfigurationError):
        configure_from_cli(Namespace(preset="Matte"))


def test_configure_from_cli_returns_settings():
    settings = configure_from_cli(Namespace(cmd="score", preset="Blurred", format="text"))
    assert settings.simulation.initial_preset == "Blurred"
