from printsafe.domain.exceptions import (
    PrintSafeError,
    ConfigurationError,
    SimulationError,
    OutOfRangeInputError,
    UnknownPresetError,
)


def test_hierarchy():
    assert issubclass(ConfigurationError, PrintSafeError)
    assert issubclass(OutOfRangeInputError, SimulationError)
    assert issubclass(UnknownPresetError, SimulationError)


def test_add_context_and_suggestion_chain():
    err = SimulationError("bad", field_name="blur")
    assert err.add_context("k", 1) is err
    assert err.add_suggestion("try again") is err
    assert err.context == {"field_name": "blur", "k": 1}
    assert str(err) == "bad -- Suggestions: try again"
    assert err.error_code == "SIMULATION_ERROR"


def test_configuration_error_str_includes_field():
    err = ConfigurationError("oops", config_field="output.format")
    assert str(err) == "[output.format] oops"
    assert err.error_code == "CONFIGURATION_ERROR"


def test_out_of_range_error_context():
    err = OutOfRangeInputError("noise", 45.0, 0.0, 30.0)
    assert err.recoverable is True
    assert err.value == 45.0
    assert err.context["minimum"] == 0.0
    assert "outside [0.0, 30.0]" in str(err)


def test_unknown_preset_suggests_available():
    err = UnknownPresetError("Matte", available=["Noisy", "Blurred"])
    assert err.context["available_presets"] == ["Noisy", "Blurred"]
    assert str(err) == "Unknown preset: 'Matte' -- Suggestions: Use one of: Noisy, Blurred"


def test_custom_error_code():
    err = UnknownPresetError("x", error_code="CUSTOM")
    assert err.error_code == "CUSTOM"
