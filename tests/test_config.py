import pytest

from zsw.cli import build_parser
from zsw.config import ConfigError, WeatherConfig
from zsw.errors import InvalidDistributionParameters


def test_defaults_are_identity():
    config = WeatherConfig()
    assert config.locomotive_multiplier == 1.0
    assert config.multiple_unit_multiplier == 1.0
    assert not config.modifies_acceleration
    assert not config.delays_entry
    assert not config.adjusts_departures
    assert config.max_wait_seconds == 360


def test_step_selection():
    assert WeatherConfig(multiplier=1.0).modifies_acceleration
    assert WeatherConfig(friction=0.3).modifies_acceleration
    assert WeatherConfig(delay_probability=0.0).delays_entry
    assert WeatherConfig(ambient_mean=0.0).delays_entry
    assert WeatherConfig(departures_delay_factor=1.2).adjusts_departures


def test_from_args_reads_cli_defaults():
    args = build_parser().parse_args(["modify", "Fahrplan", "-m", "0.8", "--deny-early", "--seed", "3"])
    config = WeatherConfig.from_args(args)
    assert config.multiplier == 0.8
    assert config.friction == 0.4
    assert config.mu_needed_friction == 0.25
    assert config.delay_amplitude == 360
    assert config.delay_lambda == 3
    assert config.ambient_deviation == 5
    assert config.deny_early is True
    assert config.departures_max_delay == 6
    assert config.seed == 3
    assert config.extension == "trn"


@pytest.mark.parametrize("kwargs", [
    {"delay_probability": 1.5},
    {"delay_probability": -0.1},
    {"friction": 0.0},
    {"mu_needed_friction": -1.0},
    {"departures_delay_factor": -2.0},
])
def test_validate_rejects(kwargs):
    with pytest.raises(ConfigError):
        WeatherConfig(**kwargs).validate()


def test_validate_deviation():
    with pytest.raises(InvalidDistributionParameters):
        WeatherConfig(ambient_mean=2.0, ambient_deviation=0.0).validate()
    WeatherConfig(ambient_deviation=0.0).validate()
