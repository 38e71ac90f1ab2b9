"""Tests for configuration building and environment loading."""

from __future__ import annotations

import pytest

from sunwait.config import (
    DEFAULT_LATITUDE,
    DEFAULT_LONGITUDE,
    SunwaitConfig,
    config_from_env,
    parse_offset_hours,
    parse_twilight,
)
from sunwait.contracts import TwilightPreset


def test_create_defaults() -> None:
    """Defaults are 65N 25.5E with the sunrise/set angle and no offset."""
    config = SunwaitConfig.create()

    assert config.latitude == DEFAULT_LATITUDE
    assert config.longitude == DEFAULT_LONGITUDE
    assert config.twilight_angle == TwilightPreset.DAYLIGHT.value
    assert config.offset_hour == 0.0
    assert config.twilight_angle_reset is False


def test_create_normalizes_coordinates() -> None:
    """West longitude is folded east; pole latitude is perturbed."""
    config = SunwaitConfig.create(latitude=90.0, longitude=-30.0)

    assert config.latitude < 90.0
    assert config.longitude == pytest.approx(330.0)


@pytest.mark.parametrize("angle", [-90.0, 90.0, 120.0])
def test_out_of_range_twilight_angle_is_reset(angle: float) -> None:
    """Angles outside (-90, 90) reset to the default and are flagged."""
    config = SunwaitConfig.create(twilight_angle=angle)

    assert config.twilight_angle == TwilightPreset.DAYLIGHT.value
    assert config.twilight_angle_reset is True


def test_with_twilight_angle_clears_reset_flag() -> None:
    """A valid angle after a reset clears the flag."""
    config = SunwaitConfig.create(twilight_angle=100.0).with_twilight_angle(-6.0)

    assert config.twilight_angle == -6.0
    assert config.twilight_angle_reset is False


def test_config_is_immutable() -> None:
    """Configuration values cannot be mutated in place."""
    config = SunwaitConfig.create()

    with pytest.raises(AttributeError):
        config.latitude = 10.0  # type: ignore[misc]


def test_parse_offset_hours_formats() -> None:
    """Offsets accept decimal hours and [+-]HH:MM."""
    assert parse_offset_hours("1.5") == 1.5
    assert parse_offset_hours("1:15") == pytest.approx(1.25)
    assert parse_offset_hours("-0:30") == pytest.approx(-0.5)
    with pytest.raises(ValueError, match="invalid offset"):
        parse_offset_hours("soon")


def test_parse_twilight_presets_and_degrees() -> None:
    """Preset names are case-insensitive; numbers are degrees."""
    assert parse_twilight("Civil") == -6.0
    assert parse_twilight("-9.5") == -9.5
    with pytest.raises(ValueError, match="twilight must be one of"):
        parse_twilight("dusk")


def test_config_from_env_reads_all_settings() -> None:
    """Environment values populate every configuration field."""
    config = config_from_env(
        {
            "SUNWAIT_LATITUDE": "36S",
            "SUNWAIT_LONGITUDE": "-3.5",
            "SUNWAIT_TWILIGHT": "nautical",
            "SUNWAIT_OFFSET": "-0:30",
            "SUNWAIT_UTC": "yes",
            "SUNWAIT_DEBUG": "1",
        }
    )

    assert config.latitude == pytest.approx(-36.0)
    assert config.longitude == pytest.approx(356.5)
    assert config.twilight_angle == -12.0
    assert config.offset_hour == pytest.approx(-0.5)
    assert config.utc_output is True
    assert config.debug is True


def test_config_from_env_defaults_when_empty() -> None:
    """An empty environment yields the defaults."""
    assert config_from_env({}) == SunwaitConfig.create()


def test_config_from_env_rejects_bearing_on_wrong_axis() -> None:
    """A longitude bearing is not accepted as a latitude."""
    with pytest.raises(ValueError, match="invalid lat bearing"):
        config_from_env({"SUNWAIT_LATITUDE": "25E"})
