"""Immutable runtime configuration for sunwait computations."""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, replace

from sunwait.contracts import TwilightPreset
from sunwait.geo.coordinates import fix_latitude, fix_longitude, parse_bearing

logger = logging.getLogger(__name__)

DEFAULT_LATITUDE = 65.0
DEFAULT_LONGITUDE = 25.5
DEFAULT_TWILIGHT_ANGLE = TwilightPreset.DAYLIGHT.value
NO_OFFSET = 0.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_OFFSET_RE = re.compile(r"^\s*(?P<sign>[+-])?(?P<hours>\d+):(?P<minutes>[0-5]?\d)\s*$")


@dataclass(frozen=True)
class SunwaitConfig:
    """Location, twilight and output settings shared by every computation.

    Build instances with `create()` so coordinates are normalized and the
    twilight angle is validated.
    """

    latitude: float = DEFAULT_LATITUDE
    longitude: float = DEFAULT_LONGITUDE
    twilight_angle: float = DEFAULT_TWILIGHT_ANGLE
    offset_hour: float = NO_OFFSET
    utc_output: bool = False
    debug: bool = False
    twilight_angle_reset: bool = False

    @classmethod
    def create(
        cls,
        latitude: float = DEFAULT_LATITUDE,
        longitude: float = DEFAULT_LONGITUDE,
        twilight_angle: float = DEFAULT_TWILIGHT_ANGLE,
        offset_hour: float = NO_OFFSET,
        utc_output: bool = False,
        debug: bool = False,
    ) -> SunwaitConfig:
        """Create a normalized configuration.

        Latitude is folded into (-90, 90) and longitude into [0, 360). A
        twilight angle outside (-90, 90) is reset to the sunrise/set preset
        and `twilight_angle_reset` is set on the result.
        """
        angle, was_reset = validate_twilight_angle(twilight_angle)
        return cls(
            latitude=fix_latitude(latitude),
            longitude=fix_longitude(longitude),
            twilight_angle=angle,
            offset_hour=float(offset_hour),
            utc_output=utc_output,
            debug=debug,
            twilight_angle_reset=was_reset,
        )

    def with_coordinates(self, latitude: float, longitude: float) -> SunwaitConfig:
        """Return a copy with new (normalized) coordinates."""
        return replace(self, latitude=fix_latitude(latitude), longitude=fix_longitude(longitude))

    def with_twilight_angle(self, twilight_angle: float) -> SunwaitConfig:
        """Return a copy with a new (validated) twilight angle."""
        angle, was_reset = validate_twilight_angle(twilight_angle)
        return replace(self, twilight_angle=angle, twilight_angle_reset=was_reset)


def validate_twilight_angle(angle_deg: float) -> tuple[float, bool]:
    """Return `(angle, was_reset)`, resetting angles outside (-90, 90)."""
    if -90.0 < angle_deg < 90.0:
        return (float(angle_deg), False)
    logger.warning(
        "twilight angle must be between -90 and +90 (negative is below the horizon), got %f",
        angle_deg,
    )
    return (DEFAULT_TWILIGHT_ANGLE, True)


def parse_offset_hours(value: str) -> float:
    """Parse an offset given as decimal hours (`1.5`) or `[+-]HH:MM`."""
    match = _OFFSET_RE.match(value)
    if match is not None:
        hours = int(match.group("hours")) + int(match.group("minutes")) / 60.0
        return -hours if match.group("sign") == "-" else hours
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"invalid offset: {value!r}") from exc


def parse_twilight(value: str) -> float:
    """Parse a twilight preset name or a number of degrees."""
    name = value.strip().upper()
    if name in TwilightPreset.__members__:
        return TwilightPreset[name].value
    try:
        return float(value)
    except ValueError as exc:
        choices = ", ".join(preset.label for preset in TwilightPreset)
        raise ValueError(f"twilight must be one of: {choices}, or degrees") from exc


def _parse_axis(value: str, axis: str) -> float:
    """Parse a plain number or a compass bearing for one coordinate axis."""
    try:
        return float(value)
    except ValueError:
        pass
    bearing = parse_bearing(value)
    if bearing is None or bearing.axis != axis:
        raise ValueError(f"invalid {axis} bearing: {value!r}")
    return bearing.value_deg


def config_from_env(environ: Mapping[str, str] | None = None) -> SunwaitConfig:
    """
    Build SunwaitConfig from environment variables.

    Optional:
      - SUNWAIT_LATITUDE   (degrees, or a bearing such as 65N)
      - SUNWAIT_LONGITUDE  (degrees, or a bearing such as 25.5E)
      - SUNWAIT_TWILIGHT   (daylight, civil, nautical, astronomical, or degrees)
      - SUNWAIT_OFFSET     (hours, or [+-]HH:MM)
      - SUNWAIT_UTC        (1/true/yes/on)
      - SUNWAIT_DEBUG      (1/true/yes/on)
    """
    env = os.environ if environ is None else environ

    latitude = DEFAULT_LATITUDE
    longitude = DEFAULT_LONGITUDE
    twilight_angle = DEFAULT_TWILIGHT_ANGLE
    offset_hour = NO_OFFSET

    if raw := env.get("SUNWAIT_LATITUDE"):
        latitude = _parse_axis(raw, "lat")
    if raw := env.get("SUNWAIT_LONGITUDE"):
        longitude = _parse_axis(raw, "lon")
    if raw := env.get("SUNWAIT_TWILIGHT"):
        twilight_angle = parse_twilight(raw)
    if raw := env.get("SUNWAIT_OFFSET"):
        offset_hour = parse_offset_hours(raw)

    return SunwaitConfig.create(
        latitude=latitude,
        longitude=longitude,
        twilight_angle=twilight_angle,
        offset_hour=offset_hour,
        utc_output=env.get("SUNWAIT_UTC", "0").strip().lower() in _TRUE_VALUES,
        debug=env.get("SUNWAIT_DEBUG", "0").strip().lower() in _TRUE_VALUES,
    )
