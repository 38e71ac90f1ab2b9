"""Rise/set solver: diurnal arc and transit hour for one UTC day."""

from __future__ import annotations

import logging

from sunwait.astro.angles import DEGREES_PER_HOUR, acosd, cosd, rev180, sind
from sunwait.astro.solar import sidereal_time_at_utc0, solar_position
from sunwait.contracts import SunArc, is_upper_limb_angle

logger = logging.getLogger(__name__)


def effective_altitude(twilight_angle_deg: float, apparent_radius_deg: float) -> float:
    """Altitude the Sun's center must cross for the given twilight angle.

    Only the sunrise/set preset is measured against the upper limb; twilight
    presets and custom angles use the center of the disc.
    """
    if is_upper_limb_angle(twilight_angle_deg):
        return twilight_angle_deg - apparent_radius_deg
    return twilight_angle_deg


def diurnal_arc_hours(altitude_deg: float, latitude_deg: float, declination_deg: float) -> float:
    """Hours the Sun spends above `altitude_deg`, in [0, 24]."""
    cos_hour_angle = (sind(altitude_deg) - sind(latitude_deg) * sind(declination_deg)) / (
        cosd(latitude_deg) * cosd(declination_deg)
    )

    if abs(cos_hour_angle) < 1.0:
        arc = 2.0 * acosd(cos_hour_angle) / DEGREES_PER_HOUR
    elif cos_hour_angle >= 1.0:
        arc = 0.0
    else:
        arc = 24.0

    return min(24.0, max(0.0, arc))


def solve_sun_arc(
    day_count: int,
    latitude_deg: float,
    longitude_deg: float,
    twilight_angle_deg: float,
) -> SunArc:
    """Solve the diurnal arc and transit hour for one day.

    Args:
        day_count: Days since 2000-01-01 of the UTC day to solve.
        latitude_deg: Normalized latitude, never exactly +/-90.
        longitude_deg: East-positive longitude in [0, 360).
        twilight_angle_deg: Altitude defining the rise/set boundary.

    Returns:
        `SunArc` whose transit hour is measured from 00:00 UTC of the day.
    """
    sidereal_time = sidereal_time_at_utc0(day_count, longitude_deg)
    position = solar_position(day_count)

    # rev180 picks the transit nearest this day rather than one a sidereal day away.
    transit_hour = 12.0 - rev180(sidereal_time - position.right_ascension_deg) / DEGREES_PER_HOUR

    altitude = effective_altitude(twilight_angle_deg, position.apparent_radius_deg)
    arc = diurnal_arc_hours(altitude, latitude_deg, position.declination_deg)

    logger.debug(
        "day_count=%d transit_hour_utc=%f diurnal_arc=%f", day_count, transit_hour, arc
    )
    if arc >= 24.0:
        logger.debug("no rise or set: midnight sun")
    elif arc <= 0.0:
        logger.debug("no rise or set: polar night")

    return SunArc(diurnal_arc=arc, transit_hour_utc=transit_hour)
