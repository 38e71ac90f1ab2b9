"""Solar position helpers.

This module provides a low-precision orbital approximation of the Sun's
apparent position, good to about one minute of time within a few centuries
of 2000. All inputs are day counts from `angles.days_since_2000`.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import degrees, sqrt

from sunwait.astro.angles import atan2d, cosd, revolution, sind

SOLAR_RADIUS_AT_1AU_DEG = 0.2666

_MEAN_ANOMALY_EPOCH_DEG = 356.0470
_MEAN_ANOMALY_RATE_DEG = 0.9856002585
_PERIHELION_EPOCH_DEG = 282.9404
_PERIHELION_RATE_DEG = 4.70935e-5


@dataclass(frozen=True, slots=True)
class SolarPosition:
    """Equatorial position of the Sun for one day count."""

    right_ascension_deg: float
    declination_deg: float
    distance_au: float

    @property
    def apparent_radius_deg(self) -> float:
        """Apparent angular radius of the solar disc."""
        return SOLAR_RADIUS_AT_1AU_DEG / self.distance_au


def sun_ecliptic_position(day_count: float) -> tuple[float, float]:
    """Compute the Sun's true ecliptic longitude and distance.

    Args:
        day_count: Days since 2000-01-01.

    Returns:
        Tuple of `(longitude_deg, distance_au)` with the longitude in [0, 360).
        The ecliptic latitude is always close to zero and is not returned.
    """
    mean_anomaly = revolution(_MEAN_ANOMALY_EPOCH_DEG + _MEAN_ANOMALY_RATE_DEG * day_count)
    perihelion = _PERIHELION_EPOCH_DEG + _PERIHELION_RATE_DEG * day_count
    eccentricity = 0.016709 - 1.151e-9 * day_count

    # One-term Kepler solution, no iteration.
    eccentric_anomaly = mean_anomaly + eccentricity * degrees(1.0) * sind(
        mean_anomaly
    ) * (1.0 + eccentricity * cosd(mean_anomaly))

    x = cosd(eccentric_anomaly) - eccentricity
    y = sqrt(1.0 - eccentricity * eccentricity) * sind(eccentric_anomaly)
    distance_au = sqrt(x * x + y * y)
    true_anomaly = atan2d(y, x)

    return (revolution(true_anomaly + perihelion), distance_au)


def obliquity_of_ecliptic(day_count: float) -> float:
    """Inclination of Earth's axis in degrees."""
    return 23.4393 - 3.563e-7 * day_count


def solar_position(day_count: float) -> SolarPosition:
    """Compute right ascension, declination and distance of the Sun."""
    longitude_deg, distance_au = sun_ecliptic_position(day_count)

    xs = distance_au * cosd(longitude_deg)
    ys = distance_au * sind(longitude_deg)

    obliquity = obliquity_of_ecliptic(day_count)
    xe = xs
    ye = ys * cosd(obliquity)
    ze = ys * sind(obliquity)

    return SolarPosition(
        right_ascension_deg=revolution(atan2d(ye, xe)),
        declination_deg=atan2d(ze, sqrt(xe * xe + ye * ye)),
        distance_au=distance_au,
    )


def gmst0(day_count: float) -> float:
    """Greenwich mean sidereal time at 0h UT, in degrees.

    Equal to the Sun's mean longitude plus 180 degrees, ignoring aberration.
    """
    return revolution(
        (180.0 + _MEAN_ANOMALY_EPOCH_DEG + _PERIHELION_EPOCH_DEG)
        + (_MEAN_ANOMALY_RATE_DEG + _PERIHELION_RATE_DEG) * day_count
    )


def sidereal_time_at_utc0(day_count: float, longitude_deg: float) -> float:
    """Local sidereal time at 00:00 UTC for an east-positive longitude.

    0h UTC lies 180 degrees from the Greenwich noon meridian.
    """
    return revolution(gmst0(day_count) + 180.0 + longitude_deg)
