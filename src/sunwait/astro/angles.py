"""Degree-based trigonometry and day counting helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime
from math import acos, asin, atan2, cos, degrees, radians, sin

DEGREES_PER_HOUR = 15.0
EPOCH_2000 = date(2000, 1, 1)


def revolution(angle_deg: float) -> float:
    """Normalize an angle to [0, 360)."""
    reduced = angle_deg % 360.0
    # A tiny negative input rounds up to exactly 360.0.
    return 0.0 if reduced >= 360.0 else reduced


def rev180(angle_deg: float) -> float:
    """Normalize an angle to (-180, 180]."""
    reduced = revolution(angle_deg)
    return reduced if reduced <= 180.0 else reduced - 360.0


def sind(angle_deg: float) -> float:
    return sin(radians(angle_deg))


def cosd(angle_deg: float) -> float:
    return cos(radians(angle_deg))


def asind(value: float) -> float:
    return degrees(asin(value))


def acosd(value: float) -> float:
    return degrees(acos(value))


def atan2d(y: float, x: float) -> float:
    return degrees(atan2(y, x))


def days_since_2000(day: date | datetime) -> int:
    """Return whole days between 2000-01-01 and the UTC calendar day of `day`.

    Aware datetimes are converted to UTC first; naive datetimes and plain
    dates are taken as already being UTC calendar days.
    """
    if isinstance(day, datetime):
        if day.tzinfo is not None:
            day = day.astimezone(UTC)
        day = day.date()
    return day.toordinal() - EPOCH_2000.toordinal()
