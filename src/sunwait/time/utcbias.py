"""UTC bias and midnight-UTC helpers.

Rise/set hours are always computed on a UTC axis, while the day the user asks
about is a local calendar day. These helpers bridge the two using a single
numeric UTC bias (local time minus UTC, in hours).
"""

from __future__ import annotations

import logging
from datetime import UTC, date, datetime, time, timedelta, tzinfo

logger = logging.getLogger(__name__)

MAX_UTC_BIAS_HOURS = 24.0


def to_utc(dt: datetime) -> datetime:
    """Convert datetime to timezone-aware UTC, assuming UTC for naive values."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def utc_bias_hours(day: date, tz: tzinfo | None = None) -> float:
    """Return local-minus-UTC hours for the local calendar `day`.

    The day is evaluated at local noon, away from the early-morning hours in
    which daylight-saving transitions happen. `tz=None` uses the system's
    local timezone. The day difference between the local and UTC readings is
    taken from the year and day-of-year fields so that the bias stays correct
    when the two readings straddle a year boundary.

    A bias that cannot be determined, or one that is not strictly inside
    (-24, 24) hours, degrades to 0.0.
    """
    try:
        if tz is None:
            local_noon = datetime.combine(day, time(12, 0)).astimezone()
        else:
            local_noon = datetime.combine(day, time(12, 0), tzinfo=tz)
        utc_noon = local_noon.astimezone(UTC)
    except (OverflowError, OSError, ValueError) as exc:
        logger.warning("could not determine UTC bias for %s: %s", day, exc)
        return 0.0

    bias = (local_noon.hour - utc_noon.hour) + (local_noon.minute - utc_noon.minute) / 60.0

    if local_noon.year > utc_noon.year:
        bias += 24.0
    elif local_noon.year < utc_noon.year:
        bias -= 24.0
    else:
        bias += (local_noon.timetuple().tm_yday - utc_noon.timetuple().tm_yday) * 24.0

    if abs(bias) >= MAX_UTC_BIAS_HOURS:
        logger.warning("UTC bias %f hours for %s is out of range; using 0", bias, day)
        return 0.0
    return bias


def midnight_utc(instant: datetime) -> datetime:
    """Return 00:00 UTC of the UTC calendar day containing `instant`."""
    return to_utc(instant).replace(hour=0, minute=0, second=0, microsecond=0)


def day_start_utc(day: date) -> datetime:
    """Return 00:00 UTC of the given calendar day."""
    return datetime.combine(day, time(0, 0), tzinfo=UTC)


def local_date(instant: datetime, bias_hours: float) -> date:
    """Return the local calendar day of `instant` for a numeric UTC bias."""
    return (to_utc(instant) + timedelta(hours=bias_hours)).date()


def hours_since(origin: datetime, instant: datetime) -> float:
    """Hours elapsed from `origin` to `instant` (negative when earlier)."""
    return (to_utc(instant) - to_utc(origin)).total_seconds() / 3600.0
