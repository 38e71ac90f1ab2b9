"""Day/night poller over the three-day window."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from sunwait.astro.angles import days_since_2000
from sunwait.config import SunwaitConfig
from sunwait.contracts import DayState
from sunwait.schedule.windows import three_day_windows
from sunwait.time.utcbias import hours_since, midnight_utc, to_utc

logger = logging.getLogger(__name__)


def poll_day_state(config: SunwaitConfig, instant: datetime | None = None) -> DayState:
    """Return DAY when `instant` lies inside any offset daylight window.

    Args:
        config: Location, twilight angle and offset.
        instant: Time to classify; naive values are taken as UTC. Defaults to now.

    Returns:
        `DayState.DAY` or `DayState.NIGHT`.
    """
    now = to_utc(instant) if instant is not None else datetime.now(UTC)
    now_hour = hours_since(midnight_utc(now), now)

    windows = three_day_windows(days_since_2000(now), config)
    for window in windows:
        logger.debug(
            "%s window rise=%f set=%f now=%f",
            window.day.name.lower(),
            window.rise_hour_utc,
            window.set_hour_utc,
            now_hour,
        )

    if any(window.contains(now_hour) for window in windows):
        return DayState.DAY
    return DayState.NIGHT
