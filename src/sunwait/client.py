"""`SunWait` handle bundling a configuration with the public operations."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from datetime import UTC, date, datetime

from sunwait.config import SunwaitConfig
from sunwait.contracts import DayState, EventPair, WaitResult, WaitStatus
from sunwait.geo.coordinates import parse_coordinates
from sunwait.schedule.events import DayReport, day_report, list_events
from sunwait.schedule.poller import poll_day_state
from sunwait.schedule.waiter import next_wait
from sunwait.time.utcbias import local_date, to_utc, utc_bias_hours

logger = logging.getLogger(__name__)


class SunWait:
    """Compute rise/set times, day state and waits for one location.

    The handle owns a single immutable `SunwaitConfig`. Setters replace it as
    a whole; call them during setup, before sharing the handle.
    """

    def __init__(self, config: SunwaitConfig | None = None) -> None:
        self.config = config or SunwaitConfig.create()
        if self.config.debug:
            logging.getLogger("sunwait").setLevel(logging.DEBUG)

    def set_coordinates(self, latitude: float, longitude: float) -> None:
        """Set coordinates in degrees (north and east positive)."""
        self.config = self.config.with_coordinates(latitude, longitude)

    def set_coordinates_from_bearings(self, first: str, second: str) -> bool:
        """Set coordinates from compass bearings such as `65N` and `25.5E`.

        Returns False, leaving the configuration unchanged, when either
        bearing cannot be parsed.
        """
        parsed = parse_coordinates(first, second)
        if parsed is None:
            logger.error("could not parse the coordinates %r, %r", first, second)
            return False
        self.set_coordinates(*parsed)
        return True

    def set_twilight_angle(self, angle_deg: float) -> bool:
        """Set the twilight angle; returns False if it was reset to the default."""
        self.config = self.config.with_twilight_angle(angle_deg)
        return not self.config.twilight_angle_reset

    def utc_bias_hours(self, day: date | None = None) -> float:
        """UTC bias used to pick the local target day (0 in UTC output mode)."""
        if self.config.utc_output:
            return 0.0
        return utc_bias_hours(day or datetime.now(UTC).astimezone().date())

    def today(self, now: datetime | None = None) -> date:
        """Target calendar day: the local date of `now`, or its UTC date in UTC mode."""
        current = to_utc(now) if now is not None else datetime.now(UTC)
        return local_date(current, self.utc_bias_hours(current.astimezone().date()))

    def poll(self, instant: datetime | None = None) -> DayState:
        return poll_day_state(self.config, instant)

    def wait(
        self,
        report_sunrise: bool = True,
        report_sunset: bool = True,
        now: datetime | None = None,
    ) -> WaitResult:
        """Compute the seconds until the next requested event without sleeping."""
        current = to_utc(now) if now is not None else datetime.now(UTC)
        bias = self.utc_bias_hours(current.astimezone().date())
        return next_wait(self.config, report_sunrise, report_sunset, now=current, utc_bias_hours=bias)

    def sleep_until_event(
        self,
        report_sunrise: bool = True,
        report_sunset: bool = True,
        sleep: Callable[[float], None] = time.sleep,
    ) -> WaitStatus:
        """Block until the next requested event; returns ERROR if there is none."""
        result = self.wait(report_sunrise, report_sunset)
        if result.ok:
            logger.debug("sleeping %d seconds", result.seconds)
            sleep(result.seconds)
        return result.status

    def list_events(self, days: int, start: date | None = None) -> list[EventPair]:
        """Rise/set pairs for `days` days from `start` (default: today)."""
        return list_events(self.config, days, start or self.today())

    def report(self, day: date | None = None, now: datetime | None = None) -> DayReport:
        return day_report(self.config, day or self.today(now), now)
