"""Yesterday/today/tomorrow daylight windows on one UTC hour axis.

Near the date line, or with a large offset, the daylight that covers a given
instant can belong to the neighbouring UTC day. Both the poller and the wait
scheduler therefore look at three consecutive days, with yesterday shifted
by -24 h and tomorrow by +24 h so all hours share today's midnight UTC.
"""

from __future__ import annotations

from dataclasses import dataclass

from sunwait.astro.offset import apply_offset, classify_arc, offset_rise_hour_utc, offset_set_hour_utc
from sunwait.astro.riseset import solve_sun_arc
from sunwait.config import SunwaitConfig
from sunwait.contracts import ArcClass, RelativeDay, SunArc


@dataclass(frozen=True, slots=True)
class DayWindow:
    """Offset-adjusted daylight window of one day of the three-day span."""

    day: RelativeDay
    arc: SunArc
    offset_arc: float
    rise_hour_utc: float
    set_hour_utc: float

    @property
    def arc_class(self) -> ArcClass:
        return classify_arc(self.offset_arc)

    @property
    def is_polar(self) -> bool:
        """True when the offset arc is at a clamp boundary (no rise or set)."""
        return self.arc_class is not ArcClass.NORMAL

    def contains(self, hour_utc: float) -> bool:
        return self.rise_hour_utc <= hour_utc <= self.set_hour_utc


def build_window(day: RelativeDay, arc: SunArc, offset_hour: float) -> DayWindow:
    """Shift `arc` onto today's axis and apply the user offset."""
    shifted = arc.shifted(24.0 * int(day))
    return DayWindow(
        day=day,
        arc=shifted,
        offset_arc=apply_offset(shifted, offset_hour),
        rise_hour_utc=offset_rise_hour_utc(shifted, offset_hour),
        set_hour_utc=offset_set_hour_utc(shifted, offset_hour),
    )


def three_day_windows(day_count: int, config: SunwaitConfig) -> tuple[DayWindow, DayWindow, DayWindow]:
    """Solve and window the days around `day_count`, in chronological order."""
    yesterday, today, tomorrow = (
        build_window(
            day,
            solve_sun_arc(
                day_count + int(day),
                config.latitude,
                config.longitude,
                config.twilight_angle,
            ),
            config.offset_hour,
        )
        for day in RelativeDay
    )
    return (yesterday, today, tomorrow)
