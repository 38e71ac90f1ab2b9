"""Event listing and per-day report."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timedelta

from sunwait.astro.angles import days_since_2000
from sunwait.astro.offset import apply_offset, classify_arc, offset_rise_hour_utc, offset_set_hour_utc
from sunwait.astro.riseset import solve_sun_arc
from sunwait.config import NO_OFFSET, SunwaitConfig
from sunwait.contracts import ArcClass, DayState, EventPair, PolarSentinel, SunArc, TwilightPreset
from sunwait.schedule.poller import poll_day_state
from sunwait.time.utcbias import day_start_utc


def event_pair(midnight: datetime, arc: SunArc, offset_hour: float) -> EventPair:
    """Convert an arc into absolute rise/set instants, or polar sentinels."""
    arc_class = classify_arc(apply_offset(arc, offset_hour))
    if arc_class is ArcClass.MIDNIGHT_SUN:
        return EventPair(PolarSentinel.POLAR_DAY, PolarSentinel.POLAR_DAY)
    if arc_class is ArcClass.POLAR_NIGHT:
        return EventPair(PolarSentinel.POLAR_NIGHT, PolarSentinel.POLAR_NIGHT)
    return EventPair(
        midnight + timedelta(hours=offset_rise_hour_utc(arc, offset_hour)),
        midnight + timedelta(hours=offset_set_hour_utc(arc, offset_hour)),
    )


def _solve_day(day: date, config: SunwaitConfig, twilight_angle: float | None = None) -> SunArc:
    angle = config.twilight_angle if twilight_angle is None else twilight_angle
    return solve_sun_arc(days_since_2000(day), config.latitude, config.longitude, angle)


def list_events(config: SunwaitConfig, days: int, start: date) -> list[EventPair]:
    """Return `days` consecutive offset-adjusted rise/set pairs from `start`."""
    if days < 0:
        raise ValueError("days must be non-negative")
    pairs: list[EventPair] = []
    for index in range(days):
        day = start + timedelta(days=index)
        pairs.append(event_pair(day_start_utc(day), _solve_day(day, config), config.offset_hour))
    return pairs


@dataclass(frozen=True, slots=True)
class TwilightSummary:
    """Rise/set and diurnal arc for one twilight angle."""

    twilight_angle: float
    events: EventPair
    diurnal_arc: float
    arc_class: ArcClass

    @property
    def preset(self) -> TwilightPreset | None:
        return TwilightPreset.for_angle(self.twilight_angle)


@dataclass(frozen=True, slots=True)
class DayReport:
    """Day length and twilight timings for one calendar day."""

    day: date
    latitude: float
    longitude: float
    transit_utc: datetime
    twilight_angle: float
    offset_hour: float
    target: TwilightSummary
    target_with_offset: TwilightSummary | None
    day_state: DayState
    presets: dict[TwilightPreset, TwilightSummary] = field(default_factory=dict)


def _summarize(midnight: datetime, arc: SunArc, angle: float, offset_hour: float) -> TwilightSummary:
    offset_arc = apply_offset(arc, offset_hour)
    return TwilightSummary(
        twilight_angle=angle,
        events=event_pair(midnight, arc, offset_hour),
        diurnal_arc=offset_arc,
        arc_class=classify_arc(offset_arc),
    )


def day_report(config: SunwaitConfig, day: date, now: datetime | None = None) -> DayReport:
    """Build the report for `day`, with the day state at `now` (default: current time)."""
    midnight = day_start_utc(day)
    target_arc = _solve_day(day, config)

    with_offset = None
    if config.offset_hour != NO_OFFSET:
        with_offset = _summarize(midnight, target_arc, config.twilight_angle, config.offset_hour)

    presets = {
        preset: _summarize(midnight, _solve_day(day, config, preset.value), preset.value, NO_OFFSET)
        for preset in TwilightPreset
    }

    return DayReport(
        day=day,
        latitude=config.latitude,
        longitude=config.longitude,
        transit_utc=midnight + timedelta(hours=target_arc.transit_hour_utc),
        twilight_angle=config.twilight_angle,
        offset_hour=config.offset_hour,
        target=_summarize(midnight, target_arc, config.twilight_angle, NO_OFFSET),
        target_with_offset=with_offset,
        day_state=poll_day_state(config, now),
        presets=presets,
    )
