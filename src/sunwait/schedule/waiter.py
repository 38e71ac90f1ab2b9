"""Wait scheduler: seconds from now until the next rise and/or set.

The six boundaries of the three-day window (rise/set of yesterday, today and
tomorrow) are scanned in chronological order. The first boundary still in the
future fixes the current state: a pending rise means it is night, a pending
set means it is day. The boundary after it supplies the opposite event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sunwait.astro.angles import days_since_2000
from sunwait.config import SunwaitConfig
from sunwait.contracts import DayState, EventKind, NoEventReason, RelativeDay, WaitResult, WaitStatus
from sunwait.schedule.windows import DayWindow, three_day_windows
from sunwait.time.utcbias import day_start_utc, local_date, to_utc

logger = logging.getLogger(__name__)

# Single-event requests still fire when the event is this close, even if the
# opposite event comes first.
IMMINENT_EVENT_SECONDS = 6 * 60 * 60


@dataclass(frozen=True, slots=True)
class Boundary:
    """A rise or set of one day, as signed whole seconds from now."""

    kind: EventKind
    day: RelativeDay
    seconds: int


@dataclass(frozen=True, slots=True)
class NextEvents:
    """Next rise and set after scanning the boundaries.

    A value of 0 means no such event was found in the three-day window.
    """

    rise_seconds: int
    set_seconds: int
    day_state: DayState
    trigger: Boundary | None


def boundary_events(windows: tuple[DayWindow, ...], seconds_to_midnight: int) -> tuple[Boundary, ...]:
    """Expand windows into rise/set boundaries in chronological order.

    `seconds_to_midnight` is the signed distance from now to 00:00 UTC of the
    target day; window hours are counted from that instant.
    """
    boundaries: list[Boundary] = []
    for window in windows:
        boundaries.append(
            Boundary(EventKind.RISE, window.day, seconds_to_midnight + int(3600.0 * window.rise_hour_utc))
        )
        boundaries.append(
            Boundary(EventKind.SET, window.day, seconds_to_midnight + int(3600.0 * window.set_hour_utc))
        )
    return tuple(boundaries)


def next_events(boundaries: tuple[Boundary, ...]) -> NextEvents:
    """Pick the next rise/set pair from the first boundary still in the future."""
    for index, boundary in enumerate(boundaries):
        if boundary.seconds <= 0:
            continue
        following = boundaries[index + 1].seconds if index + 1 < len(boundaries) else 0
        if boundary.kind is EventKind.RISE:
            return NextEvents(boundary.seconds, following, DayState.NIGHT, boundary)
        return NextEvents(following, boundary.seconds, DayState.DAY, boundary)
    return NextEvents(0, 0, DayState.NIGHT, None)


def anchor_window(windows: tuple[DayWindow, ...], boundaries: tuple[Boundary, ...]) -> DayWindow:
    """Window whose set is the first one still pending; tomorrow when none is."""
    pending_sets = {
        boundary.day for boundary in boundaries if boundary.kind is EventKind.SET and boundary.seconds > 0
    }
    for window in windows[:-1]:
        if window.day in pending_sets:
            return window
    return windows[-1]


def select_wait_seconds(events: NextEvents, report_sunrise: bool, report_sunset: bool) -> int:
    """Apply the single-event rules; returns 0 when the event is not waited for.

    Sunrise only: wait when it is night, or when the rise is imminent.
    Sunset only: wait when it is day, or when the set is imminent.
    Both (or neither): wait for whichever comes first.
    """
    if report_sunrise and not report_sunset:
        if events.day_state is DayState.NIGHT or events.rise_seconds < IMMINENT_EVENT_SECONDS:
            return events.rise_seconds
        return 0
    if report_sunset and not report_sunrise:
        if events.day_state is DayState.DAY or events.set_seconds < IMMINENT_EVENT_SECONDS:
            return events.set_seconds
        return 0
    return min(events.rise_seconds, events.set_seconds)


def next_wait(
    config: SunwaitConfig,
    report_sunrise: bool = True,
    report_sunset: bool = True,
    now: datetime | None = None,
    utc_bias_hours: float = 0.0,
) -> WaitResult:
    """Compute the wait until the next requested event.

    Args:
        config: Location, twilight angle, offset and output mode.
        report_sunrise: Consider rise events.
        report_sunset: Consider set events.
        now: Current instant; naive values are taken as UTC. Defaults to now.
        utc_bias_hours: Local-minus-UTC hours selecting the local target day.
            Ignored when `config.utc_output` is set.

    Returns:
        `WaitResult` with the positive number of seconds to wait, or an
        ERROR result when a polar condition persists or the event has passed.
    """
    current = to_utc(now) if now is not None else datetime.now(UTC)
    bias = 0.0 if config.utc_output else utc_bias_hours

    target_midnight = day_start_utc(local_date(current, bias))
    seconds_to_midnight = int((target_midnight - current).total_seconds())

    windows = three_day_windows(days_since_2000(target_midnight), config)
    boundaries = boundary_events(windows, seconds_to_midnight)
    events = next_events(boundaries)
    logger.debug(
        "next rise in %ds, next set in %ds, currently %s (trigger=%s)",
        events.rise_seconds,
        events.set_seconds,
        events.day_state,
        events.trigger,
    )

    anchor = anchor_window(windows, boundaries)
    if anchor.is_polar:
        logger.debug("polar region or large offset: no %s event to wait for", anchor.arc_class)
        return WaitResult(WaitStatus.ERROR, reason=NoEventReason.POLAR, day_state=events.day_state)

    wait_seconds = select_wait_seconds(events, report_sunrise, report_sunset)
    if wait_seconds <= 0:
        logger.debug("event already passed, nothing to wait for")
        return WaitResult(WaitStatus.ERROR, reason=NoEventReason.EVENT_PASSED, day_state=events.day_state)

    return WaitResult(WaitStatus.OK, seconds=wait_seconds, day_state=events.day_state)
