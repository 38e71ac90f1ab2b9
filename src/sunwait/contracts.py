"""Core data contracts for sunwait."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum, IntEnum, StrEnum
from math import isclose
from typing import NamedTuple


class TwilightPreset(float, Enum):
    """Named twilight angles in degrees (negative is below the horizon).

    Sunrise/set is taken when the Sun's upper limb is 50 arc minutes below the
    horizon, which accounts for standard refraction. The twilight presets use
    the Sun's center.
    """

    DAYLIGHT = -50.0 / 60.0
    CIVIL = -6.0
    NAUTICAL = -12.0
    ASTRONOMICAL = -18.0

    @property
    def label(self) -> str:
        """Lower-case preset name used in reports and the CLI."""
        return self.name.lower()

    @classmethod
    def for_angle(cls, angle_deg: float) -> TwilightPreset | None:
        """Return the preset matching `angle_deg`, or None for a custom angle."""
        for preset in cls:
            if isclose(angle_deg, preset.value, rel_tol=0.0, abs_tol=1e-9):
                return preset
        return None


def is_upper_limb_angle(angle_deg: float) -> bool:
    """True when the angle is the sunrise/set preset (upper-limb correction applies)."""
    return TwilightPreset.for_angle(angle_deg) is TwilightPreset.DAYLIGHT


class ArcClass(StrEnum):
    """Classification of a (possibly offset-adjusted) diurnal arc."""

    NORMAL = "normal"
    MIDNIGHT_SUN = "midnight_sun"
    POLAR_NIGHT = "polar_night"


class DayState(StrEnum):
    """Result of a day/night poll."""

    DAY = "day"
    NIGHT = "night"


class PolarSentinel(StrEnum):
    """Stand-ins for rise/set instants on days without a rise or set."""

    POLAR_DAY = "polar_day"
    POLAR_NIGHT = "polar_night"


class WaitStatus(StrEnum):
    """Outcome of a wait computation."""

    OK = "ok"
    ERROR = "error"


class NoEventReason(StrEnum):
    """Why a wait computation found nothing to wait for."""

    POLAR = "polar"
    EVENT_PASSED = "event_passed"


class EventKind(StrEnum):
    """Boundary of a daylight window."""

    RISE = "rise"
    SET = "set"


class RelativeDay(IntEnum):
    """Day of a three-day window relative to the target day."""

    YESTERDAY = -1
    TODAY = 0
    TOMORROW = 1


class ExitCode(IntEnum):
    """Process exit codes of the command-line interface."""

    OK = 0
    ERROR = 1
    DAY = 2
    NIGHT = 3


@dataclass(frozen=True, slots=True)
class SunArc:
    """One rise/set solution for a single UTC day.

    `diurnal_arc` is the number of hours the Sun spends above the target
    altitude, clamped to [0, 24]. `transit_hour_utc` is the hour of solar
    culmination on that day's UTC axis; rise and set are symmetric around it.
    """

    diurnal_arc: float
    transit_hour_utc: float

    def shifted(self, hours: float) -> SunArc:
        """Return the same arc with its transit moved by `hours`."""
        return SunArc(self.diurnal_arc, self.transit_hour_utc + hours)


EventTime = datetime | PolarSentinel


class EventPair(NamedTuple):
    """Rise and set instants of one day, or a polar sentinel in both slots."""

    rise: EventTime
    set: EventTime


@dataclass(frozen=True, slots=True)
class WaitResult:
    """Seconds until the requested event, or the reason there is none."""

    status: WaitStatus
    seconds: int = 0
    reason: NoEventReason | None = None
    day_state: DayState | None = None

    @property
    def ok(self) -> bool:
        """True when a positive wait duration was computed."""
        return self.status is WaitStatus.OK
