"""Unit tests for data contracts."""

from __future__ import annotations

from sunwait.contracts import (
    EventPair,
    PolarSentinel,
    SunArc,
    TwilightPreset,
    WaitResult,
    WaitStatus,
    is_upper_limb_angle,
)


def test_twilight_preset_lookup() -> None:
    """Preset values map back to presets; other angles are custom."""
    assert TwilightPreset.for_angle(-6.0) is TwilightPreset.CIVIL
    assert TwilightPreset.for_angle(-50.0 / 60.0) is TwilightPreset.DAYLIGHT
    assert TwilightPreset.for_angle(-7.0) is None
    assert TwilightPreset.ASTRONOMICAL.label == "astronomical"


def test_upper_limb_only_for_daylight() -> None:
    """Only the sunrise/set preset uses the upper-limb correction."""
    assert is_upper_limb_angle(TwilightPreset.DAYLIGHT.value)
    assert not is_upper_limb_angle(TwilightPreset.CIVIL.value)
    assert not is_upper_limb_angle(-0.5)


def test_sun_arc_shift_keeps_arc() -> None:
    """Shifting moves the transit only."""
    arc = SunArc(diurnal_arc=10.0, transit_hour_utc=12.0).shifted(-24.0)

    assert arc == SunArc(diurnal_arc=10.0, transit_hour_utc=-12.0)


def test_event_pair_unpacks_like_a_tuple() -> None:
    """Event pairs behave as (rise, set) tuples."""
    rise, set_ = EventPair(PolarSentinel.POLAR_DAY, PolarSentinel.POLAR_DAY)

    assert rise is PolarSentinel.POLAR_DAY
    assert set_ == "polar_day"


def test_wait_result_ok_flag() -> None:
    """Only OK results report ok."""
    assert WaitResult(WaitStatus.OK, seconds=5).ok
    assert not WaitResult(WaitStatus.ERROR).ok
