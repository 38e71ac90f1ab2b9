"""Tests for offset application and arc classification."""

from __future__ import annotations

from datetime import date

import pytest

from sunwait.astro.angles import days_since_2000
from sunwait.astro.offset import apply_offset, classify_arc, offset_rise_hour_utc, offset_set_hour_utc
from sunwait.astro.riseset import solve_sun_arc
from sunwait.contracts import ArcClass, SunArc, TwilightPreset


def test_apply_offset_narrows_both_ends() -> None:
    """A one-hour offset removes two hours from the arc."""
    arc = SunArc(diurnal_arc=12.0, transit_hour_utc=12.0)

    assert apply_offset(arc, 1.0) == pytest.approx(10.0)
    assert offset_rise_hour_utc(arc, 1.0) == pytest.approx(7.0)
    assert offset_set_hour_utc(arc, 1.0) == pytest.approx(17.0)


def test_apply_offset_clamps_to_day_bounds() -> None:
    """Results are clamped to [0, 24]."""
    arc = SunArc(diurnal_arc=12.0, transit_hour_utc=12.0)

    assert apply_offset(arc, 7.0) == 0.0
    assert apply_offset(arc, -7.0) == 24.0


def test_apply_offset_is_monotonic_for_positive_offsets() -> None:
    """Growing the offset never grows the arc."""
    arc = SunArc(diurnal_arc=15.3, transit_hour_utc=11.8)
    offsets = [step * 0.25 for step in range(40)]
    arcs = [apply_offset(arc, offset) for offset in offsets]

    assert all(later <= earlier for earlier, later in zip(arcs, arcs[1:]))


def test_polar_night_stays_polar_for_any_positive_offset() -> None:
    """A zero arc remains zero regardless of a non-negative offset."""
    arc = SunArc(diurnal_arc=0.0, transit_hour_utc=12.0)

    for offset in (0.0, 0.5, 3.0, 12.0):
        assert apply_offset(arc, offset) == 0.0


def test_rise_transit_set_ordering_for_normal_days() -> None:
    """Rise <= transit <= set for every offset up to half the arc."""
    arc = solve_sun_arc(days_since_2000(date(2024, 5, 1)), 48.0, 11.5, TwilightPreset.DAYLIGHT.value)
    assert classify_arc(arc.diurnal_arc) is ArcClass.NORMAL

    steps = 10
    for step in range(steps + 1):
        offset = arc.diurnal_arc / 2.0 * step / steps
        rise = offset_rise_hour_utc(arc, offset)
        sets = offset_set_hour_utc(arc, offset)
        assert rise <= arc.transit_hour_utc <= sets


def test_classify_arc_boundaries() -> None:
    """Clamp boundaries classify as polar conditions."""
    assert classify_arc(24.0) is ArcClass.MIDNIGHT_SUN
    assert classify_arc(0.0) is ArcClass.POLAR_NIGHT
    assert classify_arc(0.01) is ArcClass.NORMAL
    assert classify_arc(23.99) is ArcClass.NORMAL
