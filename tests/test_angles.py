"""Tests for degree trigonometry and day counting."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from sunwait.astro.angles import acosd, atan2d, cosd, days_since_2000, rev180, revolution, sind


def test_revolution_maps_into_half_open_range() -> None:
    """Angles are reduced to [0, 360), including negatives and exact turns."""
    assert revolution(370.0) == pytest.approx(10.0)
    assert revolution(-10.0) == pytest.approx(350.0)
    assert revolution(720.0) == 0.0
    assert revolution(-1e-20) == 0.0


def test_rev180_picks_nearest_representation() -> None:
    """rev180 maps onto (-180, 180]."""
    assert rev180(190.0) == pytest.approx(-170.0)
    assert rev180(180.0) == pytest.approx(180.0)
    assert rev180(-180.0) == pytest.approx(180.0)
    assert rev180(-45.0) == pytest.approx(-45.0)


def test_degree_trigonometry_helpers() -> None:
    """Helpers take and return degrees."""
    assert sind(30.0) == pytest.approx(0.5)
    assert cosd(60.0) == pytest.approx(0.5)
    assert acosd(0.0) == pytest.approx(90.0)
    assert atan2d(1.0, -1.0) == pytest.approx(135.0)


def test_days_since_2000_counts_calendar_days() -> None:
    """Day count is zero on 2000-01-01 and counts leap days."""
    assert days_since_2000(date(2000, 1, 1)) == 0
    assert days_since_2000(date(2001, 1, 1)) == 366
    assert days_since_2000(date(2024, 3, 20)) == 8845
    assert days_since_2000(date(1999, 12, 31)) == -1


def test_days_since_2000_uses_utc_calendar_day_of_aware_datetimes() -> None:
    """An aware datetime is counted on its UTC date."""
    tz_plus_ten = timezone(timedelta(hours=10))
    local_morning = datetime(2024, 3, 21, 5, 0, tzinfo=tz_plus_ten)

    assert days_since_2000(local_morning) == days_since_2000(date(2024, 3, 20))
    assert days_since_2000(datetime(2024, 3, 21, 5, 0)) == days_since_2000(date(2024, 3, 21))
