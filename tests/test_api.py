"""API tests for poll/wait/events/report endpoints."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sunwait.config import SunwaitConfig

NOON = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc).isoformat()


def _client() -> object:
    """Create FastAPI TestClient with optional dependency guards."""
    pytest.importorskip("fastapi")
    testclient_module = pytest.importorskip("fastapi.testclient")
    from sunwait.api.app import create_app

    return testclient_module.TestClient(create_app(SunwaitConfig.create(latitude=0.0, longitude=0.0)))


def test_poll_endpoint_reports_day() -> None:
    """`POST /poll` should classify equatorial noon as day."""
    client = _client()

    response = client.post("/poll", json={"time_utc": NOON})

    assert response.status_code == 200
    assert response.json() == {"state": "day"}


def test_poll_endpoint_accepts_location_override() -> None:
    """Request coordinates override the app configuration."""
    client = _client()

    response = client.post("/poll", json={"time_utc": NOON, "lat": 0.0, "lon": 150.0})

    assert response.json() == {"state": "night"}


def test_wait_endpoint_returns_seconds() -> None:
    """`POST /wait` should return the seconds until sunset."""
    client = _client()

    response = client.post("/wait", json={"time_utc": NOON, "sunrise": False})

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["day_state"] == "day"
    assert body["seconds"] == pytest.approx(22330, abs=180)


def test_wait_endpoint_reports_passed_event() -> None:
    """Sunrise-only at noon has nothing to wait for."""
    client = _client()

    body = client.post("/wait", json={"time_utc": NOON, "sunset": False}).json()

    assert body["status"] == "error"
    assert body["reason"] == "event_passed"
    assert body["seconds"] == 0


def test_events_endpoint_polar_day() -> None:
    """`POST /events` should return sentinels during midnight sun."""
    client = _client()

    response = client.post(
        "/events",
        json={"start_date": "2024-06-21", "days": 2, "lat": 70.0, "lon": 25.0},
    )

    assert response.status_code == 200
    events = response.json()["events"]
    assert events == [{"rise": "polar_day", "set": "polar_day"}] * 2


def test_events_endpoint_returns_instants() -> None:
    """Normal days return ISO instants."""
    client = _client()

    events = client.post("/events", json={"start_date": "2024-03-20"}).json()["events"]

    assert len(events) == 1
    assert events[0]["rise"].startswith("2024-03-20T06:0")


def test_report_endpoint() -> None:
    """`POST /report` should return every preset summary."""
    client = _client()

    response = client.post("/report", json={"day": "2024-03-20", "time_utc": NOON, "offset_hour": 1.0})

    assert response.status_code == 200
    body = response.json()
    assert body["day_state"] == "day"
    assert [item["preset"] for item in body["presets"]] == ["daylight", "civil", "nautical", "astronomical"]
    assert body["target_with_offset"]["diurnal_arc_hours"] == pytest.approx(
        body["target"]["diurnal_arc_hours"] - 2.0
    )


@pytest.mark.parametrize(
    ("path", "payload"),
    [
        ("/poll", {"lat": 95.0}),
        ("/events", {"start_date": "2024-03-20", "days": 0}),
        ("/wait", {"utc_bias_hours": 24.0}),
    ],
)
def test_invalid_requests_are_rejected(path: str, payload: dict[str, object]) -> None:
    """Out-of-range inputs fail validation."""
    client = _client()

    assert client.post(path, json=payload).status_code == 422
