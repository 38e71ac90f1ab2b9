"""FastAPI app exposing day/night polling, waits, event listing and reports."""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone

from fastapi import FastAPI
from pydantic import BaseModel, Field

from sunwait.config import SunwaitConfig, config_from_env, validate_twilight_angle
from sunwait.contracts import NoEventReason, PolarSentinel, WaitStatus
from sunwait.geo.coordinates import fix_latitude, fix_longitude
from sunwait.schedule.events import TwilightSummary, day_report, list_events
from sunwait.schedule.poller import poll_day_state
from sunwait.schedule.waiter import next_wait


class LocationRequest(BaseModel):
    """Optional per-request overrides of the app configuration."""

    lat: float | None = Field(default=None, ge=-90.0, le=90.0)
    lon: float | None = Field(default=None, ge=-180.0, le=360.0)
    twilight_angle: float | None = Field(default=None, gt=-90.0, lt=90.0)
    offset_hour: float | None = Field(default=None, ge=-12.0, le=12.0)

    def apply(self, base: SunwaitConfig) -> SunwaitConfig:
        """Return `base` with the request overrides applied."""
        config = base
        if self.lat is not None:
            config = replace(config, latitude=fix_latitude(self.lat))
        if self.lon is not None:
            config = replace(config, longitude=fix_longitude(self.lon))
        if self.twilight_angle is not None:
            angle, _ = validate_twilight_angle(self.twilight_angle)
            config = replace(config, twilight_angle=angle)
        if self.offset_hour is not None:
            config = replace(config, offset_hour=self.offset_hour)
        return config


class PollRequest(LocationRequest):
    """Request schema for a day/night poll."""

    time_utc: datetime | None = None


class PollResponse(BaseModel):
    state: str


class WaitRequest(LocationRequest):
    """Request schema for a wait computation."""

    time_utc: datetime | None = None
    sunrise: bool = True
    sunset: bool = True
    utc_bias_hours: float = Field(default=0.0, gt=-24.0, lt=24.0)


class WaitResponse(BaseModel):
    status: WaitStatus
    seconds: int
    reason: NoEventReason | None = None
    day_state: str | None = None


class EventsRequest(LocationRequest):
    """Request schema for listing rise/set events."""

    start_date: date
    days: int = Field(default=1, ge=1, le=366)


class EventPairResponse(BaseModel):
    """Rise/set instants, or `polar_day` / `polar_night` in both fields."""

    rise: datetime | PolarSentinel
    set: datetime | PolarSentinel


class EventsResponse(BaseModel):
    events: list[EventPairResponse]


class ReportRequest(LocationRequest):
    """Request schema for a day report."""

    day: date
    time_utc: datetime | None = None


class TwilightSummaryResponse(BaseModel):
    twilight_angle: float
    preset: str | None
    rise: datetime | PolarSentinel
    set: datetime | PolarSentinel
    diurnal_arc_hours: float
    arc_class: str


class ReportResponse(BaseModel):
    day: date
    latitude: float
    longitude: float
    transit_utc: datetime
    twilight_angle: float
    offset_hour: float
    day_state: str
    target: TwilightSummaryResponse
    target_with_offset: TwilightSummaryResponse | None
    presets: list[TwilightSummaryResponse]


def _normalize_time(dt: datetime | None) -> datetime:
    """Normalize optional datetime to timezone-aware UTC value."""
    if dt is None:
        return datetime.now(timezone.utc)
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _summary_response(summary: TwilightSummary) -> TwilightSummaryResponse:
    preset = summary.preset
    return TwilightSummaryResponse(
        twilight_angle=summary.twilight_angle,
        preset=preset.label if preset is not None else None,
        rise=summary.events.rise,
        set=summary.events.set,
        diurnal_arc_hours=summary.diurnal_arc,
        arc_class=summary.arc_class.value,
    )


def create_app(config: SunwaitConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI app."""
    app = FastAPI(title="Sunwait API", version="0.1.0")
    base_config = config or config_from_env()
    app.state.config = base_config

    @app.post("/poll", response_model=PollResponse)
    def post_poll(payload: PollRequest) -> PollResponse:
        """Report whether it is day or night at the given instant."""
        state = poll_day_state(payload.apply(base_config), _normalize_time(payload.time_utc))
        return PollResponse(state=state.value)

    @app.post("/wait", response_model=WaitResponse)
    def post_wait(payload: WaitRequest) -> WaitResponse:
        """Compute the seconds until the next requested rise and/or set."""
        result = next_wait(
            payload.apply(base_config),
            report_sunrise=payload.sunrise,
            report_sunset=payload.sunset,
            now=_normalize_time(payload.time_utc),
            utc_bias_hours=payload.utc_bias_hours,
        )
        return WaitResponse(
            status=result.status,
            seconds=result.seconds,
            reason=result.reason,
            day_state=result.day_state.value if result.day_state else None,
        )

    @app.post("/events", response_model=EventsResponse)
    def post_events(payload: EventsRequest) -> EventsResponse:
        """List offset-adjusted rise/set pairs for consecutive days."""
        pairs = list_events(payload.apply(base_config), payload.days, payload.start_date)
        return EventsResponse(
            events=[EventPairResponse(rise=pair.rise, set=pair.set) for pair in pairs]
        )

    @app.post("/report", response_model=ReportResponse)
    def post_report(payload: ReportRequest) -> ReportResponse:
        """Day length and twilight timings for one day."""
        report = day_report(payload.apply(base_config), payload.day, _normalize_time(payload.time_utc))
        return ReportResponse(
            day=report.day,
            latitude=report.latitude,
            longitude=report.longitude,
            transit_utc=report.transit_utc,
            twilight_angle=report.twilight_angle,
            offset_hour=report.offset_hour,
            day_state=report.day_state.value,
            target=_summary_response(report.target),
            target_with_offset=(
                _summary_response(report.target_with_offset)
                if report.target_with_offset is not None
                else None
            ),
            presets=[_summary_response(summary) for summary in report.presets.values()],
        )

    return app


app = create_app()
