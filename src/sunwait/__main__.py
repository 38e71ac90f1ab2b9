"""Command-line entrypoint for sunwait."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import date, datetime

from sunwait.client import SunWait
from sunwait.config import config_from_env, parse_offset_hours
from sunwait.contracts import DayState, EventTime, ExitCode, PolarSentinel, TwilightPreset, WaitStatus
from sunwait.schedule.events import DayReport, TwilightSummary
from sunwait.time.utcbias import to_utc

__version__ = "0.1.0"


def _parse_iso_datetime(value: str) -> datetime:
    """Parse ISO datetime string and normalize to aware UTC."""
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid datetime: {value}") from exc
    return to_utc(parsed)


def _parse_iso_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid date: {value}") from exc


def _parse_offset(value: str) -> float:
    try:
        return parse_offset_hours(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def format_hours(hours: float) -> str:
    """Render a duration in hours as `HH:MM`, truncating toward zero."""
    sign = "-" if hours < 0 else ""
    total_minutes = int(abs(hours) * 60.0)
    return f"{sign}{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def format_event(value: EventTime, utc: bool) -> str:
    """Render one event as `HH:MM`, or `--:--` for a polar sentinel."""
    if isinstance(value, PolarSentinel):
        return "--:--"
    shown = value if utc else value.astimezone()
    return shown.strftime("%H:%M")


def _polar_suffix(summary: TwilightSummary) -> str:
    rise = summary.events.rise
    if rise is PolarSentinel.POLAR_DAY:
        return " (Midnight sun)"
    if rise is PolarSentinel.POLAR_NIGHT:
        return " (Polar night)"
    return ""


def _format_summary(summary: TwilightSummary, utc: bool, separator: str = " to ") -> str:
    rise, set_ = summary.events
    return f"{format_event(rise, utc)}{separator}{format_event(set_, utc)}{_polar_suffix(summary)}"


def render_report(report: DayReport, utc: bool) -> str:
    """Render a day report as aligned text lines."""
    preset = TwilightPreset.for_angle(report.twilight_angle)
    angle_name = preset.label if preset is not None else "custom angle"
    transit = report.transit_utc if utc else report.transit_utc.astimezone()

    lines = [
        "",
        "Target Information ...",
        "",
        f"                   Location: {report.latitude:10.6f}N, {report.longitude:10.6f}E",
        f"                       Date: {report.day.strftime('%d-%b-%Y')}",
        f"                   Timezone: {'UTC' if utc else transit.tzname()}",
        f"   Sun directly north/south: {transit.strftime('%H:%M')}",
    ]
    if report.target_with_offset is not None:
        lines.append(f"                     Offset: {format_hours(report.offset_hour)} hours")
    lines.append(f"             Twilight angle: {report.twilight_angle:5.2f} degrees ({angle_name})")
    lines.append(f"          Day with twilight: {_format_summary(report.target, utc)}")
    if report.target_with_offset is not None:
        lines.append(f" Day with twilight & offset: {_format_summary(report.target_with_offset, utc)}")
    state = "Day (or twilight)" if report.day_state is DayState.DAY else "Night"
    lines.append(f"                      It is: {state}")

    labels = {
        TwilightPreset.DAYLIGHT: (" Times ...         Daylight", " Duration ...    Day length"),
        TwilightPreset.CIVIL: ("        with Civil twilight", "        with civil twilight"),
        TwilightPreset.NAUTICAL: ("     with Nautical twilight", "     with nautical twilight"),
        TwilightPreset.ASTRONOMICAL: (" with Astronomical twilight", " with astronomical twilight"),
    }
    lines += ["", "General Information (no offset) ...", ""]
    for key, summary in report.presets.items():
        lines.append(f"{labels[key][0]}: {_format_summary(summary, utc)}")
    lines.append("")
    for key, summary in report.presets.items():
        lines.append(f"{labels[key][1]}: {format_hours(summary.diurnal_arc)} hours")
    lines.append("")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog="sunwait",
        description="Sunrise, sunset and twilight times, day/night polling and waiting.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("--lat", help="Latitude bearing, e.g. 65N or 36.5S.")
    parser.add_argument("--lon", help="Longitude bearing, e.g. 25.5E or 3.2W.")
    angle = parser.add_mutually_exclusive_group()
    angle.add_argument(
        "--twilight",
        choices=[preset.label for preset in TwilightPreset],
        help="Twilight preset (default: daylight).",
    )
    angle.add_argument("--angle", type=float, help="Custom twilight angle in degrees.")
    parser.add_argument("--offset", type=_parse_offset, help="Offset in hours or [+-]HH:MM.")
    parser.add_argument("--utc", action="store_true", help="Report and select days in UTC.")
    parser.add_argument("--debug", action="store_true", help="Print debug trace.")

    subparsers = parser.add_subparsers(dest="command")

    poll = subparsers.add_parser("poll", help="Print DAY or NIGHT.")
    poll.add_argument("--time", type=_parse_iso_datetime, default=None)

    wait = subparsers.add_parser("wait", help="Wait for the next sunrise and/or sunset.")
    wait.add_argument("--sunrise", action="store_true")
    wait.add_argument("--sunset", action="store_true")
    wait.add_argument("--no-sleep", action="store_true", help="Print the wait in seconds instead.")

    listing = subparsers.add_parser("list", help="List rise/set times for a number of days.")
    listing.add_argument("--days", type=int, default=1)
    listing.add_argument("--date", type=_parse_iso_date, default=None)

    report = subparsers.add_parser("report", help="Print day length and twilight report.")
    report.add_argument("--date", type=_parse_iso_date, default=None)

    return parser


def _build_client(args: argparse.Namespace) -> SunWait | None:
    """Apply environment defaults, then command-line overrides."""
    config = config_from_env()
    config = replace(
        config,
        offset_hour=args.offset if args.offset is not None else config.offset_hour,
        utc_output=args.utc or config.utc_output,
        debug=args.debug or config.debug,
    )
    client = SunWait(config)

    if args.lat or args.lon:
        if not (args.lat and args.lon):
            print("Error: both --lat and --lon are required.")
            return None
        if not client.set_coordinates_from_bearings(args.lat, args.lon):
            print("Error: couldn't parse the coordinates.")
            return None

    if args.twilight is not None:
        client.set_twilight_angle(TwilightPreset[args.twilight.upper()].value)
    elif args.angle is not None and not client.set_twilight_angle(args.angle):
        print(f"Error: twilight angle must be between -90 and +90, got {args.angle}")
    return client


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="Debug: %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")

    client = _build_client(args)
    if client is None:
        return ExitCode.ERROR
    utc = client.config.utc_output

    if args.command == "poll":
        state = client.poll(args.time)
        print(state.value.upper())
        return ExitCode.DAY if state is DayState.DAY else ExitCode.NIGHT

    if args.command == "wait":
        report_sunrise = args.sunrise or not args.sunset
        report_sunset = args.sunset or not args.sunrise
        if args.no_sleep:
            result = client.wait(report_sunrise, report_sunset)
            if not result.ok:
                print(f"ERROR ({result.reason})")
                return ExitCode.ERROR
            print(result.seconds)
            return ExitCode.OK
        status = client.sleep_until_event(report_sunrise, report_sunset)
        return ExitCode.OK if status is WaitStatus.OK else ExitCode.ERROR

    if args.command == "list":
        for pair in client.list_events(args.days, args.date):
            print(f"{format_event(pair.rise, utc)}, {format_event(pair.set, utc)}")
        return ExitCode.OK

    if args.command == "report":
        print(render_report(client.report(args.date), utc))
        return ExitCode.OK

    parser.print_help()
    return ExitCode.OK


if __name__ == "__main__":
    raise SystemExit(main())
