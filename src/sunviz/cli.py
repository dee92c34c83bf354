# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for sun position and daily solar events.

Usage:
    # Day events in local mean solar time
    sunviz --lat 40.7128 --lon -74.0060 --date 2024-06-21

    # Civil time zone, sun position and shadow at a local time
    sunviz --lat 40.7128 --lon -74.0060 --date 2024-06-21 \\
        --tz=-04:00 --time 18:30 --height 10

    # Export the sun path (CSV) or the full report (JSON)
    sunviz --lat 48.8566 --lon 2.3522 --date 2024-12-21 --tz +01:00 \\
        --interval 15 --visible-only --horizon 0 --export-csv path.csv
    sunviz --lat 78.22 --lon 15.65 --date 2024-06-21 --export-json report.json
"""
import argparse
import logging
import math
import re
import sys
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from sunviz.domain.day_times import SolarEvent, TimeWindow
from sunviz.domain.observation import GeoCoordinate
from sunviz.domain.report import SunReport, build_sun_report
from sunviz.domain.shadow import compute_shadow, validate_object_height
from sunviz.domain.sun_path import DEFAULT_SAMPLE_INTERVAL_MIN, SunPathOptions
from sunviz.domain.time_systems import mean_solar_timezone
from sunviz.adapters.csv_exporter import CsvSunPathExporter
from sunviz.adapters.json_exporter import JsonSunReportExporter

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^(?:UTC)?([+-])(\d{2}):?(\d{2})$", re.IGNORECASE)


def parse_timezone(text: str | None) -> tzinfo | None:
    """
    Parse a --tz value.

    Accepts 'UTC'/'Z', a fixed offset such as '+05:30', '-0400' or
    'UTC-04:00', or an IANA zone name. None means local mean solar time.
    A bare negative offset must be attached to the flag on the command
    line (--tz=-04:00); argparse reads a separate -04:00 as an option.

    Raises:
        ValueError: If the zone cannot be resolved.
    """
    if text is None:
        return None
    if text.upper() in ('UTC', 'Z'):
        return timezone.utc
    match = _OFFSET_RE.match(text)
    if match:
        sign, hours, minutes = match.groups()
        offset = timedelta(hours=int(hours), minutes=int(minutes))
        if offset >= timedelta(hours=24):
            raise ValueError(f"UTC offset out of range: {text}")
        return timezone(-offset if sign == '-' else offset)
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown time zone: {text}") from e


def _parse_date(text: str) -> date:
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {text!r}") from e


def _parse_time(text: str) -> time:
    try:
        return time.fromisoformat(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {text!r}") from e


def run(
    latitude_deg: float,
    longitude_deg: float,
    day: date,
    tz: tzinfo | None = None,
    local_time: time | None = None,
    sample_interval_minutes: float = DEFAULT_SAMPLE_INTERVAL_MIN,
    visible_only: bool = False,
    horizon_deg: float = -18.0,
) -> SunReport:
    """
    Build a sun report for one location and civil day.

    Returns:
        SunReport; includes the sun position when local_time is given.
    """
    coordinate = GeoCoordinate(latitude_deg, longitude_deg)
    zone = tz if tz is not None else mean_solar_timezone(coordinate.longitude_deg)

    instant = None
    if local_time is not None:
        instant = datetime.combine(day, local_time, tzinfo=zone)

    options = SunPathOptions(
        include_below_horizon=not visible_only,
        horizon_threshold_deg=horizon_deg,
    )
    logger.debug(
        "Building report: lat=%s lon=%s date=%s zone=%s",
        latitude_deg, longitude_deg, day, zone,
    )
    return build_sun_report(
        coordinate, day,
        tz=zone,
        instant=instant,
        sample_interval_minutes=sample_interval_minutes,
        options=options,
    )


def _format_event(event: SolarEvent, zone: tzinfo) -> str:
    if event.occurs:
        return event.time.astimezone(zone).strftime('%H:%M:%S')
    return f"n/a ({event.status.value.replace('_', ' ')})"


def _format_window(window: TimeWindow, zone: tzinfo) -> str:
    return f"{_format_event(window.start, zone)} - {_format_event(window.end, zone)}"


def print_summary(report: SunReport, zone: tzinfo, object_height_m: float | None = None) -> None:
    """Print day events (in zone), the spot position and the path size."""
    times = report.day_times
    hours = times.day_length.total_seconds() / 3600.0

    print(f"Location: {report.coordinate.latitude_deg:.4f}, "
          f"{report.coordinate.longitude_deg:.4f}")
    print(f"Date: {report.date.isoformat()}  Zone: {report.timezone_name}")
    print(f"  Solar noon:        {times.solar_noon.astimezone(zone).strftime('%H:%M:%S')}"
          f"  (elevation {times.noon_elevation_deg:.2f}°)")
    print(f"  Sunrise:           {_format_event(times.sunrise, zone)}")
    print(f"  Sunset:            {_format_event(times.sunset, zone)}")
    print(f"  Civil twilight:    {_format_event(times.civil_dawn, zone)}"
          f" / {_format_event(times.civil_dusk, zone)}")
    print(f"  Nautical twilight: {_format_event(times.nautical_dawn, zone)}"
          f" / {_format_event(times.nautical_dusk, zone)}")
    print(f"  Astronomical:      {_format_event(times.astronomical_dawn, zone)}"
          f" / {_format_event(times.astronomical_dusk, zone)}")
    print(f"  Golden hour (am):  {_format_window(times.golden_hour_morning, zone)}")
    print(f"  Golden hour (pm):  {_format_window(times.golden_hour_evening, zone)}")
    print(f"  Blue hour (am):    {_format_window(times.blue_hour_morning, zone)}")
    print(f"  Blue hour (pm):    {_format_window(times.blue_hour_evening, zone)}")
    print(f"  Day length:        {hours:.2f} h")

    if report.position is not None:
        pos = report.position
        local = report.position_instant.astimezone(zone)
        print(f"Sun at {local.strftime('%H:%M:%S')}: azimuth {pos.azimuth_deg:.2f}°, "
              f"elevation {pos.elevation_deg:.2f}°")
        if object_height_m is not None:
            shadow = compute_shadow(object_height_m, pos)
            length = "none (sun down)" if math.isinf(shadow.length_m) else f"{shadow.length_m:.2f} m"
            print(f"Shadow of {object_height_m:g} m object: {length}, "
                  f"direction {shadow.direction_deg:.2f}°")

    print(f"Sun path: {len(report.path)} samples")


def main():
    parser = argparse.ArgumentParser(
        description="Compute sun position, daily solar events and sun path"
    )
    parser.add_argument('--lat', type=float, required=True,
                        help="Latitude in degrees, -90 to 90")
    parser.add_argument('--lon', type=float, required=True,
                        help="Longitude in degrees, -180 to 180 (east positive)")
    parser.add_argument('--date', type=_parse_date, required=True,
                        help="Calendar date YYYY-MM-DD in the observer's zone")
    parser.add_argument('--tz',
                        help="Time zone: IANA name, UTC, or offset like +05:30, UTC-04:00 "
                             "or --tz=-04:00 "
                             "(default: local mean solar time)")
    parser.add_argument('--time', type=_parse_time,
                        help="Local time HH:MM[:SS] for a spot sun position")
    parser.add_argument('--height', type=float,
                        help="Object height in meters for shadow output (used with --time)")

    path_group = parser.add_argument_group('sun path')
    path_group.add_argument(
        '--interval', type=float, default=DEFAULT_SAMPLE_INTERVAL_MIN,
        help=f"Sample interval in minutes, 1-120 (default: {DEFAULT_SAMPLE_INTERVAL_MIN:g})"
    )
    path_group.add_argument(
        '--visible-only', action='store_true', default=False,
        help="Drop samples below the --horizon threshold"
    )
    path_group.add_argument(
        '--horizon', type=float, default=-18.0,
        help="Elevation threshold for --visible-only (default: -18)"
    )

    export_group = parser.add_argument_group('export')
    export_group.add_argument('--export-csv', help="Export sun path samples to CSV")
    export_group.add_argument('--export-json', help="Export the full sun report to JSON")

    parser.add_argument('--verbose', '-v', action='store_true', default=False,
                        help="Enable debug logging")

    args = parser.parse_args()

    if args.height is not None and args.time is None:
        parser.error("--height requires --time")

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        if args.height is not None:
            validate_object_height(args.height)
        tz = parse_timezone(args.tz)
        report = run(
            latitude_deg=args.lat,
            longitude_deg=args.lon,
            day=args.date,
            tz=tz,
            local_time=args.time,
            sample_interval_minutes=args.interval,
            visible_only=args.visible_only,
            horizon_deg=args.horizon,
        )
        zone = tz if tz is not None else mean_solar_timezone(report.coordinate.longitude_deg)
        print_summary(report, zone, object_height_m=args.height)

        if args.export_csv:
            n = CsvSunPathExporter().export(report, args.export_csv)
            print(f"Exported {n} samples to {args.export_csv}")

        if args.export_json:
            n = JsonSunReportExporter().export(report, args.export_json)
            print(f"Exported report with {n} samples to {args.export_json}")

    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except OSError as e:
        print(f"Error: Cannot write output: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
