# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Plain-data serialization of solar results.

Pure functions converting domain values to dicts and rows of JSON-safe
primitives. Instants become ISO-8601 UTC strings; events always carry
their status so "does not occur" survives serialization.
No external dependencies.
"""
import math
from datetime import datetime, timedelta

from sunviz.domain.day_times import SolarDayTimes, SolarEvent, TimeWindow
from sunviz.domain.observation import SunPosition
from sunviz.domain.report import SunReport
from sunviz.domain.shadow import shadow_direction_deg, shadow_length
from sunviz.domain.sun_path import SunPathSample

SAMPLE_ROW_HEADER = [
    'timestamp_utc', 'azimuth_deg', 'elevation_deg',
    'declination_deg', 'hour_angle_deg', 'shadow_direction_deg',
    'shadow_ratio',
]


def format_instant(instant: datetime | None) -> str | None:
    """ISO-8601 string with explicit UTC offset, or None."""
    if instant is None:
        return None
    return instant.isoformat()


def _hours(duration: timedelta | None) -> float | None:
    if duration is None:
        return None
    return round(duration.total_seconds() / 3600.0, 6)


def position_to_dict(position: SunPosition) -> dict:
    return {
        'azimuth_deg': round(position.azimuth_deg, 6),
        'elevation_deg': round(position.elevation_deg, 6),
        'declination_deg': round(position.declination_deg, 6),
        'hour_angle_deg': round(position.hour_angle_deg, 6),
    }


def event_to_dict(event: SolarEvent) -> dict:
    return {
        'name': event.name,
        'elevation_deg': event.elevation_deg,
        'status': event.status.value,
        'time': format_instant(event.time),
    }


def window_to_dict(window: TimeWindow) -> dict:
    return {
        'name': window.name,
        'start': event_to_dict(window.start),
        'end': event_to_dict(window.end),
        'duration_hours': _hours(window.duration),
    }


def day_times_to_dict(times: SolarDayTimes) -> dict:
    """
    Convert SolarDayTimes to a nested dict.

    Args:
        times: Result of compute_day_times().

    Returns:
        Dict with 'date', 'solar_noon', 'nadir', 'noon_elevation_deg',
        'day_length_hours', 'events' (name -> event dict) and 'windows'
        (name -> window dict).
    """
    events = [
        times.sunrise, times.sunset,
        times.civil_dawn, times.civil_dusk,
        times.nautical_dawn, times.nautical_dusk,
        times.astronomical_dawn, times.astronomical_dusk,
    ]
    windows = [
        times.golden_hour_morning, times.golden_hour_evening,
        times.blue_hour_morning, times.blue_hour_evening,
    ]
    return {
        'date': times.date.isoformat(),
        'solar_noon': format_instant(times.solar_noon),
        'nadir': format_instant(times.nadir),
        'noon_elevation_deg': round(times.noon_elevation_deg, 6),
        'day_length_hours': _hours(times.day_length),
        'events': {e.name: event_to_dict(e) for e in events},
        'windows': {w.name: window_to_dict(w) for w in windows},
    }


def sample_to_row(sample: SunPathSample) -> list[str]:
    """
    One CSV row for a sun path sample, matching SAMPLE_ROW_HEADER.

    shadow_ratio is shadow length per unit object height; empty while
    the sun is at or below the horizon.
    """
    pos = sample.position
    length = shadow_length(1.0, pos.elevation_deg)
    ratio = '' if math.isinf(length) else f'{length:.6f}'
    return [
        format_instant(sample.timestamp),
        f'{pos.azimuth_deg:.6f}',
        f'{pos.elevation_deg:.6f}',
        f'{pos.declination_deg:.6f}',
        f'{pos.hour_angle_deg:.6f}',
        f'{shadow_direction_deg(pos.azimuth_deg):.6f}',
        ratio,
    ]


def report_to_dict(report: SunReport) -> dict:
    """Convert a SunReport to a JSON-safe dict."""
    return {
        'location': {
            'latitude_deg': report.coordinate.latitude_deg,
            'longitude_deg': report.coordinate.longitude_deg,
        },
        'date': report.date.isoformat(),
        'timezone': report.timezone_name,
        'day_times': day_times_to_dict(report.day_times),
        'position': None if report.position is None else {
            'time': format_instant(report.position_instant),
            **position_to_dict(report.position),
        },
        'sun_path': [
            {'time': format_instant(s.timestamp), **position_to_dict(s.position)}
            for s in report.path
        ],
    }
