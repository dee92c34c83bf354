# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sun report: everything an export or report collaborator needs for one
location and day, computed in one call.
"""
from dataclasses import dataclass
from datetime import date, datetime, tzinfo

from sunviz.domain.day_times import (
    ElevationThresholds,
    SolarDayTimes,
    compute_day_times,
)
from sunviz.domain.observation import (
    GeoCoordinate,
    SunPosition,
    compute_position,
    validate_coordinate,
)
from sunviz.domain.sun_path import (
    DEFAULT_SAMPLE_INTERVAL_MIN,
    SunPathOptions,
    SunPathSample,
    compute_sun_path,
)
from sunviz.domain.time_systems import mean_solar_timezone
from sunviz.domain.validation import validate_date, validate_instant, validate_tz


@dataclass(frozen=True)
class SunReport:
    """Day times, sun path and an optional spot position for one place and day."""
    coordinate: GeoCoordinate
    date: date
    timezone_name: str
    day_times: SolarDayTimes
    path: tuple[SunPathSample, ...]
    position_instant: datetime | None = None
    position: SunPosition | None = None


def build_sun_report(
    coordinate: GeoCoordinate,
    day: date,
    tz: tzinfo | None = None,
    instant: datetime | float | None = None,
    sample_interval_minutes: float = DEFAULT_SAMPLE_INTERVAL_MIN,
    options: SunPathOptions | None = None,
    thresholds: ElevationThresholds | None = None,
) -> SunReport:
    """
    Compose day times, sun path and (optionally) a spot position.

    Args:
        coordinate: Observer location.
        day: Calendar date in the observer's zone.
        tz: Observer's zone; None means local mean solar time.
        instant: If given, the sun position at this instant is included.
        sample_interval_minutes: Sun path sample spacing.
        options: Sun path horizon filtering.
        thresholds: Event elevation angles.

    Returns:
        SunReport. All instants are UTC.
    """
    validate_coordinate(coordinate)
    day = validate_date(day)
    zone = mean_solar_timezone(coordinate.longitude_deg) if tz is None else validate_tz(tz)

    day_times = compute_day_times(coordinate, day, tz=zone, thresholds=thresholds)
    path = compute_sun_path(
        coordinate, day,
        sample_interval_minutes=sample_interval_minutes,
        options=options,
        tz=zone,
    )

    position_instant = None
    position = None
    if instant is not None:
        position_instant = validate_instant(instant)
        position = compute_position(coordinate, position_instant)

    return SunReport(
        coordinate=coordinate,
        date=day,
        timezone_name=str(zone),
        day_times=day_times,
        path=tuple(path),
        position_instant=position_instant,
        position=position,
    )
