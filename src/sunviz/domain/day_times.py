# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Daily solar events.

Solar noon, sunrise/sunset, twilight boundaries and golden/blue hour
windows for an observer's civil day. Each event is the crossing of a
fixed elevation threshold, solved analytically from the hour angle:

    cos H0 = (sin h0 - sin(lat) sin(dec)) / (cos(lat) cos(dec))

When no crossing exists the event carries an explicit status
(ALWAYS_ABOVE / ALWAYS_BELOW) instead of a time.
"""
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo
from enum import Enum

import numpy as np

from sunviz.domain.observation import GeoCoordinate, validate_coordinate
from sunviz.domain.solar import (
    HOUR_ANGLE_RATE_DEG_PER_DAY,
    hour_angle_deg,
    solar_coordinates,
    solar_coordinates_at,
)
from sunviz.domain.time_systems import (
    days_since_j2000,
    local_day_bounds,
    mean_solar_timezone,
)
from sunviz.domain.validation import (
    InvalidInputError,
    require_range,
    validate_date,
    validate_tz,
)

_TRANSIT_ITERATIONS = 4
_POLE_EPS = 1e-12


class EventStatus(Enum):
    """Whether an elevation crossing happens on the day."""
    OCCURS = "occurs"
    ALWAYS_ABOVE = "always_above"
    ALWAYS_BELOW = "always_below"


@dataclass(frozen=True)
class SolarEvent:
    """Crossing of an elevation threshold. ``time`` is set only when it occurs."""
    name: str
    elevation_deg: float
    status: EventStatus
    time: datetime | None = None

    @property
    def occurs(self) -> bool:
        return self.status is EventStatus.OCCURS


@dataclass(frozen=True)
class TimeWindow:
    """Interval bounded by two solar events."""
    name: str
    start: SolarEvent
    end: SolarEvent

    @property
    def duration(self) -> timedelta | None:
        if not (self.start.occurs and self.end.occurs):
            return None
        return self.end.time - self.start.time


@dataclass(frozen=True)
class ElevationThresholds:
    """Elevation angles (degrees) that define the named events."""
    horizon_deg: float = 0.0
    civil_deg: float = -6.0
    nautical_deg: float = -12.0
    astronomical_deg: float = -18.0
    golden_hour_low_deg: float = -4.0
    golden_hour_high_deg: float = 6.0
    blue_hour_low_deg: float = -6.0
    blue_hour_high_deg: float = -4.0

    def __post_init__(self) -> None:
        for name in (
            "horizon_deg", "civil_deg", "nautical_deg", "astronomical_deg",
            "golden_hour_low_deg", "golden_hour_high_deg",
            "blue_hour_low_deg", "blue_hour_high_deg",
        ):
            value = require_range(name, getattr(self, name), -90.0, 90.0)
            object.__setattr__(self, name, value)
        if self.golden_hour_low_deg >= self.golden_hour_high_deg:
            raise InvalidInputError(
                "golden_hour_low_deg", self.golden_hour_low_deg,
                "must be below golden_hour_high_deg",
            )
        if self.blue_hour_low_deg >= self.blue_hour_high_deg:
            raise InvalidInputError(
                "blue_hour_low_deg", self.blue_hour_low_deg,
                "must be below blue_hour_high_deg",
            )


DEFAULT_THRESHOLDS = ElevationThresholds()


@dataclass(frozen=True)
class SolarDayTimes:
    """Named solar events for one civil day at one location. Times are UTC."""
    date: date
    solar_noon: datetime
    nadir: datetime
    noon_elevation_deg: float
    sunrise: SolarEvent
    sunset: SolarEvent
    civil_dawn: SolarEvent
    civil_dusk: SolarEvent
    nautical_dawn: SolarEvent
    nautical_dusk: SolarEvent
    astronomical_dawn: SolarEvent
    astronomical_dusk: SolarEvent
    golden_hour_morning: TimeWindow
    golden_hour_evening: TimeWindow
    blue_hour_morning: TimeWindow
    blue_hour_evening: TimeWindow
    day_length: timedelta

    @property
    def is_polar_day(self) -> bool:
        return self.sunrise.status is EventStatus.ALWAYS_ABOVE

    @property
    def is_polar_night(self) -> bool:
        return self.sunrise.status is EventStatus.ALWAYS_BELOW


def _transit_near(epoch: datetime, longitude_deg: float) -> datetime:
    """Upper transit (zero hour angle) nearest to epoch, by Newton iteration."""
    t = epoch
    for _ in range(_TRANSIT_ITERATIONS):
        n = days_since_j2000(t)
        ra_deg = solar_coordinates_at(n).right_ascension_deg
        ha = hour_angle_deg(n, longitude_deg, ra_deg)
        t = t - timedelta(days=ha / HOUR_ANGLE_RATE_DEG_PER_DAY)
    return t


def _local_day(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    try:
        return local_day_bounds(day, tz)
    except OverflowError as e:
        raise InvalidInputError("date", day, "is outside the supported date range") from e


def _solar_noon_in(start: datetime, end: datetime, longitude_deg: float) -> datetime:
    noon = _transit_near(start + (end - start) / 2, longitude_deg)
    if noon < start:
        candidate = _transit_near(noon + timedelta(days=1), longitude_deg)
        if candidate < end:
            noon = candidate
    elif noon >= end:
        candidate = _transit_near(noon - timedelta(days=1), longitude_deg)
        if candidate >= start:
            noon = candidate
    return noon


def solar_noon(
    coordinate: GeoCoordinate,
    day: date,
    tz: tzinfo | None = None,
) -> datetime:
    """
    Instant of solar noon (upper transit) within the observer's civil day.

    Args:
        coordinate: Observer location.
        day: Calendar date in the observer's zone.
        tz: Observer's zone; None means local mean solar time.

    Returns:
        UTC datetime of solar noon.
    """
    validate_coordinate(coordinate)
    day = validate_date(day)
    zone = mean_solar_timezone(coordinate.longitude_deg) if tz is None else validate_tz(tz)
    start, end = _local_day(day, zone)
    return _solar_noon_in(start, end, coordinate.longitude_deg)


def _crossing_hour_angle(
    threshold_deg: float,
    lat_rad: float,
    dec_rad: float,
) -> tuple[EventStatus, float]:
    """
    Hour angle (degrees) at which elevation equals threshold_deg.

    Returns:
        (status, hour_angle_deg). hour_angle_deg is 0.0 unless the
        crossing occurs.
    """
    sin_h0 = float(np.sin(np.radians(threshold_deg)))
    sin_lat = float(np.sin(lat_rad))
    sin_dec = float(np.sin(dec_rad))
    denom = float(np.cos(lat_rad)) * float(np.cos(dec_rad))

    if abs(denom) < _POLE_EPS:
        # At a pole the elevation equals +/-declination all day.
        if sin_lat * sin_dec > sin_h0:
            return EventStatus.ALWAYS_ABOVE, 0.0
        return EventStatus.ALWAYS_BELOW, 0.0

    cos_h0 = (sin_h0 - sin_lat * sin_dec) / denom
    if cos_h0 < -1.0:
        return EventStatus.ALWAYS_ABOVE, 0.0
    if cos_h0 > 1.0:
        return EventStatus.ALWAYS_BELOW, 0.0
    return EventStatus.OCCURS, float(np.degrees(np.arccos(cos_h0)))


def _event_pair(
    names: tuple[str, str],
    threshold_deg: float,
    noon: datetime,
    lat_rad: float,
    dec_rad: float,
) -> tuple[SolarEvent, SolarEvent]:
    """Rising and setting crossings of one threshold, symmetric about noon."""
    status, ha_deg = _crossing_hour_angle(threshold_deg, lat_rad, dec_rad)
    rising_name, setting_name = names
    if status is not EventStatus.OCCURS:
        return (
            SolarEvent(rising_name, threshold_deg, status),
            SolarEvent(setting_name, threshold_deg, status),
        )
    offset = timedelta(hours=ha_deg / 15.0)
    return (
        SolarEvent(rising_name, threshold_deg, status, noon - offset),
        SolarEvent(setting_name, threshold_deg, status, noon + offset),
    )


def compute_day_times(
    coordinate: GeoCoordinate,
    day: date,
    tz: tzinfo | None = None,
    thresholds: ElevationThresholds | None = None,
) -> SolarDayTimes:
    """
    Compute the named solar events for a civil day.

    Declination is evaluated once, at solar noon; rising and setting
    events sit symmetrically around noon at 15 degrees of hour angle
    per hour. Continuous day or night relative to a threshold is
    reported through EventStatus, never raised.

    Args:
        coordinate: Observer location.
        day: Calendar date in the observer's zone.
        tz: Observer's zone; None means local mean solar time.
        thresholds: Event elevation angles; defaults to DEFAULT_THRESHOLDS.

    Returns:
        SolarDayTimes with UTC datetimes.

    Raises:
        InvalidInputError: If the coordinate, date or zone is invalid.
    """
    validate_coordinate(coordinate)
    day = validate_date(day)
    zone = mean_solar_timezone(coordinate.longitude_deg) if tz is None else validate_tz(tz)
    th = DEFAULT_THRESHOLDS if thresholds is None else thresholds

    start, end = _local_day(day, zone)
    noon = _solar_noon_in(start, end, coordinate.longitude_deg)

    dec_deg = solar_coordinates(noon).declination_deg
    lat_rad = float(np.radians(coordinate.latitude_deg))
    dec_rad = float(np.radians(dec_deg))

    def pair(names: tuple[str, str], threshold_deg: float) -> tuple[SolarEvent, SolarEvent]:
        return _event_pair(names, threshold_deg, noon, lat_rad, dec_rad)

    sunrise, sunset = pair(("sunrise", "sunset"), th.horizon_deg)
    civil_dawn, civil_dusk = pair(("civil_dawn", "civil_dusk"), th.civil_deg)
    nautical_dawn, nautical_dusk = pair(("nautical_dawn", "nautical_dusk"), th.nautical_deg)
    astro_dawn, astro_dusk = pair(
        ("astronomical_dawn", "astronomical_dusk"), th.astronomical_deg,
    )
    golden_low_rise, golden_low_set = pair(
        ("golden_hour_morning_start", "golden_hour_evening_end"), th.golden_hour_low_deg,
    )
    golden_high_rise, golden_high_set = pair(
        ("golden_hour_morning_end", "golden_hour_evening_start"), th.golden_hour_high_deg,
    )
    blue_low_rise, blue_low_set = pair(
        ("blue_hour_morning_start", "blue_hour_evening_end"), th.blue_hour_low_deg,
    )
    blue_high_rise, blue_high_set = pair(
        ("blue_hour_morning_end", "blue_hour_evening_start"), th.blue_hour_high_deg,
    )

    if sunrise.occurs:
        day_length = sunset.time - sunrise.time
    elif sunrise.status is EventStatus.ALWAYS_ABOVE:
        day_length = timedelta(hours=24)
    else:
        day_length = timedelta(0)

    # Noon elevation from the same declination: 90 - |lat - dec|
    noon_elevation_deg = 90.0 - abs(coordinate.latitude_deg - dec_deg)

    return SolarDayTimes(
        date=day,
        solar_noon=noon,
        nadir=noon - timedelta(hours=12),
        noon_elevation_deg=noon_elevation_deg,
        sunrise=sunrise,
        sunset=sunset,
        civil_dawn=civil_dawn,
        civil_dusk=civil_dusk,
        nautical_dawn=nautical_dawn,
        nautical_dusk=nautical_dusk,
        astronomical_dawn=astro_dawn,
        astronomical_dusk=astro_dusk,
        golden_hour_morning=TimeWindow("golden_hour_morning", golden_low_rise, golden_high_rise),
        golden_hour_evening=TimeWindow("golden_hour_evening", golden_high_set, golden_low_set),
        blue_hour_morning=TimeWindow("blue_hour_morning", blue_low_rise, blue_high_rise),
        blue_hour_evening=TimeWindow("blue_hour_evening", blue_high_set, blue_low_set),
        day_length=day_length,
    )
