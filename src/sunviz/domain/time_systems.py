# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Time bases for the solar model.

Julian Date, days since J2000.0, and the local civil-day window that
daily solar events are solved within. Everything returned is UTC.
"""
import math
from datetime import date, datetime, time, timedelta, timezone, tzinfo

J2000_JD: float = 2451545.0
SECONDS_PER_DAY: float = 86400.0


def to_utc(epoch: datetime) -> datetime:
    """Normalize a datetime to UTC. Naive datetimes are taken as UTC."""
    if epoch.tzinfo is None:
        return epoch.replace(tzinfo=timezone.utc)
    return epoch.astimezone(timezone.utc)


def datetime_to_jd(epoch: datetime) -> float:
    """Convert a datetime to Julian Date.

    Meeus, Astronomical Algorithms, Ch. 7. The Gregorian correction is
    always applied, matching the proleptic Gregorian calendar of
    ``datetime``.
    """
    dt = to_utc(epoch)

    y = dt.year
    m = dt.month
    d = (dt.day
         + dt.hour / 24.0
         + dt.minute / 1440.0
         + dt.second / SECONDS_PER_DAY
         + dt.microsecond / (SECONDS_PER_DAY * 1_000_000.0))

    if m <= 2:
        y -= 1
        m += 12

    A = y // 100
    B = 2 - A + A // 4

    return (math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + d + B - 1524.5)


def days_since_j2000(epoch: datetime) -> float:
    """Days (fractional) since J2000.0, 2000-01-01 12:00:00 UTC."""
    return datetime_to_jd(epoch) - J2000_JD


def mean_solar_timezone(longitude_deg: float) -> timezone:
    """Fixed-offset zone of local mean solar time: longitude / 15 hours."""
    offset_s = round(longitude_deg * 240.0)
    return timezone(timedelta(seconds=offset_s))


def local_day_bounds(day: date, tz: tzinfo) -> tuple[datetime, datetime]:
    """
    UTC instants of local midnight at the start and end of a civil day.

    Args:
        day: Calendar date as seen by the observer.
        tz: Observer's time zone.

    Returns:
        (start, end) in UTC. The span is 24 h except on DST transitions.
    """
    start = datetime.combine(day, time(0, 0), tzinfo=tz)
    end = datetime.combine(day + timedelta(days=1), time(0, 0), tzinfo=tz)
    return to_utc(start), to_utc(end)
