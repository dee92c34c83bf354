# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Full-day sun path.

Samples the sun position at a fixed interval across the 24 hours that
start at the observer's local midnight. Start inclusive, end exclusive.
"""
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo

from sunviz.domain.observation import (
    GeoCoordinate,
    SunPosition,
    compute_position,
    validate_coordinate,
)
from sunviz.domain.time_systems import local_day_bounds, mean_solar_timezone
from sunviz.domain.validation import (
    InvalidInputError,
    require_range,
    validate_date,
    validate_tz,
)

DEFAULT_SAMPLE_INTERVAL_MIN: float = 10.0
MIN_SAMPLE_INTERVAL_MIN: float = 1.0
MAX_SAMPLE_INTERVAL_MIN: float = 120.0
MINUTES_PER_DAY: float = 1440.0


@dataclass(frozen=True)
class SunPathOptions:
    """Which samples a sun path keeps.

    With include_below_horizon False, only samples at or above
    horizon_threshold_deg are returned (-18 keeps astronomical
    twilight, 0 keeps the visible arc).
    """
    include_below_horizon: bool = True
    horizon_threshold_deg: float = -18.0

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "horizon_threshold_deg",
            require_range("horizon_threshold_deg", self.horizon_threshold_deg, -90.0, 90.0),
        )


@dataclass(frozen=True)
class SunPathSample:
    """Sun position at one sample instant (UTC)."""
    timestamp: datetime
    position: SunPosition


def sample_count(sample_interval_minutes: float) -> int:
    """Number of samples k * interval < 1440 min, i.e. ceil(1440 / interval)."""
    return math.ceil(MINUTES_PER_DAY / sample_interval_minutes - 1e-9)


def compute_sun_path(
    coordinate: GeoCoordinate,
    day: date,
    sample_interval_minutes: float = DEFAULT_SAMPLE_INTERVAL_MIN,
    options: SunPathOptions | None = None,
    tz: tzinfo | None = None,
) -> list[SunPathSample]:
    """
    Sample the sun's trajectory over one day.

    Every sample equals compute_position() for the same coordinate and
    timestamp.

    Args:
        coordinate: Observer location.
        day: Calendar date in the observer's zone.
        sample_interval_minutes: Spacing between samples, 1 to 120.
        options: Horizon filtering; all samples are kept by default.
        tz: Observer's zone; None means local mean solar time.

    Returns:
        Samples in ascending timestamp order.

    Raises:
        InvalidInputError: If any argument is invalid.
    """
    validate_coordinate(coordinate)
    day = validate_date(day)
    interval = require_range(
        "sample_interval_minutes", sample_interval_minutes,
        MIN_SAMPLE_INTERVAL_MIN, MAX_SAMPLE_INTERVAL_MIN,
    )
    opts = SunPathOptions() if options is None else options
    zone = mean_solar_timezone(coordinate.longitude_deg) if tz is None else validate_tz(tz)

    try:
        start, _ = local_day_bounds(day, zone)
    except OverflowError as e:
        raise InvalidInputError("date", day, "is outside the supported date range") from e

    samples: list[SunPathSample] = []
    for k in range(sample_count(interval)):
        timestamp = start + timedelta(minutes=k * interval)
        position = compute_position(coordinate, timestamp)
        if not opts.include_below_horizon and position.elevation_deg < opts.horizon_threshold_deg:
            continue
        samples.append(SunPathSample(timestamp=timestamp, position=position))

    return samples
