# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Sunviz

Sun position, daily solar events and sun paths for outdoor planning.
Includes a low-precision analytical solar ephemeris, topocentric
azimuth/elevation, sunrise/sunset with civil, nautical and astronomical
twilight, golden and blue hour windows, full-day sun path sampling,
shadow geometry, and CSV/JSON export of sun reports.
"""

from sunviz.domain.validation import InvalidInputError
from sunviz.domain.solar import (
    OBLIQUITY_DEG,
    SolarCoordinates,
    solar_coordinates,
    solar_declination_deg,
)
from sunviz.domain.time_systems import (
    datetime_to_jd,
    mean_solar_timezone,
)
from sunviz.domain.observation import (
    GeoCoordinate,
    SunPosition,
    compute_position,
)
from sunviz.domain.day_times import (
    DEFAULT_THRESHOLDS,
    ElevationThresholds,
    EventStatus,
    SolarDayTimes,
    SolarEvent,
    TimeWindow,
    compute_day_times,
    solar_noon,
)
from sunviz.domain.sun_path import (
    DEFAULT_SAMPLE_INTERVAL_MIN,
    SunPathOptions,
    SunPathSample,
    compute_sun_path,
)
from sunviz.domain.shadow import (
    Shadow,
    compute_shadow,
    shadow_direction_deg,
    shadow_length,
)
from sunviz.domain.report import (
    SunReport,
    build_sun_report,
)

__version__ = "1.0.0"

__all__ = [
    "InvalidInputError",
    "OBLIQUITY_DEG",
    "SolarCoordinates",
    "solar_coordinates",
    "solar_declination_deg",
    "datetime_to_jd",
    "mean_solar_timezone",
    "GeoCoordinate",
    "SunPosition",
    "compute_position",
    "DEFAULT_THRESHOLDS",
    "ElevationThresholds",
    "EventStatus",
    "SolarDayTimes",
    "SolarEvent",
    "TimeWindow",
    "compute_day_times",
    "solar_noon",
    "DEFAULT_SAMPLE_INTERVAL_MIN",
    "SunPathOptions",
    "SunPathSample",
    "compute_sun_path",
    "Shadow",
    "compute_shadow",
    "shadow_direction_deg",
    "shadow_length",
    "SunReport",
    "build_sun_report",
]
