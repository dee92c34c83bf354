# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Topocentric sun position.

Computes the Sun's azimuth and elevation for an observer on the ground
from the analytical solar ephemeris.

"""
import math
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from sunviz.domain.solar import hour_angle_deg, solar_coordinates_at
from sunviz.domain.time_systems import days_since_j2000
from sunviz.domain.validation import (
    validate_instant,
    validate_latitude,
    validate_longitude,
)


@dataclass(frozen=True)
class GeoCoordinate:
    """Observer location. Ranges are checked on construction."""
    latitude_deg: float
    longitude_deg: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude_deg", validate_latitude(self.latitude_deg))
        object.__setattr__(self, "longitude_deg", validate_longitude(self.longitude_deg))


@dataclass(frozen=True)
class SunPosition:
    """Apparent sun direction for an observer.

    Azimuth is clockwise from true north: 0 N, 90 E, 180 S, 270 W.
    """
    azimuth_deg: float  # [0, 360)
    elevation_deg: float  # [-90, 90], negative below the horizon
    declination_deg: float
    hour_angle_deg: float  # [-180, 180), zero at solar noon

    @property
    def is_above_horizon(self) -> bool:
        return self.elevation_deg > 0.0


def _sun_enu(
    lat_rad: float,
    dec_rad: float,
    ha_rad: float,
) -> tuple[float, float, float]:
    """
    Unit vector toward the Sun in the observer's East-North-Up frame.

    Args:
        lat_rad: Observer latitude in radians.
        dec_rad: Solar declination in radians.
        ha_rad: Local hour angle in radians.

    Returns:
        (E, N, U) direction cosines.
    """
    sin_lat = float(np.sin(lat_rad))
    cos_lat = float(np.cos(lat_rad))
    sin_dec = float(np.sin(dec_rad))
    cos_dec = float(np.cos(dec_rad))
    sin_ha = float(np.sin(ha_rad))
    cos_ha = float(np.cos(ha_rad))

    e = -cos_dec * sin_ha
    n = cos_lat * sin_dec - sin_lat * cos_dec * cos_ha
    u = sin_lat * sin_dec + cos_lat * cos_dec * cos_ha
    return e, n, u


def validate_coordinate(coordinate: GeoCoordinate) -> GeoCoordinate:
    # Also accepts any object exposing latitude_deg and longitude_deg.
    validate_latitude(coordinate.latitude_deg)
    validate_longitude(coordinate.longitude_deg)
    return coordinate


def compute_position(coordinate: GeoCoordinate, instant: datetime | float) -> SunPosition:
    """
    Compute the Sun's azimuth and elevation for an observer.

    The hour angle depends on UTC time and longitude only; the
    observer's civil time zone plays no part.

    Args:
        coordinate: Observer location.
        instant: Aware datetime (converted to UTC), naive datetime
            (taken as UTC) or POSIX timestamp in seconds.

    Returns:
        SunPosition with azimuth [0, 360) and elevation [-90, 90].

    Raises:
        InvalidInputError: If the coordinate or instant is invalid.
    """
    validate_coordinate(coordinate)
    epoch = validate_instant(instant)

    n = days_since_j2000(epoch)
    coords = solar_coordinates_at(n)
    ha_deg = hour_angle_deg(n, coordinate.longitude_deg, coords.right_ascension_deg)

    e, north, u = _sun_enu(
        float(np.radians(coordinate.latitude_deg)),
        float(np.radians(coords.declination_deg)),
        float(np.radians(ha_deg)),
    )

    elevation_deg = float(np.degrees(np.arctan2(u, math.hypot(e, north))))
    azimuth_deg = float(np.degrees(np.arctan2(e, north))) % 360.0
    if azimuth_deg >= 360.0:
        azimuth_deg = 0.0

    return SunPosition(
        azimuth_deg=azimuth_deg,
        elevation_deg=elevation_deg,
        declination_deg=coords.declination_deg,
        hour_angle_deg=ha_deg,
    )
