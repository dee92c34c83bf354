# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Analytical solar ephemeris.

Mean-orbit low-precision Sun model (Astronomical Almanac low-precision
formulae, as in Meeus "Astronomical Algorithms" Ch. 25). Accuracy is a
fraction of a degree in declination and well under a minute in the
equation of time, sufficient for shadow and sun-path visualization.

Every other module derives the Sun's place from here.
"""
from dataclasses import dataclass
from datetime import datetime

import numpy as np

from sunviz.domain.time_systems import days_since_j2000

OBLIQUITY_DEG: float = 23.439  # Mean obliquity of the ecliptic

# Hour angle advances by ~360 deg per solar day
HOUR_ANGLE_RATE_DEG_PER_DAY: float = 360.0


@dataclass(frozen=True)
class SolarCoordinates:
    """Geocentric Sun coordinates at a given epoch."""
    days_since_j2000: float
    mean_longitude_deg: float
    mean_anomaly_deg: float
    ecliptic_longitude_deg: float
    right_ascension_deg: float  # [0, 360)
    declination_deg: float
    equation_of_time_min: float  # apparent minus mean solar time


def wrap_180(angle_deg: float) -> float:
    """Wrap an angle to [-180, 180)."""
    return (angle_deg + 180.0) % 360.0 - 180.0


def solar_coordinates_at(n: float) -> SolarCoordinates:
    """
    Sun coordinates for a day count since J2000.0.

    Args:
        n: Days since 2000-01-01 12:00 UTC (fractional).

    Returns:
        SolarCoordinates with right ascension, declination and the
        equation of time.
    """
    # Mean longitude and mean anomaly (degrees)
    L_deg = (280.460 + 0.9856474 * n) % 360.0
    g_deg = (357.528 + 0.9856003 * n) % 360.0
    g_rad = float(np.radians(g_deg))

    # Ecliptic longitude: mean longitude plus the equation of center
    lam_deg = (L_deg + 1.915 * float(np.sin(g_rad))
               + 0.020 * float(np.sin(2.0 * g_rad))) % 360.0
    lam_rad = float(np.radians(lam_deg))

    eps_rad = float(np.radians(OBLIQUITY_DEG))

    ra_deg = float(np.degrees(np.arctan2(
        np.cos(eps_rad) * np.sin(lam_rad), np.cos(lam_rad),
    ))) % 360.0
    dec_deg = float(np.degrees(np.arcsin(np.sin(eps_rad) * np.sin(lam_rad))))

    # 1 deg of hour angle = 4 minutes of time
    eot_min = wrap_180(L_deg - ra_deg) * 4.0

    return SolarCoordinates(
        days_since_j2000=n,
        mean_longitude_deg=L_deg,
        mean_anomaly_deg=g_deg,
        ecliptic_longitude_deg=lam_deg,
        right_ascension_deg=ra_deg,
        declination_deg=dec_deg,
        equation_of_time_min=eot_min,
    )


def solar_coordinates(epoch: datetime) -> SolarCoordinates:
    """Sun coordinates at a UTC epoch. Naive datetimes are taken as UTC."""
    return solar_coordinates_at(days_since_j2000(epoch))


def gmst_deg(n: float) -> float:
    """
    Greenwich Mean Sidereal Time in degrees, [0, 360).

    GMST = 280.46061837 + 360.98564736629 * (JD - 2451545.0)
    The T² and T³ terms are below the accuracy of the solar model and
    are omitted.
    """
    return (280.46061837 + 360.98564736629 * n) % 360.0


def hour_angle_deg(n: float, longitude_deg: float, right_ascension_deg: float) -> float:
    """Local hour angle of the Sun in [-180, 180); zero at upper transit."""
    return wrap_180(gmst_deg(n) + longitude_deg - right_ascension_deg)


def solar_declination_deg(epoch: datetime) -> float:
    """Solar declination at given epoch. Convenience wrapper."""
    return solar_coordinates(epoch).declination_deg
