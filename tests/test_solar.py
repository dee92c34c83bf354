# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for the analytical solar ephemeris."""
from datetime import datetime, timezone

import pytest

from sunviz.domain.solar import (
    OBLIQUITY_DEG,
    SolarCoordinates,
    gmst_deg,
    hour_angle_deg,
    solar_coordinates,
    solar_coordinates_at,
    solar_declination_deg,
    wrap_180,
)


# ── SolarCoordinates dataclass ────────────────────────────────────

class TestSolarCoordinates:

    def test_frozen(self):
        """SolarCoordinates is immutable."""
        sc = solar_coordinates_at(0.0)
        with pytest.raises(AttributeError):
            sc.declination_deg = 0.0

    def test_type(self):
        assert isinstance(solar_coordinates_at(0.0), SolarCoordinates)

    def test_keeps_day_count(self):
        assert solar_coordinates_at(123.5).days_since_j2000 == 123.5


# ── Declination ───────────────────────────────────────────────────

class TestDeclination:

    def test_vernal_equinox_near_zero(self):
        """At the March equinox, declination ≈ 0°."""
        epoch = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
        assert abs(solar_declination_deg(epoch)) < 0.5

    def test_summer_solstice(self):
        """At the June solstice, declination ≈ +23.44°."""
        epoch = datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc)
        assert solar_declination_deg(epoch) == pytest.approx(23.44, abs=0.05)

    def test_winter_solstice(self):
        """At the December solstice, declination ≈ -23.44°."""
        epoch = datetime(2024, 12, 21, 12, 0, tzinfo=timezone.utc)
        assert solar_declination_deg(epoch) == pytest.approx(-23.44, abs=0.05)

    def test_bounded_by_obliquity(self):
        """|declination| never exceeds the obliquity over a year."""
        for day in range(0, 366, 5):
            dec = solar_coordinates_at(8766.0 + day).declination_deg
            assert abs(dec) <= OBLIQUITY_DEG + 1e-9

    def test_wrapper_matches_coordinates(self):
        epoch = datetime(2026, 9, 22, 12, 0, tzinfo=timezone.utc)
        assert solar_declination_deg(epoch) == solar_coordinates(epoch).declination_deg


# ── Right ascension and equation of time ──────────────────────────

class TestRightAscension:

    def test_june_solstice_near_90(self):
        epoch = datetime(2024, 6, 21, 12, 0, tzinfo=timezone.utc)
        assert solar_coordinates(epoch).right_ascension_deg == pytest.approx(90.0, abs=1.5)

    def test_range(self):
        for day in range(0, 366, 7):
            ra = solar_coordinates_at(8766.0 + day).right_ascension_deg
            assert 0.0 <= ra < 360.0


class TestEquationOfTime:

    def test_early_november_maximum(self):
        """Sundial runs ~16.4 min fast in early November."""
        epoch = datetime(2024, 11, 3, 12, 0, tzinfo=timezone.utc)
        assert solar_coordinates(epoch).equation_of_time_min == pytest.approx(16.4, abs=1.0)

    def test_mid_february_minimum(self):
        """Sundial runs ~14.2 min slow in mid February."""
        epoch = datetime(2024, 2, 11, 12, 0, tzinfo=timezone.utc)
        assert solar_coordinates(epoch).equation_of_time_min == pytest.approx(-14.2, abs=1.0)


# ── Sidereal time and hour angle ──────────────────────────────────

class TestSiderealTime:

    def test_gmst_at_j2000(self):
        assert gmst_deg(0.0) == pytest.approx(280.46061837, abs=1e-9)

    def test_gmst_range(self):
        for n in (-5000.25, -1.0, 0.5, 9000.75):
            assert 0.0 <= gmst_deg(n) < 360.0

    def test_hour_angle_range(self):
        for n in (0.0, 100.3, 9000.9):
            for lon in (-180.0, -74.0, 0.0, 151.2, 180.0):
                ra = solar_coordinates_at(n).right_ascension_deg
                assert -180.0 <= hour_angle_deg(n, lon, ra) < 180.0

    def test_hour_angle_shifts_with_longitude(self):
        """Moving 15° east adds 15° of hour angle."""
        n = 8938.0
        ra = solar_coordinates_at(n).right_ascension_deg
        h0 = hour_angle_deg(n, 0.0, ra)
        h15 = hour_angle_deg(n, 15.0, ra)
        assert wrap_180(h15 - h0) == pytest.approx(15.0, abs=1e-9)


class TestWrap180:

    def test_values(self):
        assert wrap_180(190.0) == pytest.approx(-170.0)
        assert wrap_180(-190.0) == pytest.approx(170.0)
        assert wrap_180(180.0) == pytest.approx(-180.0)
        assert wrap_180(45.0) == pytest.approx(45.0)
