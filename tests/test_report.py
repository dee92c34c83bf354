# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for sun report composition."""
from datetime import date, datetime, timezone

import pytest

from sunviz.domain.day_times import compute_day_times
from sunviz.domain.observation import GeoCoordinate, compute_position
from sunviz.domain.report import SunReport, build_sun_report
from sunviz.domain.sun_path import SunPathOptions, compute_sun_path
from sunviz.domain.validation import InvalidInputError

NYC = GeoCoordinate(40.7128, -74.0060)
DAY = date(2024, 6, 21)


class TestBuildSunReport:

    def test_matches_individual_operations(self):
        """Report parts equal what each operation returns on its own."""
        instant = datetime(2024, 6, 21, 16, 0, tzinfo=timezone.utc)
        report = build_sun_report(NYC, DAY, tz=timezone.utc, instant=instant,
                                  sample_interval_minutes=30)
        assert isinstance(report, SunReport)
        assert report.position == compute_position(NYC, instant)
        assert report.path == tuple(compute_sun_path(NYC, DAY, 30, tz=timezone.utc))
        assert report.day_times == compute_day_times(NYC, DAY, timezone.utc)
        assert report.timezone_name == 'UTC'

    def test_no_instant_no_position(self):
        report = build_sun_report(NYC, DAY, tz=timezone.utc, sample_interval_minutes=60)
        assert report.position is None
        assert report.position_instant is None

    def test_posix_instant(self):
        ts = datetime(2024, 6, 21, 16, 0, tzinfo=timezone.utc).timestamp()
        report = build_sun_report(NYC, DAY, tz=timezone.utc, instant=ts,
                                  sample_interval_minutes=60)
        assert report.position_instant == datetime(2024, 6, 21, 16, 0, tzinfo=timezone.utc)

    def test_default_zone_is_mean_solar_time(self):
        report = build_sun_report(NYC, DAY, sample_interval_minutes=60)
        # -74.006 deg -> -17761 s -> UTC-04:56:01
        assert report.timezone_name.startswith('UTC-04:56')

    def test_options_forwarded(self):
        report = build_sun_report(
            NYC, DAY, tz=timezone.utc, sample_interval_minutes=15,
            options=SunPathOptions(include_below_horizon=False, horizon_threshold_deg=0.0),
        )
        assert 0 < len(report.path) < 96
        assert all(s.position.elevation_deg >= 0.0 for s in report.path)

    def test_invalid_interval(self):
        with pytest.raises(InvalidInputError):
            build_sun_report(NYC, DAY, sample_interval_minutes=0)
