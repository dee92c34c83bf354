# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Tests for plain-data serialization of solar results."""
import json
from datetime import date, datetime, timedelta, timezone

from sunviz.domain.day_times import compute_day_times
from sunviz.domain.observation import GeoCoordinate
from sunviz.domain.report import build_sun_report
from sunviz.domain.serialization import (
    SAMPLE_ROW_HEADER,
    day_times_to_dict,
    event_to_dict,
    format_instant,
    position_to_dict,
    report_to_dict,
    sample_to_row,
)
from sunviz.domain.sun_path import compute_sun_path

NYC = GeoCoordinate(40.7128, -74.0060)
SVALBARD = GeoCoordinate(78.0, 15.65)
EDT = timezone(timedelta(hours=-4))


class TestEvents:

    def test_occurring_event(self):
        times = compute_day_times(NYC, date(2024, 6, 21), EDT)
        d = event_to_dict(times.sunrise)
        assert d['name'] == 'sunrise'
        assert d['status'] == 'occurs'
        assert d['time'].startswith('2024-06-21T09:')
        assert d['time'].endswith('+00:00')

    def test_polar_event_keeps_status(self):
        times = compute_day_times(SVALBARD, date(2024, 6, 21))
        d = event_to_dict(times.sunset)
        assert d['status'] == 'always_above'
        assert d['time'] is None

    def test_format_instant_none(self):
        assert format_instant(None) is None


class TestDayTimes:

    def test_keys(self):
        d = day_times_to_dict(compute_day_times(NYC, date(2024, 6, 21), EDT))
        assert d['date'] == '2024-06-21'
        assert set(d['events']) == {
            'sunrise', 'sunset', 'civil_dawn', 'civil_dusk',
            'nautical_dawn', 'nautical_dusk', 'astronomical_dawn', 'astronomical_dusk',
        }
        assert set(d['windows']) == {
            'golden_hour_morning', 'golden_hour_evening',
            'blue_hour_morning', 'blue_hour_evening',
        }
        assert 14.5 < d['day_length_hours'] < 15.5

    def test_polar_day_length(self):
        d = day_times_to_dict(compute_day_times(SVALBARD, date(2024, 6, 21)))
        assert d['day_length_hours'] == 24.0
        assert d['windows']['golden_hour_evening']['duration_hours'] is None

    def test_json_safe(self):
        d = day_times_to_dict(compute_day_times(SVALBARD, date(2024, 12, 21)))
        assert json.loads(json.dumps(d)) == d


class TestRows:

    def test_row_matches_header(self):
        sample = compute_sun_path(NYC, date(2024, 6, 21), 60)[0]
        assert len(sample_to_row(sample)) == len(SAMPLE_ROW_HEADER)

    def test_night_row_has_empty_shadow_ratio(self):
        path = compute_sun_path(NYC, date(2024, 6, 21), 60, tz=EDT)
        midnight = path[0]
        assert midnight.position.elevation_deg < 0
        assert sample_to_row(midnight)[-1] == ''

    def test_day_row_has_shadow_ratio(self):
        path = compute_sun_path(NYC, date(2024, 6, 21), 60, tz=EDT)
        noonish = path[13]
        assert noonish.position.elevation_deg > 0
        assert float(sample_to_row(noonish)[-1]) > 0


class TestReport:

    def test_report_dict(self):
        instant = datetime(2024, 6, 21, 16, 0, tzinfo=timezone.utc)
        report = build_sun_report(NYC, date(2024, 6, 21), tz=EDT, instant=instant,
                                  sample_interval_minutes=30)
        d = report_to_dict(report)
        assert d['location'] == {'latitude_deg': 40.7128, 'longitude_deg': -74.006}
        assert d['timezone'] == 'UTC-04:00'
        assert d['position']['time'] == '2024-06-21T16:00:00+00:00'
        assert len(d['sun_path']) == 48
        assert json.loads(json.dumps(d)) == d

    def test_report_without_position(self):
        report = build_sun_report(NYC, date(2024, 6, 21), tz=EDT, sample_interval_minutes=60)
        assert report_to_dict(report)['position'] is None

    def test_position_dict_rounded(self):
        report = build_sun_report(NYC, date(2024, 6, 21), tz=EDT,
                                  instant=datetime(2024, 6, 21, 16, tzinfo=timezone.utc),
                                  sample_interval_minutes=60)
        d = position_to_dict(report.position)
        assert set(d) == {'azimuth_deg', 'elevation_deg', 'declination_deg', 'hour_angle_deg'}
