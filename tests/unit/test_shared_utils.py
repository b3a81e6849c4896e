"""Testes dos utilitários compartilhados (datetime, clock, arredondamento)"""
from datetime import datetime, timezone

import pytest

from ust_weather.shared.utils.clock import ensure_aware, system_clock, to_epoch_ms
from ust_weather.shared.utils.datetime_parser import DateTimeParser
from ust_weather.shared.utils.rounding import round_half_up


class TestDateTimeParser:

    def test_naive_time_is_manila(self):
        parsed = DateTimeParser.parse_forecast_time('2025-06-01T14:00')

        assert parsed.utcoffset().total_seconds() == 8 * 3600
        assert parsed.astimezone(timezone.utc).hour == 6

    def test_z_suffix(self):
        parsed = DateTimeParser.parse_forecast_time('2025-06-01T06:00:00Z')

        assert parsed == datetime(2025, 6, 1, 6, 0, tzinfo=timezone.utc)

    def test_invalid_raises(self):
        with pytest.raises(ValueError):
            DateTimeParser.parse_forecast_time('tomorrow')

    @pytest.mark.parametrize("value", [None, '', 'not-a-date'])
    def test_try_parse_invalid(self, value):
        assert DateTimeParser.try_parse_forecast_time(value) is None

    def test_format_clock_time(self):
        assert DateTimeParser.format_clock_time(datetime(2025, 6, 1, 16, 0, tzinfo=timezone.utc)) == "12:00 AM"


class TestClock:

    def test_system_clock_is_aware(self):
        assert system_clock().tzinfo is not None

    def test_to_epoch_ms(self):
        assert to_epoch_ms(datetime(1970, 1, 1, 0, 0, 1, tzinfo=timezone.utc)) == 1000

    def test_naive_is_utc(self):
        assert to_epoch_ms(datetime(1970, 1, 1, 0, 1)) == 60000

    def test_ensure_aware(self):
        aware = datetime(2025, 6, 1, 5, 30, tzinfo=timezone.utc)

        assert ensure_aware(datetime(2025, 6, 1, 5, 30)) == aware
        assert ensure_aware(aware) is aware


class TestRoundHalfUp:

    @pytest.mark.parametrize("value,expected", [
        (2.5, 3),
        (3.5, 4),
        (2.4, 2),
        (-2.5, -2),
        (0.0, 0),
    ])
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected
