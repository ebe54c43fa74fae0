"""
Tests for trading calendar utilities.
"""

import copy
import itertools
from datetime import date, datetime, timedelta, timezone

import pytest

from stockburn.utils.time import (
    TradingDays,
    TradingMinuteCursor,
    TradingMinutes,
    is_trading_day,
    is_trading_minute,
    session_bounds,
    to_seconds,
)


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


class TestToSeconds:
    """Test duration conversion"""

    def test_whole_minutes(self):
        assert to_seconds(timedelta(minutes=1)) == 60.0

    def test_fractional_seconds(self):
        assert to_seconds(timedelta(milliseconds=1500)) == 1.5

    def test_negative_duration(self):
        assert to_seconds(timedelta(seconds=-30)) == -30.0


class TestTradingDays:
    """Test trading day enumeration"""

    def test_weekend_is_not_trading_day(self):
        assert not is_trading_day(date(2020, 10, 10))  # Saturday
        assert not is_trading_day(date(2020, 10, 11))  # Sunday
        assert is_trading_day(date(2020, 10, 12))      # Monday

    def test_holidays_excluded(self):
        assert not is_trading_day(date(2020, 10, 12), holidays={date(2020, 10, 12)})

    def test_skips_weekend_at_start(self):
        days = list(itertools.islice(TradingDays(date(2020, 10, 10)), 3))
        assert days == [date(2020, 10, 12), date(2020, 10, 13), date(2020, 10, 14)]

    def test_week_boundary(self):
        days = list(itertools.islice(TradingDays(date(2020, 10, 15)), 3))
        assert days == [date(2020, 10, 15), date(2020, 10, 16), date(2020, 10, 19)]

    def test_strictly_increasing_weekdays(self):
        days = list(itertools.islice(TradingDays(date(2020, 1, 1)), 100))
        assert all(a < b for a, b in zip(days, days[1:]))
        assert all(day.weekday() < 5 for day in days)

    def test_restartable(self):
        trading_days = TradingDays(date(2020, 10, 10))
        first = list(itertools.islice(trading_days, 5))
        second = list(itertools.islice(trading_days, 5))
        assert first == second

    def test_holidays_skipped(self):
        days = list(itertools.islice(TradingDays(date(2020, 10, 12), holidays={date(2020, 10, 13)}), 2))
        assert days == [date(2020, 10, 12), date(2020, 10, 14)]


class TestTradingMinutes:
    """Test trading minute enumeration"""

    def test_full_session(self):
        minutes = list(TradingMinutes(date(2020, 10, 12)))
        assert len(minutes) == 391
        assert minutes[0] == utc(2020, 10, 12, 14, 30)
        assert minutes[-1] == utc(2020, 10, 12, 21, 0)

    def test_one_minute_spacing(self):
        minutes = list(TradingMinutes(date(2020, 10, 12)))
        assert all(b - a == timedelta(minutes=1) for a, b in zip(minutes, minutes[1:]))

    def test_len(self):
        assert len(TradingMinutes(date(2020, 10, 12))) == 391
        assert len(TradingMinutes(date(2020, 10, 11))) == 0

    def test_non_trading_day_is_empty(self):
        assert list(TradingMinutes(date(2020, 10, 11))) == []

    def test_every_minute_is_trading_minute(self):
        assert all(is_trading_minute(ts) for ts in TradingMinutes(date(2020, 10, 12)))

    def test_session_bounds(self):
        assert session_bounds(date(2020, 10, 12)) == (
            utc(2020, 10, 12, 14, 30),
            utc(2020, 10, 12, 21, 0),
        )


class TestIsTradingMinute:
    """Test trading minute classification"""

    @pytest.mark.parametrize("ts,expected", [
        (utc(2020, 10, 12, 14, 30), True),
        (utc(2020, 10, 12, 14, 29, 59), False),
        (utc(2020, 10, 12, 18, 15, 30), True),
        (utc(2020, 10, 12, 21, 0), True),
        (utc(2020, 10, 12, 21, 0, 30), False),
        (utc(2020, 10, 12, 21, 1), False),
        (utc(2020, 10, 10, 15, 0), False),
    ])
    def test_session_window(self, ts, expected):
        assert is_trading_minute(ts) is expected

    def test_naive_timestamp_taken_as_utc(self):
        assert is_trading_minute(datetime(2020, 10, 12, 14, 30))
        assert not is_trading_minute(datetime(2020, 10, 12, 14, 29))

    def test_other_timezone_converted(self):
        eastern = timezone(timedelta(hours=-4))
        # 10:30 at UTC-4 is 14:30 UTC
        assert is_trading_minute(datetime(2020, 10, 12, 10, 30, tzinfo=eastern))

    def test_holiday(self):
        assert not is_trading_minute(utc(2020, 10, 12, 15, 0), holidays={date(2020, 10, 12)})


class TestTradingMinuteCursor:
    """Test the cross-day trading minute cursor"""

    def test_starts_at_first_session_open(self):
        cursor = TradingMinuteCursor(date(2020, 10, 10))
        assert next(cursor) == utc(2020, 10, 12, 14, 30)

    def test_rolls_over_weekend(self):
        cursor = TradingMinuteCursor(date(2020, 10, 16))
        minutes = list(itertools.islice(cursor, 392))
        assert minutes[390] == utc(2020, 10, 16, 21, 0)
        assert minutes[391] == utc(2020, 10, 19, 14, 30)

    def test_matches_per_day_minutes(self):
        expected = list(TradingMinutes(date(2020, 10, 12))) + list(TradingMinutes(date(2020, 10, 13)))
        assert list(itertools.islice(TradingMinuteCursor(date(2020, 10, 12)), 782)) == expected

    def test_copy_is_independent(self):
        cursor = TradingMinuteCursor(date(2020, 10, 12))
        next(cursor)
        branch = copy.deepcopy(cursor)
        assert next(branch) == next(cursor) == utc(2020, 10, 12, 14, 31)

    def test_holidays_skipped(self):
        cursor = TradingMinuteCursor(date(2020, 10, 12), holidays={date(2020, 10, 12)})
        assert next(cursor) == utc(2020, 10, 13, 14, 30)
