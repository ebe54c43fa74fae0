"""
Trading calendar and time conversion utilities.

This module enumerates valid trading days and trading minutes. Everything
here is a pure function of a date or timestamp; the iterables are restartable
and the cursor is an ordinary copyable object, so a generator driven by it
can be cloned.
"""

from collections.abc import Container
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterator, Optional

# Nominally 09:30-16:00 exchange time, pinned to a fixed UTC offset
SESSION_OPEN = time(14, 30)
SESSION_CLOSE = time(21, 0)
MINUTE = timedelta(minutes=1)
WEEKEND = (5, 6)


def to_seconds(duration: timedelta) -> float:
    """
    Convert a duration to float seconds.

    Args:
        duration: Time difference

    Returns:
        Duration in seconds, fractional part included
    """
    return duration / timedelta(seconds=1)


def is_trading_day(day: date, holidays: Optional[Container] = None) -> bool:
    """
    Check whether a calendar date is a trading day.

    Saturdays and Sundays are never trading days. Exchange holidays are not
    built in; pass them through `holidays` to exclude them.

    Args:
        day: Calendar date
        holidays: Optional container of additional non-trading dates

    Returns:
        True if the market is open on this date
    """
    if day.weekday() in WEEKEND:
        return False
    if holidays is not None and day in holidays:
        return False
    return True


def session_bounds(day: date) -> tuple[datetime, datetime]:
    """Get the UTC opening and closing minute of a day's session."""
    return (
        datetime.combine(day, SESSION_OPEN, tzinfo=timezone.utc),
        datetime.combine(day, SESSION_CLOSE, tzinfo=timezone.utc),
    )


def is_trading_minute(ts: datetime, holidays: Optional[Container] = None) -> bool:
    """
    Check whether a timestamp lies inside the trading session.

    The session is half-open over [14:30, 21:00) UTC except that the closing
    minute itself, 21:00:00 exactly, is included.

    Args:
        ts: Timezone-aware timestamp (naive timestamps are taken as UTC)
        holidays: Optional container of additional non-trading dates

    Returns:
        True if the timestamp is a valid trading minute
    """
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=timezone.utc)
    else:
        ts = ts.astimezone(timezone.utc)

    if not is_trading_day(ts.date(), holidays):
        return False

    open_ts, close_ts = session_bounds(ts.date())
    return open_ts <= ts < close_ts or ts == close_ts


class TradingDays:
    """Infinite, strictly increasing trading days on or after a start date."""

    def __init__(self, start: date, holidays: Optional[Container] = None):
        self.start = start
        self.holidays = holidays

    def __iter__(self) -> Iterator[date]:
        day = self.start
        while True:
            if is_trading_day(day, self.holidays):
                yield day
            day += timedelta(days=1)


class TradingMinutes:
    """One-minute UTC timestamps from session open to close, inclusive."""

    def __init__(self, day: date, holidays: Optional[Container] = None):
        self.day = day
        self.holidays = holidays

    def __iter__(self) -> Iterator[datetime]:
        if not is_trading_day(self.day, self.holidays):
            return
        ts, close_ts = session_bounds(self.day)
        while ts <= close_ts:
            yield ts
            ts += MINUTE

    def __len__(self) -> int:
        if not is_trading_day(self.day, self.holidays):
            return 0
        open_ts, close_ts = session_bounds(self.day)
        return int((close_ts - open_ts) / MINUTE) + 1


class TradingMinuteCursor:
    """
    Iterator over every trading minute of every trading day from `start`.

    Unlike a chain of generators, the cursor holds only a timestamp, so it
    can be copied along with whatever consumes it.
    """

    def __init__(self, start: date, holidays: Optional[Container] = None):
        self.holidays = holidays
        day = start
        while not is_trading_day(day, holidays):
            day += timedelta(days=1)
        self.next_ts = session_bounds(day)[0]

    def __iter__(self) -> "TradingMinuteCursor":
        return self

    def __next__(self) -> datetime:
        ts = self.next_ts
        _, close_ts = session_bounds(ts.date())
        if ts < close_ts:
            self.next_ts = ts + MINUTE
        else:
            day = ts.date() + timedelta(days=1)
            while not is_trading_day(day, self.holidays):
                day += timedelta(days=1)
            self.next_ts = session_bounds(day)[0]
        return ts
