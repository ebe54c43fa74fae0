"""Pytest configuration and shared fixtures."""

import pytest
from datetime import datetime, timedelta, timezone

from stockburn.data.models import Tick


BASE_TIME = datetime(2020, 6, 22, 22, 59, 33, tzinfo=timezone.utc)


def minutes(n: int) -> datetime:
    """Timestamp n minutes after the shared base time."""
    return BASE_TIME + timedelta(minutes=n)


@pytest.fixture
def base_time() -> datetime:
    return BASE_TIME


@pytest.fixture
def fake_stock_1() -> list[Tick]:
    """Stock with ticks at minutes 0, 1, 2, 3 and 5."""
    return [
        Tick(t=minutes(0), o=40.0, h=41.0, l=39.0, c=40.5, v=300.0, vw=39.5, n=2.0),
        Tick(t=minutes(1), o=40.5, h=41.5, l=38.0, c=40.0, v=500.0, vw=40.25, n=4.0),
        Tick(t=minutes(2), o=40.0, h=42.0, l=39.5, c=40.0, v=1000.0, vw=41.25, n=7.0),
        Tick(t=minutes(3), o=40.0, h=41.0, l=39.0, c=40.5, v=300.0, vw=39.5, n=2.0),
        Tick(t=minutes(5), o=40.5, h=41.0, l=39.0, c=40.0, v=500.0, vw=40.5, n=4.0),
    ]


@pytest.fixture
def fake_stock_2() -> list[Tick]:
    """Stock with ticks at minutes 1 through 6."""
    return [
        Tick(t=minutes(1), o=30.0, h=31.0, l=29.0, c=30.5, v=300.0, vw=39.5, n=2.0),
        Tick(t=minutes(2), o=30.5, h=31.5, l=28.0, c=30.0, v=400.0, vw=40.25, n=4.0),
        Tick(t=minutes(3), o=30.0, h=32.0, l=29.5, c=30.0, v=900.0, vw=31.25, n=7.0),
        Tick(t=minutes(4), o=30.0, h=32.0, l=29.0, c=30.5, v=300.0, vw=39.5, n=2.0),
        Tick(t=minutes(5), o=30.5, h=31.0, l=28.0, c=30.0, v=400.0, vw=40.25, n=4.0),
        Tick(t=minutes(6), o=30.0, h=31.0, l=29.5, c=30.0, v=900.0, vw=31.25, n=7.0),
    ]


@pytest.fixture
def additional_data() -> list[list[float]]:
    """Auxiliary rows; the first is wider than three features, the rest narrower."""
    return [
        [1.0, 2.0, 400.0],
        [3.0, 4.0],
        [5.0, 6.0],
        [7.0, 8.0],
        [9.0, 10.0],
        [11.0, 12.0],
        [13.0, 14.0],
    ]


def minute_feature(d: datetime, row: list) -> None:
    """Single time feature: the minute of the hour."""
    row.append(float(d.minute))


@pytest.fixture
def at_minute():
    return minutes


@pytest.fixture
def minute_time_func():
    return minute_feature
