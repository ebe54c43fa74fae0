"""Periodic time features for batch rows."""

import math
from datetime import datetime, timedelta, timezone
from typing import Callable, Sequence

from ..utils.time import to_seconds

CLOCK_EPOCH = datetime(2020, 1, 1, 1, 1, 1, tzinfo=timezone.utc)

DEFAULT_CLOCK_PERIODS = (
    timedelta(minutes=5),
    timedelta(minutes=10),
    timedelta(minutes=30),
    timedelta(hours=1),
    timedelta(days=1),
    timedelta(weeks=1),
    timedelta(weeks=4),
    timedelta(days=365),
)

ClockFn = Callable[[datetime, list], None]


def push_clock_period(period: float, time: datetime, dest: list) -> None:
    """
    Append the sine and cosine of a timestamp at a given angular period.

    Args:
        period: Seconds per radian (a full cycle is 2 pi periods)
        time: Timezone-aware timestamp
        dest: Row being built
    """
    scaled = to_seconds(time - CLOCK_EPOCH) / period
    dest.append(math.sin(scaled))
    dest.append(math.cos(scaled))


def clocks(durations: Sequence[timedelta] = DEFAULT_CLOCK_PERIODS) -> tuple[int, ClockFn]:
    """
    Build a time feature function with one sin/cos pair per cycle duration.

    Args:
        durations: Full cycle lengths

    Returns:
        Tuple of (number of features written per call, feature function)
    """
    periods = [to_seconds(duration) / (2.0 * math.pi) for duration in durations]

    def push_clocks(time: datetime, dest: list) -> None:
        for period in periods:
            push_clock_period(period, time, dest)

    return len(periods) * 2, push_clocks
