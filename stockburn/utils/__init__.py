"""
Utility functions module.

Trading calendar and iteration helpers shared across the pipeline.

Time Semantics:
- All timestamps are timezone-aware UTC datetimes
- The trading session is a fixed UTC window, 14:30 to 21:00 inclusive
- Elapsed time between observations is measured in float seconds
"""

from .iterators import PeekableIterator
from .time import (
    TradingDays,
    TradingMinuteCursor,
    TradingMinutes,
    is_trading_day,
    is_trading_minute,
    to_seconds,
)

__all__ = [
    "PeekableIterator",
    "TradingDays",
    "TradingMinutes",
    "TradingMinuteCursor",
    "is_trading_day",
    "is_trading_minute",
    "to_seconds",
]
