"""Compound volume and trade count generation"""

from dataclasses import dataclass

import numpy as np

from ..config.defaults import VolumeParams
from .base import Normal, TimedGen


def compound_volume(trade_rate: float, avg_trade_size: float, elapsed: float) -> tuple[float, float]:
    """
    Combine a trade rate and an average trade size into a volume

    Both inputs are clamped to be non-negative. The trade count is the rate
    times the elapsed time, rounded to the nearest integer.

    Args:
        trade_rate: Trades per second
        avg_trade_size: Shares per trade
        elapsed: Interval length in seconds

    Returns:
        Tuple of (volume, trade count); exactly (0.0, 0.0) when no trade rounds in
    """
    count = float(round(max(trade_rate, 0.0) * elapsed))
    if count == 0:
        return 0.0, 0.0
    return count * max(avg_trade_size, 0.0), count


@dataclass
class VolumeGen(TimedGen):
    """Volume generator: a Gaussian trade rate times a Gaussian trade size"""
    rng: np.random.Generator
    average: Normal
    no_trades: Normal

    @classmethod
    def from_params(cls, params: VolumeParams, rng: np.random.Generator) -> "VolumeGen":
        return cls(
            rng=rng,
            average=Normal(params.trade_size_mean, params.trade_size_std),
            no_trades=Normal(params.trade_rate_mean, params.trade_rate_std),
        )

    def next_after(self, elapsed: float) -> tuple[float, float]:
        trade_rate = self.no_trades.sample(self.rng)
        avg_trade_size = self.average.sample(self.rng)
        return compound_volume(trade_rate, avg_trade_size, elapsed)
