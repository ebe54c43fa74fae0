"""
Synthetic tick assembly.

Each tick covers the interval from its own timestamp to the next timestamp
of the time source. The interval is split into equal sub-steps; each
sub-step draws one price and one volume sample, and the samples are folded
into open/high/low/close, total volume, trade count and VWAP.
"""

import copy
from datetime import date, datetime
from typing import Iterable, Optional, Sequence

import numpy as np

from ..config.defaults import PriceWalkParams, VolumeParams
from ..data.models import Tick
from ..utils.iterators import PeekableIterator
from ..utils.time import TradingMinuteCursor, to_seconds
from .base import TimedGen
from .price import DistGen2
from .volume import VolumeGen

SUBSTEPS = 4
DEFAULT_START = date(2020, 10, 12)


def assemble_tick(t: datetime, prices: Sequence[float], volumes: Sequence[float],
                  counts: Sequence[float], close: float) -> Tick:
    """
    Fold per-sub-step samples into one tick.

    Args:
        t: Interval start
        prices: Price sample per sub-step, in order
        volumes: Volume sample per sub-step
        counts: Trade count sample per sub-step
        close: Close carried from the previous tick, used as VWAP when no volume traded

    Returns:
        The assembled tick
    """
    volume = sum(volumes)
    if volume == 0:
        vwap = close
    else:
        vwap = sum(v * p for v, p in zip(volumes, prices)) / volume
    return Tick(
        t=t,
        v=volume,
        vw=vwap,
        o=prices[0],
        c=prices[-1],
        h=max(prices),
        l=min(prices),
        n=sum(counts),
    )


class TickGen:
    """
    Iterator of synthetic ticks driven by price, volume and time sources.

    The generator is stateful: every tick advances the price walk, the RNGs
    and the time cursor. Use clone() to branch a reproducible copy.
    """

    def __init__(self, price_gen: TimedGen, volume_gen: TimedGen,
                 time_gen: Iterable[datetime], close: float = 0.0):
        self.price_gen = price_gen
        self.volume_gen = volume_gen
        if isinstance(time_gen, PeekableIterator):
            self.time_gen = time_gen
        else:
            self.time_gen = PeekableIterator(time_gen)
        self.close = close

    def __iter__(self) -> "TickGen":
        return self

    def __next__(self) -> Tick:
        t = next(self.time_gen)
        t_next = self.time_gen.peek()
        if t_next is None:
            raise StopIteration

        step = to_seconds(t_next - t) / SUBSTEPS
        prices = []
        volumes = []
        counts = []
        for _ in range(SUBSTEPS):
            prices.append(self.price_gen.next_after(step))
            volume, count = self.volume_gen.next_after(step)
            volumes.append(volume)
            counts.append(count)

        tick = assemble_tick(t, prices, volumes, counts, self.close)
        self.close = tick.c
        return tick

    def clone(self) -> "TickGen":
        """Copy the full generator state. The copy replays the same random stream."""
        return copy.deepcopy(self)


def cubic_fake_ticks(seed: Optional[int] = None,
                     start: Optional[date] = None,
                     price: Optional[PriceWalkParams] = None,
                     volume: Optional[VolumeParams] = None) -> TickGen:
    """
    Create the default synthetic tick generator over the trading-minute timeline.

    Args:
        seed: RNG seed; None draws fresh entropy
        start: First calendar day considered (defaults to 2020-10-12)
        price: Random walk parameters
        volume: Volume distribution parameters

    Returns:
        Infinite tick generator, one tick per trading minute
    """
    price = price or PriceWalkParams()
    volume = volume or VolumeParams()
    price_seed, volume_seed = np.random.SeedSequence(seed).spawn(2)

    return TickGen(
        price_gen=DistGen2.from_params(price, np.random.default_rng(price_seed)),
        volume_gen=VolumeGen.from_params(volume, np.random.default_rng(volume_seed)),
        time_gen=TradingMinuteCursor(start or DEFAULT_START),
        close=price.initial_price,
    )
