"""
Exponential scaling of unbounded series.

An ExpScaler tracks a time-decayed average and a decaying running maximum of
the absolute deviation from it, and maps values into roughly [-3, 3]. Scaling
always uses the state from before a value is folded in, so a value never
contributes to its own normalization.
"""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Mapping, Optional

from ..config.defaults import ScalerParams
from ..data.models import Tick
from ..errors import TemporalDataError
from ..utils.time import to_seconds

# Scaled output is clipped at this many ranges from the average
CLIP_RANGES = 3.0

TICK_FIELDS = ("v", "vw", "o", "c", "h", "l", "n")


def clip(value: float, bound: float) -> float:
    """Clamp a value to [-bound, bound]."""
    return max(-bound, min(bound, value))


def _check_decay(name: str, decay: float) -> None:
    if not 0 < decay <= 1:
        raise ValueError(f"{name} must be in (0, 1], got {decay}")


@dataclass
class ExpScaler:
    """Decaying average and range of a scalar series."""
    average: float
    average_decay: float
    range: float
    range_decay: float

    def __post_init__(self):
        _check_decay("average_decay", self.average_decay)
        _check_decay("range_decay", self.range_decay)
        if not self.range >= 0:
            raise ValueError(f"range must be non-negative, got {self.range}")

    @classmethod
    def start(cls, value: float, average_decay: float, range_decay: float) -> "ExpScaler":
        """Create a scaler seeded at `value` with no observed variation."""
        return cls(average=value, average_decay=average_decay, range=0.0, range_decay=range_decay)

    def scale(self, value: float) -> float:
        """
        Scale a value according to the current window.

        Returns 0.0 before any variation has been observed and for
        non-finite values.
        """
        if self.range == 0 or not math.isfinite(value):
            return 0.0
        return clip(value - self.average, CLIP_RANGES * self.range) / self.range

    def update(self, value: float, elapsed: float) -> None:
        """
        Fold a value into the window.

        Args:
            value: New observation; non-finite values are ignored
            elapsed: Seconds since the previous observation
        """
        if not math.isfinite(value):
            return
        if not math.isfinite(self.average):
            # Seeded from a malformed observation
            self.average = value
            return
        self.range = max(self.range, abs(value - self.average)) * self.range_decay
        old_proportion = self.average_decay ** elapsed
        self.average = (1.0 - old_proportion) * value + old_proportion * self.average

    def tick(self, value: float, elapsed: float) -> float:
        """Scale a value with the prior state, then fold it in."""
        scaled = self.scale(value)
        self.update(value, elapsed)
        return scaled


class TickExpScaler:
    """An exponential scaler per tick field, sharing one clock."""
    t: datetime
    v: ExpScaler
    vw: ExpScaler
    o: ExpScaler
    c: ExpScaler
    h: ExpScaler
    l: ExpScaler
    n: ExpScaler

    def __init__(self, t: datetime, scalers: Mapping[str, ExpScaler]):
        missing = [name for name in TICK_FIELDS if name not in scalers]
        if missing:
            raise ValueError(f"Missing scalers for tick fields: {', '.join(missing)}")
        self.t = t
        for name in TICK_FIELDS:
            setattr(self, name, scalers[name])

    @classmethod
    def from_base(cls, t: datetime, base: ExpScaler) -> "TickExpScaler":
        """Create a tick scaler whose fields are independent copies of `base`."""
        return cls(t, {name: replace(base) for name in TICK_FIELDS})

    @classmethod
    def start(cls, tick: Tick, average_decay: float, range_decay: float) -> "TickExpScaler":
        """Create a tick scaler with every field seeded from `tick`."""
        return cls(tick.t, {
            name: ExpScaler.start(getattr(tick, name), average_decay, range_decay)
            for name in TICK_FIELDS
        })

    def scale(self, tick: Tick) -> Tick:
        """Scale a tick of data; the timestamp is kept."""
        return Tick(t=tick.t, **{name: getattr(self, name).scale(getattr(tick, name))
                                 for name in TICK_FIELDS})

    def update_elapsed(self, tick: Tick, elapsed: float) -> None:
        """Fold a tick into every field scaler with an explicit elapsed time."""
        for name in TICK_FIELDS:
            getattr(self, name).update(getattr(tick, name), elapsed)
        self.t = max(self.t, tick.t)

    def update(self, tick: Tick) -> None:
        """
        Fold a tick into every field scaler.

        Raises:
            TemporalDataError: If the tick is older than the last one seen
        """
        if tick.t < self.t:
            raise TemporalDataError(
                f"Tick at {tick.t.isoformat()} precedes scaler time {self.t.isoformat()}",
                timestamp=tick.t,
                expected_timestamp=self.t,
            )
        self.update_elapsed(tick, to_seconds(tick.t - self.t))

    def tick(self, tick: Tick) -> Tick:
        """Scale a tick with the prior state, then fold it in."""
        scaled = self.scale(tick)
        self.update(tick)
        return scaled

    def tick_elapsed(self, tick: Tick, elapsed: timedelta) -> Tick:
        """Scale a tick, then fold it in with an explicit elapsed time."""
        scaled = self.scale(tick)
        self.update_elapsed(tick, to_seconds(elapsed))
        return scaled


def exp_scale_ticks(ticks: Iterable[Tick], params: Optional[ScalerParams] = None) -> Iterator[Tick]:
    """
    Lazily scale a tick stream, seeding the scaler from its first tick.

    Args:
        ticks: Ticks in non-decreasing time order
        params: Decay parameters

    Yields:
        Scaled ticks, one per input tick
    """
    params = params or ScalerParams()
    scaler = None
    for tick in ticks:
        if scaler is None:
            scaler = TickExpScaler.start(tick, params.average_decay, params.range_decay)
        yield scaler.tick(tick)
