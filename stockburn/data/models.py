"""
Canonical data models for tick data.

This module defines the immutable tick record shared by the generator, the
scaler, the file reader and the batcher, and the prediction view a model is
trained to produce.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar


@dataclass(frozen=True)
class Tick:
    """One time-bucketed OHLCV observation with VWAP and trade count."""
    t: datetime        # UTC interval start
    v: float           # Volume traded
    vw: float          # Volume weighted average price
    o: float           # Opening price
    c: float           # Closing price
    h: float           # High price
    l: float           # Low price
    n: float           # Number of trades

    # Fields fed to a network; time is not one of them
    NN_FIELDS: ClassVar[int] = 7

    def push_tick(self, dest: list) -> None:
        """Append the tick's network inputs to `dest`. Always writes NN_FIELDS values."""
        dest.append(self.o)
        dest.append(self.h)
        dest.append(self.l)
        dest.append(self.c)
        dest.append(self.v)
        dest.append(self.vw)
        dest.append(self.n)

    def pred(self) -> "Prediction":
        """Get the prediction corresponding to this tick."""
        return Prediction(c=self.c, v=self.v)


@dataclass(frozen=True)
class Prediction:
    """The fields of a tick a model is trained to predict."""
    c: float           # Closing price
    v: float           # Volume traded

    NN_FIELDS: ClassVar[int] = 2

    def push_pred(self, dest: list) -> None:
        """Append the prediction's values to `dest`. Always writes NN_FIELDS values."""
        dest.append(self.c)
        dest.append(self.v)
