"""Synthetic tick data generation, for testing purposes"""

from .base import Normal, TimedGen
from .price import DistGen2, random_walk_step
from .ticks import TickGen, assemble_tick, cubic_fake_ticks
from .volume import VolumeGen, compound_volume

__all__ = [
    "Normal",
    "TimedGen",
    "DistGen2",
    "VolumeGen",
    "TickGen",
    "random_walk_step",
    "compound_volume",
    "assemble_tick",
    "cubic_fake_ticks",
]
