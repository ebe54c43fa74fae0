"""Second-order time-weighted random walk for synthetic prices"""

from dataclasses import dataclass

import numpy as np

from ..config.defaults import PriceWalkParams
from .base import Normal, TimedGen


def random_walk_step(price: float, vel: float, acc: float, elapsed: float,
                     jerk: float, jitter: float) -> tuple[float, float, float]:
    """
    Advance a second-order random walk by one step

    acc += dt * jerk; vel += dt * acc; price += dt * vel + jitter

    Args:
        price: Current price
        vel: Current price velocity, per second
        acc: Current price acceleration, per second squared
        elapsed: Step length in seconds
        jerk: Sampled acceleration noise
        jitter: Sampled price noise, not time-scaled

    Returns:
        Tuple of (price, vel, acc) after the step
    """
    acc = acc + elapsed * jerk
    vel = vel + elapsed * acc
    price = price + elapsed * vel + jitter
    return price, vel, acc


@dataclass
class DistGen2(TimedGen):
    """Price generator driven by Gaussian jerk and jitter"""
    rng: np.random.Generator
    price: float
    jitter: Normal
    vel: float
    acc: float
    jerk: Normal

    @classmethod
    def from_params(cls, params: PriceWalkParams, rng: np.random.Generator) -> "DistGen2":
        return cls(
            rng=rng,
            price=params.initial_price,
            jitter=Normal(0.0, params.jitter_std),
            vel=params.velocity,
            acc=params.acceleration,
            jerk=Normal(0.0, params.jerk_std),
        )

    def next_after(self, elapsed: float) -> float:
        jerk = self.jerk.sample(self.rng)
        jitter = self.jitter.sample(self.rng)
        self.price, self.vel, self.acc = random_walk_step(
            self.price, self.vel, self.acc, elapsed, jerk, jitter
        )
        return self.price
