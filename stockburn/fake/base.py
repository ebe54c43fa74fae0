"""Distribution parameters and the timed generator interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class Normal:
    """Gaussian distribution parameters."""
    mean: float
    std: float

    def __post_init__(self):
        if not self.std >= 0:
            raise ValueError(f"Standard deviation must be non-negative, got {self.std}")

    def sample(self, rng: np.random.Generator) -> float:
        """Draw one value."""
        return float(rng.normal(self.mean, self.std))


class TimedGen(ABC):
    """
    A generator whose next value depends on the time elapsed since the last one.

    Concrete generators own their RNG; a copy of a generator replays the same
    random stream rather than producing independent randomness.
    """

    @abstractmethod
    def next_after(self, elapsed: float) -> Any:
        """
        Advance the generator.

        Args:
            elapsed: Seconds since the previous value

        Returns:
            The generated value
        """
