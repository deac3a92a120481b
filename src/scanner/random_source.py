from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    def next(self) -> float:
        """Return a float uniformly drawn from [0, 1)"""
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy Generator, reproducible for a fixed seed"""

    def __init__(self, seed: Optional[int] = None):
        self.rng = np.random.default_rng(seed)

    def next(self) -> float:
        return float(self.rng.random())
