"""Injectable random source for jitter and random colours.

Anything with a `next_float()` method returning a float in [0, 1) works.
NumpyRandom wraps numpy's Generator; pass a seed for reproducible output.
"""

from __future__ import annotations

from typing import Protocol

import numpy as np


class RandomSource(Protocol):
    def next_float(self) -> float: ...


class NumpyRandom:
    """RandomSource backed by np.random.default_rng."""

    def __init__(self, seed: int | None = None):
        self.seed = seed
        self._gen = np.random.default_rng(seed)

    def next_float(self) -> float:
        return float(self._gen.random())


def resolve(rng: RandomSource | None) -> RandomSource:
    """Return rng, or a fresh unseeded NumpyRandom when None."""
    return rng if rng is not None else NumpyRandom()


def uniform(rng: RandomSource, low: float, high: float) -> float:
    """Draw from [low, high) using only the RandomSource protocol."""
    return low + (high - low) * rng.next_float()
