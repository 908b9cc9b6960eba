# The random source that hands out priorities to keys inserted without one.
from __future__ import annotations
import numpy as np

MAX_PRIORITY = int(np.iinfo(np.int32).max)

class PriorityGenerator:
    """Draws priorities uniformly from [0, MAX_PRIORITY). Each tree owns one, and the seed can only be set when it is created."""
    def __init__(self, seed: int | None = None):
        self._rng = np.random.default_rng(seed)

    def next(self) -> int:
        return int(self._rng.integers(0, MAX_PRIORITY))
