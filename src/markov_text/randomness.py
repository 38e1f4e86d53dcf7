from __future__ import annotations

from typing import Optional, Protocol

import numpy as np


class RandomSource(Protocol):
    """Uniform integer draws in ``[0, upper)``.

    ``random.Random`` satisfies this protocol as well.
    """

    def randrange(self, upper: int) -> int:
        ...


class NumpyRandomSource:
    """RandomSource backed by a numpy ``Generator``."""

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = np.random.default_rng(seed)

    def randrange(self, upper: int) -> int:
        if upper <= 0:
            raise ValueError("upper must be >= 1")
        return int(self._rng.integers(0, upper))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(seed={self.seed!r})"
