"""Central RNG helpers using PCG64DXSM."""
from __future__ import annotations
from typing import MutableSequence, Sequence

from numpy.random import Generator, PCG64DXSM


def make_rng(seed: int | Sequence[int]) -> Generator:
    return Generator(PCG64DXSM(seed))


class Randomizer:
    """Explicitly owned random stream shared by every stage of a run.

    Not thread-safe: a run draws from a single stream in a fixed order, so
    reproducing a run only needs the same seed.
    """

    def __init__(self, generator: Generator):
        self.generator = generator

    @classmethod
    def from_seed(cls, seed: int | Sequence[int]) -> "Randomizer":
        return cls(make_rng(seed))

    def probability(self) -> float:
        """Uniform draw in [0, 1)."""
        return float(self.generator.random())

    def integer(self, low: int, high: int) -> int:
        """Uniform integer in the inclusive range [low, high]."""
        if high < low:
            raise ValueError(f"empty range [{low}, {high}]")
        return int(self.generator.integers(low, high, endpoint=True))

    def distinct_pair(self, low: int, high: int) -> tuple[int, int]:
        """Two different integers drawn uniformly from [low, high]."""
        if high <= low:
            raise ValueError(f"need at least two values in [{low}, {high}]")
        first = self.integer(low, high)
        second = self.integer(low, high - 1)
        if second >= first:
            second += 1
        return first, second

    def shuffle(self, items: MutableSequence) -> None:
        self.generator.shuffle(items)
