"""Random sources for the simulation core."""
from __future__ import annotations

from random import Random
from typing import Protocol, Sequence, TypeVar

T_co = TypeVar("T_co")


class RandomSource(Protocol):
    """Capability interface every random draw in the core goes through."""

    def randint(self, a: int, b: int) -> int:
        ...

    def random(self) -> float:
        ...


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int | None = None) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()


def roll_percent(rng: RandomSource, percent: float) -> bool:
    """Return True with the given percent chance (0-100)."""
    return rng.random() * 100 < percent


def pick(rng: RandomSource, seq: Sequence[T_co]) -> T_co:
    """Pick an element by drawing an index, so fakes only need randint."""
    if not seq:
        raise ValueError("Cannot pick from an empty sequence.")
    return seq[rng.randint(0, len(seq) - 1)]
