"""Core primitives shared by the domain and service layers."""

from .rng import RNG, RandomSource, pick, roll_percent
from .types import Edition, GameStatus, PoliceChoice

__all__ = [
    "RNG",
    "RandomSource",
    "pick",
    "roll_percent",
    "Edition",
    "GameStatus",
    "PoliceChoice",
]
