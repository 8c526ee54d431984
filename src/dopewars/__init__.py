"""Turn-based street trading simulation."""

from .domain import GameConfig, Location, Substance, Weapon
from .services import CommandResult, GameCore, Rejection

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "GameCore",
    "CommandResult",
    "Rejection",
    "Location",
    "Substance",
    "Weapon",
    "__version__",
]
