"""Domain models: catalog, configuration, player, market and game state."""

from .catalog import LOCATIONS, SUBSTANCES, WEAPONS, Location, Substance, Weapon
from .config import GameConfig
from .errors import ConfigError, DomainError
from .market import Market, PriceTrend
from .player import Player, StashHouse, stash_house_price
from .state import EncounterOutcome, GameState, PoliceEncounter

__all__ = [
    "LOCATIONS",
    "SUBSTANCES",
    "WEAPONS",
    "Location",
    "Substance",
    "Weapon",
    "GameConfig",
    "ConfigError",
    "DomainError",
    "Market",
    "PriceTrend",
    "Player",
    "StashHouse",
    "stash_house_price",
    "EncounterOutcome",
    "GameState",
    "PoliceEncounter",
]
