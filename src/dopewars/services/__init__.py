"""Service layer exports."""

from .errors import ConfigError, EncounterError, GameCoreError
from .game_core import FinalSummary, GameCore, MarketView, PlayerView, StashHouseView
from .police_service import AUTO_CHOICES, POLICE_CHOICES, PoliceService
from .results import CommandResult, Rejection
from .trade_service import TradeService
from .travel_service import TravelService, accrue_interest

__all__ = [
    "ConfigError",
    "EncounterError",
    "GameCoreError",
    "FinalSummary",
    "GameCore",
    "MarketView",
    "PlayerView",
    "StashHouseView",
    "AUTO_CHOICES",
    "POLICE_CHOICES",
    "PoliceService",
    "CommandResult",
    "Rejection",
    "TradeService",
    "TravelService",
    "accrue_interest",
]
