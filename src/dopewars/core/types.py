"""Shared type aliases for the core and domain layers."""
from typing import Literal

GameStatus = Literal["running", "game_over"]
PoliceChoice = Literal["fight", "run", "bribe", "surrender"]
Edition = Literal["basic", "extended"]

__all__ = ["Edition", "GameStatus", "PoliceChoice"]
