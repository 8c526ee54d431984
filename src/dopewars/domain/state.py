"""Domain-level state tracking."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from dopewars.core.rng import RandomSource
from dopewars.core.types import GameStatus
from dopewars.domain.catalog import Location
from dopewars.domain.config import GameConfig
from dopewars.domain.market import Market
from dopewars.domain.player import Player

INTRO_MESSAGES: tuple[str, ...] = (
    "Welcome to DopeWars!",
    "You have {days} days to make as much money as possible.",
    "Buy low, sell high, and watch out for the cops!",
)


class EncounterOutcome(str, Enum):
    FIGHT_WON = "fight_won"
    FIGHT_LOST = "fight_lost"
    RAN_AWAY = "ran_away"
    CAUGHT = "caught"
    BRIBE_ACCEPTED = "bribe_accepted"
    BRIBE_REJECTED = "bribe_rejected"
    SURRENDERED = "surrendered"
    NO_CONTRABAND = "no_contraband"
    GRENADE_ESCAPE = "grenade_escape"
    GRENADE_FAILED = "grenade_failed"


@dataclass(slots=True)
class PoliceEncounter:
    """A police stop waiting for the player's choice; the trip is on hold."""

    origin: Location
    destination: Location
    day: int


@dataclass
class GameState:
    """Everything one running game owns."""

    config: GameConfig
    rng: RandomSource
    player: Player
    market: Market
    status: GameStatus = "running"
    game_over_reason: str | None = None
    message_log: List[str] = field(default_factory=list)
    pending_encounter: PoliceEncounter | None = None
    last_encounter_outcome: EncounterOutcome | None = None

    @classmethod
    def new(cls, config: GameConfig, rng: RandomSource, *, restarted: bool = False) -> "GameState":
        """Build a fresh game with opening prices already generated."""
        state = cls(
            config=config,
            rng=rng,
            player=Player.new(config),
            market=Market(config=config, rng=rng),
        )
        state.message_log.extend(intro_messages(config))
        if restarted:
            state.message_log.append("Game restarted!")
        state.market.generate_prices()
        state.message_log.extend(state.market.events)
        return state

    @property
    def is_running(self) -> bool:
        return self.status == "running"

    def log(self, message: str) -> None:
        self.message_log.append(message)


def intro_messages(config: GameConfig) -> List[str]:
    return [line.format(days=config.day_limit) for line in INTRO_MESSAGES]
