"""UI-agnostic game core: the single owner of one running game."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Tuple

from dopewars.core.rng import RNG, RandomSource
from dopewars.core.types import GameStatus, PoliceChoice
from dopewars.domain.catalog import Location, Substance, Weapon
from dopewars.domain.config import GameConfig
from dopewars.domain.market import PriceTrend
from dopewars.domain.state import EncounterOutcome, GameState, PoliceEncounter
from dopewars.services.police_service import PoliceService
from dopewars.services.results import CommandResult, Rejection, accepted
from dopewars.services.trade_service import TradeService
from dopewars.services.travel_service import TravelService

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StashHouseView:
    location: Location
    capacity: int
    inventory: Dict[Substance, int]


@dataclass(slots=True)
class PlayerView:
    """Read-only snapshot of the player for presentation."""

    cash: int
    debt: int
    day: int
    day_limit: int
    health: int
    location: Location
    inventory: Dict[Substance, int]
    space_available: int
    weapons: Dict[Weapon, int]
    active_weapon: Weapon | None
    stash_houses: Dict[Location, StashHouseView] = field(default_factory=dict)


@dataclass(slots=True)
class MarketView:
    prices: Dict[Substance, int]
    price_history: Dict[Substance, Tuple[int, ...]]
    events: Tuple[str, ...]


@dataclass(slots=True)
class FinalSummary:
    reason: str | None
    days_survived: int
    cash: int
    debt: int
    net_worth: int
    inventory: Dict[Substance, int]


class GameCore:
    """
    Command/query facade over one game.

    Responsibilities:
    - Own the GameState; nothing else mutates it
    - Route commands to the trade and travel services
    - Run the game-over check after every command
    - Expose snapshots, the message log and the pending police encounter

    Non-responsibilities (handled by presentation layer):
    - Parsing input or rendering output
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: RandomSource | None = None,
        *,
        trade_service: TradeService | None = None,
        travel_service: TravelService | None = None,
    ) -> None:
        self._config = config or GameConfig.extended()
        self._rng = rng if rng is not None else RNG()
        self._trade = trade_service or TradeService()
        self._travel = travel_service or TravelService(PoliceService())
        self._state = GameState.new(self._config, self._rng)

    # ----------------------------------------------------------------- Queries
    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def status(self) -> GameStatus:
        return self._state.status

    @property
    def game_over_reason(self) -> str | None:
        return self._state.game_over_reason

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(self._state.message_log)

    @property
    def pending_encounter(self) -> PoliceEncounter | None:
        return self._state.pending_encounter

    @property
    def last_encounter_outcome(self) -> EncounterOutcome | None:
        return self._state.last_encounter_outcome

    def player_view(self) -> PlayerView:
        player = self._state.player
        return PlayerView(
            cash=player.cash,
            debt=player.debt,
            day=player.day,
            day_limit=self._config.day_limit,
            health=player.health,
            location=player.current_location,
            inventory=dict(player.inventory),
            space_available=max(0, player.space_available()),
            weapons=dict(player.weapons),
            active_weapon=player.active_weapon,
            stash_houses={
                location: StashHouseView(
                    location=location, capacity=stash.capacity, inventory=dict(stash.inventory)
                )
                for location, stash in player.stash_houses.items()
            },
        )

    def market_view(self) -> MarketView:
        market = self._state.market
        return MarketView(
            prices=dict(market.prices),
            price_history={substance: tuple(history) for substance, history in market.price_history.items()},
            events=tuple(market.events),
        )

    def price_trend(self, substance: Substance) -> PriceTrend | None:
        return self._state.market.trend(substance)

    def max_buy_amount(self, substance: Substance) -> int:
        return self._trade.max_buy_amount(self._state, substance)

    def max_sell_amount(self, substance: Substance) -> int:
        return self._trade.max_sell_amount(self._state, substance)

    def heal_cost(self) -> int:
        return self._trade.heal_cost(self._state)

    def stash_house_price(self) -> int:
        return self._trade.stash_house_price(self._state)

    def final_summary(self) -> FinalSummary:
        player = self._state.player
        return FinalSummary(
            reason=self._state.game_over_reason,
            days_survived=player.day,
            cash=player.cash,
            debt=player.debt,
            net_worth=player.net_worth(),
            inventory={substance: qty for substance, qty in player.inventory.items() if qty > 0},
        )

    # -------------------------------------------------- Precondition queries
    def check_buy(self, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_buy(self._state, substance, amount)

    def check_sell(self, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_sell(self._state, substance, amount)

    def check_borrow(self, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_borrow(self._state, amount)

    def check_repay(self, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_repay(self._state, amount)

    def check_heal(self) -> Tuple[Rejection, ...]:
        return self._trade.check_heal(self._state)

    def check_buy_weapon(self, weapon: Weapon) -> Tuple[Rejection, ...]:
        return self._trade.check_buy_weapon(self._state, weapon)

    def check_equip_weapon(self, weapon: Weapon) -> Tuple[Rejection, ...]:
        return self._trade.check_equip_weapon(self._state, weapon)

    def check_buy_stash_house(self) -> Tuple[Rejection, ...]:
        return self._trade.check_buy_stash_house(self._state)

    def check_stash_deposit(self, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_stash_deposit(self._state, substance, amount)

    def check_stash_withdraw(self, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        return self._trade.check_stash_withdraw(self._state, substance, amount)

    def check_travel(self, destination: Location) -> Tuple[Rejection, ...]:
        return self._travel.check_travel(self._state, destination)

    def check_resolve_police_encounter(
        self, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> Tuple[Rejection, ...]:
        return self._travel.check_resolve_encounter(self._state, choice, bribe_amount)

    # ---------------------------------------------------------------- Commands
    def buy(self, substance: Substance, amount: int) -> CommandResult:
        return self._run(self._trade.buy, substance, amount)

    def sell(self, substance: Substance, amount: int) -> CommandResult:
        return self._run(self._trade.sell, substance, amount)

    def borrow(self, amount: int) -> CommandResult:
        return self._run(self._trade.borrow, amount)

    def repay(self, amount: int) -> CommandResult:
        return self._run(self._trade.repay, amount)

    def heal(self) -> CommandResult:
        return self._run(self._trade.heal)

    def buy_weapon(self, weapon: Weapon) -> CommandResult:
        return self._run(self._trade.buy_weapon, weapon)

    def equip_weapon(self, weapon: Weapon) -> CommandResult:
        return self._run(self._trade.equip_weapon, weapon)

    def buy_stash_house(self) -> CommandResult:
        return self._run(self._trade.buy_stash_house)

    def stash_deposit(self, substance: Substance, amount: int) -> CommandResult:
        return self._run(self._trade.stash_deposit, substance, amount)

    def stash_withdraw(self, substance: Substance, amount: int) -> CommandResult:
        return self._run(self._trade.stash_withdraw, substance, amount)

    def travel_to(self, destination: Location) -> CommandResult:
        return self._run(self._travel.travel_to, destination)

    def resolve_police_encounter(
        self, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> CommandResult:
        return self._run(self._travel.resolve_encounter, choice, bribe_amount)

    def auto_resolve_police_encounter(self) -> CommandResult:
        return self._run(self._travel.auto_resolve_encounter)

    def restart(self) -> CommandResult:
        """Start over with a fresh player and market; the only way out of game over."""
        logger.info("game restarted")
        self._state = GameState.new(self._config, self._rng, restarted=True)
        return accepted("restart", self._state.message_log)

    # ---------------------------------------------------------------- Internal
    def _run(self, command: Callable[..., CommandResult], *args: object) -> CommandResult:
        result = command(self._state, *args)
        if result.accepted:
            self._check_game_over()
        return result

    def _check_game_over(self) -> None:
        state = self._state
        if not state.is_running:
            return
        if state.player.day > self._config.day_limit:
            reason = f"Time's up! Your {self._config.day_limit} days are over."
        elif state.player.health <= 0:
            reason = "You died from your injuries!"
        else:
            return
        state.status = "game_over"
        state.game_over_reason = reason
        state.pending_encounter = None
        state.log(reason)
        logger.info("game over on day %s: %s", state.player.day, reason)
