"""Market trades, loan shark, hospital, weapon dealer and stash house transactions."""
from __future__ import annotations

import logging
from typing import List, Tuple

from dopewars.domain.catalog import Substance, Weapon
from dopewars.domain.player import StashHouse, stash_house_price
from dopewars.domain.state import GameState
from dopewars.services.results import (
    CommandResult,
    Rejection,
    blocking_reasons,
    logged,
    rejected,
)

logger = logging.getLogger(__name__)


class TradeService:
    """Validates and applies every transaction that does not advance the day.

    Each ``check_*`` method is a side-effect-free precondition query that
    returns every failing reason; the matching command applies the mutation
    only when that tuple is empty.
    """

    # ------------------------------------------------------------------ Market
    def check_buy(self, state: GameState, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        player = state.player
        reasons: List[Rejection] = []
        if amount <= 0:
            reasons.append(Rejection.NON_POSITIVE_AMOUNT)
        if amount > player.space_available():
            reasons.append(Rejection.INSUFFICIENT_SPACE)
        if amount * state.market.price_of(substance) > player.cash:
            reasons.append(Rejection.INSUFFICIENT_CASH)
        return tuple(reasons)

    def buy(self, state: GameState, substance: Substance, amount: int) -> CommandResult:
        reasons = self.check_buy(state, substance, amount)
        if reasons:
            logger.debug("buy %s x%s rejected: %s", substance.value, amount, reasons)
            return rejected("buy", reasons)
        total_cost = amount * state.market.price_of(substance)
        state.player.cash -= total_cost
        state.player.inventory[substance] += amount
        return logged(state, "buy", [f"Bought {amount} units of {substance.value} for ${total_cost}"])

    def check_sell(self, state: GameState, substance: Substance, amount: int) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        reasons: List[Rejection] = []
        if amount <= 0:
            reasons.append(Rejection.NON_POSITIVE_AMOUNT)
        if amount > state.player.inventory[substance]:
            reasons.append(Rejection.INSUFFICIENT_INVENTORY)
        return tuple(reasons)

    def sell(self, state: GameState, substance: Substance, amount: int) -> CommandResult:
        reasons = self.check_sell(state, substance, amount)
        if reasons:
            logger.debug("sell %s x%s rejected: %s", substance.value, amount, reasons)
            return rejected("sell", reasons)
        total_earned = amount * state.market.price_of(substance)
        state.player.cash += total_earned
        state.player.inventory[substance] -= amount
        return logged(state, "sell", [f"Sold {amount} units of {substance.value} for ${total_earned}"])

    def max_buy_amount(self, state: GameState, substance: Substance) -> int:
        price = state.market.price_of(substance)
        if price <= 0:
            return 0
        return max(0, min(state.player.cash // price, state.player.space_available()))

    def max_sell_amount(self, state: GameState, substance: Substance) -> int:
        return state.player.inventory[substance]

    # -------------------------------------------------------------- Loan shark
    def check_borrow(self, state: GameState, amount: int) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        return (Rejection.NON_POSITIVE_AMOUNT,) if amount <= 0 else ()

    def borrow(self, state: GameState, amount: int) -> CommandResult:
        reasons = self.check_borrow(state, amount)
        if reasons:
            return rejected("borrow", reasons)
        state.player.cash += amount
        state.player.debt += amount
        return logged(
            state, "borrow", [f"You borrowed ${amount}, your debt is now ${state.player.debt}"]
        )

    def check_repay(self, state: GameState, amount: int) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        reasons: List[Rejection] = []
        if amount <= 0:
            reasons.append(Rejection.NON_POSITIVE_AMOUNT)
        if amount > state.player.cash:
            reasons.append(Rejection.INSUFFICIENT_CASH)
        if amount > state.player.debt:
            reasons.append(Rejection.EXCEEDS_DEBT)
        return tuple(reasons)

    def repay(self, state: GameState, amount: int) -> CommandResult:
        reasons = self.check_repay(state, amount)
        if reasons:
            return rejected("repay", reasons)
        state.player.cash -= amount
        state.player.debt -= amount
        return logged(state, "repay", [f"You repaid ${amount}, your debt is now ${state.player.debt}"])

    # ---------------------------------------------------------------- Hospital
    def heal_cost(self, state: GameState) -> int:
        missing = max(0, state.config.max_health - state.player.health)
        return missing * state.config.heal_cost_per_point

    def check_heal(self, state: GameState) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        return (Rejection.INSUFFICIENT_CASH,) if state.player.cash < self.heal_cost(state) else ()

    def heal(self, state: GameState) -> CommandResult:
        reasons = self.check_heal(state)
        if reasons:
            return rejected("heal", reasons)
        if state.player.health >= state.config.max_health:
            return logged(state, "heal", ["You're already at full health."])
        cost = self.heal_cost(state)
        state.player.cash -= cost
        state.player.health = state.config.max_health
        return logged(state, "heal", [f"You've been treated for ${cost} and are now at full health!"])

    # ----------------------------------------------------------------- Weapons
    def check_buy_weapon(self, state: GameState, weapon: Weapon) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if not state.config.weapons_enabled:
            return (Rejection.FEATURE_DISABLED,)
        if state.player.cash < state.config.weapon_prices[weapon]:
            return (Rejection.INSUFFICIENT_CASH,)
        return ()

    def buy_weapon(self, state: GameState, weapon: Weapon) -> CommandResult:
        reasons = self.check_buy_weapon(state, weapon)
        if reasons:
            return rejected("buy weapon", reasons)
        price = state.config.weapon_prices[weapon]
        player = state.player
        player.cash -= price
        player.weapons[weapon] += 1
        messages = [f"You bought a {weapon.value} for ${price}."]
        if player.active_weapon is None:
            player.active_weapon = weapon
            messages.append(f"You equipped the {weapon.value}.")
        return logged(state, "buy weapon", messages)

    def check_equip_weapon(self, state: GameState, weapon: Weapon) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if not state.config.weapons_enabled:
            return (Rejection.FEATURE_DISABLED,)
        if state.player.weapons.get(weapon, 0) <= 0:
            return (Rejection.WEAPON_NOT_OWNED,)
        return ()

    def equip_weapon(self, state: GameState, weapon: Weapon) -> CommandResult:
        reasons = self.check_equip_weapon(state, weapon)
        if reasons:
            return rejected("equip weapon", reasons)
        state.player.active_weapon = weapon
        return logged(state, "equip weapon", [f"You equipped the {weapon.value}."])

    # ------------------------------------------------------------ Stash houses
    def stash_house_price(self, state: GameState) -> int:
        return stash_house_price(state.config, state.player.current_location)

    def check_buy_stash_house(self, state: GameState) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if not state.config.stash_houses_enabled:
            return (Rejection.FEATURE_DISABLED,)
        reasons: List[Rejection] = []
        if state.player.owns_stash_house(state.player.current_location):
            reasons.append(Rejection.STASH_HOUSE_OWNED)
        if state.player.cash < self.stash_house_price(state):
            reasons.append(Rejection.INSUFFICIENT_CASH)
        return tuple(reasons)

    def buy_stash_house(self, state: GameState) -> CommandResult:
        reasons = self.check_buy_stash_house(state)
        if reasons:
            return rejected("buy stash house", reasons)
        location = state.player.current_location
        price = self.stash_house_price(state)
        state.player.cash -= price
        state.player.stash_houses[location] = StashHouse(
            location=location, capacity=state.config.stash_house_capacity
        )
        logger.info("stash house bought in %s for %s", location.value, price)
        return logged(state, "buy stash house", [f"You bought a stash house in {location.value} for ${price}."])

    def check_stash_deposit(
        self, state: GameState, substance: Substance, amount: int
    ) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if not state.config.stash_houses_enabled:
            return (Rejection.FEATURE_DISABLED,)
        stash = state.player.stash_house_here()
        if stash is None:
            return (Rejection.NO_STASH_HOUSE,)
        reasons: List[Rejection] = []
        if amount <= 0:
            reasons.append(Rejection.NON_POSITIVE_AMOUNT)
        if amount > state.player.inventory[substance]:
            reasons.append(Rejection.INSUFFICIENT_INVENTORY)
        if amount > stash.space_available():
            reasons.append(Rejection.INSUFFICIENT_STASH_SPACE)
        return tuple(reasons)

    def stash_deposit(self, state: GameState, substance: Substance, amount: int) -> CommandResult:
        reasons = self.check_stash_deposit(state, substance, amount)
        if reasons:
            return rejected("deposit", reasons)
        stash = self._stash_here(state)
        state.player.inventory[substance] -= amount
        stash.inventory[substance] += amount
        return logged(
            state, "deposit", [f"You stashed {amount} units of {substance.value} in {stash.location.value}."]
        )

    def check_stash_withdraw(
        self, state: GameState, substance: Substance, amount: int
    ) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if not state.config.stash_houses_enabled:
            return (Rejection.FEATURE_DISABLED,)
        stash = state.player.stash_house_here()
        if stash is None:
            return (Rejection.NO_STASH_HOUSE,)
        reasons: List[Rejection] = []
        if amount <= 0:
            reasons.append(Rejection.NON_POSITIVE_AMOUNT)
        if amount > stash.inventory[substance]:
            reasons.append(Rejection.INSUFFICIENT_STASH_INVENTORY)
        if amount > state.player.space_available():
            reasons.append(Rejection.INSUFFICIENT_SPACE)
        return tuple(reasons)

    def stash_withdraw(self, state: GameState, substance: Substance, amount: int) -> CommandResult:
        reasons = self.check_stash_withdraw(state, substance, amount)
        if reasons:
            return rejected("withdraw", reasons)
        stash = self._stash_here(state)
        stash.inventory[substance] -= amount
        state.player.inventory[substance] += amount
        return logged(
            state, "withdraw", [f"You took {amount} units of {substance.value} from your stash."]
        )

    @staticmethod
    def _stash_here(state: GameState) -> StashHouse:
        stash = state.player.stash_house_here()
        assert stash is not None
        return stash
