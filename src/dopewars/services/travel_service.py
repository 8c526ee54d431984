"""Travel: the turn-advance operator and its risk events."""
from __future__ import annotations

import logging
from decimal import Decimal
from typing import List, Tuple

from dopewars.core.rng import pick, roll_percent
from dopewars.core.types import PoliceChoice
from dopewars.domain.catalog import SUBSTANCES, Location
from dopewars.domain.state import GameState
from dopewars.services.police_service import PoliceService
from dopewars.services.results import (
    CommandResult,
    Rejection,
    blocking_reasons,
    logged,
    rejected,
)

logger = logging.getLogger(__name__)

BASIC_TRAVEL_OUTCOMES = 10
EXTENDED_TRAVEL_OUTCOMES = 12

POLICE_STOP = 0
MUGGING = 1
INJURY = 2
PRICE_CRASH = 3
PRICE_SPIKE = 4
FOUND_DRUGS = 5


class TravelService:
    """Moves the player, rolls travel events and finalizes the day."""

    def __init__(self, police_service: PoliceService | None = None) -> None:
        self._police = police_service or PoliceService()

    def check_travel(self, state: GameState, destination: Location) -> Tuple[Rejection, ...]:
        blockers = blocking_reasons(state)
        if blockers:
            return blockers
        if destination == state.player.current_location:
            return (Rejection.SAME_LOCATION,)
        return ()

    def travel_to(self, state: GameState, destination: Location) -> CommandResult:
        reasons = self.check_travel(state, destination)
        if reasons:
            return rejected("travel", reasons)
        messages = [f"Traveling to {destination.value}..."]
        outcome_count = (
            EXTENDED_TRAVEL_OUTCOMES if state.config.extended_travel_events else BASIC_TRAVEL_OUTCOMES
        )
        event = state.rng.randint(0, outcome_count - 1)
        logger.debug("travel event roll %s on day %s", event, state.player.day)
        if event == POLICE_STOP:
            if state.config.police_encounters_enabled:
                messages.append("You were stopped by cops!")
                resolution = self._police.begin(state, destination)
                if resolution is None:
                    messages.append("They want to search you. Fight, run, bribe or surrender?")
                    return logged(state, "travel", messages)
                state.last_encounter_outcome, police_messages = resolution
                messages.extend(police_messages)
            else:
                messages.extend(self._police_shakedown(state))
        elif event == MUGGING:
            messages.extend(self._mugging(state))
        elif event == INJURY:
            messages.extend(self._injury(state))
        elif event == PRICE_CRASH and state.config.extended_travel_events:
            messages.extend(self._price_shift(state, crash=True))
        elif event == PRICE_SPIKE and state.config.extended_travel_events:
            messages.extend(self._price_shift(state, crash=False))
        elif event == FOUND_DRUGS and state.config.extended_travel_events:
            messages.extend(self._found_drugs(state))
        else:
            messages.append("Journey was uneventful.")
        messages.extend(self._finish_trip(state, destination))
        return logged(state, "travel", messages)

    def check_resolve_encounter(
        self, state: GameState, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> Tuple[Rejection, ...]:
        return self._police.check_resolve(state, choice, bribe_amount)

    def resolve_encounter(
        self, state: GameState, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> CommandResult:
        """Settle a pending police stop, then complete the interrupted trip.

        The stop only delays the trip: whatever the outcome, the player still
        arrives at the destination and the day advances.
        """
        reasons = self._police.check_resolve(state, choice, bribe_amount)
        if reasons:
            return rejected("resolve encounter", reasons)
        encounter = state.pending_encounter
        assert encounter is not None
        outcome, messages = self._police.resolve(state, choice, bribe_amount)
        state.last_encounter_outcome = outcome
        messages.extend(self._finish_trip(state, encounter.destination))
        return logged(state, "resolve encounter", messages)

    def auto_resolve_encounter(self, state: GameState) -> CommandResult:
        reasons = self._police.check_resolve(state, "fight")
        if reasons:
            return rejected("resolve encounter", reasons)
        return self.resolve_encounter(state, self._police.auto_choice(state))

    # ------------------------------------------------------------ Travel events
    @staticmethod
    def _police_shakedown(state: GameState) -> List[str]:
        messages = ["You were stopped by cops! They confiscated some of your stuff!"]
        substance = pick(state.rng, SUBSTANCES)
        held = state.player.inventory[substance]
        if held > 0:
            confiscated = state.rng.randint(1, held)
            state.player.inventory[substance] -= confiscated
            messages.append(f"They took {confiscated} units of {substance.value}")
        return messages

    @staticmethod
    def _mugging(state: GameState) -> List[str]:
        player = state.player
        messages = ["You were mugged!"]
        if player.active_weapon is not None:
            defend_chance = 30 + player.active_weapon_power(state.config.weapon_power) / 2
            if roll_percent(state.rng, defend_chance):
                damage = state.rng.randint(0, 9)
                player.health = max(0, player.health - damage)
                messages.append(
                    f"You fought them off with your {player.active_weapon.value}! "
                    f"You lost {damage} health points."
                )
                return messages
        lost = min(state.rng.randint(100, 499), player.cash)
        player.cash -= lost
        messages.append(f"You lost ${lost}")
        return messages

    @staticmethod
    def _injury(state: GameState) -> List[str]:
        player = state.player
        damage = state.rng.randint(5, 19)
        player.health -= damage
        messages = ["You got injured during travel!", f"You lost {damage} health points"]
        if player.health <= 0:
            player.health = 0
            messages.append("You're severely injured and need medical attention!")
        return messages

    @staticmethod
    def _price_shift(state: GameState, *, crash: bool) -> List[str]:
        substance = pick(state.rng, SUBSTANCES)
        current = state.market.price_of(substance)
        if crash:
            state.market.set_price(substance, current // 3)
            return [f"A dealer is dumping {substance.value}! The price crashed to ${state.market.price_of(substance)}."]
        state.market.set_price(substance, current * 3)
        return [f"Nobody can find any {substance.value}! The price spiked to ${state.market.price_of(substance)}."]

    @staticmethod
    def _found_drugs(state: GameState) -> List[str]:
        substance = pick(state.rng, SUBSTANCES)
        amount = state.rng.randint(1, 4)
        if amount > state.player.space_available():
            return [f"You found {amount} units of {substance.value} but had no room to carry them."]
        state.player.inventory[substance] += amount
        return [f"You found {amount} units of {substance.value} on the subway!"]

    # --------------------------------------------------------------- Day change
    def _finish_trip(self, state: GameState, destination: Location) -> List[str]:
        player = state.player
        player.current_location = destination
        player.day += 1
        player.debt = accrue_interest(player.debt, state.config.loan_interest_rate)
        logger.info("day %s: arrived at %s, debt %s", player.day, destination.value, player.debt)
        messages = [
            f"You've arrived at {destination.value}.",
            f"Your debt has increased to ${player.debt} due to interest.",
        ]
        messages.extend(self._stash_raid(state))
        state.market.generate_prices()
        messages.extend(state.market.events)
        return messages

    @staticmethod
    def _stash_raid(state: GameState) -> List[str]:
        player = state.player
        if not state.config.stash_houses_enabled or not player.stash_houses:
            return []
        if not roll_percent(state.rng, state.config.stash_raid_chance):
            return []
        owned = [location for location in Location if location in player.stash_houses]
        location = pick(state.rng, owned)
        stash = player.stash_houses[location]
        messages: List[str] = []
        if not stash.is_empty():
            percent = state.rng.randint(50, 100)
            seized = []
            for substance, qty in stash.inventory.items():
                taken = qty * percent // 100
                if taken > 0:
                    stash.inventory[substance] -= taken
                    seized.append(f"{taken} {substance.value}")
            fine = min(state.rng.randint(0, 4999), player.cash)
            player.cash -= fine
            messages.append(f"Cops raided your stash house in {location.value}!")
            if seized:
                messages.append(f"They seized {', '.join(seized)}.")
            messages.append(f"You were fined ${fine}.")
            logger.info("stash raid in %s: %s%% seized, fine %s", location.value, percent, fine)
        if roll_percent(state.rng, state.config.stash_removal_chance):
            del player.stash_houses[location]
            messages.append(f"Your stash house in {location.value} was seized and boarded up!")
            logger.info("stash house in %s removed", location.value)
        return messages


def accrue_interest(debt: int, rate: float) -> int:
    """One day of loan shark interest, truncated to whole dollars."""
    return int(Decimal(debt) * (1 + Decimal(str(rate))))
