"""Police stop encounter: the one risk event that waits for a player decision."""
from __future__ import annotations

import logging
from typing import List, Tuple

from dopewars.core.rng import roll_percent
from dopewars.core.types import PoliceChoice
from dopewars.domain.catalog import SINGLE_USE_WEAPONS, Location
from dopewars.domain.state import EncounterOutcome, GameState, PoliceEncounter
from dopewars.services.errors import EncounterError
from dopewars.services.results import Rejection

logger = logging.getLogger(__name__)

AUTO_CHOICES: Tuple[PoliceChoice, ...] = ("fight", "run", "bribe")
POLICE_CHOICES: Tuple[PoliceChoice, ...] = ("fight", "run", "bribe", "surrender")

GRENADE_ESCAPE_CHANCE = 95.0
BRIBE_ACCEPT_CHANCE = 70.0
SURRENDER_FINE_CHANCE = 70.0
OFFERED_BRIBE_MIN_CHANCE = 0.10
OFFERED_BRIBE_MAX_CHANCE = 0.95

EncounterResolution = Tuple[EncounterOutcome, List[str]]


class PoliceService:
    """Resolves police stops.

    A stop resolves on the spot when there is nothing to find or a grenade is
    equipped. Otherwise it is left pending on the state until the player
    picks fight, run, bribe or surrender.
    """

    def begin(self, state: GameState, destination: Location) -> EncounterResolution | None:
        """Start a stop; returns the resolution or None when a choice is needed."""
        player = state.player
        if not player.has_inventory():
            logger.info("police stop on day %s: nothing to find", player.day)
            return EncounterOutcome.NO_CONTRABAND, [
                "The cops searched you but found nothing. They let you go."
            ]
        if player.active_weapon in SINGLE_USE_WEAPONS:
            return self._throw_grenade(state)
        state.pending_encounter = PoliceEncounter(
            origin=player.current_location, destination=destination, day=player.day
        )
        logger.info("police stop on day %s: waiting for a choice", player.day)
        return None

    def check_resolve(
        self, state: GameState, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> Tuple[Rejection, ...]:
        if not state.is_running:
            return (Rejection.GAME_OVER,)
        if state.pending_encounter is None:
            return (Rejection.NO_ENCOUNTER,)
        if choice not in POLICE_CHOICES:
            raise EncounterError(f"Unknown police choice '{choice}'.")
        if choice == "bribe" and bribe_amount is not None:
            reasons: List[Rejection] = []
            if bribe_amount <= 0:
                reasons.append(Rejection.NON_POSITIVE_AMOUNT)
            if bribe_amount > state.player.cash:
                reasons.append(Rejection.INSUFFICIENT_CASH)
            return tuple(reasons)
        return ()

    def resolve(
        self, state: GameState, choice: PoliceChoice, bribe_amount: int | None = None
    ) -> EncounterResolution:
        """Apply the player's choice. Callers must check preconditions first."""
        if choice == "fight":
            resolution = self._fight(state)
        elif choice == "run":
            resolution = self._run(state)
        elif choice == "bribe" and bribe_amount is None:
            resolution = self._bribe_auto(state)
        elif choice == "bribe":
            resolution = self._bribe_offer(state, bribe_amount)
        elif choice == "surrender":
            resolution = self._surrender(state)
        else:
            raise EncounterError(f"Unknown police choice '{choice}'.")
        state.pending_encounter = None
        logger.info("police stop resolved: %s", resolution[0].value)
        return resolution

    def auto_choice(self, state: GameState) -> PoliceChoice:
        return AUTO_CHOICES[state.rng.randint(0, len(AUTO_CHOICES) - 1)]

    # ----------------------------------------------------------------- Branches
    def _throw_grenade(self, state: GameState) -> EncounterResolution:
        player = state.player
        grenade = player.active_weapon
        assert grenade is not None
        player.weapons[grenade] = max(0, player.weapons[grenade] - 1)
        player.active_weapon = None
        messages = [f"You threw your {grenade.value} at the cops!"]
        if roll_percent(state.rng, GRENADE_ESCAPE_CHANCE):
            messages.append("In the chaos you got away clean.")
            return EncounterOutcome.GRENADE_ESCAPE, messages
        messages.append("It was a dud. The cops tackled you.")
        messages.extend(self._confiscate(state))
        return EncounterOutcome.GRENADE_FAILED, messages

    def _fight(self, state: GameState) -> EncounterResolution:
        player = state.player
        power = player.active_weapon_power(state.config.weapon_power)
        chance = 20 + power * 0.7 if player.active_weapon is not None else 10
        if roll_percent(state.rng, chance):
            damage = state.rng.randint(5, 19)
            self._hurt_nonlethal(state, damage)
            return EncounterOutcome.FIGHT_WON, [
                f"You fought off the cops and escaped! You lost {damage} health points."
            ]
        messages = ["You lost the fight."]
        messages.extend(self._confiscate(state))
        damage = state.rng.randint(15, 39)
        self._hurt_nonlethal(state, damage)
        messages.append(f"You took a beating and lost {damage} health points.")
        return EncounterOutcome.FIGHT_LOST, messages

    def _run(self, state: GameState) -> EncounterResolution:
        chance = 30 + state.player.health // 4
        if roll_percent(state.rng, chance):
            return EncounterOutcome.RAN_AWAY, ["You ran for it and lost them in an alley!"]
        messages = ["They caught you."]
        messages.extend(self._confiscate(state))
        return EncounterOutcome.CAUGHT, messages

    def _bribe_auto(self, state: GameState) -> EncounterResolution:
        player = state.player
        total_value = state.market.inventory_value(player.inventory)
        bribe = state.rng.randint(total_value // 4, total_value // 2)
        if player.cash >= bribe and roll_percent(state.rng, BRIBE_ACCEPT_CHANCE):
            player.cash -= bribe
            return EncounterOutcome.BRIBE_ACCEPTED, [f"The cops took your ${bribe} bribe and looked the other way."]
        if player.cash < bribe:
            messages = [f"The cops wanted ${bribe} and you couldn't pay."]
        else:
            messages = [f"The cops refused your ${bribe} bribe."]
        messages.extend(self._confiscate(state))
        messages.extend(self._fine(state))
        return EncounterOutcome.BRIBE_REJECTED, messages

    def _bribe_offer(self, state: GameState, offered: int) -> EncounterResolution:
        player = state.player
        total_value = state.market.inventory_value(player.inventory)
        ratio = offered / total_value if total_value > 0 else 1.0
        chance = min(OFFERED_BRIBE_MAX_CHANCE, max(OFFERED_BRIBE_MIN_CHANCE, ratio))
        if state.rng.random() < chance:
            player.cash -= offered
            return EncounterOutcome.BRIBE_ACCEPTED, [f"The cops pocketed your ${offered} and let you go."]
        messages = [f"The cops laughed at your ${offered} offer."]
        messages.extend(self._confiscate(state))
        messages.extend(self._fine(state))
        return EncounterOutcome.BRIBE_REJECTED, messages

    def _surrender(self, state: GameState) -> EncounterResolution:
        messages = ["You surrendered to the cops."]
        messages.extend(self._confiscate(state))
        if roll_percent(state.rng, SURRENDER_FINE_CHANCE):
            messages.extend(self._fine(state))
        return EncounterOutcome.SURRENDERED, messages

    # ------------------------------------------------------------------ Helpers
    @staticmethod
    def _confiscate(state: GameState) -> List[str]:
        taken = state.player.confiscate_inventory()
        if not taken:
            return ["They searched you but you had nothing on you."]
        summary = ", ".join(f"{qty} {substance.value}" for substance, qty in taken.items())
        return [f"The cops confiscated all your drugs ({summary})!"]

    @staticmethod
    def _fine(state: GameState) -> List[str]:
        fine = min(state.rng.randint(500, 1999), state.player.cash)
        state.player.cash -= fine
        return [f"You were fined ${fine}."]

    @staticmethod
    def _hurt_nonlethal(state: GameState, damage: int) -> None:
        # Police encounters never kill; health bottoms out at 1.
        state.player.health = max(1, state.player.health - damage)
