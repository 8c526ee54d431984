"""Player and stash house models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from dopewars.domain.catalog import (
    Location,
    Substance,
    Weapon,
    empty_substance_table,
    empty_weapon_table,
)
from dopewars.domain.config import GameConfig


@dataclass(slots=True)
class StashHouse:
    """Location-bound secondary inventory with its own capacity."""

    location: Location
    capacity: int
    inventory: Dict[Substance, int] = field(default_factory=empty_substance_table)

    def total_items(self) -> int:
        return sum(self.inventory.values())

    def space_available(self) -> int:
        return self.capacity - self.total_items()

    def is_empty(self) -> bool:
        return self.total_items() == 0


@dataclass(slots=True)
class Player:
    """Economic state of the player. Mutated only by the service layer."""

    cash: int
    debt: int
    current_location: Location
    max_carrying_capacity: int
    day: int = 1
    health: int = 100
    inventory: Dict[Substance, int] = field(default_factory=empty_substance_table)
    weapons: Dict[Weapon, int] = field(default_factory=empty_weapon_table)
    active_weapon: Weapon | None = None
    stash_houses: Dict[Location, StashHouse] = field(default_factory=dict)

    @classmethod
    def new(cls, config: GameConfig) -> "Player":
        return cls(
            cash=config.starting_cash,
            debt=config.starting_debt,
            current_location=config.starting_location,
            max_carrying_capacity=config.max_carrying_capacity,
            health=config.max_health,
        )

    def total_items(self) -> int:
        return sum(self.inventory.values())

    def space_available(self) -> int:
        return self.max_carrying_capacity - self.total_items()

    def has_inventory(self) -> bool:
        return self.total_items() > 0

    def has_weapon(self) -> bool:
        return any(count > 0 for count in self.weapons.values())

    def active_weapon_power(self, weapon_power: Dict[Weapon, int]) -> int:
        if self.active_weapon is None:
            return 0
        return weapon_power.get(self.active_weapon, 0)

    def owns_stash_house(self, location: Location) -> bool:
        return location in self.stash_houses

    def stash_house_here(self) -> StashHouse | None:
        return self.stash_houses.get(self.current_location)

    def net_worth(self) -> int:
        return self.cash - self.debt

    def confiscate_inventory(self) -> Dict[Substance, int]:
        """Zero every quantity and return what was taken."""
        taken = {substance: qty for substance, qty in self.inventory.items() if qty > 0}
        for substance in self.inventory:
            self.inventory[substance] = 0
        return taken


def stash_house_price(config: GameConfig, location: Location) -> int:
    """Purchase price of a stash house at the given location."""
    return round(config.stash_house_base_price * config.stash_house_multipliers[location])
