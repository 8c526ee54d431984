"""Game configuration constants and edition capability flags."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Dict, Tuple

from dopewars.core.types import Edition
from dopewars.domain.catalog import (
    LOCATIONS,
    STASH_HOUSE_LOCATION_MULTIPLIERS,
    SUBSTANCE_PRICE_RANGES,
    SUBSTANCES,
    WEAPON_POWER,
    WEAPON_PRICES,
    WEAPONS,
    Location,
    Substance,
    Weapon,
)
from dopewars.domain.errors import ConfigError


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable configuration shared by the market, player and services."""

    day_limit: int = 30
    starting_cash: int = 2000
    starting_debt: int = 5000
    max_carrying_capacity: int = 100
    loan_interest_rate: float = 0.10
    max_price_history: int = 10
    max_health: int = 100
    heal_cost_per_point: int = 50
    starting_location: Location = Location.BRONX
    substance_price_ranges: Dict[Substance, Tuple[int, int]] = field(
        default_factory=lambda: dict(SUBSTANCE_PRICE_RANGES)
    )
    weapon_prices: Dict[Weapon, int] = field(default_factory=lambda: dict(WEAPON_PRICES))
    weapon_power: Dict[Weapon, int] = field(default_factory=lambda: dict(WEAPON_POWER))
    stash_house_capacity: int = 200
    stash_house_base_price: int = 10000
    stash_house_multipliers: Dict[Location, float] = field(
        default_factory=lambda: dict(STASH_HOUSE_LOCATION_MULTIPLIERS)
    )
    stash_raid_chance: float = 5.0
    stash_removal_chance: float = 10.0
    weapons_enabled: bool = True
    global_events_enabled: bool = True
    stash_houses_enabled: bool = True
    police_encounters_enabled: bool = True
    extended_travel_events: bool = True

    def __post_init__(self) -> None:
        if self.day_limit <= 0:
            raise ConfigError("day_limit must be positive.")
        if self.max_carrying_capacity <= 0:
            raise ConfigError("max_carrying_capacity must be positive.")
        if self.max_price_history <= 0:
            raise ConfigError("max_price_history must be positive.")
        if self.loan_interest_rate < 0:
            raise ConfigError("loan_interest_rate must be zero or higher.")
        if self.stash_house_capacity <= 0:
            raise ConfigError("stash_house_capacity must be positive.")
        missing = [s.value for s in SUBSTANCES if s not in self.substance_price_ranges]
        if missing:
            raise ConfigError(f"Missing price ranges for: {missing}")
        for substance, (low, high) in self.substance_price_ranges.items():
            if low < 1 or high <= low:
                raise ConfigError(f"Invalid price range for {substance.value}: [{low}, {high}).")
        for table_name, table in (("weapon_prices", self.weapon_prices), ("weapon_power", self.weapon_power)):
            missing_weapons = [w.value for w in WEAPONS if w not in table]
            if missing_weapons:
                raise ConfigError(f"{table_name} is missing: {missing_weapons}")
        missing_locations = [loc.value for loc in LOCATIONS if loc not in self.stash_house_multipliers]
        if missing_locations:
            raise ConfigError(f"stash_house_multipliers is missing: {missing_locations}")

    @property
    def edition(self) -> Edition:
        flags = (
            self.weapons_enabled,
            self.global_events_enabled,
            self.stash_houses_enabled,
            self.police_encounters_enabled,
            self.extended_travel_events,
        )
        return "basic" if not any(flags) else "extended"

    @classmethod
    def basic(cls, **overrides: object) -> "GameConfig":
        """Configuration matching the basic edition: market, loans and travel only."""
        base = cls(
            weapons_enabled=False,
            global_events_enabled=False,
            stash_houses_enabled=False,
            police_encounters_enabled=False,
            extended_travel_events=False,
        )
        return replace(base, **overrides) if overrides else base

    @classmethod
    def extended(cls, **overrides: object) -> "GameConfig":
        """Configuration with every extended-edition subsystem enabled."""
        base = cls()
        return replace(base, **overrides) if overrides else base

    @classmethod
    def for_edition(cls, edition: Edition) -> "GameConfig":
        if edition == "basic":
            return cls.basic()
        if edition == "extended":
            return cls.extended()
        raise ConfigError(f"Unknown edition '{edition}'.")
