"""Closed enumerations and fixed tables for substances, locations and weapons."""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple


class Substance(str, Enum):
    WEED = "Weed"
    COCAINE = "Cocaine"
    LUDES = "Ludes"
    ACID = "Acid"
    HEROIN = "Heroin"
    SPEED = "Speed"

    def __str__(self) -> str:
        return self.value


class Location(str, Enum):
    BRONX = "Bronx"
    BROOKLYN = "Brooklyn"
    MANHATTAN = "Manhattan"
    QUEENS = "Queens"
    STATEN_ISLAND = "Staten Island"
    CENTRAL_PARK = "Central Park"

    def __str__(self) -> str:
        return self.value


class Weapon(str, Enum):
    BASEBALL_BAT = "Baseball Bat"
    KNIFE = "Knife"
    PISTOL = "Pistol"
    SHOTGUN = "Shotgun"
    GRENADE = "Grenade"

    def __str__(self) -> str:
        return self.value


SUBSTANCES: Tuple[Substance, ...] = tuple(Substance)
LOCATIONS: Tuple[Location, ...] = tuple(Location)
WEAPONS: Tuple[Weapon, ...] = tuple(Weapon)

# Half-open [low, high) base price ranges.
SUBSTANCE_PRICE_RANGES: Dict[Substance, Tuple[int, int]] = {
    Substance.WEED: (10, 100),
    Substance.COCAINE: (100, 1000),
    Substance.LUDES: (20, 200),
    Substance.ACID: (50, 400),
    Substance.HEROIN: (150, 1500),
    Substance.SPEED: (50, 700),
}

WEAPON_PRICES: Dict[Weapon, int] = {
    Weapon.BASEBALL_BAT: 300,
    Weapon.KNIFE: 500,
    Weapon.PISTOL: 2500,
    Weapon.SHOTGUN: 5000,
    Weapon.GRENADE: 1500,
}

WEAPON_POWER: Dict[Weapon, int] = {
    Weapon.BASEBALL_BAT: 15,
    Weapon.KNIFE: 25,
    Weapon.PISTOL: 60,
    Weapon.SHOTGUN: 80,
    Weapon.GRENADE: 100,
}

# Consumed on use during a police stop.
SINGLE_USE_WEAPONS: frozenset[Weapon] = frozenset({Weapon.GRENADE})

STASH_HOUSE_LOCATION_MULTIPLIERS: Dict[Location, float] = {
    Location.BRONX: 0.8,
    Location.BROOKLYN: 1.2,
    Location.MANHATTAN: 2.0,
    Location.QUEENS: 1.0,
    Location.STATEN_ISLAND: 0.7,
    Location.CENTRAL_PARK: 1.5,
}


def empty_substance_table() -> Dict[Substance, int]:
    """Return a quantity table with every substance present at zero."""
    return {substance: 0 for substance in SUBSTANCES}


def empty_weapon_table() -> Dict[Weapon, int]:
    return {weapon: 0 for weapon in WEAPONS}


__all__ = [
    "Substance",
    "Location",
    "Weapon",
    "SUBSTANCES",
    "LOCATIONS",
    "WEAPONS",
    "SUBSTANCE_PRICE_RANGES",
    "WEAPON_PRICES",
    "WEAPON_POWER",
    "SINGLE_USE_WEAPONS",
    "STASH_HOUSE_LOCATION_MULTIPLIERS",
    "empty_substance_table",
    "empty_weapon_table",
]
