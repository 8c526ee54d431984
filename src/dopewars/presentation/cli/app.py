"""Console-driven UI loops for DopeWars."""
from __future__ import annotations

import logging
import secrets
from typing import Callable, Dict, List, Literal, Sequence, TypeVar

from dopewars.core.rng import RNG
from dopewars.domain.catalog import LOCATIONS, SUBSTANCES, WEAPONS, Substance
from dopewars.services import CommandResult, GameCore
from dopewars.presentation.cli.config import build_game_config, load_config
from dopewars.presentation.cli.render import (
    format_final_summary,
    format_inventory,
    format_police_stop,
    format_price_history,
    format_prices,
    format_status_line,
    format_trend,
    parse_amount,
    render_bullet_lines,
    render_heading,
    render_lines,
    render_menu,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
MenuAction = Literal["play_again", "quit"]
_MAX_RANDOM_SEED = 2**31 - 1


def main() -> None:
    """Start the interactive CLI session."""
    settings = load_config()
    seed = settings.get("seed")
    if not isinstance(seed, int):
        seed = secrets.randbelow(_MAX_RANDOM_SEED)
    core = GameCore(build_game_config(settings), RNG(seed))
    logger.info("new game: edition=%s seed=%s", core.config.edition, seed)
    print("=== DopeWars ===")
    render_bullet_lines(core.messages)
    while True:
        if not _run_game_loop(core):
            break
        if _game_over_menu(core) == "quit":
            break
        core.restart()
        render_bullet_lines(core.messages)
    print("Goodbye!")


def _run_game_loop(core: GameCore) -> bool:
    """Play until game over (True) or the player quits (False)."""
    actions: Dict[str, Callable[[GameCore], None]] = {
        "Buy": _buy_screen,
        "Sell": _sell_screen,
        "Travel": _travel_screen,
        "Loan Shark": _loan_shark_screen,
        "Hospital": _hospital_screen,
        "Price Charts": _price_chart_screen,
    }
    if core.config.weapons_enabled:
        actions["Weapon Dealer"] = _weapon_screen
    if core.config.stash_houses_enabled:
        actions["Stash House"] = _stash_screen
    labels = list(actions) + ["Quit"]
    while core.status == "running":
        if core.pending_encounter is not None:
            _police_screen(core)
            continue
        _render_main_screen(core)
        render_menu("Actions", labels)
        index = _prompt_index(len(labels))
        if index == len(labels) - 1:
            return False
        actions[labels[index]](core)
    return True


def _render_main_screen(core: GameCore) -> None:
    view = core.player_view()
    render_heading("Status")
    print(format_status_line(view))
    render_heading("Inventory")
    render_lines(format_inventory(view))
    render_heading("Current Prices")
    render_lines(format_prices(core.market_view()))


def _report(result: CommandResult, before: int, core: GameCore) -> None:
    if result.accepted:
        render_bullet_lines(core.messages[before:])
    else:
        print(result.describe())


def _buy_screen(core: GameCore) -> None:
    substance = _prompt_substance(core, "Buy")
    maximum = core.max_buy_amount(substance)
    amount = parse_amount(input(f"How many units of {substance.value}? (max {maximum}): "))
    before = len(core.messages)
    _report(core.buy(substance, amount), before, core)


def _sell_screen(core: GameCore) -> None:
    substance = _prompt_substance(core, "Sell")
    maximum = core.max_sell_amount(substance)
    amount = parse_amount(input(f"How many units of {substance.value}? (max {maximum}): "))
    before = len(core.messages)
    _report(core.sell(substance, amount), before, core)


def _travel_screen(core: GameCore) -> None:
    here = core.player_view().location
    destinations = [location for location in LOCATIONS if location != here]
    destination = _prompt_pick("Travel", destinations, lambda location: location.value)
    before = len(core.messages)
    _report(core.travel_to(destination), before, core)


def _loan_shark_screen(core: GameCore) -> None:
    view = core.player_view()
    render_menu("Loan Shark", ["Borrow", "Repay", "Back"])
    print(f"Debt: ${view.debt} (interest {core.config.loan_interest_rate:.0%} per day)")
    choice = _prompt_index(3)
    if choice == 2:
        return
    amount = parse_amount(input("Amount: "))
    before = len(core.messages)
    result = core.borrow(amount) if choice == 0 else core.repay(amount)
    _report(result, before, core)


def _hospital_screen(core: GameCore) -> None:
    view = core.player_view()
    if view.health >= core.config.max_health:
        print("You're at full health.")
        return
    cost = core.heal_cost()
    print(f"It will cost ${cost} to fully heal ({core.config.max_health - view.health} health points).")
    if input("Get treatment? [y/N]: ").strip().lower() != "y":
        return
    before = len(core.messages)
    _report(core.heal(), before, core)


def _price_chart_screen(core: GameCore) -> None:
    render_heading("Price History")
    render_lines(format_price_history(core.market_view(), core.player_view().day))
    substance = _prompt_substance(core, "Trend Analysis")
    render_lines(format_trend(core.price_trend(substance)))


def _weapon_screen(core: GameCore) -> None:
    view = core.player_view()
    options = [f"Buy {weapon.value} (${core.config.weapon_prices[weapon]})" for weapon in WEAPONS]
    owned = [weapon for weapon in WEAPONS if view.weapons.get(weapon, 0) > 0]
    options.extend(f"Equip {weapon.value}" for weapon in owned)
    options.append("Back")
    render_menu("Weapon Dealer", options)
    index = _prompt_index(len(options))
    before = len(core.messages)
    if index < len(WEAPONS):
        _report(core.buy_weapon(WEAPONS[index]), before, core)
    elif index < len(WEAPONS) + len(owned):
        _report(core.equip_weapon(owned[index - len(WEAPONS)]), before, core)


def _stash_screen(core: GameCore) -> None:
    view = core.player_view()
    before = len(core.messages)
    if view.location not in view.stash_houses:
        price = core.stash_house_price()
        if input(f"Buy a stash house in {view.location.value} for ${price}? [y/N]: ").strip().lower() == "y":
            _report(core.buy_stash_house(), before, core)
        return
    render_menu("Stash House", ["Deposit", "Withdraw", "Back"])
    choice = _prompt_index(3)
    if choice == 2:
        return
    substance = _prompt_substance(core, "Substance")
    amount = parse_amount(input("Amount: "))
    if choice == 0:
        _report(core.stash_deposit(substance, amount), before, core)
    else:
        _report(core.stash_withdraw(substance, amount), before, core)


def _police_screen(core: GameCore) -> None:
    encounter = core.pending_encounter
    if encounter is not None:
        render_heading("Police")
        render_lines(format_police_stop(encounter))
    render_menu("Police Stop", ["Fight", "Run", "Bribe", "Surrender"])
    index = _prompt_index(4)
    before = len(core.messages)
    if index == 0:
        result = core.resolve_police_encounter("fight")
    elif index == 1:
        result = core.resolve_police_encounter("run")
    elif index == 2:
        raw = input("Bribe amount (blank to let them name a price): ").strip()
        offered = parse_amount(raw) if raw else None
        result = core.resolve_police_encounter("bribe", offered)
    else:
        result = core.resolve_police_encounter("surrender")
    _report(result, before, core)


def _game_over_menu(core: GameCore) -> MenuAction:
    render_heading("Game Over")
    render_lines(format_final_summary(core.final_summary()))
    render_menu("Menu", ["Play Again", "Quit"])
    return "play_again" if _prompt_index(2) == 0 else "quit"


def _prompt_substance(core: GameCore, title: str) -> Substance:
    prices = core.market_view().prices
    return _prompt_pick(title, SUBSTANCES, lambda substance: f"{substance.value} - ${prices.get(substance, 0)}")


def _prompt_pick(title: str, options: Sequence[T], label: Callable[[T], str]) -> T:
    render_menu(title, [label(option) for option in options])
    return options[_prompt_index(len(options))]


def _prompt_index(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")


__all__: List[str] = ["main"]
