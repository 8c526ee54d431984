"""Shared CLI rendering helpers."""
from __future__ import annotations

from typing import Iterable, List, Sequence

from dopewars.domain.catalog import SUBSTANCES
from dopewars.domain.market import PriceTrend
from dopewars.domain.state import PoliceEncounter
from dopewars.services.game_core import FinalSummary, MarketView, PlayerView


def parse_amount(raw: str) -> int:
    """Parse a typed amount; anything unparseable counts as zero."""
    try:
        return int(raw.strip())
    except ValueError:
        return 0


def health_label(health: int) -> str:
    if health < 30:
        return f"Health: {health} (critical)"
    if health < 70:
        return f"Health: {health} (hurt)"
    return f"Health: {health}"


def format_status_line(view: PlayerView) -> str:
    return (
        f"Day: {view.day}/{view.day_limit} | Cash: ${view.cash} | Debt: ${view.debt} | "
        f"Location: {view.location.value} | {health_label(view.health)}"
    )


def format_inventory(view: PlayerView) -> List[str]:
    lines = [f"Space available: {view.space_available}"]
    held = [f"{substance.value}: {qty}" for substance, qty in view.inventory.items() if qty > 0]
    lines.extend(held or ["No drugs in inventory."])
    owned = [f"{weapon.value} x{count}" for weapon, count in view.weapons.items() if count > 0]
    if owned:
        equipped = view.active_weapon.value if view.active_weapon else "nothing"
        lines.append(f"Weapons: {', '.join(owned)} (equipped: {equipped})")
    for location, stash in view.stash_houses.items():
        stored = sum(stash.inventory.values())
        lines.append(f"Stash house in {location.value}: {stored}/{stash.capacity}")
    return lines


def format_prices(market: MarketView) -> List[str]:
    return [f"{substance.value}: ${market.prices.get(substance, 0)}" for substance in SUBSTANCES]


def format_price_history(market: MarketView, day: int) -> List[str]:
    """One row per substance, oldest price first, ending with today's."""
    lines: List[str] = []
    for substance in SUBSTANCES:
        history = market.price_history.get(substance, ())
        if not history:
            lines.append(f"{substance.value}: no price history available yet")
            continue
        first_day = day - len(history) + 1
        lines.append(
            f"{substance.value} (days {first_day}-{day}): " + " ".join(f"${price}" for price in history)
        )
    return lines


def format_trend(trend: PriceTrend | None) -> List[str]:
    if trend is None:
        return ["Not enough price history for trend analysis."]
    return [trend.label, f"Trading Recommendation: {trend.advice}"]


def format_police_stop(encounter: PoliceEncounter) -> List[str]:
    return [
        f"Day {encounter.day}: stopped on the way from {encounter.origin.value} to {encounter.destination.value}.",
        "They want to search you.",
    ]


def format_final_summary(summary: FinalSummary) -> List[str]:
    lines = [
        "GAME OVER",
        summary.reason or "",
        f"Days survived: {summary.days_survived}",
        f"Final cash: ${summary.cash}",
        f"Final debt: ${summary.debt}",
        f"Net worth: ${summary.net_worth}",
    ]
    if summary.inventory:
        lines.append("Final inventory:")
        lines.extend(f"{substance.value} - {qty} units" for substance, qty in summary.inventory.items())
    return lines


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")


def render_bullet_lines(lines: Iterable[str]) -> None:
    """Print bullet-prefixed lines."""
    for line in lines:
        print(f"- {line}")


def render_lines(lines: Iterable[str]) -> None:
    for line in lines:
        print(line)
