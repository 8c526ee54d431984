"""Tests for CLI rendering utilities."""
import pytest

from dopewars.domain.catalog import Location, Substance
from dopewars.domain.market import PriceTrend
from dopewars.domain.state import PoliceEncounter
from dopewars.presentation.cli.render import (
    format_final_summary,
    format_inventory,
    format_police_stop,
    format_price_history,
    format_trend,
    health_label,
    parse_amount,
)
from dopewars.services.game_core import FinalSummary, MarketView, PlayerView


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("12", 12), ("  7 ", 7), ("-3", -3), ("abc", 0), ("", 0), ("4.5", 0)],
)
def test_parse_amount_treats_garbage_as_zero(raw: str, expected: int) -> None:
    assert parse_amount(raw) == expected


def test_health_label_flags_low_health() -> None:
    assert health_label(100) == "Health: 100"
    assert health_label(50) == "Health: 50 (hurt)"
    assert health_label(10) == "Health: 10 (critical)"


def test_format_trend_without_history() -> None:
    assert format_trend(None) == ["Not enough price history for trend analysis."]


def test_format_trend_includes_advice() -> None:
    trend = PriceTrend(
        substance=Substance.WEED,
        percentage=20.0,
        label="Strong upward trend: 20.0%",
        advice="Consider selling - prices are high and may drop soon.",
    )

    lines = format_trend(trend)

    assert lines[0] == "Strong upward trend: 20.0%"
    assert lines[1].startswith("Trading Recommendation: Consider selling")


def test_format_inventory_reports_empty_pockets() -> None:
    view = PlayerView(
        cash=2000,
        debt=5000,
        day=1,
        day_limit=30,
        health=100,
        location=Location.BRONX,
        inventory={substance: 0 for substance in Substance},
        space_available=100,
        weapons={},
        active_weapon=None,
    )

    assert format_inventory(view) == ["Space available: 100", "No drugs in inventory."]


def test_format_price_history_labels_day_span() -> None:
    market = MarketView(
        prices={Substance.WEED: 40},
        price_history={Substance.WEED: (30, 35, 40)},
        events=(),
    )

    lines = format_price_history(market, day=5)

    assert lines[0] == "Weed (days 3-5): $30 $35 $40"
    assert lines[1] == "Cocaine: no price history available yet"


def test_format_final_summary_lists_leftover_inventory() -> None:
    summary = FinalSummary(
        reason="Time's up! Your 30 days are over.",
        days_survived=31,
        cash=12000,
        debt=0,
        net_worth=12000,
        inventory={Substance.ACID: 4},
    )

    lines = format_final_summary(summary)

    assert lines[0] == "GAME OVER"
    assert "Net worth: $12000" in lines
    assert lines[-1] == "Acid - 4 units"


def test_format_police_stop_names_the_interrupted_trip() -> None:
    encounter = PoliceEncounter(origin=Location.BRONX, destination=Location.QUEENS, day=4)

    lines = format_police_stop(encounter)

    assert lines[0] == "Day 4: stopped on the way from Bronx to Queens."
