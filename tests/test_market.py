from __future__ import annotations

import pytest

from dopewars.core.rng import RNG
from dopewars.domain.catalog import SUBSTANCE_PRICE_RANGES, SUBSTANCES, Substance
from dopewars.domain.config import GameConfig
from dopewars.domain.market import Market
from tests.helpers.scripted_rng import ScriptedRNG


def _scripted_market(config: GameConfig | None = None) -> tuple[Market, ScriptedRNG]:
    rng = ScriptedRNG()
    return Market(config=config or GameConfig.extended(), rng=rng), rng


def test_market_initialization() -> None:
    market = Market(config=GameConfig.extended(), rng=RNG(1))

    for substance in SUBSTANCES:
        assert market.price_history[substance] == []
    assert market.events == []
    assert market.prices == {}


@pytest.mark.parametrize("seed", range(25))
def test_basic_price_generation_stays_within_event_bounds(seed: int) -> None:
    market = Market(config=GameConfig.basic(), rng=RNG(seed))
    market.generate_prices()

    for substance in SUBSTANCES:
        low, high = SUBSTANCE_PRICE_RANGES[substance]
        price = market.prices[substance]
        assert low // 5 <= price <= (high - 1) * 5
        assert market.price_history[substance] == [price]


@pytest.mark.parametrize("seed", range(25))
def test_extended_price_generation_stays_within_combined_multipliers(seed: int) -> None:
    market = Market(config=GameConfig.extended(), rng=RNG(seed))
    market.generate_prices()

    for substance in SUBSTANCES:
        _, high = SUBSTANCE_PRICE_RANGES[substance]
        price = market.prices[substance]
        assert 1 <= price <= (high - 1) * 10
        assert market.price_history[substance] == [price]


def test_price_history_is_capped_and_chronological() -> None:
    market = Market(config=GameConfig.extended(), rng=RNG(99))
    generated: dict[Substance, list[int]] = {substance: [] for substance in SUBSTANCES}

    for _ in range(15):
        market.generate_prices()
        for substance in SUBSTANCES:
            generated[substance].append(market.prices[substance])

    for substance in SUBSTANCES:
        assert len(market.price_history[substance]) == market.max_history == 10
        assert market.price_history[substance] == generated[substance][-10:]


def test_generation_is_deterministic_for_the_same_seed() -> None:
    market_a = Market(config=GameConfig.extended(), rng=RNG(2024))
    market_b = Market(config=GameConfig.extended(), rng=RNG(2024))

    for _ in range(5):
        market_a.generate_prices()
        market_b.generate_prices()
        assert market_a.prices == market_b.prices
        assert market_a.events == market_b.events
    assert market_a.price_history == market_b.price_history


def test_quiet_generation_uses_drawn_base_prices() -> None:
    market, _ = _scripted_market()

    market.generate_prices()

    assert market.prices[Substance.WEED] == 99
    assert market.prices[Substance.HEROIN] == 1499
    assert market.events == []
    assert market.global_modifier == 1.0


def test_bust_event_multiplies_price_and_names_substance() -> None:
    market, rng = _scripted_market()
    rng.queue_ints(29, 50, 0)  # no global event, Weed base 50, bust

    market.generate_prices()

    assert market.prices[Substance.WEED] == 250
    assert len(market.events) == 1
    assert "Weed" in market.events[0]


def test_flood_event_divides_price() -> None:
    market, rng = _scripted_market(GameConfig.basic())
    rng.queue_ints(50, 1)  # basic edition has no global roll

    market.generate_prices()

    assert market.prices[Substance.WEED] == 10
    assert "flooded" in market.events[0]


def test_basic_edition_ignores_premium_and_contamination_rolls() -> None:
    market, rng = _scripted_market(GameConfig.basic())
    rng.queue_ints(50, 2, 300, 3)

    market.generate_prices()

    assert market.prices[Substance.WEED] == 50
    assert market.prices[Substance.COCAINE] == 300
    assert market.events == []


def test_extended_premium_and_contamination_events() -> None:
    market, rng = _scripted_market()
    rng.queue_ints(29, 50, 2, 300, 3)

    market.generate_prices()

    assert market.prices[Substance.WEED] == 150
    assert market.prices[Substance.COCAINE] == 100
    assert len(market.events) == 2


def test_global_event_modifies_every_price() -> None:
    market, rng = _scripted_market()
    rng.queue_ints(0, 10)  # enforcement operation x1.5, Weed base 10

    market.generate_prices()

    assert market.global_modifier == 1.5
    assert market.prices[Substance.WEED] == 15
    assert market.prices[Substance.COCAINE] == int(999 * 1.5)
    assert market.events[0].startswith("Breaking news!")


def test_price_is_clamped_to_at_least_one() -> None:
    ranges = dict(SUBSTANCE_PRICE_RANGES)
    ranges[Substance.WEED] = (1, 5)
    market, rng = _scripted_market(GameConfig.basic(substance_price_ranges=ranges))
    rng.queue_ints(4, 1)  # 4 // 5 == 0

    market.generate_prices()

    assert market.prices[Substance.WEED] == 1


def test_events_are_cleared_each_generation() -> None:
    market, rng = _scripted_market()
    rng.queue_ints(29, 50, 0)
    market.generate_prices()
    assert market.events

    market.generate_prices()

    assert market.events == []


def test_set_price_does_not_touch_history() -> None:
    market, _ = _scripted_market()
    market.generate_prices()

    market.set_price(Substance.WEED, 0)

    assert market.prices[Substance.WEED] == 1
    assert market.price_history[Substance.WEED] == [99]


def test_trend_requires_two_prices() -> None:
    market, _ = _scripted_market()
    market.generate_prices()

    assert market.trend(Substance.WEED) is None


@pytest.mark.parametrize(
    "history, label_prefix, advice_prefix",
    [
        ([100, 120], "Strong upward trend", "Consider selling"),
        ([100, 108], "Upward trend", "Market is stable"),
        ([100, 100], "Stable price", "Market is stable"),
        ([100, 93], "Downward trend", "Market is stable"),
        ([100, 70], "Strong downward trend", "Good time to buy"),
    ],
)
def test_trend_labels(history: list[int], label_prefix: str, advice_prefix: str) -> None:
    market, _ = _scripted_market()
    market.price_history[Substance.ACID] = list(history)

    trend = market.trend(Substance.ACID)

    assert trend is not None
    assert trend.label.startswith(label_prefix)
    assert trend.advice.startswith(advice_prefix)


def test_inventory_value_uses_current_prices() -> None:
    market, _ = _scripted_market()
    market.generate_prices()

    value = market.inventory_value({Substance.WEED: 2, Substance.ACID: 1})

    assert value == 2 * 99 + 399
