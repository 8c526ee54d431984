"""Market prices, bounded price history and per-day price generation."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from dopewars.core.rng import RandomSource
from dopewars.domain.catalog import SUBSTANCES, Substance
from dopewars.domain.config import GameConfig

# (message, multiplier) keyed by the global event roll; any other roll is a quiet day.
_GLOBAL_EVENT_ROLL_MAX = 29
_GLOBAL_EVENTS: Dict[int, tuple[str, float]] = {
    0: ("Police launch a city-wide enforcement operation! All prices are up 50%.", 1.5),
    1: ("A major cartel got busted! Supply is drying up and prices have doubled.", 2.0),
    2: ("Cheap synthetics are flooding the streets! All prices are down 50%.", 0.5),
    3: ("The economy is in recession. Nobody has money and prices are down 30%.", 0.7),
}

_SUBSTANCE_EVENT_ROLL_MAX = 19


@dataclass(slots=True)
class PriceTrend:
    """Trend summary over the recorded price history of one substance."""

    substance: Substance
    percentage: float
    label: str
    advice: str


@dataclass(slots=True)
class Market:
    """Current prices plus a FIFO history capped at ``config.max_price_history``."""

    config: GameConfig
    rng: RandomSource
    prices: Dict[Substance, int] = field(default_factory=dict)
    price_history: Dict[Substance, List[int]] = field(
        default_factory=lambda: {substance: [] for substance in SUBSTANCES}
    )
    events: List[str] = field(default_factory=list)
    global_modifier: float = 1.0

    @property
    def max_history(self) -> int:
        return self.config.max_price_history

    def price_of(self, substance: Substance) -> int:
        return self.prices.get(substance, 0)

    def generate_prices(self) -> None:
        """Roll a new set of prices for every substance and record them."""
        self.events.clear()
        self.global_modifier = self._roll_global_event()
        for substance in SUBSTANCES:
            low, high = self.config.substance_price_ranges[substance]
            base_price = self.rng.randint(low, high - 1)
            price = self._apply_substance_event(substance, base_price)
            price = max(1, int(price * self.global_modifier))
            self.prices[substance] = price
            history = self.price_history.setdefault(substance, [])
            history.append(price)
            while len(history) > self.max_history:
                history.pop(0)

    def set_price(self, substance: Substance, price: int) -> None:
        """Overwrite a current price without touching the history."""
        self.prices[substance] = max(1, price)

    def inventory_value(self, inventory: Dict[Substance, int]) -> int:
        return sum(qty * self.price_of(substance) for substance, qty in inventory.items())

    def trend(self, substance: Substance) -> PriceTrend | None:
        """Summarize the recorded history; None until two prices are known."""
        history = self.price_history.get(substance, [])
        if len(history) < 2:
            return None
        first, last = history[0], history[-1]
        percentage = (last - first) / first * 100.0 if first > 0 else 0.0
        if percentage > 15.0:
            label = f"Strong upward trend: {percentage:.1f}%"
        elif percentage > 5.0:
            label = f"Upward trend: {percentage:.1f}%"
        elif percentage < -15.0:
            label = f"Strong downward trend: {percentage:.1f}%"
        elif percentage < -5.0:
            label = f"Downward trend: {percentage:.1f}%"
        else:
            label = f"Stable price: {percentage:.1f}%"
        if percentage > 10.0:
            advice = "Consider selling - prices are high and may drop soon."
        elif percentage < -10.0:
            advice = "Good time to buy - prices are low and may rise soon."
        else:
            advice = "Market is stable - no strong buy/sell signals."
        return PriceTrend(substance=substance, percentage=percentage, label=label, advice=advice)

    def _roll_global_event(self) -> float:
        if not self.config.global_events_enabled:
            return 1.0
        roll = self.rng.randint(0, _GLOBAL_EVENT_ROLL_MAX)
        event = _GLOBAL_EVENTS.get(roll)
        if event is None:
            return 1.0
        message, modifier = event
        self.events.append(f"Breaking news! {message}")
        return modifier

    def _apply_substance_event(self, substance: Substance, base_price: int) -> int:
        roll = self.rng.randint(0, _SUBSTANCE_EVENT_ROLL_MAX)
        if roll == 0:
            self.events.append(
                f"Breaking news! Police busted a {substance.value} shipment! Prices skyrocketing!"
            )
            return base_price * 5
        if roll == 1:
            self.events.append(f"Market flooded with {substance.value}! Prices have crashed!")
            return base_price // 5
        if not self.config.global_events_enabled:
            return base_price
        if roll == 2:
            self.events.append(f"A premium batch of {substance.value} hit the streets! Prices tripled!")
            return base_price * 3
        if roll == 3:
            self.events.append(f"Contaminated {substance.value} is going around! Prices dropped to a third!")
            return base_price // 3
        return base_price
