from __future__ import annotations

import pytest

from dopewars.core.rng import RNG
from dopewars.domain.catalog import LOCATIONS, SUBSTANCES, WEAPONS, Location, Substance
from dopewars.domain.config import GameConfig
from dopewars.domain.state import intro_messages
from dopewars.services import GameCore, Rejection
from tests.helpers.scripted_rng import ScriptedRNG


def _scripted_core(config: GameConfig | None = None) -> tuple[GameCore, ScriptedRNG]:
    rng = ScriptedRNG()
    return GameCore(config or GameConfig.extended(), rng), rng


def test_new_game_snapshot() -> None:
    core, _ = _scripted_core()

    view = core.player_view()

    assert core.status == "running"
    assert view.cash == 2000
    assert view.debt == 5000
    assert view.day == 1
    assert view.health == 100
    assert all(qty == 0 for qty in view.inventory.values())
    assert core.messages[:3] == tuple(intro_messages(core.config))
    assert core.market_view().prices[Substance.WEED] == 99


def test_views_are_detached_copies() -> None:
    core, _ = _scripted_core()

    view = core.player_view()
    view.inventory[Substance.WEED] = 50
    market = core.market_view()
    market.prices[Substance.WEED] = 1

    assert core.player_view().inventory[Substance.WEED] == 0
    assert core.market_view().prices[Substance.WEED] == 99


def test_commands_append_to_the_message_log() -> None:
    core, _ = _scripted_core()
    before = len(core.messages)

    result = core.buy(Substance.WEED, 2)

    assert result.accepted
    assert core.messages[before:] == tuple(result.messages)


def test_rejected_commands_leave_the_log_alone() -> None:
    core, _ = _scripted_core()
    before = core.messages

    result = core.repay(0)

    assert not result.accepted
    assert core.messages == before


def test_running_out_of_days_ends_the_game() -> None:
    core, _ = _scripted_core()
    core.state.player.day = 30

    core.travel_to(Location.QUEENS)

    assert core.status == "game_over"
    assert core.game_over_reason == "Time's up! Your 30 days are over."
    assert core.buy(Substance.WEED, 1).reasons == (Rejection.GAME_OVER,)
    assert core.travel_to(Location.BRONX).reasons == (Rejection.GAME_OVER,)


def test_fatal_injury_ends_the_game() -> None:
    core, rng = _scripted_core()
    core.state.player.health = 10
    rng.queue_ints(2, 19)

    core.travel_to(Location.QUEENS)

    assert core.status == "game_over"
    assert core.game_over_reason == "You died from your injuries!"


def test_game_continues_through_the_last_day() -> None:
    core, _ = _scripted_core()
    core.state.player.day = 29

    core.travel_to(Location.QUEENS)

    assert core.status == "running"
    assert core.player_view().day == 30


def test_restart_resets_player_market_and_log() -> None:
    core, _ = _scripted_core()
    core.buy(Substance.WEED, 5)
    core.state.player.day = 30
    core.travel_to(Location.QUEENS)
    assert core.status == "game_over"

    result = core.restart()

    view = core.player_view()
    assert result.accepted
    assert result.action == "restart"
    assert "Game restarted!" in result.messages
    assert core.status == "running"
    assert core.game_over_reason is None
    assert view.day == 1
    assert view.cash == 2000
    assert view.inventory[Substance.WEED] == 0
    assert core.messages[:4] == tuple(intro_messages(core.config)) + ("Game restarted!",)
    assert all(len(history) == 1 for history in core.market_view().price_history.values())


def test_final_summary_reports_net_worth_and_holdings() -> None:
    core, _ = _scripted_core()
    core.buy(Substance.WEED, 10)

    summary = core.final_summary()

    assert summary.cash == 2000 - 990
    assert summary.net_worth == summary.cash - 5000
    assert summary.inventory == {Substance.WEED: 10}


def test_police_encounter_round_trip_through_core() -> None:
    core, rng = _scripted_core()
    core.buy(Substance.WEED, 4)
    rng.queue_ints(0)

    core.travel_to(Location.QUEENS)
    assert core.pending_encounter is not None
    assert core.check_buy(Substance.WEED, 1) == (Rejection.ENCOUNTER_PENDING,)

    rng.queue_floats(0.0).queue_ints(5)
    result = core.resolve_police_encounter("fight")

    assert result.accepted
    assert core.pending_encounter is None
    assert core.player_view().location is Location.QUEENS
    assert core.player_view().health == 95


def test_price_trend_and_helpers() -> None:
    core, _ = _scripted_core()
    assert core.price_trend(Substance.WEED) is None
    core.travel_to(Location.QUEENS)

    trend = core.price_trend(Substance.WEED)

    assert trend is not None
    assert trend.percentage == 0.0
    assert core.max_buy_amount(Substance.WEED) == 2000 // 99
    assert core.heal_cost() == 0
    assert core.stash_house_price() == 10000


def _random_command(core: GameCore, rng: RNG) -> None:
    if core.pending_encounter is not None:
        core.auto_resolve_police_encounter()
        return
    substance = SUBSTANCES[rng.randint(0, len(SUBSTANCES) - 1)]
    amount = rng.randint(-5, 60)
    action = rng.randint(0, 9)
    if action == 0:
        core.buy(substance, amount)
    elif action == 1:
        core.sell(substance, amount)
    elif action == 2:
        core.borrow(amount * 100)
    elif action == 3:
        core.repay(amount * 50)
    elif action == 4:
        core.buy_weapon(WEAPONS[rng.randint(0, len(WEAPONS) - 1)])
    elif action == 5:
        core.buy_stash_house()
    elif action == 6:
        core.stash_deposit(substance, amount)
    elif action == 7:
        core.stash_withdraw(substance, amount)
    elif action == 8:
        core.heal()
    else:
        core.travel_to(LOCATIONS[rng.randint(0, len(LOCATIONS) - 1)])


@pytest.mark.parametrize("seed", range(10))
def test_capacity_and_history_invariants_hold_during_play(seed: int) -> None:
    core = GameCore(GameConfig.extended(), RNG(seed))
    driver = RNG(seed + 1000)

    for _ in range(400):
        if core.status == "game_over":
            core.restart()
        _random_command(core, driver)
        player = core.state.player
        assert player.total_items() <= core.config.max_carrying_capacity
        assert all(qty >= 0 for qty in player.inventory.values())
        for stash in player.stash_houses.values():
            assert stash.total_items() <= stash.capacity
        for history in core.state.market.price_history.values():
            assert len(history) <= core.config.max_price_history
        assert player.debt >= 0
