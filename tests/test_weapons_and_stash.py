from __future__ import annotations

from dopewars.domain.catalog import Location, Substance, Weapon
from dopewars.domain.config import GameConfig
from dopewars.services.results import Rejection
from dopewars.services.trade_service import TradeService
from tests.helpers.scripted_rng import make_state


def test_buy_weapon_auto_equips_first_weapon() -> None:
    state, _ = make_state()
    service = TradeService()

    result = service.buy_weapon(state, Weapon.KNIFE)

    assert result.accepted
    assert state.player.cash == 1500
    assert state.player.weapons[Weapon.KNIFE] == 1
    assert state.player.active_weapon is Weapon.KNIFE


def test_second_weapon_does_not_replace_equipped_one() -> None:
    state, _ = make_state()
    service = TradeService()
    service.buy_weapon(state, Weapon.BASEBALL_BAT)

    service.buy_weapon(state, Weapon.KNIFE)

    assert state.player.active_weapon is Weapon.BASEBALL_BAT
    assert state.player.cash == 2000 - 300 - 500


def test_buy_weapon_without_cash_is_rejected() -> None:
    state, _ = make_state()
    service = TradeService()

    result = service.buy_weapon(state, Weapon.SHOTGUN)

    assert result.reasons == (Rejection.INSUFFICIENT_CASH,)
    assert state.player.weapons[Weapon.SHOTGUN] == 0


def test_equip_requires_ownership() -> None:
    state, _ = make_state()
    service = TradeService()

    assert service.equip_weapon(state, Weapon.PISTOL).reasons == (Rejection.WEAPON_NOT_OWNED,)

    state.player.weapons[Weapon.PISTOL] = 1
    assert service.equip_weapon(state, Weapon.PISTOL).accepted
    assert state.player.active_weapon is Weapon.PISTOL


def test_weapons_disabled_in_basic_edition() -> None:
    state, _ = make_state(GameConfig.basic())
    service = TradeService()

    assert service.buy_weapon(state, Weapon.KNIFE).reasons == (Rejection.FEATURE_DISABLED,)
    assert state.player.cash == 2000


def test_buy_stash_house_at_current_location() -> None:
    state, _ = make_state()
    state.player.cash = 50_000
    service = TradeService()

    result = service.buy_stash_house(state)

    assert result.accepted
    assert state.player.cash == 50_000 - 8000  # Bronx multiplier 0.8
    stash = state.player.stash_houses[Location.BRONX]
    assert stash.capacity == 200
    assert stash.is_empty()


def test_stash_house_cannot_be_bought_twice() -> None:
    state, _ = make_state()
    state.player.cash = 50_000
    service = TradeService()
    service.buy_stash_house(state)

    result = service.buy_stash_house(state)

    assert result.reasons == (Rejection.STASH_HOUSE_OWNED,)
    assert state.player.cash == 42_000


def test_stash_house_requires_cash() -> None:
    state, _ = make_state()
    service = TradeService()

    assert service.buy_stash_house(state).reasons == (Rejection.INSUFFICIENT_CASH,)
    assert state.player.stash_houses == {}


def test_deposit_and_withdraw_move_units() -> None:
    state, _ = make_state()
    state.player.cash = 50_000
    state.player.inventory[Substance.HEROIN] = 30
    service = TradeService()
    service.buy_stash_house(state)

    assert service.stash_deposit(state, Substance.HEROIN, 20).accepted
    assert state.player.inventory[Substance.HEROIN] == 10
    assert state.player.stash_houses[Location.BRONX].inventory[Substance.HEROIN] == 20

    assert service.stash_withdraw(state, Substance.HEROIN, 5).accepted
    assert state.player.inventory[Substance.HEROIN] == 15
    assert state.player.stash_houses[Location.BRONX].inventory[Substance.HEROIN] == 15


def test_deposit_requires_stash_house_here() -> None:
    state, _ = make_state()
    state.player.inventory[Substance.WEED] = 5
    service = TradeService()

    assert service.stash_deposit(state, Substance.WEED, 5).reasons == (Rejection.NO_STASH_HOUSE,)


def test_deposit_respects_stash_capacity() -> None:
    state, _ = make_state()
    state.player.cash = 50_000
    service = TradeService()
    service.buy_stash_house(state)
    stash = state.player.stash_houses[Location.BRONX]
    stash.inventory[Substance.WEED] = 195
    state.player.inventory[Substance.ACID] = 10

    result = service.stash_deposit(state, Substance.ACID, 10)

    assert result.reasons == (Rejection.INSUFFICIENT_STASH_SPACE,)
    assert stash.total_items() == 195
    assert state.player.inventory[Substance.ACID] == 10


def test_withdraw_respects_player_space_and_stash_inventory() -> None:
    state, _ = make_state()
    state.player.cash = 50_000
    service = TradeService()
    service.buy_stash_house(state)
    stash = state.player.stash_houses[Location.BRONX]
    stash.inventory[Substance.SPEED] = 5
    state.player.inventory[Substance.WEED] = 98

    result = service.stash_withdraw(state, Substance.SPEED, 6)

    assert result.reasons == (Rejection.INSUFFICIENT_STASH_INVENTORY, Rejection.INSUFFICIENT_SPACE)
    assert stash.inventory[Substance.SPEED] == 5
    assert state.player.total_items() == 98


def test_stash_disabled_in_basic_edition() -> None:
    state, _ = make_state(GameConfig.basic())
    state.player.cash = 50_000
    service = TradeService()

    assert service.buy_stash_house(state).reasons == (Rejection.FEATURE_DISABLED,)
