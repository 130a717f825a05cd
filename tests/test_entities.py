"""Tests for characters and items."""

import pytest
from structlog.testing import capture_logs

from zork.engine.entities import Enemy, Item, Player, Weapon
from zork.engine.events import CHARACTER_DEATH, EventBus


@pytest.mark.parametrize("bad_weight", [10000, 9999, -1])
def test_invalid_weight_keeps_previous_value(bad_weight):
    item = Item("key", 27)
    with capture_logs() as logs:
        assert item.set_weight(bad_weight) is False
    assert item.weight == 27
    assert logs[0]["event"] == "item_weight_rejected"
    assert logs[0]["log_level"] == "warning"


def test_valid_weight_boundaries():
    item = Item("feather", 5)
    assert item.set_weight(0)
    assert item.weight == 0
    assert item.set_weight(9998.5)
    assert item.weight == 9998.5


def test_item_built_with_invalid_weight_weighs_nothing():
    with capture_logs():
        item = Item("anvil", 20000)
    assert item.weight == 0


def test_items_compare_by_description():
    assert Item("key", 27) == Item("key", 3)
    assert Item("key", 27) != Item("potion", 27)
    assert len({Item("key", 1), Item("key", 2)}) == 1


def test_long_descriptions():
    """Weapons describe themselves differently from plain items."""
    assert Item("cursed_item", 15.56).long_description == "cursed_item, weight: 15.56g."
    assert Item("key", 27).long_description == "key, weight: 27g."
    sword = Weapon("sword", 150, 5)
    assert sword.long_description == "sword, is a weapon, weight: 150g, multiplier: 5"
    assert sword.multiplier == 5
    assert Item("key", 27).multiplier == 0


def test_enemies_compare_by_name():
    assert Enemy("mojo", "moves") == Enemy("mojo", "something else")
    assert Enemy("mojo", "moves") != Enemy("stationary-man", "moves")


def test_enemy_stats_clamp_at_zero():
    enemy = Enemy("grue", "lurks")
    enemy.set_health(-30)
    enemy.set_stamina(-1)
    assert enemy.health == 0
    assert enemy.stamina == 0
    assert enemy.is_defeated


def test_player_stats_clamp_at_zero():
    player = Player("Hero", EventBus())
    player.set_health(-5)
    player.set_stamina(-5)
    assert player.health == 0
    assert player.stamina == 0


def test_player_death_fires_once_per_crossing():
    bus = EventBus()
    deaths = []
    bus.listen(CHARACTER_DEATH, deaths.append)
    player = Player("Hero", bus)

    player.set_health(10)
    assert deaths == []
    player.set_health(-10)
    assert len(deaths) == 1
    assert deaths[0].character is player
    player.set_health(-20)
    assert len(deaths) == 1


def test_death_handler_sees_clamped_value():
    bus = EventBus()
    seen = []
    bus.listen(CHARACTER_DEATH, lambda p: seen.append(p.character.stamina))
    player = Player("Hero", bus)
    player.set_stamina(-7)
    assert seen == [0]


def test_health_has_no_upper_cap():
    player = Player("Hero", EventBus())
    player.set_health(140)
    assert player.health == 140


def test_inventory_keeps_order_and_rejects_duplicates():
    player = Player("Hero", EventBus())
    key = Item("key", 27)
    potion = Item("potion", 10.25)

    assert player.add_item(key)
    assert player.add_item(potion)
    assert not player.add_item(key)
    assert not player.add_item(Item("key", 1))

    assert player.items == [key, potion]
    assert player.has_item("potion")
    assert player.get_item("key") is key
    assert player.total_weight == pytest.approx(37.25)

    player.remove_item(key)
    assert player.items == [potion]
    player.empty_inventory()
    assert player.items == []
    assert player.total_weight == 0
