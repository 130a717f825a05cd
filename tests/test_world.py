"""Tests for the room graph and starting placements."""

import pytest

from zork.engine.entities import Enemy, Item
from zork.engine.state import stock_world
from zork.engine.world import ROOM_LAYOUT, World, WorldError


def test_world_has_ten_rooms():
    world = World()
    assert len(world) == 10
    assert [room.name for room in world] == list("ABCDEFGHIJ")


def test_exits_resolve_to_rooms():
    world = World()
    a = world["A"]
    assert world.exit(a, "north") is world["E"]
    assert world.exit(a, "east") is world["C"]
    assert world.exit(a, "south") is world["H"]
    assert world.exit(a, "west") is world["B"]


def test_missing_and_unknown_directions_are_walls():
    world = World()
    assert world.exit(world["B"], "north") is None
    assert world.exit(world["A"], "up") is None


@pytest.mark.parametrize(
    "room, direction, target, back",
    [
        ("H", "west", "G", "east"),  # G leads back east to H
        ("E", "west", "D", "east"),
        ("H", "south", "J", "north"),
    ],
)
def test_two_way_edges(room, direction, target, back):
    world = World()
    assert world.exit(world[room], direction) is world[target]
    assert world.exit(world[target], back) is world[room]


def test_open_exits_follow_the_fixed_layout():
    world = World()
    assert world["A"].open_exits() == ["north", "east", "south", "west"]
    assert world["H"].open_exits() == ["north", "east", "south", "west"]
    assert world["E"].open_exits() == ["east", "south", "west"]
    assert world["G"].open_exits() == ["east"]
    assert world["J"].open_exits() == ["north"]


def test_every_room_has_an_exit():
    world = World()
    for room in world:
        assert room.open_exits()


def test_dead_end_room_is_rejected():
    layout = dict(ROOM_LAYOUT)
    layout["B"] = (None, None, None, None)
    with pytest.raises(WorldError, match="no exits"):
        World(layout)


def test_exit_to_unknown_room_is_rejected():
    with pytest.raises(WorldError, match="unknown room"):
        World({"A": ("Z", None, None, None)})


def test_empty_layout_is_rejected():
    with pytest.raises(WorldError):
        World({})


def test_room_item_and_enemy_containers():
    room = World()["A"]
    key = Item("key", 27)
    grue = Enemy("grue", "lurks")

    room.add_item(key)
    room.add_enemy(grue)
    assert room.has_item(key)
    assert room.find_item("key") is key
    assert room.find_item("potion") is None
    assert room.has_enemy(grue)

    room.remove_item(key)
    room.remove_enemy(grue)
    assert room.items == []
    assert room.enemies == []


def test_stock_world_places_starting_items():
    world = World()
    stock_world(world)
    assert [i.short_description for i in world["C"].items] == ["key"]
    assert [i.short_description for i in world["G"].items] == ["cursed_item"]
    assert [i.short_description for i in world["D"].items] == ["potion"]
    assert [i.short_description for i in world["F"].items] == ["sword"]
    assert [e.name for e in world["C"].enemies] == ["stationary-man"]
    assert world["C"].find_item("key").weight == 27


def test_stock_world_replaces_previous_contents():
    world = World()
    stock_world(world)
    world["A"].add_item(Item("junk", 1))
    stock_world(world)
    assert world["A"].items == []
    assert len(world["C"].items) == 1
