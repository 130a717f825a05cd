"""Tests for the text rendering helpers."""

from zork.engine import render
from zork.engine.entities import Item, Weapon
from zork.engine.game import Game


def test_map_markers_at_start(game: Game):
    text = render.get_map(game.world, game.player, game.mojo)
    lines = text.splitlines()
    assert lines[0] == render.MAP_LEGEND
    assert lines[1] == " !D! -   E   -  F "
    assert lines[3] == "  B  -  [A]  - !C!"
    assert lines[5] == "  G  -   H   -  I "
    assert lines[-1] == "         J "


def test_map_marks_player_with_enemy(game: Game):
    game.player.current_room = game.world["C"]
    assert render.room_marker(game.world["C"], game.player, game.mojo) == "[C!"
    assert render.room_marker(game.world["A"], game.player, game.mojo) == " A "


def test_map_marks_player_with_roamer(game: Game):
    game.mojo.current_room = game.world["A"]
    assert render.room_marker(game.world["A"], game.player, game.mojo) == "[A!"
    assert render.room_marker(game.world["D"], game.player, game.mojo) == " D "


def test_map_hides_defeated_roamer(game: Game):
    game.mojo.set_stamina(0)
    assert render.room_marker(game.world["D"], game.player, game.mojo) == " D "


def test_inventory_uses_long_descriptions(game: Game):
    assert render.get_inventory(game.player) == "Inventory:\n\tnothing"
    game.player.add_item(Item("key", 27))
    game.player.add_item(Weapon("sword", 150, 5))
    assert render.get_inventory(game.player) == (
        "Inventory:\n"
        "\tkey, weight: 27g.\n"
        "\tsword, is a weapon, weight: 150g, multiplier: 5"
    )


def test_status_lists_roamer_with_stats(game: Game):
    game.player.current_room = game.world["D"]
    status = render.get_status(game.player, game.mojo, is_over=False)
    assert status.splitlines() == [
        "You are in D",
        "Items in room = potion",
        "Enemies in room = mojo - HP: 100 ST: 100",
        "Exits: east",
        "HP: 100 ST: 100",
    ]


def test_status_without_enemies(game: Game):
    status = render.get_status(game.player, game.mojo, is_over=False)
    assert "No items in room" in status
    assert "Enemies in room = none" in status
    assert "Exits: north east south west" in status


def test_status_when_over(game: Game):
    assert render.get_status(game.player, game.mojo, is_over=True) == (
        render.GAME_OVER_PROMPT
    )
