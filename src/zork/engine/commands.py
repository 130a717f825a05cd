"""Event handlers and the table that wires them onto a bus.

register_handlers(bus, game) is the only entry point. Each handler is a
thin adapter: it unpacks the payload, checks arguments, and calls into the
Game. Command handlers go quiet once the game is over, except for restart
and exit.
"""

from collections.abc import Callable
from functools import partial, wraps

from ..logging import get_logger
from .events import (
    ATTACK,
    CHARACTER_DEATH,
    COMMANDS,
    CURSE,
    DEFEAT,
    ENTER_ROOM,
    EXIT,
    GO,
    INFO,
    INPUT,
    INVENTORY,
    MAP,
    NO_COMMAND,
    RESTART,
    TAKE,
    TELEPORT,
    USE,
    VICTORY,
    CharacterRef,
    EventBus,
    RoomRef,
    Words,
)
from .game import Game
from .state import CURSE_DAMAGE, VICTORY_ROOM

logger = get_logger(__name__)


def _unless_over(handler: Callable) -> Callable:
    """Skip the handler entirely once the game has ended."""

    @wraps(handler)
    def guarded(game: Game, payload) -> None:
        if game.is_over():
            return
        handler(game, payload)

    return guarded


def _needs_argument(message: str) -> Callable:
    """Call the game method with the first argument, or complain."""

    def decorate(action: Callable[[Game, str], None]) -> Callable:
        @wraps(action)
        def handler(game: Game, payload: Words) -> None:
            if payload.argument is None:
                game.say(message)
                return
            action(game, payload.argument)

        return handler

    return decorate


# -- commands --


@_unless_over
@_needs_argument("Need a direction!")
def _on_go(game: Game, direction: str) -> None:
    game.go(direction)


@_unless_over
@_needs_argument("Need to choose an item to take!")
def _on_take(game: Game, item_name: str) -> None:
    game.take(item_name)


@_unless_over
@_needs_argument("Need to choose an item to use!")
def _on_use(game: Game, item_name: str) -> None:
    game.use(item_name)


@_unless_over
@_needs_argument("Need to specify an enemy to attack!")
def _on_attack(game: Game, enemy_name: str) -> None:
    game.attack(enemy_name)


@_unless_over
def _on_teleport(game: Game, payload: Words) -> None:
    game.teleport()


@_unless_over
def _on_inventory(game: Game, payload: Words) -> None:
    game.inventory()


@_unless_over
def _on_map(game: Game, payload: Words) -> None:
    game.map()


@_unless_over
def _on_info(game: Game, payload: Words) -> None:
    game.info()


def _on_restart(game: Game, payload: Words) -> None:
    game.reset(show_update=False)


def _on_exit(game: Game, payload: Words) -> None:
    game.bus.stop()


# -- state transitions --


def _on_character_death(game: Game, payload: CharacterRef) -> None:
    if game.is_over():
        return
    if payload.character is game.player:
        game.bus.trigger(DEFEAT)


def _on_enter_room(game: Game, payload: RoomRef) -> None:
    if game.is_over():
        return
    if payload.room.name == VICTORY_ROOM:
        game.bus.trigger(VICTORY)


def _on_victory(game: Game, payload: None) -> None:
    game.say("\nVictory!")
    game.set_over(True)
    logger.info("player_won", room=game.player.current_room.name)


def _on_defeat(game: Game, payload: None) -> None:
    game.say("\nDefeat!")
    game.set_over(True)
    logger.info(
        "player_defeated",
        health=game.player.health,
        stamina=game.player.stamina,
    )


def _on_curse(game: Game, payload: CharacterRef) -> None:
    character = payload.character
    character.set_health(character.health - CURSE_DAMAGE)
    game.say("You've lost some health points due to the cursed item.")


# -- raw input --


def _on_input(game: Game, payload: Words) -> None:
    """Route a tokenized line to the command named by its first word."""
    bus = game.bus
    if not payload.words:
        bus.trigger(NO_COMMAND)
        return

    verb = payload.verb
    if verb not in COMMANDS:
        logger.debug("unknown_command", verb=verb)
    else:
        bus.trigger(verb, payload)

    if bus.is_running():
        game.update_screen()


_HANDLERS: dict[str, Callable] = {
    # Commands
    GO: _on_go,
    MAP: _on_map,
    INFO: _on_info,
    RESTART: _on_restart,
    TELEPORT: _on_teleport,
    EXIT: _on_exit,
    TAKE: _on_take,
    USE: _on_use,
    INVENTORY: _on_inventory,
    ATTACK: _on_attack,
    # State changes
    CHARACTER_DEATH: _on_character_death,
    ENTER_ROOM: _on_enter_room,
    VICTORY: _on_victory,
    DEFEAT: _on_defeat,
    CURSE: _on_curse,
    # Input
    INPUT: _on_input,
}


def register_handlers(bus: EventBus, game: Game) -> None:
    """Attach every handler to bus, bound to game."""
    for event_name, handler in _HANDLERS.items():
        bus.listen(event_name, partial(handler, game))
