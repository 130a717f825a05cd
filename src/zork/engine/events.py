"""Synchronous named-event bus.

Handlers are registered per event name and run in registration order,
straight from the call to trigger(). A handler may trigger further events;
those cascade to completion on the call stack before the outer trigger
moves on to its next handler.

Payloads are small typed wrappers so each handler knows what it receives.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ..logging import get_logger

if TYPE_CHECKING:
    from .entities import Character
    from .world import Room

logger = get_logger(__name__)

# Input and state-transition events
INPUT = "input"
NO_COMMAND = "no_command"
ENTER_ROOM = "enterRoom"
CHARACTER_DEATH = "characterDeath"
VICTORY = "victory"
DEFEAT = "defeat"
CURSE = "curse"

# Commands typed by the player
GO = "go"
TAKE = "take"
USE = "use"
ATTACK = "attack"
TELEPORT = "teleport"
INVENTORY = "inventory"
MAP = "map"
INFO = "info"
RESTART = "restart"
EXIT = "exit"

COMMANDS = frozenset(
    (GO, TAKE, USE, ATTACK, TELEPORT, INVENTORY, MAP, INFO, RESTART, EXIT)
)


@dataclass(frozen=True, slots=True)
class Words:
    """A tokenized input line."""

    words: tuple[str, ...]

    @property
    def verb(self) -> str | None:
        return self.words[0] if self.words else None

    @property
    def argument(self) -> str | None:
        return self.words[1] if len(self.words) > 1 else None

    def __len__(self) -> int:
        return len(self.words)


@dataclass(frozen=True, slots=True)
class RoomRef:
    room: Room


@dataclass(frozen=True, slots=True)
class CharacterRef:
    character: Character


Payload = Words | RoomRef | CharacterRef | None
Handler = Callable[[Any], None]

EVENT_PAYLOADS: dict[str, type] = {
    INPUT: Words,
    NO_COMMAND: type(None),
    ENTER_ROOM: RoomRef,
    CHARACTER_DEATH: CharacterRef,
    VICTORY: type(None),
    DEFEAT: type(None),
    CURSE: CharacterRef,
    **dict.fromkeys(COMMANDS, Words),
}


def _normalize(event_name: str) -> str:
    return event_name.lower()


class EventBus:
    """Registry of handlers keyed by case-insensitive event name.

    If payload_types is given, trigger() checks the payload of every event
    named there and raises TypeError on a mismatch.
    """

    def __init__(self, payload_types: dict[str, type] | None = None):
        self._handlers: defaultdict[str, list[Handler]] = defaultdict(list)
        self._payload_types = {
            _normalize(name): kind for name, kind in (payload_types or {}).items()
        }
        self._running = True

    def listen(self, event_name: str, handler: Handler) -> None:
        """Register handler to run after those already on event_name."""
        self._handlers[_normalize(event_name)].append(handler)

    def handlers(self, event_name: str) -> list[Handler]:
        return list(self._handlers.get(_normalize(event_name), ()))

    def trigger(self, event_name: str, payload: Payload = None) -> None:
        """Run every handler registered for event_name, in order."""
        name = _normalize(event_name)
        expected = self._payload_types.get(name)
        if expected is not None and not isinstance(payload, expected):
            raise TypeError(
                f"event {event_name!r} expects {expected.__name__}, "
                f"got {type(payload).__name__}"
            )

        # Snapshot: handlers added while dispatching wait for the next trigger.
        handlers = self.handlers(name)
        logger.debug("event_triggered", event_name=name, handlers=len(handlers))
        for handler in handlers:
            handler(payload)

    def is_running(self) -> bool:
        return self._running

    def stop(self) -> None:
        self._running = False
        logger.debug("event_bus_stopped")
