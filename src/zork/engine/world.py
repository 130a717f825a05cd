"""Rooms and the fixed room graph.

The topology is built once per game and never rewired. Exits hold room
names rather than Room objects; the World resolves them.
"""

from dataclasses import dataclass, field

from .entities import Enemy, Item

DIRECTIONS = ("north", "east", "south", "west")

# name: (north, east, south, west)
ROOM_LAYOUT: dict[str, tuple[str | None, str | None, str | None, str | None]] = {
    "A": ("E", "C", "H", "B"),
    "B": (None, "A", None, None),
    "C": (None, None, None, "A"),
    "D": (None, "E", None, None),
    "E": (None, "F", "A", "D"),
    "F": (None, None, None, "E"),
    "G": (None, "H", None, None),
    "H": ("A", "I", "J", "G"),
    "I": (None, None, None, "H"),
    "J": ("H", None, None, None),
}


class WorldError(ValueError):
    """Raised when a room layout cannot form a playable world."""


@dataclass(eq=False)
class Room:
    """A location in the game world."""

    name: str
    exits: dict[str, str | None] = field(
        default_factory=lambda: dict.fromkeys(DIRECTIONS)
    )
    items: list[Item] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)

    def exit_name(self, direction: str) -> str | None:
        return self.exits.get(direction)

    def open_exits(self) -> list[str]:
        """Directions with a neighbour, in north/east/south/west order."""
        return [d for d in DIRECTIONS if self.exits.get(d) is not None]

    def add_item(self, item: Item) -> None:
        self.items.append(item)

    def remove_item(self, item: Item) -> None:
        self.items = [i for i in self.items if i is not item]

    def has_item(self, item: Item) -> bool:
        return any(i is item for i in self.items)

    def find_item(self, description: str) -> Item | None:
        for item in self.items:
            if item.short_description == description:
                return item
        return None

    def add_enemy(self, enemy: Enemy) -> None:
        self.enemies.append(enemy)

    def remove_enemy(self, enemy: Enemy) -> None:
        self.enemies = [e for e in self.enemies if e is not enemy]

    def has_enemy(self, enemy: Enemy) -> bool:
        return any(e is enemy for e in self.enemies)

    def clear(self) -> None:
        """Drop everything physically present in the room."""
        self.items.clear()
        self.enemies.clear()


class World:
    """The arena of rooms, keyed by name in layout order."""

    def __init__(self, layout: dict[str, tuple] | None = None):
        layout = ROOM_LAYOUT if layout is None else layout
        _check_layout(layout)
        self.rooms: dict[str, Room] = {
            name: Room(name, exits=dict(zip(DIRECTIONS, slots)))
            for name, slots in layout.items()
        }

    def __getitem__(self, name: str) -> Room:
        return self.rooms[name]

    def __iter__(self):
        return iter(self.rooms.values())

    def __len__(self) -> int:
        return len(self.rooms)

    def exit(self, room: Room, direction: str) -> Room | None:
        """Resolve the neighbour of room in direction, or None."""
        target = room.exit_name(direction)
        if target is None:
            return None
        return self.rooms[target]

    def clear(self) -> None:
        for room in self.rooms.values():
            room.clear()


def _check_layout(layout: dict[str, tuple]) -> None:
    """Every room needs at least one exit and every exit a real target.

    The roaming enemy samples directions until one leads somewhere, so a
    dead-end room with no exits would never let it move on.
    """
    if not layout:
        raise WorldError("world has no rooms")
    for name, slots in layout.items():
        if len(slots) != len(DIRECTIONS):
            raise WorldError(f"room {name!r} needs exactly {len(DIRECTIONS)} exit slots")
        targets = [t for t in slots if t is not None]
        if not targets:
            raise WorldError(f"room {name!r} has no exits")
        for target in targets:
            if target not in layout:
                raise WorldError(f"room {name!r} exits to unknown room {target!r}")
