"""Characters and items.

Characters keep health and stamina non-negative. The player is the only
character whose exhaustion matters to the game, so it reports reaching zero
on the event bus; enemies just clamp.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from ..logging import get_logger
from .events import CHARACTER_DEATH, CharacterRef, EventBus

if TYPE_CHECKING:
    from .world import Room

logger = get_logger(__name__)

FULL_HEALTH = 100
FULL_STAMINA = 100
MAX_WEIGHT = 9999


def _format_weight(weight: float) -> str:
    """27.0 -> '27', 15.56 -> '15.56'."""
    text = f"{weight:f}".rstrip("0")
    return text.rstrip(".")


class Item:
    """Something that can lie in a room or be carried.

    Items are identified by their short description: two items with the
    same description compare equal.
    """

    def __init__(self, description: str, weight: float, multiplier: int = 0):
        self._description = description
        self._weight = 0.0
        self.multiplier = multiplier
        self.set_weight(weight)

    @property
    def short_description(self) -> str:
        return self._description

    @property
    def weight(self) -> float:
        return self._weight

    def set_weight(self, weight: float) -> bool:
        """Set the weight if 0 <= weight < 9999; otherwise keep the old one."""
        if not 0 <= weight < MAX_WEIGHT:
            logger.warning(
                "item_weight_rejected",
                item=self._description,
                weight=weight,
                kept=self._weight,
            )
            return False
        self._weight = weight
        return True

    @property
    def long_description(self) -> str:
        return f"{self._description}, weight: {_format_weight(self._weight)}g."

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Item):
            return NotImplemented
        return self._description == other._description

    def __hash__(self) -> int:
        return hash(self._description)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r}, {self._weight!r})"


class Weapon(Item):
    """An item whose multiplier adds to attack rolls."""

    @property
    def long_description(self) -> str:
        return (
            f"{self._description}, is a weapon, "
            f"weight: {_format_weight(self._weight)}g, "
            f"multiplier: {self.multiplier}"
        )


class Character(ABC):
    """Base for anything with health, stamina and a location."""

    def __init__(self, name: str):
        self._name = name
        self._health = FULL_HEALTH
        self._stamina = FULL_STAMINA
        self.current_room: "Room | None" = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._health

    @property
    def stamina(self) -> int:
        return self._stamina

    @property
    def is_defeated(self) -> bool:
        return self._health <= 0 or self._stamina <= 0

    @abstractmethod
    def set_health(self, health: int) -> None: ...

    @abstractmethod
    def set_stamina(self, stamina: int) -> None: ...

    def __repr__(self) -> str:
        room = self.current_room.name if self.current_room else None
        return (
            f"{type(self).__name__}({self._name!r}, hp={self._health}, "
            f"st={self._stamina}, room={room!r})"
        )


class Enemy(Character):
    """A hostile character. Enemies with the same name are the same enemy."""

    def __init__(self, name: str, description: str):
        super().__init__(name)
        self.description = description

    def set_health(self, health: int) -> None:
        self._health = max(health, 0)

    def set_stamina(self, stamina: int) -> None:
        self._stamina = max(stamina, 0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Enemy):
            return NotImplemented
        return self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)


class Player(Character):
    """The adventurer. Carries items in pick-up order."""

    def __init__(self, name: str, bus: EventBus):
        super().__init__(name)
        self.bus = bus
        self.items: list[Item] = []

    def set_health(self, health: int) -> None:
        was_alive = self._health > 0
        self._health = max(health, 0)
        if was_alive and self._health == 0:
            self.bus.trigger(CHARACTER_DEATH, CharacterRef(self))

    def set_stamina(self, stamina: int) -> None:
        was_rested = self._stamina > 0
        self._stamina = max(stamina, 0)
        if was_rested and self._stamina == 0:
            self.bus.trigger(CHARACTER_DEATH, CharacterRef(self))

    def add_item(self, item: Item) -> bool:
        """Add item unless an equal one is already carried."""
        if item in self.items:
            return False
        self.items.append(item)
        return True

    def remove_item(self, item: Item) -> None:
        self.items = [i for i in self.items if i is not item]

    def has_item(self, description: str) -> bool:
        return self.get_item(description) is not None

    def get_item(self, description: str) -> Item | None:
        for item in self.items:
            if item.short_description == description:
                return item
        return None

    def empty_inventory(self) -> None:
        self.items.clear()

    @property
    def total_weight(self) -> float:
        return sum(item.weight for item in self.items)
