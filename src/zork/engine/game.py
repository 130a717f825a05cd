"""The game controller.

Game owns the world, the player and the roaming enemy. Its command methods
mutate that state, write messages for the player, and trigger the derived
events (enterRoom, curse) that the outcome handlers react to.
"""

import random

from ..logging import get_logger
from . import render
from .entities import FULL_HEALTH, FULL_STAMINA, Enemy, Item, Player
from .events import CURSE, ENTER_ROOM, CharacterRef, EventBus, RoomRef
from .state import (
    BACKFIRE_DAMAGE,
    CURSED_ITEM,
    GATED_ROOM,
    HIT_THRESHOLD,
    KEY,
    PLAYER_NAME,
    POTION,
    POTION_HEAL,
    POTION_MAX_HEALTH,
    ROAMER_DAMAGE,
    ROAMER_DESCRIPTION,
    ROAMER_NAME,
    ROAMER_START_ROOM,
    ROAMER_STEP,
    ROLL_SIDES,
    START_ROOM,
    STATIONARY_DAMAGE,
    SWORD,
    TELEPORT_COST,
    step_cost,
    stock_world,
)
from .world import DIRECTIONS, World

logger = get_logger(__name__)


class Game:
    """Single-player game state plus the operations that change it."""

    def __init__(
        self,
        bus: EventBus,
        world: World | None = None,
        rng: random.Random | None = None,
    ):
        self.bus = bus
        self.world = world if world is not None else World()
        self.rng = rng or random.Random()
        self.player = Player(PLAYER_NAME, bus)
        self.mojo = Enemy(ROAMER_NAME, ROAMER_DESCRIPTION)
        self.game_over = False
        self._messages: list[str] = []
        self.reset(show_update=False)

    # -- output --

    def say(self, text: str) -> None:
        self._messages.append(text)

    def drain(self) -> str:
        """Return and forget everything said since the last drain."""
        text = "\n".join(self._messages)
        self._messages.clear()
        return text

    # -- lifecycle --

    def reset(self, show_update: bool = True) -> None:
        """Put every room, item and character back to the starting layout."""
        self.game_over = False
        stock_world(self.world)

        self.mojo.current_room = self.world[ROAMER_START_ROOM]
        self.mojo.set_health(FULL_HEALTH)
        self.mojo.set_stamina(FULL_STAMINA)

        self.player.current_room = self.world[START_ROOM]
        self.player.set_health(FULL_HEALTH)
        self.player.set_stamina(FULL_STAMINA)
        self.player.empty_inventory()

        logger.info("game_reset", room=START_ROOM)
        self.say(render.WELCOME)
        if show_update:
            self.update_screen()

    def is_over(self) -> bool:
        return self.game_over

    def set_over(self, over: bool) -> None:
        self.game_over = over

    def update_screen(self) -> None:
        self.say(render.get_status(self.player, self.mojo, self.game_over))

    # -- presentation commands --

    def map(self) -> None:
        self.say(render.get_map(self.world, self.player, self.mojo))

    def info(self) -> None:
        self.say(render.HELP)

    def inventory(self) -> None:
        self.say(render.get_inventory(self.player))

    # -- movement --

    def mojo_alive(self) -> bool:
        return not self.mojo.is_defeated

    def enemy_move(self) -> None:
        """Walk the roaming enemy through one random open exit."""
        if not self.mojo_alive():
            return

        here = self.mojo.current_room
        target = None
        while target is None:
            target = self.world.exit(here, self.rng.choice(DIRECTIONS))

        self.mojo.current_room = target
        self.mojo.set_stamina(self.mojo.stamina - ROAMER_STEP)
        logger.debug(
            "enemy_moved", enemy=self.mojo.name, room=target.name,
            stamina=self.mojo.stamina,
        )
        if not self.mojo_alive():
            self.say("An enemy died due to a lack of stamina!")

    def go(self, direction: str) -> None:
        target = self.world.exit(self.player.current_room, direction)

        if target is None:
            self.say("You hit a wall")
            return

        if target.name == GATED_ROOM and not self.player.has_item(KEY):
            self.say(
                "You need a key to enter this room.\n"
                "Search for it in another room and then you can enter this one."
            )
            logger.debug("gated_room_refused", room=target.name)
            return

        self.enemy_move()
        self.player.current_room = target
        cost = step_cost(self.player.total_weight, bool(self.player.items))
        logger.info(
            "player_moved", direction=direction, room=target.name, stamina_cost=cost
        )
        self.player.set_stamina(self.player.stamina - cost)
        self.bus.trigger(ENTER_ROOM, RoomRef(target))

    def teleport(self) -> None:
        rooms = list(self.world)
        target = self.rng.choice(rooms)
        while target.name == GATED_ROOM and not self.player.has_item(KEY):
            target = self.rng.choice(rooms)

        self.player.current_room = target
        logger.info("player_teleported", room=target.name)
        self.player.set_stamina(self.player.stamina - TELEPORT_COST)
        self.bus.trigger(ENTER_ROOM, RoomRef(target))

        self.enemy_move()

    # -- items --

    def take(self, item_name: str) -> None:
        room = self.player.current_room
        if not room.items:
            self.say("No items in room.")
        else:
            item = room.find_item(item_name)
            if item is None:
                self.say(f"There is no {item_name} here.")
            else:
                self._pick_up(item)
        self.inventory()

    def _pick_up(self, item: Item) -> None:
        room = self.player.current_room
        if self.player.add_item(item):
            self.say(
                "You have picked up a new item! "
                "It has been added to your inventory."
            )
        room.remove_item(item)
        logger.info("item_taken", item=item.short_description, room=room.name)

        if item.short_description == CURSED_ITEM:
            self.say("Oh no! You've picked up a cursed item.")
            self.bus.trigger(CURSE, CharacterRef(self.player))
        if item.short_description == POTION:
            self.use(POTION)

    def use(self, item_name: str) -> None:
        if item_name != POTION:
            self.say(f"You can't use {item_name}.")
            return
        if self.player.health > POTION_MAX_HEALTH:
            self.say(
                f"You must have {POTION_MAX_HEALTH} or less health points "
                "to use the health potion."
            )
            return
        self.player.set_health(self.player.health + POTION_HEAL)
        logger.info("potion_used", health=self.player.health)
        self.say("You have used a replenishing potion!")

    # -- combat --

    def roll_attack(self) -> int:
        """Uniform 0..19, boosted by the carried sword's multiplier."""
        roll = self.rng.randint(0, ROLL_SIDES - 1)
        sword = self.player.get_item(SWORD)
        if sword is not None:
            roll += sword.multiplier
        return roll

    def attack(self, target_name: str) -> None:
        room = self.player.current_room
        mojo_here = self.mojo.current_room is room and self.mojo_alive()

        if not room.enemies and not mojo_here:
            self.say("No enemies to attack")
            return

        roll = self.roll_attack()
        logger.info("attack_resolved", target=target_name, roll=roll)

        if roll < HIT_THRESHOLD:
            self.say("You were injured by the enemy!")
            self.player.set_health(self.player.health - BACKFIRE_DAMAGE)
            return

        if target_name == self.mojo.name and mojo_here:
            self.mojo.set_health(self.mojo.health - ROAMER_DAMAGE)
            if self.mojo_alive():
                self.say("You injured the enemy!")
            else:
                self.say("You killed the enemy!")
            return

        for enemy in room.enemies:
            if enemy.name != target_name:
                continue
            enemy.set_health(enemy.health - STATIONARY_DAMAGE)
            if enemy.health <= 0:
                room.remove_enemy(enemy)
                logger.info("enemy_killed", enemy=enemy.name, room=room.name)
                self.say("You killed the enemy!")
            else:
                self.say("You injured the enemy!")
            return

        self.say(f"There is no {target_name} here to attack.")
