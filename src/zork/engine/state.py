"""Fixed game data: special rooms, items, enemies and rule numbers.

Everything placed here is recreated on each restart.
"""

from .entities import Enemy, Item, Weapon
from .world import World

# Rooms
START_ROOM = "A"
GATED_ROOM = "G"  # needs the key
VICTORY_ROOM = "J"
ROAMER_START_ROOM = "D"

# Item names with special rules
KEY = "key"
SWORD = "sword"
POTION = "potion"
CURSED_ITEM = "cursed_item"

PLAYER_NAME = "Hero"
ROAMER_NAME = "mojo"
ROAMER_DESCRIPTION = "is a moving enemy"

# Stamina cost of one step, by carried weight
HEAVY_LOAD = 100
MEDIUM_LOAD = 30
HEAVY_STEP = 7
MEDIUM_STEP = 5
LIGHT_STEP = 3
EMPTY_STEP = 1

TELEPORT_COST = 30
ROAMER_STEP = 4

# Combat
ROLL_SIDES = 20
HIT_THRESHOLD = 10  # rolls below this back-fire
BACKFIRE_DAMAGE = 20
ROAMER_DAMAGE = 15
STATIONARY_DAMAGE = 20

CURSE_DAMAGE = 20
POTION_HEAL = 20
POTION_MAX_HEALTH = 80  # potion only works at or below this


def step_cost(total_weight: float, carrying: bool) -> int:
    """Stamina spent walking one room with the given load."""
    if not carrying:
        return EMPTY_STEP
    if total_weight > HEAVY_LOAD:
        return HEAVY_STEP
    if total_weight >= MEDIUM_LOAD:
        return MEDIUM_STEP
    return LIGHT_STEP


def stock_world(world: World) -> None:
    """Empty every room, then put items and stationary enemies in place."""
    world.clear()
    world["C"].add_item(Item(KEY, 27))
    world["G"].add_item(Item(CURSED_ITEM, 15.56))
    world["D"].add_item(Item(POTION, 10.25))
    world["F"].add_item(Weapon(SWORD, 150, 5))
    world["C"].add_enemy(Enemy("stationary-man", "is a non-moving enemy"))
