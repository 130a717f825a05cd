"""Text rendering of the game state. Nothing here mutates anything."""

from .entities import Enemy, Player
from .world import Room, World

WELCOME = (
    "Welcome to Zork!\n"
    "To pick up items, type take x where x is the name of the item exactly "
    "as it is written in the room description, eg. take cursed_item\n"
    "To attack enemies, type attack x where x is the enemy name exactly as "
    "it is written in the room description"
)

HELP = (
    "Available commands:\n"
    " - go <direction>\n"
    " - teleport\n"
    " - take <itemName>\n"
    " - inventory\n"
    " - map\n"
    " - info\n"
    " - attack <enemyName>\n"
    " - use <itemName>\n"
    " - restart\n"
    " - exit\n"
    "\n"
    "The more items you have in your inventory, the more stamina you use "
    "when you move!\n"
    "If you have a weapon, you will be more likely to hurt the enemy when "
    "attacking"
)

GAME_OVER_PROMPT = 'Type "restart" or "exit".'

MAP_LEGEND = "Legend: [X] you  !X! enemy  [X! you and an enemy"

# Rows of the drawn map, top to bottom; J hangs below H.
MAP_ROWS = (("D", "E", "F"), ("B", "A", "C"), ("G", "H", "I"))
MAP_TAIL = "J"


def _roamer_here(roamer: Enemy, room: Room) -> bool:
    return roamer.current_room is room and not roamer.is_defeated


def room_marker(room: Room, player: Player, roamer: Enemy) -> str:
    """Three-character map cell for a room."""
    player_here = player.current_room is room
    enemy_here = bool(room.enemies) or _roamer_here(roamer, room)
    if player_here and enemy_here:
        return f"[{room.name}!"
    if enemy_here:
        return f"!{room.name}!"
    if player_here:
        return f"[{room.name}]"
    return f" {room.name} "


def get_map(world: World, player: Player, roamer: Enemy) -> str:
    cells = {room.name: room_marker(room, player, roamer) for room in world}
    lines = [MAP_LEGEND]
    for i, row in enumerate(MAP_ROWS):
        if i:
            lines.append("         |")
        left, middle, right = (cells[name] for name in row)
        lines.append(f" {left} -  {middle}  - {right}")
    lines.append("         |")
    lines.append(f"        {cells[MAP_TAIL]}")
    return "\n".join(lines)


def get_inventory(player: Player) -> str:
    if not player.items:
        return "Inventory:\n\tnothing"
    return "Inventory:\n" + "\n".join(
        f"\t{item.long_description}" for item in player.items
    )


def get_items_line(room: Room) -> str:
    if not room.items:
        return "No items in room"
    return "Items in room = " + "  ".join(i.short_description for i in room.items)


def _enemy_stats(enemy: Enemy) -> str:
    return f"{enemy.name} - HP: {enemy.health} ST: {enemy.stamina}"


def get_enemies_line(room: Room, roamer: Enemy) -> str:
    enemies = list(room.enemies)
    if _roamer_here(roamer, room):
        enemies.append(roamer)
    if not enemies:
        return "Enemies in room = none"
    return "Enemies in room = " + ", ".join(_enemy_stats(e) for e in enemies)


def get_status(player: Player, roamer: Enemy, is_over: bool) -> str:
    """The screen shown after every command."""
    if is_over:
        return GAME_OVER_PROMPT
    room = player.current_room
    return "\n".join(
        [
            f"You are in {room.name}",
            get_items_line(room),
            get_enemies_line(room, roamer),
            "Exits: " + " ".join(room.open_exits()),
            f"HP: {player.health} ST: {player.stamina}",
        ]
    )
