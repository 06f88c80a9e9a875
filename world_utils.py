# directory world_utils.py
import math

from worldgen_config import GetConfig

SYMBOLS = {
    "plains": "🌿",
    "forest": "🌳",
    "desert": "🏜️",
    "mountains": "⛰️",
    "swamp": "🪵",
    "tundra": "❄️",
    "volcanic": "🌋",
    "jungle": "🌴",
    "ocean": "🌊",
    "wasteland": "💀",
    "highlands": "🗻",
    "beach": "🏖️",
    "marsh": "💦",
    "river": "~",
    "lake": "💧",
    "town": "🏠",
    "portal": "🌀",
}

DIRECTIONS_8 = [
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
]

# --- Grid helpers

def GetTile(world, x, y):
    """Safely get a tile by coordinates (x, y).
    Note: internally, world is indexed as world[y][x].
    """
    height = len(world)
    width = len(world[0]) if height > 0 else 0
    if 0 <= y < height and 0 <= x < width:
        return world[y][x]
    return None


def GetNeighbors(world, x, y):
    height = len(world)
    width = len(world[0])
    neighbors = []
    for ny in range(max(0, y - 1), min(height, y + 2)):
        for nx in range(max(0, x - 1), min(width, x + 2)):
            if nx == x and ny == y:
                continue
            neighbors.append(world[ny][nx])
    return neighbors


def GetTilesWithinRadius(world, x, y, radius=3, include_center=False):
    """
    Return tiles within Euclidean distance `radius` of (x, y).
    Keeps bounds checks. Returns list[TileState].
    """
    height = len(world)
    width = len(world[0]) if height > 0 else 0
    result = []
    for ny in range(max(0, y - radius), min(height, y + radius + 1)):
        for nx in range(max(0, x - radius), min(width, x + radius + 1)):
            if nx == x and ny == y and not include_center:
                continue
            if math.sqrt((nx - x) ** 2 + (ny - y) ** 2) <= radius:
                result.append(world[ny][nx])
    return result


def Distance(a, b):
    """Euclidean distance between two (x, y) pairs."""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2)


# --- Output

def TileSymbol(tile):
    if tile.has_town:
        return SYMBOLS["town"]
    if tile.has_portal:
        return SYMBOLS["portal"]
    return SYMBOLS.get(tile.biome, "?")


def LogWorldEvent(event_type: str, message: str, tile=None):
    """
    Standardized logging for generation and battle events.
    Output format: [EVENT_TYPE] (x,y): Message
    """
    if not GetConfig().get("log_events", True):
        return

    log_parts = [f"[{event_type.upper()}]"]
    if tile is not None:
        log_parts.append(f"({tile.x},{tile.y}):")
    log_parts.append(message)
    print(" ".join(log_parts))
