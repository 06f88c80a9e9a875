# directory roads.py
"""
Road network between towns
--------------------------

Features:
- Nearest-neighbour town linking (each town to its closest few)
- A* over the tile grid with per-biome step costs
- Dirt roads wander: jittered step costs and priorities
- Straight-line fallback when no route exists

Each unordered town pair is connected once. The pair's generator is seeded
from the world seed and both town ids, so a road never depends on the
order the network is built in.
"""

import heapq
import math
from itertools import count

from seeded_random import SeededRandom
from world_index import WorldIndex
from world_utils import Distance, DIRECTIONS_8, LogWorldEvent
from worldgen_config import GetConfig


class Road:
    def __init__(self, from_id, to_id, path_type, path, fallback=False):
        self.from_id = from_id
        self.to_id = to_id
        self.path_type = path_type
        self.path = path
        self.fallback = fallback

    @property
    def length(self):
        return len(self.path)

    def to_dict(self):
        return {
            "from": self.from_id,
            "to": self.to_id,
            "path_type": self.path_type,
            "path": [t.pos for t in self.path],
            "fallback": self.fallback,
        }

    def __repr__(self):
        return f"<Road {self.from_id} -> {self.to_id} {self.path_type} len={self.length}>"


# -------------------------------------------------------------------
# 1. Costs
# -------------------------------------------------------------------

def TerrainCost(tile):
    """Cost of stepping onto a tile."""
    return GetConfig()["terrain_costs"].get(tile.biome, 1)


def Manhattan(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


# -------------------------------------------------------------------
# 2. Pathfinding (A* with terrain weight)
# -------------------------------------------------------------------

def FindPath(start, goal, tile_index, rng=None, add_randomness=False):
    """
    A* from start to goal over tiles present in tile_index (a WorldIndex
    or a plain {(x, y): tile} dict).
    - heap entries are (f, counter, pos): equal f pops the earliest push
    - closed set; stale heap entries are skipped
    Returns the tile list start..goal, or None when unreachable.
    """
    cfg = GetConfig()
    step_jitter = cfg["dirt_step_jitter"]
    priority_jitter = cfg["dirt_priority_jitter"]
    if add_randomness and rng is None:
        raise ValueError("add_randomness requires an rng")

    counter = count()
    goal_pos = goal.pos

    open_heap = []
    heapq.heappush(open_heap, (Manhattan(start.pos, goal_pos), next(counter), start.pos))

    came = {}
    gscore = {start.pos: 0}
    closed = set()

    while open_heap:
        _, _, pos = heapq.heappop(open_heap)
        if pos in closed:
            continue

        if pos == goal_pos:
            path = [tile_index[pos]]
            while pos in came:
                pos = came[pos]
                path.append(tile_index[pos])
            return list(reversed(path))

        closed.add(pos)

        for dx, dy in DIRECTIONS_8:
            npos = (pos[0] + dx, pos[1] + dy)
            neighbor = tile_index.get(npos)
            if neighbor is None or npos in closed:
                continue

            cost = TerrainCost(neighbor)
            if add_randomness:
                cost += rng.next_float(0, step_jitter)
            new_g = gscore[pos] + cost

            if npos not in gscore or new_g < gscore[npos]:
                gscore[npos] = new_g
                came[npos] = pos
                priority = new_g + Manhattan(npos, goal_pos)
                if add_randomness:
                    priority += rng.next_float(0, priority_jitter)
                heapq.heappush(open_heap, (priority, next(counter), npos))

    return None


def _RoundHalfUp(v):
    return math.floor(v + 0.5)


def StraightLinePath(start, goal, tile_index):
    """Rasterised line start..goal; cells missing from the index are skipped."""
    dx = goal.x - start.x
    dy = goal.y - start.y
    steps = max(abs(dx), abs(dy))
    if steps == 0:
        return [start]

    path = []
    for i in range(steps + 1):
        pos = (start.x + _RoundHalfUp(dx * i / steps), start.y + _RoundHalfUp(dy * i / steps))
        tile = tile_index.get(pos)
        if tile is not None and (not path or path[-1] is not tile):
            path.append(tile)
    return path


# -------------------------------------------------------------------
# 3. Network
# -------------------------------------------------------------------

def FindNearbyTowns(town, towns, limit=3):
    """The `limit` closest other towns, nearest first (list order breaks ties)."""
    others = [t for t in towns if t.id != town.id]
    others.sort(key=lambda t: Distance(town.position, t.position))
    return others[:limit]


def ConnectTownsWithPath(world, town_a, town_b, tile_index):
    """Lay one road between two towns. Returns the Road, or None if either town is off the tile set."""
    rng = SeededRandom(world.seed + town_a.id + town_b.id)
    path_type = "dirt" if rng.next_bool(GetConfig()["dirt_road_chance"]) else "paved"

    start = tile_index.get(town_a.position)
    goal = tile_index.get(town_b.position)
    if start is None or goal is None:
        return None

    path = FindPath(start, goal, tile_index, rng, add_randomness=(path_type == "dirt"))
    fallback = path is None
    if fallback:
        path = StraightLinePath(start, goal, tile_index)

    for tile in path:
        tile.mark_path(path_type)

    return Road(town_a.id, town_b.id, path_type, path, fallback)


def GenerateRoadNetwork(world, towns, tiles, max_connections=None):
    if max_connections is None:
        max_connections = GetConfig()["road_connections"]
    tile_index = WorldIndex(tiles)

    roads = []
    connected = set()
    for town in towns:
        for other in FindNearbyTowns(town, towns, max_connections):
            a, b = sorted((town, other), key=lambda t: t.id)
            key = (a.id, b.id)
            if key in connected:
                continue
            connected.add(key)

            road = ConnectTownsWithPath(world, a, b, tile_index)
            if road is not None:
                roads.append(road)

    fallbacks = sum(1 for r in roads if r.fallback)
    LogWorldEvent("roads", f"Laid {len(roads)} roads ({fallbacks} straight-line fallbacks).")
    return roads


def GeneratePathsBetweenTowns(world, towns, tiles):
    """Flag road tiles in place and return the same tile list."""
    GenerateRoadNetwork(world, towns, tiles)
    return tiles
