# directory settlements.py
"""
Town placement and town generation.

Towns form a tree rooted at the settlement nearest the map centre. Sites
are chosen by preference (river junction, then riverside, then biome
border), then filled in with random sites, always keeping every pair of
towns at least TownSpacing(map_size) apart.
"""

import math

from seeded_random import SeededRandom, DeriveSeed
from name_generator import GenerateName
from town_catalog import (
    REGION_TYPES, TOWN_DESCRIPTIONS, BUILDING_TEMPLATES,
    CORE_BUILDINGS, REGION_BUILDINGS, EXTRA_BUILDINGS,
)
from world_state import Town, Building, TownService
from world_utils import Distance, LogWorldEvent
from worldgen import GenerateMapChunk, BuildTileGrid, GetWorldTile, GetWorldNeighbors
from worldgen_config import GetConfig

PRIORITY_RIVER_JUNCTION = 1
PRIORITY_RIVERSIDE = 2
PRIORITY_BIOME_BORDER = 3


def TownSpacing(map_size):
    cfg = GetConfig()
    return max(cfg["town_spacing_floor"], map_size // cfg["town_spacing_divisor"])


# -------------------------------------------------------------------
# Site selection
# -------------------------------------------------------------------

def FindClosestNonWaterTile(grid, x, y, max_radius=None):
    """
    Search square rings of growing radius around (x, y) for land.
    Falls back to the tile at (x, y) when none is found.
    """
    origin = GetWorldTile(grid, x, y)
    if origin is not None and not origin.is_water:
        return origin

    if max_radius is None:
        max_radius = max(len(grid), len(grid[0]) if grid else 0)

    for r in range(1, max_radius + 1):
        for dx in range(-r, r + 1):
            for dy in range(-r, r + 1):
                if max(abs(dx), abs(dy)) != r:
                    continue
                tile = GetWorldTile(grid, x + dx, y + dy)
                if tile is not None and not tile.is_water:
                    return tile

    return origin


def FindTownCandidates(grid):
    """
    Land tiles ranked by settlement preference.
    Row-major order is kept within a priority.
    """
    ranked = []
    for row in grid:
        for tile in row:
            if tile is None or tile.is_water:
                continue
            neighbors = GetWorldNeighbors(grid, tile.x, tile.y)
            river_count = sum(1 for n in neighbors if n.biome == "river")

            if river_count > 1:
                ranked.append((PRIORITY_RIVER_JUNCTION, tile))
            elif river_count == 1:
                ranked.append((PRIORITY_RIVERSIDE, tile))
            elif len(neighbors) == 8 and any(
                n.biome != tile.biome and not n.is_water for n in neighbors
            ):
                ranked.append((PRIORITY_BIOME_BORDER, tile))

    ranked.sort(key=lambda entry: entry[0])
    return [tile for _, tile in ranked]


def _FindParent(towns, position, depth):
    eligible = [t for t in towns if t.depth <= depth]
    if not eligible:
        return None
    return min(eligible, key=lambda t: Distance(t.position, position))


def GenerateWorldTowns(world, tiles=None):
    """
    Place up to world.num_towns towns. `tiles` must cover the whole map;
    when omitted the full map is generated. Placed tiles get has_town set.
    """
    cfg = GetConfig()
    seed = world.seed
    rng = SeededRandom(DeriveSeed(seed, "towns"))

    if tiles is None:
        tiles = GenerateMapChunk(seed, 0, 0, world.map_size - 1, world.map_size - 1, world)
    grid = BuildTileGrid(tiles)

    spacing = TownSpacing(world.map_size)
    depth_step = cfg["town_depth_step"]
    towns = []

    cx, cy = world.center
    root_tile = FindClosestNonWaterTile(grid, cx, cy)
    root_pos = root_tile.pos if root_tile is not None else (cx, cy)

    def try_place(position):
        if any(Distance(t.position, position) < spacing for t in towns):
            return False
        if towns:
            depth = math.floor(Distance(root_pos, position) / depth_step)
            parent = _FindParent(towns, position, depth)
            parent_id = parent.id if parent else None
        else:
            depth, parent_id = 0, None

        town = GenerateTown(seed, world.id, position, depth, parent_id)
        towns.append(town)
        tile = GetWorldTile(grid, *position)
        if tile is not None:
            tile.has_town = True
        return True

    try_place(root_pos)

    for tile in FindTownCandidates(grid):
        if len(towns) >= world.num_towns:
            break
        try_place(tile.pos)

    attempts = 0
    while len(towns) < world.num_towns and attempts < cfg["town_topup_attempts"]:
        attempts += 1
        x = rng.next_int(0, world.map_size - 1)
        y = rng.next_int(0, world.map_size - 1)
        tile = GetWorldTile(grid, x, y)
        if tile is None or tile.is_water:
            continue
        try_place((x, y))

    LogWorldEvent("settlement", f"Placed {len(towns)}/{world.num_towns} towns (spacing {spacing}).")
    return towns


# -------------------------------------------------------------------
# Town generation
# -------------------------------------------------------------------

def _Slug(name):
    return name.lower().replace(" ", "-")


def BuildBuilding(building_type, town_name, depth, rng):
    template = BUILDING_TEMPLATES[building_type]
    services = []
    for sid, sname, sdesc, stype, (cost_base, cost_step), (level_base, level_div) in template["services"]:
        services.append(TownService(
            id=sid,
            name=sname,
            description=sdesc,
            type=stype,
            cost=cost_base + cost_step * depth,
            level=level_base + (depth // level_div if level_div else 0),
        ))

    return Building(
        id=f"{building_type}-{_Slug(town_name)}",
        name=rng.pick(template["names"]),
        description=template["desc"],
        type=building_type,
        services=services,
    )


def GenerateTownBuildings(rng, town_name, region, depth):
    """Inn, tavern and shop always; a regional building; maybe one extra."""
    buildings = [BuildBuilding(btype, town_name, depth, rng) for btype in CORE_BUILDINGS]

    regional = REGION_BUILDINGS.get(region)
    if regional:
        buildings.append(BuildBuilding(regional, town_name, depth, rng))

    if rng.next_bool(0.5 + depth * 0.1):
        buildings.append(BuildBuilding(rng.pick(EXTRA_BUILDINGS), town_name, depth, rng))

    return buildings


def GenerateTown(seed, world_id, position, depth, parent_id):
    x, y = position
    rng = SeededRandom(f"{seed}-town-{x}-{y}")

    name = GenerateName(rng, "town")
    population = math.floor(rng.next_int(100, 1000) * max(0.5, 1 - depth * 0.1))
    region = rng.pick(REGION_TYPES)
    description = rng.pick(TOWN_DESCRIPTIONS).format(region=region.lower())
    buildings = GenerateTownBuildings(rng, name, region, depth)

    return Town(
        id=f"town-{world_id}-{x}-{y}",
        name=name,
        description=description,
        region=region,
        population=population,
        position=(x, y),
        world_id=world_id,
        depth=depth,
        parent_id=parent_id,
        buildings=buildings,
        influence_radius=1 + population // 200,
    )
