# directory hydrology.py
"""
Lakes, rivers and shorelines for a generated chunk.

All passes mutate the chunk arena grid[y][x] of TileState in place and run
in this order: GenerateLakes -> GenerateRivers -> AdjustBiomesNearWater.
"""

from worldgen_config import GetConfig
from world_utils import GetNeighbors, GetTilesWithinRadius, DIRECTIONS_8, LogWorldEvent

SHORE_WATER = ("ocean", "lake")
FLOW_TARGETS = ("ocean", "lake", "river")


def _grid_size(grid):
    height = len(grid)
    width = len(grid[0]) if height else 0
    return width, height


def _local(grid, tile):
    """Arena indices of a tile; chunks start at arbitrary world coordinates."""
    return tile.x - grid[0][0].x, tile.y - grid[0][0].y


# -------------------------------------------------------------------
# Lakes
# -------------------------------------------------------------------

def FindLakeCandidates(grid, band=None):
    """Interior, non-ocean local minima whose elevation lies inside the lake band."""
    low, high = band or GetConfig()["lake_band"]
    width, height = _grid_size(grid)
    candidates = []

    for y in range(1, height - 1):
        for x in range(1, width - 1):
            tile = grid[y][x]
            if tile.biome == "ocean":
                continue
            if not (low < tile.elevation < high):
                continue
            if any(n.elevation < tile.elevation for n in GetNeighbors(grid, x, y)):
                continue
            candidates.append(tile)

    return candidates


def GenerateLakes(grid, rng, density=None, min_radius=None, max_radius=None):
    cfg = GetConfig()
    density = density or cfg["lake_density"]
    if min_radius is None or max_radius is None:
        min_radius, max_radius = cfg["lake_radius"]

    width, height = _grid_size(grid)
    candidates = FindLakeCandidates(grid)
    num_lakes = min(len(candidates), max(1, (width * height) // density))

    for _ in range(num_lakes):
        center = candidates.pop(rng.next_int(0, len(candidates) - 1))
        radius = rng.next_int(min_radius, max_radius)
        cx, cy = _local(grid, center)

        for tile in GetTilesWithinRadius(grid, cx, cy, radius, include_center=True):
            if tile.biome != "ocean":
                tile.set_biome("lake")

    if num_lakes:
        LogWorldEvent("hydrology", f"Carved {num_lakes} lakes.")
    return num_lakes


# -------------------------------------------------------------------
# Rivers
# -------------------------------------------------------------------

def FindRiverSources(grid, source_elevation=None):
    if source_elevation is None:
        source_elevation = GetConfig()["river_source_elevation"]
    return [
        tile
        for row in grid
        for tile in row
        if tile.river_candidate and tile.elevation > source_elevation and not tile.is_water
    ]


def TraceRiver(grid, source, rng, max_length=100):
    """
    Walk downhill from `source`, converting tiles to river.
    Stops on existing water, at a dead end (which becomes a lake), or after
    max_length steps. Returns the list of tiles in the course.
    """
    width, height = _grid_size(grid)

    source.set_biome("river")
    course = [source]
    visited = {source.pos}
    current = source

    for _ in range(max_length):
        directions = rng.shuffle(list(DIRECTIONS_8))

        next_tile = None
        lowest = current.elevation
        reached_water = False

        cx, cy = _local(grid, current)
        for dx, dy in directions:
            gx = cx + dx
            gy = cy + dy
            if not (0 <= gx < width and 0 <= gy < height):
                continue
            neighbor = grid[gy][gx]
            if neighbor.pos in visited:
                continue

            if neighbor.biome in FLOW_TARGETS:
                next_tile = neighbor
                reached_water = True
                break

            if neighbor.elevation < lowest:
                lowest = neighbor.elevation
                next_tile = neighbor

        if reached_water:
            break

        if next_tile is None:
            # dead end: pool into a terminal lake
            if current.biome not in ("ocean", "lake"):
                current.set_biome("lake")
            break

        current = next_tile
        current.set_biome("river")
        visited.add(current.pos)
        course.append(current)

    return course


def GenerateRivers(grid, rng, density=None, max_length=None, source_elevation=None):
    cfg = GetConfig()
    density = density or cfg["river_density"]
    max_length = max_length or cfg["max_river_length"]

    width, height = _grid_size(grid)
    sources = FindRiverSources(grid, source_elevation)
    max_rivers = min(len(sources), max(1, (width * height) // density))

    river_count = 0
    for _ in range(max_rivers):
        source = sources.pop(rng.next_int(0, len(sources) - 1))
        if source.is_water:
            continue
        TraceRiver(grid, source, rng, max_length)
        river_count += 1

    if river_count:
        LogWorldEvent("hydrology", f"Traced {river_count} rivers.")
    return river_count


# -------------------------------------------------------------------
# Shorelines
# -------------------------------------------------------------------

def AdjustBiomesNearWater(grid):
    """Low land bordering ocean or lake becomes beach or marsh."""
    changes = []
    for row in grid:
        for tile in row:
            if tile.is_water:
                continue
            lx, ly = _local(grid, tile)
            if not any(n.biome in SHORE_WATER for n in GetNeighbors(grid, lx, ly)):
                continue

            if tile.elevation < 40 and tile.biome in ("plains", "desert"):
                changes.append((tile, "beach"))
            elif tile.elevation < 35 and tile.biome in ("plains", "forest", "swamp"):
                changes.append((tile, "marsh"))

    for tile, biome in changes:
        tile.set_biome(biome)
    return len(changes)
