# directory worldgen.py
"""
World and chunk generation.

    world = GenerateWorld("mysecret")
    tiles = GenerateMapChunk(world.seed, 0, 0, 19, 19, world)

A chunk is generated in a fixed order: noise channels -> biome
classification -> lakes -> rivers -> shorelines -> descriptions ->
adventure options. Every random draw comes from a generator derived from the
seed and the coordinates it decides, so the same request always yields the
same tiles.
"""

import math

from biomes import ClassifyBiome, DetermineWeather, ComputeDifficulty, ComputeDangerLevel
from hydrology import GenerateLakes, GenerateRivers, AdjustBiomesNearWater
from name_generator import GenerateName
from noise_field import GenerateNoiseGrid
from seeded_random import SeededRandom, DeriveSeed
from tile_descriptions import GenerateTileDescription, GenerateDirectionText, GenerateDirectionResult
from tile_state import TileState, AdventureOption
from world_state import WorldState
from world_utils import GetTile, GetNeighbors, LogWorldEvent
from worldgen_config import GetConfig

NOISE_CHANNELS = ["elevation", "temperature", "moisture", "river"]

# (direction, dx, dy) in the order options are offered
CARDINAL_DIRECTIONS = [
    ("north", 0, -1),
    ("east", 1, 0),
    ("south", 0, 1),
    ("west", -1, 0),
]


def _clamp01(v):
    return max(0.0, min(1.0, v))


# --- World ---------------------------------------------------------------

def GenerateWorld(seed):
    """World parameters for a seed. Raises ValueError for an empty seed."""
    rng = SeededRandom(seed)

    name = GenerateName(rng, "world")
    map_size = rng.next_int(50, 100)
    difficulty_bias = rng.next_float(-0.5, 0.5)
    climate_bias = rng.next_float(-0.5, 0.5)
    moisture_bias = rng.next_float(-0.5, 0.5)
    num_towns = max(5, map_size // 10 + rng.next_int(-2, 2))

    world = WorldState(
        id=f"world-{seed}",
        name=name,
        seed=seed,
        map_size=map_size,
        difficulty_bias=difficulty_bias,
        climate_bias=climate_bias,
        moisture_bias=moisture_bias,
        num_towns=num_towns,
    )
    LogWorldEvent("worldgen", f"Created world '{name}' ({map_size}x{map_size}, {num_towns} towns planned).")
    return world


def ClampRegion(world, x0, y0, x1, y1):
    last = world.map_size - 1
    x0, x1 = max(0, min(x0, last)), max(0, min(x1, last))
    y0, y1 = max(0, min(y0, last)), max(0, min(y1, last))
    if x1 < x0 or y1 < y0:
        raise ValueError(f"empty region ({x0},{y0})-({x1},{y1})")
    return x0, y0, x1, y1


# --- Classification ------------------------------------------------------

def ClassifyRegion(seed, world, x0, y0, x1, y1):
    """
    Sample the noise channels and classify every tile of the region.
    Returns the arena grid[y - y0][x - x0] before any hydrology.
    """
    cfg = GetConfig()
    noise_cfg = cfg["noise"]
    channels = {
        name: GenerateNoiseGrid(
            f"{seed}_{name}", x0, y0, x1, y1,
            octaves=noise_cfg[name]["octaves"],
            persistence=noise_cfg[name]["persistence"],
        )
        for name in NOISE_CHANNELS
    }

    size = world.map_size
    grid = []
    for gy, y in enumerate(range(y0, y1 + 1)):
        latitude = abs(y / size - 0.5) * 2
        row = []
        for gx, x in enumerate(range(x0, x1 + 1)):
            e = channels["elevation"][gy][gx]
            t = _clamp01(channels["temperature"][gy][gx] - latitude * 0.5
                         + world.climate_bias * cfg["climate_bias_weight"])
            m = _clamp01(channels["moisture"][gy][gx]
                         + world.moisture_bias * cfg["moisture_bias_weight"])

            biome = ClassifyBiome(e, t, m, latitude)
            tile_rng = SeededRandom(DeriveSeed(seed, "tile", x, y))

            tile = TileState(
                x=x,
                y=y,
                world_id=world.id,
                elevation=math.floor(e * 100),
                temperature=max(0, min(100, math.floor(t * 50 + 50))),
                moisture=math.floor(m * 100),
                biome=biome,
                weather=DetermineWeather(t, m, tile_rng),
                difficulty=ComputeDifficulty(x, y, size, e, world.difficulty_bias, biome),
                has_portal=tile_rng.next_bool(cfg["portal_chance"]),
            )
            tile.river_candidate = (
                channels["river"][gy][gx] > cfg["river_candidate_threshold"] and 0.3 < e < 0.8
            )
            row.append(tile)
        grid.append(row)

    return grid


# --- Chunks --------------------------------------------------------------

def GenerateMapChunk(seed, x0, y0, x1, y1, world=None):
    """
    Generate the inclusive rectangle (x0, y0)-(x1, y1), clamped to the map.
    Returns a row-major list of TileState.
    """
    world = world or GenerateWorld(seed)
    x0, y0, x1, y1 = ClampRegion(world, x0, y0, x1, y1)

    grid = ClassifyRegion(seed, world, x0, y0, x1, y1)

    hydro_rng = SeededRandom(DeriveSeed(seed, "hydrology", x0, y0, x1, y1))
    GenerateLakes(grid, hydro_rng)
    GenerateRivers(grid, hydro_rng)
    AdjustBiomesNearWater(grid)

    DescribeTiles(grid, seed)
    GenerateAdventureOptions(grid, seed)

    return [tile for row in grid for tile in row]


def DescribeTiles(grid, seed):
    for row in grid:
        for tile in row:
            rng = SeededRandom(DeriveSeed(seed, "description", tile.x, tile.y))
            tile.description = GenerateTileDescription(tile.biome, tile.weather, tile.difficulty, rng)


def GenerateAdventureOptions(grid, seed):
    """
    Offer travel to each cardinal neighbour inside the grid.
    Call again after towns or roads change tiles to refresh the text.
    """
    height = len(grid)
    width = len(grid[0]) if height else 0

    for gy in range(height):
        for gx in range(width):
            tile = grid[gy][gx]
            if tile is None:
                continue
            rng = SeededRandom(DeriveSeed(seed, "options", tile.x, tile.y))
            options = []
            for direction, dx, dy in CARDINAL_DIRECTIONS:
                target = GetTile(grid, gx + dx, gy + dy)
                if target is None:
                    continue
                options.append(AdventureOption(
                    direction=direction,
                    text=GenerateDirectionText(direction, target, rng),
                    result=GenerateDirectionResult(direction, target, rng),
                    danger_level=ComputeDangerLevel(target),
                ))
            tile.options = options


# --- Arena helpers -------------------------------------------------------

def BuildTileGrid(tiles):
    """
    Rebuild the grid[y][x] arena from a flat tile list.
    Missing cells are None.
    """
    if not tiles:
        return []
    min_x = min(t.x for t in tiles)
    min_y = min(t.y for t in tiles)
    width = max(t.x for t in tiles) - min_x + 1
    height = max(t.y for t in tiles) - min_y + 1

    grid = [[None] * width for _ in range(height)]
    for tile in tiles:
        grid[tile.y - min_y][tile.x - min_x] = tile
    return grid


def GetWorldTile(grid, x, y):
    """Tile at world coordinate (x, y) of an arena that may start off-origin."""
    if not grid or grid[0][0] is None:
        return None
    return GetTile(grid, x - grid[0][0].x, y - grid[0][0].y)


def GetWorldNeighbors(grid, x, y):
    return [n for n in GetNeighbors(grid, x - grid[0][0].x, y - grid[0][0].y) if n is not None]
