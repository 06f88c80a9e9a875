# tests/test_settlements.py
import itertools

from settlements import (
    TownSpacing, FindClosestNonWaterTile, FindTownCandidates,
    GenerateWorldTowns, GenerateTown,
)
from world_state import WorldState
from world_utils import Distance


def _world(map_size=20, num_towns=5, seed="spacing"):
    return WorldState(
        id=f"world-{seed}", name="Testland", seed=seed, map_size=map_size,
        difficulty_bias=0.0, climate_bias=0.0, moisture_bias=0.0, num_towns=num_towns,
    )


def test_town_spacing():
    assert TownSpacing(50) == 8
    assert TownSpacing(100) == 8
    assert TownSpacing(150) == 10


def test_closest_non_water_returns_land_origin(grid_factory):
    grid = grid_factory(5, 5)
    assert FindClosestNonWaterTile(grid, 2, 2) is grid[2][2]


def test_closest_non_water_searches_rings(grid_factory):
    grid = grid_factory(7, 7, biome="ocean")
    grid[1][5].set_biome("forest")
    grid[6][6].set_biome("plains")
    assert FindClosestNonWaterTile(grid, 3, 3) is grid[1][5]


def test_closest_non_water_scans_columns_first(grid_factory):
    grid = grid_factory(5, 5, biome="ocean")
    grid[1][3].set_biome("plains")
    grid[3][1].set_biome("plains")
    assert FindClosestNonWaterTile(grid, 2, 2) is grid[3][1]


def test_closest_non_water_all_water_falls_back(grid_factory):
    grid = grid_factory(4, 4, biome="lake")
    assert FindClosestNonWaterTile(grid, 1, 1) is grid[1][1]


def test_candidates_ranked_by_river_count(grid_factory):
    grid = grid_factory(5, 5)
    grid[2][2].set_biome("river")
    grid[4][4].set_biome("river")

    ranked = [t.pos for t in FindTownCandidates(grid)]

    assert ranked == [
        (3, 3),
        (1, 1), (2, 1), (3, 1),
        (1, 2), (3, 2),
        (1, 3), (2, 3), (4, 3),
        (3, 4),
    ]


def test_candidates_biome_border_needs_full_neighbourhood(grid_factory):
    grid = grid_factory(3, 3)
    grid[0][0].set_biome("forest")
    assert FindTownCandidates(grid) == [grid[1][1]]


def test_candidates_ignore_water_borders(grid_factory):
    grid = grid_factory(3, 3)
    grid[0][0].set_biome("ocean")
    assert FindTownCandidates(grid) == []


def test_fallback_placement_keeps_spacing(grid_factory):
    world = _world()
    tiles = [t for row in grid_factory(20, 20) for t in row]

    towns = GenerateWorldTowns(world, tiles)

    assert 1 <= len(towns) <= world.num_towns
    spacing = TownSpacing(world.map_size)
    for a, b in itertools.combinations(towns, 2):
        assert Distance(a.position, b.position) >= spacing
    assert towns[0].position == (10, 10)
    assert {t.pos for t in tiles if t.has_town} == {t.position for t in towns}


def test_root_moves_off_water(grid_factory):
    world = _world(num_towns=1)
    grid = grid_factory(20, 20)
    grid[10][10].set_biome("ocean")
    tiles = [t for row in grid for t in row]

    towns = GenerateWorldTowns(world, tiles)

    assert len(towns) == 1
    assert towns[0].position != (10, 10)
    assert Distance(towns[0].position, (10, 10)) < 2


def test_generated_world_towns_form_tree(generated_world):
    world, tiles, towns, _ = generated_world
    by_id = {t.id: t for t in towns}

    roots = [t for t in towns if t.parent_id is None]
    assert len(roots) == 1
    assert roots[0].depth == 0
    assert roots[0] is towns[0]

    for town in towns[1:]:
        parent = by_id[town.parent_id]
        assert parent.depth <= town.depth
        assert town.depth >= 0


def test_generated_world_towns_spaced_on_land(generated_world):
    world, tiles, towns, _ = generated_world
    index = {t.pos: t for t in tiles}
    spacing = TownSpacing(world.map_size)

    assert 1 <= len(towns) <= world.num_towns
    for a, b in itertools.combinations(towns, 2):
        assert Distance(a.position, b.position) >= spacing
    for town in towns:
        assert index[town.position].has_town
        assert world.in_bounds(*town.position)


def test_generate_town_deterministic():
    a = GenerateTown("mysecret", "world-mysecret", (4, 7), 2, "town-root")
    b = GenerateTown("mysecret", "world-mysecret", (4, 7), 2, "town-root")
    assert a.to_dict() == b.to_dict()
    assert a.id == "town-world-mysecret-4-7"


def test_generate_town_fields():
    town = GenerateTown("mysecret", "world-mysecret", (4, 7), 3, "town-root")
    assert town.influence_radius == 1 + town.population // 200
    assert 100 * 0.7 - 1 < town.population <= 1000
    types = [b.type for b in town.buildings]
    assert types[:3] == ["inn", "tavern", "shop"]
    inn = town.get_building("inn")
    assert inn is not None and inn.services
    assert town.parent_id == "town-root"


def test_inn_offers_rest():
    town = GenerateTown("mysecret", "world-mysecret", (4, 7), 0, None)
    inn = town.get_building("inn")
    rest = inn.get_service("heal")
    assert rest is not None
    assert rest.name == "Rest and Recover"
    assert inn.get_service("teleport") is None
