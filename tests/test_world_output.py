# tests/test_world_output.py
from roads import Road
from world_report import SummarizeBiomes, SummarizeFeatures, SummarizeTowns, TilesToDataFrame
from world_visual import PrintWorldMap, FormatTownTable, RenderWorldMap


def _tiles(tile_factory):
    tiles = [tile_factory(x, 0, "plains", 50) for x in range(3)]
    tiles.append(tile_factory(3, 0, "ocean", 20))
    return tiles


def test_biome_summary(tile_factory):
    df = SummarizeBiomes(_tiles(tile_factory))
    assert list(df["biome"]) == ["plains", "ocean"]
    plains = df.iloc[0]
    assert plains["tiles"] == 3
    assert plains["share"] == 0.75
    assert plains["mean_elevation"] == 50


def test_tiles_frame(tile_factory):
    df = TilesToDataFrame(_tiles(tile_factory))
    assert len(df) == 4
    assert "options" not in df.columns
    assert set(df["biome"]) == {"plains", "ocean"}


def test_feature_summary(tile_factory):
    tiles = _tiles(tile_factory)
    tiles[0].has_town = True
    tiles[1].has_path = True
    tiles[2].has_path = True
    counts = SummarizeFeatures(tiles)
    assert counts["has_town"] == 1
    assert counts["has_path"] == 2
    assert counts["is_lake"] == 0


def test_generated_world_output(generated_world, tmp_path, capsys):
    world, tiles, towns, roads = generated_world

    towns_df = SummarizeTowns(towns)
    assert len(towns_df) == len(towns)
    assert towns_df["depth"].min() == 0

    table = FormatTownTable(towns)
    assert "Town" in table
    for town in towns:
        assert town.name in table

    PrintWorldMap(tiles, roads)
    out = capsys.readouterr().out
    assert "=== WORLD MAP ===" in out
    if roads:
        assert "=== ROAD LEGEND ===" in out

    path = tmp_path / "world.png"
    RenderWorldMap(tiles, towns, roads, out_path=str(path), title=world.name)
    assert path.exists() and path.stat().st_size > 0


def test_map_overlay_marks_roads(tile_factory, capsys):
    tiles = _tiles(tile_factory)
    tiles[0].has_town = True
    road = Road("a", "b", "paved", tiles[:3])
    PrintWorldMap(tiles, [road])
    lines = capsys.readouterr().out.splitlines()
    row = [line for line in lines if line.startswith("00  ")][0]
    assert "=" in row
    assert "Road 0: (0,0) → (2,0) | paved len=3" in "\n".join(lines)
