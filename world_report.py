# directory world_report.py
"""
Tabular summaries of a generated world for balancing.

    df = SummarizeBiomes(tiles)
    print(df)
"""

import pandas as pd

from world_index import WorldIndex, INDEXED_FLAGS


def TilesToDataFrame(tiles):
    """One row per tile, options and description dropped."""
    rows = []
    for tile in tiles:
        row = tile.to_dict()
        row.pop("options")
        row.pop("description")
        rows.append(row)
    return pd.DataFrame(rows)


def SummarizeBiomes(tiles):
    """
    Per biome: tile count, share of the map, mean elevation and mean
    difficulty. Sorted by count, largest first.
    """
    index = WorldIndex(tiles)
    total = len(index)
    rows = []
    for biome, count in index.biome_counts().items():
        members = index.with_biome(biome)
        rows.append({
            "biome": biome,
            "tiles": count,
            "share": count / total if total else 0.0,
            "mean_elevation": sum(t.elevation for t in members) / count,
            "mean_difficulty": sum(t.difficulty for t in members) / count,
        })

    df = pd.DataFrame(rows, columns=["biome", "tiles", "share", "mean_elevation", "mean_difficulty"])
    return df.sort_values(["tiles", "biome"], ascending=[False, True]).reset_index(drop=True)


def SummarizeFeatures(tiles):
    """Tile count per boolean flag (towns, roads, rivers, lakes, portals)."""
    index = WorldIndex(tiles)
    return pd.Series({flag: len(index.with_flag(flag)) for flag in INDEXED_FLAGS}, name="tiles")


def SummarizeTowns(towns):
    rows = [{
        "id": t.id,
        "name": t.name,
        "x": t.x,
        "y": t.y,
        "depth": t.depth,
        "population": t.population,
        "region": t.region,
        "buildings": len(t.buildings),
        "parent_id": t.parent_id,
    } for t in towns]
    return pd.DataFrame(rows, columns=[
        "id", "name", "x", "y", "depth", "population", "region", "buildings", "parent_id",
    ])


def PrintWorldReport(tiles, towns):
    pd.set_option("display.max_rows", None)
    pd.set_option("display.width", 1000)
    print("\n=== BIOMES ===")
    print(SummarizeBiomes(tiles).to_string(index=False))
    print("\n=== FEATURES ===")
    print(SummarizeFeatures(tiles).to_string())
    print("\n=== TOWNS BY DEPTH ===")
    towns_df = SummarizeTowns(towns)
    if not towns_df.empty:
        print(towns_df.groupby("depth")["population"].agg(["count", "sum", "mean"]))
