# directory world_visual.py
"""
World Map Visualization Helpers
Terminal map with town and road overlay, a town legend table, and a PNG
biome render for debugging generation.

Usage:
    from world_visual import PrintWorldMap, FormatTownTable, RenderWorldMap
    PrintWorldMap(tiles, roads)
    print(FormatTownTable(towns))
    RenderWorldMap(tiles, towns, roads, "world.png")
"""

import shutil

import matplotlib
import matplotlib.pyplot as plt
from matplotlib.colors import to_rgb
from texttable import Texttable

from worldgen import BuildTileGrid
from world_utils import TileSymbol

USE_COLOR = shutil.get_terminal_size(fallback=(0, 0)).columns > 0

BIOME_COLORS = {
    "plains": "#a8e05f",
    "forest": "#2d8659",
    "desert": "#e8d95a",
    "mountains": "#8c8c8c",
    "swamp": "#5f7352",
    "tundra": "#e0e0e0",
    "volcanic": "#d95763",
    "jungle": "#29bc56",
    "ocean": "#4286f4",
    "wasteland": "#8b6d5c",
    "highlands": "#a0a0a0",
    "beach": "#f7e9c3",
    "marsh": "#7a9e7e",
    "river": "#5da9e9",
    "lake": "#3b7dd8",
}

ROAD_COLORS = {"dirt": "#8b5a2b", "paved": "#303030"}

COLOR_LIST = [
    "\033[91m", # red
    "\033[92m", # green
    "\033[94m", # blue
    "\033[95m", # magenta
    "\033[93m", # yellow
    "\033[96m", # cyan
]
RESET = "\033[0m"


# ------------------------------------------------------------
# Helpers
# ------------------------------------------------------------

def _road_color(idx):
    if not USE_COLOR:
        return ""
    return COLOR_LIST[idx % len(COLOR_LIST)]


def _road_mark(path_type):
    return "=" if path_type == "paved" else "·"


# ------------------------------------------------------------
# TERMINAL OVERLAY
# ------------------------------------------------------------

def PrintWorldMap(tiles, roads=None, show_legend=True):
    """
    Draws the tile map with road overlays.
    Towns always win over roads; roads win over the base biome symbol.
    """
    roads = roads or []
    road_map = {}
    for idx, road in enumerate(roads):
        for tile in road.path:
            road_map.setdefault(tile.pos, idx)

    grid = BuildTileGrid(tiles)
    if not grid:
        return

    x0, y0 = min(t.x for t in tiles), min(t.y for t in tiles)
    print("\n=== WORLD MAP ===")
    print("    " + " ".join(f"{x0 + x:02}" for x in range(len(grid[0]))))

    for y, row in enumerate(grid):
        line = []
        for tile in row:
            if tile is None:
                line.append(" ")
            elif tile.has_town:
                line.append(TileSymbol(tile))
            elif tile.pos in road_map:
                rid = road_map[tile.pos]
                mark = _road_mark(roads[rid].path_type)
                line.append(f"{_road_color(rid)}{mark}{RESET}" if USE_COLOR else mark)
            else:
                line.append(TileSymbol(tile))
        print(f"{y0 + y:02}  " + " ".join(line))

    if show_legend and roads:
        print("\n=== ROAD LEGEND ===")
        for idx, road in enumerate(roads):
            a, b = road.path[0], road.path[-1]
            name = f"Road {idx}: ({a.x},{a.y}) → ({b.x},{b.y})"
            suffix = " [straight]" if road.fallback else ""
            if USE_COLOR:
                print(f"{_road_color(idx)}{_road_mark(road.path_type)}{RESET} {name} | {road.path_type} len={road.length}{suffix}")
            else:
                print(f"{_road_mark(road.path_type)} {name} | {road.path_type} len={road.length}{suffix}")


def FormatTownTable(towns):
    """Town legend as a text table, root first."""
    by_id = {t.id: t for t in towns}
    table = Texttable()
    table.set_deco(Texttable.HEADER)
    table.set_cols_dtype(["t", "t", "i", "i", "t", "t"])
    table.add_row(["Town", "Pos", "Depth", "Pop", "Region", "Parent"])
    for town in sorted(towns, key=lambda t: (t.depth, t.id)):
        parent = by_id.get(town.parent_id)
        table.add_row([
            town.name,
            f"({town.x},{town.y})",
            town.depth,
            town.population,
            town.region,
            parent.name if parent else "-",
        ])
    return table.draw()


# ------------------------------------------------------------
# PNG RENDER
# ------------------------------------------------------------

def RenderWorldMap(tiles, towns=None, roads=None, out_path=None, title=None):
    """
    Render biomes as an image with roads and towns on top.
    Saves to out_path when given, otherwise shows the figure.
    Returns the matplotlib Figure.
    """
    grid = BuildTileGrid(tiles)
    if not grid:
        raise ValueError("no tiles to render")

    x0, y0 = min(t.x for t in tiles), min(t.y for t in tiles)
    image = [
        [to_rgb(BIOME_COLORS.get(t.biome, "#000000")) if t is not None else (0, 0, 0) for t in row]
        for row in grid
    ]
    extent = (x0 - 0.5, x0 + len(grid[0]) - 0.5, y0 + len(grid) - 0.5, y0 - 0.5)

    fig, ax = plt.subplots(figsize=(8, 8))
    ax.imshow(image, extent=extent, interpolation="nearest")

    for road in roads or []:
        xs = [t.x for t in road.path]
        ys = [t.y for t in road.path]
        ax.plot(xs, ys, color=ROAD_COLORS.get(road.path_type, "#000000"),
                linewidth=1.2, linestyle="--" if road.fallback else "-")

    for town in towns or []:
        ax.plot(town.x, town.y, marker="s" if town.parent_id is None else "o",
                color="#ffffff", markeredgecolor="#000000", markersize=6)
        ax.annotate(town.name, (town.x, town.y), xytext=(3, 3),
                    textcoords="offset points", fontsize=6)

    ax.set_title(title or "World Map")
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    fig.tight_layout()

    if out_path:
        fig.savefig(out_path, dpi=120)
        plt.close(fig)
    elif matplotlib.get_backend().lower() != "agg":
        plt.show()
    return fig
