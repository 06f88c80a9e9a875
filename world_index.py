# directory world_index.py
from collections import defaultdict

INDEXED_FLAGS = ("has_town", "has_path", "has_portal", "has_river", "is_lake")


class WorldIndex:
    """
    Lookup tables over a flat list of generated tiles.

    - coordinate -> tile (works for chunks that do not start at 0,0)
    - biome -> set(tile)
    - flag name -> set(tile) for the boolean tile flags
    Call rebuild() after a pass mutates biomes or flags.
    """

    def __init__(self, tiles):
        self.tiles = list(tiles)

        # (x, y) -> tile
        self.coord_index = {}

        # biome -> set(tile)
        self.biome_index = defaultdict(set)

        # flag -> set(tile)
        self.flag_index = defaultdict(set)

        self.rebuild()

    # ----------------------------------------------------------------------
    # FULL REBUILD
    # ----------------------------------------------------------------------
    def rebuild(self):
        self.coord_index.clear()
        self.biome_index.clear()
        self.flag_index.clear()

        for tile in self.tiles:
            self.coord_index[tile.pos] = tile
            self.biome_index[tile.biome].add(tile)
            for flag in INDEXED_FLAGS:
                if getattr(tile, flag):
                    self.flag_index[flag].add(tile)

    # ----------------------------------------------------------------------
    # QUERY API
    # ----------------------------------------------------------------------
    def get(self, pos, default=None):
        return self.coord_index.get(pos, default)

    def __getitem__(self, pos):
        return self.coord_index[pos]

    def __contains__(self, pos):
        return pos in self.coord_index

    def __len__(self):
        return len(self.tiles)

    def with_biome(self, biome):
        return sorted(self.biome_index.get(biome, ()), key=lambda t: (t.y, t.x))

    def with_flag(self, flag):
        return sorted(self.flag_index.get(flag, ()), key=lambda t: (t.y, t.x))

    def biome_counts(self):
        return {biome: len(tiles) for biome, tiles in self.biome_index.items() if tiles}

    def tiles_within_radius(self, center_x, center_y, radius):
        """Tiles within Chebyshev distance radius of (center_x, center_y), row-major."""
        result = []
        for y in range(center_y - radius, center_y + radius + 1):
            for x in range(center_x - radius, center_x + radius + 1):
                tile = self.coord_index.get((x, y))
                if tile is not None:
                    result.append(tile)
        return result
