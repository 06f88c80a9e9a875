# tests/conftest.py
import sys
from pathlib import Path

import matplotlib
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))
matplotlib.use("Agg")

from player import Player, PlayerStats
from tile_state import TileState
from worldgen_config import GetConfig, ResetWorldgenConfig


@pytest.fixture(autouse=True)
def quiet_config():
    """Fresh default config per test, with event logging off."""
    ResetWorldgenConfig()
    GetConfig()["log_events"] = False
    yield
    ResetWorldgenConfig()


def make_tile(x, y, biome="plains", elevation=50, **kwargs):
    tile = TileState(
        x=x, y=y, world_id="world-test",
        elevation=elevation, temperature=50, moisture=50,
        biome=biome, **kwargs
    )
    tile.set_biome(biome)
    return tile


def make_grid(width, height, biome="plains", elevation=50, x0=0, y0=0):
    return [
        [make_tile(x0 + x, y0 + y, biome, elevation) for x in range(width)]
        for y in range(height)
    ]


@pytest.fixture
def tile_factory():
    return make_tile


@pytest.fixture
def grid_factory():
    return make_grid


@pytest.fixture
def player():
    return Player("Tester", level=1, stats=PlayerStats())


class FixedRandom:
    """Stand-in generator returning a scripted sequence from next()."""

    def __init__(self, values):
        self.values = list(values)
        self.i = 0

    def next(self):
        v = self.values[self.i % len(self.values)]
        self.i += 1
        return v

    def next_int(self, lo, hi):
        return lo + int(self.next() * (hi - lo + 1))

    def next_float(self, lo, hi):
        return lo + self.next() * (hi - lo)

    def next_bool(self, p=0.5):
        return self.next() < p

    def pick(self, items):
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items):
        return items


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture(scope="session")
def generated_world():
    """(world, tiles, towns, roads) for one seed, shared read-only."""
    from main import CreateWorld

    ResetWorldgenConfig()
    GetConfig()["log_events"] = False
    return CreateWorld("mysecret")
