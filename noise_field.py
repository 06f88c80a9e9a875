# directory noise_field.py
"""
Seeded 2-D gradient noise over world coordinates.

Uses improved Perlin noise from the `noise` package (quintic fade curve,
amplitude-normalised fractal sum with lacunarity 2). The seed chooses the
permutation base and an integer lattice offset, so any two regions sampled
for the same seed agree on every shared coordinate.
"""

from noise import pnoise2

from seeded_random import SeededRandom
from worldgen_config import GetConfig

LATTICE_REPEAT = 1024
MAX_LATTICE_OFFSET = 64


def _clamp01(v):
    return 0.0 if v < 0.0 else 1.0 if v > 1.0 else v


def _SeedLattice(seed):
    """Permutation base (0-255) and integer lattice offset for a seed."""
    rng = SeededRandom(f"{seed}_lattice")
    base = rng.next_int(0, 255)
    ox = rng.next_int(0, MAX_LATTICE_OFFSET)
    oy = rng.next_int(0, MAX_LATTICE_OFFSET)
    return base, ox, oy


def SampleNoise(seed, x, y, octaves=6, persistence=0.5, scale=None, lattice=None, amplitude=None):
    """
    Single noise sample at world coordinate (x, y), in [0, 1].
    The raw octave sum rarely leaves +-amplitude, so it is stretched by
    1 / amplitude before mapping to [0, 1] and clamping.
    """
    if octaves < 1:
        raise ValueError("octaves must be >= 1")
    noise_cfg = GetConfig()["noise"]
    if scale is None:
        scale = noise_cfg["scale"]
    if amplitude is None:
        amplitude = noise_cfg["amplitude"]
    base, ox, oy = lattice or _SeedLattice(seed)

    raw = pnoise2(
        x / scale + ox,
        y / scale + oy,
        octaves=octaves,
        persistence=persistence,
        lacunarity=2.0,
        repeatx=LATTICE_REPEAT,
        repeaty=LATTICE_REPEAT,
        base=base,
    )
    return _clamp01(raw / amplitude * 0.5 + 0.5)


def GenerateNoiseGrid(seed, x0, y0, x1, y1, octaves=6, persistence=0.5, scale=None):
    """
    Noise values for the inclusive rectangle (x0, y0)-(x1, y1).
    Indexed grid[y - y0][x - x0].
    """
    if x1 < x0 or y1 < y0:
        raise ValueError(f"invalid region ({x0},{y0})-({x1},{y1})")

    lattice = _SeedLattice(seed)
    return [
        [
            SampleNoise(seed, x, y, octaves, persistence, scale, lattice)
            for x in range(x0, x1 + 1)
        ]
        for y in range(y0, y1 + 1)
    ]
