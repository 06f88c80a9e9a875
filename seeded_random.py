# directory seeded_random.py
"""
Deterministic random source keyed by a string seed.

Every generator in the project is created from a seed string plus the
discriminators of what it generates ("{seed}_tile_{x}_{y}", "{seed}_towns"),
so the same inputs always produce the same world regardless of call order.
"""

import random
import string

SEED_ALPHABET = string.ascii_lowercase + string.digits


class SeededRandom:
    """
    Thin wrapper over random.Random seeded with a string.

    All helpers draw through next(), so pinning next() pins every decision.
    """

    def __init__(self, seed: str):
        if not isinstance(seed, str) or not seed:
            raise ValueError("seed must be a non-empty string")
        self.seed = seed
        self._rng = random.Random(seed)

    def next(self) -> float:
        """Uniform float in [0, 1)."""
        return self._rng.random()

    def next_int(self, lo: int, hi: int) -> int:
        """Uniform integer in [lo, hi], inclusive."""
        if hi < lo:
            raise ValueError(f"invalid range [{lo}, {hi}]")
        return lo + int(self.next() * (hi - lo + 1))

    def next_float(self, lo: float, hi: float) -> float:
        return lo + self.next() * (hi - lo)

    def next_bool(self, p: float = 0.5) -> bool:
        return self.next() < p

    def pick(self, items):
        if not items:
            raise ValueError("cannot pick from an empty sequence")
        return items[self.next_int(0, len(items) - 1)]

    def shuffle(self, items):
        """Fisher-Yates shuffle in place. Returns the list for chaining."""
        for i in range(len(items) - 1, 0, -1):
            j = self.next_int(0, i)
            items[i], items[j] = items[j], items[i]
        return items

    def __repr__(self):
        return f"<SeededRandom seed={self.seed!r}>"


def CreateSeededRandom(seed):
    return SeededRandom(seed)


def DeriveSeed(seed, *parts):
    """Join a seed with discriminators: DeriveSeed("abc", "tile", 3, 4) -> "abc_tile_3_4"."""
    return "_".join([str(seed)] + [str(p) for p in parts])


def GenerateSeed(rng=None, length=16):
    """
    Produce a new alphanumeric world seed. Entropy comes from the caller's
    rng (anything with .choice), defaulting to the OS source.
    """
    rng = rng or random.SystemRandom()
    return "".join(rng.choice(SEED_ALPHABET) for _ in range(length))
