# directory biomes.py
"""
Biome classification, weather and difficulty rules.

Inputs are normalised to [0, 1]; latitude_factor is 0 at the equator row
and 1 at the top/bottom edges of the map.
"""

import math

BIOMES = [
    "plains", "forest", "desert", "mountains", "swamp", "tundra", "volcanic",
    "jungle", "ocean", "wasteland", "highlands", "beach", "marsh", "river",
    "lake",
]

WATER_BIOMES = {"ocean", "river", "lake"}

WEATHER_TYPES = [
    "clear", "cloudy", "rain", "snow", "storm", "fog", "heatwave", "sandstorm",
]

BIOME_DIFFICULTY_FACTOR = {
    "desert": 2, "volcanic": 2, "wasteland": 2,
    "mountains": 1.5, "jungle": 1.5, "swamp": 1.5, "marsh": 1.5,
    "tundra": 1, "highlands": 1,
    "forest": 0.5,
    "plains": 0, "beach": 0,
    "ocean": -0.5, "river": -0.5, "lake": -0.5,
}

# danger modifiers for adventure options
BIOME_DANGER = {
    "volcanic": 2,
    "mountains": 1, "jungle": 1, "wasteland": 1,
    "beach": -1, "plains": -1,
}
WEATHER_DANGER = {
    "storm": 2, "sandstorm": 2,
    "heatwave": 1, "snow": 1,
}


def IsWaterBiome(biome):
    return biome in WATER_BIOMES


def ClassifyBiome(elevation, temperature, moisture, latitude_factor):
    """First matching rule wins."""
    e, t, m, lat = elevation, temperature, moisture, latitude_factor

    if e < 0.3:
        return "ocean"

    if e > 0.8:
        if t < 0.2 or lat > 0.7:
            return "tundra"
        if t > 0.7 and lat < 0.3:
            return "volcanic"
        return "mountains"

    if e > 0.6:
        if t < 0.3 or lat > 0.6:
            return "highlands"
        if t > 0.7 and m < 0.3 and lat < 0.4:
            return "wasteland"
        return "mountains"

    if t < 0.2 or lat > 0.8:
        return "tundra"

    if t > 0.8 and lat < 0.3:
        if m < 0.3:
            return "desert"
        if m > 0.6:
            return "jungle"
        return "wasteland"

    if m < 0.3:
        return "desert" if t > 0.6 else "plains"

    if m > 0.7:
        if e < 0.4:
            return "swamp"
        if t > 0.6:
            return "jungle"
        return "forest"

    if m > 0.5:
        return "forest"

    return "plains"


def WeatherWeights(temperature, moisture):
    t, m = temperature, moisture
    return [
        ("clear", 0.6),
        ("cloudy", 0.2),
        ("rain", m * 0.3),
        ("snow", (1 - t) * 0.3),
        ("storm", m * t * 0.2),
        ("fog", m * (1 - t) * 0.2),
        ("heatwave", 0.2 if t > 0.8 else 0.0),
        ("sandstorm", 0.2 if t > 0.7 and m < 0.3 else 0.0),
    ]


def DetermineWeather(temperature, moisture, rng):
    """One draw against the normalised weight table."""
    weights = WeatherWeights(temperature, moisture)
    total = sum(w for _, w in weights)
    roll = rng.next() * total

    cumulative = 0.0
    for weather, weight in weights:
        cumulative += weight
        if roll < cumulative:
            return weather
    return "clear"


def GetBiomeDifficultyFactor(biome):
    return BIOME_DIFFICULTY_FACTOR.get(biome, 0)


def ComputeDifficulty(x, y, map_size, elevation, difficulty_bias, biome):
    """
    Tile difficulty 1-10 from distance to map centre, elevation (0-1),
    the world's difficulty bias and the biome factor.
    """
    center = map_size / 2
    dist = math.sqrt((x - center) ** 2 + (y - center) ** 2) / center
    raw = (dist * 5 + elevation * 3 + difficulty_bias * 2 + GetBiomeDifficultyFactor(biome)) * 1.5
    return max(1, min(10, math.floor(raw)))


def ComputeDangerLevel(tile):
    danger = tile.difficulty
    danger += BIOME_DANGER.get(tile.biome, 0)
    danger += WEATHER_DANGER.get(tile.weather, 0)
    if tile.has_town:
        danger = max(1, danger - 3)
    return max(1, min(10, danger))
