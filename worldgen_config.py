# directory worldgen_config.py
"""
Tuning constants for world generation and combat.

Every generation pass reads its knobs from the active config returned by
GetConfig(). A JSON file can override any subset of keys:

    cfg = LoadWorldgenConfig("worldgen.json")
    ApplyWorldgenConfig(cfg)
"""

import copy
import json
import os

DEFAULT_WORLDGEN_CONFIG = {
    # --- Noise ------------------------------------------------------------
    "noise": {
        "scale": 40.0,
        "amplitude": 0.35,        # typical peak of the normalised octave sum
        "elevation":   {"octaves": 8,  "persistence": 0.5},
        "temperature": {"octaves": 6,  "persistence": 0.7},
        "moisture":    {"octaves": 7,  "persistence": 0.6},
        "river":       {"octaves": 10, "persistence": 0.8},
    },
    "climate_bias_weight": 0.2,
    "moisture_bias_weight": 0.2,
    "river_candidate_threshold": 0.7,
    "portal_chance": 0.001,

    # --- Hydrology --------------------------------------------------------
    "lake_density": 500,          # one lake per N tiles of chunk area
    "lake_radius": (3, 8),
    "lake_band": (30, 40),        # exclusive elevation band for lake centers
    "river_density": 400,
    "river_source_elevation": 60,
    "max_river_length": 100,

    # --- Settlements ------------------------------------------------------
    "town_spacing_floor": 8,
    "town_spacing_divisor": 15,
    "town_depth_step": 5,
    "town_topup_attempts": 1000,

    # --- Roads ------------------------------------------------------------
    "road_connections": 3,
    "dirt_road_chance": 0.7,
    "dirt_step_jitter": 2.0,
    "dirt_priority_jitter": 5.0,
    "terrain_costs": {
        "mountains": 5,
        "volcanic": 5,
        "forest": 3,
        "jungle": 3,
        "swamp": 3,
        "river": 4,
        "ocean": 10,
        "lake": 10,
    },

    # --- Encounters -------------------------------------------------------
    "encounter_chance": 0.2,
    "encounter_biome_bonus": {"forest": 0.05, "mountains": 0.1, "swamp": 0.15},
    "ambush_chance": 0.2,
    "can_run_chance": 0.8,

    # --- Logging ----------------------------------------------------------
    "log_events": True,
}

_active_config = copy.deepcopy(DEFAULT_WORLDGEN_CONFIG)


def _deep_merge(base, override):
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _read_json(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def LoadWorldgenConfig(path=None):
    """
    Return a fresh config dict: defaults deep-merged with the JSON file at
    `path`. A missing file is reported and the defaults are returned.
    """
    cfg = copy.deepcopy(DEFAULT_WORLDGEN_CONFIG)
    if not path:
        return cfg
    if not os.path.exists(path):
        print(f"[CONFIG] {path} not found, using defaults")
        return cfg

    data = _read_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"worldgen config {path} must contain a JSON object")
    return _deep_merge(cfg, data)


def ApplyWorldgenConfig(cfg):
    global _active_config
    _active_config = cfg


def ResetWorldgenConfig():
    global _active_config
    _active_config = copy.deepcopy(DEFAULT_WORLDGEN_CONFIG)


def GetConfig():
    return _active_config
