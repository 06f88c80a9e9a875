# directory save_snapshot.py
"""
Plain-dict save snapshots. Storage is up to the host: the snapshot is
JSON-safe, so json.dump(snapshot, f) is enough.
"""

import json

from player import Player
from tile_state import TileState
from world_state import WorldState, Town

SNAPSHOT_VERSION = 1


def BuildSaveSnapshot(world, tiles, towns, player, timestamp):
    return {
        "version": SNAPSHOT_VERSION,
        "timestamp": timestamp,
        "world": world.to_dict(),
        "tiles": [t.to_dict() for t in tiles],
        "towns": [t.to_dict() for t in towns],
        "player": player.to_dict() if player else None,
    }


def RestoreSaveSnapshot(data):
    """Returns (world, tiles, towns, player)."""
    version = data.get("version")
    if version != SNAPSHOT_VERSION:
        raise ValueError(f"unsupported snapshot version {version!r}")

    world = WorldState.from_dict(data["world"])
    tiles = [TileState.from_dict(t) for t in data.get("tiles", [])]
    towns = [Town.from_dict(t) for t in data.get("towns", [])]
    player = Player.from_dict(data["player"]) if data.get("player") else None
    return world, tiles, towns, player


def BuildSaveMetadata(snapshot, save_id):
    player = snapshot.get("player") or {}
    return {
        "id": save_id,
        "player_name": player.get("name"),
        "player_level": player.get("level"),
        "world_name": snapshot["world"]["name"],
        "timestamp": snapshot["timestamp"],
    }


def WriteSaveSnapshot(snapshot, path):
    with open(path, "w", encoding="utf-8") as f:
        json.dump(snapshot, f)


def ReadSaveSnapshot(path):
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)
