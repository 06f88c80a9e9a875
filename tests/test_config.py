# tests/test_config.py
import json

import pytest

import main
from world_utils import LogWorldEvent
from worldgen_config import (
    DEFAULT_WORLDGEN_CONFIG, LoadWorldgenConfig, ApplyWorldgenConfig,
    ResetWorldgenConfig, GetConfig,
)


def test_defaults():
    cfg = LoadWorldgenConfig()
    assert cfg == DEFAULT_WORLDGEN_CONFIG
    assert cfg is not DEFAULT_WORLDGEN_CONFIG
    assert cfg["noise"]["scale"] == 40.0
    assert cfg["road_connections"] == 3


def test_json_override_deep_merges(tmp_path):
    path = tmp_path / "worldgen.json"
    path.write_text(json.dumps({"noise": {"scale": 20.0}, "road_connections": 2}))

    cfg = LoadWorldgenConfig(str(path))

    assert cfg["noise"]["scale"] == 20.0
    assert cfg["noise"]["elevation"]["octaves"] == 8
    assert cfg["road_connections"] == 2
    assert DEFAULT_WORLDGEN_CONFIG["noise"]["scale"] == 40.0


def test_missing_file_uses_defaults(tmp_path, capsys):
    cfg = LoadWorldgenConfig(str(tmp_path / "nope.json"))
    assert cfg == DEFAULT_WORLDGEN_CONFIG
    assert "[CONFIG]" in capsys.readouterr().out


def test_non_object_rejected(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("[1, 2, 3]")
    with pytest.raises(ValueError):
        LoadWorldgenConfig(str(path))


def test_apply_and_reset():
    cfg = LoadWorldgenConfig()
    cfg["town_spacing_floor"] = 12
    ApplyWorldgenConfig(cfg)
    assert GetConfig()["town_spacing_floor"] == 12
    ResetWorldgenConfig()
    assert GetConfig()["town_spacing_floor"] == 8


def test_log_event_format(capsys, tile_factory):
    GetConfig()["log_events"] = True
    LogWorldEvent("hydrology", "Carved 2 lakes.", tile_factory(3, 4))
    LogWorldEvent("roads", "Laid 1 roads.")
    out = capsys.readouterr().out.splitlines()
    assert out == ["[HYDROLOGY] (3,4): Carved 2 lakes.", "[ROADS] Laid 1 roads."]


def test_log_event_silenced(capsys):
    LogWorldEvent("roads", "Laid 1 roads.")
    assert capsys.readouterr().out == ""


class _StopMain(Exception):
    pass


def test_main_installs_config_file(tmp_path, monkeypatch):
    path = tmp_path / "worldgen.json"
    path.write_text(json.dumps({"dirt_road_chance": 0.0}))
    seen = {}

    def create_world(seed):
        seen["seed"] = seed
        seen["dirt_road_chance"] = GetConfig()["dirt_road_chance"]
        raise _StopMain()

    monkeypatch.setattr(main, "CreateWorld", create_world)
    with pytest.raises(_StopMain):
        main.Main(["cfgseed", str(path)])

    assert seen == {"seed": "cfgseed", "dirt_road_chance": 0.0}
