# tests/test_monsters.py
import pytest

from monster_catalog import MONSTER_TEMPLATES, GetMonsterTemplatesForBiome
from monsters import (
    Monster, MonsterAbility, StatusEffect, GenerateMonster, GenerateMonsterEncounter,
)
from seeded_random import SeededRandom


def test_generate_monster_deterministic():
    a = GenerateMonster("forest", 3, "m-seed")
    b = GenerateMonster("forest", 3, "m-seed")
    assert a.to_dict() == b.to_dict()
    assert a.name in {t["name"] for t in MONSTER_TEMPLATES["forest"]}
    assert 1 <= a.level <= 5
    assert a.stats.hp == a.stats.max_hp > 0


def test_unknown_biome_uses_plains_roster():
    assert GetMonsterTemplatesForBiome("ocean") is MONSTER_TEMPLATES["plains"]
    monster = GenerateMonster("ocean", 1, "m-seed")
    assert monster.name in {t["name"] for t in MONSTER_TEMPLATES["plains"]}


def test_scorpion_sting_carries_poison(monkeypatch):
    monkeypatch.setattr(SeededRandom, "next", lambda self: 0.0)
    scorpion = GenerateMonster("desert", 1, "sting")
    sting = [a for a in scorpion.abilities if a.name == "Venomous Sting"][0]
    assert scorpion.name == "Giant Scorpion"
    assert sting.status_effect.type == "poison"
    assert sting.damage >= 0


def test_bog_troll_regenerates(monkeypatch):
    monkeypatch.setattr(SeededRandom, "next", lambda self: 0.0)
    troll = GenerateMonster("swamp", 1, "troll")
    regen = [a for a in troll.abilities if a.kind == "heal"][0]
    assert troll.name == "Bog Troll"
    assert regen.heal_amount >= 1
    assert regen.damage == 0


def test_encounter_never_in_town(tile_factory, monkeypatch):
    monkeypatch.setattr(SeededRandom, "next", lambda self: 0.0)
    town = tile_factory(3, 3, "forest", has_town=True)
    assert not GenerateMonsterEncounter(town, "w", 1).triggered


def test_encounter_triggered(tile_factory, monkeypatch):
    monkeypatch.setattr(SeededRandom, "next", lambda self: 0.0)
    encounter = GenerateMonsterEncounter(tile_factory(3, 3, "forest"), "w", 1)
    assert encounter.triggered
    assert len(encounter.monsters) == 1
    assert encounter.ambush and encounter.can_run
    assert encounter.monsters[0].name == "Wolf"
    assert encounter.monsters[0].level == 1


def test_encounter_not_triggered(tile_factory, monkeypatch):
    monkeypatch.setattr(SeededRandom, "next", lambda self: 0.99)
    encounter = GenerateMonsterEncounter(tile_factory(3, 3, "plains"), "w", 1)
    assert not encounter.triggered
    assert encounter.monsters == []


def test_encounter_seed_changes_roll(tile_factory):
    tile = tile_factory(3, 3, "swamp")
    first = GenerateMonsterEncounter(tile, "w", 2, encounter_seed=1)
    again = GenerateMonsterEncounter(tile, "w", 2, encounter_seed=1)
    assert first.triggered == again.triggered
    assert [m.to_dict() for m in first.monsters] == [m.to_dict() for m in again.monsters]


def test_invalid_status_and_kind():
    with pytest.raises(ValueError):
        StatusEffect("burning")
    with pytest.raises(ValueError):
        MonsterAbility("Zap", kind="teleport")


def test_monster_from_dict_restores_abilities():
    monster = GenerateMonster("desert", 2, "dict")
    restored = Monster.from_dict(monster.to_dict())
    assert restored.to_dict() == monster.to_dict()
