# directory monsters.py
import math
from typing import Dict, Any, Optional, List

from monster_catalog import GetMonsterTemplatesForBiome
from seeded_random import SeededRandom
from worldgen_config import GetConfig

ABILITY_KINDS = ("damage", "status", "heal")
STATUS_TYPES = ("poison", "sleep", "paralysis", "confusion")


class MonsterStats:
    def __init__(self, hp=10, max_hp=None, attack=5, defense=3, speed=5, magic_resist=0):
        self.max_hp = hp if max_hp is None else max_hp
        self.hp = hp
        self.attack = attack
        self.defense = defense
        self.speed = speed
        self.magic_resist = magic_resist

    def to_dict(self):
        return dict(self.__dict__)

    @classmethod
    def from_dict(cls, data):
        data = data or {}
        return cls(
            hp=data.get("hp", 10),
            max_hp=data.get("max_hp", data.get("hp", 10)),
            attack=data.get("attack", 5),
            defense=data.get("defense", 3),
            speed=data.get("speed", 5),
            magic_resist=data.get("magic_resist", 0),
        )


class StatusEffect:
    def __init__(self, type: str, chance: float = 1.0, duration: int = 1):
        if type not in STATUS_TYPES:
            raise ValueError(f"unknown status effect '{type}'")
        self.type = type
        self.chance = chance
        self.duration = duration

    def to_dict(self):
        return {"type": self.type, "chance": self.chance, "duration": self.duration}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return None
        return cls(data["type"], data.get("chance", 1.0), data.get("duration", 1))


class MonsterAbility:
    """
    kind is one of:
        damage - hits the player; status_effect (if any) may also land
        status - no damage, only tries status_effect
        heal   - restores heal_amount hp to the user
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        kind: str = "damage",
        damage: int = 0,
        use_chance: float = 1.0,
        target_all: bool = False,
        status_effect: Optional[StatusEffect] = None,
        heal_amount: int = 0,
    ):
        if kind not in ABILITY_KINDS:
            raise ValueError(f"unknown ability kind '{kind}'")
        self.name = name
        self.description = description
        self.kind = kind
        self.damage = damage
        self.use_chance = use_chance
        self.target_all = target_all
        self.status_effect = status_effect
        self.heal_amount = heal_amount

    def to_dict(self):
        return {
            "name": self.name,
            "description": self.description,
            "kind": self.kind,
            "damage": self.damage,
            "use_chance": self.use_chance,
            "target_all": self.target_all,
            "status_effect": self.status_effect.to_dict() if self.status_effect else None,
            "heal_amount": self.heal_amount,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data.get("name", "Attack"),
            description=data.get("description", ""),
            kind=data.get("kind", "damage"),
            damage=data.get("damage", 0),
            use_chance=data.get("use_chance", 1.0),
            target_all=data.get("target_all", False),
            status_effect=StatusEffect.from_dict(data.get("status_effect")),
            heal_amount=data.get("heal_amount", 0),
        )

    def __repr__(self):
        return f"<Ability {self.name} {self.kind} dmg={self.damage}>"


class MonsterDrop:
    def __init__(self, item_id, chance=1.0, min_quantity=1, max_quantity=1):
        self.item_id = item_id
        self.chance = chance
        self.min_quantity = min_quantity
        self.max_quantity = max(min_quantity, max_quantity)

    def to_dict(self):
        return dict(self.__dict__)

    @classmethod
    def from_dict(cls, data):
        return cls(
            item_id=data["item_id"],
            chance=data.get("chance", 1.0),
            min_quantity=data.get("min_quantity", 1),
            max_quantity=data.get("max_quantity", data.get("min_quantity", 1)),
        )


def BasicAttack(attack):
    return MonsterAbility("Attack", "A basic attack.", "damage", damage=attack, use_chance=1.0)


class Monster:
    def __init__(
        self,
        id: str,
        name: str,
        level: int = 1,
        stats: Optional[MonsterStats] = None,
        abilities: Optional[List[MonsterAbility]] = None,
        drops: Optional[List[MonsterDrop]] = None,
        description: str = "",
        monster_type: str = "beast",
    ):
        self.id = id
        self.name = name
        self.level = level
        self.stats = stats or MonsterStats()
        self.abilities = abilities or [BasicAttack(self.stats.attack)]
        self.drops = drops or []
        self.description = description
        self.monster_type = monster_type

    @property
    def is_alive(self):
        return self.stats.hp > 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "level": self.level,
            "stats": self.stats.to_dict(),
            "abilities": [a.to_dict() for a in self.abilities],
            "drops": [d.to_dict() for d in self.drops],
            "description": self.description,
            "monster_type": self.monster_type,
        }

    @classmethod
    def from_dict(cls, data):
        """Missing stats, abilities and drops fall back to safe defaults."""
        return cls(
            id=data.get("id", "monster"),
            name=data.get("name", "Monster"),
            level=data.get("level", 1),
            stats=MonsterStats.from_dict(data.get("stats")),
            abilities=[MonsterAbility.from_dict(a) for a in data.get("abilities") or []],
            drops=[MonsterDrop.from_dict(d) for d in data.get("drops") or []],
            description=data.get("description", ""),
            monster_type=data.get("monster_type", "beast"),
        )

    def __repr__(self):
        return f"<Monster {self.name} L{self.level} hp={self.stats.hp}/{self.stats.max_hp}>"


class Encounter:
    def __init__(self, triggered=False, monsters=None, ambush=False, can_run=True):
        self.triggered = triggered
        self.monsters = monsters or []
        self.ambush = ambush
        self.can_run = can_run

    def __repr__(self):
        return f"<Encounter triggered={self.triggered} monsters={len(self.monsters)} ambush={self.ambush}>"


# -------------------------------------------------------------------
# Generation
# -------------------------------------------------------------------

def _Scaled(stat, level):
    base, per_level = stat
    return math.floor(base + per_level * (level - 1))


def BuildAbility(template, attack, max_hp):
    status = template.get("status")
    kind = template.get("kind", "damage")
    return MonsterAbility(
        name=template["name"],
        description=template.get("desc", ""),
        kind=kind,
        damage=math.floor(attack * template.get("multiplier", 1.0)) if kind == "damage" else 0,
        use_chance=template.get("use_chance", 0.5),
        target_all=template.get("target_all", False),
        status_effect=StatusEffect(status["type"], status["chance"], status["duration"]) if status else None,
        heal_amount=max(1, math.floor(max_hp * template.get("heal_fraction", 0))) if kind == "heal" else 0,
    )


def GenerateMonster(biome, player_level, seed):
    rng = SeededRandom(seed)
    template = rng.pick(GetMonsterTemplatesForBiome(biome))
    level = max(1, player_level + rng.next_int(-2, 2))

    hp = _Scaled(template["stats"]["hp"], level)
    stats = MonsterStats(
        hp=hp,
        attack=_Scaled(template["stats"]["attack"], level),
        defense=_Scaled(template["stats"]["defense"], level),
        speed=_Scaled(template["stats"]["speed"], level),
        magic_resist=_Scaled(template["stats"].get("magic_resist", (0, 0)), level),
    )

    return Monster(
        id=f"monster-{seed}",
        name=template["name"],
        level=level,
        stats=stats,
        abilities=[BuildAbility(a, stats.attack, hp) for a in template["abilities"]],
        drops=[MonsterDrop(*d) for d in template["drops"]],
        description=template["desc"],
        monster_type=template.get("type", "beast"),
    )


def GenerateMonsterEncounter(tile, world_seed, player_level, encounter_seed=None):
    """
    Roll for an encounter on `tile`. Towns are always safe.
    encounter_seed distinguishes repeat visits; the caller may salt it with
    a timestamp or step counter.
    """
    if tile.has_town:
        return Encounter()

    cfg = GetConfig()
    seed = f"{world_seed}-{tile.x}-{tile.y}"
    if encounter_seed is not None:
        seed = f"{seed}-{encounter_seed}"
    rng = SeededRandom(seed)

    chance = cfg["encounter_chance"] + cfg["encounter_biome_bonus"].get(tile.biome, 0)
    if not rng.next_bool(chance):
        return Encounter()

    num_monsters = rng.next_int(1, 3)
    ambush = rng.next_bool(cfg["ambush_chance"])
    can_run = rng.next_bool(cfg["can_run_chance"])

    monsters = [
        GenerateMonster(tile.biome, player_level, f"{seed}-monster-{i}")
        for i in range(num_monsters)
    ]
    return Encounter(True, monsters, ambush, can_run)
