# directory monster_catalog.py
"""
Monster templates grouped by home biome.

Stats are given as (base, per_level); a monster of level L gets
floor(base + per_level * (L - 1)). Ability damage is a multiplier of the
monster's attack. Abilities come in three kinds:
    damage - hits the player, may carry a status payload
    status - only tries to inflict its status payload
    heal   - restores heal_fraction of the monster's max hp
"""

MONSTER_TEMPLATES = {
    "forest": [
        {
            "name": "Wolf",
            "type": "beast",
            "desc": "A fierce wolf prowling the forest.",
            "stats": {"hp": (20, 5), "attack": (5, 1.5), "defense": (3, 1), "speed": (8, 1.2), "magic_resist": (1, 0.5)},
            "abilities": [
                {"name": "Bite", "desc": "A vicious bite attack.", "kind": "damage", "multiplier": 1.0, "use_chance": 0.7},
                {"name": "Howl", "desc": "A frightening howl that rattles the mind.", "kind": "status", "use_chance": 0.3,
                 "target_all": True, "status": {"type": "confusion", "chance": 0.3, "duration": 2}},
            ],
            "drops": [("wolf_pelt", 0.7, 1, 2), ("wolf_fang", 0.4, 1, 1)],
        },
        {
            "name": "Bear",
            "type": "beast",
            "desc": "A large bear defending its territory.",
            "stats": {"hp": (40, 8), "attack": (8, 2), "defense": (5, 1.5), "speed": (5, 0.8), "magic_resist": (2, 0.5)},
            "abilities": [
                {"name": "Claw Swipe", "desc": "A powerful swipe with its claws.", "kind": "damage", "multiplier": 1.0, "use_chance": 0.6},
                {"name": "Roar", "desc": "A terrifying roar that can paralyze.", "kind": "status", "use_chance": 0.2,
                 "target_all": True, "status": {"type": "paralysis", "chance": 0.4, "duration": 1}},
                {"name": "Maul", "desc": "A devastating mauling attack.", "kind": "damage", "multiplier": 1.5, "use_chance": 0.3},
            ],
            "drops": [("bear_pelt", 0.8, 1, 1), ("bear_claw", 0.5, 1, 2)],
        },
    ],
    "plains": [
        {
            "name": "Goblin",
            "type": "humanoid",
            "desc": "A small, mischievous goblin.",
            "stats": {"hp": (15, 4), "attack": (4, 1.2), "defense": (2, 0.8), "speed": (7, 1.0), "magic_resist": (0, 0.3)},
            "abilities": [
                {"name": "Dagger Stab", "desc": "A quick stab with a rusty dagger.", "kind": "damage", "multiplier": 1.0, "use_chance": 0.8},
                {"name": "Throw Rock", "desc": "Throws a rock at the target.", "kind": "damage", "multiplier": 0.7, "use_chance": 0.2},
            ],
            "drops": [("goblin_ear", 0.6, 1, 2), ("rusty_dagger", 0.3, 1, 1), ("potion_minor", 0.2, 1, 1)],
        },
        {
            "name": "Bandit",
            "type": "humanoid",
            "desc": "A human outlaw looking for easy prey.",
            "stats": {"hp": (25, 5), "attack": (6, 1.5), "defense": (4, 1.2), "speed": (6, 1.0), "magic_resist": (1, 0.4)},
            "abilities": [
                {"name": "Sword Slash", "desc": "A slash with a short sword.", "kind": "damage", "multiplier": 1.0, "use_chance": 0.7},
                {"name": "Sucker Punch", "desc": "A surprise blow that can stun.", "kind": "damage", "multiplier": 1.2, "use_chance": 0.3,
                 "status": {"type": "paralysis", "chance": 0.2, "duration": 1}},
            ],
            "drops": [("bandit_mask", 0.4, 1, 1), ("gold_pouch", 0.6, 5, 15)],
        },
    ],
    "mountains": [
        {
            "name": "Rock Golem",
            "type": "construct",
            "desc": "A creature made of living stone.",
            "stats": {"hp": (50, 10), "attack": (7, 1.8), "defense": (10, 2.5), "speed": (3, 0.5), "magic_resist": (5, 1)},
            "abilities": [
                {"name": "Boulder Throw", "desc": "Throws a large boulder at the target.", "kind": "damage", "multiplier": 1.2, "use_chance": 0.5},
                {"name": "Ground Slam", "desc": "Slams the ground, shaking everything nearby.", "kind": "damage", "multiplier": 0.8,
                 "use_chance": 0.5, "target_all": True},
            ],
            "drops": [("stone_core", 0.3, 1, 1), ("granite_chunk", 0.7, 1, 3)],
        },
        {
            "name": "Mountain Lion",
            "type": "beast",
            "desc": "A fierce predator of the mountains.",
            "stats": {"hp": (30, 6), "attack": (8, 2), "defense": (4, 1), "speed": (9, 1.5), "magic_resist": (2, 0.5)},
            "abilities": [
                {"name": "Pounce", "desc": "A powerful leap attack.", "kind": "damage", "multiplier": 1.2, "use_chance": 0.6},
                {"name": "Claw Fury", "desc": "Multiple rapid claw attacks.", "kind": "damage", "multiplier": 0.7, "use_chance": 0.4},
            ],
            "drops": [("lion_pelt", 0.8, 1, 1), ("sharp_claw", 0.5, 1, 3)],
        },
    ],
    "desert": [
        {
            "name": "Giant Scorpion",
            "type": "beast",
            "desc": "A massive scorpion with a deadly stinger.",
            "stats": {"hp": (25, 6), "attack": (7, 1.6), "defense": (6, 1.5), "speed": (6, 1.0), "magic_resist": (3, 0.6)},
            "abilities": [
                {"name": "Pincer Attack", "desc": "A crushing attack with powerful pincers.", "kind": "damage", "multiplier": 1.0, "use_chance": 0.6},
                {"name": "Venomous Sting", "desc": "A venomous sting that can poison.", "kind": "damage", "multiplier": 0.7, "use_chance": 0.4,
                 "status": {"type": "poison", "chance": 0.5, "duration": 3}},
            ],
            "drops": [("scorpion_tail", 0.5, 1, 1), ("antidote", 0.3, 1, 2)],
        },
        {
            "name": "Sand Worm",
            "type": "beast",
            "desc": "A burrowing worm that erupts from the dunes.",
            "stats": {"hp": (35, 7), "attack": (6, 1.5), "defense": (4, 1), "speed": (4, 0.7), "magic_resist": (2, 0.4)},
            "abilities": [
                {"name": "Engulf", "desc": "Swallows the target in a rush of sand.", "kind": "damage", "multiplier": 1.1, "use_chance": 0.7},
                {"name": "Sand Blast", "desc": "Sprays blinding sand.", "kind": "status", "use_chance": 0.3,
                 "status": {"type": "confusion", "chance": 0.4, "duration": 2}},
            ],
            "drops": [("worm_hide", 0.6, 1, 1), ("desert_glass", 0.3, 1, 2)],
        },
    ],
    "swamp": [
        {
            "name": "Bog Troll",
            "type": "giant",
            "desc": "A slimy troll that lurks in the swamp.",
            "stats": {"hp": (45, 9), "attack": (8, 2), "defense": (6, 1.5), "speed": (4, 0.6), "magic_resist": (3, 0.5)},
            "abilities": [
                {"name": "Club Smash", "desc": "Smashes with a crude wooden club.", "kind": "damage", "multiplier": 1.2, "use_chance": 0.6},
                {"name": "Regenerate", "desc": "Regenerates some health.", "kind": "heal", "heal_fraction": 0.15, "use_chance": 0.4},
            ],
            "drops": [("troll_hide", 0.7, 1, 1), ("troll_tooth", 0.5, 1, 3)],
        },
        {
            "name": "Giant Leech",
            "type": "beast",
            "desc": "A massive bloodsucking leech.",
            "stats": {"hp": (20, 4), "attack": (5, 1.2), "defense": (3, 0.8), "speed": (5, 0.9), "magic_resist": (1, 0.3)},
            "abilities": [
                {"name": "Blood Drain", "desc": "Drains blood from the target.", "kind": "damage", "multiplier": 0.8, "use_chance": 0.8},
                {"name": "Slime Spray", "desc": "Sprays sleep-inducing slime.", "kind": "status", "use_chance": 0.2,
                 "target_all": True, "status": {"type": "sleep", "chance": 0.3, "duration": 1}},
            ],
            "drops": [("leech_extract", 0.6, 1, 2), ("blood_sac", 0.4, 1, 1)],
        },
    ],
}

DEFAULT_MONSTER_BIOME = "plains"


def GetMonsterTemplatesForBiome(biome):
    """Templates for a biome; biomes without their own roster use the plains roster."""
    return MONSTER_TEMPLATES.get(biome) or MONSTER_TEMPLATES[DEFAULT_MONSTER_BIOME]
