# directory item_catalog.py
"""
Consumables sold in shops and dropped in battle.
Potency = floor(next_int(10, 20) * size multiplier * (1 + depth * 0.2)).
"""

import math

from player import Item, ConsumableEffect

CONSUMABLE_TYPES = [
    {"name": "Health Potion", "restores": "health", "color": "red"},
    {"name": "Mana Potion", "restores": "mana", "color": "blue"},
    {"name": "Antidote", "cures": "poison", "color": "green"},
    {"name": "Smelling Salts", "cures": "sleep", "color": "white"},
    {"name": "Nerve Tonic", "cures": "paralysis", "color": "yellow"},
    {"name": "Clarity Draught", "cures": "confusion", "color": "violet"},
    {"name": "Panacea", "cures": "all", "color": "gold"},
]

POTION_SIZES = [
    ("Small", 1.0),
    ("Medium", 1.5),
    ("Large", 2.0),
    ("Greater", 3.0),
]

RARITY_BY_SIZE = ["common", "uncommon", "rare", "epic"]

# fixed drops referenced by monster drop tables
STARTER_ITEMS = {
    "potion_minor": {"name": "Minor Health Potion", "health": 20},
    "antidote": {"name": "Antidote", "cure": "poison"},
}


def GenerateConsumable(rng, item_id, depth=0):
    ctype = rng.pick(CONSUMABLE_TYPES)
    size_index = min(math.floor(len(POTION_SIZES) * (rng.next() + depth * 0.1)), len(POTION_SIZES) - 1)
    size_name, multiplier = POTION_SIZES[size_index]

    potency = math.floor(rng.next_int(10, 20) * multiplier * (1 + depth * 0.2))
    restores = ctype.get("restores")
    effect = ConsumableEffect(
        health=potency if restores == "health" else 0,
        mana=potency if restores == "mana" else 0,
        status_cure=ctype.get("cures"),
    )

    if restores:
        description = f"A {size_name.lower()} {ctype['color']} potion that restores {potency} {restores}."
        name = f"{size_name} {ctype['name']}"
    else:
        description = f"A {ctype['color']} remedy that cures {ctype['cures']}."
        name = ctype["name"]

    return Item(
        id=item_id,
        name=name,
        item_type="consumable",
        quantity=rng.next_int(1, 3),
        consumable=effect,
        value=math.floor(5 * multiplier * (1 + depth * 0.2)),
        description=description,
        rarity=RARITY_BY_SIZE[size_index],
    )


def CreateStarterItem(item_id, quantity=1):
    """Build a known catalog item; None for unknown ids (loot materials)."""
    data = STARTER_ITEMS.get(item_id)
    if data is None:
        return None
    return Item(
        id=item_id,
        name=data["name"],
        quantity=quantity,
        consumable=ConsumableEffect(health=data.get("health", 0), status_cure=data.get("cure")),
        value=10,
    )
