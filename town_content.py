# directory town_content.py
"""
Per-visit town content: quest board, tavern recruits and shop stock.

Each generator is seeded from (town id, purpose, visit seed), so the same
visit always shows the same content and a new visit seed refreshes it. The
caller owns the visit seed (typically the world seed plus a visit counter).
"""

from seeded_random import SeededRandom, DeriveSeed
from name_generator import GenerateName
from item_catalog import GenerateConsumable
from player import Item
from town_catalog import QUEST_TARGETS, QUEST_TITLES, QUEST_DESCRIPTIONS, RECRUIT_CLASSES


class Quest:
    def __init__(self, id, title, description, target_type, target_quantity, difficulty,
                 reward_xp, reward_currency, giver, location, reward_items=None):
        self.id = id
        self.title = title
        self.description = description
        self.quest_type = "hunt"
        self.target_type = target_type
        self.target_quantity = target_quantity
        self.difficulty = difficulty
        self.reward_xp = reward_xp
        self.reward_currency = reward_currency
        self.reward_items = reward_items or []
        self.giver = giver
        self.location = location

    def to_dict(self):
        data = dict(self.__dict__)
        data["reward_items"] = [i.to_dict() for i in self.reward_items]
        return data

    def __repr__(self):
        return f"<Quest {self.title} x{self.target_quantity} diff={self.difficulty}>"


class Recruit:
    def __init__(self, id, name, recruit_class, level, stats, cost):
        self.id = id
        self.name = name
        self.recruit_class = recruit_class
        self.level = level
        self.stats = stats
        self.cost = cost

    def to_dict(self):
        return dict(self.__dict__)

    def __repr__(self):
        return f"<Recruit {self.name} {self.recruit_class} L{self.level} cost={self.cost}>"


def _VisitRandom(town, purpose, visit_seed):
    return SeededRandom(DeriveSeed(town.id, purpose, visit_seed))


# -------------------------------------------------------------------
# Quests
# -------------------------------------------------------------------

def GenerateQuest(rng, town, index):
    target = rng.pick(QUEST_TARGETS)
    difficulty = max(1, 1 + town.depth + rng.next_int(-1, 2))
    quantity = max(1, difficulty // 2) + rng.next_int(0, 2)

    reward_xp = 50 * difficulty * quantity
    reward_currency = 25 * difficulty * quantity

    fields = {
        "town": town.name,
        "target": target,
        "Target": target.capitalize(),
        "qty": quantity,
        "region": town.region,
    }

    reward_items = []
    if difficulty > 3 and rng.next_bool(0.5):
        reward_items.append(Item(
            id=f"trophy-{town.id}-{index}",
            name=f"{target.capitalize()} Hunter's Trophy",
            item_type="quest",
            value=reward_currency // 2,
            description="A trophy awarded for successful monster hunting.",
            rarity="rare" if difficulty > 5 else "uncommon",
        ))

    return Quest(
        id=f"quest-{town.id}-{index}",
        title=rng.pick(QUEST_TITLES).format(**fields),
        description=rng.pick(QUEST_DESCRIPTIONS).format(**fields),
        target_type=target,
        target_quantity=quantity,
        difficulty=difficulty,
        reward_xp=reward_xp,
        reward_currency=reward_currency,
        giver=f"{GenerateName(rng, 'character')} of {town.name}",
        location=f"Near {town.name}",
        reward_items=reward_items,
    )


def GenerateTownQuests(town, visit_seed):
    rng = _VisitRandom(town, "quests", visit_seed)
    num_quests = 1 + town.depth // 2 + rng.next_int(0, 2)
    return [GenerateQuest(rng, town, i) for i in range(num_quests)]


# -------------------------------------------------------------------
# Tavern
# -------------------------------------------------------------------

def GenerateTavernRecruits(town, player_level, visit_seed):
    rng = _VisitRandom(town, "recruits", visit_seed)
    recruits = []

    for i in range(rng.next_int(1, 3)):
        recruit_class = rng.pick(list(RECRUIT_CLASSES.keys()))
        level = max(1, player_level + rng.next_int(-1, 0))
        base = RECRUIT_CLASSES[recruit_class]
        stats = {name: value + (level - 1) for name, value in base.items()}
        stats["max_health"] = 50 + stats["vitality"] * 5
        stats["max_mana"] = 20 + stats["energy"] * 5

        recruits.append(Recruit(
            id=f"recruit-{town.id}-{i}",
            name=GenerateName(rng, "character"),
            recruit_class=recruit_class,
            level=level,
            stats=stats,
            cost=50 * level + rng.next_int(-10, 10),
        ))

    return recruits


# -------------------------------------------------------------------
# Shop
# -------------------------------------------------------------------

def GenerateShopInventory(town, player_level, visit_seed):
    """Consumable stock; deeper towns and stronger players see more of it."""
    rng = _VisitRandom(town, "shop", visit_seed)
    num_items = 3 + town.depth // 2 + min(3, player_level // 3)
    return [
        GenerateConsumable(rng, f"item-{town.id}-{visit_seed}-{i}", town.depth)
        for i in range(num_items)
    ]
