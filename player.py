# directory player.py
from typing import Dict, Any, Optional, List, Tuple

STATUS_CURES = ("poison", "sleep", "paralysis", "confusion", "all")


class PlayerStats:
    def __init__(
        self,
        strength=10,
        dexterity=10,
        vitality=10,
        energy=10,
        max_health=100,
        current_health=None,
        max_mana=50,
        current_mana=None,
        attack=10,
        defense=5,
        magic_resist=0,
    ):
        self.strength = strength
        self.dexterity = dexterity
        self.vitality = vitality
        self.energy = energy
        self.max_health = max_health
        self.current_health = max_health if current_health is None else current_health
        self.max_mana = max_mana
        self.current_mana = max_mana if current_mana is None else current_mana
        self.attack = attack
        self.defense = defense
        self.magic_resist = magic_resist

    def to_dict(self):
        return dict(self.__dict__)

    @classmethod
    def from_dict(cls, data):
        return cls(**{k: v for k, v in (data or {}).items() if k in cls().__dict__})


class ConsumableEffect:
    """What an item restores or cures when used."""

    def __init__(self, health=0, mana=0, status_cure=None):
        if status_cure is not None and status_cure not in STATUS_CURES:
            raise ValueError(f"unknown status cure '{status_cure}'")
        self.health = health
        self.mana = mana
        self.status_cure = status_cure

    def to_dict(self):
        return {"health": self.health, "mana": self.mana, "status_cure": self.status_cure}

    @classmethod
    def from_dict(cls, data):
        if not data:
            return None
        return cls(
            health=data.get("health", 0),
            mana=data.get("mana", 0),
            status_cure=data.get("status_cure"),
        )


class Item:
    def __init__(
        self,
        id: str,
        name: str,
        item_type: str = "consumable",
        quantity: int = 1,
        consumable: Optional[ConsumableEffect] = None,
        bonuses: Optional[Dict[str, int]] = None,
        value: int = 0,
        description: str = "",
        rarity: str = "common",
    ):
        self.id = id
        self.name = name
        self.item_type = item_type
        self.quantity = quantity
        self.consumable = consumable
        self.bonuses = bonuses or {}
        self.value = value
        self.description = description
        self.rarity = rarity

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "item_type": self.item_type,
            "quantity": self.quantity,
            "consumable": self.consumable.to_dict() if self.consumable else None,
            "bonuses": dict(self.bonuses),
            "value": self.value,
            "description": self.description,
            "rarity": self.rarity,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data["id"],
            name=data.get("name", data["id"]),
            item_type=data.get("item_type", "consumable"),
            quantity=data.get("quantity", 1),
            consumable=ConsumableEffect.from_dict(data.get("consumable")),
            bonuses=data.get("bonuses"),
            value=data.get("value", 0),
            description=data.get("description", ""),
            rarity=data.get("rarity", "common"),
        )

    def __repr__(self):
        return f"<Item {self.name} x{self.quantity}>"


class Player:
    def __init__(
        self,
        name: str,
        level: int = 1,
        stats: Optional[PlayerStats] = None,
        inventory: Optional[List[Item]] = None,
        currency: int = 0,
        experience: int = 0,
        position: Tuple[int, int] = (0, 0),
        player_class: str = "Warrior",
    ):
        self.name = name
        self.level = level
        self.stats = stats or PlayerStats()
        self.inventory = inventory or []
        self.currency = currency
        self.experience = experience
        self.position = tuple(position)
        self.player_class = player_class

    @property
    def is_alive(self):
        return self.stats.current_health > 0

    def find_item(self, item_id):
        for item in self.inventory:
            if item.id == item_id:
                return item
        return None

    def add_item(self, item: Item):
        existing = self.find_item(item.id)
        if existing:
            existing.quantity += item.quantity
        else:
            self.inventory.append(item)

    def consume_item(self, item_id):
        """Use up one of an item. Returns False when none are held."""
        item = self.find_item(item_id)
        if item is None or item.quantity <= 0:
            return False
        item.quantity -= 1
        if item.quantity <= 0:
            self.inventory.remove(item)
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "level": self.level,
            "stats": self.stats.to_dict(),
            "inventory": [i.to_dict() for i in self.inventory],
            "currency": self.currency,
            "experience": self.experience,
            "position": list(self.position),
            "player_class": self.player_class,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            name=data.get("name", "Adventurer"),
            level=data.get("level", 1),
            stats=PlayerStats.from_dict(data.get("stats")),
            inventory=[Item.from_dict(i) for i in data.get("inventory", [])],
            currency=data.get("currency", 0),
            experience=data.get("experience", 0),
            position=tuple(data.get("position", (0, 0))),
            player_class=data.get("player_class", "Warrior"),
        )

    def __repr__(self):
        s = self.stats
        return f"<Player {self.name} L{self.level} hp={s.current_health}/{s.max_health}>"
