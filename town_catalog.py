# directory town_catalog.py
"""
Static content tables for towns: region types, building templates,
quest targets and recruit classes.

Service costs scale with town depth: cost = base + per_depth * depth.
Service levels use (base, divisor): level = base + depth // divisor
(divisor 0 means the level does not scale).
"""

REGION_TYPES = [
    "Frontier", "Trading Post", "Mining Colony", "Farming Village",
    "Fishing Village", "Military Outpost", "Religious Settlement",
    "Scholarly Haven", "Artisan Community", "Merchant Hub",
]

TOWN_DESCRIPTIONS = [
    "A small {region} nestled in the wilderness.",
    "A bustling {region} known for its local crafts.",
    "A quiet {region} where travelers can rest.",
    "A fortified {region} that stands against the dangers of the wild.",
    "An ancient {region} with a rich history.",
    "A newly established {region} seeking to grow.",
]

BUILDING_TEMPLATES = {
    # --- Core buildings, present in every town ------------------------------
    "inn": {
        "names": [
            "The Sleeping Dragon", "The Weary Traveler", "The Golden Hearth",
            "The Rusty Anchor", "The Silver Chalice", "The Drunken Mage",
        ],
        "desc": "A place to rest and recover from your adventures.",
        "services": [
            ("rest", "Rest and Recover", "Fully restore your health and mana.", "heal", (10, 5), (1, 0)),
        ],
    },
    "tavern": {
        "names": [
            "The Laughing Bard", "The Tipsy Troll", "The Broken Shield",
            "The Hungry Ogre", "The Whispering Raven", "The Salty Dog",
        ],
        "desc": "A lively place where adventurers gather to share tales and find work.",
        "services": [
            ("recruit", "Recruit Companions", "Hire adventurers to join your party.", "recruit", (50, 25), (1, 2)),
            ("quest-board", "Quest Board", "Find available quests in the area.", "quest", (0, 0), (1, 0)),
        ],
    },
    "shop": {
        "names": [
            "General Goods", "Adventurer's Supplies", "The Trading Post",
            "Rare Finds", "The Market Stall", "Wilderness Outfitters",
        ],
        "desc": "A shop selling various goods and supplies.",
        "services": [
            ("buy", "Buy Items", "Purchase items from the shop.", "buy", (0, 0), (1, 3)),
            ("sell", "Sell Items", "Sell items to the shop.", "sell", (0, 0), (1, 0)),
        ],
    },

    # --- Region buildings ---------------------------------------------------
    "blacksmith": {
        "names": ["The Forge"],
        "desc": "A blacksmith specializing in weapons and armor.",
        "services": [
            ("upgrade", "Upgrade Equipment", "Improve your weapons and armor.", "upgrade", (100, 50), (1, 1)),
        ],
    },
    "library": {
        "names": ["The Archives"],
        "desc": "A repository of knowledge and magical scrolls.",
        "services": [
            ("learn-spell", "Learn Spells", "Study new magical abilities.", "learn", (150, 75), (1, 1)),
        ],
    },
    "temple": {
        "names": ["The Sanctuary"],
        "desc": "A place of worship and healing.",
        "services": [
            ("blessing", "Receive Blessing", "Gain temporary bonuses to your abilities.", "buff", (75, 25), (1, 2)),
            ("cure", "Cure Ailments", "Remove curses and negative status effects.", "cure", (50, 20), (1, 0)),
        ],
    },

    # --- Optional extras ----------------------------------------------------
    "alchemist": {
        "names": ["The Bubbling Cauldron"],
        "desc": "An alchemist's shop filled with potions and elixirs.",
        "services": [
            ("buy-potions", "Buy Potions", "Purchase healing and magical potions.", "buy", (0, 0), (1, 2)),
            ("craft-potions", "Craft Potions", "Create potions from gathered ingredients.", "craft", (25, 10), (1, 1)),
        ],
    },
    "jeweler": {
        "names": ["The Glittering Gem"],
        "desc": "A jeweler specializing in magical gems and enchanted jewelry.",
        "services": [
            ("buy-gems", "Buy Gems", "Purchase magical gems and jewelry.", "buy", (0, 0), (2, 1)),
            ("socket-gems", "Socket Gems", "Add gem sockets to your equipment.", "upgrade", (200, 100), (3, 1)),
        ],
    },
    "stables": {
        "names": ["The Swift Steed"],
        "desc": "A stable offering mounts and transportation services.",
        "services": [
            ("rent-mount", "Rent Mount", "Rent a mount for faster travel.", "travel", (50, 25), (1, 2)),
        ],
    },
    "guild": {
        "names": ["Adventurer's Guild"],
        "desc": "A guild hall where adventurers can find work and training.",
        "services": [
            ("training", "Training", "Receive training to gain experience.", "train", (100, 50), (1, 1)),
        ],
    },
    "bank": {
        "names": ["The Iron Vault"],
        "desc": "A secure vault for storing coin and valuables.",
        "services": [
            ("deposit", "Deposit Gold", "Store gold safely between journeys.", "bank", (0, 0), (1, 0)),
        ],
    },
}

CORE_BUILDINGS = ["inn", "tavern", "shop"]

REGION_BUILDINGS = {
    "Mining Colony": "blacksmith",
    "Scholarly Haven": "library",
    "Religious Settlement": "temple",
}

EXTRA_BUILDINGS = ["alchemist", "jeweler", "stables", "guild", "bank"]

# --- Quests ------------------------------------------------------------------

QUEST_TARGETS = [
    "wolves", "bandits", "goblins", "skeletons", "spiders", "slimes",
    "trolls", "orcs", "cultists", "elementals", "demons", "undead",
]

QUEST_TITLES = [
    "Extermination: {Target}",
    "Hunting {Target}",
    "{town}'s {Target} Problem",
    "Clearing Out the {Target}",
    "Bounty: {Target}",
]

QUEST_DESCRIPTIONS = [
    "The town of {town} has been troubled by {target} recently. Eliminate {qty} of them to earn a reward.",
    "{Target} have been attacking travelers near {town}. Hunt down {qty} of them.",
    "A bounty has been placed on {target} in the {region}. Bring proof of killing {qty} of them.",
    "The local guild is offering a reward for adventurers who can eliminate {qty} {target} from the area.",
    "{town} needs help dealing with {target}. Slay {qty} of them to earn the town's gratitude and a reward.",
]

# --- Recruits ----------------------------------------------------------------

RECRUIT_CLASSES = {
    "Warrior": {"strength": 8, "dexterity": 4, "vitality": 7, "energy": 2},
    "Mage":    {"strength": 2, "dexterity": 4, "vitality": 3, "energy": 9},
    "Rogue":   {"strength": 4, "dexterity": 9, "vitality": 4, "energy": 3},
    "Cleric":  {"strength": 4, "dexterity": 3, "vitality": 6, "energy": 7},
    "Ranger":  {"strength": 5, "dexterity": 8, "vitality": 5, "energy": 3},
}
