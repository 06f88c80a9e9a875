# directory name_generator.py
"""
Procedural names for worlds, towns, characters, monsters and items.

    name = GenerateName(rng, "town")     # "Old Brookhaven", "Gatemoor"
"""

NAME_PARTS = {
    "town": {
        "prefixes": [
            "North", "South", "East", "West", "New", "Old", "Fort", "Port", "Lake", "River",
            "High", "Low", "Upper", "Lower", "Great", "Little", "Grand", "Royal", "Fair", "Golden",
        ],
        "roots": [
            "wood", "field", "ford", "bridge", "ton", "bury", "ham", "ville", "shire", "port",
            "haven", "dale", "vale", "glen", "wick", "stead", "gate", "keep", "castle", "tower",
            "brook", "creek", "lake", "hill", "cliff", "ridge", "mount", "fall", "spring", "water",
        ],
        "suffixes": [
            "ton", "ville", "burg", "berg", "shire", "field", "dale", "ford", "port", "haven",
            "wood", "land", "moor", "marsh", "vale", "glen", "view", "side", "gate", "way",
        ],
    },
    "world": {
        "prefixes": [
            "Mystic", "Ancient", "Eternal", "Forgotten", "Lost", "Hidden", "Sacred", "Cursed", "Blessed", "Enchanted",
            "Shadowy", "Radiant", "Celestial", "Infernal", "Primal", "Savage", "Verdant", "Frozen", "Burning", "Sundered",
        ],
        "roots": [
            "realm", "land", "world", "domain", "kingdom", "empire", "plane", "dimension", "void", "abyss",
            "paradise", "haven", "sanctuary", "wilderness", "expanse", "frontier", "territory", "region", "continent", "isle",
        ],
        "suffixes": [
            "ia", "or", "um", "us", "is", "ar", "on", "en", "an", "el",
            "ium", "ius", "alis", "oria", "aria", "erra", "ora", "ira", "ara", "era",
        ],
    },
    "character": {
        "prefixes": [
            "Brave", "Bold", "Wise", "Swift", "Strong", "Keen", "Sharp", "Bright", "Dark", "Grim",
            "Fair", "Noble", "Royal", "Wild", "Calm", "Fierce", "Proud", "Humble", "Silent", "Loud",
        ],
        "roots": [
            "Ael", "Aer", "Af", "Ah", "Al", "Am", "An", "Ap", "Ar", "As",
            "At", "Ath", "Av", "Az", "Bal", "Ban", "Bar", "Bel", "Ben", "Ber",
            "Bes", "Bor", "Bran", "Breg", "Bren", "Brod", "Cam", "Car", "Cas", "Caw",
        ],
        "suffixes": [
            "son", "moon", "star", "fire", "wind", "water", "earth", "wood", "iron", "steel",
            "heart", "mind", "soul", "spirit", "hand", "eye", "foot", "arm", "leg", "head",
            "beard", "hair", "tooth", "bone", "blood", "flesh", "skin", "horn", "claw", "fang",
        ],
    },
    "monster": {
        "prefixes": [
            "Dire", "Feral", "Savage", "Ancient", "Corrupted", "Twisted", "Vile", "Wretched", "Cursed", "Blighted",
            "Venomous", "Toxic", "Rabid", "Frenzied", "Enraged", "Maddened", "Undying", "Rotting", "Putrid", "Festering",
        ],
        "roots": [
            "wolf", "bear", "boar", "rat", "bat", "spider", "snake", "toad", "lizard", "scorpion",
            "wasp", "beetle", "worm", "slug", "leech", "centipede", "mantis", "moth", "fly", "mosquito",
            "goblin", "orc", "troll", "ogre", "giant", "drake", "wyrm", "demon", "spirit", "wraith",
        ],
        "suffixes": [
            "bane", "fang", "claw", "talon", "horn", "tusk", "maw", "jaw", "eye", "stalker",
            "lurker", "hunter", "killer", "slayer", "eater", "drinker", "render", "ripper", "slicer", "crusher",
        ],
    },
    "item": {
        "prefixes": [
            "Gleaming", "Shining", "Glowing", "Burning", "Freezing", "Shocking", "Venomous", "Holy", "Unholy", "Arcane",
            "Mystic", "Enchanted", "Blessed", "Cursed", "Ancient", "Timeworn", "Runic", "Inscribed", "Ornate", "Simple",
        ],
        "roots": [
            "sword", "axe", "mace", "flail", "spear", "bow", "dagger", "staff", "wand", "orb",
            "shield", "armor", "helm", "gauntlet", "boot", "cloak", "robe", "amulet", "ring", "belt",
            "potion", "elixir", "scroll", "tome", "grimoire", "rune", "gem", "crystal", "stone", "charm",
        ],
        "suffixes": [
            "of Power", "of Might", "of Strength", "of Dexterity", "of Agility", "of Speed", "of Vitality", "of Health", "of Energy", "of Magic",
            "of Protection", "of Warding", "of Shielding", "of Defense", "of Resistance", "of the Bear", "of the Wolf", "of the Eagle", "of the Serpent", "of the Dragon",
        ],
    },
}

# kind -> (prefix chance, suffix chance, suffix joiner)
NAME_PATTERNS = {
    "town": (0.5, 0.7, ""),
    "world": (0.7, 0.6, ""),
    "character": (0.3, 0.8, ""),
    "monster": (0.6, 0.4, ""),
    "item": (0.7, 0.5, " "),
}


def _capitalize_words(name):
    return " ".join(word[:1].upper() + word[1:] for word in name.split(" "))


def GenerateName(rng, kind="town"):
    """Unknown kinds use the town pattern."""
    if kind not in NAME_PARTS:
        kind = "town"
    parts = NAME_PARTS[kind]
    prefix_chance, suffix_chance, joiner = NAME_PATTERNS[kind]

    name = ""
    if rng.next_bool(prefix_chance):
        name += rng.pick(parts["prefixes"]) + " "
    name += rng.pick(parts["roots"])
    if rng.next_bool(suffix_chance):
        name += joiner + rng.pick(parts["suffixes"])

    return _capitalize_words(name)
