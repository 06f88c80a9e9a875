# directory tile_descriptions.py
"""
Narrative text for tiles and the travel options between them.
All choices draw from the caller's SeededRandom, so text is reproducible.
"""

BIOME_DESCRIPTIONS = {
    "plains": [
        "Rolling grasslands stretch out before you, with occasional wildflowers dotting the landscape.",
        "A vast expanse of open grassland with gentle hills in the distance.",
        "Tall grasses sway in the breeze across these open plains.",
    ],
    "forest": [
        "Towering trees form a dense canopy overhead, dappling the forest floor with patches of light.",
        "A serene forest with ancient trees and a carpet of fallen leaves.",
        "The forest is alive with the sounds of birds and rustling leaves.",
    ],
    "desert": [
        "An endless sea of sand dunes stretches to the horizon, shimmering in the heat.",
        "Barren flats with scattered rock formations and little vegetation.",
        "The desert's harsh landscape is punctuated by the occasional hardy shrub.",
    ],
    "mountains": [
        "Jagged peaks rise against the sky, their slopes dusted with snow.",
        "Rocky terrain rises steeply, with narrow paths winding between the crags.",
        "The mountain air is thin but crisp, offering sweeping views of the lands below.",
    ],
    "swamp": [
        "Murky waters and twisted trees create a foreboding atmosphere in this fetid swamp.",
        "The swamp is thick with humidity, strange sounds rising from its depths.",
        "Moss-covered trees rise from the stagnant waters of this eerie swamp.",
    ],
    "tundra": [
        "A vast, frozen plain stretches before you, with only sparse vegetation surviving the cold.",
        "The frozen landscape is beautiful but unforgiving, with a wind that cuts to the bone.",
        "Patches of snow and ice cover the ground in this frigid tundra.",
    ],
    "volcanic": [
        "The ground is black and cracked, with steam venting from fissures in the earth.",
        "Rivers of molten lava creep across the scorched landscape.",
        "The air is thick with sulfur and ash in this volcanic region.",
    ],
    "jungle": [
        "Dense vegetation surrounds you, with exotic flowers and vines hanging from towering trees.",
        "The jungle is hot and humid, alive with the calls of countless creatures.",
        "Thick undergrowth makes progress difficult in this teeming jungle.",
    ],
    "ocean": [
        "Endless blue waters stretch to the horizon.",
        "The vast ocean extends as far as the eye can see, its depths hiding countless mysteries.",
        "The deep sea stretches out before you, its surface glittering in the light.",
    ],
    "wasteland": [
        "A barren, desolate landscape stretches before you, devoid of almost all life.",
        "The blighted terrain shows signs of some ancient catastrophe that scoured the land.",
        "Little grows in this harsh wasteland, where the very soil seems poisoned.",
    ],
    "highlands": [
        "Hills rise and fall across the landscape, covered in hardy grasses and shrubs.",
        "The highland air is cool and clear, offering views across the surrounding countryside.",
        "These elevated plains are swept by strong winds, with rocky outcroppings the only shelter.",
    ],
    "beach": [
        "Soft sand stretches along the water's edge, with gentle waves lapping at the shore.",
        "The beach is warm and inviting, the waves keeping a soothing rhythm.",
        "Golden sands meet the water in a long, curving shoreline.",
    ],
    "marsh": [
        "Shallow waters and reeds dominate this soggy landscape, teeming with life.",
        "The marsh is a maze of waterways and small islands of firmer ground.",
        "Wading birds stalk through the shallow waters of this fertile marsh.",
    ],
    "river": [
        "A clear river flows swiftly between its banks, the water sparkling in the light.",
        "The river winds its way through the landscape, carving a path through the terrain.",
        "Swift waters rush over rocks with a constant murmur.",
    ],
    "lake": [
        "A still body of water reflects the sky like a mirror, surrounded by gentle shores.",
        "The lake's calm surface is occasionally broken by a rising fish.",
        "This wide lake stretches into the distance, its far shore barely visible.",
    ],
}

WEATHER_DESCRIPTIONS = {
    "clear": "The sky is clear and blue, with the sun shining brightly.",
    "cloudy": "Gray clouds hang low in the sky, casting everything in a muted light.",
    "rain": "Rain falls steadily, creating puddles and making the ground slick.",
    "storm": "Lightning flashes across the dark sky as thunder rumbles.",
    "snow": "Snowflakes drift from the sky, covering everything in white.",
    "fog": "A thick fog limits visibility, muffling every sound.",
    "heatwave": "The air shimmers with intense heat, making even breathing an effort.",
    "sandstorm": "Sand and dust fill the air, stinging your eyes.",
}

DANGER_HINTS = [
    "The area seems relatively safe.",
    "You sense no immediate danger here.",
    "There might be hidden dangers lurking nearby.",
    "You feel uneasy, as if being watched.",
    "This place feels dangerous, with signs of hostile creatures.",
    "The area is clearly perilous, with obvious signs of deadly threats.",
]

BIOME_NARRATIVE = {
    "forest": "The trees seem to whisper as the wind passes through their branches.",
    "jungle": "The trees seem to whisper as the wind passes through their branches.",
    "desert": "The harsh environment makes you grateful for the water in your waterskin.",
    "wasteland": "The harsh environment makes you grateful for the water in your waterskin.",
    "mountains": "From this vantage point you can see far across the landscape.",
    "highlands": "From this vantage point you can see far across the landscape.",
    "beach": "The sound of waves brings a sense of peace, despite what may lurk nearby.",
    "ocean": "The sound of waves brings a sense of peace, despite what may lurk nearby.",
    "river": "The water looks refreshing, though something might be lurking beneath the surface.",
    "lake": "The water looks refreshing, though something might be lurking beneath the surface.",
}

DIRECTION_VERBS = {
    "north": ["Head north toward", "Journey northward to", "Travel north into"],
    "east": ["Go east toward", "Head eastward to", "Travel east into"],
    "south": ["Move south toward", "Journey southward to", "Travel south into"],
    "west": ["Go west toward", "Head westward to", "Travel west into"],
}

DIRECTION_MOVES = {
    "north": ["You travel north", "Heading northward", "Moving north"],
    "east": ["You journey east", "Traveling eastward", "Moving east"],
    "south": ["You head south", "Journeying southward", "Moving south"],
    "west": ["You travel west", "Heading westward", "Moving west"],
}

BIOME_PLACE_NAMES = {
    "plains": ["the grasslands", "the open plains", "the meadows"],
    "forest": ["the forest", "the woods", "the dense trees"],
    "desert": ["the desert", "the sand dunes", "the arid flats"],
    "mountains": ["the mountains", "the peaks", "the rocky heights"],
    "swamp": ["the swamp", "the bog", "the boggy terrain"],
    "tundra": ["the frozen tundra", "the icy plains", "the snow-covered land"],
    "volcanic": ["the volcanic region", "the lava fields", "the scorched earth"],
    "jungle": ["the jungle", "the dense rainforest", "the tropical growth"],
    "ocean": ["the ocean", "the sea", "the deep waters"],
    "wasteland": ["the wasteland", "the blighted land", "the desolate region"],
    "highlands": ["the highlands", "the high country", "the elevated plains"],
    "beach": ["the beach", "the sandy shore", "the coastline"],
    "marsh": ["the marsh", "the wetlands", "the reed beds"],
    "river": ["the river", "the flowing water", "the riverbank"],
    "lake": ["the lake", "the still waters", "the lakeside"],
}


def GenerateTileDescription(biome, weather, difficulty, rng):
    biome_desc = rng.pick(BIOME_DESCRIPTIONS.get(biome, BIOME_DESCRIPTIONS["plains"]))
    weather_desc = WEATHER_DESCRIPTIONS.get(weather, WEATHER_DESCRIPTIONS["clear"])
    danger_desc = DANGER_HINTS[min(5, difficulty // 2)]

    if difficulty > 7:
        narrative = "You notice signs of recent conflict: tracks, broken equipment, even bloodstains."
    elif difficulty > 4:
        narrative = "Others have passed this way before, though whether they survived is unclear."
    else:
        narrative = BIOME_NARRATIVE.get(biome, "")

    parts = [biome_desc, weather_desc, narrative, danger_desc]
    return " ".join(p for p in parts if p)


def GenerateDirectionText(direction, tile, rng):
    verb = rng.pick(DIRECTION_VERBS[direction])
    place = rng.pick(BIOME_PLACE_NAMES.get(tile.biome, ["the wilds"]))

    feature = ""
    if tile.has_town:
        feature = " where you can see a settlement"
    elif tile.has_portal:
        feature = " where a strange portal glimmers"
    elif tile.has_path:
        feature = " following a path"

    return f"{verb} {place}{feature}."


def GenerateDirectionResult(direction, tile, rng):
    move = rng.pick(DIRECTION_MOVES[direction])
    return f"{move}, you arrive at a new location. {tile.description}"
