"""Wilderness tables.

Environment and type share the same 1-10 row numbering: a region's type is
always within one row of its environment.
"""

ENVIRONMENTS: list[str] = [
    "Arctic",
    "Tundra",
    "Mountains",
    "Hills",
    "Grassland",
    "Forest",
    "Jungle",
    "Swamp",
    "Coast",
    "Desert",
]

FOREST_ROW = 6

# name, weather modifier, and the weather skew for an environment on this row.
TYPES: list[dict] = [
    {"name": "Snowy", "modifier": 0, "skew": "-"},
    {"name": "Frozen", "modifier": 0, "skew": "-"},
    {"name": "Rocky", "modifier": 1, "skew": "-"},
    {"name": "Rolling", "modifier": 2, "skew": "0"},
    {"name": "Open", "modifier": 2, "skew": "0"},
    {"name": "Wooded", "modifier": 2, "skew": "0"},
    {"name": "Overgrown", "modifier": 3, "skew": "+"},
    {"name": "Marshy", "modifier": 2, "skew": "-"},
    {"name": "Sandy", "modifier": 3, "skew": "0"},
    {"name": "Arid", "modifier": 4, "skew": "+"},
]

# Read with a d10 while oriented, a d6 while lost. Italic entries expand into
# another table.
ENCOUNTERS: list[dict] = [
    {"name": "Natural Hazard", "italic": True, "partial_italic": None},
    {"name": "Monster", "italic": True, "partial_italic": None},
    {"name": "Weather", "italic": True, "partial_italic": None},
    {"name": "Challenge", "italic": True, "partial_italic": None},
    {"name": "Dungeon", "italic": True, "partial_italic": None},
    {"name": "River/Road", "italic": False, "partial_italic": None},
    {"name": "Feature", "italic": True, "partial_italic": None},
    {"name": "Settlement/Camp", "italic": False, "partial_italic": "Settlement"},
    {"name": "Advance Plot", "italic": False, "partial_italic": None},
    {"name": "Destination/Lost", "italic": False, "partial_italic": None},
]

LOST_ENCOUNTER = "Destination/Lost"
FOUND_ENCOUNTER = "River/Road"

# Read with 1d6 + type modifier, clamped to 1-10.
WEATHER_TYPES: list[str] = [
    "Blizzard",
    "Snow Flurries",
    "Freezing Cold",
    "Thunderstorm",
    "Heavy Rain",
    "Light Rain",
    "Heavy Clouds",
    "High Winds",
    "Clear Skies",
    "Scorching Heat",
]

NATURAL_HAZARDS: list[str] = [
    "Rockslide",
    "Flash Flood",
    "Quicksand",
    "Sinkhole",
    "Thin Ice",
    "Wildfire",
    "Poisonous Plants",
    "Sheer Cliff",
    "Dense Fog",
    "Insect Swarm",
]

FEATURES: list[str] = [
    "Abandoned Camp",
    "Ancient Tree",
    "Cave",
    "Grave",
    "Monument",
    "Old Battlefield",
    "Ruins",
    "Shrine",
    "Standing Stones",
    "Watchtower",
]

# Monster formula per environment row: 1d6 with this skew, plus this modifier.
MONSTER_FORMULAS: list[dict] = [
    {"modifier": 4, "advantage": "-"},
    {"modifier": 3, "advantage": "-"},
    {"modifier": 3, "advantage": "+"},
    {"modifier": 1, "advantage": "0"},
    {"modifier": 0, "advantage": "-"},
    {"modifier": 2, "advantage": "+"},
    {"modifier": 3, "advantage": "0"},
    {"modifier": 2, "advantage": "-"},
    {"modifier": 1, "advantage": "+"},
    {"modifier": 4, "advantage": "+"},
]
