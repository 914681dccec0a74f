"""Dungeon generator tables, each read with a d10 unless noted.

Low rolls lean toward sprawling, dead-end layouts and worse conditions; high
rolls toward interconnected layouts and better conditions. That is what gives
advantage and disadvantage their meaning here.
"""

AREA_TYPES: list[str] = [
    "Dead End",
    "Passage",
    "Passage",
    "Small Chamber: 1 Door",
    "Small Chamber: 2 Doors",
    "Large Chamber: 1 Door",
    "Large Chamber: 2 Doors",
    "Large Chamber: 3 Doors",
    "Stairs",
    "Exit",
]

PASSAGE_AREA = "Passage"

# Filled into every unrevealed map cell once two-pass generation stops.
TERMINAL_AREA = "Small Chamber: 1 Door"

# Read with a d6 for linear dungeons, a d10 for branching ones.
PASSAGE_TYPES: list[str] = [
    "Narrow, Straight",
    "Narrow, Turns",
    "Wide, Straight",
    "Wide, Turns",
    "Stairs Down",
    "Stairs Up",
    "T-Junction",
    "Four-Way Intersection",
    "Y-Junction",
    "Secret Branch",
]

# Read with a d6 for unoccupied areas, a d10 for occupied ones.
ROOM_CONDITIONS: list[str] = [
    "Collapsed",
    "Flooded",
    "Burned",
    "Ransacked",
    "Dusty, Abandoned",
    "Bare",
    "Lived In",
    "Guarded",
    "Well Kept",
    "Lavish",
]

DUNGEON_TYPES: list[str] = [
    "Barrow",
    "Catacombs",
    "Caverns",
    "Citadel",
    "Crypt",
    "Fortress",
    "Labyrinth",
    "Mines",
    "Ruins",
    "Temple",
]

DUNGEON_DESCRIPTIONS: list[str] = [
    "Ashen",
    "Bleeding",
    "Broken",
    "Crimson",
    "Drowned",
    "Forgotten",
    "Hollow",
    "Shattered",
    "Silent",
    "Whispering",
]

DUNGEON_SUBJECTS: list[str] = [
    "Bones",
    "Crown",
    "Dead",
    "Flame",
    "King",
    "Lies",
    "Moon",
    "Serpent",
    "Shadows",
    "Storm",
]

# Read with a d6 while lingering in an unsafe area.
ENCOUNTER_TYPES: list[str] = [
    "Monster",
    "Natural Hazard",
    "Trap",
    "Monster",
    "Feature",
    "Nothing",
    "Feature",
    "Clue",
    "Treasure",
    "Safe Rest",
]

MONSTER_DESCRIPTORS: list[str] = [
    "Ancient",
    "Armored",
    "Blind",
    "Corrupted",
    "Enormous",
    "Ghostly",
    "Hungry",
    "Mutated",
    "Swarming",
    "Territorial",
]

MONSTER_ABILITIES: list[str] = [
    "Acid",
    "Charm",
    "Climbing",
    "Fire",
    "Flight",
    "Invisibility",
    "Paralysis",
    "Poison",
    "Regeneration",
    "Webs",
]

TRAP_ACTIONS: list[str] = [
    "Ambush",
    "Collapse",
    "Crush",
    "Drop",
    "Entangle",
    "Flood",
    "Ignite",
    "Impale",
    "Release",
    "Seal",
]

TRAP_SUBJECTS: list[str] = [
    "Arrows",
    "Blades",
    "Ceiling",
    "Darts",
    "Floor",
    "Gas",
    "Net",
    "Pit",
    "Spikes",
    "Walls",
]

FEATURE_TYPES: list[str] = [
    "Altar",
    "Bridge",
    "Fountain",
    "Library",
    "Mural",
    "Pool",
    "Shrine",
    "Statue",
    "Throne",
    "Well",
]
