"""Quest tables, each read with a d10.

A quest reads as "[Objective] the [Description] [Focus] [Preposition] the
[Location]". Entries in the italic sets name another table and are rolled on
it in the same call.
"""

OBJECTIVES: list[str] = [
    "Defend",
    "Deliver",
    "Destroy",
    "Escort",
    "Explore",
    "Find",
    "Investigate",
    "Protect",
    "Rescue",
    "Retrieve",
]

DESCRIPTIONS: list[str] = [
    "Ancient",
    "Cursed",
    "Colorful",
    "Dangerous",
    "Forbidden",
    "Hidden",
    "Lost",
    "Sacred",
    "Stolen",
    "Strange",
]

FOCUSES: list[str] = [
    "Artifact",
    "Monster",
    "Event",
    "Environment",
    "Faction",
    "Person",
    "Secret",
    "Location",
    "Object",
    "Treasure",
]

PREPOSITIONS: list[str] = [
    "above",
    "across",
    "behind",
    "beneath",
    "beyond",
    "in",
    "near",
    "past",
    "through",
    "within",
]

LOCATIONS: list[str] = [
    "Castle",
    "Dungeon Feature",
    "Dungeon",
    "Environment",
    "Event",
    "Natural Hazard",
    "Tower",
    "Settlement",
    "Camp",
    "Wilderness Feature",
]

ITALIC_DESCRIPTIONS: frozenset[str] = frozenset({"Colorful"})

ITALIC_FOCUSES: frozenset[str] = frozenset(
    {"Monster", "Event", "Environment", "Person", "Location", "Object"}
)

ITALIC_LOCATIONS: frozenset[str] = frozenset(
    {
        "Dungeon Feature",
        "Dungeon",
        "Environment",
        "Event",
        "Natural Hazard",
        "Settlement",
        "Wilderness Feature",
    }
)
