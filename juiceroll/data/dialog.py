"""Dialog grid content.

The grid is read from the conversation's current cell. Rows 0-1 speak about
the past; rows 2-4 about the present.
"""

GRID: list[list[str]] = [
    ["Fact", "Denial", "Query", "Denial", "Action"],
    ["Want", "Query", "Need", "Query", "Fact"],
    ["Action", "Need", "Fact", "Action", "Denial"],
    ["Need", "Query", "Denial", "Query", "Want"],
    ["Query", "Support", "Query", "Support", "Need"],
]

PAST_ROWS: frozenset[int] = frozenset({0, 1})

FRAGMENT_DESCRIPTIONS: dict[str, str] = {
    "Fact": "NPC states a fact or observation",
    "Query": "NPC asks a question",
    "Need": "NPC expresses a need or requirement",
    "Want": "NPC expresses a desire or wish",
    "Action": "NPC describes or suggests an action",
    "Denial": "NPC denies, refuses, or disagrees",
    "Support": "NPC offers support or agreement",
}

# (min, max, value) over a d10 read as 0-9 (10 reads as 0).
DIRECTION_RANGES: list[tuple[int, int, str]] = [
    (0, 0, "down"),
    (1, 2, "up"),
    (3, 5, "left"),
    (6, 8, "right"),
    (9, 9, "down"),
]

TONES: dict[str, str] = {
    "up": "Neutral",
    "left": "Defensive",
    "right": "Aggressive",
    "down": "Helpful",
}

SUBJECT_RANGES: list[tuple[int, int, str]] = [
    (0, 0, "Us"),
    (1, 2, "Them"),
    (3, 5, "Me"),
    (6, 8, "You"),
    (9, 9, "Us"),
]
