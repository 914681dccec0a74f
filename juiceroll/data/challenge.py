"""Challenge tables: skills, DCs, and percentage bands."""

PHYSICAL_CHALLENGES: list[str] = [
    "Medicine",
    "Survival",
    "Animal Handling",
    "Performance",
    "Intimidation",
    "Perception",
    "Sleight of Hand",
    "Stealth",
    "Acrobatics",
    "Athletics",
]

MENTAL_CHALLENGES: list[str] = [
    "Nature",
    "Religion",
    "History",
    "Arcana",
    "Insight",
    "Investigation",
    "Deception",
    "Persuasion",
    "Intuition",
    "Willpower",
]

# Indexed by a d10: a roll of 1 is the hardest DC, a roll of 10 the easiest.
DC_VALUES: list[int] = [17, 16, 15, 14, 13, 12, 11, 10, 9, 8]

# d100 bands paired with DC_VALUES, weighted toward the middle DCs.
PERCENTAGE_RANGES: list[tuple[int, int]] = [
    (1, 2),
    (3, 7),
    (8, 17),
    (18, 32),
    (33, 50),
    (51, 68),
    (69, 83),
    (84, 93),
    (94, 98),
    (99, 100),
]
