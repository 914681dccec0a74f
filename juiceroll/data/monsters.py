"""Monster encounter table.

Rows 0-9 are rolled directly; row 10 (*) is the blights row used by forests
and row 11 (**) is the bandits row used on a doubles. Each row is
[tracks, easy, medium, hard, boss]. A "+ " prefix marks a weaker entry that
comes in smaller numbers; a "- " prefix marks a deadly entry that comes in
larger numbers.
"""

BLIGHTS_ROW = 10
BANDITS_ROW = 11

MONSTER_TABLE: list[list[str]] = [
    ["Paw Prints", "+ Wolves", "Dire Wolf", "- Winter Wolves", "Yeti"],
    ["Scat", "+ Giant Rats", "Boar", "- Owlbears", "Bulette"],
    ["Broken Twigs", "+ Kobolds", "Goblins", "- Hobgoblins", "Goblin Boss"],
    ["Claw Marks", "+ Stirges", "Harpy", "- Griffons", "Manticore"],
    ["Shed Scales", "+ Lizardfolk", "Giant Lizard", "- Basilisks", "Hydra"],
    ["Webs", "+ Giant Spiders", "Ettercap", "- Phase Spiders", "Drider"],
    ["Gnawed Bones", "+ Skeletons", "Ghoul", "- Wights", "Wraith"],
    ["Slime Trail", "+ Oozes", "Gelatinous Cube", "- Black Puddings", "Otyugh"],
    ["Huge Footprints", "+ Orcs", "Ogre", "- Trolls", "Hill Giant"],
    ["Scorch Marks", "+ Fire Beetles", "Wyrmling", "- Young Dragon", "Adult Dragon"],
    ["Trampled Moss", "+ Twig Blights", "Needle Blight", "- Vine Blights", "Treant"],
    ["Campfire Ashes", "+ Bandits", "Thug", "- Bandit Veterans", "Bandit Captain"],
]

# (min, max, difficulty) over the difficulty d10.
DIFFICULTY_RANGES: list[tuple[int, int, str]] = [
    (1, 4, "easy"),
    (5, 8, "medium"),
    (9, 10, "hard"),
]

DIFFICULTY_COLUMNS: dict[str, int] = {"easy": 1, "medium": 2, "hard": 3, "boss": 4}

DIFFICULTY_LABELS: dict[str, str] = {
    "easy": "Easy (1-4)",
    "medium": "Medium (5-8)",
    "hard": "Hard (9-0)",
    "boss": "Boss (Doubles)",
}


def strip_prefix(code: str) -> tuple[str, str]:
    """Split a table entry into (skew symbol, display name)."""
    if code.startswith("+ "):
        return "+", code[2:]
    if code.startswith("- "):
        return "-", code[2:]
    return "", code
