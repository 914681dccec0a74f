"""Discover Meaning tables, each read with a d20."""

ADJECTIVES: list[str] = [
    "Abandoned",
    "Ancient",
    "Bitter",
    "Broken",
    "Cursed",
    "Desperate",
    "Divine",
    "Enormous",
    "False",
    "Forgotten",
    "Hidden",
    "Hungry",
    "Lonely",
    "Patient",
    "Powerful",
    "Sacred",
    "Savage",
    "Shattered",
    "Silent",
    "Twisted",
]

NOUNS: list[str] = [
    "Alliance",
    "Balance",
    "Bargain",
    "Blood",
    "Burden",
    "Dream",
    "Duty",
    "Faith",
    "Freedom",
    "Grief",
    "Hope",
    "Hunger",
    "Legacy",
    "Lies",
    "Memory",
    "Oath",
    "Power",
    "Shelter",
    "Truth",
    "Wealth",
]
