"""Settlement tables, each read with a d10.

Villages read the establishment table with a d6, so the first six entries are
the ones any hamlet might have.
"""

NAME_PREFIXES: list[str] = [
    "Ash",
    "Black",
    "Bright",
    "Cold",
    "Green",
    "High",
    "Iron",
    "Oak",
    "Red",
    "Stone",
]

NAME_SUFFIXES: list[str] = [
    "bridge",
    "brook",
    "fall",
    "ford",
    "haven",
    "hollow",
    "moor",
    "stead",
    "vale",
    "wick",
]

ESTABLISHMENTS: list[str] = [
    "Tavern",
    "Inn",
    "General Store",
    "Stable",
    "Shrine",
    "Artisan",
    "Guild Hall",
    "Market",
    "Bank",
    "Magic Shop",
]

ARTISAN = "Artisan"

ESTABLISHMENT_DESCRIPTIONS: dict[str, str] = {
    "Tavern": "Drinks, gossip and a warm hearth.",
    "Inn": "Rooms for the night and a stable yard.",
    "General Store": "Rope, rations, lamp oil and odds and ends.",
    "Stable": "Mounts, feed and a farrier.",
    "Shrine": "A small holy place tended by a single keeper.",
    "Artisan": "A craftsperson's workshop.",
    "Guild Hall": "Where a trade guild meets, hires and settles disputes.",
    "Market": "Open stalls selling food and local goods.",
    "Bank": "Moneychangers, loans and a strongroom.",
    "Magic Shop": "Scrolls, reagents and curiosities of uncertain origin.",
}

ARTISANS: list[str] = [
    "Blacksmith",
    "Carpenter",
    "Cobbler",
    "Glassblower",
    "Jeweler",
    "Leatherworker",
    "Potter",
    "Tailor",
    "Tinker",
    "Weaver",
]

ARTISAN_DESCRIPTIONS: dict[str, str] = {
    "Blacksmith": "Tools, nails, horseshoes and the occasional blade.",
    "Carpenter": "Furniture, carts and repairs.",
    "Cobbler": "Boots and shoes, made and mended.",
    "Glassblower": "Bottles, lenses and lamp chimneys.",
    "Jeweler": "Rings, settings and appraisals.",
    "Leatherworker": "Saddles, belts, packs and armor padding.",
    "Potter": "Jars, bowls and tiles.",
    "Tailor": "Clothing cut to fit.",
    "Tinker": "Pots mended and small mechanisms fixed.",
    "Weaver": "Cloth, rope and blankets.",
}

NEWS: list[str] = [
    "Bandit Raids",
    "Celebration",
    "Disappearance",
    "Election",
    "Epidemic",
    "Execution",
    "Famine",
    "Monster Sighting",
    "Royal Visit",
    "Strange Visitor",
]

NEWS_DESCRIPTIONS: dict[str, str] = {
    "Bandit Raids": "Travelers and farms on the roads are being robbed.",
    "Celebration": "A festival, wedding or holy day is under way.",
    "Disappearance": "Someone has gone missing.",
    "Election": "A new leader is being chosen.",
    "Epidemic": "A sickness is spreading.",
    "Execution": "Someone is to be put to death.",
    "Famine": "Food is scarce and prices are high.",
    "Monster Sighting": "Something dangerous was seen nearby.",
    "Royal Visit": "A noble or royal party is coming through.",
    "Strange Visitor": "An outsider has arrived and is drawing attention.",
}
