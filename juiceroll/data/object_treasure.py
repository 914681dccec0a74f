"""Object and treasure tables, each read with a d6.

The first die picks the category, the next three read that category's columns
left to right. Higher faces are better items.
"""

CATEGORIES: list[str] = ["Trinket", "Treasure", "Document", "Accessory", "Weapon", "Armor"]

# category -> (column labels, columns)
COLUMNS: dict[str, tuple[list[str], list[list[str]]]] = {
    "Trinket": (
        ["Quality", "Material", "Type"],
        [
            ["Broken", "Worn", "Plain", "Fine", "Ornate", "Exquisite"],
            ["Bone", "Wood", "Clay", "Iron", "Silver", "Gold"],
            ["Button", "Coin", "Figurine", "Key", "Locket", "Music Box"],
        ],
    ),
    "Treasure": (
        ["Quality", "Container", "Contents"],
        [
            ["Meager", "Small", "Modest", "Decent", "Large", "Vast"],
            ["None", "Pouch", "Sack", "Box", "Chest", "Urn"],
            ["Copper", "Silver", "Gold", "Gems", "Jewelry", "Art"],
        ],
    ),
    "Document": (
        ["Type", "Content", "Subject"],
        [
            ["Note", "Letter", "Journal", "Map", "Scroll", "Tome"],
            ["Rumors", "Orders", "Records", "Secrets", "Prophecy", "Spells"],
            ["a Person", "a Place", "a Faction", "a Creature", "an Item", "an Event"],
        ],
    ),
    "Accessory": (
        ["Quality", "Material", "Type"],
        [
            ["Tarnished", "Crude", "Simple", "Polished", "Engraved", "Jeweled"],
            ["Leather", "Copper", "Bronze", "Silver", "Gold", "Platinum"],
            ["Ring", "Bracelet", "Earring", "Brooch", "Necklace", "Circlet"],
        ],
    ),
    "Weapon": (
        ["Quality", "Material", "Type"],
        [
            ["Rusty", "Crude", "Standard", "Balanced", "Masterwork", "Legendary"],
            ["Wood", "Bone", "Bronze", "Iron", "Steel", "Mithril"],
            ["Dagger", "Club", "Spear", "Axe", "Sword", "Bow"],
        ],
    ),
    "Armor": (
        ["Quality", "Material", "Type"],
        [
            ["Battered", "Patched", "Standard", "Reinforced", "Masterwork", "Legendary"],
            ["Padded", "Hide", "Leather", "Bronze", "Iron", "Steel"],
            ["Gloves", "Boots", "Helm", "Shield", "Breastplate", "Full Suit"],
        ],
    ),
}

EMPTY_CONTAINER = "None"
