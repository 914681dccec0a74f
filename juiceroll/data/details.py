"""Details tables: color, property, detail modifier, history."""

COLORS: list[str] = [
    "Shade Black",
    "Leather Brown",
    "Crimson Red",
    "Flame Orange",
    "Gold Yellow",
    "Forest Green",
    "Ocean Blue",
    "Royal Purple",
    "Silver Gray",
    "Bone White",
]

COLOR_EMOJI: list[str] = [
    "⬛",
    "🟫",
    "🟥",
    "🟧",
    "🟨",
    "🟩",
    "🟦",
    "🟪",
    "🩶",
    "⬜",
]

PROPERTIES: list[str] = [
    "Age",
    "Durability",
    "Familiarity",
    "Power",
    "Quality",
    "Rarity",
    "Size",
    "Style",
    "Value",
    "Weight",
]

# Indexed by a d6.
INTENSITIES: list[str] = ["Minimal", "Minor", "Mundane", "Moderate", "Major", "Maximum"]

DETAIL_MODIFIERS: list[str] = [
    "Negative Emotion",
    "Positive Emotion",
    "Disfavors PC",
    "Favors PC",
    "Disfavors Thread",
    "Favors Thread",
    "Disfavors NPC",
    "Favors NPC",
    "History",
    "Property",
]

HISTORIES: list[str] = [
    "Backstory",
    "Past Thread",
    "Current Thread",
    "Past Scene",
    "Previous Scene",
    "Current Scene",
    "Past Character",
    "Current Character",
    "Past Location",
    "Current Location",
]
