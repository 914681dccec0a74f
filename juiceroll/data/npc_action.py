"""NPC tables, each read with a d10.

Actions and combat actions run from passive at the low end to forceful at the
high end. Passive NPCs read them with a d6. Needs run from primitive to
complex, so a skewed roll picks the end of that ladder.
"""

PERSONALITIES: list[str] = [
    "Aggressive",
    "Cautious",
    "Cheerful",
    "Confident",
    "Curious",
    "Greedy",
    "Honest",
    "Lazy",
    "Loyal",
    "Reserved",
]

NEEDS: list[str] = [
    "Sustenance",
    "Shelter",
    "Safety",
    "Health",
    "Wealth",
    "Companionship",
    "Belonging",
    "Status",
    "Recognition",
    "Fulfillment",
]

MOTIVES: list[str] = [
    "Power",
    "Wealth",
    "Revenge",
    "Love",
    "Knowledge",
    "Duty",
    "Freedom",
    "Faith",
    "History",
    "Focus",
]

HISTORY_MOTIVE = "History"
FOCUS_MOTIVE = "Focus"

ACTIONS: list[str] = [
    "Ignore",
    "Observe",
    "Wait",
    "Warn",
    "Question",
    "Help",
    "Trade",
    "Demand",
    "Threaten",
    "Attack",
]

COMBAT_ACTIONS: list[str] = [
    "Flee",
    "Hide",
    "Defend",
    "Warn",
    "Reposition",
    "Call for Help",
    "Attack",
    "Grapple",
    "Use Ability",
    "All-Out Attack",
]
