"""Interrupt / plot point tables.

The first d10 picks a category, read 0-9 (10 reads as 0). The second d10 picks
an event from that category's list.
"""

CATEGORY_RANGES: list[tuple[int, int, str]] = [
    (0, 0, "Personal"),
    (1, 2, "Action"),
    (3, 4, "Tension"),
    (5, 6, "Mystery"),
    (7, 8, "Social"),
    (9, 9, "Personal"),
]

EVENTS: dict[str, list[str]] = {
    "Action": [
        "Ambush",
        "Chase",
        "Explosion",
        "Fight Breaks Out",
        "Collapse",
        "Theft",
        "Rescue Needed",
        "Stampede",
        "Fire",
        "Duel",
    ],
    "Tension": [
        "Deadline",
        "Betrayal Hinted",
        "Threat Revealed",
        "Ultimatum",
        "Trap Sprung",
        "Supplies Run Low",
        "Pursuers Close In",
        "Weather Turns",
        "Ally Wounded",
        "Alarm Raised",
    ],
    "Mystery": [
        "Strange Symbol",
        "Missing Person",
        "Hidden Message",
        "Unexplained Sound",
        "Stranger Watching",
        "Impossible Event",
        "Forgotten Memory",
        "Secret Passage",
        "Odd Coincidence",
        "Cryptic Warning",
    ],
    "Social": [
        "Old Friend",
        "Rival Appears",
        "Request for Help",
        "Public Accusation",
        "Offer of Alliance",
        "Rumor Spreads",
        "Invitation",
        "Insult",
        "Confession",
        "Negotiation",
    ],
    "Personal": [
        "Past Catches Up",
        "Debt Called In",
        "Moral Dilemma",
        "Injury Flares",
        "Loved One in Danger",
        "Nightmare",
        "Temptation",
        "Old Enemy",
        "Lost Item Found",
        "Promise Broken",
    ],
}
