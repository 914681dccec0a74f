"""Random Event word lists. Each list is read with a d10 (10 is the last entry)."""

EVENT_FOCUS: list[str] = [
    "Advance Time",
    "Close Thread",
    "Converge Thread",
    "Diverge Thread",
    "Immersion",
    "Keyed Event",
    "New Character",
    "NPC Action",
    "Plot Armor",
    "Remote Event",
]

EVENT_FOCUS_DESCRIPTIONS: dict[str, str] = {
    "Advance Time": "Time moves on. Do the bookkeeping: weather, light sources, rations.",
    "Close Thread": "Roll on the thread list. That thread ends; decide why.",
    "Converge Thread": "Roll on the thread list. Something pulls you toward that thread.",
    "Diverge Thread": "Roll on the thread list. Something pushes you away from that thread.",
    "Immersion": "Add a sensory detail to what is happening right now.",
    "Keyed Event": "A prepared event fires, or a new one is added to the keyed list.",
    "New Character": "Someone new enters the scene.",
    "NPC Action": "An NPC already present does something unexpected.",
    "Plot Armor": "Something works in the character's favor.",
    "Remote Event": "Something happens elsewhere that will matter later.",
}

MODIFIERS: list[str] = [
    "Change",
    "Continue",
    "Decrease",
    "Extra",
    "Increase",
    "Mundane",
    "Mysterious",
    "Start",
    "Stop",
    "Strange",
]

IDEAS: list[str] = [
    "Attention",
    "Communication",
    "Danger",
    "Element",
    "Food",
    "Home",
    "Resource",
    "Rumor",
    "Secret",
    "Vow",
]

EVENTS: list[str] = [
    "Ambush",
    "Anomaly",
    "Blessing",
    "Caravan",
    "Curse",
    "Discovery",
    "Escape",
    "Journey",
    "Prophecy",
    "Ritual",
]

PERSONS: list[str] = [
    "Criminal",
    "Entertainer",
    "Expert",
    "Mage",
    "Mercenary",
    "Noble",
    "Priest",
    "Ranger",
    "Soldier",
    "Transporter",
]

OBJECTS: list[str] = [
    "Arrow",
    "Candle",
    "Cauldron",
    "Chain",
    "Claw",
    "Hook",
    "Hourglass",
    "Quill",
    "Rose",
    "Skull",
]

# (min, max, category) read with a d10.
IDEA_CATEGORY_RANGES: list[tuple[int, int, str]] = [
    (1, 3, "idea"),
    (4, 6, "event"),
    (7, 8, "person"),
    (9, 10, "object"),
]
