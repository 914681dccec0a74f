"""Pay the Price tables."""

CONSEQUENCES: list[str] = [
    "Action Has Unintended Effect",
    "Current Situation Worsens",
    "Delayed or Disadvantaged",
    "Forced to Act Against Intentions",
    "Harm or Fatigue",
    "New Danger or Foe Revealed",
    "Person or Community Harmed",
    "Separated From Something",
    "Something of Value Lost",
    "Surprising Development",
]

MAJOR_TWISTS: list[str] = [
    "Ally Becomes Enemy",
    "Assumption Proves False",
    "Betrayal",
    "Dark Secret Revealed",
    "Enemy Shares a Goal",
    "Hidden Agenda Exposed",
    "It Was a Trap",
    "Lost Thing Returns Changed",
    "Mission Is Pointless",
    "Victim Is the Villain",
]
