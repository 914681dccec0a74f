"""Next Scene tables."""

# (min, max, outcome) over the clamped 2d6 + chaos total.
SCENE_RANGES: list[tuple[int, int, str]] = [
    (2, 2, "dramatic_twist"),
    (3, 4, "complication"),
    (5, 5, "delay"),
    (6, 8, "expected"),
    (9, 9, "advantage"),
    (10, 11, "opportunity"),
    (12, 12, "revelation"),
]

SCENE_LABELS: dict[str, str] = {
    "dramatic_twist": "Dramatic Twist",
    "complication": "Complication",
    "delay": "Delay",
    "expected": "Expected",
    "advantage": "Advantage",
    "opportunity": "Opportunity",
    "revelation": "Revelation",
}

SCENE_GUIDANCE: dict[str, str] = {
    "dramatic_twist": "The scene is nothing like expected. Roll a Random Event.",
    "complication": "The expected scene, made harder.",
    "delay": "Something gets in the way before the scene can start.",
    "expected": "The scene plays out as anticipated.",
    "advantage": "The expected scene, with something in your favor.",
    "opportunity": "A chance opens up that was not there before.",
    "revelation": "The scene exposes something important.",
}

FOCUSES: list[str] = [
    "Enemy",
    "Monster",
    "Event",
    "Environment",
    "Community",
    "Person",
    "Information",
    "Location",
    "Object",
    "Ally",
]
