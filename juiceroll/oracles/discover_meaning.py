"""Discover Meaning: an adjective and a noun, each read with a d20."""

from __future__ import annotations

from juiceroll.data import meaning as data
from juiceroll.dice import RollEngine
from juiceroll.models import DiscoverMeaningResult
from juiceroll.tables import LookupTable

ADJECTIVE_TABLE = LookupTable.from_sequence("meaning adjective", data.ADJECTIVES)
NOUN_TABLE = LookupTable.from_sequence("meaning noun", data.NOUNS)


def discover_meaning(engine: RollEngine | None = None) -> DiscoverMeaningResult:
    engine = engine or RollEngine()
    adjective_roll = engine.roll_die(20)
    noun_roll = engine.roll_die(20)
    adjective = ADJECTIVE_TABLE.lookup(adjective_roll, default=data.ADJECTIVES[-1])
    noun = NOUN_TABLE.lookup(noun_roll, default=data.NOUNS[-1])
    return DiscoverMeaningResult(
        description="Discover Meaning",
        dice_results=[adjective_roll, noun_roll],
        total=adjective_roll + noun_roll,
        interpretation=f"{adjective} {noun}",
        adjective_roll=adjective_roll,
        adjective=adjective,
        noun_roll=noun_roll,
        noun=noun,
    )
