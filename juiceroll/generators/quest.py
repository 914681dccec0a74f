"""Quest generator.

5d10: "[Objective] the [Description] [Focus] [Preposition] the [Location]".

Some entries name another table rather than a word ("Monster", "Natural
Hazard", "Settlement"). Those are rolled in the same call and shown as
"rolled (entry)". Location-like entries roll a whole name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from juiceroll.data import quest as data
from juiceroll.data.wilderness import ENVIRONMENTS
from juiceroll.dice import RollEngine
from juiceroll.generators import dungeon, settlement, wilderness
from juiceroll.models import QuestResult
from juiceroll.oracles.details import COLOR_TABLE
from juiceroll.oracles.random_event import IDEA_TABLES
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

OBJECTIVE_TABLE = LookupTable.from_sequence("quest objective", data.OBJECTIVES)
DESCRIPTION_TABLE = LookupTable.from_sequence("quest description", data.DESCRIPTIONS)
FOCUS_TABLE = LookupTable.from_sequence("quest focus", data.FOCUSES)
PREPOSITION_TABLE = LookupTable.from_sequence("quest preposition", data.PREPOSITIONS)
LOCATION_TABLE = LookupTable.from_sequence("quest location", data.LOCATIONS)
ENVIRONMENT_TABLE = LookupTable.from_sequence("environment", ENVIRONMENTS)

# entry -> table rolled once with a d10
CASCADE_TABLES: dict[str, LookupTable[str]] = {
    "Colorful": COLOR_TABLE,
    "Monster": dungeon.DESCRIPTOR_TABLE,
    "Event": IDEA_TABLES["event"],
    "Environment": ENVIRONMENT_TABLE,
    "Person": IDEA_TABLES["person"],
    "Object": IDEA_TABLES["object"],
    "Dungeon Feature": dungeon.FEATURE_TABLE,
    "Natural Hazard": wilderness.HAZARD_TABLE,
    "Wilderness Feature": wilderness.FEATURE_TABLE,
}


def _settlement_name(engine: RollEngine) -> tuple[str, list[int]]:
    result = settlement.generate_name(engine)
    return result.name, result.dice_results


def _dungeon_name(engine: RollEngine) -> tuple[str, list[int]]:
    result = dungeon.generate_name(engine)
    return result.name, result.dice_results


# entry -> name generator
CASCADE_NAMES: dict[str, Callable[[RollEngine], tuple[str, list[int]]]] = {
    "Location": _settlement_name,
    "Settlement": _settlement_name,
    "Dungeon": _dungeon_name,
}


def expand(entry: str, engine: RollEngine) -> tuple[str | None, list[int]]:
    """Roll the table an entry names.

    Returns:
        The rolled text (None when ``entry`` names no table) and the dice
        rolled for it.
    """
    if entry in CASCADE_NAMES:
        return CASCADE_NAMES[entry](engine)
    table = CASCADE_TABLES.get(entry)
    if table is None:
        logger.debug("Entry %r names no table", entry)
        return None, []
    roll = engine.roll_die(10)
    return table.lookup(roll, default=table.results()[-1]), [roll]


def _expand_if(
    entry: str, italic: frozenset[str], engine: RollEngine
) -> tuple[str | None, list[int]]:
    if entry not in italic:
        return None, []
    return expand(entry, engine)


def _shown(entry: str, expanded: str | None) -> str:
    return f"{expanded} ({entry})" if expanded else entry


def generate(engine: RollEngine | None = None) -> QuestResult:
    engine = engine or RollEngine()
    objective_roll, description_roll, focus_roll, preposition_roll, location_roll = (
        engine.roll_dice(5, 10)
    )
    objective = OBJECTIVE_TABLE.lookup(objective_roll, default=data.OBJECTIVES[-1])
    description = DESCRIPTION_TABLE.lookup(description_roll, default=data.DESCRIPTIONS[-1])
    focus = FOCUS_TABLE.lookup(focus_roll, default=data.FOCUSES[-1])
    preposition = PREPOSITION_TABLE.lookup(preposition_roll, default=data.PREPOSITIONS[-1])
    location = LOCATION_TABLE.lookup(location_roll, default=data.LOCATIONS[-1])

    description_expanded, description_dice = _expand_if(
        description, data.ITALIC_DESCRIPTIONS, engine
    )
    focus_expanded, focus_dice = _expand_if(focus, data.ITALIC_FOCUSES, engine)
    location_expanded, location_dice = _expand_if(location, data.ITALIC_LOCATIONS, engine)

    sentence = (
        f"{objective} the {_shown(description, description_expanded)} "
        f"{_shown(focus, focus_expanded)} {preposition} the "
        f"{_shown(location, location_expanded)}"
    )
    dice = [objective_roll, description_roll, focus_roll, preposition_roll, location_roll]
    return QuestResult(
        description="Quest",
        dice_results=[*dice, *description_dice, *focus_dice, *location_dice],
        total=sum(dice),
        interpretation=sentence,
        objective_roll=objective_roll,
        objective=objective,
        description_roll=description_roll,
        description_word=description,
        description_expanded=description_expanded,
        focus_roll=focus_roll,
        focus=focus,
        focus_expanded=focus_expanded,
        preposition_roll=preposition_roll,
        preposition=preposition,
        location_roll=location_roll,
        location=location,
        location_expanded=location_expanded,
        sentence=sentence,
    )
