"""Random Event oracle.

A Random Event is four d10 rolls: what the event is about (focus), how it
changes things (modifier), which word list to draw the subject from
(category), and the subject itself (idea).
"""

from __future__ import annotations

import logging

from juiceroll.data import random_event as data
from juiceroll.dice import RollEngine
from juiceroll.models import IdeaResult, RandomEventResult, TableResult
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

FOCUS_TABLE = LookupTable.from_sequence("event focus", data.EVENT_FOCUS)
MODIFIER_TABLE = LookupTable.from_sequence("modifier", data.MODIFIERS)
CATEGORY_TABLE = LookupTable.from_ranges("idea category", data.IDEA_CATEGORY_RANGES)

IDEA_TABLES: dict[str, LookupTable[str]] = {
    "idea": LookupTable.from_sequence("idea", data.IDEAS),
    "event": LookupTable.from_sequence("event", data.EVENTS),
    "person": LookupTable.from_sequence("person", data.PERSONS),
    "object": LookupTable.from_sequence("object", data.OBJECTS),
}

SINGLE_TABLES: dict[str, LookupTable[str]] = {"modifier": MODIFIER_TABLE, **IDEA_TABLES}


def _category_label(category: str) -> str:
    return category.capitalize()


def random_event(engine: RollEngine | None = None) -> RandomEventResult:
    """Roll a full Random Event: focus, modifier, idea category and idea."""
    engine = engine or RollEngine()
    focus_roll = engine.roll_die(10)
    modifier_roll = engine.roll_die(10)
    category_roll = engine.roll_die(10)
    idea_roll = engine.roll_die(10)

    focus = FOCUS_TABLE.lookup(focus_roll, default=data.EVENT_FOCUS[-1])
    modifier = MODIFIER_TABLE.lookup(modifier_roll, default=data.MODIFIERS[-1])
    category = CATEGORY_TABLE.lookup(category_roll, default="idea")
    idea = IDEA_TABLES[category].lookup(idea_roll, default=data.IDEAS[-1])

    return RandomEventResult(
        description="Random Event",
        dice_results=[focus_roll, modifier_roll, category_roll, idea_roll],
        total=focus_roll + modifier_roll + category_roll + idea_roll,
        interpretation=f"{focus}: {modifier} {idea} ({_category_label(category)})",
        focus_roll=focus_roll,
        focus=focus,
        focus_description=data.EVENT_FOCUS_DESCRIPTIONS.get(focus, ""),
        modifier_roll=modifier_roll,
        modifier=modifier,
        category_roll=category_roll,
        category=category,
        idea_roll=idea_roll,
        idea=idea,
    )


def generate_idea(
    category: str | None = None, *, engine: RollEngine | None = None
) -> IdeaResult:
    """Roll a modifier and an idea.

    Args:
        category: One of "idea", "event", "person", "object". Rolled on the
            category table when omitted; unknown names fall back to "idea".
        engine: Dice source.
    """
    engine = engine or RollEngine()
    dice: list[int] = []
    modifier_roll = engine.roll_die(10)
    dice.append(modifier_roll)
    modifier = MODIFIER_TABLE.lookup(modifier_roll, default=data.MODIFIERS[-1])

    category_roll = None
    if category is None:
        category_roll = engine.roll_die(10)
        dice.append(category_roll)
        category = CATEGORY_TABLE.lookup(category_roll, default="idea")
    elif category not in IDEA_TABLES:
        logger.warning("Unknown idea category %r, falling back to idea", category)
        category = "idea"

    idea_roll = engine.roll_die(10)
    dice.append(idea_roll)
    idea = IDEA_TABLES[category].lookup(idea_roll, default=data.IDEAS[-1])

    return IdeaResult(
        description=f"Modifier + {_category_label(category)}",
        dice_results=dice,
        total=sum(dice),
        interpretation=f"{modifier} {idea}",
        modifier_roll=modifier_roll,
        modifier=modifier,
        category_roll=category_roll,
        category=category,
        idea_roll=idea_roll,
        idea=idea,
    )


def generate_focus(engine: RollEngine | None = None) -> TableResult:
    """Roll only the event focus."""
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    focus = FOCUS_TABLE.lookup(roll, default=data.EVENT_FOCUS[-1])
    return TableResult(
        description="Event Focus",
        dice_results=[roll],
        total=roll,
        interpretation=data.EVENT_FOCUS_DESCRIPTIONS.get(focus),
        table="event_focus",
        roll=roll,
        result=focus,
    )


def roll_table(name: str, engine: RollEngine | None = None) -> TableResult:
    """Roll once on a single Random Event word list.

    Unknown table names fall back to the idea list.
    """
    engine = engine or RollEngine()
    key = name.lower()
    if key not in SINGLE_TABLES:
        logger.warning("Unknown random event table %r, falling back to idea", name)
        key = "idea"
    table = SINGLE_TABLES[key]
    roll = engine.roll_die(10)
    result = table.lookup(roll, default=table.results()[-1])
    return TableResult(
        description=_category_label(key),
        dice_results=[roll],
        total=roll,
        interpretation=result,
        table=key,
        roll=roll,
        result=result,
    )
