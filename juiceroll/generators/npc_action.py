"""NPC behaviour: actions, combat actions and quick profiles.

Action columns run from passive to forceful, so the die and the skew both
shape the answer:

  disposition / focus   passive NPCs roll a d6 and never reach the top of
                        the column; active ones roll a d10.
  context / objective   active context and offensive objective keep the
                        higher of two dice, passive and defensive the lower.

A profile is a personality, a need and a motive. "History" and "Focus"
motives are rolled on their own tables in the same call.
"""

from __future__ import annotations

from juiceroll.data import npc_action as data
from juiceroll.data.quest import ITALIC_FOCUSES
from juiceroll.dice import RollEngine, Skew
from juiceroll.generators.quest import expand
from juiceroll.models import (
    DualPersonalityResult,
    NpcActionResult,
    NpcContext,
    NpcDisposition,
    NpcFocus,
    NpcMotiveResult,
    NpcObjective,
    NpcProfileResult,
)
from juiceroll.oracles.details import parse_skew, roll_color, roll_history, roll_two_properties
from juiceroll.oracles.next_scene import roll_focus
from juiceroll.options import parse_option
from juiceroll.tables import LookupTable

PERSONALITY_TABLE = LookupTable.from_sequence("personality", data.PERSONALITIES)
NEED_TABLE = LookupTable.from_sequence("need", data.NEEDS)
MOTIVE_TABLE = LookupTable.from_sequence("motive", data.MOTIVES)
ACTION_TABLE = LookupTable.from_sequence("npc action", data.ACTIONS)
COMBAT_TABLE = LookupTable.from_sequence("combat action", data.COMBAT_ACTIONS)

_NEED_SKEW_ALIASES: dict[str, Skew] = {
    "complex": Skew.advantage,
    "primitive": Skew.disadvantage,
}


def parse_need_skew(value: Skew | str | None) -> Skew:
    """Like ``parse_skew``, also accepting "complex" and "primitive"."""
    if isinstance(value, str) and value.strip().lower() in _NEED_SKEW_ALIASES:
        return _NEED_SKEW_ALIASES[value.strip().lower()]
    return parse_skew(value)


def _column(
    table: LookupTable[str],
    column: str,
    die_size: int,
    skew: Skew,
    engine: RollEngine,
    **options,
) -> NpcActionResult:
    roll, dice = engine.roll_with_skew(die_size, skew)
    result = table.lookup(roll, default=table.results()[-1])
    return NpcActionResult(
        description=f"{column.capitalize()} (1d{die_size}{skew.symbol})",
        dice_results=dice,
        total=roll,
        interpretation=result,
        column=column,
        roll=roll,
        result=result,
        die_size=die_size,
        skew=skew,
        **options,
    )


def roll_action(
    disposition: NpcDisposition | str | None = NpcDisposition.active,
    context: NpcContext | str | None = NpcContext.active,
    *,
    engine: RollEngine | None = None,
) -> NpcActionResult:
    """What an NPC does next, outside combat."""
    disposition = parse_option(NpcDisposition, disposition, NpcDisposition.active)
    context = parse_option(NpcContext, context, NpcContext.active)
    die_size = 6 if disposition is NpcDisposition.passive else 10
    skew = Skew.advantage if context is NpcContext.active else Skew.disadvantage
    return _column(
        ACTION_TABLE,
        "action",
        die_size,
        skew,
        engine or RollEngine(),
        disposition=disposition,
        context=context,
    )


def roll_combat_action(
    focus: NpcFocus | str | None = NpcFocus.active,
    objective: NpcObjective | str | None = NpcObjective.offensive,
    *,
    engine: RollEngine | None = None,
) -> NpcActionResult:
    focus = parse_option(NpcFocus, focus, NpcFocus.active)
    objective = parse_option(NpcObjective, objective, NpcObjective.offensive)
    die_size = 6 if focus is NpcFocus.passive else 10
    skew = Skew.advantage if objective is NpcObjective.offensive else Skew.disadvantage
    return _column(
        COMBAT_TABLE,
        "combat",
        die_size,
        skew,
        engine or RollEngine(),
        focus=focus,
        objective=objective,
    )


def roll_personality(engine: RollEngine | None = None) -> NpcActionResult:
    return _column(PERSONALITY_TABLE, "personality", 10, Skew.none, engine or RollEngine())


def roll_dual_personality(engine: RollEngine | None = None) -> DualPersonalityResult:
    """Two traits: the one they show and the one underneath."""
    engine = engine or RollEngine()
    primary = roll_personality(engine)
    secondary = roll_personality(engine)
    return DualPersonalityResult(
        description="Personality",
        dice_results=[primary.roll, secondary.roll],
        total=primary.roll + secondary.roll,
        interpretation=f"{primary.result}, yet {secondary.result}",
        primary_roll=primary.roll,
        primary=primary.result,
        secondary_roll=secondary.roll,
        secondary=secondary.result,
    )


def roll_need(
    skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> NpcActionResult:
    """Roll a need. Advantage leans complex, disadvantage primitive."""
    return _column(NEED_TABLE, "need", 10, parse_need_skew(skew), engine or RollEngine())


def roll_motive(engine: RollEngine | None = None) -> NpcMotiveResult:
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    motive = MOTIVE_TABLE.lookup(roll, default=data.MOTIVES[-1])
    dice = [roll]
    history = focus = focus_expanded = None
    interpretation = motive
    if motive == data.HISTORY_MOTIVE:
        history = roll_history(engine=engine)
        dice.extend(history.dice_results)
        interpretation = f"{history.result} ({motive})"
    elif motive == data.FOCUS_MOTIVE:
        focus = roll_focus(engine)
        dice.extend(focus.dice_results)
        interpretation = f"{focus.result} ({motive})"
        if focus.result in ITALIC_FOCUSES:
            focus_expanded, more = expand(focus.result, engine)
            dice.extend(more)
            if focus_expanded:
                interpretation = f"{focus_expanded} ({focus.result})"
    return NpcMotiveResult(
        description="Motive",
        dice_results=dice,
        total=roll,
        interpretation=interpretation,
        roll=roll,
        motive=motive,
        history=history,
        focus=focus,
        focus_expanded=focus_expanded,
    )


def generate_simple_profile(
    need_skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> NpcProfileResult:
    """Personality, need and motive."""
    engine = engine or RollEngine()
    personality = roll_personality(engine)
    need = roll_need(need_skew, engine=engine)
    motive = roll_motive(engine)
    return NpcProfileResult(
        description="NPC",
        dice_results=[*personality.dice_results, *need.dice_results, *motive.dice_results],
        total=personality.total + need.total + motive.total,
        interpretation=(
            f"{personality.result}; needs {need.result}; driven by {motive.interpretation}"
        ),
        personality_roll=personality.roll,
        personality=personality.result,
        need_roll=need.roll,
        need=need.result,
        need_skew=need.skew,
        motive=motive,
    )


def generate_profile(
    need_skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> NpcProfileResult:
    """Two personality traits, need, motive, a color and two properties."""
    engine = engine or RollEngine()
    personality = roll_dual_personality(engine)
    need = roll_need(need_skew, engine=engine)
    motive = roll_motive(engine)
    color = roll_color(engine)
    properties = roll_two_properties(engine)
    dice = [
        *personality.dice_results,
        *need.dice_results,
        *motive.dice_results,
        *color.dice_results,
        *properties.dice_results,
    ]
    return NpcProfileResult(
        description="NPC Profile",
        dice_results=dice,
        total=personality.total + need.total + motive.total + color.total + properties.total,
        interpretation=(
            f"{personality.interpretation}; needs {need.result}; "
            f"driven by {motive.interpretation}; "
            f"{color.result}, {properties.interpretation}"
        ),
        personality_roll=personality.primary_roll,
        personality=personality.primary,
        secondary_personality_roll=personality.secondary_roll,
        secondary_personality=personality.secondary,
        need_roll=need.roll,
        need=need.result,
        need_skew=need.skew,
        motive=motive,
        color=color,
        properties=properties,
    )
