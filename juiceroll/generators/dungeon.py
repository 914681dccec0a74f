"""Dungeon generator.

One-pass generation reveals the dungeon as the party walks it:

  Entering    each new area is 1d10 with disadvantage (sprawling, branching).
  Exploring   each new area is 1d10 with advantage (interconnected, many exits).

The dungeon starts in Entering. The first time the two d10 tie, it flips to
Exploring and stays there.

Two-pass generation draws the whole map up front. It starts with advantage,
switches to disadvantage on the first tie, and on the second tie stops: every
unrevealed path becomes a small one-door chamber. The state's
``doubles_count`` tracks which of those three stages the map is in.

Passages can cascade into a passage-shape roll, and rooms into a condition
roll (d10 when occupied, d6 when not).
"""

from __future__ import annotations

import logging

from juiceroll.data import dungeon as data
from juiceroll.data.wilderness import NATURAL_HAZARDS
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import (
    DungeonAreaResult,
    DungeonDetailResult,
    DungeonEncounterResult,
    DungeonMode,
    DungeonMonsterResult,
    DungeonNameResult,
    DungeonPhase,
    DungeonState,
    DungeonTrapResult,
    TrapProcedureResult,
    TwoPassAreaResult,
)
from juiceroll.oracles.challenge import dc_for_roll, draw_dc_roll, parse_dc_skew
from juiceroll.oracles.details import parse_skew
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

AREA_TABLE = LookupTable.from_sequence("dungeon area", data.AREA_TYPES)
PASSAGE_TABLE = LookupTable.from_sequence("passage", data.PASSAGE_TYPES)
CONDITION_TABLE = LookupTable.from_sequence("room condition", data.ROOM_CONDITIONS)
TYPE_TABLE = LookupTable.from_sequence("dungeon type", data.DUNGEON_TYPES)
DESCRIPTION_TABLE = LookupTable.from_sequence("dungeon description", data.DUNGEON_DESCRIPTIONS)
SUBJECT_TABLE = LookupTable.from_sequence("dungeon subject", data.DUNGEON_SUBJECTS)
ENCOUNTER_TABLE = LookupTable.from_sequence("dungeon encounter", data.ENCOUNTER_TYPES)
DESCRIPTOR_TABLE = LookupTable.from_sequence("monster descriptor", data.MONSTER_DESCRIPTORS)
ABILITY_TABLE = LookupTable.from_sequence("monster ability", data.MONSTER_ABILITIES)
TRAP_ACTION_TABLE = LookupTable.from_sequence("trap action", data.TRAP_ACTIONS)
TRAP_SUBJECT_TABLE = LookupTable.from_sequence("trap subject", data.TRAP_SUBJECTS)
FEATURE_TABLE = LookupTable.from_sequence("dungeon feature", data.FEATURE_TYPES)
HAZARD_TABLE = LookupTable.from_sequence("natural hazard", NATURAL_HAZARDS)

# (is_searching, passed) -> outcome
TRAP_OUTCOMES: dict[tuple[bool, bool], str] = {
    (True, True): "AVOID",
    (True, False): "LOCATE",
    (False, True): "LOCATE",
    (False, False): "TRIGGER",
}

DC_SKEW_LABELS: dict[Skew, str] = {
    Skew.none: "",
    Skew.advantage: " (Easy)",
    Skew.disadvantage: " (Hard)",
}


def is_room(area_type: str) -> bool:
    return "Chamber" in area_type


def _lookup(table: LookupTable[str], roll: int) -> str:
    result = table.lookup(roll)
    if result is None:
        logger.warning("Roll %d missed table %r", roll, table.name)
        return table.results()[-1]
    return result


def _detail(
    table: LookupTable[str],
    detail_type: str,
    die_size: int,
    skew: Skew,
    engine: RollEngine,
) -> DungeonDetailResult:
    roll, dice = engine.roll_with_skew(die_size, skew)
    result = _lookup(table, roll)
    return DungeonDetailResult(
        description=f"{detail_type} (d{die_size}{skew.symbol})",
        dice_results=dice,
        total=roll,
        interpretation=result,
        detail_type=detail_type,
        roll=roll,
        result=result,
        die_size=die_size,
        skew=skew,
    )


# ---------------------------------------------------------------------------
# Names and area details
# ---------------------------------------------------------------------------


def generate_name(engine: RollEngine | None = None) -> DungeonNameResult:
    """3d10: "[Type] of the [Description] [Subject]"."""
    engine = engine or RollEngine()
    type_roll, description_roll, subject_roll = engine.roll_dice(3, 10)
    dungeon_type = _lookup(TYPE_TABLE, type_roll)
    description = _lookup(DESCRIPTION_TABLE, description_roll)
    subject = _lookup(SUBJECT_TABLE, subject_roll)
    name = f"{dungeon_type} of the {description} {subject}"
    return DungeonNameResult(
        description="Dungeon Name",
        dice_results=[type_roll, description_roll, subject_roll],
        total=type_roll + description_roll + subject_roll,
        interpretation=name,
        type_roll=type_roll,
        dungeon_type=dungeon_type,
        description_roll=description_roll,
        description_word=description,
        subject_roll=subject_roll,
        subject=subject,
        name=name,
    )


def generate_passage(
    use_d6: bool = False,
    skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> DungeonDetailResult:
    """Passage shape: d6 for linear dungeons, d10 for branching ones."""
    return _detail(
        PASSAGE_TABLE, "Passage", 6 if use_d6 else 10, parse_skew(skew), engine or RollEngine()
    )


def generate_condition(
    is_occupied: bool = True,
    skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> DungeonDetailResult:
    """Room condition: d10 when occupied, d6 when not. Advantage is better."""
    return _detail(
        CONDITION_TABLE,
        "Condition",
        10 if is_occupied else 6,
        parse_skew(skew),
        engine or RollEngine(),
    )


# ---------------------------------------------------------------------------
# One-pass generation
# ---------------------------------------------------------------------------


def _resolve_phase(state: DungeonState | None, is_entering: bool | None) -> DungeonState:
    if state is None:
        state = DungeonState()
    if is_entering is not None:
        phase = DungeonPhase.entering if is_entering else DungeonPhase.exploring
        state = state.model_copy(update={"phase": phase})
    return state


def _one_pass(
    state: DungeonState | None,
    is_entering: bool | None,
    include_passage: bool,
    use_d6_for_passage: bool,
    passage_skew: Skew | str | None,
    condition: tuple[bool, Skew | str | None] | None,
    engine: RollEngine,
) -> DungeonAreaResult:
    state = _resolve_phase(state, is_entering)
    entering = state.phase is DungeonPhase.entering

    if entering:
        pools = engine.roll_with_disadvantage(1, 10)
    else:
        pools = engine.roll_with_advantage(1, 10)

    area_type = _lookup(AREA_TABLE, pools.chosen_sum)
    phase_change = entering and pools.is_doubles

    passage = None
    if include_passage and area_type == data.PASSAGE_AREA:
        passage = generate_passage(use_d6_for_passage, passage_skew, engine=engine)
    room_condition = None
    if condition is not None and is_room(area_type):
        is_occupied, condition_skew = condition
        room_condition = generate_condition(is_occupied, condition_skew, engine=engine)

    new_state = state.model_copy(update={"mode": DungeonMode.one_pass})
    if phase_change:
        new_state = new_state.model_copy(
            update={
                "phase": DungeonPhase.exploring,
                "doubles_count": min(2, state.doubles_count + 1),
            }
        )
        logger.debug("Dungeon doubles while entering, switching to exploring")

    interpretation = area_type
    dice = [pools.sum1, pools.sum2]
    if passage is not None:
        interpretation += f": {passage.result}"
        dice.extend(passage.dice_results)
    if room_condition is not None:
        interpretation += f" ({room_condition.result})"
        dice.extend(room_condition.dice_results)
    if phase_change:
        interpretation += " (DOUBLES! Switch to Exploring)"

    label = "Entering 1d10@-" if entering else "Exploring 1d10@+"
    return DungeonAreaResult(
        description=f"Next Area ({label})",
        dice_results=dice,
        total=pools.chosen_sum,
        interpretation=interpretation,
        phase=state.phase,
        roll1=pools.sum1,
        roll2=pools.sum2,
        chosen_roll=pools.chosen_sum,
        area_type=area_type,
        is_doubles=pools.is_doubles,
        phase_change=phase_change,
        passage=passage,
        condition=room_condition,
        new_state=new_state,
    )


def next_area(
    state: DungeonState | None = None,
    *,
    is_entering: bool | None = None,
    include_passage: bool = False,
    use_d6_for_passage: bool = False,
    passage_skew: Skew | str | None = Skew.none,
    engine: RollEngine | None = None,
) -> DungeonAreaResult:
    """Roll the next area of a one-pass dungeon.

    Args:
        state: Previous state; None starts a new dungeon in Entering.
        is_entering: Forces the phase for this roll when given.
        include_passage: Roll the passage table when the area is a passage.
        use_d6_for_passage: Linear (d6) rather than branching (d10) passages.
        passage_skew: Advantage for larger passages, disadvantage for smaller.
        engine: Dice source.

    Returns:
        The area, with ``phase_change`` set when this roll flipped the dungeon
        from Entering to Exploring, and the next state.
    """
    return _one_pass(
        state,
        is_entering,
        include_passage,
        use_d6_for_passage,
        passage_skew,
        None,
        engine or RollEngine(),
    )


def full_area(
    state: DungeonState | None = None,
    *,
    is_entering: bool | None = None,
    is_occupied: bool = True,
    condition_skew: Skew | str | None = Skew.none,
    include_passage: bool = False,
    use_d6_for_passage: bool = False,
    passage_skew: Skew | str | None = Skew.none,
    engine: RollEngine | None = None,
) -> DungeonAreaResult:
    """Roll the next area and, for rooms, its condition."""
    return _one_pass(
        state,
        is_entering,
        include_passage,
        use_d6_for_passage,
        passage_skew,
        (is_occupied, condition_skew),
        engine or RollEngine(),
    )


# ---------------------------------------------------------------------------
# Two-pass generation
# ---------------------------------------------------------------------------


def two_pass_area(
    state: DungeonState | None = None,
    *,
    is_occupied: bool = True,
    use_d6_for_passage: bool = False,
    passage_skew: Skew | str | None = Skew.none,
    engine: RollEngine | None = None,
) -> TwoPassAreaResult:
    """Roll one map cell for two-pass generation.

    Once the map has stopped, every call returns the terminal small chamber
    without rolling. A one-pass state starts a fresh two-pass map.
    """
    engine = engine or RollEngine()
    if state is not None and state.mode is not DungeonMode.two_pass:
        logger.warning("Two-pass generation given a %s state; starting a new map", state.mode.value)
        state = None
    if state is None:
        state = DungeonState(mode=DungeonMode.two_pass)
    had_first_doubles = state.doubles_count >= 1

    if state.map_stopped or state.doubles_count >= 2:
        stopped = state.model_copy(
            update={"mode": DungeonMode.two_pass, "map_stopped": True, "doubles_count": 2}
        )
        return TwoPassAreaResult(
            description="Two-Pass Area (map complete)",
            interpretation=data.TERMINAL_AREA,
            area_type=data.TERMINAL_AREA,
            had_first_doubles=True,
            stop_map_generation=True,
            is_terminal=True,
            new_state=stopped,
        )

    if had_first_doubles:
        pools = engine.roll_with_disadvantage(1, 10)
    else:
        pools = engine.roll_with_advantage(1, 10)

    area_type = _lookup(AREA_TABLE, pools.chosen_sum)
    is_doubles = pools.is_doubles
    is_second = had_first_doubles and is_doubles

    passage = None
    if area_type == data.PASSAGE_AREA:
        passage = generate_passage(use_d6_for_passage, passage_skew, engine=engine)
    condition = None
    if is_room(area_type):
        condition = generate_condition(is_occupied, engine=engine)

    doubles_count = state.doubles_count + (1 if is_doubles else 0)
    new_state = state.model_copy(
        update={
            "mode": DungeonMode.two_pass,
            "doubles_count": min(2, doubles_count),
            "map_stopped": is_second,
        }
    )

    interpretation = area_type
    if passage is not None:
        interpretation += f": {passage.result}"
    if condition is not None:
        interpretation += f" ({condition.result})"
    if is_second:
        interpretation += f" [2nd DOUBLES - All unrevealed paths become {data.TERMINAL_AREA}]"
        logger.debug("Second doubles in two-pass generation, map stopped")
    elif is_doubles:
        interpretation += " [DOUBLES - Switch to @- for remaining areas]"

    dice = [pools.sum1, pools.sum2]
    for child in (passage, condition):
        if child is not None:
            dice.extend(child.dice_results)

    label = "1d10@-" if had_first_doubles else "1d10@+"
    return TwoPassAreaResult(
        description=f"Two-Pass Area ({label})",
        dice_results=dice,
        total=pools.chosen_sum,
        interpretation=interpretation,
        roll1=pools.sum1,
        roll2=pools.sum2,
        chosen_roll=pools.chosen_sum,
        area_type=area_type,
        is_doubles=is_doubles,
        had_first_doubles=had_first_doubles,
        is_second_doubles=is_second,
        stop_map_generation=is_second,
        passage=passage,
        condition=condition,
        new_state=new_state,
    )


# ---------------------------------------------------------------------------
# Encounters
# ---------------------------------------------------------------------------


def roll_encounter_type(
    is_lingering: bool = False,
    skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> DungeonDetailResult:
    """d10 on first entry, d6 when lingering in an unsafe area."""
    return _detail(
        ENCOUNTER_TABLE,
        "Encounter",
        6 if is_lingering else 10,
        parse_skew(skew),
        engine or RollEngine(),
    )


def roll_monster_description(engine: RollEngine | None = None) -> DungeonMonsterResult:
    engine = engine or RollEngine()
    descriptor_roll, ability_roll = engine.roll_dice(2, 10)
    descriptor = _lookup(DESCRIPTOR_TABLE, descriptor_roll)
    ability = _lookup(ABILITY_TABLE, ability_roll)
    return DungeonMonsterResult(
        description="Dungeon Monster",
        dice_results=[descriptor_roll, ability_roll],
        total=descriptor_roll + ability_roll,
        interpretation=f"{descriptor} monster with {ability}",
        descriptor_roll=descriptor_roll,
        descriptor=descriptor,
        ability_roll=ability_roll,
        ability=ability,
    )


def roll_trap(engine: RollEngine | None = None) -> DungeonTrapResult:
    engine = engine or RollEngine()
    action_roll, subject_roll = engine.roll_dice(2, 10)
    action = _lookup(TRAP_ACTION_TABLE, action_roll)
    subject = _lookup(TRAP_SUBJECT_TABLE, subject_roll)
    return DungeonTrapResult(
        description="Trap",
        dice_results=[action_roll, subject_roll],
        total=action_roll + subject_roll,
        interpretation=f"{action} {subject}",
        action_roll=action_roll,
        action=action,
        subject_roll=subject_roll,
        subject=subject,
    )


def roll_feature(engine: RollEngine | None = None) -> DungeonDetailResult:
    return _detail(FEATURE_TABLE, "Feature", 10, Skew.none, engine or RollEngine())


def roll_natural_hazard(
    is_lingering: bool = False, *, engine: RollEngine | None = None
) -> DungeonDetailResult:
    """Natural hazard from the wilderness table: d10, or d6 when lingering."""
    return _detail(
        HAZARD_TABLE, "Natural Hazard", 6 if is_lingering else 10, Skew.none, engine or RollEngine()
    )


def full_encounter(
    is_lingering: bool = False,
    skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> DungeonEncounterResult:
    """Roll an encounter type and expand it into its own table."""
    engine = engine or RollEngine()
    encounter = roll_encounter_type(is_lingering, skew, engine=engine)

    monster = trap = feature = hazard = None
    match encounter.result:
        case "Monster":
            monster = roll_monster_description(engine)
            child = monster
        case "Trap":
            trap = roll_trap(engine)
            child = trap
        case "Feature":
            feature = roll_feature(engine)
            child = feature
        case "Natural Hazard":
            hazard = roll_natural_hazard(is_lingering, engine=engine)
            child = hazard
        case _:
            child = None

    dice = list(encounter.dice_results)
    interpretation = encounter.result
    if child is not None:
        dice.extend(child.dice_results)
        interpretation = f"{encounter.result}: {child.interpretation}"

    return DungeonEncounterResult(
        description=encounter.description,
        dice_results=dice,
        total=encounter.total,
        interpretation=interpretation,
        encounter=encounter,
        monster=monster,
        trap=trap,
        feature=feature,
        natural_hazard=hazard,
    )


# ---------------------------------------------------------------------------
# Trap procedure
# ---------------------------------------------------------------------------


def trap_outcome(is_searching: bool, passed: bool) -> str:
    """AVOID / LOCATE / LOCATE / TRIGGER, by searching and perception result."""
    return TRAP_OUTCOMES[(is_searching, passed)]


def trap_procedure(
    is_searching: bool = True,
    dc_skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> TrapProcedureResult:
    """Roll a trap and the DC of the perception check that meets it.

    Searching (ten minutes, perception with advantage): pass to AVOID, fail to
    LOCATE. Not searching (passive perception): pass to LOCATE, fail to TRIGGER.
    """
    engine = engine or RollEngine()
    skew = parse_dc_skew(dc_skew)
    trap = roll_trap(engine)
    dc_roll, dc_rolls = draw_dc_roll(skew, engine)
    dc = dc_for_roll(dc_roll)

    pass_outcome = trap_outcome(is_searching, True)
    fail_outcome = trap_outcome(is_searching, False)
    if is_searching:
        procedure = f"Searching (10 min, @+): Pass={pass_outcome}, Fail={fail_outcome}"
    else:
        procedure = f"Passive Perception: Pass={pass_outcome}, Fail={fail_outcome}"

    return TrapProcedureResult(
        description="Trap Procedure",
        dice_results=[*trap.dice_results, *dc_rolls],
        total=dc,
        interpretation=(
            f"{trap.interpretation} | Perception DC {dc}{DC_SKEW_LABELS[skew]} | {procedure}"
        ),
        trap=trap,
        is_searching=is_searching,
        dc_roll=dc_roll,
        dc_rolls=dc_rolls,
        dc=dc,
        dc_skew=skew,
        pass_outcome=pass_outcome,
        fail_outcome=fail_outcome,
    )
