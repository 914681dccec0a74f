"""Wilderness generator.

The party's position is two coordinates on a 1-10 scale: environment (Arctic
through Desert) and terrain type, which stays within one row of the
environment. Travelling to a new area drifts the environment by 2dF and then
the type by 1dF from the new environment. Both are clamped at the edges; they
never wrap.

Encounters use a d10 while oriented and a d6 while lost. A map or guide gives
advantage and dangerous terrain disadvantage; the two cancel out. Two
encounters can change the lost flag ("Destination/Lost" while oriented,
"River/Road" while lost). The generator only reports that as a trigger; the
caller decides whether to apply it.
"""

from __future__ import annotations

import logging

from juiceroll.data import wilderness as data
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import (
    FollowUp,
    MonsterLevelResult,
    StateTrigger,
    WildernessAreaResult,
    WildernessDetailResult,
    WildernessEncounterResult,
    WildernessState,
    WildernessWeatherResult,
)
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

ROW_MIN = 1
ROW_MAX = 10

ENCOUNTER_TABLE = LookupTable.from_sequence("wilderness encounter", data.ENCOUNTERS)
WEATHER_TABLE = LookupTable.from_sequence("weather", data.WEATHER_TYPES)
HAZARD_TABLE = LookupTable.from_sequence("natural hazard", data.NATURAL_HAZARDS)
FEATURE_TABLE = LookupTable.from_sequence("wilderness feature", data.FEATURES)

ENCOUNTER_FOLLOW_UPS: dict[str, FollowUp] = {
    "Natural Hazard": FollowUp.natural_hazard,
    "Monster": FollowUp.monster,
    "Weather": FollowUp.weather,
    "Challenge": FollowUp.challenge,
    "Dungeon": FollowUp.dungeon,
    "Feature": FollowUp.feature,
}

_SKEWS: dict[str, Skew] = {"+": Skew.advantage, "-": Skew.disadvantage, "0": Skew.none}


def clamp_row(value: int) -> int:
    return max(ROW_MIN, min(ROW_MAX, value))


def environment_name(row: int) -> str:
    return data.ENVIRONMENTS[clamp_row(row) - 1]


def type_info(row: int) -> dict:
    return data.TYPES[clamp_row(row) - 1]


def _area_result(
    state: WildernessState,
    env_fate_dice: list[int],
    type_fate_die: int,
    dice: list[int],
    *,
    is_transition: bool,
    previous_environment: str | None = None,
    is_manual_set: bool = False,
) -> WildernessAreaResult:
    environment = environment_name(state.environment_row)
    kind = type_info(state.type_row)
    interpretation = f"{kind['name']} {environment}"
    if previous_environment is not None and previous_environment != environment:
        interpretation = f"{previous_environment} → {interpretation}"
    if is_manual_set:
        description = "Wilderness (Set)"
    elif is_transition:
        description = "Wilderness Transition"
    else:
        description = "Wilderness Start"
    return WildernessAreaResult(
        description=description,
        dice_results=dice,
        total=state.environment_row,
        interpretation=interpretation,
        env_fate_dice=env_fate_dice,
        environment_row=state.environment_row,
        environment=environment,
        type_fate_die=type_fate_die,
        type_row=state.type_row,
        type_name=kind["name"],
        type_modifier=kind["modifier"],
        is_transition=is_transition,
        previous_environment=previous_environment,
        is_manual_set=is_manual_set,
        new_state=state,
    )


# ---------------------------------------------------------------------------
# Position
# ---------------------------------------------------------------------------


def initialize_random(engine: RollEngine | None = None) -> WildernessAreaResult:
    """Start somewhere random: d10 environment, then 1dF type offset."""
    engine = engine or RollEngine()
    env_roll = engine.roll_die(10)
    type_fate = engine.roll_fate_die()
    state = WildernessState(
        environment_row=env_roll,
        type_row=clamp_row(env_roll + type_fate),
        is_lost=False,
    )
    return _area_result(state, [0, 0], type_fate, [env_roll, type_fate], is_transition=False)


def initialize_at(
    environment_row: int, type_row: int | None = None, is_lost: bool = False
) -> WildernessAreaResult:
    """Start at a chosen position. Rows are clamped; no dice are rolled."""
    state = WildernessState(
        environment_row=environment_row,
        type_row=environment_row if type_row is None else type_row,
        is_lost=is_lost,
    )
    return _area_result(state, [0, 0], 0, [], is_transition=False, is_manual_set=True)


def transition(
    state: WildernessState | None = None, *, engine: RollEngine | None = None
) -> WildernessAreaResult:
    """Move to the next area. With no state, start somewhere random."""
    engine = engine or RollEngine()
    if state is None:
        return initialize_random(engine)

    env_fate = engine.roll_fate_dice(2)
    new_env = clamp_row(state.environment_row + sum(env_fate))
    type_fate = engine.roll_fate_die()
    new_type = clamp_row(new_env + type_fate)

    new_state = state.model_copy(update={"environment_row": new_env, "type_row": new_type})
    return _area_result(
        new_state,
        env_fate,
        type_fate,
        [*env_fate, type_fate],
        is_transition=True,
        previous_environment=environment_name(state.environment_row),
    )


def apply_trigger(state: WildernessState, trigger: StateTrigger | None) -> WildernessState:
    """Apply a reported lost/found trigger to ``state``."""
    if trigger is StateTrigger.became_lost:
        return state.model_copy(update={"is_lost": True})
    if trigger is StateTrigger.became_found:
        return state.model_copy(update={"is_lost": False})
    return state


# ---------------------------------------------------------------------------
# Encounters
# ---------------------------------------------------------------------------


def net_skew(*, dangerous_terrain: bool = False, has_map: bool = False) -> Skew:
    net = (1 if has_map else 0) - (1 if dangerous_terrain else 0)
    if net > 0:
        return Skew.advantage
    if net < 0:
        return Skew.disadvantage
    return Skew.none


def roll_encounter(
    state: WildernessState | None = None,
    *,
    dangerous_terrain: bool = False,
    has_map: bool = False,
    engine: RollEngine | None = None,
) -> WildernessEncounterResult:
    """Roll a travel encounter.

    Italic encounters carry a follow-up for the orchestration layer. A change
    to the lost flag is reported in ``state_trigger`` and not applied.
    """
    engine = engine or RollEngine()
    is_lost = state.is_lost if state is not None else False
    die_size = 6 if is_lost else 10
    skew = net_skew(dangerous_terrain=dangerous_terrain, has_map=has_map)

    roll, dice = engine.roll_with_skew(die_size, skew)
    entry = ENCOUNTER_TABLE.lookup(roll)
    if entry is None:
        logger.warning("Wilderness encounter roll %d missed the table", roll)
        entry = data.ENCOUNTERS[-1]
    encounter = entry["name"]

    trigger = None
    if state is not None:
        if encounter == data.LOST_ENCOUNTER and not state.is_lost:
            trigger = StateTrigger.became_lost
        elif encounter == data.FOUND_ENCOUNTER and state.is_lost:
            trigger = StateTrigger.became_found

    interpretation = encounter
    if trigger is StateTrigger.became_lost:
        interpretation += " [Lost]"
    elif trigger is StateTrigger.became_found:
        interpretation += " [Found your way]"

    return WildernessEncounterResult(
        description=f"Wilderness Encounter (d{die_size}{skew.symbol})",
        dice_results=dice,
        total=roll,
        interpretation=interpretation,
        roll=roll,
        second_roll=dice[1] if len(dice) > 1 else None,
        encounter=encounter,
        die_size=die_size,
        skew=skew,
        was_lost=is_lost,
        state_trigger=trigger,
        is_italic=entry["italic"],
        partial_italic=entry["partial_italic"],
        follow_up=ENCOUNTER_FOLLOW_UPS.get(encounter),
    )


def roll_weather(
    state: WildernessState, *, engine: RollEngine | None = None
) -> WildernessWeatherResult:
    """1d6, skewed by the environment row, plus the type's modifier (1-10)."""
    engine = engine or RollEngine()
    env_skew = type_info(state.environment_row)["skew"]
    kind = type_info(state.type_row)

    base, dice = engine.roll_with_skew(6, _SKEWS.get(env_skew, Skew.none))
    weather_row = clamp_row(base + kind["modifier"])
    weather = WEATHER_TABLE.lookup(weather_row, default=data.WEATHER_TYPES[-1])
    return WildernessWeatherResult(
        description=f"Weather (1d6@{env_skew}{kind['modifier']:+d})",
        dice_results=dice,
        total=weather_row,
        interpretation=weather,
        base_roll=base,
        second_roll=dice[1] if len(dice) > 1 else None,
        environment_skew=env_skew,
        type_modifier=kind["modifier"],
        weather_row=weather_row,
        weather=weather,
        environment=environment_name(state.environment_row),
        type_name=kind["name"],
    )


def _detail(
    table: LookupTable[str], detail_type: str, engine: RollEngine
) -> WildernessDetailResult:
    roll = engine.roll_die(10)
    result = table.lookup(roll, default=table.results()[-1])
    return WildernessDetailResult(
        description=detail_type,
        dice_results=[roll],
        total=roll,
        interpretation=result,
        detail_type=detail_type,
        roll=roll,
        result=result,
    )


def roll_natural_hazard(engine: RollEngine | None = None) -> WildernessDetailResult:
    return _detail(HAZARD_TABLE, "Natural Hazard", engine or RollEngine())


def roll_feature(engine: RollEngine | None = None) -> WildernessDetailResult:
    return _detail(FEATURE_TABLE, "Feature", engine or RollEngine())


def roll_monster_level(
    state: WildernessState, *, engine: RollEngine | None = None
) -> MonsterLevelResult:
    """1d6 with the environment's skew, plus its modifier."""
    engine = engine or RollEngine()
    formula = data.MONSTER_FORMULAS[state.environment_row - 1]
    base, dice = engine.roll_with_skew(6, _SKEWS.get(formula["advantage"], Skew.none))
    level = base + formula["modifier"]
    return MonsterLevelResult(
        description=f"Monster Level (1d6@{formula['advantage']}+{formula['modifier']})",
        dice_results=dice,
        total=level,
        interpretation=f"Level {level}",
        base_roll=base,
        second_roll=dice[1] if len(dice) > 1 else None,
        modifier=formula["modifier"],
        advantage=formula["advantage"],
        monster_level=level,
    )
