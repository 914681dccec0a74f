"""Next Scene oracle.

Roll 2d6, shift by the chaos level, clamp to 2-12 and read the scene table.
Doubles on the raw dice mean the scene is interrupted.
"""

from __future__ import annotations

from juiceroll.data import next_scene as data
from juiceroll.dice import RollEngine
from juiceroll.models import ChaosLevel, NextSceneResult, TableResult
from juiceroll.options import parse_option
from juiceroll.tables import LookupTable

SCENE_TABLE = LookupTable.from_ranges("next scene", data.SCENE_RANGES)
FOCUS_TABLE = LookupTable.from_sequence("scene focus", data.FOCUSES)

CHAOS_MODIFIERS: dict[ChaosLevel, int] = {
    ChaosLevel.controlled: -2,
    ChaosLevel.stable: -1,
    ChaosLevel.normal: 0,
    ChaosLevel.unstable: 1,
    ChaosLevel.chaotic: 2,
}


def parse_chaos_level(value: ChaosLevel | str | None) -> ChaosLevel:
    return parse_option(ChaosLevel, value, ChaosLevel.normal)


def next_scene(
    chaos_level: ChaosLevel | str | None = ChaosLevel.normal,
    *,
    engine: RollEngine | None = None,
) -> NextSceneResult:
    engine = engine or RollEngine()
    chaos = parse_chaos_level(chaos_level)
    modifier = CHAOS_MODIFIERS[chaos]

    dice = engine.roll_dice(2, 6)
    raw = sum(dice)
    total = SCENE_TABLE.clamp(raw + modifier)
    outcome = SCENE_TABLE.lookup(total, default="expected")
    is_interrupt = dice[0] == dice[1]

    interpretation = f"{data.SCENE_LABELS[outcome]}: {data.SCENE_GUIDANCE[outcome]}"
    if is_interrupt:
        interpretation += " [DOUBLES - Interrupt]"

    return NextSceneResult(
        description=f"Next Scene ({chaos.value.capitalize()})",
        dice_results=dice,
        total=total,
        interpretation=interpretation,
        chaos_level=chaos,
        chaos_modifier=modifier,
        raw_sum=raw,
        outcome=outcome,
        is_interrupt=is_interrupt,
    )


def roll_focus(engine: RollEngine | None = None) -> TableResult:
    """Roll what an altered scene centres on."""
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    focus = FOCUS_TABLE.lookup(roll, default=data.FOCUSES[-1])
    return TableResult(
        description="Scene Focus",
        dice_results=[roll],
        total=roll,
        interpretation=focus,
        table="scene_focus",
        roll=roll,
        result=focus,
    )
