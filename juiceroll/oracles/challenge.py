"""Challenge oracle: skills to test and the DCs to beat.

The DC table is read with a d10 where a 1 is the hardest DC (17) and a 10 the
easiest (8). An easy skew keeps the higher of two d10, a hard skew the lower.
"""

from __future__ import annotations

import logging

from juiceroll.data import challenge as data
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import (
    ChallengeResult,
    ChallengeSkillResult,
    ChallengeType,
    DcResult,
    PercentageChanceResult,
)
from juiceroll.oracles.details import parse_skew
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

DC_TABLE = LookupTable.from_sequence("dc", data.DC_VALUES)
PHYSICAL_TABLE = LookupTable.from_sequence("physical challenge", data.PHYSICAL_CHALLENGES)
MENTAL_TABLE = LookupTable.from_sequence("mental challenge", data.MENTAL_CHALLENGES)
BALANCED_TABLE = LookupTable.from_ranges(
    "balanced dc",
    [(lo, hi, dc) for (lo, hi), dc in zip(data.PERCENTAGE_RANGES, data.DC_VALUES)],
)

DC_METHODS: dict[Skew, str] = {
    Skew.none: "Random (1d10)",
    Skew.advantage: "Easy (1d10@+)",
    Skew.disadvantage: "Hard (1d10@-)",
}

QUICK_DC_BASE = 6

_DC_SKEW_ALIASES: dict[str, Skew] = {"easy": Skew.advantage, "hard": Skew.disadvantage}


def parse_dc_skew(value: Skew | str | None) -> Skew:
    """Like ``parse_skew``, also accepting "easy" and "hard"."""
    if isinstance(value, str) and value.strip().lower() in _DC_SKEW_ALIASES:
        return _DC_SKEW_ALIASES[value.strip().lower()]
    return parse_skew(value)


def dc_for_roll(roll: int) -> int:
    """Map a d10 onto the DC table (1 -> 17, 10 -> 8)."""
    return DC_TABLE.lookup(DC_TABLE.clamp(roll), default=data.DC_VALUES[-1])


def draw_dc_roll(skew: Skew, engine: RollEngine) -> tuple[int, list[int]]:
    """Roll the d10 that picks a DC.

    Easy keeps the higher of two dice (a lower DC), hard keeps the lower.
    """
    if skew is Skew.none:
        roll = engine.roll_die(10)
        return roll, [roll]
    first, second = engine.roll_dice(2, 10)
    kept = max(first, second) if skew is Skew.advantage else min(first, second)
    return kept, [first, second]


def roll_dc(
    skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> DcResult:
    engine = engine or RollEngine()
    skew = parse_dc_skew(skew)
    roll, dice = draw_dc_roll(skew, engine)
    dc = dc_for_roll(roll)
    return DcResult(
        description=f"DC {DC_METHODS[skew]}",
        dice_results=dice,
        total=dc,
        interpretation=f"DC {dc}",
        roll=roll,
        dc=dc,
        method=DC_METHODS[skew],
    )


def roll_quick_dc(engine: RollEngine | None = None) -> DcResult:
    """2d6+6, for when the exact DC matters less than speed."""
    engine = engine or RollEngine()
    dice = engine.roll_dice(2, 6)
    dc = sum(dice) + QUICK_DC_BASE
    return DcResult(
        description="Quick DC (2d6+6)",
        dice_results=dice,
        total=dc,
        interpretation=f"DC {dc}",
        roll=sum(dice),
        dc=dc,
        method="Quick (2d6+6)",
    )


def roll_balanced_dc(engine: RollEngine | None = None) -> DcResult:
    """Read the DC table through d100 bands weighted toward the middle."""
    engine = engine or RollEngine()
    roll = engine.roll_die(100)
    dc = BALANCED_TABLE.lookup(roll)
    if dc is None:
        logger.warning("Balanced DC roll %d fell outside every band", roll)
        dc = data.DC_VALUES[len(data.DC_VALUES) // 2]
    return DcResult(
        description="Balanced DC (1d100)",
        dice_results=[roll],
        total=dc,
        interpretation=f"DC {dc}",
        roll=roll,
        dc=dc,
        method="Balanced (1d100)",
    )


def roll_challenge(
    dc_skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> ChallengeResult:
    """Roll a physical and a mental skill, each with its own DC."""
    engine = engine or RollEngine()
    skew = parse_dc_skew(dc_skew)

    physical_roll = engine.roll_die(10)
    physical_skill = PHYSICAL_TABLE.lookup(physical_roll, default=data.PHYSICAL_CHALLENGES[-1])
    physical_dc_roll, physical_dice = draw_dc_roll(skew, engine)

    mental_roll = engine.roll_die(10)
    mental_skill = MENTAL_TABLE.lookup(mental_roll, default=data.MENTAL_CHALLENGES[-1])
    mental_dc_roll, mental_dice = draw_dc_roll(skew, engine)

    physical_dc = dc_for_roll(physical_dc_roll)
    mental_dc = dc_for_roll(mental_dc_roll)
    return ChallengeResult(
        description=f"Challenge ({DC_METHODS[skew]})",
        dice_results=[physical_roll, *physical_dice, mental_roll, *mental_dice],
        total=physical_roll + mental_roll,
        interpretation=(
            f"{physical_skill} DC {physical_dc} or {mental_skill} DC {mental_dc}"
        ),
        physical_roll=physical_roll,
        physical_skill=physical_skill,
        physical_dc=physical_dc,
        mental_roll=mental_roll,
        mental_skill=mental_skill,
        mental_dc=mental_dc,
        dc_method=DC_METHODS[skew],
    )


def roll_skill(
    challenge_type: ChallengeType | None = None, *, engine: RollEngine | None = None
) -> ChallengeSkillResult:
    """Roll one skill. A d2 picks physical or mental when no type is given.

    The suggested DC comes from the same d10 as the skill.
    """
    engine = engine or RollEngine()
    dice: list[int] = []
    if challenge_type is None:
        type_roll = engine.roll_die(2)
        dice.append(type_roll)
        challenge_type = ChallengeType.physical if type_roll == 1 else ChallengeType.mental

    table = PHYSICAL_TABLE if challenge_type is ChallengeType.physical else MENTAL_TABLE
    roll = engine.roll_die(10)
    dice.append(roll)
    skill = table.lookup(roll, default=table.results()[-1])
    dc = dc_for_roll(roll)
    return ChallengeSkillResult(
        description=f"{challenge_type.value.capitalize()} Challenge",
        dice_results=dice,
        total=roll,
        interpretation=f"{skill} DC {dc}",
        challenge_type=challenge_type,
        roll=roll,
        skill=skill,
        suggested_dc=dc,
    )


def roll_percentage_chance(engine: RollEngine | None = None) -> PercentageChanceResult:
    """Roll a d10 onto the percentage bands and report the band's midpoint."""
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    low, high = data.PERCENTAGE_RANGES[max(1, min(10, roll)) - 1]
    percent = round((low + high) / 2)
    return PercentageChanceResult(
        description="Percentage Chance",
        dice_results=[roll],
        total=percent,
        interpretation=f"{percent}% ({low}-{high})",
        roll=roll,
        min_percent=low,
        max_percent=high,
        percent=percent,
    )
