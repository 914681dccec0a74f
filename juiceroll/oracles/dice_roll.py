"""Free-form dice rolls wrapped as results."""

from __future__ import annotations

from juiceroll.dice import RollEngine, Skew, clamp_skew
from juiceroll.models import DiceRollResult


def _signed(modifier: int) -> str:
    return f"{modifier:+d}" if modifier else ""


def roll_notation(notation: str, *, engine: RollEngine | None = None) -> DiceRollResult:
    """Roll standard or Fate notation such as "3d6+2" or "4dF".

    Raises:
        DiceError: If the notation is invalid.
    """
    engine = engine or RollEngine()
    dice, modifier, total = engine.roll_notation(notation)
    return DiceRollResult(
        description=notation.strip(),
        dice_results=dice,
        total=total,
        interpretation=str(total),
        notation=notation.strip(),
        modifier=modifier,
    )


def roll_standard(
    count: int, sides: int, modifier: int = 0, *, engine: RollEngine | None = None
) -> DiceRollResult:
    engine = engine or RollEngine()
    dice = engine.roll_dice(count, sides)
    notation = f"{count}d{sides}{_signed(modifier)}"
    total = sum(dice) + modifier
    return DiceRollResult(
        description=notation,
        dice_results=dice,
        total=total,
        interpretation=str(total),
        notation=notation,
        modifier=modifier,
    )


def roll_fate(count: int = 4, *, engine: RollEngine | None = None) -> DiceRollResult:
    engine = engine or RollEngine()
    dice = engine.roll_fate_dice(count)
    total = sum(dice)
    return DiceRollResult(
        description=f"{count}dF",
        dice_results=dice,
        total=total,
        interpretation=f"{total:+d}",
        notation=f"{count}dF",
    )


def roll_two_pools(
    count: int,
    sides: int,
    skew: Skew,
    modifier: int = 0,
    *,
    engine: RollEngine | None = None,
) -> DiceRollResult:
    """Roll with advantage or disadvantage. ``dice_results`` lists both pools."""
    engine = engine or RollEngine()
    if skew is Skew.disadvantage:
        pools = engine.roll_with_disadvantage(count, sides)
    else:
        skew = Skew.advantage
        pools = engine.roll_with_advantage(count, sides)
    notation = f"{count}d{sides}{skew.symbol}{_signed(modifier)}"
    total = pools.chosen_sum + modifier
    return DiceRollResult(
        description=notation,
        dice_results=pools.dice,
        total=total,
        interpretation=f"{total} (kept {pools.chosen_sum}, dropped {pools.discarded_sum})",
        metadata={"sum1": pools.sum1, "sum2": pools.sum2, "chosen_pool": pools.chosen_pool},
        notation=notation,
        modifier=modifier,
        skew=skew,
        discarded_sum=pools.discarded_sum,
    )


def roll_skewed_d6(
    count: int = 1, skew: int = 0, *, engine: RollEngine | None = None
) -> DiceRollResult:
    """Roll ``count`` d6 bent toward high (positive skew) or low (negative) faces."""
    engine = engine or RollEngine()
    skew = clamp_skew(skew)
    dice = [engine.roll_skewed_d6(skew) for _ in range(count)]
    notation = f"{count}d6~{skew:+d}"
    total = sum(dice)
    return DiceRollResult(
        description=notation,
        dice_results=dice,
        total=total,
        interpretation=str(total),
        metadata={"skew": skew},
        notation=notation,
    )
