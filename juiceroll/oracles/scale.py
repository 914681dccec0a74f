"""Scale oracle: how much bigger or smaller than expected.

2dF + 1d6, clamped to -1..8, picks a percentage adjustment.
"""

from __future__ import annotations

from juiceroll.dice import RollEngine
from juiceroll.models import ScaleResult
from juiceroll.tables import LookupTable

SCALE_TABLE: LookupTable[tuple[str, float]] = LookupTable.from_ranges(
    "scale",
    [
        (-1, -1, ("-100%", 0.0)),
        (0, 0, ("-50%", 0.5)),
        (1, 1, ("-25%", 0.75)),
        (2, 2, ("-10%", 0.9)),
        (3, 4, ("No Change", 1.0)),
        (5, 5, ("+10%", 1.1)),
        (6, 6, ("+25%", 1.25)),
        (7, 7, ("+50%", 1.5)),
        (8, 8, ("+100%", 2.0)),
    ],
)


def apply_scale(base_value: int, multiplier: float) -> int:
    return round(base_value * multiplier)


def roll_scale(
    base_value: int | None = None, *, engine: RollEngine | None = None
) -> ScaleResult:
    """Roll a scale adjustment, optionally applying it to ``base_value``."""
    engine = engine or RollEngine()
    fate_dice = engine.roll_fate_dice(2)
    intensity = engine.roll_die(6)
    scale_roll = SCALE_TABLE.clamp(sum(fate_dice) + intensity)
    label, multiplier = SCALE_TABLE.lookup(scale_roll, default=("No Change", 1.0))

    scaled = apply_scale(base_value, multiplier) if base_value is not None else None
    interpretation = label
    if scaled is not None:
        interpretation = f"{label}: {base_value} -> {scaled}"

    return ScaleResult(
        description="Scale",
        dice_results=[*fate_dice, intensity],
        total=scale_roll,
        interpretation=interpretation,
        fate_dice=fate_dice,
        intensity=intensity,
        scale_roll=scale_roll,
        modifier_label=label,
        multiplier=multiplier,
        base_value=base_value,
        scaled_value=scaled,
    )
