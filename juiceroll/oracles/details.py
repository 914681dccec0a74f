"""Details oracle: color, property, detail modifier and history.

Detail and history rolls may be skewed: advantage keeps the higher of two
d10, disadvantage the lower. A detail of "History" or "Property" is not an
answer on its own; the result carries a follow-up signal so the
orchestration layer can roll the matching table.
"""

from __future__ import annotations

from juiceroll.data import details as data
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import DetailResult, DualPropertyResult, FollowUp, PropertyResult
from juiceroll.options import parse_option
from juiceroll.tables import LookupTable

COLOR_TABLE = LookupTable.from_sequence("color", data.COLORS)
PROPERTY_TABLE = LookupTable.from_sequence("property", data.PROPERTIES)
INTENSITY_TABLE = LookupTable.from_sequence("intensity", data.INTENSITIES)
DETAIL_TABLE = LookupTable.from_sequence("detail", data.DETAIL_MODIFIERS)
HISTORY_TABLE = LookupTable.from_sequence("history", data.HISTORIES)

DETAIL_FOLLOW_UPS: dict[str, FollowUp] = {
    "History": FollowUp.history,
    "Property": FollowUp.property,
}


def parse_skew(value: Skew | str | None) -> Skew:
    return parse_option(Skew, value, Skew.none)


def _skewed(
    table: LookupTable[str],
    detail_type: str,
    label: str,
    skew: Skew,
    engine: RollEngine,
) -> DetailResult:
    roll, dice = engine.roll_with_skew(10, skew)
    result = table.lookup(roll, default=table.results()[-1])
    follow_up = DETAIL_FOLLOW_UPS.get(result) if detail_type == "detail" else None
    return DetailResult(
        description=f"{label} (1d10{skew.symbol})",
        dice_results=dice,
        total=roll,
        interpretation=result,
        detail_type=detail_type,
        roll=roll,
        second_roll=dice[1] if len(dice) > 1 else None,
        result=result,
        skew=skew,
        follow_up=follow_up,
    )


def roll_color(engine: RollEngine | None = None) -> DetailResult:
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    color = COLOR_TABLE.lookup(roll, default=data.COLORS[-1])
    emoji = data.COLOR_EMOJI[roll - 1] if 1 <= roll <= len(data.COLOR_EMOJI) else None
    return DetailResult(
        description="Color",
        dice_results=[roll],
        total=roll,
        interpretation=f"{emoji} {color}" if emoji else color,
        detail_type="color",
        roll=roll,
        result=color,
        emoji=emoji,
    )


def roll_property(engine: RollEngine | None = None) -> PropertyResult:
    """Roll a property (d10) and how strongly it shows (d6)."""
    engine = engine or RollEngine()
    property_roll = engine.roll_die(10)
    intensity_roll = engine.roll_die(6)
    name = PROPERTY_TABLE.lookup(property_roll, default=data.PROPERTIES[-1])
    intensity = INTENSITY_TABLE.lookup(intensity_roll, default=data.INTENSITIES[2])
    return PropertyResult(
        description="Property",
        dice_results=[property_roll, intensity_roll],
        total=property_roll + intensity_roll,
        interpretation=f"{intensity} {name}",
        property_roll=property_roll,
        property_name=name,
        intensity_roll=intensity_roll,
        intensity=intensity,
    )


def roll_two_properties(engine: RollEngine | None = None) -> DualPropertyResult:
    engine = engine or RollEngine()
    first = roll_property(engine)
    second = roll_property(engine)
    return DualPropertyResult(
        description="Two Properties",
        dice_results=[*first.dice_results, *second.dice_results],
        total=first.total + second.total,
        interpretation=f"{first.interpretation} and {second.interpretation}",
        first=first,
        second=second,
    )


def roll_detail(
    skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> DetailResult:
    """Roll a detail modifier. History and Property results carry a follow-up."""
    return _skewed(DETAIL_TABLE, "detail", "Detail", parse_skew(skew), engine or RollEngine())


def roll_history(
    skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> DetailResult:
    return _skewed(HISTORY_TABLE, "history", "History", parse_skew(skew), engine or RollEngine())
