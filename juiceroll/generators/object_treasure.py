"""Objects and treasure.

4d6 read left to right: category, then the category's three columns. Every
die takes the same skew; advantage finds better items, disadvantage worse.
"""

from __future__ import annotations

import logging

from juiceroll.data import object_treasure as data
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import ItemCreationResult, ObjectTreasureResult
from juiceroll.oracles.details import parse_skew, roll_color, roll_two_properties
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

CATEGORY_TABLE = LookupTable.from_sequence("object category", data.CATEGORIES)
COLUMN_TABLES: dict[str, list[LookupTable[str]]] = {
    category: [
        LookupTable.from_sequence(f"{category.lower()} {label.lower()}", column)
        for label, column in zip(labels, columns)
    ]
    for category, (labels, columns) in data.COLUMNS.items()
}


def parse_category(value: str | None) -> str | None:
    """Match a category name in any case; None when it is not one."""
    if value is None:
        return None
    for category in data.CATEGORIES:
        if category.lower() == value.strip().lower():
            return category
    logger.warning("Unknown object category %r, rolling one", value)
    return None


def _describe(category: str, first: str, second: str, third: str) -> str:
    if category == "Treasure":
        if second == data.EMPTY_CONTAINER:
            return f"{first} {third}"
        return f"{first} {second} full of {third}"
    if category == "Document":
        return f"{first}: {second} about {third}"
    return f"{first} {second} {third}"


def _roll_item(
    category: str,
    category_roll: int,
    dice: list[int],
    skew: Skew,
    engine: RollEngine,
) -> ObjectTreasureResult:
    labels = data.COLUMNS[category][0]
    die_count = 3 if category_roll == 0 else 4
    picks = []
    total = category_roll
    for table in COLUMN_TABLES[category]:
        roll, drawn = engine.roll_with_skew(6, skew)
        dice.extend(drawn)
        total += roll
        picks.append(table.lookup(roll, default=table.results()[-1]))
    first, second, third = picks
    return ObjectTreasureResult(
        description=f"{category} ({die_count}d6{skew.symbol})",
        dice_results=dice,
        total=total,
        interpretation=_describe(category, first, second, third),
        category_roll=category_roll,
        category=category,
        quality=first,
        material=second,
        item_type=third,
        column_labels=list(labels),
        skew=skew,
    )


def generate(
    skew: Skew | str | None = Skew.none, *, engine: RollEngine | None = None
) -> ObjectTreasureResult:
    """Roll the category and all three columns."""
    engine = engine or RollEngine()
    skew = parse_skew(skew)
    category_roll, dice = engine.roll_with_skew(6, skew)
    category = CATEGORY_TABLE.lookup(category_roll, default=data.CATEGORIES[-1])
    return _roll_item(category, category_roll, list(dice), skew, engine)


def generate_by_type(
    category: str | None,
    skew: Skew | str | None = Skew.none,
    *,
    engine: RollEngine | None = None,
) -> ObjectTreasureResult:
    """Roll the three columns of a chosen category; unknown names roll one.

    A chosen category reports ``category_roll`` 0.
    """
    engine = engine or RollEngine()
    picked = parse_category(category)
    if picked is None:
        return generate(skew, engine=engine)
    return _roll_item(picked, 0, [], parse_skew(skew), engine)


def generate_full_item(
    skew: Skew | str | None = Skew.none,
    include_color: bool = False,
    *,
    engine: RollEngine | None = None,
) -> ItemCreationResult:
    """An item with two properties and, optionally, a color."""
    engine = engine or RollEngine()
    base = generate(skew, engine=engine)
    properties = roll_two_properties(engine)
    color = roll_color(engine) if include_color else None
    dice = [*base.dice_results, *properties.dice_results]
    parts = [base.interpretation, properties.interpretation]
    total = base.total + properties.total
    if color is not None:
        dice.extend(color.dice_results)
        parts.append(color.interpretation)
        total += color.total
    return ItemCreationResult(
        description="Item",
        dice_results=dice,
        total=total,
        interpretation=" - ".join(p for p in parts if p),
        base_item=base,
        properties=properties,
        color=color,
    )
