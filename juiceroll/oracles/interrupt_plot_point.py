"""Interrupt / plot point: what breaks into the current scene.

2d10. The first picks a category, the second an event from that category.
"""

from __future__ import annotations

from juiceroll.data import interrupt_plot_point as data
from juiceroll.dice import RollEngine
from juiceroll.models import InterruptPlotPointResult
from juiceroll.tables import LookupTable, normalize_d10

CATEGORY_TABLE = LookupTable.from_ranges("interrupt category", data.CATEGORY_RANGES)
EVENT_TABLES: dict[str, LookupTable[str]] = {
    category: LookupTable.from_sequence(f"{category.lower()} interrupt", events)
    for category, events in data.EVENTS.items()
}


def interrupt_plot_point(engine: RollEngine | None = None) -> InterruptPlotPointResult:
    engine = engine or RollEngine()
    category_roll = engine.roll_die(10)
    event_roll = engine.roll_die(10)
    category = CATEGORY_TABLE.lookup(normalize_d10(category_roll), default="Action")
    events = EVENT_TABLES[category]
    event = events.lookup(event_roll, default=events.results()[-1])
    return InterruptPlotPointResult(
        description="Interrupt / Plot Point",
        dice_results=[category_roll, event_roll],
        total=category_roll + event_roll,
        interpretation=f"{category}: {event}",
        category_roll=category_roll,
        category=category,
        event_roll=event_roll,
        event=event,
    )
