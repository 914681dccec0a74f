"""Pay the Price: what a failure costs."""

from __future__ import annotations

from juiceroll.data import pay_the_price as data
from juiceroll.dice import RollEngine
from juiceroll.models import PayThePriceResult
from juiceroll.tables import LookupTable

CONSEQUENCE_TABLE = LookupTable.from_sequence("consequence", data.CONSEQUENCES)
TWIST_TABLE = LookupTable.from_sequence("major twist", data.MAJOR_TWISTS)


def pay_the_price(
    critical: bool = False, *, engine: RollEngine | None = None
) -> PayThePriceResult:
    """Roll a consequence, or a major twist on a critical failure."""
    engine = engine or RollEngine()
    roll = engine.roll_die(10)
    table = TWIST_TABLE if critical else CONSEQUENCE_TABLE
    result = table.lookup(roll, default=table.results()[-1])
    return PayThePriceResult(
        description="Major Twist" if critical else "Pay the Price",
        dice_results=[roll],
        total=roll,
        interpretation=result,
        is_major_twist=critical,
        roll=roll,
        result=result,
    )
