"""Dice rolling engine.

Every draw goes through a ``RollEngine`` wrapping a ``random.Random``-style
source. The engine only ever calls ``randint(a, b)`` on that source, so tests
can hand it a scripted stand-in and get fully deterministic results.

Supports standard notation: XdY, XdY+Z, XdY-Z, plus Fate dice XdF.
Examples: 2d6, 1d20, 3d10+2, 2d6-1, 4dF.
"""

from __future__ import annotations

import enum
import random
import re
from dataclasses import dataclass
from typing import Protocol

from juiceroll.tables import LookupTable, TableEntry

_NOTATION_RE = re.compile(
    r"^(?P<count>[1-9]\d*)?d(?P<sides>[1-9]\d*|F)(?P<mod>[+-]\d+)?$",
    re.IGNORECASE,
)

_MAX_DICE = 100
_MAX_SIDES = 1000

FATE_SIDES = 0
"""Sentinel ``sides`` value returned by ``parse`` for Fate dice."""

SKEW_MIN = -3
SKEW_MAX = 3


class DiceError(ValueError):
    """Raised when a dice notation is invalid."""


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


class Skew(str, enum.Enum):
    """Two-pool selection applied to a roll."""

    none = "none"
    advantage = "advantage"
    disadvantage = "disadvantage"

    @property
    def symbol(self) -> str:
        return {"none": "", "advantage": "@+", "disadvantage": "@-"}[self.value]


@dataclass(frozen=True)
class AdvantageRoll:
    """Outcome of drawing two independent pools and keeping one."""

    pool1: list[int]
    pool2: list[int]
    sum1: int
    sum2: int
    chosen_sum: int
    discarded_sum: int
    chosen_pool: int
    skew: Skew

    @property
    def is_doubles(self) -> bool:
        """True when both pools sum to the same value."""
        return self.sum1 == self.sum2

    @property
    def dice(self) -> list[int]:
        return [*self.pool1, *self.pool2]


# ---------------------------------------------------------------------------
# Skewed d6
# ---------------------------------------------------------------------------
# A skewed d6 draws a d108 and maps it through cumulative face weights
# 18 + skew * (2 * face - 7). The weights always sum to 108; skew 0 is a fair
# die and skew +3 makes a six eleven times likelier than a one.

SKEW_TOTAL = 108


def _skew_table(skew: int) -> LookupTable[int]:
    entries = []
    low = 1
    for face in range(1, 7):
        weight = 18 + skew * (2 * face - 7)
        entries.append(TableEntry(low, low + weight - 1, face))
        low += weight
    return LookupTable(f"skewed d6 ({skew:+d})", entries)


SKEW_TABLES: dict[int, LookupTable[int]] = {
    skew: _skew_table(skew) for skew in range(SKEW_MIN, SKEW_MAX + 1)
}


def clamp_skew(skew: int) -> int:
    return max(SKEW_MIN, min(SKEW_MAX, skew))


# ---------------------------------------------------------------------------
# Notation
# ---------------------------------------------------------------------------


def parse(notation: str) -> tuple[int, int, int]:
    """Parse dice notation into (count, sides, modifier).

    Fate dice (``4dF``) are reported with ``sides == FATE_SIDES``.

    Args:
        notation: Dice notation string, e.g. "2d6+3".

    Returns:
        Tuple of (number of dice, sides per die, flat modifier).

    Raises:
        DiceError: If the notation is invalid or out of range.
    """
    m = _NOTATION_RE.match(notation.strip())
    if not m:
        raise DiceError(f"Invalid dice notation: {notation!r}")

    count = int(m.group("count") or 1)
    raw_sides = m.group("sides")
    sides = FATE_SIDES if raw_sides.upper() == "F" else int(raw_sides)
    modifier = int(m.group("mod") or 0)

    if count > _MAX_DICE:
        raise DiceError(f"Too many dice: {count} (max {_MAX_DICE})")
    if sides > _MAX_SIDES:
        raise DiceError(f"Too many sides: {sides} (max {_MAX_SIDES})")

    return count, sides, modifier


def roll(notation: str, engine: RollEngine | None = None) -> int:
    """Roll dice described by notation and return the total.

    Args:
        notation: Dice notation string, e.g. "2d6+3".
        engine: Engine to draw from. A fresh unseeded engine when omitted.

    Returns:
        Integer total of all dice plus any modifier.

    Raises:
        DiceError: If the notation is invalid.
    """
    _, _, total = (engine or RollEngine()).roll_notation(notation)
    return total


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class RollEngine:
    """Uniform dice draws over an injectable random source."""

    def __init__(self, rng: RandomSource | None = None) -> None:
        self._rng: RandomSource = rng if rng is not None else random.Random()

    @classmethod
    def seeded(cls, seed: int) -> RollEngine:
        return cls(random.Random(seed))

    def roll_die(self, sides: int) -> int:
        if sides < 1:
            raise DiceError(f"A die needs at least one side, got {sides}")
        return self._rng.randint(1, sides)

    def roll_dice(self, count: int, sides: int) -> list[int]:
        return [self.roll_die(sides) for _ in range(count)]

    def roll_fate_die(self) -> int:
        return self._rng.randint(-1, 1)

    def roll_fate_dice(self, count: int) -> list[int]:
        return [self.roll_fate_die() for _ in range(count)]

    def coin_flip(self) -> bool:
        return self.roll_die(2) == 1

    def roll_with_advantage(self, count: int, sides: int) -> AdvantageRoll:
        """Draw two pools of ``count`` dice and keep the higher sum."""
        return self._two_pools(count, sides, Skew.advantage)

    def roll_with_disadvantage(self, count: int, sides: int) -> AdvantageRoll:
        """Draw two pools of ``count`` dice and keep the lower sum."""
        return self._two_pools(count, sides, Skew.disadvantage)

    def roll_with_skew(self, sides: int, skew: Skew) -> tuple[int, list[int]]:
        """Roll one die under ``skew``.

        Returns:
            The kept value and the dice to show: both draws when skewed,
            the single draw otherwise.
        """
        if skew is Skew.none:
            value = self.roll_die(sides)
            return value, [value]
        pools = self._two_pools(1, sides, skew)
        return pools.chosen_sum, [pools.sum1, pools.sum2]

    def roll_skewed_d6(self, skew: int) -> int:
        """Roll a single d6 biased toward high (positive) or low (negative) faces.

        Args:
            skew: Bias strength; clamped into -3..3.

        Returns:
            A face in 1..6.
        """
        table = SKEW_TABLES[clamp_skew(skew)]
        return table.lookup(self.roll_die(SKEW_TOTAL), default=6)

    def roll_notation(self, notation: str) -> tuple[list[int], int, int]:
        """Roll notation, returning (dice, modifier, total).

        Raises:
            DiceError: If the notation is invalid.
        """
        count, sides, modifier = parse(notation)
        if sides == FATE_SIDES:
            dice = self.roll_fate_dice(count)
        else:
            dice = self.roll_dice(count, sides)
        return dice, modifier, sum(dice) + modifier

    def _two_pools(self, count: int, sides: int, skew: Skew) -> AdvantageRoll:
        pool1 = self.roll_dice(count, sides)
        pool2 = self.roll_dice(count, sides)
        sum1, sum2 = sum(pool1), sum(pool2)
        if skew is Skew.advantage:
            first = sum1 >= sum2
        else:
            first = sum1 <= sum2
        return AdvantageRoll(
            pool1=pool1,
            pool2=pool2,
            sum1=sum1,
            sum2=sum2,
            chosen_sum=sum1 if first else sum2,
            discarded_sum=sum2 if first else sum1,
            chosen_pool=1 if first else 2,
            skew=skew,
        )
