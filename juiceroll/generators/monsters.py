"""Monster encounters for wilderness travel.

The monster table has ten rolled rows plus two special rows: blights (*) for
forests and bandits (**) for a doubles on the row dice. Columns run from
tracks through easy, medium and hard to boss.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from juiceroll.data import monsters as data
from juiceroll.data.wilderness import ENVIRONMENTS, FOREST_ROW, MONSTER_FORMULAS
from juiceroll.dice import RollEngine, Skew
from juiceroll.models import (
    FullMonsterEncounterResult,
    MonsterCount,
    MonsterDifficulty,
    MonsterEncounterResult,
    MonsterTracksResult,
)
from juiceroll.tables import LookupTable

logger = logging.getLogger(__name__)

DIFFICULTY_TABLE = LookupTable.from_ranges("monster difficulty", data.DIFFICULTY_RANGES)

ROW_COUNT = len(data.MONSTER_TABLE)
ROLLED_ROWS = 10
FOREST_BLIGHT_INDEX = 5


@dataclass(frozen=True)
class MonsterRow:
    row: int
    dice: list[int]
    was_doubles: bool
    is_forest: bool


def _clamp_row(row: int) -> int:
    return max(0, min(ROW_COUNT - 1, row))


def _formula(environment_row: int) -> dict:
    return MONSTER_FORMULAS[max(1, min(10, environment_row)) - 1]


def _difficulty(roll: int) -> MonsterDifficulty:
    return MonsterDifficulty(DIFFICULTY_TABLE.lookup(roll, default="medium"))


def _entry(row: int, difficulty: MonsterDifficulty) -> tuple[str, str, bool]:
    """Return (raw code, display name, is deadly) for a table cell."""
    code = data.MONSTER_TABLE[row][data.DIFFICULTY_COLUMNS[difficulty.value]]
    symbol, name = data.strip_prefix(code)
    return code, name, symbol == "-" or difficulty is MonsterDifficulty.boss


def environment_formula(environment_row: int) -> str:
    formula = _formula(environment_row)
    return f"+{formula['modifier']}@{formula['advantage']}"


def _encounter_result(
    row: int,
    difficulty: MonsterDifficulty,
    dice: list[int],
    difficulty_roll: int | None = None,
    was_doubles: bool = False,
) -> MonsterEncounterResult:
    _, name, deadly = _entry(row, difficulty)
    interpretation = f"{name} ({data.DIFFICULTY_LABELS[difficulty.value]})"
    if deadly:
        interpretation += " [Deadly]"
    return MonsterEncounterResult(
        description="Monster Encounter",
        dice_results=dice,
        total=sum(dice),
        interpretation=interpretation,
        row=row,
        difficulty=difficulty,
        monster=name,
        is_deadly=deadly,
        difficulty_roll=difficulty_roll,
        was_doubles=was_doubles,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def get_monster(row: int, difficulty: MonsterDifficulty) -> MonsterEncounterResult:
    """Look a monster up directly; no dice are rolled."""
    return _encounter_result(_clamp_row(row), difficulty, [])


def roll_encounter(engine: RollEngine | None = None) -> MonsterEncounterResult:
    """2d10: row die and difficulty die. Doubles mean the boss."""
    engine = engine or RollEngine()
    row_roll, difficulty_roll = engine.roll_dice(2, 10)
    was_doubles = row_roll == difficulty_roll
    difficulty = MonsterDifficulty.boss if was_doubles else _difficulty(difficulty_roll)
    return _encounter_result(
        row_roll - 1,
        difficulty,
        [row_roll, difficulty_roll],
        difficulty_roll=difficulty_roll,
        was_doubles=was_doubles,
    )


def roll_special_row(
    humanoid: bool = False, *, engine: RollEngine | None = None
) -> MonsterEncounterResult:
    """Roll difficulty on the blights row, or the bandits row when ``humanoid``."""
    engine = engine or RollEngine()
    row = data.BANDITS_ROW if humanoid else data.BLIGHTS_ROW
    difficulty_roll = engine.roll_die(10)
    return _encounter_result(
        row, _difficulty(difficulty_roll), [difficulty_roll], difficulty_roll=difficulty_roll
    )


def roll_tracks(row: int | None = None, *, engine: RollEngine | None = None) -> MonsterTracksResult:
    """Roll the 1d6-1 tracks modifier and, unless given, a row (1d10@-)."""
    engine = engine or RollEngine()
    modifier_roll = engine.roll_die(6)
    dice = [modifier_roll]
    if row is None:
        pools = engine.roll_with_disadvantage(1, 10)
        dice.extend([pools.sum1, pools.sum2])
        row = pools.chosen_sum - 1
    row = _clamp_row(row)
    tracks = data.MONSTER_TABLE[row][0]
    modifier = modifier_roll - 1
    return MonsterTracksResult(
        description="Monster Tracks",
        dice_results=dice,
        total=modifier,
        interpretation=f"{tracks} ({modifier:+d})",
        row=row,
        tracks=tracks,
        modifier=modifier,
    )


def roll_monster_row(environment_row: int, *, engine: RollEngine | None = None) -> MonsterRow:
    """Pick a monster row from the environment's formula.

    The formula is 1d6 (kept high for "+", low for "-") plus a modifier,
    clamped to rows 1-10. When the formula rolls two dice and they tie, the
    encounter is bandits regardless of the math. A forest landing on row 6
    uses the blights row instead.
    """
    engine = engine or RollEngine()
    formula = _formula(environment_row)
    is_forest = environment_row == FOREST_ROW

    if formula["advantage"] in ("+", "-"):
        first, second = engine.roll_dice(2, 6)
        dice = [first, second]
        was_doubles = first == second
        base = max(first, second) if formula["advantage"] == "+" else min(first, second)
    else:
        base = engine.roll_die(6)
        dice = [base]
        was_doubles = False

    if was_doubles:
        logger.debug("Monster row doubles, bandit encounter")
        return MonsterRow(data.BANDITS_ROW, dice, True, is_forest)

    row = max(1, min(ROLLED_ROWS, base + formula["modifier"])) - 1
    if is_forest and row == FOREST_BLIGHT_INDEX:
        row = data.BLIGHTS_ROW
    return MonsterRow(row, dice, False, is_forest)


def roll_monster_count(skew_symbol: str, *, engine: RollEngine | None = None) -> int:
    """1d6-1 monsters. "+" entries keep the lower die, "-" entries the higher."""
    engine = engine or RollEngine()
    if skew_symbol == "+":
        base, _ = engine.roll_with_skew(6, Skew.disadvantage)
    elif skew_symbol == "-":
        base, _ = engine.roll_with_skew(6, Skew.advantage)
    else:
        base = engine.roll_die(6)
    return max(0, base - 1)


def full_encounter(
    environment_row: int, *, engine: RollEngine | None = None
) -> FullMonsterEncounterResult:
    """Roll the whole encounter for an environment.

    Row from the environment formula, then 2d10 for difficulty (doubles add
    the boss), then a count for every column up to the difficulty.
    """
    engine = engine or RollEngine()
    environment_row = max(1, min(10, environment_row))
    picked = roll_monster_row(environment_row, engine=engine)
    dice = list(picked.dice)

    first, second = engine.roll_dice(2, 10)
    dice.extend([first, second])
    has_boss = first == second
    difficulty = MonsterDifficulty.boss if has_boss else _difficulty(first)

    boss = None
    if has_boss:
        boss = data.strip_prefix(data.MONSTER_TABLE[picked.row][4])[1]

    monsters: list[MonsterCount] = []
    last_column = min(3, data.DIFFICULTY_COLUMNS[difficulty.value])
    for column in range(1, last_column + 1):
        code = data.MONSTER_TABLE[picked.row][column]
        symbol, name = data.strip_prefix(code)
        count = roll_monster_count(symbol, engine=engine)
        monsters.append(MonsterCount(code=code, name=name, count=count, skew_symbol=symbol))

    parts = [f"{m.count} {m.name}" for m in monsters if m.count > 0]
    if boss:
        parts.append(f"Boss: {boss}")
    interpretation = ", ".join(parts) if parts else "No monsters"
    if picked.was_doubles:
        interpretation += " [DOUBLES - Bandits]"

    return FullMonsterEncounterResult(
        description=f"Monster Encounter ({ENVIRONMENTS[environment_row - 1]})",
        dice_results=dice,
        total=sum(m.count for m in monsters),
        interpretation=interpretation,
        row=picked.row,
        difficulty=difficulty,
        has_boss=has_boss,
        boss_monster=boss,
        monsters=monsters,
        environment_row=environment_row,
        environment_formula=environment_formula(environment_row),
        was_doubles=has_boss or picked.was_doubles,
        is_bandits=picked.was_doubles,
        is_forest=picked.is_forest,
    )
