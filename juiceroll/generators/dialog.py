"""Dialog grid: an NPC conversation as a walk over a 5x5 grid.

Each exchange rolls two d10. The direction die picks a move (and the NPC's
tone); the subject die picks who the line is about. Moves wrap around the grid
edges. If both dice match, the conversation ends where it stands.

The generator holds no state of its own. Every call takes the previous
``DialogState`` and returns the next one inside the result.
"""

from __future__ import annotations

import logging

from juiceroll.config import settings
from juiceroll.data import dialog as data
from juiceroll.dice import RollEngine
from juiceroll.models import ConversationResult, DialogResult, DialogState
from juiceroll.tables import LookupTable, normalize_d10

logger = logging.getLogger(__name__)

GRID_SIZE = 5
START_ROW = 2
START_COL = 2

DIRECTION_TABLE = LookupTable.from_ranges("dialog direction", data.DIRECTION_RANGES)
SUBJECT_TABLE = LookupTable.from_ranges("dialog subject", data.SUBJECT_RANGES)

MOVES: dict[str, tuple[int, int]] = {
    "up": (-1, 0),
    "down": (1, 0),
    "left": (0, -1),
    "right": (0, 1),
}


def fragment_at(row: int, col: int) -> str:
    return data.GRID[row % GRID_SIZE][col % GRID_SIZE]


def move(row: int, col: int, direction: str) -> tuple[int, int]:
    """Step one cell in ``direction``, wrapping at every edge."""
    d_row, d_col = MOVES[direction]
    return (row + d_row) % GRID_SIZE, (col + d_col) % GRID_SIZE


def start() -> DialogState:
    return DialogState(row=START_ROW, col=START_COL, active=True)


def end(state: DialogState) -> DialogState:
    return state.model_copy(update={"active": False})


def set_position(row: int, col: int) -> DialogState:
    """An active conversation at an arbitrary cell (out-of-range values are clamped)."""
    return DialogState(row=row, col=col, active=True)


def next_exchange(
    state: DialogState | None = None, *, engine: RollEngine | None = None
) -> DialogResult:
    """Roll one exchange.

    A missing or inactive state starts a new conversation in the centre cell.
    Doubles end the conversation without moving.
    """
    engine = engine or RollEngine()
    if state is None or not state.active:
        state = start()

    direction_roll = engine.roll_die(10)
    subject_roll = engine.roll_die(10)

    direction = DIRECTION_TABLE.lookup(normalize_d10(direction_roll), default="up")
    subject = SUBJECT_TABLE.lookup(normalize_d10(subject_roll), default="Them")
    tone = data.TONES[direction]
    is_doubles = direction_roll == subject_roll

    old_row, old_col = state.row, state.col
    if is_doubles:
        new_row, new_col = old_row, old_col
        new_state = end(state)
        logger.debug("Dialog doubles at (%d, %d), conversation ends", old_row, old_col)
    else:
        new_row, new_col = move(old_row, old_col, direction)
        new_state = state.model_copy(update={"row": new_row, "col": new_col})

    fragment = fragment_at(new_row, new_col)
    is_past = new_row in data.PAST_ROWS

    if is_doubles:
        interpretation = f"[{tone} tone about {subject}] DOUBLES - Conversation Ends"
    else:
        tense = "Past" if is_past else "Present"
        interpretation = f"→ {fragment} ({tense}) [{tone} tone about {subject}]"

    return DialogResult(
        description="Dialog",
        dice_results=[direction_roll, subject_roll],
        total=direction_roll + subject_roll,
        interpretation=interpretation,
        direction_roll=direction_roll,
        subject_roll=subject_roll,
        old_row=old_row,
        old_col=old_col,
        new_row=new_row,
        new_col=new_col,
        old_fragment=fragment_at(old_row, old_col),
        fragment=fragment,
        fragment_description=data.FRAGMENT_DESCRIPTIONS.get(fragment, ""),
        direction=direction,
        tone=tone,
        subject=subject,
        is_past=is_past,
        is_doubles=is_doubles,
        new_state=new_state,
    )


def converse(
    max_exchanges: int | None = None, *, engine: RollEngine | None = None
) -> ConversationResult:
    """Run a whole conversation from the centre until doubles or the cap.

    Args:
        max_exchanges: Upper bound on exchanges; defaults to
            ``settings.dialog_max_exchanges``. Values below 1 are treated as 1.
        engine: Dice source.
    """
    engine = engine or RollEngine()
    cap = max(1, max_exchanges if max_exchanges is not None else settings.dialog_max_exchanges)

    state = start()
    exchanges: list[DialogResult] = []
    while len(exchanges) < cap:
        exchange = next_exchange(state, engine=engine)
        exchanges.append(exchange)
        state = exchange.new_state
        if exchange.is_doubles:
            break

    ended_by_doubles = exchanges[-1].is_doubles
    fragments = " → ".join(e.fragment for e in exchanges if not e.is_doubles)
    dice = [d for e in exchanges for d in e.dice_results]
    return ConversationResult(
        description=f"Conversation ({len(exchanges)} exchanges)",
        dice_results=dice,
        total=sum(dice),
        interpretation=fragments + (" [Conversation Ends]" if ended_by_doubles else ""),
        exchanges=exchanges,
        ended_by_doubles=ended_by_doubles,
        new_state=state,
    )
