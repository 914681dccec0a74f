"""Fate Check: the yes/no oracle.

A Fate Check rolls two ordered Fate dice (primary, secondary) and a d6 for
intensity. The ordered pair is read against a 3x3 table chosen by the stated
likelihood:

  Even Odds   primary decides Yes / No / look again; secondary adds And / But /
              Because.
  Likely      any + gives a Yes-family answer; only -- gives No, And.
  Unlikely    any - gives a No-family answer; only ++ gives Yes, And.

Double blanks (0, 0) ignore likelihood and branch on which die sat on the
left. Primary on the left reads "Yes, but..." and asks for a Random Event;
primary on the right means the question rests on an invalid assumption. When
the caller doesn't say which die was on the left, a coin decides.

The intensity die never changes the answer.
"""

from __future__ import annotations

import logging

from juiceroll.data.details import INTENSITIES
from juiceroll.dice import RollEngine
from juiceroll.models import FateCheckResult, FateOutcome, FollowUp, Likelihood
from juiceroll.options import parse_option

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

LIKELIHOOD_LABELS: dict[Likelihood, str] = {
    Likelihood.unlikely: "Unlikely",
    Likelihood.even_odds: "Even Odds",
    Likelihood.likely: "Likely",
}

OUTCOME_LABELS: dict[FateOutcome, str] = {
    FateOutcome.yes_and: "Yes, and...",
    FateOutcome.yes_because: "Yes, because...",
    FateOutcome.yes: "Yes",
    FateOutcome.yes_but: "Yes, but...",
    FateOutcome.favorable: "Favorable",
    FateOutcome.unfavorable: "Unfavorable",
    FateOutcome.no_but: "No, but...",
    FateOutcome.no: "No",
    FateOutcome.no_because: "No, because...",
    FateOutcome.no_and: "No, and...",
    FateOutcome.invalid_assumption: "Invalid Assumption",
}

DOUBLE_BLANK = "double_blank"

# ---------------------------------------------------------------------------
# Decision tables
# ---------------------------------------------------------------------------
# Keyed by (primary, secondary). Double blanks never reach these tables;
# ``interpret`` handles them first.

_EVEN_ODDS: dict[tuple[int, int], FateOutcome] = {
    (1, 1): FateOutcome.yes_and,
    (1, 0): FateOutcome.yes_because,
    (1, -1): FateOutcome.yes_but,
    (0, 1): FateOutcome.favorable,
    (0, -1): FateOutcome.unfavorable,
    (-1, 1): FateOutcome.no_but,
    (-1, 0): FateOutcome.no_because,
    (-1, -1): FateOutcome.no_and,
}

_LIKELY: dict[tuple[int, int], FateOutcome] = {
    (1, 1): FateOutcome.yes_and,
    (1, 0): FateOutcome.yes,
    (0, 1): FateOutcome.yes,
    (1, -1): FateOutcome.yes_but,
    (-1, 1): FateOutcome.yes_but,
    (0, -1): FateOutcome.no,
    (-1, 0): FateOutcome.no,
    (-1, -1): FateOutcome.no_and,
}

_UNLIKELY: dict[tuple[int, int], FateOutcome] = {
    (1, 1): FateOutcome.yes_and,
    (1, 0): FateOutcome.yes,
    (0, 1): FateOutcome.yes,
    (1, -1): FateOutcome.no_but,
    (-1, 1): FateOutcome.no_but,
    (0, -1): FateOutcome.no,
    (-1, 0): FateOutcome.no,
    (-1, -1): FateOutcome.no_and,
}

DECISION_TABLES: dict[Likelihood, dict[tuple[int, int], FateOutcome]] = {
    Likelihood.even_odds: _EVEN_ODDS,
    Likelihood.likely: _LIKELY,
    Likelihood.unlikely: _UNLIKELY,
}


def fate_symbol(value: int) -> str:
    return {1: "+", 0: "0", -1: "-"}.get(value, "?")


def intensity_label(roll: int) -> str:
    return INTENSITIES[max(1, min(6, roll)) - 1]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse_likelihood(value: Likelihood | str | None) -> Likelihood:
    """Parse a likelihood in any common spelling; unknown values mean Even Odds."""
    return parse_option(Likelihood, value, Likelihood.even_odds)


def interpret(
    likelihood: Likelihood,
    primary: int,
    secondary: int,
    primary_on_left: bool = True,
) -> tuple[FateOutcome, FollowUp | None]:
    """Read an ordered pair of Fate dice.

    Args:
        likelihood: Which decision table to read.
        primary: The primary Fate die (-1, 0 or 1).
        secondary: The secondary Fate die (-1, 0 or 1).
        primary_on_left: Only consulted for double blanks.

    Returns:
        The outcome and the follow-up the outcome asks for, if any.
    """
    if primary == 0 and secondary == 0:
        if primary_on_left:
            return FateOutcome.yes_but, FollowUp.random_event
        return FateOutcome.invalid_assumption, None
    outcome = DECISION_TABLES[likelihood].get((primary, secondary))
    if outcome is None:
        logger.warning(
            "No fate check entry for (%d, %d) at %s", primary, secondary, likelihood.value
        )
        return FateOutcome.yes_but, None
    return outcome, None


def fate_check(
    likelihood: Likelihood | str | None = Likelihood.even_odds,
    *,
    primary_on_left: bool | None = None,
    engine: RollEngine | None = None,
) -> FateCheckResult:
    """Ask the oracle a yes/no question.

    Draw order is primary Fate die, secondary Fate die, intensity d6, and then
    (double blanks only, when ``primary_on_left`` is None) a coin flip.

    A primary-left double blank carries ``follow_up=FollowUp.random_event``;
    pass the result through ``juiceroll.followups.resolve`` to embed it.
    """
    engine = engine or RollEngine()
    likelihood = parse_likelihood(likelihood)

    primary, secondary = engine.roll_fate_dice(2)
    intensity = engine.roll_die(6)

    special_trigger = None
    left = primary_on_left
    if primary == 0 and secondary == 0:
        special_trigger = DOUBLE_BLANK
        if left is None:
            left = engine.coin_flip()
        branch = f"double blank, primary on {'left' if left else 'right'}"
    else:
        branch = (
            f"{LIKELIHOOD_LABELS[likelihood]}: "
            f"{fate_symbol(primary)}{fate_symbol(secondary)}"
        )

    outcome, follow_up = interpret(likelihood, primary, secondary, bool(left))
    label = OUTCOME_LABELS[outcome]
    intensity_text = intensity_label(intensity)

    return FateCheckResult(
        description=f"Fate Check ({LIKELIHOOD_LABELS[likelihood]})",
        dice_results=[primary, secondary, intensity],
        total=primary + secondary,
        interpretation=f"{label} ({intensity_text})",
        likelihood=likelihood,
        primary=primary,
        secondary=secondary,
        intensity=intensity,
        intensity_label=intensity_text,
        outcome=outcome,
        branch=branch,
        special_trigger=special_trigger,
        primary_on_left=left,
        follow_up=follow_up,
    )
