"""Expectation Check.

Instead of asking a yes/no question, state what you expect to happen and roll
two ordered Fate dice to see how reality compares. Double blanks mean the
expectation is replaced by something new, read from Discover Meaning.
"""

from __future__ import annotations

import logging

from juiceroll.dice import RollEngine
from juiceroll.models import ExpectationCheckResult, ExpectationOutcome, FollowUp
from juiceroll.oracles.fate_check import fate_symbol

logger = logging.getLogger(__name__)

OUTCOMES: dict[tuple[int, int], ExpectationOutcome] = {
    (1, 1): ExpectationOutcome.expected_intensified,
    (1, 0): ExpectationOutcome.expected,
    (1, -1): ExpectationOutcome.next_most_expected,
    (0, 1): ExpectationOutcome.favorable,
    (0, 0): ExpectationOutcome.modified_idea,
    (0, -1): ExpectationOutcome.unfavorable,
    (-1, 1): ExpectationOutcome.next_most_expected,
    (-1, 0): ExpectationOutcome.opposite,
    (-1, -1): ExpectationOutcome.opposite_intensified,
}

OUTCOME_LABELS: dict[ExpectationOutcome, str] = {
    ExpectationOutcome.expected_intensified: "Expected (Intensified)",
    ExpectationOutcome.expected: "Expected",
    ExpectationOutcome.next_most_expected: "Next Most Expected",
    ExpectationOutcome.favorable: "Favorable",
    ExpectationOutcome.modified_idea: "Modified Idea",
    ExpectationOutcome.unfavorable: "Unfavorable",
    ExpectationOutcome.opposite: "Opposite",
    ExpectationOutcome.opposite_intensified: "Opposite (Intensified)",
}


def interpret(primary: int, secondary: int) -> ExpectationOutcome:
    outcome = OUTCOMES.get((primary, secondary))
    if outcome is None:
        logger.warning("No expectation entry for (%d, %d)", primary, secondary)
        return ExpectationOutcome.expected
    return outcome


def expectation_check(engine: RollEngine | None = None) -> ExpectationCheckResult:
    """Test an expectation. Double blanks ask for a Discover Meaning follow-up."""
    engine = engine or RollEngine()
    primary, secondary = engine.roll_fate_dice(2)
    outcome = interpret(primary, secondary)
    follow_up = (
        FollowUp.discover_meaning if outcome is ExpectationOutcome.modified_idea else None
    )
    return ExpectationCheckResult(
        description="Expectation Check",
        dice_results=[primary, secondary],
        total=primary + secondary,
        interpretation=(
            f"{OUTCOME_LABELS[outcome]} ({fate_symbol(primary)}{fate_symbol(secondary)})"
        ),
        primary=primary,
        secondary=secondary,
        outcome=outcome,
        follow_up=follow_up,
    )
