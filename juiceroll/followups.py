"""Resolve the follow-up signals that results carry.

Resolvers never call each other. A result that wants another roll sets
``follow_up``; this module runs that roll on the same engine and embeds the
child in a copy of the parent. Results without a pending follow-up come back
unchanged.
"""

from __future__ import annotations

import logging

from juiceroll.dice import RollEngine
from juiceroll.generators import dungeon, monsters, wilderness
from juiceroll.models import (
    DetailResult,
    DetailWithFollowUpResult,
    ExpectationCheckResult,
    FateCheckResult,
    FollowUp,
    RollResult,
    WildernessEncounterResult,
    WildernessState,
)
from juiceroll.oracles import challenge, details
from juiceroll.oracles.discover_meaning import discover_meaning
from juiceroll.oracles.random_event import random_event

logger = logging.getLogger(__name__)


def _detail_follow_up(result: DetailResult, engine: RollEngine) -> DetailWithFollowUpResult:
    history_result = property_result = None
    if result.follow_up is FollowUp.history:
        history_result = details.roll_history(engine=engine)
        child = history_result
    else:
        property_result = details.roll_property(engine=engine)
        child = property_result
    return DetailWithFollowUpResult(
        description=result.description,
        dice_results=[*result.dice_results, *child.dice_results],
        total=result.total,
        interpretation=f"{result.result}: {child.interpretation}",
        detail=result,
        history_result=history_result,
        property_result=property_result,
    )


def _wilderness_follow_up(
    result: WildernessEncounterResult,
    state: WildernessState | None,
    engine: RollEngine,
) -> WildernessEncounterResult:
    match result.follow_up:
        case FollowUp.natural_hazard:
            child = wilderness.roll_natural_hazard(engine)
        case FollowUp.feature:
            child = wilderness.roll_feature(engine)
        case FollowUp.weather:
            child = wilderness.roll_weather(state or WildernessState(), engine=engine)
        case FollowUp.monster:
            environment_row = state.environment_row if state is not None else 5
            child = monsters.full_encounter(environment_row, engine=engine)
        case FollowUp.challenge:
            child = challenge.roll_challenge(engine=engine)
        case FollowUp.dungeon:
            child = dungeon.generate_name(engine)
        case _:
            logger.warning("Wilderness encounter has unexpected follow-up %s", result.follow_up)
            return result
    return result.model_copy(
        update={
            "follow_up_result": child,
            "interpretation": f"{result.interpretation}: {child.interpretation}",
        }
    )


def resolve(
    result: RollResult,
    *,
    engine: RollEngine | None = None,
    wilderness_state: WildernessState | None = None,
) -> RollResult:
    """Run the follow-up ``result`` asks for and embed it.

    Args:
        result: Any roll result.
        engine: Dice source for the follow-up rolls.
        wilderness_state: Position used by weather and monster follow-ups.
            Defaults to the middle of the map when omitted.

    Returns:
        A new result with the child embedded, or ``result`` itself when there
        is nothing to resolve. A detail with a follow-up is promoted to a
        ``DetailWithFollowUpResult``.
    """
    engine = engine or RollEngine()
    match result:
        case FateCheckResult(follow_up=FollowUp.random_event, random_event=None):
            event = random_event(engine)
            return result.model_copy(
                update={
                    "random_event": event,
                    "interpretation": f"{result.interpretation} + {event.interpretation}",
                }
            )
        case ExpectationCheckResult(follow_up=FollowUp.discover_meaning, meaning=None):
            meaning = discover_meaning(engine)
            return result.model_copy(
                update={
                    "meaning": meaning,
                    "interpretation": f"{result.interpretation}: {meaning.interpretation}",
                }
            )
        case DetailResult(follow_up=FollowUp.history | FollowUp.property):
            return _detail_follow_up(result, engine)
        case WildernessEncounterResult(follow_up_result=None) if result.follow_up is not None:
            return _wilderness_follow_up(result, wilderness_state, engine)
        case _:
            return result
