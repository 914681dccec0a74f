"""Oracle routes.

Results that carry a follow-up (a fate check double blank, an expectation
double blank, a History or Property detail) are resolved before returning.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from juiceroll.config import settings
from juiceroll.dependencies import get_engine
from juiceroll.dice import RollEngine
from juiceroll.followups import resolve
from juiceroll.history import to_record
from juiceroll.oracles import challenge, details, pay_the_price, scale
from juiceroll.oracles.discover_meaning import discover_meaning
from juiceroll.oracles.expectation_check import expectation_check
from juiceroll.oracles.fate_check import fate_check
from juiceroll.oracles.interrupt_plot_point import interrupt_plot_point
from juiceroll.oracles.next_scene import next_scene
from juiceroll.oracles.random_event import random_event
from juiceroll.schemas import (
    ChallengeRequest,
    ChaosRequest,
    FateCheckRequest,
    PayThePriceRequest,
    ScaleRequest,
    SkewRequest,
)

router = APIRouter(prefix="/oracles", tags=["oracles"])


@router.post("/fate-check")
async def ask_fate(body: FateCheckRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = fate_check(
        body.likelihood or settings.default_likelihood,
        primary_on_left=body.primary_on_left,
        engine=engine,
    )
    return to_record(resolve(result, engine=engine))


@router.post("/expectation-check")
async def check_expectation(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(resolve(expectation_check(engine), engine=engine))


@router.post("/next-scene")
async def roll_next_scene(body: ChaosRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    chaos = body.chaos_level or settings.default_chaos_level
    return to_record(next_scene(chaos, engine=engine))


@router.post("/random-event")
async def roll_random_event(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(random_event(engine))


@router.post("/details/color")
async def roll_color(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(details.roll_color(engine))


@router.post("/details/property")
async def roll_property(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(details.roll_property(engine))


@router.post("/details/properties")
async def roll_properties(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(details.roll_two_properties(engine))


@router.post("/details/detail")
async def roll_detail(body: SkewRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = details.roll_detail(body.skew, engine=engine)
    return to_record(resolve(result, engine=engine))


@router.post("/details/history")
async def roll_history(body: SkewRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(details.roll_history(body.skew, engine=engine))


@router.post("/challenge")
async def roll_challenge(body: ChallengeRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(challenge.roll_challenge(body.dc_skew, engine=engine))


@router.post("/challenge/dc")
async def roll_dc(body: ChallengeRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(challenge.roll_dc(body.dc_skew, engine=engine))


@router.post("/pay-the-price")
async def roll_price(body: PayThePriceRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(pay_the_price.pay_the_price(body.critical, engine=engine))


@router.post("/discover-meaning")
async def roll_meaning(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(discover_meaning(engine))


@router.post("/scale")
async def roll_scale(body: ScaleRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(scale.roll_scale(body.base_value, engine=engine))


@router.post("/interrupt-plot-point")
async def roll_interrupt(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(interrupt_plot_point(engine))
