"""Free-form dice routes."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from juiceroll.dependencies import get_engine
from juiceroll.dice import DiceError, RollEngine, Skew
from juiceroll.history import to_record
from juiceroll.oracles import dice_roll
from juiceroll.schemas import FateDiceRequest, NotationRequest, PoolRequest, SkewedDiceRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/dice", tags=["dice"])


@router.post("/roll")
async def roll_notation(body: NotationRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    try:
        result = dice_roll.roll_notation(body.notation, engine=engine)
    except DiceError as exc:
        logger.info("Rejected dice notation %r: %s", body.notation, exc)
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return to_record(result)


@router.post("/advantage")
async def roll_advantage(body: PoolRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = dice_roll.roll_two_pools(
        body.count, body.sides, Skew.advantage, body.modifier, engine=engine
    )
    return to_record(result)


@router.post("/disadvantage")
async def roll_disadvantage(body: PoolRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = dice_roll.roll_two_pools(
        body.count, body.sides, Skew.disadvantage, body.modifier, engine=engine
    )
    return to_record(result)


@router.post("/fate")
async def roll_fate(body: FateDiceRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(dice_roll.roll_fate(body.count, engine=engine))


@router.post("/skewed")
async def roll_skewed(body: SkewedDiceRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(dice_roll.roll_skewed_d6(body.count, body.skew, engine=engine))
