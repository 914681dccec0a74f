"""History routes: turn stored records back into one-line summaries."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException
from pydantic import ValidationError

from juiceroll.history import from_record, summarize
from juiceroll.schemas import SummariesRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/history", tags=["history"])


@router.post("/summaries")
async def summaries(body: SummariesRequest) -> dict:
    lines: list[str] = []
    for index, record in enumerate(body.records):
        try:
            result = from_record(record)
        except ValidationError as exc:
            logger.warning("Unreadable history record at index %d", index)
            raise HTTPException(
                status_code=422, detail=f"Record {index} is not a valid roll result"
            ) from exc
        lines.append(summarize(result))
    return {"summaries": lines}
