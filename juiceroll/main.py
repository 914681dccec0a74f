from __future__ import annotations

import logging

from fastapi import FastAPI

from juiceroll.config import settings
from juiceroll.routers import dice, generators, history, oracles

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Juice Roll", debug=settings.debug)

app.include_router(dice.router)
app.include_router(oracles.router)
app.include_router(generators.router)
app.include_router(history.router)


@app.get("/health")
async def health() -> dict:
    return {"status": "ok", "environment": settings.environment}
