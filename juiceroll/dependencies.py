"""FastAPI dependencies for Juice Roll."""

from __future__ import annotations

from fastapi import Query

from juiceroll.config import settings
from juiceroll.dice import RollEngine


def get_engine(
    seed: int | None = Query(default=None, description="Seed for reproducible rolls"),
) -> RollEngine:
    """Return a fresh engine for this request.

    An explicit ``seed`` wins over ``settings.rng_seed``; with neither, rolls
    come from an unseeded ``random.Random``.
    """
    if seed is None:
        seed = settings.rng_seed
    if seed is None:
        return RollEngine()
    return RollEngine.seeded(seed)
