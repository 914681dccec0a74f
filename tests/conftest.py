"""Shared test fixtures for the juiceroll test suite.

Deterministic dice
------------------
scripted  (function scope)
    Factory fixture: ``scripted(4, 1, -1)`` returns a ``RollEngine`` whose
    source hands out exactly those values, in order, from ``randint``. Fate
    dice draw from ``randint(-1, 1)``, so they are scripted as -1, 0 or 1.
    A value outside the requested range, or running out of values, fails the
    test immediately.

HTTP
----
async_client  (function scope)
    An httpx AsyncClient wired straight to the FastAPI app. No server, no
    database.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from juiceroll.dice import RollEngine
from juiceroll.main import app


class ScriptedRandom:
    """A ``random.Random`` stand-in that replays a fixed list of draws."""

    def __init__(self, values: list[int]) -> None:
        self._values = list(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.calls.append((a, b))
        if not self._values:
            raise AssertionError(f"Ran out of scripted rolls at randint({a}, {b})")
        value = self._values.pop(0)
        if not a <= value <= b:
            raise AssertionError(f"Scripted value {value} outside randint({a}, {b})")
        return value

    @property
    def remaining(self) -> list[int]:
        return list(self._values)


@pytest.fixture
def scripted() -> Callable[..., RollEngine]:
    def _make(*values: int) -> RollEngine:
        return RollEngine(ScriptedRandom(list(values)))

    return _make


@pytest_asyncio.fixture
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
