"""Request bodies for the HTTP API.

Option names (likelihood, chaos level, skew) are plain strings here so that an
unrecognised value falls back to the resolver's default instead of failing
validation. Counts and sizes are bounded.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from juiceroll.config import settings
from juiceroll.models import DialogState, DungeonState, WildernessState


class NotationRequest(BaseModel):
    notation: str = Field(description="Dice notation such as 2d6+1, 1d20 or 4dF.")


class PoolRequest(BaseModel):
    count: int = Field(default=1, ge=1, le=100)
    sides: int = Field(default=20, ge=1, le=1000)
    modifier: int = 0


class FateDiceRequest(BaseModel):
    count: int = Field(default=4, ge=1, le=100)


class SkewedDiceRequest(BaseModel):
    count: int = Field(default=1, ge=1, le=100)
    skew: int = Field(default=0, description="-3 (low faces) to +3 (high faces); clamped.")


class FateCheckRequest(BaseModel):
    likelihood: str | None = None
    primary_on_left: bool | None = Field(
        default=None,
        description="Which die sat on the left; only matters for double blanks.",
    )


class ChaosRequest(BaseModel):
    chaos_level: str | None = None


class SkewRequest(BaseModel):
    skew: str | None = None


class ChallengeRequest(BaseModel):
    dc_skew: str | None = Field(default=None, description="'easy', 'hard' or omitted.")


class PayThePriceRequest(BaseModel):
    critical: bool = False


class ScaleRequest(BaseModel):
    base_value: int | None = None


class DialogRequest(BaseModel):
    state: DialogState | None = None


class ConversationRequest(BaseModel):
    max_exchanges: int | None = Field(default=None, ge=1, le=settings.dialog_max_exchanges)


class DungeonAreaRequest(BaseModel):
    state: DungeonState | None = None
    is_entering: bool | None = None
    include_passage: bool = False
    use_d6_for_passage: bool = False
    passage_skew: str | None = None
    with_condition: bool = False
    is_occupied: bool = True
    condition_skew: str | None = None


class TwoPassRequest(BaseModel):
    state: DungeonState | None = None
    is_occupied: bool = True
    use_d6_for_passage: bool = False
    passage_skew: str | None = None


class DungeonEncounterRequest(BaseModel):
    is_lingering: bool = False
    skew: str | None = None


class TrapRequest(BaseModel):
    is_searching: bool = True
    dc_skew: str | None = None


class WildernessTransitionRequest(BaseModel):
    state: WildernessState | None = None


class WildernessEncounterRequest(BaseModel):
    state: WildernessState | None = None
    dangerous_terrain: bool = False
    has_map: bool = False
    resolve_follow_up: bool = True


class WildernessStateRequest(BaseModel):
    state: WildernessState = Field(default_factory=WildernessState)


class SummariesRequest(BaseModel):
    records: list[dict[str, Any]]


class SettlementRequest(BaseModel):
    settlement_type: str | None = Field(
        default=None, description="'village', 'city', or omitted for a quick sketch."
    )


class EstablishmentRequest(BaseModel):
    is_village: bool = False


class NpcActionRequest(BaseModel):
    disposition: str | None = Field(default=None, description="'active' or 'passive'.")
    context: str | None = Field(default=None, description="'active' or 'passive'.")


class NpcCombatRequest(BaseModel):
    focus: str | None = Field(default=None, description="'active' or 'passive'.")
    objective: str | None = Field(default=None, description="'offensive' or 'defensive'.")


class NpcProfileRequest(BaseModel):
    need_skew: str | None = Field(default=None, description="'complex', 'primitive' or omitted.")
    full: bool = True


class TreasureRequest(BaseModel):
    category: str | None = None
    skew: str | None = None


class ItemRequest(BaseModel):
    skew: str | None = None
    include_color: bool = False
