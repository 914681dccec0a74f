"""Result and state models.

Every roll produces an immutable result model. All result models share the
``RollResult`` fields and pin ``kind`` to a literal, so ``AnyResult`` is a
closed union that pydantic can discriminate when a stored record is read back.
Composite results embed their children by value.

Generator state models are small frozen values owned by the caller. Fields
read from storage are clamped into range rather than rejected.
"""

from __future__ import annotations

import enum
import logging
from datetime import datetime, timezone
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from juiceroll.dice import Skew

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clamp(value: Any, low: int, high: int, default: int) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Unreadable state value %r, using %d", value, default)
        return default
    return max(low, min(high, number))


def _field_default(model: type[BaseModel], info: ValidationInfo) -> int:
    return model.model_fields[info.field_name].default


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class Likelihood(str, enum.Enum):
    """Stated odds for a Fate Check."""

    unlikely = "unlikely"
    even_odds = "even_odds"
    likely = "likely"


class FateOutcome(str, enum.Enum):
    yes_and = "yes_and"
    yes_because = "yes_because"
    yes = "yes"
    yes_but = "yes_but"
    favorable = "favorable"
    unfavorable = "unfavorable"
    no_but = "no_but"
    no = "no"
    no_because = "no_because"
    no_and = "no_and"
    invalid_assumption = "invalid_assumption"


class ExpectationOutcome(str, enum.Enum):
    expected_intensified = "expected_intensified"
    expected = "expected"
    next_most_expected = "next_most_expected"
    favorable = "favorable"
    modified_idea = "modified_idea"
    unfavorable = "unfavorable"
    opposite = "opposite"
    opposite_intensified = "opposite_intensified"


class ChaosLevel(str, enum.Enum):
    """How unsettled the story is; shifts the Next Scene total."""

    controlled = "controlled"
    stable = "stable"
    normal = "normal"
    unstable = "unstable"
    chaotic = "chaotic"


class FollowUp(str, enum.Enum):
    """Another resolver a result asks the orchestration layer to run."""

    random_event = "random_event"
    discover_meaning = "discover_meaning"
    history = "history"
    property = "property"
    natural_hazard = "natural_hazard"
    feature = "feature"
    weather = "weather"
    monster = "monster"
    challenge = "challenge"
    dungeon = "dungeon"


class DungeonPhase(str, enum.Enum):
    entering = "entering"
    exploring = "exploring"


class DungeonMode(str, enum.Enum):
    one_pass = "one_pass"
    two_pass = "two_pass"


class StateTrigger(str, enum.Enum):
    """A wilderness state change the caller may choose to apply."""

    became_lost = "became_lost"
    became_found = "became_found"


class ChallengeType(str, enum.Enum):
    physical = "physical"
    mental = "mental"


class MonsterDifficulty(str, enum.Enum):
    easy = "easy"
    medium = "medium"
    hard = "hard"
    boss = "boss"


class SettlementType(str, enum.Enum):
    village = "village"
    city = "city"


class NpcDisposition(str, enum.Enum):
    """Passive NPCs read the action table with a d6, active ones with a d10."""

    active = "active"
    passive = "passive"


class NpcContext(str, enum.Enum):
    """Active context rolls the action with advantage, passive with disadvantage."""

    active = "active"
    passive = "passive"


class NpcFocus(str, enum.Enum):
    active = "active"
    passive = "passive"


class NpcObjective(str, enum.Enum):
    offensive = "offensive"
    defensive = "defensive"


# ---------------------------------------------------------------------------
# Generator state
# ---------------------------------------------------------------------------


class DialogState(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = 2
    col: int = 2
    active: bool = False

    @field_validator("row", "col", mode="before")
    @classmethod
    def _clamp_cell(cls, v: Any, info: ValidationInfo) -> int:
        return _clamp(v, 0, 4, _field_default(cls, info))


class DungeonState(BaseModel):
    model_config = ConfigDict(frozen=True)

    mode: DungeonMode = DungeonMode.one_pass
    phase: DungeonPhase = DungeonPhase.entering
    doubles_count: int = 0
    map_stopped: bool = False

    @field_validator("doubles_count", mode="before")
    @classmethod
    def _clamp_doubles(cls, v: Any, info: ValidationInfo) -> int:
        return _clamp(v, 0, 2, _field_default(cls, info))


class WildernessState(BaseModel):
    model_config = ConfigDict(frozen=True)

    environment_row: int = 5
    type_row: int = 5
    is_lost: bool = False

    @field_validator("environment_row", "type_row", mode="before")
    @classmethod
    def _clamp_row(cls, v: Any, info: ValidationInfo) -> int:
        return _clamp(v, 1, 10, _field_default(cls, info))


# ---------------------------------------------------------------------------
# Base result
# ---------------------------------------------------------------------------


class RollResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: str
    description: str
    dice_results: list[int] = Field(default_factory=list)
    total: int = 0
    interpretation: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)
    timestamp: datetime = Field(default_factory=_utcnow)


# ---------------------------------------------------------------------------
# Oracle results
# ---------------------------------------------------------------------------


class DiceRollResult(RollResult):
    kind: Literal["dice"] = "dice"
    notation: str
    modifier: int = 0
    skew: Skew = Skew.none
    discarded_sum: int | None = None


class TableResult(RollResult):
    """A single roll on a named word list."""

    kind: Literal["table"] = "table"
    table: str
    roll: int
    result: str


class RandomEventResult(RollResult):
    kind: Literal["random_event"] = "random_event"
    focus_roll: int
    focus: str
    focus_description: str = ""
    modifier_roll: int
    modifier: str
    category_roll: int
    category: str
    idea_roll: int
    idea: str


class IdeaResult(RollResult):
    kind: Literal["idea"] = "idea"
    modifier_roll: int | None = None
    modifier: str | None = None
    category_roll: int | None = None
    category: str
    idea_roll: int
    idea: str


class DiscoverMeaningResult(RollResult):
    kind: Literal["discover_meaning"] = "discover_meaning"
    adjective_roll: int
    adjective: str
    noun_roll: int
    noun: str


class FateCheckResult(RollResult):
    kind: Literal["fate_check"] = "fate_check"
    likelihood: Likelihood
    primary: int
    secondary: int
    intensity: int
    intensity_label: str
    outcome: FateOutcome
    branch: str
    special_trigger: str | None = None
    primary_on_left: bool | None = None
    follow_up: FollowUp | None = None
    random_event: RandomEventResult | None = None


class ExpectationCheckResult(RollResult):
    kind: Literal["expectation_check"] = "expectation_check"
    primary: int
    secondary: int
    outcome: ExpectationOutcome
    follow_up: FollowUp | None = None
    meaning: DiscoverMeaningResult | None = None


class NextSceneResult(RollResult):
    kind: Literal["next_scene"] = "next_scene"
    chaos_level: ChaosLevel
    chaos_modifier: int
    raw_sum: int
    outcome: str
    is_interrupt: bool


class DetailResult(RollResult):
    """Color, detail modifier, or history roll."""

    kind: Literal["detail"] = "detail"
    detail_type: str
    roll: int
    second_roll: int | None = None
    result: str
    emoji: str | None = None
    skew: Skew = Skew.none
    follow_up: FollowUp | None = None


class PropertyResult(RollResult):
    kind: Literal["property"] = "property"
    property_roll: int
    property_name: str
    intensity_roll: int
    intensity: str


class DualPropertyResult(RollResult):
    kind: Literal["dual_property"] = "dual_property"
    first: PropertyResult
    second: PropertyResult


class DetailWithFollowUpResult(RollResult):
    kind: Literal["detail_follow_up"] = "detail_follow_up"
    detail: DetailResult
    history_result: DetailResult | None = None
    property_result: PropertyResult | None = None


class ChallengeResult(RollResult):
    kind: Literal["challenge"] = "challenge"
    physical_roll: int
    physical_skill: str
    physical_dc: int
    mental_roll: int
    mental_skill: str
    mental_dc: int
    dc_method: str


class DcResult(RollResult):
    kind: Literal["dc"] = "dc"
    roll: int
    dc: int
    method: str


class ChallengeSkillResult(RollResult):
    kind: Literal["challenge_skill"] = "challenge_skill"
    challenge_type: ChallengeType
    roll: int
    skill: str
    suggested_dc: int


class PercentageChanceResult(RollResult):
    kind: Literal["percentage_chance"] = "percentage_chance"
    roll: int
    min_percent: int
    max_percent: int
    percent: int


class PayThePriceResult(RollResult):
    kind: Literal["pay_the_price"] = "pay_the_price"
    is_major_twist: bool
    roll: int
    result: str


class ScaleResult(RollResult):
    kind: Literal["scale"] = "scale"
    fate_dice: list[int]
    intensity: int
    scale_roll: int
    modifier_label: str
    multiplier: float
    base_value: int | None = None
    scaled_value: int | None = None


# ---------------------------------------------------------------------------
# Dialog
# ---------------------------------------------------------------------------


class DialogResult(RollResult):
    kind: Literal["dialog"] = "dialog"
    direction_roll: int
    subject_roll: int
    old_row: int
    old_col: int
    new_row: int
    new_col: int
    old_fragment: str
    fragment: str
    fragment_description: str
    direction: str
    tone: str
    subject: str
    is_past: bool
    is_doubles: bool
    new_state: DialogState


class ConversationResult(RollResult):
    kind: Literal["dialog_conversation"] = "dialog_conversation"
    exchanges: list[DialogResult]
    ended_by_doubles: bool
    new_state: DialogState


# ---------------------------------------------------------------------------
# Dungeon
# ---------------------------------------------------------------------------


class DungeonNameResult(RollResult):
    kind: Literal["dungeon_name"] = "dungeon_name"
    type_roll: int
    dungeon_type: str
    description_roll: int
    description_word: str
    subject_roll: int
    subject: str
    name: str


class DungeonDetailResult(RollResult):
    """Passage, condition, encounter type, feature, or natural hazard roll."""

    kind: Literal["dungeon_detail"] = "dungeon_detail"
    detail_type: str
    roll: int
    result: str
    die_size: int = 10
    skew: Skew = Skew.none


class DungeonAreaResult(RollResult):
    kind: Literal["dungeon_area"] = "dungeon_area"
    phase: DungeonPhase
    roll1: int
    roll2: int
    chosen_roll: int
    area_type: str
    is_doubles: bool
    phase_change: bool
    passage: DungeonDetailResult | None = None
    condition: DungeonDetailResult | None = None
    new_state: DungeonState


class TwoPassAreaResult(RollResult):
    kind: Literal["dungeon_two_pass"] = "dungeon_two_pass"
    roll1: int | None = None
    roll2: int | None = None
    chosen_roll: int | None = None
    area_type: str
    is_doubles: bool = False
    had_first_doubles: bool
    is_second_doubles: bool = False
    stop_map_generation: bool
    is_terminal: bool = False
    passage: DungeonDetailResult | None = None
    condition: DungeonDetailResult | None = None
    new_state: DungeonState


class DungeonMonsterResult(RollResult):
    kind: Literal["dungeon_monster"] = "dungeon_monster"
    descriptor_roll: int
    descriptor: str
    ability_roll: int
    ability: str


class DungeonTrapResult(RollResult):
    kind: Literal["dungeon_trap"] = "dungeon_trap"
    action_roll: int
    action: str
    subject_roll: int
    subject: str


class TrapProcedureResult(RollResult):
    kind: Literal["trap_procedure"] = "trap_procedure"
    trap: DungeonTrapResult
    is_searching: bool
    dc_roll: int
    dc_rolls: list[int]
    dc: int
    dc_skew: Skew
    pass_outcome: str
    fail_outcome: str


class DungeonEncounterResult(RollResult):
    kind: Literal["dungeon_encounter"] = "dungeon_encounter"
    encounter: DungeonDetailResult
    monster: DungeonMonsterResult | None = None
    trap: DungeonTrapResult | None = None
    feature: DungeonDetailResult | None = None
    natural_hazard: DungeonDetailResult | None = None


# ---------------------------------------------------------------------------
# Wilderness and monsters
# ---------------------------------------------------------------------------


class WildernessAreaResult(RollResult):
    kind: Literal["wilderness_area"] = "wilderness_area"
    env_fate_dice: list[int]
    environment_row: int
    environment: str
    type_fate_die: int
    type_row: int
    type_name: str
    type_modifier: int
    is_transition: bool
    previous_environment: str | None = None
    is_manual_set: bool = False
    new_state: WildernessState


class WildernessDetailResult(RollResult):
    """Natural hazard or feature roll."""

    kind: Literal["wilderness_detail"] = "wilderness_detail"
    detail_type: str
    roll: int
    result: str


class WildernessWeatherResult(RollResult):
    kind: Literal["wilderness_weather"] = "wilderness_weather"
    base_roll: int
    second_roll: int | None = None
    environment_skew: str
    type_modifier: int
    weather_row: int
    weather: str
    environment: str
    type_name: str


class MonsterLevelResult(RollResult):
    kind: Literal["monster_level"] = "monster_level"
    base_roll: int
    second_roll: int | None = None
    modifier: int
    advantage: str
    monster_level: int


class MonsterEncounterResult(RollResult):
    kind: Literal["monster_encounter"] = "monster_encounter"
    row: int
    difficulty: MonsterDifficulty
    monster: str
    is_deadly: bool
    difficulty_roll: int | None = None
    was_doubles: bool = False


class MonsterTracksResult(RollResult):
    kind: Literal["monster_tracks"] = "monster_tracks"
    row: int
    tracks: str
    modifier: int


class MonsterCount(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    count: int
    skew_symbol: str = ""


class FullMonsterEncounterResult(RollResult):
    kind: Literal["full_monster_encounter"] = "full_monster_encounter"
    row: int
    difficulty: MonsterDifficulty
    has_boss: bool
    boss_monster: str | None = None
    monsters: list[MonsterCount]
    environment_row: int
    environment_formula: str
    was_doubles: bool
    is_bandits: bool
    is_forest: bool


# ---------------------------------------------------------------------------
# Settlements, quests, NPCs and items
# ---------------------------------------------------------------------------


class SettlementNameResult(RollResult):
    kind: Literal["settlement_name"] = "settlement_name"
    prefix_roll: int
    prefix: str
    suffix_roll: int
    suffix: str
    name: str


class SettlementDetailResult(RollResult):
    """Establishment, artisan or news roll."""

    kind: Literal["settlement_detail"] = "settlement_detail"
    detail_type: str
    roll: int
    result: str
    sub_roll: int | None = None
    sub_result: str | None = None
    detail_description: str | None = None
    die_size: int = 10


class EstablishmentCountResult(RollResult):
    kind: Literal["establishment_count"] = "establishment_count"
    settlement_type: SettlementType
    count: int
    skew: Skew


class EstablishmentNameResult(RollResult):
    kind: Literal["establishment_name"] = "establishment_name"
    color: DetailResult
    short_color: str
    object_roll: int
    object_name: str
    name: str


class SettlementResult(RollResult):
    """A settlement: a quick sketch, or a whole village or city.

    A quick sketch has no ``settlement_type`` or ``count`` and a single
    establishment rolled on the full table.
    """

    kind: Literal["settlement"] = "settlement"
    settlement_type: SettlementType | None = None
    name: SettlementNameResult
    count: EstablishmentCountResult | None = None
    establishments: list[SettlementDetailResult]
    news: SettlementDetailResult


class QuestResult(RollResult):
    kind: Literal["quest"] = "quest"
    objective_roll: int
    objective: str
    description_roll: int
    description_word: str
    description_expanded: str | None = None
    focus_roll: int
    focus: str
    focus_expanded: str | None = None
    preposition_roll: int
    preposition: str
    location_roll: int
    location: str
    location_expanded: str | None = None
    sentence: str


class NpcActionResult(RollResult):
    """One roll on an NPC column: action, combat, personality or need."""

    kind: Literal["npc_action"] = "npc_action"
    column: str
    roll: int
    result: str
    die_size: int = 10
    skew: Skew = Skew.none
    disposition: NpcDisposition | None = None
    context: NpcContext | None = None
    focus: NpcFocus | None = None
    objective: NpcObjective | None = None


class DualPersonalityResult(RollResult):
    kind: Literal["dual_personality"] = "dual_personality"
    primary_roll: int
    primary: str
    secondary_roll: int
    secondary: str


class NpcMotiveResult(RollResult):
    """A motive, with History or Focus already rolled on their own tables."""

    kind: Literal["npc_motive"] = "npc_motive"
    roll: int
    motive: str
    history: DetailResult | None = None
    focus: TableResult | None = None
    focus_expanded: str | None = None


class NpcProfileResult(RollResult):
    """A simple NPC (one trait, need, motive) or a full one with looks."""

    kind: Literal["npc_profile"] = "npc_profile"
    personality_roll: int
    personality: str
    secondary_personality_roll: int | None = None
    secondary_personality: str | None = None
    need_roll: int
    need: str
    need_skew: Skew = Skew.none
    motive: NpcMotiveResult
    color: DetailResult | None = None
    properties: DualPropertyResult | None = None


class ObjectTreasureResult(RollResult):
    kind: Literal["object_treasure"] = "object_treasure"
    category_roll: int
    category: str
    quality: str
    material: str
    item_type: str
    column_labels: list[str]
    skew: Skew = Skew.none


class ItemCreationResult(RollResult):
    kind: Literal["item_creation"] = "item_creation"
    base_item: ObjectTreasureResult
    properties: DualPropertyResult
    color: DetailResult | None = None


class InterruptPlotPointResult(RollResult):
    kind: Literal["interrupt_plot_point"] = "interrupt_plot_point"
    category_roll: int
    category: str
    event_roll: int
    event: str


WildernessFollowUpResult = Annotated[
    Union[
        WildernessDetailResult,
        WildernessWeatherResult,
        FullMonsterEncounterResult,
        ChallengeResult,
        DungeonNameResult,
    ],
    Field(discriminator="kind"),
]


class WildernessEncounterResult(RollResult):
    kind: Literal["wilderness_encounter"] = "wilderness_encounter"
    roll: int
    second_roll: int | None = None
    encounter: str
    die_size: int
    skew: Skew
    was_lost: bool
    state_trigger: StateTrigger | None = None
    is_italic: bool
    partial_italic: str | None = None
    follow_up: FollowUp | None = None
    follow_up_result: WildernessFollowUpResult | None = None


# ---------------------------------------------------------------------------
# Closed union
# ---------------------------------------------------------------------------

AnyResult = Annotated[
    Union[
        DiceRollResult,
        TableResult,
        RandomEventResult,
        IdeaResult,
        DiscoverMeaningResult,
        FateCheckResult,
        ExpectationCheckResult,
        NextSceneResult,
        DetailResult,
        PropertyResult,
        DualPropertyResult,
        DetailWithFollowUpResult,
        ChallengeResult,
        DcResult,
        ChallengeSkillResult,
        PercentageChanceResult,
        PayThePriceResult,
        ScaleResult,
        DialogResult,
        ConversationResult,
        DungeonNameResult,
        DungeonDetailResult,
        DungeonAreaResult,
        TwoPassAreaResult,
        DungeonMonsterResult,
        DungeonTrapResult,
        TrapProcedureResult,
        DungeonEncounterResult,
        WildernessAreaResult,
        WildernessDetailResult,
        WildernessWeatherResult,
        WildernessEncounterResult,
        MonsterLevelResult,
        MonsterEncounterResult,
        MonsterTracksResult,
        FullMonsterEncounterResult,
        SettlementNameResult,
        SettlementDetailResult,
        EstablishmentCountResult,
        EstablishmentNameResult,
        SettlementResult,
        QuestResult,
        NpcActionResult,
        DualPersonalityResult,
        NpcMotiveResult,
        NpcProfileResult,
        ObjectTreasureResult,
        ItemCreationResult,
        InterruptPlotPointResult,
    ],
    Field(discriminator="kind"),
]
