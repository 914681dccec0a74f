"""Roll history: results as plain records, and one-line summaries.

A record is the JSON-compatible dump of a result. ``kind`` selects the concrete
class when the record is read back, and nested children (a fate check's
random event, a conversation's exchanges) come back as full results.
"""

from __future__ import annotations

from typing import Any, assert_never

from pydantic import TypeAdapter

from juiceroll.models import (
    AnyResult,
    ChallengeResult,
    ChallengeSkillResult,
    ConversationResult,
    DcResult,
    DetailResult,
    DetailWithFollowUpResult,
    DialogResult,
    DiceRollResult,
    DiscoverMeaningResult,
    DualPersonalityResult,
    DualPropertyResult,
    DungeonAreaResult,
    DungeonDetailResult,
    DungeonEncounterResult,
    DungeonMonsterResult,
    DungeonNameResult,
    DungeonTrapResult,
    EstablishmentCountResult,
    EstablishmentNameResult,
    ExpectationCheckResult,
    FateCheckResult,
    FullMonsterEncounterResult,
    IdeaResult,
    InterruptPlotPointResult,
    ItemCreationResult,
    MonsterEncounterResult,
    MonsterLevelResult,
    MonsterTracksResult,
    NextSceneResult,
    NpcActionResult,
    NpcMotiveResult,
    NpcProfileResult,
    ObjectTreasureResult,
    PayThePriceResult,
    PercentageChanceResult,
    PropertyResult,
    QuestResult,
    RandomEventResult,
    RollResult,
    ScaleResult,
    SettlementDetailResult,
    SettlementNameResult,
    SettlementResult,
    TableResult,
    TrapProcedureResult,
    TwoPassAreaResult,
    WildernessAreaResult,
    WildernessDetailResult,
    WildernessEncounterResult,
    WildernessWeatherResult,
)

_ADAPTER: TypeAdapter[AnyResult] = TypeAdapter(AnyResult)


def to_record(result: RollResult) -> dict[str, Any]:
    return result.model_dump(mode="json")


def from_record(record: dict[str, Any]) -> AnyResult:
    """Rebuild a result from a record.

    Raises:
        pydantic.ValidationError: If ``kind`` is missing or unknown, or a
            required field is absent.
    """
    return _ADAPTER.validate_python(record)


def summarize(result: AnyResult) -> str:
    """One line describing ``result`` for a history list."""
    match result:
        case DiceRollResult():
            return f"{result.notation} = {result.total}"
        case TableResult():
            return f"{result.table}: {result.result}"
        case RandomEventResult():
            return f"Random Event: {result.interpretation}"
        case IdeaResult():
            return f"{result.category.capitalize()}: {result.idea}"
        case DiscoverMeaningResult():
            return f"Meaning: {result.adjective} {result.noun}"
        case FateCheckResult():
            return f"Fate Check: {result.interpretation}"
        case ExpectationCheckResult():
            return f"Expectation: {result.interpretation}"
        case NextSceneResult():
            suffix = " (interrupt)" if result.is_interrupt else ""
            return f"Next Scene: {result.outcome}{suffix}"
        case DetailResult():
            return f"{result.detail_type.capitalize()}: {result.result}"
        case PropertyResult():
            return f"Property: {result.intensity} {result.property_name}"
        case DualPropertyResult():
            return f"Properties: {result.interpretation}"
        case DetailWithFollowUpResult():
            return f"Detail: {result.interpretation}"
        case ChallengeResult():
            return f"Challenge: {result.interpretation}"
        case DcResult():
            return f"DC {result.dc}"
        case ChallengeSkillResult():
            return f"{result.skill} DC {result.suggested_dc}"
        case PercentageChanceResult():
            return f"Chance: {result.percent}%"
        case PayThePriceResult():
            prefix = "Major Twist" if result.is_major_twist else "Pay the Price"
            return f"{prefix}: {result.result}"
        case ScaleResult():
            return f"Scale: {result.interpretation}"
        case DialogResult():
            if result.is_doubles:
                return "Dialog: conversation ends"
            return f"Dialog: {result.fragment}"
        case ConversationResult():
            return f"Conversation: {len(result.exchanges)} exchanges"
        case DungeonNameResult():
            return f"Dungeon: {result.name}"
        case DungeonDetailResult():
            return f"{result.detail_type}: {result.result}"
        case DungeonAreaResult():
            return f"Area ({result.phase.value}): {result.area_type}"
        case TwoPassAreaResult():
            suffix = " (map complete)" if result.stop_map_generation else ""
            return f"Area (two-pass): {result.area_type}{suffix}"
        case DungeonMonsterResult():
            return f"Monster: {result.descriptor} {result.ability}"
        case DungeonTrapResult():
            return f"Trap: {result.action} {result.subject}"
        case TrapProcedureResult():
            return f"Trap: {result.trap.interpretation} (DC {result.dc})"
        case DungeonEncounterResult():
            return f"Encounter: {result.interpretation}"
        case WildernessAreaResult():
            return f"Wilderness: {result.type_name} {result.environment}"
        case WildernessDetailResult():
            return f"{result.detail_type}: {result.result}"
        case WildernessWeatherResult():
            return f"Weather: {result.weather}"
        case WildernessEncounterResult():
            return f"Wilderness Encounter: {result.interpretation}"
        case MonsterLevelResult():
            return f"Monster Level {result.monster_level}"
        case MonsterEncounterResult():
            return f"Monster: {result.monster} ({result.difficulty.value})"
        case MonsterTracksResult():
            return f"Tracks: {result.tracks}"
        case FullMonsterEncounterResult():
            return f"Monsters: {result.interpretation}"
        case SettlementNameResult():
            return f"Settlement: {result.name}"
        case SettlementDetailResult():
            return f"{result.detail_type.capitalize()}: {result.interpretation}"
        case EstablishmentCountResult():
            return f"Establishments: {result.count}"
        case EstablishmentNameResult():
            return f"Establishment: {result.name}"
        case SettlementResult():
            if result.settlement_type is None:
                return f"Settlement: {result.interpretation}"
            return f"{result.settlement_type.value.capitalize()}: {result.name.name}"
        case QuestResult():
            return f"Quest: {result.sentence}"
        case NpcActionResult():
            return f"NPC {result.column}: {result.result}"
        case DualPersonalityResult():
            return f"Personality: {result.interpretation}"
        case NpcMotiveResult():
            return f"Motive: {result.interpretation}"
        case NpcProfileResult():
            return f"NPC: {result.personality}, needs {result.need}"
        case ObjectTreasureResult():
            return f"{result.category}: {result.interpretation}"
        case ItemCreationResult():
            return f"Item: {result.interpretation}"
        case InterruptPlotPointResult():
            return f"Interrupt: {result.category}: {result.event}"
        case _:
            assert_never(result)
