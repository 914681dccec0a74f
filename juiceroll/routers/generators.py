"""Generator routes.

Generators hold no state between requests. Clients send the ``new_state`` from
the previous response back as ``state`` on the next one.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from juiceroll.dependencies import get_engine
from juiceroll.dice import RollEngine
from juiceroll.followups import resolve
from juiceroll.generators import (
    dialog,
    dungeon,
    monsters,
    npc_action,
    object_treasure,
    quest,
    settlement,
    wilderness,
)
from juiceroll.history import to_record
from juiceroll.schemas import (
    ConversationRequest,
    DialogRequest,
    DungeonAreaRequest,
    DungeonEncounterRequest,
    EstablishmentRequest,
    ItemRequest,
    NpcActionRequest,
    NpcCombatRequest,
    NpcProfileRequest,
    SettlementRequest,
    SkewRequest,
    TrapRequest,
    TreasureRequest,
    TwoPassRequest,
    WildernessEncounterRequest,
    WildernessStateRequest,
    WildernessTransitionRequest,
)

router = APIRouter(prefix="/generators", tags=["generators"])


@router.post("/dialog")
async def dialog_exchange(body: DialogRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(dialog.next_exchange(body.state, engine=engine))


@router.post("/dialog/conversation")
async def dialog_conversation(
    body: ConversationRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(dialog.converse(body.max_exchanges, engine=engine))


@router.post("/dungeon/area")
async def dungeon_area(body: DungeonAreaRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    if body.with_condition:
        result = dungeon.full_area(
            body.state,
            is_entering=body.is_entering,
            is_occupied=body.is_occupied,
            condition_skew=body.condition_skew,
            include_passage=body.include_passage,
            use_d6_for_passage=body.use_d6_for_passage,
            passage_skew=body.passage_skew,
            engine=engine,
        )
    else:
        result = dungeon.next_area(
            body.state,
            is_entering=body.is_entering,
            include_passage=body.include_passage,
            use_d6_for_passage=body.use_d6_for_passage,
            passage_skew=body.passage_skew,
            engine=engine,
        )
    return to_record(result)


@router.post("/dungeon/two-pass")
async def dungeon_two_pass(body: TwoPassRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = dungeon.two_pass_area(
        body.state,
        is_occupied=body.is_occupied,
        use_d6_for_passage=body.use_d6_for_passage,
        passage_skew=body.passage_skew,
        engine=engine,
    )
    return to_record(result)


@router.post("/dungeon/encounter")
async def dungeon_encounter(
    body: DungeonEncounterRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(dungeon.full_encounter(body.is_lingering, body.skew, engine=engine))


@router.post("/dungeon/trap")
async def dungeon_trap(body: TrapRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(dungeon.trap_procedure(body.is_searching, body.dc_skew, engine=engine))


@router.post("/wilderness/transition")
async def wilderness_transition(
    body: WildernessTransitionRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(wilderness.transition(body.state, engine=engine))


@router.post("/wilderness/encounter")
async def wilderness_encounter(
    body: WildernessEncounterRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    result = wilderness.roll_encounter(
        body.state,
        dangerous_terrain=body.dangerous_terrain,
        has_map=body.has_map,
        engine=engine,
    )
    if body.resolve_follow_up:
        result = resolve(result, engine=engine, wilderness_state=body.state)
    return to_record(result)


@router.post("/wilderness/weather")
async def wilderness_weather(
    body: WildernessStateRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(wilderness.roll_weather(body.state, engine=engine))


@router.post("/wilderness/monsters")
async def wilderness_monsters(
    body: WildernessStateRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(monsters.full_encounter(body.state.environment_row, engine=engine))


@router.post("/settlement")
async def settlement_sketch(
    body: SettlementRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    if body.settlement_type is None:
        return to_record(settlement.generate_full(engine))
    return to_record(settlement.generate(body.settlement_type, engine=engine))


@router.post("/settlement/name")
async def settlement_name(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(settlement.generate_name(engine))


@router.post("/settlement/establishment")
async def settlement_establishment(
    body: EstablishmentRequest, engine: RollEngine = Depends(get_engine)
) -> dict:
    return to_record(settlement.roll_establishment(body.is_village, engine=engine))


@router.post("/settlement/establishment-name")
async def settlement_establishment_name(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(settlement.generate_establishment_name(engine))


@router.post("/settlement/news")
async def settlement_news(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(settlement.roll_news(engine))


@router.post("/quest")
async def quest_hook(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(quest.generate(engine))


@router.post("/npc/action")
async def npc_action_roll(body: NpcActionRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(npc_action.roll_action(body.disposition, body.context, engine=engine))


@router.post("/npc/combat")
async def npc_combat_roll(body: NpcCombatRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(npc_action.roll_combat_action(body.focus, body.objective, engine=engine))


@router.post("/npc/profile")
async def npc_profile(body: NpcProfileRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    if body.full:
        return to_record(npc_action.generate_profile(body.need_skew, engine=engine))
    return to_record(npc_action.generate_simple_profile(body.need_skew, engine=engine))


@router.post("/npc/personality")
async def npc_personality(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(npc_action.roll_dual_personality(engine))


@router.post("/npc/need")
async def npc_need(body: SkewRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(npc_action.roll_need(body.skew, engine=engine))


@router.post("/npc/motive")
async def npc_motive(engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(npc_action.roll_motive(engine))


@router.post("/treasure")
async def treasure(body: TreasureRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    return to_record(object_treasure.generate_by_type(body.category, body.skew, engine=engine))


@router.post("/treasure/item")
async def treasure_item(body: ItemRequest, engine: RollEngine = Depends(get_engine)) -> dict:
    result = object_treasure.generate_full_item(body.skew, body.include_color, engine=engine)
    return to_record(result)
