"""Tests for history records and summaries."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

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
from juiceroll.history import from_record, summarize, to_record
from juiceroll.models import (
    ConversationResult,
    DungeonState,
    FateCheckResult,
    NpcProfileResult,
    SettlementResult,
    TwoPassAreaResult,
    WildernessState,
)
from juiceroll.oracles import challenge, details, scale
from juiceroll.oracles.dice_roll import roll_notation
from juiceroll.oracles.fate_check import fate_check
from juiceroll.oracles.interrupt_plot_point import interrupt_plot_point
from juiceroll.oracles.next_scene import next_scene


class TestRecords:
    def test_record_is_plain_json(self, scripted) -> None:
        record = to_record(next_scene(engine=scripted(3, 4)))
        assert record["kind"] == "next_scene"
        assert json.loads(json.dumps(record)) == record

    def test_round_trip_selects_class_by_kind(self, scripted) -> None:
        rolled = dungeon.two_pass_area(engine=scripted(2, 2, 1))
        restored = from_record(to_record(rolled))
        assert isinstance(restored, TwoPassAreaResult)
        assert restored == rolled

    def test_nested_random_event_round_trips(self, scripted) -> None:
        engine = scripted(0, 0, 3, 1, 1, 7, 3)
        rolled = resolve(fate_check(primary_on_left=True, engine=engine), engine=engine)
        restored = from_record(to_record(rolled))
        assert isinstance(restored, FateCheckResult)
        assert restored.random_event == rolled.random_event
        assert restored.total == rolled.total
        assert restored.dice_results == rolled.dice_results

    def test_conversation_exchanges_round_trip(self, scripted) -> None:
        rolled = dialog.converse(3, engine=scripted(1, 2, 4, 4))
        restored = from_record(to_record(rolled))
        assert isinstance(restored, ConversationResult)
        assert restored.exchanges == rolled.exchanges

    def test_wilderness_follow_up_round_trips(self, scripted) -> None:
        state = WildernessState(environment_row=6, type_row=6)
        engine = scripted(2, 4, 2, 6, 3, 4, 5, 2)
        rolled = resolve(
            wilderness.roll_encounter(state, engine=engine), engine=engine, wilderness_state=state
        )
        restored = from_record(to_record(rolled))
        assert restored.follow_up_result == rolled.follow_up_result

    def test_settlement_round_trips(self, scripted) -> None:
        rolled = settlement.generate("city", engine=scripted(9, 1, 1, 3, 1, 6, 4, 9, 3))
        restored = from_record(to_record(rolled))
        assert isinstance(restored, SettlementResult)
        assert restored == rolled

    def test_npc_profile_round_trips(self, scripted) -> None:
        rolled = npc_action.generate_profile(engine=scripted(1, 2, 5, 9, 7, 3, 1, 1, 2, 2))
        restored = from_record(to_record(rolled))
        assert isinstance(restored, NpcProfileResult)
        assert restored.motive.history == rolled.motive.history
        assert restored == rolled

    def test_stored_state_is_clamped_on_read(self, scripted) -> None:
        record = to_record(dungeon.next_area(engine=scripted(7, 3)))
        record["new_state"]["doubles_count"] = 99
        assert from_record(record).new_state == DungeonState(doubles_count=2)

    def test_unknown_kind_rejected(self) -> None:
        with pytest.raises(ValidationError):
            from_record({"kind": "tarot", "description": "?"})


class TestSummaries:
    def test_one_line_per_kind(self, scripted) -> None:
        cases = [
            (roll_notation("2d6", engine=scripted(3, 4)), "2d6 = 7"),
            (scale.roll_scale(engine=scripted(0, 0, 3)), "Scale: No Change"),
            (details.roll_color(scripted(3)), "Color: Crimson Red"),
            (challenge.roll_dc(engine=scripted(1)), "DC 17"),
            (dungeon.generate_name(scripted(5, 9, 1)), "Dungeon: Crypt of the Silent Bones"),
            (monsters.roll_tracks(2, engine=scripted(1)), "Tracks: Broken Twigs"),
            (
                wilderness.initialize_at(6),
                "Wilderness: Wooded Forest",
            ),
            (
                settlement.generate_full(scripted(9, 1, 2, 8)),
                "Settlement: Redbridge - Inn - Monster Sighting",
            ),
            (
                quest.generate(scripted(6, 1, 1, 6, 7)),
                "Quest: Find the Ancient Artifact in the Tower",
            ),
            (npc_action.roll_action(engine=scripted(10, 3)), "NPC action: Attack"),
            (
                object_treasure.generate(engine=scripted(4, 3, 4, 5)),
                "Accessory: Simple Silver Necklace",
            ),
            (interrupt_plot_point(scripted(10, 4)), "Interrupt: Personal: Injury Flares"),
        ]
        for result, expected in cases:
            assert summarize(result) == expected

    def test_terminal_two_pass(self, scripted) -> None:
        state = DungeonState(map_stopped=True)
        result = dungeon.two_pass_area(state, engine=scripted())
        assert summarize(result) == "Area (two-pass): Small Chamber: 1 Door (map complete)"

    def test_summary_of_restored_record(self, scripted) -> None:
        record = to_record(dialog.next_exchange(dialog.start(), engine=scripted(5, 5)))
        assert summarize(from_record(record)) == "Dialog: conversation ends"
