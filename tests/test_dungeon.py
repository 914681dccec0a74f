"""Tests for the dungeon generator."""

from __future__ import annotations

import pytest

from juiceroll.generators import dungeon
from juiceroll.models import DungeonMode, DungeonPhase, DungeonState

EXPLORING = DungeonState(phase=DungeonPhase.exploring, doubles_count=1)


def test_dungeon_name(scripted) -> None:
    result = dungeon.generate_name(scripted(5, 9, 1))
    assert result.name == "Crypt of the Silent Bones"
    assert result.dice_results == [5, 9, 1]


class TestOnePass:
    def test_new_dungeon_enters_with_disadvantage(self, scripted) -> None:
        result = dungeon.next_area(engine=scripted(7, 3))
        assert result.phase is DungeonPhase.entering
        assert result.chosen_roll == 3
        assert result.area_type == "Passage"
        assert not result.phase_change
        assert result.new_state.phase is DungeonPhase.entering
        assert result.dice_results == [7, 3]

    def test_doubles_while_entering_switch_to_exploring(self, scripted) -> None:
        result = dungeon.next_area(engine=scripted(5, 5))
        assert result.is_doubles
        assert result.phase_change
        assert result.area_type == "Small Chamber: 2 Doors"
        assert result.new_state.phase is DungeonPhase.exploring
        assert result.new_state.doubles_count == 1
        assert result.interpretation.endswith("(DOUBLES! Switch to Exploring)")

    def test_exploring_uses_advantage(self, scripted) -> None:
        result = dungeon.next_area(EXPLORING, engine=scripted(2, 8))
        assert result.chosen_roll == 8
        assert result.area_type == "Large Chamber: 3 Doors"

    def test_exploring_never_flips_back(self, scripted) -> None:
        result = dungeon.next_area(EXPLORING, engine=scripted(4, 4))
        assert result.is_doubles
        assert not result.phase_change
        assert result.new_state.phase is DungeonPhase.exploring

    def test_is_entering_overrides_state(self, scripted) -> None:
        result = dungeon.next_area(EXPLORING, is_entering=True, engine=scripted(2, 8))
        assert result.phase is DungeonPhase.entering
        assert result.chosen_roll == 2

    def test_passage_cascade(self, scripted) -> None:
        result = dungeon.next_area(include_passage=True, engine=scripted(2, 9, 7))
        assert result.area_type == "Passage"
        assert result.passage is not None
        assert result.passage.result == "T-Junction"
        assert result.interpretation == "Passage: T-Junction"
        assert result.dice_results == [2, 9, 7]

    def test_passage_not_rolled_for_rooms(self, scripted) -> None:
        result = dungeon.next_area(include_passage=True, engine=scripted(9, 4))
        assert result.passage is None

    def test_occupied_room_condition_uses_d10(self, scripted) -> None:
        result = dungeon.full_area(EXPLORING, engine=scripted(6, 1, 10))
        assert result.area_type == "Large Chamber: 1 Door"
        assert result.condition is not None
        assert result.condition.die_size == 10
        assert result.condition.result == "Lavish"

    def test_unoccupied_room_condition_uses_d6(self, scripted) -> None:
        result = dungeon.full_area(EXPLORING, is_occupied=False, engine=scripted(6, 1, 6))
        assert result.condition.die_size == 6
        assert result.condition.result == "Bare"

    def test_no_condition_outside_rooms(self, scripted) -> None:
        result = dungeon.full_area(EXPLORING, engine=scripted(9, 1))
        assert result.area_type == "Stairs"
        assert result.condition is None


class TestTwoPass:
    def test_starts_with_advantage(self, scripted) -> None:
        result = dungeon.two_pass_area(engine=scripted(3, 8, 9))
        assert result.chosen_roll == 8
        assert result.condition.result == "Well Kept"
        assert result.new_state.mode is DungeonMode.two_pass
        assert result.new_state.doubles_count == 0
        assert not result.stop_map_generation

    def test_first_doubles_switch_to_disadvantage(self, scripted) -> None:
        first = dungeon.two_pass_area(engine=scripted(2, 2, 1))
        assert first.area_type == "Passage"
        assert first.passage.result == "Narrow, Straight"
        assert first.is_doubles
        assert not first.had_first_doubles
        assert not first.stop_map_generation
        assert "[DOUBLES - Switch to @- for remaining areas]" in first.interpretation

        second = dungeon.two_pass_area(first.new_state, engine=scripted(9, 4, 5))
        assert second.had_first_doubles
        assert second.chosen_roll == 4
        assert second.area_type == "Small Chamber: 1 Door"

    def test_second_doubles_stop_the_map(self, scripted) -> None:
        state = DungeonState(mode=DungeonMode.two_pass, doubles_count=1)
        result = dungeon.two_pass_area(state, engine=scripted(10, 10))
        assert result.area_type == "Exit"
        assert result.is_second_doubles
        assert result.stop_map_generation
        assert result.new_state.map_stopped

    def test_stopped_map_rolls_nothing(self, scripted) -> None:
        state = DungeonState(mode=DungeonMode.two_pass, doubles_count=2, map_stopped=True)
        result = dungeon.two_pass_area(state, engine=scripted())
        assert result.is_terminal
        assert result.area_type == "Small Chamber: 1 Door"
        assert result.dice_results == []
        assert result.roll1 is None


class TestEncounters:
    def test_monster_expands(self, scripted) -> None:
        result = dungeon.full_encounter(engine=scripted(1, 4, 7))
        assert result.encounter.result == "Monster"
        assert result.monster.descriptor == "Corrupted"
        assert result.monster.ability == "Paralysis"
        assert result.interpretation == "Monster: Corrupted monster with Paralysis"
        assert result.dice_results == [1, 4, 7]

    def test_trap_expands(self, scripted) -> None:
        result = dungeon.full_encounter(engine=scripted(3, 2, 3))
        assert result.trap.interpretation == "Collapse Ceiling"
        assert result.monster is None

    def test_nothing_has_no_child(self, scripted) -> None:
        result = dungeon.full_encounter(is_lingering=True, engine=scripted(6))
        assert result.encounter.die_size == 6
        assert result.interpretation == "Nothing"

    def test_lingering_hazard_uses_d6(self, scripted) -> None:
        result = dungeon.full_encounter(is_lingering=True, engine=scripted(2, 5))
        assert result.natural_hazard.result == "Thin Ice"
        assert result.natural_hazard.die_size == 6


class TestTrapProcedure:
    @pytest.mark.parametrize(
        ("is_searching", "passed", "expected"),
        [
            (True, True, "AVOID"),
            (True, False, "LOCATE"),
            (False, True, "LOCATE"),
            (False, False, "TRIGGER"),
        ],
    )
    def test_outcome_table(self, is_searching, passed, expected) -> None:
        assert dungeon.trap_outcome(is_searching, passed) == expected

    def test_searching(self, scripted) -> None:
        result = dungeon.trap_procedure(engine=scripted(1, 1, 1))
        assert result.dc == 17
        assert result.interpretation == (
            "Ambush Arrows | Perception DC 17 | Searching (10 min, @+): Pass=AVOID, Fail=LOCATE"
        )

    def test_passive_hard(self, scripted) -> None:
        result = dungeon.trap_procedure(False, "hard", engine=scripted(2, 3, 10, 4))
        assert result.dc_rolls == [10, 4]
        assert result.dc_roll == 4
        assert result.dc == 14
        assert "Perception DC 14 (Hard)" in result.interpretation
        assert result.pass_outcome == "LOCATE"
        assert result.fail_outcome == "TRIGGER"

    def test_easy_keeps_higher_dc_roll(self, scripted) -> None:
        result = dungeon.trap_procedure(True, "easy", engine=scripted(2, 3, 3, 9))
        assert result.dc == 9


def test_malformed_state_is_clamped() -> None:
    assert DungeonState(doubles_count=7).doubles_count == 2


def test_unreadable_doubles_count_falls_back_to_zero() -> None:
    assert DungeonState(doubles_count=None).doubles_count == 0
    assert DungeonState(doubles_count="twice").doubles_count == 0


def test_two_pass_ignores_one_pass_doubles(scripted) -> None:
    result = dungeon.two_pass_area(EXPLORING, engine=scripted(3, 8, 9))
    assert not result.had_first_doubles
    assert result.chosen_roll == 8
    assert result.new_state.mode is DungeonMode.two_pass
    assert result.new_state.doubles_count == 0
