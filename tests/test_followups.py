"""Tests for follow-up resolution."""

from __future__ import annotations

from juiceroll.followups import resolve
from juiceroll.generators import wilderness
from juiceroll.models import (
    DetailWithFollowUpResult,
    FateOutcome,
    FullMonsterEncounterResult,
    WildernessState,
)
from juiceroll.oracles import details
from juiceroll.oracles.expectation_check import expectation_check
from juiceroll.oracles.fate_check import fate_check

FOREST = WildernessState(environment_row=6, type_row=6)


class TestFateCheck:
    def test_double_blank_embeds_random_event(self, scripted) -> None:
        engine = scripted(0, 0, 3, 1, 1, 7, 3)
        result = resolve(fate_check(primary_on_left=True, engine=engine), engine=engine)
        assert result.outcome is FateOutcome.yes_but
        assert result.random_event is not None
        assert result.random_event.idea == "Expert"
        assert result.interpretation == (
            "Yes, but... (Mundane) + Advance Time: Change Expert (Person)"
        )

    def test_resolved_result_is_not_resolved_twice(self, scripted) -> None:
        engine = scripted(0, 0, 3, 1, 1, 7, 3)
        once = resolve(fate_check(primary_on_left=True, engine=engine), engine=engine)
        assert resolve(once, engine=scripted()) is once

    def test_ordinary_answer_is_returned_unchanged(self, scripted) -> None:
        result = fate_check(engine=scripted(1, 1, 2))
        assert resolve(result, engine=scripted()) is result


def test_expectation_double_blank_embeds_meaning(scripted) -> None:
    engine = scripted(0, 0, 1, 20)
    result = resolve(expectation_check(engine), engine=engine)
    assert result.meaning is not None
    assert result.meaning.adjective_roll == 1
    assert result.meaning.noun_roll == 20


class TestDetails:
    def test_history_detail(self, scripted) -> None:
        engine = scripted(9, 1)
        result = resolve(details.roll_detail(engine=engine), engine=engine)
        assert isinstance(result, DetailWithFollowUpResult)
        assert result.history_result.result == "Backstory"
        assert result.property_result is None
        assert result.interpretation == "History: Backstory"
        assert result.dice_results == [9, 1]

    def test_property_detail(self, scripted) -> None:
        engine = scripted(10, 4, 6)
        result = resolve(details.roll_detail(engine=engine), engine=engine)
        assert result.property_result.interpretation == "Maximum Power"
        assert result.history_result is None


class TestWilderness:
    def test_monster_follow_up_uses_environment(self, scripted) -> None:
        engine = scripted(2, 4, 2, 6, 3, 4, 5, 2)
        encounter = wilderness.roll_encounter(FOREST, engine=engine)
        result = resolve(encounter, engine=engine, wilderness_state=FOREST)
        assert isinstance(result.follow_up_result, FullMonsterEncounterResult)
        assert result.follow_up_result.is_forest
        assert result.interpretation == "Monster: 3 Twig Blights, 1 Needle Blight"

    def test_weather_without_state_uses_the_middle(self, scripted) -> None:
        engine = scripted(3, 1)
        result = resolve(wilderness.roll_encounter(engine=engine), engine=engine)
        assert result.follow_up_result.kind == "wilderness_weather"
        assert result.follow_up_result.weather == "Freezing Cold"

    def test_dungeon_follow_up_names_it(self, scripted) -> None:
        engine = scripted(5, 5, 9, 1)
        result = resolve(wilderness.roll_encounter(FOREST, engine=engine), engine=engine)
        assert result.follow_up_result.name == "Crypt of the Silent Bones"

    def test_challenge_follow_up(self, scripted) -> None:
        engine = scripted(4, 1, 10, 10, 1)
        result = resolve(wilderness.roll_encounter(FOREST, engine=engine), engine=engine)
        assert result.follow_up_result.kind == "challenge"

    def test_hazard_follow_up(self, scripted) -> None:
        engine = scripted(1, 1)
        result = resolve(wilderness.roll_encounter(FOREST, engine=engine), engine=engine)
        assert result.follow_up_result.result == "Rockslide"

    def test_plain_encounter_unchanged(self, scripted) -> None:
        encounter = wilderness.roll_encounter(FOREST, engine=scripted(9))
        assert resolve(encounter, engine=scripted()) is encounter
