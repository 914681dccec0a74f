"""Tests for the oracle resolvers other than the Fate Check."""

from __future__ import annotations

from juiceroll.data import meaning, pay_the_price as price_data
from juiceroll.dice import Skew
from juiceroll.models import ChallengeType, ChaosLevel, ExpectationOutcome, FollowUp
from juiceroll.oracles import challenge, details
from juiceroll.oracles.discover_meaning import discover_meaning
from juiceroll.oracles.expectation_check import expectation_check
from juiceroll.oracles.interrupt_plot_point import interrupt_plot_point
from juiceroll.oracles.next_scene import next_scene, roll_focus
from juiceroll.oracles.pay_the_price import pay_the_price
from juiceroll.oracles.random_event import generate_focus, generate_idea, random_event, roll_table
from juiceroll.oracles.scale import roll_scale

# ---------------------------------------------------------------------------
# Next Scene
# ---------------------------------------------------------------------------


class TestNextScene:
    def test_expected_scene_on_doubles_interrupts(self, scripted) -> None:
        result = next_scene(engine=scripted(3, 3))
        assert result.outcome == "expected"
        assert result.is_interrupt
        assert result.interpretation.endswith("[DOUBLES - Interrupt]")

    def test_chaos_shifts_and_clamps_high(self, scripted) -> None:
        result = next_scene(ChaosLevel.chaotic, engine=scripted(6, 5))
        assert result.raw_sum == 11
        assert result.total == 12
        assert result.outcome == "revelation"
        assert not result.is_interrupt

    def test_chaos_clamps_low(self, scripted) -> None:
        result = next_scene("controlled", engine=scripted(1, 2))
        assert result.total == 2
        assert result.outcome == "dramatic_twist"

    def test_unknown_chaos_is_normal(self, scripted) -> None:
        result = next_scene("bonkers", engine=scripted(2, 3))
        assert result.chaos_level is ChaosLevel.normal
        assert result.outcome == "delay"

    def test_focus(self, scripted) -> None:
        result = roll_focus(scripted(10))
        assert result.table == "scene_focus"
        assert result.result == "Ally"


# ---------------------------------------------------------------------------
# Random Event
# ---------------------------------------------------------------------------


class TestRandomEvent:
    def test_four_rolls_in_order(self, scripted) -> None:
        result = random_event(scripted(1, 1, 7, 3))
        assert result.dice_results == [1, 1, 7, 3]
        assert result.focus == "Advance Time"
        assert result.modifier == "Change"
        assert result.category == "person"
        assert result.idea == "Expert"
        assert result.interpretation == "Advance Time: Change Expert (Person)"

    def test_idea_with_fixed_category(self, scripted) -> None:
        result = generate_idea("event", engine=scripted(2, 10))
        assert result.category_roll is None
        assert result.dice_results == [2, 10]
        assert result.interpretation == "Continue Ritual"

    def test_idea_with_rolled_category(self, scripted) -> None:
        result = generate_idea(engine=scripted(2, 10, 1))
        assert result.category == "object"
        assert result.category_roll == 10

    def test_unknown_table_falls_back_to_idea(self, scripted) -> None:
        result = roll_table("nonsense", scripted(4))
        assert result.result == "Element"

    def test_focus_only(self, scripted) -> None:
        result = generate_focus(scripted(8))
        assert result.result == "NPC Action"
        assert result.table == "event_focus"


# ---------------------------------------------------------------------------
# Expectation Check and Discover Meaning
# ---------------------------------------------------------------------------


class TestExpectationCheck:
    def test_double_blank_asks_for_meaning(self, scripted) -> None:
        result = expectation_check(scripted(0, 0))
        assert result.outcome is ExpectationOutcome.modified_idea
        assert result.follow_up is FollowUp.discover_meaning
        assert result.meaning is None

    def test_mixed_dice(self, scripted) -> None:
        result = expectation_check(scripted(1, -1))
        assert result.outcome is ExpectationOutcome.next_most_expected
        assert result.follow_up is None

    def test_opposite_intensified(self, scripted) -> None:
        result = expectation_check(scripted(-1, -1))
        assert result.outcome is ExpectationOutcome.opposite_intensified


def test_discover_meaning_reads_both_d20_tables(scripted) -> None:
    result = discover_meaning(scripted(1, 20))
    assert result.adjective == meaning.ADJECTIVES[0]
    assert result.noun == meaning.NOUNS[19]
    assert result.interpretation == f"{meaning.ADJECTIVES[0]} {meaning.NOUNS[19]}"


# ---------------------------------------------------------------------------
# Details
# ---------------------------------------------------------------------------


class TestDetails:
    def test_color_with_emoji(self, scripted) -> None:
        result = details.roll_color(scripted(3))
        assert result.result == "Crimson Red"
        assert result.emoji == "🟥"

    def test_property_and_intensity(self, scripted) -> None:
        result = details.roll_property(scripted(4, 6))
        assert result.property_name == "Power"
        assert result.intensity == "Maximum"
        assert result.interpretation == "Maximum Power"

    def test_two_properties(self, scripted) -> None:
        result = details.roll_two_properties(scripted(1, 1, 10, 6))
        assert result.first.property_name == "Age"
        assert result.second.property_name == "Weight"
        assert result.dice_results == [1, 1, 10, 6]

    def test_history_detail_signals_follow_up(self, scripted) -> None:
        result = details.roll_detail(engine=scripted(9))
        assert result.result == "History"
        assert result.follow_up is FollowUp.history

    def test_advantage_detail_keeps_higher(self, scripted) -> None:
        result = details.roll_detail(Skew.advantage, engine=scripted(9, 10))
        assert result.result == "Property"
        assert result.second_roll == 10
        assert result.follow_up is FollowUp.property

    def test_plain_detail_has_no_follow_up(self, scripted) -> None:
        assert details.roll_detail(engine=scripted(1)).follow_up is None

    def test_history_with_unknown_skew(self, scripted) -> None:
        result = details.roll_history("sideways", engine=scripted(1))
        assert result.skew is Skew.none
        assert result.result == "Backstory"
        assert result.follow_up is None


# ---------------------------------------------------------------------------
# Challenge
# ---------------------------------------------------------------------------


class TestChallenge:
    def test_dc_table_runs_from_hard_to_easy(self) -> None:
        assert challenge.dc_for_roll(1) == 17
        assert challenge.dc_for_roll(10) == 8
        assert [challenge.dc_for_roll(r) for r in range(1, 11)] == list(range(17, 7, -1))

    def test_easy_dc_keeps_higher_roll(self, scripted) -> None:
        result = challenge.roll_dc("easy", engine=scripted(3, 7))
        assert result.roll == 7
        assert result.dc == 11
        assert result.dice_results == [3, 7]

    def test_hard_dc_keeps_lower_roll(self, scripted) -> None:
        result = challenge.roll_dc("hard", engine=scripted(3, 7))
        assert result.roll == 3
        assert result.dc == 15

    def test_quick_dc(self, scripted) -> None:
        assert challenge.roll_quick_dc(scripted(3, 4)).dc == 13

    def test_balanced_dc_weights_the_middle(self, scripted) -> None:
        engine = scripted(1, 50, 100)
        assert [challenge.roll_balanced_dc(engine).dc for _ in range(3)] == [17, 13, 8]

    def test_full_challenge(self, scripted) -> None:
        result = challenge.roll_challenge(engine=scripted(1, 10, 10, 1))
        assert result.physical_skill == "Medicine"
        assert result.physical_dc == 8
        assert result.mental_skill == "Willpower"
        assert result.mental_dc == 17
        assert result.dc_method == "Random (1d10)"

    def test_skill_picks_type_with_d2(self, scripted) -> None:
        result = challenge.roll_skill(engine=scripted(2, 5))
        assert result.challenge_type is ChallengeType.mental
        assert result.skill == "Insight"
        assert result.suggested_dc == 13

    def test_percentage_chance(self, scripted) -> None:
        result = challenge.roll_percentage_chance(scripted(5))
        assert (result.min_percent, result.max_percent) == (33, 50)
        assert result.percent == 42


# ---------------------------------------------------------------------------
# Scale and Pay the Price
# ---------------------------------------------------------------------------


class TestScale:
    def test_top_of_table_doubles(self, scripted) -> None:
        result = roll_scale(10, engine=scripted(1, 1, 6))
        assert result.scale_roll == 8
        assert result.multiplier == 2.0
        assert result.scaled_value == 20

    def test_bottom_of_table(self, scripted) -> None:
        result = roll_scale(engine=scripted(-1, -1, 1))
        assert result.scale_roll == -1
        assert result.modifier_label == "-100%"
        assert result.scaled_value is None

    def test_no_change(self, scripted) -> None:
        assert roll_scale(engine=scripted(0, 0, 3)).modifier_label == "No Change"


class TestPayThePrice:
    def test_consequence(self, scripted) -> None:
        result = pay_the_price(engine=scripted(1))
        assert not result.is_major_twist
        assert result.result == price_data.CONSEQUENCES[0]

    def test_critical_rolls_major_twist(self, scripted) -> None:
        result = pay_the_price(True, engine=scripted(3))
        assert result.is_major_twist
        assert result.result == price_data.MAJOR_TWISTS[2]


class TestInterruptPlotPoint:
    def test_ten_reads_as_zero(self, scripted) -> None:
        result = interrupt_plot_point(scripted(10, 4))
        assert result.category == "Personal"
        assert result.event == "Injury Flares"
        assert result.interpretation == "Personal: Injury Flares"
        assert result.total == 14

    def test_category_ranges(self, scripted) -> None:
        result = interrupt_plot_point(scripted(3, 10))
        assert result.category == "Tension"
        assert result.event == "Alarm Raised"
