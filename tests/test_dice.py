"""Unit tests for the dice rolling engine."""

import pytest

from juiceroll.dice import FATE_SIDES, DiceError, RollEngine, Skew, clamp_skew, parse, roll
from juiceroll.oracles import dice_roll


class TestParse:
    def test_simple_notation(self) -> None:
        assert parse("2d6") == (2, 6, 0)

    def test_implicit_one_die(self) -> None:
        assert parse("d20") == (1, 20, 0)

    def test_positive_modifier(self) -> None:
        assert parse("2d6+3") == (2, 6, 3)

    def test_negative_modifier(self) -> None:
        assert parse("3d10-2") == (3, 10, -2)

    def test_case_insensitive(self) -> None:
        assert parse("2D6") == (2, 6, 0)

    def test_fate_dice(self) -> None:
        assert parse("4dF") == (4, FATE_SIDES, 0)
        assert parse("2df+1") == (2, FATE_SIDES, 1)

    def test_invalid_word(self) -> None:
        with pytest.raises(DiceError):
            parse("roll some dice")

    def test_invalid_zero_dice(self) -> None:
        with pytest.raises(DiceError):
            parse("0d6")

    def test_invalid_zero_sides(self) -> None:
        with pytest.raises(DiceError):
            parse("2d0")

    def test_invalid_empty(self) -> None:
        with pytest.raises(DiceError):
            parse("")

    def test_too_many_dice(self) -> None:
        with pytest.raises(DiceError, match="Too many dice"):
            parse("101d6")

    def test_too_many_sides(self) -> None:
        with pytest.raises(DiceError, match="Too many sides"):
            parse("2d1001")


class TestRoll:
    def test_d6_in_range(self) -> None:
        for _ in range(20):
            assert 1 <= roll("d6") <= 6

    def test_modifier_applied(self) -> None:
        assert roll("1d1+5") == 6

    def test_fate_dice_in_range(self) -> None:
        for _ in range(20):
            assert -4 <= roll("4dF") <= 4

    def test_scripted_total(self, scripted) -> None:
        assert roll("2d6+1", scripted(3, 5)) == 9

    def test_invalid_notation_raises(self) -> None:
        with pytest.raises(DiceError):
            roll("bad notation")


class TestEngine:
    def test_seeded_engines_repeat(self) -> None:
        first = RollEngine.seeded(42)
        second = RollEngine.seeded(42)
        assert first.roll_dice(10, 20) == second.roll_dice(10, 20)

    def test_die_needs_a_side(self) -> None:
        with pytest.raises(DiceError):
            RollEngine().roll_die(0)

    def test_fate_die_values(self, scripted) -> None:
        assert scripted(-1, 0, 1).roll_fate_dice(3) == [-1, 0, 1]

    def test_coin_flip(self, scripted) -> None:
        engine = scripted(1, 2)
        assert engine.coin_flip() is True
        assert engine.coin_flip() is False


class TestTwoPools:
    def test_advantage_keeps_higher_sum(self, scripted) -> None:
        pools = scripted(2, 3, 6, 1).roll_with_advantage(2, 6)
        assert pools.pool1 == [2, 3]
        assert pools.pool2 == [6, 1]
        assert pools.chosen_sum == 7
        assert pools.discarded_sum == 5
        assert pools.chosen_pool == 2
        assert not pools.is_doubles

    def test_disadvantage_keeps_lower_sum(self, scripted) -> None:
        pools = scripted(8, 3).roll_with_disadvantage(1, 10)
        assert pools.chosen_sum == 3
        assert pools.discarded_sum == 8
        assert pools.chosen_pool == 2

    def test_tie_keeps_first_pool_and_is_doubles(self, scripted) -> None:
        pools = scripted(4, 4).roll_with_advantage(1, 10)
        assert pools.is_doubles
        assert pools.chosen_pool == 1
        assert pools.chosen_sum == pools.discarded_sum == 4

    def test_doubles_compare_sums_not_faces(self, scripted) -> None:
        pools = scripted(1, 5, 3, 3).roll_with_disadvantage(2, 6)
        assert pools.is_doubles

    def test_roll_with_skew_shows_both_draws(self, scripted) -> None:
        value, dice = scripted(2, 9).roll_with_skew(10, Skew.advantage)
        assert value == 9
        assert dice == [2, 9]

    def test_roll_with_no_skew_draws_once(self, scripted) -> None:
        value, dice = scripted(7).roll_with_skew(10, Skew.none)
        assert (value, dice) == (7, [7])


class TestSkewedD6:
    def test_fair_die_covers_every_face(self, scripted) -> None:
        engine = scripted(1, 19, 37, 55, 73, 91)
        assert [engine.roll_skewed_d6(0) for _ in range(6)] == [1, 2, 3, 4, 5, 6]

    def test_positive_skew_favors_six(self, scripted) -> None:
        engine = scripted(3, 4, 76, 108)
        assert [engine.roll_skewed_d6(3) for _ in range(4)] == [1, 2, 6, 6]

    def test_negative_skew_favors_one(self, scripted) -> None:
        engine = scripted(33, 106)
        assert engine.roll_skewed_d6(-3) == 1
        assert engine.roll_skewed_d6(-3) == 6

    def test_skew_is_clamped(self) -> None:
        assert clamp_skew(9) == 3
        assert clamp_skew(-9) == -3


class TestDiceResults:
    def test_notation_result(self, scripted) -> None:
        result = dice_roll.roll_notation("2d6+1", engine=scripted(3, 5))
        assert result.kind == "dice"
        assert result.dice_results == [3, 5]
        assert result.total == 9
        assert result.modifier == 1

    def test_two_pools_result(self, scripted) -> None:
        result = dice_roll.roll_two_pools(1, 20, Skew.disadvantage, 2, engine=scripted(15, 6))
        assert result.total == 8
        assert result.discarded_sum == 15
        assert result.notation == "1d20@-+2"
        assert result.metadata["chosen_pool"] == 2

    def test_standard_result(self, scripted) -> None:
        result = dice_roll.roll_standard(3, 6, -2, engine=scripted(1, 2, 3))
        assert result.notation == "3d6-2"
        assert result.total == 4

    def test_fate_result(self, scripted) -> None:
        result = dice_roll.roll_fate(4, engine=scripted(1, 1, 0, -1))
        assert result.total == 1
        assert result.interpretation == "+1"
