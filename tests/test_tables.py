"""Tests for range lookup tables and lenient option parsing."""

import logging

import pytest

from juiceroll.dice import SKEW_TABLES, SKEW_TOTAL, Skew
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
from juiceroll.models import ChaosLevel, Likelihood
from juiceroll.options import normalize, parse_option
from juiceroll.oracles import (
    challenge,
    details,
    discover_meaning,
    interrupt_plot_point,
    next_scene,
    pay_the_price,
    random_event,
    scale,
)
from juiceroll.tables import LookupTable, TableEntry, TableError, normalize_d10

SCENE = LookupTable.from_ranges(
    "scene",
    [(2, 2, "twist"), (3, 5, "complication"), (6, 8, "expected"), (9, 12, "opportunity")],
)


class TestLookup:
    def test_range_hits(self) -> None:
        assert SCENE.lookup(2) == "twist"
        assert SCENE.lookup(4) == "complication"
        assert SCENE.lookup(8) == "expected"
        assert SCENE.lookup(12) == "opportunity"

    def test_miss_returns_default(self) -> None:
        assert SCENE.lookup(13) is None
        assert SCENE.lookup(1, default="fallback") == "fallback"

    def test_lookup_does_not_clamp(self) -> None:
        assert SCENE.lookup(0) is None
        assert SCENE.lookup(SCENE.clamp(0)) == "twist"

    def test_bounds(self) -> None:
        assert SCENE.min_key == 2
        assert SCENE.max_key == 12
        assert SCENE.clamp(20) == 12

    def test_from_sequence_starts_at_one(self) -> None:
        table = LookupTable.from_sequence("colors", ["red", "green", "blue"])
        assert table.lookup(1) == "red"
        assert table.lookup(3) == "blue"
        assert len(table) == 3
        assert table.results() == ["red", "green", "blue"]

    def test_from_sequence_custom_start(self) -> None:
        table = LookupTable.from_sequence("zero based", ["a", "b"], start=0)
        assert table.lookup(0) == "a"


class TestValidation:
    def test_overlap_rejected(self) -> None:
        with pytest.raises(TableError, match="overlapping"):
            LookupTable.from_ranges("bad", [(1, 5, "a"), (5, 10, "b")])

    def test_gap_rejected(self) -> None:
        with pytest.raises(TableError, match="gap"):
            LookupTable.from_ranges("bad", [(1, 4, "a"), (6, 10, "b")])

    def test_inverted_range_rejected(self) -> None:
        with pytest.raises(TableError, match="inverted"):
            LookupTable("bad", [TableEntry(5, 1, "a")])

    def test_empty_rejected(self) -> None:
        with pytest.raises(TableError):
            LookupTable("empty", [])


def test_normalize_d10() -> None:
    assert normalize_d10(10) == 0
    assert normalize_d10(7) == 7


class TestOptions:
    def test_normalize_spellings(self) -> None:
        assert normalize("Even Odds") == "even_odds"
        assert normalize("EvenOdds") == "even_odds"
        assert normalize("even-odds") == "even_odds"

    def test_parse_member_and_value(self) -> None:
        assert parse_option(Likelihood, "likely", Likelihood.even_odds) is Likelihood.likely
        assert parse_option(Skew, Skew.advantage, Skew.none) is Skew.advantage

    def test_none_is_default(self) -> None:
        assert parse_option(ChaosLevel, None, ChaosLevel.normal) is ChaosLevel.normal

    def test_unknown_falls_back_with_warning(self, caplog) -> None:
        with caplog.at_level(logging.WARNING, logger="juiceroll.options"):
            parsed = parse_option(ChaosLevel, "apocalyptic", ChaosLevel.normal)
        assert parsed is ChaosLevel.normal
        assert "apocalyptic" in caplog.text


# (table, lowest face, highest face) for every table the resolvers read
D10 = (1, 10)
PRODUCTION_TABLES = [
    *[
        (table, *D10)
        for table in (
            dungeon.AREA_TABLE,
            dungeon.PASSAGE_TABLE,
            dungeon.CONDITION_TABLE,
            dungeon.TYPE_TABLE,
            dungeon.DESCRIPTION_TABLE,
            dungeon.SUBJECT_TABLE,
            dungeon.ENCOUNTER_TABLE,
            dungeon.DESCRIPTOR_TABLE,
            dungeon.ABILITY_TABLE,
            dungeon.TRAP_ACTION_TABLE,
            dungeon.TRAP_SUBJECT_TABLE,
            dungeon.FEATURE_TABLE,
            dungeon.HAZARD_TABLE,
            wilderness.ENCOUNTER_TABLE,
            wilderness.WEATHER_TABLE,
            wilderness.HAZARD_TABLE,
            wilderness.FEATURE_TABLE,
            monsters.DIFFICULTY_TABLE,
            challenge.DC_TABLE,
            challenge.PHYSICAL_TABLE,
            challenge.MENTAL_TABLE,
            details.COLOR_TABLE,
            details.PROPERTY_TABLE,
            details.DETAIL_TABLE,
            details.HISTORY_TABLE,
            next_scene.FOCUS_TABLE,
            random_event.FOCUS_TABLE,
            random_event.MODIFIER_TABLE,
            random_event.CATEGORY_TABLE,
            *random_event.IDEA_TABLES.values(),
            pay_the_price.CONSEQUENCE_TABLE,
            pay_the_price.TWIST_TABLE,
            settlement.PREFIX_TABLE,
            settlement.SUFFIX_TABLE,
            settlement.ESTABLISHMENT_TABLE,
            settlement.ARTISAN_TABLE,
            settlement.NEWS_TABLE,
            quest.OBJECTIVE_TABLE,
            quest.DESCRIPTION_TABLE,
            quest.FOCUS_TABLE,
            quest.PREPOSITION_TABLE,
            quest.LOCATION_TABLE,
            quest.ENVIRONMENT_TABLE,
            npc_action.PERSONALITY_TABLE,
            npc_action.NEED_TABLE,
            npc_action.MOTIVE_TABLE,
            npc_action.ACTION_TABLE,
            npc_action.COMBAT_TABLE,
            *interrupt_plot_point.EVENT_TABLES.values(),
        )
    ],
    (details.INTENSITY_TABLE, 1, 6),
    (object_treasure.CATEGORY_TABLE, 1, 6),
    *[(table, 1, 6) for tables in object_treasure.COLUMN_TABLES.values() for table in tables],
    (discover_meaning.ADJECTIVE_TABLE, 1, 20),
    (discover_meaning.NOUN_TABLE, 1, 20),
    (challenge.BALANCED_TABLE, 1, 100),
    (next_scene.SCENE_TABLE, 2, 12),
    (scale.SCALE_TABLE, -1, 8),
    (dialog.DIRECTION_TABLE, 0, 9),
    (dialog.SUBJECT_TABLE, 0, 9),
    (interrupt_plot_point.CATEGORY_TABLE, 0, 9),
    *[(table, 1, SKEW_TOTAL) for table in SKEW_TABLES.values()],
]


@pytest.mark.parametrize(
    ("table", "low", "high"),
    [pytest.param(t, lo, hi, id=t.name) for t, lo, hi in PRODUCTION_TABLES],
)
def test_production_table_covers_its_die(table, low, high) -> None:
    assert (table.min_key, table.max_key) == (low, high)
    for key in range(low, high + 1):
        assert table.lookup(key) is not None, f"{table.name} misses {key}"
