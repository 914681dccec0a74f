"""Tests for the quest generator."""

from __future__ import annotations

from juiceroll.generators import quest


def test_plain_quest(scripted) -> None:
    result = quest.generate(scripted(6, 1, 1, 6, 7))
    assert result.sentence == "Find the Ancient Artifact in the Tower"
    assert result.focus_expanded is None
    assert result.dice_results == [6, 1, 1, 6, 7]


def test_italic_entries_are_rolled_in_place(scripted) -> None:
    # Colorful, Monster, Dungeon Feature; then color, descriptor, feature
    result = quest.generate(scripted(9, 3, 2, 5, 2, 3, 6, 9))
    assert result.description_expanded == "Crimson Red"
    assert result.focus_expanded == "Ghostly"
    assert result.location_expanded == "Throne"
    assert result.sentence == (
        "Rescue the Crimson Red (Colorful) Ghostly (Monster) beyond the Throne (Dungeon Feature)"
    )
    assert result.total == 9 + 3 + 2 + 5 + 2
    assert result.dice_results[5:] == [3, 6, 9]


def test_dungeon_location_rolls_a_name(scripted) -> None:
    result = quest.generate(scripted(1, 1, 1, 1, 3, 5, 9, 1))
    assert result.location == "Dungeon"
    assert result.location_expanded == "Crypt of the Silent Bones"
    assert result.sentence.endswith("above the Crypt of the Silent Bones (Dungeon)")


def test_expand_unknown_entry_rolls_nothing(scripted) -> None:
    assert quest.expand("Castle", scripted()) == (None, [])
