"""Tests for objects and treasure."""

from __future__ import annotations

from juiceroll.dice import Skew
from juiceroll.generators import object_treasure


def test_accessory(scripted) -> None:
    result = object_treasure.generate(engine=scripted(4, 3, 4, 5))
    assert result.category == "Accessory"
    assert result.interpretation == "Simple Silver Necklace"
    assert result.column_labels == ["Quality", "Material", "Type"]
    assert result.total == 16


class TestTreasure:
    def test_container(self, scripted) -> None:
        result = object_treasure.generate(engine=scripted(2, 6, 5, 4))
        assert result.interpretation == "Vast Chest full of Gems"

    def test_no_container(self, scripted) -> None:
        result = object_treasure.generate(engine=scripted(2, 5, 1, 3))
        assert result.material == "None"
        assert result.interpretation == "Large Gold"


def test_document(scripted) -> None:
    result = object_treasure.generate(engine=scripted(3, 4, 5, 1))
    assert result.interpretation == "Map: Prophecy about a Person"
    assert result.column_labels == ["Type", "Content", "Subject"]


def test_advantage_skews_every_die(scripted) -> None:
    result = object_treasure.generate("advantage", engine=scripted(1, 6, 2, 3, 5, 4, 1, 1))
    assert result.category == "Armor"
    assert result.interpretation == "Standard Iron Gloves"
    assert result.skew is Skew.advantage
    assert result.dice_results == [1, 6, 2, 3, 5, 4, 1, 1]
    assert result.total == 15


class TestByType:
    def test_chosen_category(self, scripted) -> None:
        result = object_treasure.generate_by_type("weapon", engine=scripted(6, 6, 5))
        assert result.category == "Weapon"
        assert result.category_roll == 0
        assert result.interpretation == "Legendary Mithril Sword"

    def test_unknown_category_is_rolled(self, scripted) -> None:
        result = object_treasure.generate_by_type("spoon", engine=scripted(4, 3, 4, 5))
        assert result.category == "Accessory"


class TestItems:
    def test_item_without_color(self, scripted) -> None:
        result = object_treasure.generate_full_item(engine=scripted(4, 3, 4, 5, 1, 1, 2, 2))
        assert result.color is None
        assert result.interpretation.startswith("Simple Silver Necklace - ")
        assert result.properties.second.property_name == "Durability"

    def test_item_with_color(self, scripted) -> None:
        engine = scripted(4, 3, 4, 5, 1, 1, 2, 2, 7)
        result = object_treasure.generate_full_item(include_color=True, engine=engine)
        assert result.color.result == "Ocean Blue"
        assert result.dice_results[-1] == 7
