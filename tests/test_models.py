"""Tests for character and item models."""

import pytest
from pydantic import ValidationError

from rpgpatterns.engine.weight import HeavyWeight
from rpgpatterns.models.character import Character, MainCharacter
from rpgpatterns.models.items import Inventory, Item


class TestCharacterModels:
    """Test suite for Character and MainCharacter."""

    def test_character_fields(self):
        """Test Character stores name and power level."""
        character = Character(name="Lilith", power_level=10)
        assert character.name == "Lilith"
        assert character.power_level == 10

    def test_character_is_immutable(self):
        """Test Character rejects assignment."""
        character = Character(name="Lilith", power_level=10)
        with pytest.raises(ValidationError):
            character.power_level = 11

    def test_main_character_defaults(self):
        """Test MainCharacter stats default to unset."""
        character = MainCharacter(name="Jimmy")
        assert character.max_health is None
        assert character.max_stamina is None

    def test_main_character_requires_name(self):
        """Test MainCharacter cannot be created without a name."""
        with pytest.raises(ValidationError):
            MainCharacter()


class TestItem:
    """Test suite for Item."""

    def test_item_is_value_type(self):
        """Test equal fields mean equal items."""
        assert Item(name="Mana Potion", weight=0.5, value=40.0) == Item(
            name="Mana Potion", weight=0.5, value=40.0
        )

    def test_negative_weight_rejected(self):
        """Test weight must be non-negative."""
        with pytest.raises(ValidationError):
            Item(name="Balloon", weight=-1.0, value=1.0)

    def test_negative_value_rejected(self):
        """Test value must be non-negative."""
        with pytest.raises(ValidationError):
            Item(name="Curse", weight=1.0, value=-1.0)

    def test_price_per_unit(self):
        """Test price per unit for the sample potions."""
        assert Item(name="Healing Potion", weight=0.5, value=50.0).price_per_unit() == 100.0
        assert Item(name="Mana Potion", weight=0.5, value=40.0).price_per_unit() == 80.0
        assert Item(name="Boost Strength Potion", weight=0.5, value=100.0).price_per_unit() == 200.0


class TestInventory:
    """Test suite for Inventory."""

    def test_keeps_order_and_duplicates(self, daemon, potions):
        """Test items keep insertion order and duplicates."""
        items = potions + [potions[0]]
        inventory = Inventory(character=daemon, all_items=items)
        assert [item.name for item in inventory.all_items] == [
            "Healing Potion",
            "Mana Potion",
            "Boost Strength Potion",
            "Healing Potion",
        ]
        assert inventory.total_weight() == 2.0

    def test_policy_is_shared(self, daemon, potions):
        """Test one policy instance can back several inventories."""
        policy = HeavyWeight()
        first = Inventory(character=daemon, all_items=potions, weight_modifier=policy)
        second = Inventory(character=Character(name="Belphegor", power_level=10), weight_modifier=policy)
        assert first.weight_modifier is second.weight_modifier

    def test_rejects_non_policy(self, daemon, potions):
        """Test weight_modifier must be a WeightModifier."""
        with pytest.raises(ValidationError):
            Inventory(character=daemon, all_items=potions, weight_modifier="heavy")

    def test_applied_weight_recomputed(self, daemon, potions):
        """Test applied weight gives the same value on every call."""
        inventory = Inventory(character=daemon, all_items=potions, weight_modifier=HeavyWeight())
        assert inventory.applied_weight() == inventory.applied_weight()
