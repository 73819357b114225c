"""Data models module for rpgpatterns."""

# Characters
from rpgpatterns.models.character import Character, MainCharacter

# Items and Inventory
from rpgpatterns.models.items import Inventory, Item, WeightModifier

__all__ = [
    # Characters
    "Character",
    "MainCharacter",
    # Items and Inventory
    "Item",
    "Inventory",
    "WeightModifier",
]
