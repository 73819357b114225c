"""Builder and strategy pattern demos for RPG characters and inventories."""

from rpgpatterns.engine import (
    BuilderFinalizedError,
    FeatherWeight,
    HeavyWeight,
    MainCharacterBuilder,
    NoWeightModifier,
    WeightCalculator,
)
from rpgpatterns.models import Character, Inventory, Item, MainCharacter, WeightModifier

__all__ = [
    "BuilderFinalizedError",
    "Character",
    "FeatherWeight",
    "HeavyWeight",
    "Inventory",
    "Item",
    "MainCharacter",
    "MainCharacterBuilder",
    "NoWeightModifier",
    "WeightCalculator",
    "WeightModifier",
]
