"""Pattern engine package."""

from rpgpatterns.engine.builder import BuilderFinalizedError, MainCharacterBuilder
from rpgpatterns.engine.weight import (
    FeatherWeight,
    HeavyWeight,
    NoWeightModifier,
    WeightCalculator,
    get_weight_modifier,
    list_weight_modifiers,
    register_weight_modifier,
)

__all__ = [
    "BuilderFinalizedError",
    "MainCharacterBuilder",
    "FeatherWeight",
    "HeavyWeight",
    "NoWeightModifier",
    "WeightCalculator",
    "get_weight_modifier",
    "list_weight_modifiers",
    "register_weight_modifier",
]
