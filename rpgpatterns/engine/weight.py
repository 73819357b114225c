"""Weight modification policies and weight calculation."""

import logging

from rpgpatterns.config import (
    DEFAULT_FEATHER_WEIGHT_FACTOR,
    DEFAULT_HEAVY_WEIGHT_FACTOR,
    DEFAULT_HEAVY_WEIGHT_OFFSET,
)
from rpgpatterns.models.items import Inventory, Item, WeightModifier

logger = logging.getLogger(__name__)


class NoWeightModifier(WeightModifier):
    """Identity policy: the raw weight is used as-is."""

    __slots__ = ()

    name = "none"

    def modified_weight(self, item_list: list[Item]) -> float:
        return self.raw_weight(item_list)


class FeatherWeight(WeightModifier):
    """Light policy: items weigh a fixed fraction of their raw weight."""

    __slots__ = ("_factor",)

    name = "feather"

    def __init__(self, factor: float = DEFAULT_FEATHER_WEIGHT_FACTOR) -> None:
        self._factor = factor

    @property
    def factor(self) -> float:
        """Fraction of the raw weight that is carried."""
        return self._factor

    def modified_weight(self, item_list: list[Item]) -> float:
        original_weight = self.raw_weight(item_list)
        return original_weight * self.factor


class HeavyWeight(WeightModifier):
    """Heavy policy: raw weight minus an offset, then scaled up."""

    __slots__ = ("_offset", "_factor")

    name = "heavy"

    def __init__(
        self,
        offset: float = DEFAULT_HEAVY_WEIGHT_OFFSET,
        factor: float = DEFAULT_HEAVY_WEIGHT_FACTOR,
    ) -> None:
        self._offset = offset
        self._factor = factor

    @property
    def offset(self) -> float:
        """Weight subtracted before scaling."""
        return self._offset

    @property
    def factor(self) -> float:
        return self._factor

    def modified_weight(self, item_list: list[Item]) -> float:
        original_weight = self.raw_weight(item_list)
        return (original_weight - self.offset) * self.factor


# Shared stateless policy instances, keyed by name
_WEIGHT_MODIFIERS: dict[str, WeightModifier] = {}


def register_weight_modifier(modifier: WeightModifier) -> WeightModifier:
    """Register a policy instance under its name, replacing any previous one."""
    if not modifier.name:
        raise ValueError(f"{modifier!r} has no name to register under")
    _WEIGHT_MODIFIERS[modifier.name] = modifier
    logger.debug(f"Registered weight modifier: {modifier.name}")
    return modifier


def get_weight_modifier(name: str) -> WeightModifier:
    """
    Look up a registered policy by name.

    Raises:
        ValueError: If no policy is registered under that name
    """
    try:
        return _WEIGHT_MODIFIERS[name]
    except KeyError:
        raise ValueError(
            f"Unknown weight modifier {name!r}, expected one of {sorted(_WEIGHT_MODIFIERS)}"
        ) from None


def list_weight_modifiers() -> list[str]:
    """Names of all registered policies."""
    return sorted(_WEIGHT_MODIFIERS)


register_weight_modifier(NoWeightModifier())
register_weight_modifier(FeatherWeight())
register_weight_modifier(HeavyWeight())


class WeightCalculator:
    """Computes item prices and inventory weights."""

    @staticmethod
    def price_per_unit(item: Item) -> float:
        """Item value per unit of weight. Raises ValueError for weightless items."""
        return item.price_per_unit()

    @staticmethod
    def total_weight(inventory: Inventory) -> float:
        """Sum of every item weight in the inventory."""
        return inventory.total_weight()

    @staticmethod
    def applied_weight(inventory: Inventory) -> float:
        """
        Weight of the inventory after its policy is applied.

        Args:
            inventory: Inventory to weigh

        Returns:
            Policy result, or the raw total weight when the inventory has no policy
        """
        weight = inventory.applied_weight()
        logger.debug(
            f"Applied weight for {inventory.character.name}: {weight} "
            f"(policy={inventory.weight_modifier!r})"
        )
        return weight
