"""Item and inventory models."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from rpgpatterns.models.character import Character

logger = logging.getLogger(__name__)


class Item(BaseModel):
    """Priced item that can be carried in an inventory."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Item name")
    weight: float = Field(ge=0, description="Item weight")
    value: float = Field(ge=0, description="Item value")

    def price_per_unit(self) -> float:
        """
        Value of the item per unit of weight.

        Raises:
            ValueError: If the item weighs nothing
        """
        logger.debug("%s value = %s", self.name, self.value)
        if self.weight == 0:
            raise ValueError(f"Item {self.name!r} has zero weight, price per unit is undefined")
        return self.value / self.weight


class WeightModifier(ABC):
    """Policy that turns a list of items into a modified carried weight.

    Policy instances are shared between inventories, so subclasses keep their
    constants read-only.
    """

    __slots__ = ()

    name: str = ""

    @abstractmethod
    def modified_weight(self, item_list: list[Item]) -> float:
        """Compute the modified weight of the given items."""

    @staticmethod
    def raw_weight(item_list: list[Item]) -> float:
        """Plain sum of item weights."""
        return sum((item.weight for item in item_list), 0.0)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Inventory(BaseModel):
    """Items carried by a character, with an optional weight policy."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)  # Immutable model

    character: Character = Field(description="Character carrying the inventory")
    all_items: list[Item] = Field(default_factory=list, description="Carried items, in order")
    weight_modifier: Optional[WeightModifier] = Field(
        default=None, description="Weight policy (None means raw weight is used)"
    )

    def total_weight(self) -> float:
        """Sum of all item weights, 0.0 for an empty inventory."""
        return WeightModifier.raw_weight(self.all_items)

    def applied_weight(self) -> float:
        """Weight after the inventory's policy is applied, if it has one."""
        if self.weight_modifier is not None:
            return self.weight_modifier.modified_weight(self.all_items)
        return self.total_weight()
