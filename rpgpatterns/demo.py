"""Demo entry points for the builder and weight strategy patterns."""

import logging
from typing import Optional

from rpgpatterns.config import DEFAULT_LOG_FORMAT, DEFAULT_LOG_LEVEL
from rpgpatterns.engine.builder import MainCharacterBuilder
from rpgpatterns.engine.weight import FeatherWeight, HeavyWeight, WeightCalculator
from rpgpatterns.helpers.debug import log_call
from rpgpatterns.models.character import Character, MainCharacter
from rpgpatterns.models.items import Inventory, Item


@log_call
def display_builder() -> MainCharacter:
    """Build a sample main character and print its stats."""
    jimmy = (
        MainCharacterBuilder("Jimmy")
        .set_max_health(200)
        .set_max_stamina(150)
        .build()
    )

    print(f"Character name: {jimmy.name}")
    print(f"Max health for {jimmy.name}: {jimmy.max_health}")
    print(f"Max stamina for {jimmy.name}: {jimmy.max_stamina}")
    return jimmy


def _print_price_per_unit(label: str, item: Item) -> float:
    price = WeightCalculator.price_per_unit(item)
    print(f"{item.name} value = {item.value}")
    print(f"{label} price per unit: {price}")
    return price


@log_call
def display_strategy() -> list[float]:
    """
    Weigh three sample inventories with different weight policies and print the results.

    Returns:
        Applied weights in print order (feather, no policy, heavy)
    """
    daemon = Character(name="Daemon", power_level=10)
    lilith = Character(name="Lilith", power_level=10)
    belphegor = Character(name="Belphegor", power_level=10)

    healing_potion = Item(name="Healing Potion", weight=0.5, value=50.0)
    mana_potion = Item(name="Mana Potion", weight=0.5, value=40.0)
    boost_strength_potion = Item(name="Boost Strength Potion", weight=0.5, value=100.0)

    _print_price_per_unit("Healing potion", healing_potion)
    _print_price_per_unit("Mana potion", mana_potion)
    _print_price_per_unit("Boost strength potion", boost_strength_potion)

    potions = [healing_potion, mana_potion, boost_strength_potion]
    inventories = [
        Inventory(character=daemon, all_items=potions, weight_modifier=FeatherWeight()),
        Inventory(character=lilith, all_items=potions),
        Inventory(character=belphegor, all_items=potions, weight_modifier=HeavyWeight()),
    ]

    applied_weights = []
    for index, inventory in enumerate(inventories, start=1):
        applied_weight = WeightCalculator.applied_weight(inventory)
        print(f"Char{index} - Current applied weight: {applied_weight}")
        applied_weights.append(applied_weight)
    return applied_weights


def main(log_level: Optional[str] = None) -> None:
    """Configure logging and run both demos."""
    logging.basicConfig(level=log_level or DEFAULT_LOG_LEVEL, format=DEFAULT_LOG_FORMAT)
    display_builder()
    display_strategy()
