"""Pytest configuration and fixtures."""

import pytest

from rpgpatterns.models.character import Character
from rpgpatterns.models.items import Item


@pytest.fixture
def daemon():
    """Sample character owning an inventory."""
    return Character(name="Daemon", power_level=10)


@pytest.fixture
def potions():
    """Three potions of weight 0.5 each."""
    return [
        Item(name="Healing Potion", weight=0.5, value=50.0),
        Item(name="Mana Potion", weight=0.5, value=40.0),
        Item(name="Boost Strength Potion", weight=0.5, value=100.0),
    ]


@pytest.fixture
def mixed_items():
    """Items with uneven weights."""
    return [
        Item(name="Sword", weight=3.25, value=120.0),
        Item(name="Shield", weight=5.5, value=80.0),
        Item(name="Arrow", weight=0.05, value=1.0),
        Item(name="Arrow", weight=0.05, value=1.0),
    ]
