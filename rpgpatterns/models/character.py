"""Character models."""

from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from rpgpatterns.engine.builder import MainCharacterBuilder


class MainCharacter(BaseModel):
    """
    Main character produced by MainCharacterBuilder.

    Create instances with MainCharacter.builder(name); direct construction is
    kept for validation and equality checks.
    """

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Character name")

    # None means the stat was never set, which is not the same as 0
    max_health: Optional[int] = Field(default=None, description="Maximum health points")
    max_stamina: Optional[int] = Field(default=None, description="Maximum stamina points")

    @staticmethod
    def builder(name: str) -> "MainCharacterBuilder":
        """Start building a main character with the given name."""
        from rpgpatterns.engine.builder import MainCharacterBuilder

        return MainCharacterBuilder(name)


class Character(BaseModel):
    """Character that owns an inventory."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Character name")
    power_level: int = Field(description="Power level")
