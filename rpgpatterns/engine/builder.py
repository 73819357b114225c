"""Fluent builder for main characters."""

import logging
from typing import Any, Optional

from rpgpatterns.models.character import MainCharacter

logger = logging.getLogger(__name__)


class BuilderFinalizedError(RuntimeError):
    """Raised when a builder is changed after build() was called."""


class MainCharacterBuilder:
    """Accumulates main character stats before producing an immutable MainCharacter."""

    def __init__(self, name: str) -> None:
        """Initialize builder with the character name; no stat is set."""
        self._fields: dict[str, Any] = {"name": name}
        self._built: Optional[MainCharacter] = None

    @property
    def is_built(self) -> bool:
        """Whether build() has been called."""
        return self._built is not None

    def set_max_health(self, value: int) -> "MainCharacterBuilder":
        """
        Set maximum health. A later call overwrites an earlier one.

        Raises:
            TypeError: If value is not an int
            BuilderFinalizedError: If build() was already called
        """
        return self._set("max_health", value)

    def set_max_stamina(self, value: int) -> "MainCharacterBuilder":
        """Set maximum stamina. A later call overwrites an earlier one."""
        return self._set("max_stamina", value)

    def build(self) -> MainCharacter:
        """
        Finalize the character.

        Calling build() again returns the same character instance. The builder
        can no longer be changed afterwards.

        Returns:
            Immutable MainCharacter
        """
        if self._built is None:
            self._built = MainCharacter(**self._fields)
            logger.debug(f"Built main character: {self._built}")
        return self._built

    def _set(self, field: str, value: int) -> "MainCharacterBuilder":
        if self._built is not None:
            raise BuilderFinalizedError(
                f"Cannot set {field} on {self._fields['name']!r}: character was already built"
            )
        # bool is an int subclass but never a stat value
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"{field} must be an int, got {type(value).__name__}")
        self._fields[field] = value
        return self
