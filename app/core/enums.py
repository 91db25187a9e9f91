"""Shared enums for models and API."""

from enum import Enum


class ExerciseCategory(str, Enum):
    """Exercise library category. Declaration order is the display order."""

    CHEST = "chest"
    BACK = "back"
    SHOULDERS = "shoulders"
    ARMS = "arms"
    LEGS = "legs"
    CORE = "core"
    CARDIO = "cardio"
    OTHER = "other"

    @property
    def label(self) -> str:
        return self.value.capitalize()
