"""Exercise model - library entry the user picks from when logging sets."""

from __future__ import annotations

import uuid

from sqlalchemy import Boolean, Enum, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.constants import MAX_EXERCISE_NAME_LENGTH
from app.core.enums import ExerciseCategory
from app.db.base import Base


class Exercise(Base):
    """Exercise definition: name (unique in the library), category, custom flag.

    No relationship to WorkoutSet on purpose: sets copy name and category by
    value, so deleting or renaming an exercise leaves history untouched.
    """

    __tablename__ = "exercises"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(MAX_EXERCISE_NAME_LENGTH), nullable=False, unique=True, index=True)
    category: Mapped[ExerciseCategory] = mapped_column(
        Enum(ExerciseCategory, name="exercise_category"), default=ExerciseCategory.OTHER, nullable=False
    )
    is_custom: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return f"Exercise(name={self.name!r}, category={self.category.value!r})"
