"""Exercise schemas."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MAX_EXERCISE_NAME_LENGTH
from app.core.enums import ExerciseCategory


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=MAX_EXERCISE_NAME_LENGTH)
    category: ExerciseCategory = ExerciseCategory.OTHER

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        # "  Squat  " is stored as "Squat"; whitespace-only names fail min_length
        return value.strip() if isinstance(value, str) else value


class ExerciseCreate(ExerciseBase):
    pass


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=MAX_EXERCISE_NAME_LENGTH)
    category: ExerciseCategory | None = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    is_custom: bool = False


class ExerciseCategoryGroup(BaseModel):
    """Library section: one category and its exercises, sorted by name."""

    category: ExerciseCategory
    label: str
    exercises: list[ExerciseRead] = []
