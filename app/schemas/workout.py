"""WorkoutSession and WorkoutSet schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.core.constants import MAX_EXERCISE_NAME_LENGTH, MAX_SESSION_NAME_LENGTH
from app.core.enums import ExerciseCategory
from app.services.set_entry import parse_reps, parse_weight


class WorkoutSetCreate(BaseModel):
    """A confirmed weight/reps entry. Exercise name and category are copied by value."""

    exercise_name: str = Field(..., min_length=1, max_length=MAX_EXERCISE_NAME_LENGTH)
    exercise_category: ExerciseCategory
    weight: float
    reps: int

    @field_validator("exercise_name", mode="before")
    @classmethod
    def strip_name(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("weight", mode="before")
    @classmethod
    def check_weight(cls, value):
        # InvalidSetEntryError is a ValueError, reported as a 422
        return parse_weight(value)

    @field_validator("reps", mode="before")
    @classmethod
    def check_reps(cls, value):
        return parse_reps(value)


class WorkoutSetRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: UUID
    session_id: UUID
    exercise_name: str
    exercise_category: ExerciseCategory
    weight: float
    reps: int
    set_number: int
    completed_at: datetime
    volume: float
    display_weight: str


class ExerciseGroupRead(BaseModel):
    """Sets of one exercise, in set-number order."""

    exercise: str
    category: ExerciseCategory
    sets: list[WorkoutSetRead] = []


class WorkoutSessionCreate(BaseModel):
    # Omitted name → named after the time of day ("Morning Workout", ...)
    name: str | None = Field(None, max_length=MAX_SESSION_NAME_LENGTH)
    notes: str = ""
    # Client's local hour (0-23) for the default name; server clock when omitted
    local_hour: int | None = Field(None, ge=0, le=23)


class WorkoutSessionUpdate(BaseModel):
    name: str | None = Field(None, max_length=MAX_SESSION_NAME_LENGTH)
    notes: str | None = None


class WorkoutSessionSummary(BaseModel):
    """History row: session fields plus derived totals."""

    id: UUID
    date: datetime
    name: str
    notes: str = ""
    ended_at: datetime | None = None
    is_active: bool
    set_count: int = 0
    exercise_count: int = 0
    total_volume: float = 0.0
    formatted_duration: str | None = None


class WorkoutSessionDetail(WorkoutSessionSummary):
    """Session with exercises in performed order and grouped sets."""

    unique_exercises: list[str] = []
    grouped_sets: list[ExerciseGroupRead] = []
