"""WorkoutSession and WorkoutSet models."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Enum, Float, ForeignKey, Index, Integer, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.clock import utcnow
from app.core.constants import MAX_EXERCISE_NAME_LENGTH, MAX_SESSION_NAME_LENGTH
from app.core.enums import ExerciseCategory
from app.db.base import Base
from app.services import aggregates


class WorkoutSession(Base):
    """A single workout. Active until ``ended_at`` is set on finish.

    All summary values are computed from ``sets`` on every access.
    """

    __tablename__ = "workout_sessions"
    __table_args__ = (Index("ix_workout_sessions_date", "date"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    name: Mapped[str] = mapped_column(String(MAX_SESSION_NAME_LENGTH), default="", nullable=False)
    notes: Mapped[str] = mapped_column(Text, default="", nullable=False)
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    # Sets are removed explicitly by session_store.discard_session; passive_deletes
    # stops the ORM from nulling session_id on loaded children.
    sets: Mapped[list["WorkoutSet"]] = relationship(
        "WorkoutSet", back_populates="session", passive_deletes="all"
    )

    def __init__(self, **kwargs):
        kwargs.setdefault("date", utcnow())
        kwargs.setdefault("name", "")
        kwargs.setdefault("notes", "")
        super().__init__(**kwargs)

    @property
    def is_active(self) -> bool:
        return self.ended_at is None

    @property
    def total_volume(self) -> float:
        return aggregates.total_volume(self.sets)

    @property
    def unique_exercises(self) -> list[str]:
        return aggregates.unique_exercises(self.sets)

    @property
    def grouped_sets(self) -> list[aggregates.ExerciseGroup]:
        return aggregates.grouped_sets(self.sets)

    @property
    def formatted_duration(self) -> str | None:
        return aggregates.format_duration(self.date, self.ended_at)


class WorkoutSet(Base):
    """One logged set. Exercise identity is copied by value, not referenced."""

    __tablename__ = "workout_sets"
    __table_args__ = (
        Index("ix_workout_sets_session_id", "session_id"),
        Index("ix_workout_sets_session_exercise", "session_id", "exercise_name"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    session_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("workout_sessions.id", ondelete="CASCADE"), nullable=False
    )
    exercise_name: Mapped[str] = mapped_column(String(MAX_EXERCISE_NAME_LENGTH), nullable=False)
    exercise_category: Mapped[ExerciseCategory] = mapped_column(
        Enum(ExerciseCategory, name="exercise_category"), nullable=False
    )
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    session: Mapped["WorkoutSession"] = relationship("WorkoutSession", back_populates="sets")

    def __init__(self, **kwargs):
        kwargs.setdefault("completed_at", utcnow())
        super().__init__(**kwargs)

    @property
    def volume(self) -> float:
        return aggregates.set_volume(self.weight, self.reps)

    @property
    def display_weight(self) -> str:
        return aggregates.display_weight(self.weight)
