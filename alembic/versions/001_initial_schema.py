"""Initial schema: exercises, workout_sessions, workout_sets.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

CATEGORIES = ("CHEST", "BACK", "SHOULDERS", "ARMS", "LEGS", "CORE", "CARDIO", "OTHER")


def upgrade() -> None:
    category = sa.Enum(*CATEGORIES, name="exercise_category")

    op.create_table(
        "exercises",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("category", category, nullable=False),
        sa.Column("is_custom", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_exercises")),
    )
    op.create_index(op.f("ix_exercises_name"), "exercises", ["name"], unique=True)

    op.create_table(
        "workout_sessions",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("notes", sa.Text(), nullable=False),
        sa.Column("ended_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_sessions")),
    )
    op.create_index("ix_workout_sessions_date", "workout_sessions", ["date"], unique=False)

    op.create_table(
        "workout_sets",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("session_id", sa.Uuid(), nullable=False),
        sa.Column("exercise_name", sa.String(length=255), nullable=False),
        sa.Column(
            "exercise_category",
            sa.Enum(*CATEGORIES, name="exercise_category", create_type=False)
            if op.get_bind().dialect.name == "postgresql"
            else category,
            nullable=False,
        ),
        sa.Column("weight", sa.Float(), nullable=False),
        sa.Column("reps", sa.Integer(), nullable=False),
        sa.Column("set_number", sa.Integer(), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(
            ["session_id"],
            ["workout_sessions.id"],
            name=op.f("fk_workout_sets_session_id_workout_sessions"),
            ondelete="CASCADE",
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_workout_sets")),
    )
    op.create_index("ix_workout_sets_session_id", "workout_sets", ["session_id"], unique=False)
    op.create_index(
        "ix_workout_sets_session_exercise", "workout_sets", ["session_id", "exercise_name"], unique=False
    )


def downgrade() -> None:
    op.drop_index("ix_workout_sets_session_exercise", table_name="workout_sets")
    op.drop_index("ix_workout_sets_session_id", table_name="workout_sets")
    op.drop_table("workout_sets")
    op.drop_index("ix_workout_sessions_date", table_name="workout_sessions")
    op.drop_table("workout_sessions")
    op.drop_index(op.f("ix_exercises_name"), table_name="exercises")
    op.drop_table("exercises")
    sa.Enum(name="exercise_category").drop(op.get_bind(), checkfirst=True)
