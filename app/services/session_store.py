"""Persistence rules for workout sessions and their sets.

The store owns the lifecycle: a session is started, sets are logged and
deleted while it is active, and it is either finished once or discarded
together with every set it owns.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.clock import utcnow
from app.core.constants import DEFAULT_SESSION_NAME, SESSION_NAME_BY_HOUR
from app.core.enums import ExerciseCategory
from app.models.workout import WorkoutSession, WorkoutSet
from app.services.aggregates import next_set_number

logger = logging.getLogger(__name__)


class SessionAlreadyEndedError(Exception):
    """The session was already finished; it cannot change state or take new sets."""

    def __init__(self, session_id: uuid.UUID):
        super().__init__(f"Workout {session_id} is already finished")
        self.session_id = session_id


def default_session_name(hour: int) -> str:
    """'Morning Workout', 'Afternoon Workout', ... for a local hour 0-23."""
    for start, end, name in SESSION_NAME_BY_HOUR:
        if start <= hour < end:
            return name
    return DEFAULT_SESSION_NAME


async def start_session(
    db: AsyncSession,
    name: str | None = None,
    notes: str = "",
    started_at: datetime | None = None,
    local_hour: int | None = None,
) -> WorkoutSession:
    """Create an active session.

    Without a ``name`` the session is named after the time of day: the
    client's ``local_hour`` when given, else the server's local clock.
    """
    started_at = started_at or utcnow()
    if name is None:
        if local_hour is None:
            local_hour = started_at.astimezone().hour
        name = default_session_name(local_hour)
    session = WorkoutSession(date=started_at, name=name, notes=notes)
    db.add(session)
    await db.flush()
    logger.info("Started workout %s (%s)", session.id, session.name)
    return session


async def get_session_with_sets(db: AsyncSession, session_id: uuid.UUID) -> WorkoutSession | None:
    """Session with all of its sets loaded (in no particular order)."""
    result = await db.execute(
        select(WorkoutSession)
        .where(WorkoutSession.id == session_id)
        .options(selectinload(WorkoutSession.sets))
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def list_sessions(db: AsyncSession, skip: int = 0, limit: int = 50) -> list[WorkoutSession]:
    """History, newest first, with sets loaded for the summary columns."""
    result = await db.execute(
        select(WorkoutSession)
        .options(selectinload(WorkoutSession.sets))
        .order_by(WorkoutSession.date.desc())
        .offset(skip)
        .limit(limit)
    )
    return list(result.scalars().all())


async def _lock_active(db: AsyncSession, session: WorkoutSession) -> None:
    """Write-lock the session row while it is still active.

    The no-op update holds the row until the caller commits, so a concurrent
    finish either waits for this transaction or has already ended the row.
    """
    result = await db.execute(
        update(WorkoutSession)
        .where(WorkoutSession.id == session.id, WorkoutSession.ended_at.is_(None))
        .values(ended_at=None)
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise SessionAlreadyEndedError(session.id)


async def add_set(
    db: AsyncSession,
    session: WorkoutSession,
    exercise_name: str,
    exercise_category: ExerciseCategory,
    weight: float,
    reps: int,
) -> WorkoutSet:
    """Log a set; ``set_number`` is the count of this exercise's sets so far + 1.

    ``session`` must have its sets loaded (see ``get_session_with_sets``).
    """
    if not session.is_active:
        raise SessionAlreadyEndedError(session.id)
    await _lock_active(db, session)
    set_ = WorkoutSet(
        session=session,
        exercise_name=exercise_name,
        exercise_category=exercise_category,
        weight=weight,
        reps=reps,
        set_number=next_set_number(session.sets, exercise_name),
        completed_at=utcnow(),
    )
    db.add(set_)
    await db.flush()
    return set_


async def delete_set(db: AsyncSession, set_: WorkoutSet) -> None:
    """Remove one set. Remaining sets keep their numbers."""
    await db.delete(set_)
    await db.flush()


async def finish_session(
    db: AsyncSession,
    session: WorkoutSession,
    ended_at: datetime | None = None,
) -> WorkoutSession:
    """The only Active → Ended transition. Ended is terminal."""
    if not session.is_active:
        raise SessionAlreadyEndedError(session.id)
    # Conditional on the stored row: a concurrent finish that committed first wins
    result = await db.execute(
        update(WorkoutSession)
        .where(WorkoutSession.id == session.id, WorkoutSession.ended_at.is_(None))
        .values(ended_at=ended_at or utcnow())
        .execution_options(synchronize_session=False)
    )
    if result.rowcount == 0:
        raise SessionAlreadyEndedError(session.id)
    await db.refresh(session, ["ended_at"])
    logger.info("Finished workout %s", session.id)
    return session


async def discard_session(db: AsyncSession, session: WorkoutSession) -> int:
    """Delete the session and every set it owns in the caller's transaction.

    Returns the number of sets removed.
    """
    result = await db.execute(delete(WorkoutSet).where(WorkoutSet.session_id == session.id))
    await db.delete(session)
    await db.flush()
    logger.info("Discarded workout %s with %d sets", session.id, result.rowcount)
    return result.rowcount
