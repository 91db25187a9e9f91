"""Workout session endpoints: start, log sets, finish, discard, history."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.workout import WorkoutSession, WorkoutSet
from app.schemas.workout import (
    ExerciseGroupRead,
    WorkoutSessionCreate,
    WorkoutSessionDetail,
    WorkoutSessionSummary,
    WorkoutSessionUpdate,
    WorkoutSetCreate,
    WorkoutSetRead,
)
from app.services import session_store
from app.services.session_store import SessionAlreadyEndedError

router = APIRouter()


def _summary_fields(session: WorkoutSession) -> dict:
    # Every value is recomputed from session.sets; nothing is stored
    return {
        "id": session.id,
        "date": session.date,
        "name": session.name,
        "notes": session.notes,
        "ended_at": session.ended_at,
        "is_active": session.is_active,
        "set_count": len(session.sets),
        "exercise_count": len(session.unique_exercises),
        "total_volume": session.total_volume,
        "formatted_duration": session.formatted_duration,
    }


def _detail(session: WorkoutSession) -> WorkoutSessionDetail:
    return WorkoutSessionDetail(
        **_summary_fields(session),
        unique_exercises=session.unique_exercises,
        grouped_sets=[
            ExerciseGroupRead(
                exercise=group.exercise,
                category=group.category,
                sets=[WorkoutSetRead.model_validate(s) for s in group.sets],
            )
            for group in session.grouped_sets
        ],
    )


async def _get_or_404(db: AsyncSession, workout_id: uuid.UUID) -> WorkoutSession:
    session = await session_store.get_session_with_sets(db, workout_id)
    if not session:
        raise HTTPException(status_code=404, detail="Workout not found")
    return session


@router.get("", response_model=list[WorkoutSessionSummary])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """Workout history, newest first."""
    sessions = await session_store.list_sessions(db, skip=skip, limit=limit)
    return [WorkoutSessionSummary(**_summary_fields(s)) for s in sessions]


@router.post("", response_model=WorkoutSessionDetail, status_code=201)
async def start_workout(
    payload: WorkoutSessionCreate,
    db: AsyncSession = Depends(get_db),
):
    """Start a new workout (active until finished)."""
    session = await session_store.start_session(
        db, name=payload.name, notes=payload.notes, local_hour=payload.local_hour
    )
    return _detail(await _get_or_404(db, session.id))


@router.get("/{workout_id}", response_model=WorkoutSessionDetail)
async def get_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Workout with exercises in performed order and sets grouped per exercise."""
    return _detail(await _get_or_404(db, workout_id))


@router.patch("/{workout_id}", response_model=WorkoutSessionDetail)
async def update_workout(
    workout_id: uuid.UUID,
    payload: WorkoutSessionUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename a workout or edit its notes."""
    session = await _get_or_404(db, workout_id)
    for k, v in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(session, k, v)
    await db.flush()
    return _detail(session)


@router.post("/{workout_id}/finish", response_model=WorkoutSessionDetail)
async def finish_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Record the end time. A workout can only be finished once."""
    session = await _get_or_404(db, workout_id)
    try:
        await session_store.finish_session(db, session)
    except SessionAlreadyEndedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return _detail(session)


@router.delete("/{workout_id}", status_code=204)
async def discard_workout(
    workout_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete a workout and all of its sets."""
    session = await _get_or_404(db, workout_id)
    await session_store.discard_session(db, session)
    return None


@router.post("/{workout_id}/sets", response_model=WorkoutSetRead, status_code=201)
async def add_set_to_workout(
    workout_id: uuid.UUID,
    payload: WorkoutSetCreate,
    db: AsyncSession = Depends(get_db),
):
    """Log a set. The set number is assigned from the exercise's sets so far."""
    session = await _get_or_404(db, workout_id)
    try:
        set_ = await session_store.add_set(
            db,
            session,
            exercise_name=payload.exercise_name,
            exercise_category=payload.exercise_category,
            weight=payload.weight,
            reps=payload.reps,
        )
    except SessionAlreadyEndedError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    return set_


@router.delete("/{workout_id}/sets/{set_id}", status_code=204)
async def delete_set(
    workout_id: uuid.UUID,
    set_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Delete one set. Other sets are not renumbered."""
    result = await db.execute(
        select(WorkoutSet).where(WorkoutSet.id == set_id, WorkoutSet.session_id == workout_id)
    )
    set_ = result.scalar_one_or_none()
    if not set_:
        raise HTTPException(status_code=404, detail="Set not found")
    await session_store.delete_set(db, set_)
    return None
