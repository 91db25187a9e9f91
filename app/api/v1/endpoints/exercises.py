"""Exercise library CRUD endpoints."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import ExerciseCategory
from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCategoryGroup, ExerciseCreate, ExerciseRead, ExerciseUpdate
from app.services.exercise_library import filter_exercises, get_by_name, group_by_category
from app.services.session_store import get_session_with_sets

router = APIRouter()


async def _load_exercises(
    db: AsyncSession,
    q: str | None,
    category: ExerciseCategory | None,
    exclude_session_id: uuid.UUID | None,
) -> list[Exercise]:
    stmt = select(Exercise).order_by(Exercise.name)
    if category is not None:
        stmt = stmt.where(Exercise.category == category)
    result = await db.execute(stmt)
    exercises = filter_exercises(result.scalars().all(), q)
    if exclude_session_id is not None:
        session = await get_session_with_sets(db, exclude_session_id)
        if not session:
            raise HTTPException(status_code=404, detail="Workout not found")
        performed = set(session.unique_exercises)
        exercises = [e for e in exercises if e.name not in performed]
    return exercises


async def _flush_unique(db: AsyncSession, name: str) -> None:
    # The unique index settles concurrent creates/renames that passed the name check
    try:
        await db.flush()
    except IntegrityError as e:
        await db.rollback()
        raise HTTPException(status_code=409, detail=f"Exercise '{name}' already exists") from e


async def _get_or_404(db: AsyncSession, exercise_id: uuid.UUID) -> Exercise:
    result = await db.execute(select(Exercise).where(Exercise.id == exercise_id))
    exercise = result.scalar_one_or_none()
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    q: str | None = None,
    category: ExerciseCategory | None = None,
    exclude_session_id: uuid.UUID | None = None,
):
    """List exercises by name. ``q`` searches names; ``exclude_session_id`` hides ones already in that workout."""
    return await _load_exercises(db, q, category, exclude_session_id)


@router.get("/by-category", response_model=list[ExerciseCategoryGroup])
async def list_exercises_by_category(
    db: AsyncSession = Depends(get_db),
    q: str | None = None,
    exclude_session_id: uuid.UUID | None = None,
):
    """Library sections in canonical category order; empty categories are omitted."""
    exercises = await _load_exercises(db, q, None, exclude_session_id)
    return [
        ExerciseCategoryGroup(
            category=category,
            label=category.label,
            exercises=[ExerciseRead.model_validate(e) for e in members],
        )
        for category, members in group_by_category(exercises)
    ]


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add a custom exercise to the library."""
    if await get_by_name(db, payload.name):
        raise HTTPException(status_code=409, detail=f"Exercise '{payload.name}' already exists")
    exercise = Exercise(name=payload.name, category=payload.category, is_custom=True)
    db.add(exercise)
    await _flush_unique(db, payload.name)
    await db.refresh(exercise)
    return exercise


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    return await _get_or_404(db, exercise_id)


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: uuid.UUID,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename or re-categorise. Logged sets keep the name they were logged with."""
    exercise = await _get_or_404(db, exercise_id)
    data = payload.model_dump(exclude_unset=True, exclude_none=True)
    if "name" in data and data["name"] != exercise.name and await get_by_name(db, data["name"]):
        raise HTTPException(status_code=409, detail=f"Exercise '{data['name']}' already exists")
    for k, v in data.items():
        setattr(exercise, k, v)
    await _flush_unique(db, exercise.name)
    await db.refresh(exercise)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
):
    """Remove from the library. Workout history is not affected."""
    exercise = await _get_or_404(db, exercise_id)
    await db.delete(exercise)
    return None
