"""Exercise library: first-launch seeding, search and category grouping."""

import logging
from collections.abc import Iterable

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.enums import ExerciseCategory
from app.core.seed_data import SEED_EXERCISES
from app.models.exercise import Exercise

logger = logging.getLogger(__name__)


async def seed_exercises(db: AsyncSession) -> int:
    """Insert the built-in exercises if the library is empty. Returns rows added."""
    count = (await db.execute(select(func.count()).select_from(Exercise))).scalar_one()
    if count:
        return 0
    db.add_all(Exercise(name=name, category=category, is_custom=False) for name, category in SEED_EXERCISES)
    await db.flush()
    logger.info("Seeded exercise library with %d exercises", len(SEED_EXERCISES))
    return len(SEED_EXERCISES)


def filter_exercises(exercises: Iterable[Exercise], query: str | None) -> list[Exercise]:
    """Case-insensitive substring search on name; blank query keeps everything."""
    needle = (query or "").strip().casefold()
    if not needle:
        return list(exercises)
    return [e for e in exercises if needle in e.name.casefold()]


def group_by_category(exercises: Iterable[Exercise]) -> list[tuple[ExerciseCategory, list[Exercise]]]:
    """(category, exercises) in canonical category order, empty categories dropped."""
    buckets: dict[ExerciseCategory, list[Exercise]] = {}
    for exercise in exercises:
        buckets.setdefault(exercise.category, []).append(exercise)
    return [(category, buckets[category]) for category in ExerciseCategory if buckets.get(category)]


async def get_by_name(db: AsyncSession, name: str) -> Exercise | None:
    result = await db.execute(select(Exercise).where(Exercise.name == name))
    return result.scalar_one_or_none()

