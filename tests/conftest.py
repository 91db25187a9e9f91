"""Shared fixtures: a throwaway SQLite database per test and an API client bound to it."""

import os
from datetime import datetime, timedelta, timezone

# Must be set before app.db.session builds its engine
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("SEED_ON_STARTUP", "false")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.core.enums import ExerciseCategory
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.models.workout import WorkoutSession, WorkoutSet

T0 = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db(session_maker):
    async with session_maker() as session:
        yield session


@pytest.fixture
async def client(session_maker):
    async def override_get_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test/api/v1") as c:
        yield c
    app.dependency_overrides.clear()


def _make_set(
    name: str = "Bench Press",
    category: ExerciseCategory = ExerciseCategory.CHEST,
    weight: float = 100,
    reps: int = 10,
    set_number: int = 1,
    at: int = 0,
    session: WorkoutSession | None = None,
) -> WorkoutSet:
    """Transient set completed ``at`` seconds after T0."""
    kwargs = {}
    if session is not None:
        kwargs["session"] = session
    return WorkoutSet(
        exercise_name=name,
        exercise_category=category,
        weight=weight,
        reps=reps,
        set_number=set_number,
        completed_at=T0 + timedelta(seconds=at),
        **kwargs,
    )


@pytest.fixture
def make_set():
    return _make_set
