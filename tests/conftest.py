"""Shared fixtures: workout/exercise builders and an API client on in-memory SQLite."""

import os

# Must be set before the app (and its engine) is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite+aiosqlite:///:memory:")

from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.core.enums import SetStatus
from app.db.base import Base
from app.db.session import get_db
from app.main import app
from app.schemas.workout import LoggedExercise, Workout, WorkoutSet

NOW = datetime(2025, 3, 10, 12, 0, tzinfo=timezone.utc)


def iso_key(hours_ago: float, now: datetime = NOW) -> str:
    """History key for a workout finished ``hours_ago`` before ``now``."""
    at = now - timedelta(hours=hours_ago)
    return at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def logged_exercise(
    primary: str,
    secondary: tuple[str, ...] = (),
    sets: list[tuple[int, float, SetStatus]] | None = None,
    name: str | None = None,
    ex_id: str | None = None,
) -> LoggedExercise:
    if sets is None:
        sets = [(10, 100.0, SetStatus.LOGGED)]
    return LoggedExercise(
        id=ex_id or f"{primary.lower()}-ex",
        name=name or f"{primary} Exercise",
        primary_muscle=primary,
        secondary_muscles=list(secondary),
        sets=[WorkoutSet(reps=r, weight=w, status=s) for r, w, s in sets],
    )


def workout(*exercises: LoggedExercise) -> Workout:
    return Workout(total_time=3600, total_volume=0.0, calories=0, exercises=list(exercises))


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest_asyncio.fixture
async def session_maker():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
    await engine.dispose()


@pytest_asyncio.fixture
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
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
