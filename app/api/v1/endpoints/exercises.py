"""Exercise library CRUD endpoints."""

from __future__ import annotations

import re
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.exercise import Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseRead, ExerciseUpdate

router = APIRouter()


def _exercise_id(payload: ExerciseCreate) -> str:
    """Use the library's id if given; otherwise a slug of the name plus a short suffix."""
    if payload.id:
        return payload.id
    slug = re.sub(r"[^a-z0-9]+", "-", payload.name.lower()).strip("-")[:48] or "exercise"
    return f"{slug}-{uuid.uuid4().hex[:8]}"


async def load_exercises(db: AsyncSession) -> list[ExerciseRead]:
    """Whole active library, ordered by name."""
    result = await db.execute(select(Exercise).order_by(Exercise.name, Exercise.id))
    return [ExerciseRead.model_validate(ex) for ex in result.scalars().all()]


@router.get("", response_model=list[ExerciseRead])
async def list_exercises(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 200,
    muscle: str | None = None,
):
    """List exercises, optionally only those training ``muscle`` as primary target."""
    stmt = select(Exercise)
    if muscle:
        stmt = stmt.where(Exercise.primary_muscle == muscle)
    result = await db.execute(stmt.order_by(Exercise.name, Exercise.id).offset(skip).limit(limit))
    return list(result.scalars().all())


@router.post("", response_model=ExerciseRead, status_code=201)
async def create_exercise(
    payload: ExerciseCreate,
    db: AsyncSession = Depends(get_db),
):
    """Add an exercise to the library (user-added exercises set is_user_added)."""
    exercise_id = _exercise_id(payload)
    existing = await db.execute(select(Exercise.id).where(Exercise.id == exercise_id))
    if existing.scalar_one_or_none():
        raise HTTPException(status_code=400, detail="Exercise with this id already exists")
    exercise = Exercise(**payload.model_dump(exclude={"id"}), id=exercise_id)
    db.add(exercise)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.put("/library", response_model=list[ExerciseRead])
async def replace_library(
    payload: list[ExerciseCreate],
    db: AsyncSession = Depends(get_db),
):
    """Replace the whole library (custom library upload). Workout history is untouched."""
    if not payload:
        raise HTTPException(status_code=400, detail="Exercise library must not be empty")
    ids = [_exercise_id(p) for p in payload]
    if len(set(ids)) != len(ids):
        raise HTTPException(status_code=400, detail="Exercise ids in the library must be unique")
    await db.execute(delete(Exercise))
    db.add_all(
        Exercise(**p.model_dump(exclude={"id"}), id=exercise_id)
        for p, exercise_id in zip(payload, ids)
    )
    await db.flush()
    return await load_exercises(db)


@router.get("/{exercise_id}", response_model=ExerciseRead)
async def get_exercise(
    exercise_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Get a single exercise by id."""
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    return exercise


@router.patch("/{exercise_id}", response_model=ExerciseRead)
async def update_exercise(
    exercise_id: str,
    payload: ExerciseUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Update an exercise (partial). Past workouts keep their own snapshot."""
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    for k, v in payload.model_dump(exclude_unset=True).items():
        setattr(exercise, k, v)
    await db.flush()
    await db.refresh(exercise)
    return exercise


@router.delete("/{exercise_id}", status_code=204)
async def delete_exercise(
    exercise_id: str,
    db: AsyncSession = Depends(get_db),
):
    """Remove an exercise from the library."""
    exercise = await db.get(Exercise, exercise_id)
    if not exercise:
        raise HTTPException(status_code=404, detail="Exercise not found")
    await db.delete(exercise)
    return None
