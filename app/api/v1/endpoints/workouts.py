"""Workout history endpoints: finish a session, list, fetch, delete."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.session import get_db
from app.models.workout import Workout
from app.schemas.workout import Workout as WorkoutEntry
from app.schemas.workout import WorkoutFinish, WorkoutHistory, WorkoutRead
from app.services.workout_log import finalize_workout, history_key

router = APIRouter()


async def load_workout_history(db: AsyncSession) -> WorkoutHistory:
    """Full history as timestamp key -> workout."""
    result = await db.execute(select(Workout))
    return {w.logged_at: WorkoutEntry.model_validate(w) for w in result.scalars().all()}


@router.get("", response_model=list[WorkoutRead])
async def list_workouts(
    db: AsyncSession = Depends(get_db),
    skip: int = 0,
    limit: int = 50,
):
    """Logged workouts, most recently finished first."""
    result = await db.execute(
        select(Workout).order_by(Workout.created_at.desc(), Workout.logged_at.desc()).offset(skip).limit(limit)
    )
    return [WorkoutRead.model_validate(w) for w in result.scalars().all()]


@router.post("/finish", response_model=WorkoutRead, status_code=201)
async def finish_workout(
    payload: WorkoutFinish,
    db: AsyncSession = Depends(get_db),
):
    """
    Finish the active session: keep only logged sets, compute totals, append to history.
    A session with nothing logged is discarded (400); a taken timestamp key is a conflict (409).
    """
    workout = finalize_workout(payload.exercises, payload.total_time)
    if workout is None:
        raise HTTPException(status_code=400, detail="No logged sets; workout discarded")

    row = Workout(
        logged_at=history_key(payload.logged_at),
        total_time=workout.total_time,
        total_volume=workout.total_volume,
        calories=workout.calories,
        exercises=[ex.model_dump(mode="json") for ex in workout.exercises],
    )
    db.add(row)
    try:
        await db.flush()
    except IntegrityError:
        # logged_at is unique; concurrent finishes for the same key land here
        raise HTTPException(status_code=409, detail="A workout is already logged at this time")
    await db.refresh(row)
    return WorkoutRead.model_validate(row)


@router.get("/{logged_at}", response_model=WorkoutRead)
async def get_workout(
    logged_at: str,
    db: AsyncSession = Depends(get_db),
):
    """Get one workout by its timestamp key."""
    result = await db.execute(select(Workout).where(Workout.logged_at == logged_at))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    return WorkoutRead.model_validate(workout)


@router.delete("/{logged_at}", status_code=204)
async def delete_workout(
    logged_at: str,
    db: AsyncSession = Depends(get_db),
):
    """Remove a workout from the history."""
    result = await db.execute(select(Workout).where(Workout.logged_at == logged_at))
    workout = result.scalar_one_or_none()
    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")
    await db.delete(workout)
    return None
