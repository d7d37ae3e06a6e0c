"""Muscle recovery endpoints: grouped readiness, summary, plan-generation context."""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.endpoints.exercises import load_exercises
from app.api.v1.endpoints.muscle_groups import load_known_muscles
from app.api.v1.endpoints.workouts import load_workout_history
from app.core.config import get_settings
from app.db.session import get_db
from app.schemas.recovery import (
    GroupedRecoveryStatus,
    PlanContext,
    PlanContextRequest,
    RecoverySummary,
)
from app.services.plan_context import build_plan_context
from app.services.recovery import calculate_recovery
from app.services.recovery_summary import count_fresh_groups, describe_last_workout, recovery_state

logger = logging.getLogger(__name__)
router = APIRouter()


def reference_time(at: datetime | None) -> datetime:
    """Requested reference time, or now (UTC)."""
    if at is None:
        return datetime.now(timezone.utc)
    return at if at.tzinfo else at.replace(tzinfo=timezone.utc)


@router.get("", response_model=GroupedRecoveryStatus, response_model_exclude_none=True)
async def muscle_recovery(
    at: datetime | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Recovery % (0-100, 100 = fully recovered) per major muscle group.
    Composite groups (Arms, Legs) include their sub-muscles.
    ``at`` evaluates the status at another point in time (default: now).
    """
    history = await load_workout_history(db)
    known_muscles = await load_known_muscles(db)
    return calculate_recovery(history, known_muscles, reference_time(at))


@router.get("/summary", response_model=RecoverySummary, response_model_exclude_none=True)
async def recovery_summary(
    at: datetime | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Grouped status plus last-workout age, fresh group count and a band per group."""
    now = reference_time(at)
    history = await load_workout_history(db)
    groups = calculate_recovery(history, await load_known_muscles(db), now)
    return RecoverySummary(
        last_workout=describe_last_workout(history, now),
        fresh_groups=count_fresh_groups(groups),
        states={name: recovery_state(details.average) for name, details in groups.items()},
        groups=groups,
    )


@router.post("/plan-context", response_model=PlanContext, response_model_exclude_none=True)
async def plan_context(
    payload: PlanContextRequest,
    at: datetime | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Recovery, recent history, exercise choices and the user's profile for the plan generator."""
    now = reference_time(at)
    history = await load_workout_history(db)
    exercises = await load_exercises(db)
    known_muscles = await load_known_muscles(db)
    status = calculate_recovery(history, known_muscles, now)
    logger.info(
        "Plan context: %d workouts, %d exercises, %d recovery groups",
        len(history), len(exercises), len(status),
    )
    return build_plan_context(
        history,
        status,
        exercises,
        disliked_ids=payload.disliked_exercise_ids,
        limit=get_settings().recent_history_limit,
        profile=payload.profile,
        equipment_constraints=payload.equipment_constraints,
        user_added_equipment=payload.user_added_equipment,
    )
