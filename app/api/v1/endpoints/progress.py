"""Progress endpoint: workout volume over a period and the all-time strength score."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.endpoints.recovery import reference_time
from app.api.v1.endpoints.workouts import load_workout_history
from app.db.session import get_db
from app.schemas.progress import ProgressPeriod, ProgressReport
from app.services.progress import strength_score, volume_points

router = APIRouter()


@router.get("", response_model=ProgressReport)
async def progress(
    period: ProgressPeriod = "3M",
    at: datetime | None = None,
    db: AsyncSession = Depends(get_db),
):
    """
    Volume and calories per workout, oldest first.
    period=1M/3M/1Y: workouts since that many months before ``at`` (default now); All: everything.
    The strength score always covers the whole history.
    """
    history = await load_workout_history(db)
    return ProgressReport(
        period=period,
        points=volume_points(history, period, reference_time(at)),
        strength_score=strength_score(history),
    )
