"""Volume-over-time points and the all-time strength score for the progress view."""

from __future__ import annotations

import calendar
from collections.abc import Mapping
from datetime import datetime, timezone

from app.core.constants import PROGRESS_PERIOD_MONTHS, STRENGTH_BASELINE, STRENGTH_VOLUME_DIVISOR
from app.schemas.progress import ProgressPeriod, ProgressPoint
from app.schemas.workout import Workout
from app.services.recovery import sorted_history


def _months_before(moment: datetime, months: int) -> datetime:
    # Day is clamped to the target month's length: May 31 - 3 months -> Feb 28/29
    index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def period_start(period: ProgressPeriod, now: datetime) -> datetime | None:
    """Earliest included time for ``period``; None means no lower bound."""
    months = PROGRESS_PERIOD_MONTHS[period]
    if months is None:
        return None
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return _months_before(now, months)


def volume_points(
    history: Mapping[str, Workout],
    period: ProgressPeriod,
    now: datetime,
) -> list[ProgressPoint]:
    """
    One point per workout finished at or after the period start, oldest first.
    Keys that do not parse as timestamps are left out.
    """
    start = period_start(period, now)
    points = []
    for worked_at, key, workout in reversed(sorted_history(history)):
        if start is not None and worked_at < start:
            continue
        points.append(
            ProgressPoint(
                logged_at=key,
                date=f"{worked_at:%b} {worked_at.day}",
                volume=workout.total_volume,
                calories=workout.calories,
            )
        )
    return points


def strength_score(history: Mapping[str, Workout]) -> float:
    """Baseline plus all-time volume / 1000; exactly the baseline for an empty history."""
    total_volume = sum(w.total_volume for w in history.values())
    return STRENGTH_BASELINE + total_volume / STRENGTH_VOLUME_DIVISOR
