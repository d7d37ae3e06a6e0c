"""Finishing a workout session and deriving the muscle vocabulary from the library."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timezone

from app.core.constants import CALORIES_VOLUME_DIVISOR
from app.core.enums import SetStatus
from app.schemas.exercise import ExerciseBase
from app.schemas.workout import LoggedExercise, Workout
from app.services.recovery import round_half_up


def history_key(at: datetime | None = None) -> str:
    """ISO timestamp key for a finished workout, UTC with millisecond precision (e.g. 2025-03-01T17:30:00.000Z)."""
    at = at or datetime.now(timezone.utc)
    if at.tzinfo is None:
        at = at.replace(tzinfo=timezone.utc)
    at = at.astimezone(timezone.utc)
    return at.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def estimate_calories(total_volume: float) -> int:
    """Rough calorie estimate from lifted volume (lbs)."""
    if total_volume <= 0:
        return 0
    return round_half_up(total_volume / CALORIES_VOLUME_DIVISOR)


def finalize_workout(active_log: Iterable[LoggedExercise], total_time: int) -> Workout | None:
    """
    Turn an active session log into a history entry.

    Pending sets are dropped; exercises left without sets are dropped.
    Returns None when nothing was logged (the session is discarded).
    """
    exercises: list[LoggedExercise] = []
    for exercise in active_log:
        logged_sets = [s for s in exercise.sets if s.status == SetStatus.LOGGED]
        if logged_sets:
            exercises.append(exercise.model_copy(update={"sets": logged_sets}))

    if not exercises:
        return None

    total_volume = sum(s.reps * s.weight for ex in exercises for s in ex.sets)
    return Workout(
        total_time=max(int(total_time), 0),
        total_volume=total_volume,
        calories=estimate_calories(total_volume),
        exercises=exercises,
    )


def collect_muscle_groups(exercises: Iterable[ExerciseBase]) -> list[str]:
    """Union of primary and secondary muscles across the library, in first-seen order."""
    seen: dict[str, None] = {}
    for ex in exercises:
        for muscle in (ex.primary_muscle, *ex.secondary_muscles):
            if muscle:
                seen.setdefault(muscle, None)
    return list(seen)
