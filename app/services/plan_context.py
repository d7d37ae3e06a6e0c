"""Structured context handed to the external workout-plan generator.

The generator itself lives outside this service; it receives the recovery status
(100% = fully recovered), a short window of recent workouts for progression, the
exercises it may choose from, and the user's profile and equipment notes.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from app.schemas.exercise import ExerciseBrief, ExerciseRead
from app.schemas.profile import UserProfile
from app.schemas.recovery import GroupedRecoveryStatus, PlanContext, RecentExercise, RecentWorkout
from app.schemas.workout import Workout, WorkoutSet
from app.services.recovery import sorted_history


def _format_weight(weight: float) -> str:
    # 135.0 -> "135", 142.5 -> "142.5", 1500000.0 -> "1500000" (all digits kept)
    if weight.is_integer():
        return str(int(weight))
    return repr(weight)


def _format_sets(sets: Iterable[WorkoutSet]) -> str:
    return ", ".join(f"{s.reps} reps at {_format_weight(s.weight)} lbs" for s in sets)


def recent_workouts(history: Mapping[str, Workout], limit: int = 3) -> list[RecentWorkout]:
    """Newest ``limit`` workouts, condensed to exercise names and set descriptions."""
    if limit <= 0:
        return []
    recent = []
    for worked_at, _key, workout in sorted_history(history)[:limit]:
        recent.append(
            RecentWorkout(
                date=worked_at.strftime("%a %b %d %Y"),
                exercises=[
                    RecentExercise(name=ex.name, sets=_format_sets(ex.sets))
                    for ex in workout.exercises
                ],
            )
        )
    return recent


def available_exercises(
    exercises: Iterable[ExerciseRead],
    disliked_ids: Iterable[str] = (),
) -> list[ExerciseBrief]:
    """Library minus disliked exercises, trimmed to what the generator needs."""
    disliked = set(disliked_ids)
    return [
        ExerciseBrief(
            id=ex.id,
            name=ex.name,
            primary_muscle=ex.primary_muscle,
            type=ex.type,
            equipment=ex.equipment,
        )
        for ex in exercises
        if ex.id not in disliked
    ]


def disliked_names(exercises: Iterable[ExerciseRead], disliked_ids: Iterable[str]) -> list[str]:
    """Names of the disliked exercises, in the order given; ids not in the library are skipped."""
    names = {ex.id: ex.name for ex in exercises}
    return [names[ex_id] for ex_id in disliked_ids if ex_id in names]


def build_plan_context(
    history: Mapping[str, Workout],
    recovery_status: GroupedRecoveryStatus,
    exercises: Iterable[ExerciseRead],
    disliked_ids: Iterable[str] = (),
    limit: int = 3,
    profile: UserProfile | None = None,
    equipment_constraints: str = "",
    user_added_equipment: Iterable[str] = (),
) -> PlanContext:
    exercises = list(exercises)
    disliked_ids = list(disliked_ids)
    return PlanContext(
        profile=profile,
        recovery_status=recovery_status,
        recent_history=recent_workouts(history, limit),
        available_exercises=available_exercises(exercises, disliked_ids),
        disliked_exercise_names=disliked_names(exercises, disliked_ids),
        equipment_constraints=equipment_constraints.strip(),
        user_added_equipment=list(user_added_equipment),
    )
