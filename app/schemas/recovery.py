"""Recovery status and plan-context schemas."""

from pydantic import BaseModel

from app.core.enums import RecoveryState
from app.schemas.exercise import ExerciseBrief
from app.schemas.profile import UserProfile


class MuscleRecoveryDetails(BaseModel):
    average: int
    # Present only for composite groups (e.g. Arms), keyed in hierarchy order
    sub_muscles: dict[str, int] | None = None


# Major group -> details, in hierarchy declaration order
GroupedRecoveryStatus = dict[str, MuscleRecoveryDetails]


class RecoverySummary(BaseModel):
    last_workout: str
    fresh_groups: int
    states: dict[str, RecoveryState]
    groups: GroupedRecoveryStatus


class RecentExercise(BaseModel):
    name: str
    sets: str  # "10 reps at 135 lbs, 8 reps at 145 lbs"


class RecentWorkout(BaseModel):
    date: str
    exercises: list[RecentExercise]


class PlanContextRequest(BaseModel):
    profile: UserProfile | None = None
    disliked_exercise_ids: list[str] = []
    # Free text, e.g. "cable stack tops out at 150 lbs; leg press is broken"
    equipment_constraints: str = ""
    user_added_equipment: list[str] = []


class PlanContext(BaseModel):
    """Structured data handed to the external workout-plan generator."""

    profile: UserProfile | None = None
    recovery_status: GroupedRecoveryStatus
    recent_history: list[RecentWorkout]
    available_exercises: list[ExerciseBrief]
    disliked_exercise_names: list[str] = []
    equipment_constraints: str = ""
    user_added_equipment: list[str] = []
