"""Workout history schemas: sets, logged exercises, finished workouts."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from app.core.enums import SetStatus
from app.schemas.exercise import ExerciseRead


class WorkoutSet(BaseModel):
    reps: int = Field(0, ge=0)
    weight: float = Field(0.0, ge=0)  # lbs
    status: SetStatus = SetStatus.LOGGED


class LoggedExercise(ExerciseRead):
    """Exercise definition extended with the sets performed in one session."""

    sets: list[WorkoutSet] = []
    recommended_sets: int | None = None
    recommended_reps: str | None = None  # e.g. "8-12"
    recommended_weight: str | None = None  # e.g. "135 lbs" or "RPE 7"


class Workout(BaseModel):
    """A finished session as stored in the history. Immutable once created."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    total_time: int = Field(0, ge=0)  # seconds
    total_volume: float = 0.0
    calories: int = 0
    exercises: list[LoggedExercise] = []


class WorkoutRead(Workout):
    logged_at: str


class WorkoutFinish(BaseModel):
    """Active session log submitted when the user finishes a workout.

    May still contain pending sets; only logged sets are kept.
    """

    total_time: int = Field(0, ge=0)
    exercises: list[LoggedExercise] = []
    logged_at: datetime | None = Field(None, description="Override the finish time (backfill)")


# Timestamp key (ISO date-time) -> workout
WorkoutHistory = dict[str, Workout]
