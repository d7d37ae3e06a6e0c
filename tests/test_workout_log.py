"""Tests for finishing workouts and collecting the muscle vocabulary."""

from datetime import datetime, timedelta, timezone

from app.core.enums import SetStatus
from app.schemas.exercise import ExerciseBase
from app.services.workout_log import (
    collect_muscle_groups,
    estimate_calories,
    finalize_workout,
    history_key,
)
from conftest import logged_exercise

LOGGED = SetStatus.LOGGED
PENDING = SetStatus.PENDING


class TestFinalizeWorkout:
    """Tests for turning an active session into a history entry."""

    def test_pending_sets_are_dropped(self):
        bench = logged_exercise("Chest", sets=[(10, 135, LOGGED), (8, 145, PENDING), (6, 155, LOGGED)])
        result = finalize_workout([bench], total_time=1800)
        assert [(s.reps, s.weight) for s in result.exercises[0].sets] == [(10, 135), (6, 155)]
        assert all(s.status == LOGGED for s in result.exercises[0].sets)

    def test_exercise_without_logged_sets_is_dropped(self):
        bench = logged_exercise("Chest", sets=[(10, 135, LOGGED)])
        curl = logged_exercise("Biceps", sets=[(12, 30, PENDING)])
        result = finalize_workout([bench, curl], total_time=1800)
        assert [ex.primary_muscle for ex in result.exercises] == ["Chest"]

    def test_nothing_logged_returns_none(self):
        curl = logged_exercise("Biceps", sets=[(12, 30, PENDING)])
        assert finalize_workout([curl], total_time=600) is None
        assert finalize_workout([], total_time=0) is None

    def test_totals(self):
        bench = logged_exercise("Chest", sets=[(10, 135, LOGGED), (8, 145, LOGGED)])
        squat = logged_exercise("Quads", sets=[(5, 225, LOGGED), (5, 999, PENDING)])
        result = finalize_workout([bench, squat], total_time=2700)
        assert result.total_time == 2700
        assert result.total_volume == 10 * 135 + 8 * 145 + 5 * 225  # 3635
        assert result.calories == 73  # 72.7

    def test_input_log_not_mutated(self):
        bench = logged_exercise("Chest", sets=[(10, 135, LOGGED), (8, 145, PENDING)])
        finalize_workout([bench], total_time=60)
        assert len(bench.sets) == 2

    def test_exercise_order_preserved(self):
        exercises = [logged_exercise(m) for m in ("Legs", "Chest", "Back")]
        result = finalize_workout(exercises, total_time=60)
        assert [ex.primary_muscle for ex in result.exercises] == ["Legs", "Chest", "Back"]


class TestEstimateCalories:
    def test_volume_divided_by_fifty(self):
        assert estimate_calories(5000) == 100
        assert estimate_calories(125) == 3  # 2.5 rounds up

    def test_zero_volume(self):
        assert estimate_calories(0) == 0


class TestHistoryKey:
    def test_utc_millisecond_zulu_format(self):
        at = datetime(2025, 3, 1, 17, 30, 5, 123456, tzinfo=timezone.utc)
        assert history_key(at) == "2025-03-01T17:30:05.123Z"

    def test_offset_converted_to_utc(self):
        at = datetime(2025, 3, 1, 19, 30, tzinfo=timezone(timedelta(hours=2)))
        assert history_key(at) == "2025-03-01T17:30:00.000Z"

    def test_defaults_to_now(self):
        before = datetime.now(timezone.utc).replace(microsecond=0)
        key = history_key()
        parsed = datetime.fromisoformat(key.replace("Z", "+00:00"))
        assert parsed >= before


class TestCollectMuscleGroups:
    """Tests for deriving known muscles from the exercise library."""

    def test_union_in_first_seen_order(self):
        library = [
            ExerciseBase(name="Bench Press", primary_muscle="Chest", secondary_muscles=["Triceps", "Shoulders"]),
            ExerciseBase(name="Dips", primary_muscle="Triceps", secondary_muscles=["Chest"]),
            ExerciseBase(name="Curl", primary_muscle="Biceps", secondary_muscles=["Forearms"]),
        ]
        assert collect_muscle_groups(library) == ["Chest", "Triceps", "Shoulders", "Biceps", "Forearms"]

    def test_empty_library(self):
        assert collect_muscle_groups([]) == []

    def test_blank_secondary_skipped(self):
        library = [ExerciseBase(name="Plank", primary_muscle="Core", secondary_muscles=[""])]
        assert collect_muscle_groups(library) == ["Core"]
