"""Tests for the plan-generation context document."""

import json

from app.core.enums import SetStatus
from app.schemas.exercise import ExerciseRead
from app.schemas.profile import UserProfile
from app.services.plan_context import (
    available_exercises,
    build_plan_context,
    disliked_names,
    recent_workouts,
)
from app.services.recovery import calculate_recovery
from conftest import NOW, iso_key, logged_exercise, workout

LIBRARY = [
    ExerciseRead(id="bench", name="Bench Press", primary_muscle="Chest",
                 secondary_muscles=["Triceps"], equipment="Barbell", type="Compound"),
    ExerciseRead(id="curl", name="Dumbbell Curl", primary_muscle="Biceps",
                 equipment="Dumbbell", type="Isolation"),
    ExerciseRead(id="squat", name="Back Squat", primary_muscle="Quads",
                 secondary_muscles=["Glutes"], equipment="Barbell", type="Compound"),
]


class TestRecentWorkouts:
    def test_newest_first_and_limited(self):
        history = {
            iso_key(100): workout(logged_exercise("Back", name="Row")),
            iso_key(2): workout(logged_exercise("Chest", name="Bench Press")),
            iso_key(50): workout(logged_exercise("Quads", name="Back Squat")),
            iso_key(10): workout(logged_exercise("Biceps", name="Curl")),
        }
        recent = recent_workouts(history, limit=3)
        assert [w.exercises[0].name for w in recent] == ["Bench Press", "Curl", "Back Squat"]

    def test_set_description_and_date(self):
        bench = logged_exercise(
            "Chest",
            name="Bench Press",
            sets=[(10, 135.0, SetStatus.LOGGED), (8, 142.5, SetStatus.LOGGED)],
        )
        recent = recent_workouts({iso_key(0): workout(bench)})
        assert recent[0].date == "Mon Mar 10 2025"
        assert recent[0].exercises[0].sets == "10 reps at 135 lbs, 8 reps at 142.5 lbs"

    def test_heavy_weights_keep_every_digit(self):
        sled = logged_exercise(
            "Quads",
            name="Sled Push",
            sets=[(5, 12345.25, SetStatus.LOGGED), (1, 1500000.0, SetStatus.LOGGED)],
        )
        recent = recent_workouts({iso_key(0): workout(sled)})
        assert recent[0].exercises[0].sets == "5 reps at 12345.25 lbs, 1 reps at 1500000 lbs"

    def test_zero_limit(self):
        assert recent_workouts({iso_key(1): workout(logged_exercise("Chest"))}, limit=0) == []


class TestAvailableExercises:
    def test_disliked_excluded(self):
        briefs = available_exercises(LIBRARY, disliked_ids=["curl"])
        assert [b.id for b in briefs] == ["bench", "squat"]
        assert briefs[0].primary_muscle == "Chest"
        assert briefs[0].equipment == "Barbell"


class TestBuildPlanContext:
    def test_serializes_recovery_in_hierarchy_order(self):
        history = {iso_key(48): workout(logged_exercise("Quads", ("Glutes",), name="Back Squat"))}
        muscles = ["Quads", "Glutes", "Chest", "Biceps", "Triceps"]
        status = calculate_recovery(history, muscles, NOW)
        context = build_plan_context(history, status, LIBRARY, disliked_ids=["bench"])

        payload = json.loads(context.model_dump_json(exclude_none=True))
        assert list(payload["recovery_status"]) == ["Chest", "Arms", "Legs"]
        assert payload["recovery_status"]["Chest"] == {"average": 100}
        assert payload["recovery_status"]["Legs"] == {
            "average": 63,
            "sub_muscles": {"Quads": 63, "Glutes": 63},
        }
        assert [w["exercises"][0]["name"] for w in payload["recent_history"]] == ["Back Squat"]
        assert [e["id"] for e in payload["available_exercises"]] == ["curl", "squat"]

    def test_profile_and_equipment_notes(self):
        profile = UserProfile(
            goal="Build Muscle",
            experience="Intermediate",
            frequency=4,
            workout_split="Push/Pull/Legs",
            training_style="Hypertrophy",
            gym="LA Fitness",
            workout_duration=45,
        )
        context = build_plan_context(
            {},
            {},
            LIBRARY,
            disliked_ids=["squat", "bench"],
            profile=profile,
            equipment_constraints="  Leg press is broken\n",
            user_added_equipment=["Hack Squat", "Pec Deck"],
        )

        payload = json.loads(context.model_dump_json(exclude_none=True))
        assert payload["profile"] == {
            "goal": "Build Muscle",
            "experience": "Intermediate",
            "frequency": 4,
            "workout_split": "Push/Pull/Legs",
            "training_style": "Hypertrophy",
            "gym": "LA Fitness",
            "workout_duration": 45,
        }
        assert payload["disliked_exercise_names"] == ["Back Squat", "Bench Press"]
        assert payload["equipment_constraints"] == "Leg press is broken"
        assert payload["user_added_equipment"] == ["Hack Squat", "Pec Deck"]
        assert [e["id"] for e in payload["available_exercises"]] == ["curl"]

    def test_defaults_without_profile(self):
        context = build_plan_context({}, {}, LIBRARY)
        assert context.profile is None
        assert context.disliked_exercise_names == []
        assert context.equipment_constraints == ""
        assert context.user_added_equipment == []


class TestDislikedNames:
    def test_follows_requested_order_and_skips_unknown_ids(self):
        assert disliked_names(LIBRARY, ["squat", "gone", "curl"]) == ["Back Squat", "Dumbbell Curl"]

    def test_nothing_disliked(self):
        assert disliked_names(LIBRARY, []) == []
