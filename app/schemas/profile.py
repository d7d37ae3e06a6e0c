"""Training profile forwarded to the plan generator."""

from typing import Literal

from pydantic import BaseModel, Field

Gender = Literal["Male", "Female"]
TrainingGoal = Literal["Build Muscle", "Lose Weight", "Gain Strength"]
ExperienceLevel = Literal["Beginner", "Intermediate", "Advanced"]
WorkoutSplit = Literal["Push/Pull/Legs", "Full Body", "Upper/Lower", "Body Part Split"]
TrainingStyle = Literal[
    "Strength Training",
    "Hypertrophy",
    "Circuit Training",
    "General Fitness",
    "Powerlifting",
    "Olympic Weightlifting",
]
GymBrand = Literal[
    "Planet Fitness", "LA Fitness", "Anytime Fitness", "24 Hour Fitness", "Gold's Gym", "Other"
]


class UserProfile(BaseModel):
    """Unset fields are left for the generator to treat as 'not specified'."""

    gender: Gender | None = None
    height: float | None = Field(None, gt=0)  # inches
    weight: float | None = Field(None, gt=0)  # lbs
    goal: TrainingGoal | None = None
    experience: ExperienceLevel | None = None
    frequency: int | None = Field(None, ge=1, le=7)  # workouts per week
    workout_split: WorkoutSplit | None = None
    training_style: TrainingStyle | None = None
    gym: GymBrand | None = None
    workout_duration: int | None = Field(None, gt=0)  # minutes
