"""Exercise schemas."""

from pydantic import BaseModel, ConfigDict, Field


class ExerciseBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: str = ""
    video_url: str = ""
    primary_muscle: str = Field(..., min_length=1, max_length=100)
    secondary_muscles: list[str] = []
    equipment: str = ""
    type: str = ""
    is_user_added: bool = False


class ExerciseCreate(ExerciseBase):
    # Library files carry their own ids; generated from the name when omitted
    id: str | None = Field(None, min_length=1, max_length=64)


class ExerciseUpdate(BaseModel):
    name: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = None
    video_url: str | None = None
    primary_muscle: str | None = Field(None, min_length=1, max_length=100)
    secondary_muscles: list[str] | None = None
    equipment: str | None = None
    type: str | None = None
    is_user_added: bool | None = None


class ExerciseRead(ExerciseBase):
    model_config = ConfigDict(from_attributes=True)
    id: str


class ExerciseBrief(BaseModel):
    """Minimal exercise info handed to the plan generator."""

    id: str
    name: str
    primary_muscle: str
    type: str
    equipment: str
