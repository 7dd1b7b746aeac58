from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field

# Name: optional, up to 255 chars; blank is stored as null by the repository
NameStr = Annotated[str, Field(max_length=255)]
ExerciseId = Annotated[int, Field(gt=0)]

class WorkoutCreate(BaseModel):
    name: NameStr | None = None
    started_at: datetime

class WorkoutUpdate(WorkoutCreate):
    pass

class WorkoutCompletion(BaseModel):
    # null reopens the workout
    completed_at: datetime | None = None

class WorkoutExercisesUpdate(BaseModel):
    # list position becomes the order
    exercise_ids: list[ExerciseId] = Field(default_factory=list, max_length=100)

class WorkoutId(BaseModel):
    id: int

class WorkoutExerciseRead(BaseModel):
    id: int
    name: str
    order: int

    model_config = {"from_attributes": True}

class WorkoutRead(BaseModel):
    id: int
    name: str | None = None
    started_at: datetime
    completed_at: datetime | None = None
    exercises: list[WorkoutExerciseRead] = []

    model_config = {"from_attributes": True}
