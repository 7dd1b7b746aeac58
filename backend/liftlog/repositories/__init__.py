from liftlog.repositories.exercise_repo import ExerciseOption, ExerciseRepository
from liftlog.repositories.workout_repo import (
    WorkoutExerciseEntry,
    WorkoutRepository,
    WorkoutWithExercises,
)

__all__ = [
    "ExerciseOption",
    "ExerciseRepository",
    "WorkoutExerciseEntry",
    "WorkoutRepository",
    "WorkoutWithExercises",
]
