"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout_set import WorkoutSetRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository",
    "WorkoutSetRepository",
]
