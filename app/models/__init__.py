"""SQLModel database models."""

from app.models.user import User
from app.models.exercise import Category, Exercise
from app.models.workout_set import WorkoutSet

__all__ = [
    "User",
    "Category",
    "Exercise",
    "WorkoutSet",
]
