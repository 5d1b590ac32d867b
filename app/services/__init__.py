"""Business logic services."""

from app.services.user_service import UserService
from app.services.exercise_service import ExerciseService
from app.services.workout_set_service import WorkoutSetService
from app.services.dashboard_service import DashboardService

__all__ = [
    "UserService",
    "ExerciseService",
    "WorkoutSetService",
    "DashboardService",
]
