"""Pydantic schemas for request/response validation."""

from app.schemas.user import UserCreate, UserResponse
from app.schemas.exercise import (
    ExerciseCreate,
    ExerciseUpdate,
    ExerciseResponse,
    ExerciseSummary,
    RecentExerciseResponse,
)
from app.schemas.workout_set import WorkoutSetCreate, WorkoutSetResponse
from app.schemas.trend import (
    Granularity,
    PeriodSelector,
    ResolvedWindow,
    SeriesPoint,
    SetRecord,
    VolumeTrend,
)
from app.schemas.dashboard import (
    DailyVolume,
    DashboardStatsResponse,
    VolumeTrendPoint,
    VolumeTrendResponse,
)

__all__ = [
    "UserCreate",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseUpdate",
    "ExerciseResponse",
    "ExerciseSummary",
    "RecentExerciseResponse",
    "WorkoutSetCreate",
    "WorkoutSetResponse",
    "Granularity",
    "PeriodSelector",
    "ResolvedWindow",
    "SeriesPoint",
    "SetRecord",
    "VolumeTrend",
    "DailyVolume",
    "DashboardStatsResponse",
    "VolumeTrendPoint",
    "VolumeTrendResponse",
]
