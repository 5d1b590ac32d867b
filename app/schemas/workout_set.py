"""
Workout set API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.schemas.exercise import ExerciseSummary


class WorkoutSetCreate(BaseModel):
    """Schema for logging a set."""

    exercise_id: int
    weight: float = Field(..., ge=0.0, description="Weight in pounds")
    reps: int = Field(..., ge=0)
    date: Optional[datetime.datetime] = Field(None, description="When the set was performed (defaults to now)")


class WorkoutSetResponse(BaseModel):
    """Schema for a logged set in API responses."""

    id: int
    user_id: int
    exercise_id: int
    weight: float
    reps: int
    volume: float
    date: datetime.datetime
    created_at: datetime.datetime
    exercise: ExerciseSummary
