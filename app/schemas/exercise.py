"""
Exercise API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from app.models.exercise import Category


class ExerciseCreate(BaseModel):
    """Schema for creating an exercise."""

    name: str = Field(..., min_length=1, max_length=255, description="Exercise name, e.g. 'Bench Press (Barbell)'")
    category: Category = Field(..., description="Muscle group")
    notes: Optional[str] = Field(None, max_length=1000)


class ExerciseUpdate(BaseModel):
    """Schema for updating an exercise.  Only name and notes are editable."""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    notes: Optional[str] = Field(None, max_length=1000)


class ExerciseResponse(BaseModel):
    """Schema for an exercise in API responses."""

    id: int
    user_id: int
    name: str
    category: Category
    notes: Optional[str]
    is_user_exercise: bool = Field(..., description="False for the shared default catalog")
    set_count: Optional[int] = Field(None, description="Logged sets (only with include_stats)")
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True


class ExerciseSummary(BaseModel):
    """Compact exercise reference embedded in set responses."""

    id: int
    name: str
    category: Category


class RecentExerciseResponse(ExerciseSummary):
    """Exercise with the time it was last logged."""

    last_used: datetime.datetime
