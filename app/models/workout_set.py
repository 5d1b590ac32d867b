"""
Workout set database model.

One row per logged set.  ``weight`` is stored in pounds; the volume of a set
is ``weight * reps``.  ``(user_id, date)`` is indexed for the dashboard's
date-range queries.
"""

import datetime
from typing import Optional

from sqlalchemy import Column, ForeignKey, Index, Integer
from sqlmodel import Field, SQLModel


class WorkoutSet(SQLModel, table=True):
    """A single logged set of an exercise."""

    __tablename__ = "workout_sets"
    __table_args__ = (Index("ix_workout_sets_user_date", "user_id", "date"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False)
    exercise_id: int = Field(sa_column=Column(Integer, ForeignKey("exercises.id", ondelete="CASCADE"),
                                              nullable=False, index=True), )

    weight: float = Field(default=0.0, nullable=False)
    reps: int = Field(default=0, nullable=False)

    # When the set was performed (defaults to logging time)
    date: datetime.datetime = Field(default_factory=datetime.datetime.now, nullable=False)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
