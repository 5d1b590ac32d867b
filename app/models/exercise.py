"""
Exercise database model.

Exercises belong to a user.  The default catalog belongs to the system user
and is visible to everyone.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Category(str, Enum):
    """Muscle group an exercise is filed under."""

    CHEST = "CHEST"
    BACK = "BACK"
    LEGS = "LEGS"
    SHOULDERS = "SHOULDERS"
    ARMS = "ARMS"
    CORE = "CORE"
    CARDIO = "CARDIO"
    OTHER = "OTHER"


class Exercise(SQLModel, table=True):
    """A named exercise owned by a user."""

    __tablename__ = "exercises"
    __table_args__ = (UniqueConstraint("name", "user_id", name="uq_exercise_name_user"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    name: str = Field(nullable=False, max_length=255)
    category: Category = Field(nullable=False, index=True)
    notes: Optional[str] = Field(default=None, max_length=1000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
