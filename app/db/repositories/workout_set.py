"""
Workout set repository.

Handles database operations for :class:`WorkoutSet`.
Includes the date-window queries feeding the volume-trend engine.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from app.models.exercise import Exercise
from app.models.workout_set import WorkoutSet
from app.schemas.trend import SetRecord


def _day_start(day: datetime.date) -> datetime.datetime:
    return datetime.datetime.combine(day, datetime.time.min)


class WorkoutSetRepository:
    """Repository for WorkoutSet database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: WorkoutSet) -> WorkoutSet:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[WorkoutSet]:
        return self.session.get(WorkoutSet, entry_id)

    def get_with_exercise_between(self, user_id: int, start: datetime.datetime,
                                  end: datetime.datetime, ) -> list[tuple[WorkoutSet, Exercise]]:
        """Sets in ``[start, end)`` joined with their exercise.

        Ordered by exercise name, newest set first within an exercise.
        """
        statement = (select(WorkoutSet, Exercise).join(Exercise, WorkoutSet.exercise_id == Exercise.id).where(
            WorkoutSet.user_id == user_id, WorkoutSet.date >= start, WorkoutSet.date < end, ).order_by(
            Exercise.name, WorkoutSet.created_at.desc()))
        return list(self.session.exec(statement).all())

    def get_recent_with_exercise(self, user_id: int, limit: int = 10) -> list[tuple[WorkoutSet, Exercise]]:
        statement = (select(WorkoutSet, Exercise).join(Exercise, WorkoutSet.exercise_id == Exercise.id).where(
            WorkoutSet.user_id == user_id).order_by(WorkoutSet.created_at.desc(), WorkoutSet.id.desc()).limit(limit))
        return list(self.session.exec(statement).all())

    def get_recent_exercises(self, user_id: int, limit: int = 10) -> list[tuple[Exercise, datetime.datetime]]:
        """Distinct exercises with the time they were last logged, most recent first."""
        last_used = func.max(WorkoutSet.created_at).label("last_used")
        statement = (select(Exercise, last_used).join(WorkoutSet, WorkoutSet.exercise_id == Exercise.id).where(
            WorkoutSet.user_id == user_id).group_by(Exercise.id).order_by(last_used.desc()).limit(limit))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Queries for the volume-trend engine
    # ------------------------------------------------------------------

    def get_records(self, user_id: int, start: datetime.date, end: datetime.date, ) -> list[SetRecord]:
        """Set records with ``start <= date < end`` (dates, end exclusive).

        The window is applied in SQL so only the requested range is loaded.
        """
        statement = select(WorkoutSet.date, WorkoutSet.weight, WorkoutSet.reps).where(
            WorkoutSet.user_id == user_id, WorkoutSet.date >= _day_start(start), WorkoutSet.date < _day_start(end), )
        return [SetRecord(occurred_at=occurred_at, weight=weight, reps=reps) for occurred_at, weight, reps in
                self.session.exec(statement).all()]

    def get_earliest_date(self, user_id: int) -> Optional[datetime.date]:
        """Date of the user's first logged set, ``None`` if nothing was logged."""
        statement = select(func.min(WorkoutSet.date)).where(WorkoutSet.user_id == user_id)
        earliest = self.session.exec(statement).first()
        if earliest is None:
            return None
        return earliest.date() if isinstance(earliest, datetime.datetime) else earliest

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
