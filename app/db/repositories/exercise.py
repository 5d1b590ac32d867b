"""
Exercise repository.

Handles database operations for :class:`Exercise`, including the
visibility rule "own exercises plus the system catalog".
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, col, select

from app.models.exercise import Category, Exercise
from app.models.workout_set import WorkoutSet


class ExerciseRepository:
    """Repository for Exercise database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Exercise) -> Exercise:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[Exercise]:
        return self.session.get(Exercise, entry_id)

    def get_by_name(self, user_id: int, name: str) -> Optional[Exercise]:
        statement = select(Exercise).where(Exercise.user_id == user_id, Exercise.name == name)
        return self.session.exec(statement).first()

    def list_visible(self, user_id: int, system_user_id: Optional[int] = None,
                     category: Optional[Category] = None, ) -> list[Exercise]:
        """Exercises owned by *user_id* or the system user.

        Ordered own exercises first, then by category and name.
        """
        owners = [user_id] if system_user_id is None else [user_id, system_user_id]
        statement = select(Exercise).where(col(Exercise.user_id).in_(owners))
        if category is not None:
            statement = statement.where(Exercise.category == category)
        statement = statement.order_by((Exercise.user_id == user_id).desc(), Exercise.category, Exercise.name)
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int) -> int:
        statement = select(func.count()).select_from(Exercise).where(Exercise.user_id == user_id)
        return self.session.exec(statement).first() or 0

    def set_counts(self, user_id: int, exercise_ids: list[int]) -> dict[int, int]:
        """Number of sets *user_id* logged per exercise id (missing ids have no sets)."""
        if not exercise_ids:
            return { }
        statement = (select(WorkoutSet.exercise_id, func.count()).where(
            WorkoutSet.user_id == user_id, col(WorkoutSet.exercise_id).in_(exercise_ids), ).group_by(
            WorkoutSet.exercise_id))
        return { exercise_id: count for exercise_id, count in self.session.exec(statement).all() }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: Exercise) -> Exercise:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        """Delete an exercise together with its logged sets."""
        entry = self.get_by_id(entry_id)
        if entry:
            for workout_set in self.session.exec(select(WorkoutSet).where(WorkoutSet.exercise_id == entry_id)).all():
                self.session.delete(workout_set)
            self.session.flush()
            self.session.delete(entry)
            self.session.commit()
            return True
        return False
