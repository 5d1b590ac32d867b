"""
Workout set service.

Logs and removes sets, and lists them for the workout and dashboard views.
"""

import datetime
import logging

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.workout_set import WorkoutSetRepository
from app.models.exercise import Exercise
from app.models.workout_set import WorkoutSet
from app.schemas.exercise import ExerciseSummary
from app.schemas.workout_set import WorkoutSetCreate, WorkoutSetResponse
from app.services.exercise_service import ExerciseService

logger = logging.getLogger(__name__)


class WorkoutSetService:
    """Service for workout set business logic."""

    def __init__(self, session: Session):
        self.repository = WorkoutSetRepository(session)
        self.exercise_service = ExerciseService(session)

    def create(self, user_id: int, data: WorkoutSetCreate) -> WorkoutSetResponse:
        exercise = self.exercise_service.get_visible_entry(user_id, data.exercise_id)

        entry = WorkoutSet(user_id=user_id, exercise_id=exercise.id, weight=data.weight, reps=data.reps)
        if data.date is not None:
            entry.date = data.date
        entry = self.repository.create(entry)
        logger.info("User %s logged set %s (%s x %s)", user_id, entry.id, entry.weight, entry.reps)
        return self._to_response(entry, exercise)

    def delete(self, user_id: int, entry_id: int) -> None:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found", )
        self.repository.delete(entry_id)

    def recent(self, user_id: int, limit: int = 10) -> list[WorkoutSetResponse]:
        return [self._to_response(s, e) for s, e in self.repository.get_recent_with_exercise(user_id, limit)]

    def for_day(self, user_id: int, day: datetime.date) -> list[WorkoutSetResponse]:
        """Sets logged on *day*, grouped by exercise name, newest first."""
        start = datetime.datetime.combine(day, datetime.time.min)
        end = start + datetime.timedelta(days=1)
        return [self._to_response(s, e) for s, e in self.repository.get_with_exercise_between(user_id, start, end)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_response(entry: WorkoutSet, exercise: Exercise) -> WorkoutSetResponse:
        return WorkoutSetResponse(id=entry.id, user_id=entry.user_id, exercise_id=entry.exercise_id,
                                  weight=entry.weight, reps=entry.reps, volume=entry.weight * entry.reps,
                                  date=entry.date, created_at=entry.created_at,
                                  exercise=ExerciseSummary(id=exercise.id, name=exercise.name,
                                                           category=exercise.category), )
