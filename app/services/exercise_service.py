"""
Exercise service.

Users see their own exercises plus the system user's default catalog, but
may only modify their own.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.db.repositories.workout_set import WorkoutSetRepository
from app.models.exercise import Category, Exercise
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate, RecentExerciseResponse
from app.services.user_service import UserService

logger = logging.getLogger(__name__)


class ExerciseService:
    """Service for exercise business logic."""

    def __init__(self, session: Session):
        self.repository = ExerciseRepository(session)
        self.set_repository = WorkoutSetRepository(session)
        self.user_service = UserService(session)

    def list_exercises(self, user_id: int, include_stats: bool = False,
                       category: Optional[Category] = None, ) -> list[ExerciseResponse]:
        system_user = self.user_service.get_system_user()
        system_user_id = system_user.id if system_user and system_user.id != user_id else None
        entries = self.repository.list_visible(user_id, system_user_id, category)

        counts: Optional[dict[int, int]] = None
        if include_stats:
            counts = self.repository.set_counts(user_id, [e.id for e in entries])

        return [self._to_response(e, user_id, counts) for e in entries]

    def create(self, user_id: int, data: ExerciseCreate) -> ExerciseResponse:
        name = data.name.strip()
        if self.repository.get_by_name(user_id, name):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"Exercise '{name}' already exists", )

        entry = Exercise(user_id=user_id, name=name, category=data.category, notes=data.notes)
        entry = self.repository.create(entry)
        logger.info("User %s created exercise %s", user_id, entry.id)
        return self._to_response(entry, user_id)

    def update(self, user_id: int, entry_id: int, data: ExerciseUpdate) -> ExerciseResponse:
        entry = self._get_owned_entry(user_id, entry_id)

        if data.name is not None:
            name = data.name.strip()
            duplicate = self.repository.get_by_name(user_id, name)
            if duplicate and duplicate.id != entry.id:
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                    detail=f"Exercise '{name}' already exists", )
            entry.name = name

        if data.notes is not None:
            entry.notes = data.notes

        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        return self._to_response(entry, user_id)

    def delete(self, user_id: int, entry_id: int) -> None:
        self._get_owned_entry(user_id, entry_id)
        self.repository.delete(entry_id)
        logger.info("User %s deleted exercise %s and its sets", user_id, entry_id)

    def recent(self, user_id: int, limit: int = 10) -> list[RecentExerciseResponse]:
        return [RecentExerciseResponse(id=e.id, name=e.name, category=e.category, last_used=last_used) for
                e, last_used in self.set_repository.get_recent_exercises(user_id, limit)]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_visible_entry(self, user_id: int, entry_id: int) -> Exercise:
        """Exercise owned by the user or by the system catalog, else 404."""
        entry = self.repository.get_by_id(entry_id)
        if entry and entry.user_id != user_id:
            system_user = self.user_service.get_system_user()
            if not system_user or entry.user_id != system_user.id:
                entry = None
        if not entry:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found", )
        return entry

    def _get_owned_entry(self, user_id: int, entry_id: int) -> Exercise:
        entry = self.repository.get_by_id(entry_id)
        if not entry or entry.user_id != user_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found", )
        return entry

    @staticmethod
    def _to_response(entry: Exercise, user_id: int, counts: Optional[dict[int, int]] = None) -> ExerciseResponse:
        return ExerciseResponse(id=entry.id, user_id=entry.user_id, name=entry.name, category=entry.category,
                                notes=entry.notes, is_user_exercise=entry.user_id == user_id,
                                set_count=counts.get(entry.id, 0) if counts is not None else None,
                                created_at=entry.created_at, updated_at=entry.updated_at, )
