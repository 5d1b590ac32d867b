"""
Exercise endpoints.

Own exercises plus the shared default catalog; only own exercises can be
edited or deleted.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.config import settings
from app.db.session import get_db
from app.models.exercise import Category
from app.models.user import User
from app.schemas.exercise import ExerciseCreate, ExerciseResponse, ExerciseUpdate, RecentExerciseResponse
from app.services.exercise_service import ExerciseService

router = APIRouter()


@router.get("", summary="List own and default exercises.", response_model=list[ExerciseResponse], )
def list_exercises(include_stats: bool = Query(False, description="Include the number of logged sets"),
                   category: Optional[Category] = Query(None, description="Filter by category"),
                   db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.list_exercises(user.id, include_stats=include_stats, category=category)


@router.post("", summary="Create an exercise.", response_model=ExerciseResponse,
             status_code=status.HTTP_201_CREATED, )
def create_exercise(data: ExerciseCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.create(user.id, data)


@router.get("/recent", summary="Recently used exercises.", response_model=list[RecentExerciseResponse], )
def recent_exercises(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.recent(user.id, settings.RECENT_LIMIT)


@router.patch("/{exercise_id}", summary="Rename an exercise or edit its notes.", response_model=ExerciseResponse, )
def update_exercise(exercise_id: int, data: ExerciseUpdate, db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    return service.update(user.id, exercise_id, data)


@router.delete("/{exercise_id}", summary="Delete an exercise and its sets.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_exercise(exercise_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = ExerciseService(db)
    service.delete(user.id, exercise_id)
