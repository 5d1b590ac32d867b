"""
Workout set endpoints.
"""

import datetime

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.schemas.workout_set import WorkoutSetCreate, WorkoutSetResponse
from app.services.workout_set_service import WorkoutSetService

router = APIRouter()


@router.post("", summary="Log a set.", response_model=WorkoutSetResponse, status_code=status.HTTP_201_CREATED, )
def create_set(data: WorkoutSetCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSetService(db)
    return service.create(user.id, data)


@router.get("/recent", summary="Most recently logged sets.", response_model=list[WorkoutSetResponse], )
def recent_sets(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSetService(db)
    return service.recent(user.id, settings.RECENT_LIMIT)


@router.get("/today", summary="Sets logged today.", response_model=list[WorkoutSetResponse], )
def todays_sets(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSetService(db)
    return service.for_day(user.id, datetime.date.today())


@router.delete("/{set_id}", summary="Delete a set.", status_code=status.HTTP_204_NO_CONTENT, )
def delete_set(set_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = WorkoutSetService(db)
    service.delete(user.id, set_id)
