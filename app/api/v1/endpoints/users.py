"""
User endpoints.

Registers users authenticated by the identity provider.
"""

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.user import UserCreate, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("",
             summary="Register a user known to the identity provider.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new user.

    Args:
        user_data: Identity-provider subject, email and optional name
        db: Database session

    Returns:
        Created user data

    Raises:
        HTTPException 400: If the subject or email is already registered
    """
    service = UserService(db)
    return service.register(user_data)


@router.get("/me",
            summary="Current user info.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
