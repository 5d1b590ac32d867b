"""
User service.

Business logic for user management.  Authentication itself happens in the
external identity provider; this service only maps its subjects to users.
"""

import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.user import UserCreate

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> User:
        """
        Register a user known to the identity provider.

        Args:
            user_data: Subject identifier, email and optional name

        Returns:
            Created user

        Raises:
            HTTPException: If the subject or email is already registered
        """
        if self.repository.exists(user_data.external_id, user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already registered")

        user = User(external_id=user_data.external_id, email=user_data.email, name=user_data.name)
        user = self.repository.create(user)
        logger.info("Registered user %s", user.id)
        return user

    def get_user_by_external_id(self, external_id: str) -> Optional[User]:
        return self.repository.get_by_external_id(external_id)

    def get_system_user(self) -> Optional[User]:
        """Owner of the default exercise catalog, if it has been seeded."""
        return self.repository.get_by_email(settings.SYSTEM_USER_EMAIL)

    def get_or_create_system_user(self) -> User:
        user = self.get_system_user()
        if user:
            return user
        return self.repository.create(
            User(external_id=settings.SYSTEM_USER_EXTERNAL_ID, email=settings.SYSTEM_USER_EMAIL, name="System"))
