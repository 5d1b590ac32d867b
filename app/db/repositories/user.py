"""
User repository.

Handles database operations for User model.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User) -> User:
        """
        Create a new user in the database.

        Args:
            user: User instance to create

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.session.get(User, user_id)

    def get_by_external_id(self, external_id: str) -> Optional[User]:
        """
        Get user by identity-provider subject.

        Args:
            external_id: Subject identifier forwarded by the identity provider

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.external_id == external_id)
        return self.session.exec(statement).first()

    def get_by_email(self, email: str) -> Optional[User]:
        statement = select(User).where(User.email == email)
        return self.session.exec(statement).first()

    def exists(self, external_id: str, email: str) -> bool:
        """
        Check if a user with the given subject or email exists.

        Args:
            external_id: Identity-provider subject
            email: Email to check

        Returns:
            True if either is taken, False otherwise
        """
        return self.get_by_external_id(external_id) is not None or self.get_by_email(email) is not None
