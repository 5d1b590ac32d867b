"""
Shared API dependencies.

Reusable FastAPI dependencies for identity and database access.  The external
identity provider authenticates the caller and forwards its subject
identifier in the ``X-User-Id`` header (``IDENTITY_HEADER``).
"""

from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import APIKeyHeader
from sqlmodel import Session

from app.core.config import settings
from app.db.session import get_db
from app.models.user import User
from app.services.user_service import UserService

identity_scheme = APIKeyHeader(name=settings.IDENTITY_HEADER, auto_error=False,
                               description="Subject identifier forwarded by the identity provider", )


def get_external_id(external_id: Optional[str] = Depends(identity_scheme)) -> str:
    """Return the forwarded subject identifier, 401 if absent."""
    if not external_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Unauthorized")
    return external_id


def get_current_user(external_id: str = Depends(get_external_id), db: Session = Depends(get_db), ) -> User:
    """Map the forwarded subject identifier to the local user."""
    user = UserService(db).get_user_by_external_id(external_id)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user
