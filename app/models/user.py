"""
User database model.

Users are authenticated by the external identity provider; this table maps
the provider's subject identifier to the local user row.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    Local user record.

    ``external_id`` is the identity provider's subject identifier.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    external_id: str = Field(unique=True, index=True, max_length=255, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)

    # Profile
    name: Optional[str] = Field(default=None, max_length=255)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
