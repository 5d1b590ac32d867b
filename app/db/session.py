"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlmodel import Session, create_engine

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL

# Pool sizing applies to server databases only
_engine_options = { } if DATABASE_URL.startswith("sqlite") else { "pool_size": 5, "max_overflow": 10 }

engine = create_engine(
    DATABASE_URL,
    echo=settings.DEBUG,  # Log SQL queries in debug mode
    pool_pre_ping=True,   # Verify connections before using
    **_engine_options
)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance

    Example:
        @app.get("/exercises")
        def get_exercises(db: Session = Depends(get_db)):
            return db.exec(select(Exercise)).all()
    """
    with Session(engine) as session:
        yield session
