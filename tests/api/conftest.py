"""API test fixtures: in-memory SQLite database and an authenticated client."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401  (registers every table on SQLModel.metadata)
from app.core.config import settings
from app.db.session import get_db
from app.main import app
from app.models.exercise import Category, Exercise
from app.models.user import User

EXTERNAL_ID = "auth0|lifter"


@pytest.fixture
def engine():
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def client(engine):
    def _get_db():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def user(session) -> User:
    user = User(external_id=EXTERNAL_ID, email="lifter@liftiq.app", name="Lifter")
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def headers(user) -> dict[str, str]:
    return { settings.IDENTITY_HEADER: user.external_id }


@pytest.fixture
def system_catalog(session) -> list[Exercise]:
    """System user owning two default exercises."""
    system = User(external_id=settings.SYSTEM_USER_EXTERNAL_ID, email=settings.SYSTEM_USER_EMAIL, name="System")
    session.add(system)
    session.commit()
    session.refresh(system)

    exercises = [Exercise(user_id=system.id, name="Bench Press (Barbell)", category=Category.CHEST),
                 Exercise(user_id=system.id, name="Deadlift", category=Category.BACK), ]
    session.add_all(exercises)
    session.commit()
    for exercise in exercises:
        session.refresh(exercise)
    return exercises
