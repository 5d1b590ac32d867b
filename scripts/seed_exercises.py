"""
Seed the default exercise catalog.

Default exercises belong to the system user (``SYSTEM_USER_EMAIL``) and are
listed for every user.  Re-running is safe: existing names are skipped.

Usage:
    python scripts/seed_exercises.py
"""

import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlmodel import Session

from app.db.repositories.exercise import ExerciseRepository
from app.db.session import engine
from app.models.exercise import Category, Exercise
from app.services.user_service import UserService

logger = logging.getLogger(__name__)

DEFAULT_EXERCISES: list[tuple[str, Category]] = [
    # CHEST
    ("Bench Press (Barbell)", Category.CHEST),
    ("Bench Press (Dumbbell)", Category.CHEST),
    ("Incline Bench Press", Category.CHEST),
    ("Decline Bench Press", Category.CHEST),
    ("Chest Fly (Dumbbell)", Category.CHEST),
    ("Cable Fly", Category.CHEST),
    ("Push-Ups", Category.CHEST),
    ("Chest Press Machine", Category.CHEST),
    ("Pec Deck", Category.CHEST),
    # BACK
    ("Pull-Ups", Category.BACK),
    ("Lat Pulldown", Category.BACK),
    ("Bent Over Row (Barbell)", Category.BACK),
    ("Bent Over Row (Dumbbell)", Category.BACK),
    ("T-Bar Row", Category.BACK),
    ("Seated Cable Row", Category.BACK),
    ("Deadlift", Category.BACK),
    ("Romanian Deadlift", Category.BACK),
    ("Face Pulls", Category.BACK),
    # LEGS
    ("Squat (Barbell)", Category.LEGS),
    ("Front Squat", Category.LEGS),
    ("Leg Press", Category.LEGS),
    ("Leg Extension", Category.LEGS),
    ("Leg Curl", Category.LEGS),
    ("Walking Lunges", Category.LEGS),
    ("Bulgarian Split Squat", Category.LEGS),
    ("Calf Raises", Category.LEGS),
    ("Hack Squat", Category.LEGS),
    # SHOULDERS
    ("Overhead Press (Barbell)", Category.SHOULDERS),
    ("Overhead Press (Dumbbell)", Category.SHOULDERS),
    ("Arnold Press", Category.SHOULDERS),
    ("Lateral Raise", Category.SHOULDERS),
    ("Front Raise", Category.SHOULDERS),
    ("Rear Delt Fly", Category.SHOULDERS),
    ("Upright Row", Category.SHOULDERS),
    ("Shoulder Press Machine", Category.SHOULDERS),
    # ARMS
    ("Bicep Curl (Barbell)", Category.ARMS),
    ("Bicep Curl (Dumbbell)", Category.ARMS),
    ("Hammer Curl", Category.ARMS),
    ("Preacher Curl", Category.ARMS),
    ("Cable Curl", Category.ARMS),
    ("Tricep Extension", Category.ARMS),
    ("Tricep Pushdown", Category.ARMS),
    ("Close-Grip Bench Press", Category.ARMS),
    ("Dips", Category.ARMS),
    # CORE
    ("Plank", Category.CORE),
    ("Crunches", Category.CORE),
    ("Russian Twists", Category.CORE),
    ("Leg Raises", Category.CORE),
    ("Ab Wheel", Category.CORE),
    ("Cable Crunch", Category.CORE),
    ("Dead Bug", Category.CORE),
    # CARDIO
    ("Treadmill", Category.CARDIO),
    ("Elliptical", Category.CARDIO),
    ("Rowing Machine", Category.CARDIO),
    ("Stationary Bike", Category.CARDIO),
    ("Stair Climber", Category.CARDIO),
]


def seed_default_exercises(session: Optional[Session] = None) -> int:
    """Create missing default exercises for the system user.

    Returns:
        Number of exercises created.
    """
    if session is None:
        with Session(engine) as own_session:
            return seed_default_exercises(own_session)

    system_user = UserService(session).get_or_create_system_user()
    repository = ExerciseRepository(session)

    created = 0
    for name, category in DEFAULT_EXERCISES:
        if repository.get_by_name(system_user.id, name):
            continue
        repository.create(Exercise(user_id=system_user.id, name=name, category=category))
        created += 1

    logger.info("Seeded %d default exercises (%d already present)", created, len(DEFAULT_EXERCISES) - created)
    return created


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    seed_default_exercises()
