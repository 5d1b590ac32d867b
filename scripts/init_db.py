"""
Database initialization script.

Creates the tables and seeds the default exercise catalog.  Use Alembic
(``alembic upgrade head``) for managed databases.

Usage:
    python scripts/init_db.py
"""

import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

from app.core.logging import configure_logging
from app.db.init_db import init_db
from scripts.seed_exercises import seed_default_exercises

logger = logging.getLogger("init_db")

if __name__ == "__main__":
    configure_logging()
    logger.info("LiftIQ Database Initialization")

    try:
        init_db()
        created = seed_default_exercises()
        logger.info("Database initialized, %d default exercises added", created)
        sys.exit(0)

    except Exception:
        logger.exception("Database initialization failed")
        sys.exit(1)
