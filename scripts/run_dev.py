"""
Development server launcher.

Loads the .env file and serves the API with uvicorn, reloading on change.

Usage:
    python scripts/run_dev.py [--host HOST] [--port PORT] [--no-reload]
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from dotenv import load_dotenv

load_dotenv()

import uvicorn

from app.core.config import settings
from app.core.logging import configure_logging

logger = logging.getLogger("run_dev")


def main():
    parser = argparse.ArgumentParser(description="Run the LiftIQ API in development mode.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload")
    args = parser.parse_args()

    configure_logging()
    logger.info("Serving %s on http://%s:%s (docs at /docs, database %s)", settings.PROJECT_NAME, args.host,
                args.port, settings.DATABASE_URL.split("://", 1)[0])

    uvicorn.run("app.main:app", host=args.host, port=args.port, reload=not args.no_reload,
                log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
