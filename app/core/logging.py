"""
Logging setup.

Modules log through ``logging.getLogger(__name__)``; this configures the
root handler once at application start.
"""

import logging
from typing import Optional

from app.core.config import settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Install a stream handler on the root logger at *level* (defaults to ``LOG_LEVEL``)."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=_FORMAT)
