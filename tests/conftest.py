"""Test configuration: run against SQLite instead of the configured server."""

import os

# Must be set before app.core.config is imported
os.environ.setdefault("DATABASE_URL_OVERRIDE", "sqlite://")
