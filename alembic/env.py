"""
Alembic migration environment for the LiftIQ schema.

Runs against ``settings.DATABASE_URL``: PostgreSQL in production, SQLite for
local runs (batch mode, since SQLite cannot alter constraints in place).
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from app.core.config import settings
import app.db.base  # noqa: F401  (users, exercises, workout_sets)

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

target_metadata = SQLModel.metadata

# Options shared by offline and online runs
_context_options = {
    "target_metadata": target_metadata,
    "compare_type": True,
    "render_as_batch": settings.DATABASE_URL.startswith("sqlite"),
}


def run_migrations_offline() -> None:
    """Emit the migration SQL to the script output without a connection."""
    context.configure(url=config.get_main_option("sqlalchemy.url"), literal_binds=True,
                      dialect_opts={ "paramstyle": "named" }, **_context_options)

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Apply migrations over a fresh, unpooled connection."""
    connectable = engine_from_config(config.get_section(config.config_ini_section, { }), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool, )

    with connectable.connect() as connection:
        context.configure(connection=connection, **_context_options)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
