"""
Alembic environment configuration

IMPORTANT: Uses DIRECT CONNECTION to Supabase (port 5432).
DO NOT use the Supabase connection pooler (port 6543): migrations need
direct database access and full PostgreSQL transaction support.
"""
import logging
from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config
from sqlalchemy import pool
from sqlalchemy.exc import OperationalError

from farmhub.core.database import Base
from farmhub.core.config import settings
from farmhub import models  # noqa: F401  registers every table on Base.metadata

config = context.config

# Must use direct connection (port 5432), NOT pooler (port 6543)
config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    """Run migrations in 'offline' mode."""
    url = config.get_main_option("sqlalchemy.url")
    context.configure(
        url=url,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations in 'online' mode."""
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    try:
        with connectable.connect() as connection:
            context.configure(connection=connection, target_metadata=target_metadata)

            with context.begin_transaction():
                context.run_migrations()
    except OperationalError as e:
        error_msg = str(e)
        if "could not translate host name" in error_msg or "nodename nor servname provided" in error_msg:
            logger.error(
                "Cannot resolve the database hostname. The Supabase project may be paused "
                "or DATABASE_URL may be wrong. Use the direct connection "
                "(db.<project-ref>.supabase.co:5432), not the pooler. "
                "To generate SQL without connecting run: alembic upgrade head --sql"
            )
        raise


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
