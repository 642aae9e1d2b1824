"""
Alembic environment configuration.

Migrations run against ``settings.DATABASE_URL`` with the SQLModel
metadata of every registered model.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import engine_from_config, pool
from sqlmodel import SQLModel

from app.core.config import settings
# Register all tables on SQLModel.metadata
import app.db.base  # noqa: F401

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

config.set_main_option("sqlalchemy.url", settings.DATABASE_URL)

target_metadata = SQLModel.metadata


def run_migrations_offline() -> None:
    """Emit SQL to the script output without a live connection."""
    context.configure(url=config.get_main_option("sqlalchemy.url"), target_metadata=target_metadata,
                      literal_binds=True, compare_type=True, dialect_opts={ "paramstyle": "named" }, )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    """Run migrations over a NullPool connection."""
    connectable = engine_from_config(config.get_section(config.config_ini_section, { }), prefix="sqlalchemy.",
                                     poolclass=pool.NullPool, )

    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata, compare_type=True)

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
