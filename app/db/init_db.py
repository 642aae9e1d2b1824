"""
Database initialization.

Creates all tables registered on ``SQLModel.metadata``.  Production
databases are managed through Alembic; this is for local and test runs.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine | None = None) -> None:
    """Create every table known to the models."""
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    target = engine or default_engine
    logger.info("Creating database tables on %s", target.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(target)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
