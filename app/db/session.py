"""
Database session management.

Provides SQLModel engine and session creation.
"""

from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, Session
from typing import Generator

from app.core.config import settings

DATABASE_URL: str = settings.DATABASE_URL

if DATABASE_URL.startswith("sqlite"):
    # Single shared connection so in-memory databases survive across sessions
    engine = create_engine(DATABASE_URL, echo=settings.DEBUG, connect_args={"check_same_thread": False},
                           poolclass=StaticPool)
else:
    engine = create_engine(
        DATABASE_URL,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
