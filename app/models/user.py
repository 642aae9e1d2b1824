"""
User database model.

Athletes, staff (coaches) and admins share one table; ``role``
distinguishes them and ``team_id`` places athletes on a team.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class User(SQLModel, table=True):
    """
    User model.

    Stores the profile fields the workload and alerting features need.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: Optional[str] = Field(default=None, unique=True, index=True, max_length=255)
    name: Optional[str] = Field(default=None, max_length=255)
    role: str = Field(default="athlete", max_length=20, index=True, nullable=False)
    team_id: Optional[int] = Field(default=None, foreign_key="teams.id", index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=datetime.utcnow)
