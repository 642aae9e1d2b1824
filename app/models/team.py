"""
Team database models.

A team groups athletes; staff members are linked to the teams they
supervise through :class:`StaffTeamLink`.
"""

from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class Team(SQLModel, table=True):
    __tablename__ = "teams"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)


class StaffTeamLink(SQLModel, table=True):
    """Many-to-many link between a staff user and a team."""

    __tablename__ = "staff_team_links"
    __table_args__ = (UniqueConstraint("staff_user_id", "team_id", name="uq_staff_team"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    staff_user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    team_id: int = Field(foreign_key="teams.id", nullable=False, index=True)
