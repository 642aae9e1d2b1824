"""
User repository.

Handles database operations for User, Team and StaffTeamLink models.
"""

from typing import Optional

from sqlmodel import Session, select

from app.models.team import StaffTeamLink, Team
from app.models.user import User


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_staff(self) -> list[User]:
        """Get all staff users, ordered by id."""
        statement = select(User).where(User.role == "staff").order_by(User.id)
        return list(self.session.exec(statement).all())

    def get_teams_for_staff(self, staff_user_id: int) -> list[Team]:
        """
        Get the teams a staff user is linked to.

        Args:
            staff_user_id: Staff user ID

        Returns:
            Linked teams, ordered by id
        """
        statement = (select(Team).join(StaffTeamLink, StaffTeamLink.team_id == Team.id)
                     .where(StaffTeamLink.staff_user_id == staff_user_id).order_by(Team.id))
        return list(self.session.exec(statement).all())

    def get_athletes_in_teams(self, team_ids: list[int]) -> list[User]:
        if not team_ids:
            return []
        statement = (select(User).where(User.team_id.in_(team_ids), User.role == "athlete")
                     .order_by(User.team_id, User.id))
        return list(self.session.exec(statement).all())
