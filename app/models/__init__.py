"""SQLModel database models."""

from app.models.user import User
from app.models.team import StaffTeamLink, Team
from app.models.training_record import TrainingRecord

__all__ = [
    "User",
    "Team",
    "StaffTeamLink",
    "TrainingRecord",
]
