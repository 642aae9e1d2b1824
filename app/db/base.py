"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from app.models.user import User  # noqa: F401
from app.models.team import StaffTeamLink, Team  # noqa: F401
from app.models.training_record import TrainingRecord  # noqa: F401
