"""Database repositories."""

from app.db.repositories.user import UserRepository
from app.db.repositories.training_record import TrainingRecordRepository

__all__ = [
    "UserRepository",
    "TrainingRecordRepository",
]
