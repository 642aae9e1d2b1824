"""Business logic services."""

from app.services.alert_service import AlertService
from app.services.training_record_service import TrainingRecordService

__all__ = [
    "AlertService",
    "TrainingRecordService",
]
