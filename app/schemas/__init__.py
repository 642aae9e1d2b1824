"""Pydantic schemas for request/response validation."""

from app.schemas.alerts import (
    AthleteRiskSummary,
    DailySummaryEmail,
    DailySummaryRunResponse,
    StaffDailySummary,
)
from app.schemas.training_record import TrainingRecordCreate, TrainingRecordResponse
from app.schemas.workload import TrainingLoadRecord, WorkloadPoint, WorkloadSeriesResponse

__all__ = [
    "AthleteRiskSummary",
    "DailySummaryEmail",
    "DailySummaryRunResponse",
    "StaffDailySummary",
    "TrainingRecordCreate",
    "TrainingRecordResponse",
    "TrainingLoadRecord",
    "WorkloadPoint",
    "WorkloadSeriesResponse",
]
