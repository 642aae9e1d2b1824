"""
Analytics endpoints — workload series and daily risk alerts.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlmodel import Session

from app.db.session import get_db
from app.schemas.alerts import DailySummaryRunResponse
from app.schemas.workload import WorkloadSeriesResponse
from app.services.alert_service import AlertService
from app.services.training_record_service import TrainingRecordService

router = APIRouter()


@router.get(
    "/athletes/{athlete_id}/acwr",
    summary="Get the athlete's ACWR series and latest risk level.",
    response_model=WorkloadSeriesResponse,
)
def get_workload_series(
    athlete_id: int,
    as_of: Optional[datetime.datetime] = Query(
        None, description="Evaluation time (defaults to now)"
    ),
    lookback_days: Optional[int] = Query(
        None, ge=28, le=365, description="Days of history to load (defaults to ALERT_LOOKBACK_DAYS)"
    ),
    db: Session = Depends(get_db),
):
    service = TrainingRecordService(db)
    return service.get_workload_series(athlete_id, as_of, lookback_days)


@router.post(
    "/alerts/daily-summary",
    summary="Build the daily coach risk summaries.",
    response_model=DailySummaryRunResponse,
)
def run_daily_summary(
    as_of: Optional[datetime.datetime] = Query(
        None, description="Evaluation time (defaults to now)"
    ),
    db: Session = Depends(get_db),
):
    return AlertService(db).run_daily_summary(as_of)
