"""
Training record service.

Logs sessions for an athlete and serves the athlete's workload series.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from app.core.config import settings
from app.db.repositories.training_record import TrainingRecordRepository
from app.db.repositories.user import UserRepository
from app.models.training_record import TrainingRecord
from app.models.user import User
from app.schemas.training_record import TrainingRecordCreate, TrainingRecordResponse
from app.schemas.workload import TrainingLoadRecord, WorkloadSeriesResponse
from app.workload.acwr import calculate_workload_series
from app.workload.calendar import DayPolicy
from app.workload.risk import RiskPolicy, summarize_latest, summarize_stale

logger = logging.getLogger(__name__)


class TrainingRecordService:
    """Service for training record business logic."""

    def __init__(self, session: Session):
        self.repository = TrainingRecordRepository(session)
        self.users = UserRepository(session)
        self.day_policy = DayPolicy(settings.REPORTING_TIMEZONE)
        self.risk_policy = RiskPolicy(no_data_days=settings.NO_DATA_ALERT_DAYS)

    def create(self, athlete_id: int, data: TrainingRecordCreate) -> TrainingRecordResponse:
        self._get_athlete(athlete_id)
        entry = TrainingRecord(user_id=athlete_id, date=data.date, rpe=data.rpe, duration_min=data.duration_min,
                               load=data.load, )
        entry = self.repository.create(entry)
        logger.debug("Logged training record %s for athlete %s on %s", entry.id, athlete_id, entry.date)
        return TrainingRecordResponse.model_validate(entry)

    def get_range(self, athlete_id: int, start: datetime.date, end: datetime.date, ) -> list[TrainingRecordResponse]:
        self._get_athlete(athlete_id)
        entries = self.repository.get_by_user_date_range(athlete_id, start, end)
        return [TrainingRecordResponse.model_validate(e) for e in entries]

    def delete(self, athlete_id: int, record_id: int) -> None:
        entry = self.repository.get_by_id(record_id)
        if not entry or entry.user_id != athlete_id:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Training record not found", )
        self.repository.delete(record_id)

    def get_workload_series(self, athlete_id: int, as_of: Optional[datetime.datetime] = None,
                            lookback_days: Optional[int] = None, ) -> WorkloadSeriesResponse:
        """Compute the athlete's workload series over the lookback window.

        The window should exceed the 28-day chronic window, otherwise
        chronic loads at the left edge are artificially low.
        """
        athlete = self._get_athlete(athlete_id)
        now = as_of or datetime.datetime.now(datetime.timezone.utc)
        today = self.day_policy.today(now)
        start = today - datetime.timedelta(days=lookback_days or settings.ALERT_LOOKBACK_DAYS)

        rows = self.repository.get_by_user_since(athlete_id, start)
        records = [TrainingLoadRecord.model_validate(r) for r in rows]
        points = calculate_workload_series(records, evaluation_time=now, day_policy=self.day_policy)

        if points:
            latest = summarize_latest(points, self.risk_policy, athlete_id=athlete.id, athlete_name=athlete.name or "")
        else:
            last_day = self.repository.get_last_date(athlete_id)
            latest = None if last_day is None else summarize_stale(last_day, today, self.risk_policy,
                                                                   athlete_id=athlete.id,
                                                                   athlete_name=athlete.name or "")
        return WorkloadSeriesResponse(athlete_id=athlete_id, as_of=today, points=points, latest=latest)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_athlete(self, athlete_id: int) -> User:
        athlete = self.users.get_by_id(athlete_id)
        if not athlete or athlete.role != "athlete":
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Athlete not found", )
        return athlete
