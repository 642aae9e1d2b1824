"""
Daily alert service.

For every staff member: collect the athletes of the linked teams,
compute each athlete's workload series over the lookback window, bucket
the latest point into risk tiers and render the summary email.  Staff
with nothing to report get no summary.
"""

import datetime
import logging
from typing import Optional

from sqlmodel import Session

from app.core.config import Settings, settings as default_settings
from app.db.repositories.training_record import TrainingRecordRepository
from app.db.repositories.user import UserRepository
from app.models.user import User
from app.schemas.alerts import AthleteRiskSummary, DailySummaryRunResponse, StaffDailySummary
from app.schemas.workload import TrainingLoadRecord
from app.workload.acwr import calculate_workload_series
from app.workload.calendar import DayPolicy
from app.workload.risk import RiskPolicy, summarize_latest, summarize_stale
from app.workload.summary import build_daily_summary

logger = logging.getLogger(__name__)

UNKNOWN_TEAM = "Unknown team"
UNNAMED_ATHLETE = "Unnamed athlete"
DEFAULT_STAFF_NAME = "Coach"


class AlertService:
    """Builds the daily coach risk summaries."""

    def __init__(self, session: Session, settings: Optional[Settings] = None):
        cfg = settings or default_settings
        self.users = UserRepository(session)
        self.records = TrainingRecordRepository(session)
        self.day_policy = DayPolicy(cfg.REPORTING_TIMEZONE)
        self.risk_policy = RiskPolicy(no_data_days=cfg.NO_DATA_ALERT_DAYS)
        self.lookback_days = cfg.ALERT_LOOKBACK_DAYS

    def summarize_athlete(self, athlete: User, team_name: str, now: datetime.datetime, ) -> Optional[AthleteRiskSummary]:
        """Risk summary of one athlete, or ``None`` when the athlete never trained.

        An athlete with no record in the lookback window still gets a
        summary built from the last training day, so the no-data alert
        covers long absences.
        """
        today = self.day_policy.today(now)
        start = today - datetime.timedelta(days=self.lookback_days)
        rows = self.records.get_by_user_since(athlete.id, start)
        records = [TrainingLoadRecord.model_validate(r) for r in rows]
        name = athlete.name or UNNAMED_ATHLETE

        series = calculate_workload_series(records, evaluation_time=now, day_policy=self.day_policy)
        if series:
            return summarize_latest(series, self.risk_policy, athlete_id=athlete.id, athlete_name=name,
                                    team_name=team_name, )

        last_day = self.records.get_last_date(athlete.id)
        if last_day is None:
            return None
        return summarize_stale(last_day, today, self.risk_policy, athlete_id=athlete.id, athlete_name=name,
                               team_name=team_name, )

    def run_daily_summary(self, now: Optional[datetime.datetime] = None) -> DailySummaryRunResponse:
        now = now or datetime.datetime.now(datetime.timezone.utc)
        today = self.day_policy.today(now)

        summaries: list[StaffDailySummary] = []
        for staff in self.users.get_staff():
            if not staff.email:
                continue

            teams = self.users.get_teams_for_staff(staff.id)
            if not teams:
                continue
            team_names = {t.id: t.name for t in teams}

            high: list[AthleteRiskSummary] = []
            caution: list[AthleteRiskSummary] = []
            no_data: list[AthleteRiskSummary] = []

            for athlete in self.users.get_athletes_in_teams(list(team_names)):
                summary = self.summarize_athlete(athlete, team_names.get(athlete.team_id, UNKNOWN_TEAM), now)
                if summary is None:
                    continue
                if summary.no_data:
                    no_data.append(summary)
                if summary.risk_level == "high":
                    high.append(summary)
                elif summary.risk_level == "caution":
                    caution.append(summary)

            if not (high or caution or no_data):
                logger.debug("No alerts for staff %s on %s", staff.id, today)
                continue

            email = build_daily_summary(staff.name or DEFAULT_STAFF_NAME, today, high, caution, no_data)
            summaries.append(StaffDailySummary(staff_id=staff.id, staff_email=staff.email, high_risk_count=len(high),
                                               caution_count=len(caution), no_data_count=len(no_data),
                                               email=email, ))
            logger.info("Daily summary for staff %s: %d high, %d caution, %d no-data", staff.id, len(high),
                        len(caution), len(no_data))

        return DailySummaryRunResponse(date=today, summaries=summaries)
