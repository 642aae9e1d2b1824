"""
Risk tiers for the latest workload point.

Only the *last* point of an athlete's series is inspected.  Tier
boundaries are alerting policy, not part of the series computation, and
are injected through :class:`RiskPolicy`.
"""

from __future__ import annotations

import datetime
from typing import Optional, Sequence

from pydantic import BaseModel, Field

from app.schemas.alerts import AthleteRiskSummary, RiskLevel
from app.schemas.workload import WorkloadPoint
from app.workload.calendar import days_between


class RiskPolicy(BaseModel):
    high_ratio: float = Field(1.5, description="ratio above this is high risk")
    caution_ratio: float = Field(1.3, description="ratio from this up to high_ratio is caution")
    low_ratio: float = Field(0.8, description="ratio below this is low load")
    no_data_days: int = Field(7, ge=1, description="days without training that raise a no-data alert")


DEFAULT_RISK_POLICY = RiskPolicy()


def classify_ratio(ratio: float, policy: Optional[RiskPolicy] = None) -> RiskLevel:
    """Map a ratio to high / caution / good / low."""
    p = policy or DEFAULT_RISK_POLICY
    if ratio > p.high_ratio:
        return "high"
    if ratio >= p.caution_ratio:
        return "caution"
    if ratio < p.low_ratio:
        return "low"
    return "good"


def summarize_stale(last_training_date: datetime.date, today: datetime.date, policy: Optional[RiskPolicy] = None,
                    athlete_id: Optional[int] = None, athlete_name: str = "",
                    team_name: str = "", ) -> AthleteRiskSummary:
    """Summary for an athlete whose last session lies outside the loaded history.

    No ratio can be computed, so the athlete is never tiered; only the
    no-data flag applies.
    """
    p = policy or DEFAULT_RISK_POLICY
    days_since = days_between(last_training_date, today)
    return AthleteRiskSummary(athlete_id=athlete_id, athlete_name=athlete_name, team_name=team_name,
                              latest_ratio=0.0, risk_level="insufficient_history",
                              no_data=days_since >= p.no_data_days, last_training_date=last_training_date,
                              days_since_last_training=days_since, )


def summarize_latest(series: Sequence[WorkloadPoint], policy: Optional[RiskPolicy] = None,
                     athlete_id: Optional[int] = None, athlete_name: str = "",
                     team_name: str = "", ) -> Optional[AthleteRiskSummary]:
    """Build the risk summary of the last point, or ``None`` for an empty series."""
    if not series:
        return None

    p = policy or DEFAULT_RISK_POLICY
    latest = series[-1]

    if latest.has_enough_history:
        level = classify_ratio(latest.ratio, p)
    else:
        level = "insufficient_history"

    return AthleteRiskSummary(athlete_id=athlete_id, athlete_name=athlete_name, team_name=team_name,
                              latest_ratio=round(latest.ratio, 2), risk_level=level,
                              no_data=latest.days_since_last_training >= p.no_data_days,
                              last_training_date=latest.last_training_date,
                              days_since_last_training=latest.days_since_last_training, )
