"""
Risk alert schemas.

Risk levels are *operational categories* applied to the most recent
workload point of an athlete:

- ``high``                 — ratio > 1.5
- ``caution``              — 1.3 <= ratio <= 1.5
- ``good``                 — 0.8 <= ratio < 1.3
- ``low``                  — ratio < 0.8
- ``insufficient_history`` — fewer than 21 days since the first record
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

RiskLevel = Literal["high", "caution", "good", "low", "insufficient_history"]


class AthleteRiskSummary(BaseModel):
    """Latest workload state of one athlete, bucketed into a risk level."""

    athlete_id: Optional[int] = None
    athlete_name: str = ""
    team_name: str = ""
    latest_ratio: float = Field(..., description="Ratio of the last point, rounded to 2 decimals")
    risk_level: RiskLevel
    no_data: bool = Field(False, description="True when the athlete has not trained for too long")
    last_training_date: datetime.date
    days_since_last_training: int


class DailySummaryEmail(BaseModel):
    """Rendered daily summary, ready for whatever transport delivers it."""

    subject: str
    text: str
    html: str


class StaffDailySummary(BaseModel):
    """Daily alert result for one staff member."""

    staff_id: int
    staff_email: str
    high_risk_count: int
    caution_count: int
    no_data_count: int
    email: DailySummaryEmail


class DailySummaryRunResponse(BaseModel):
    status: str = "ok"
    date: datetime.date
    summaries: list[StaffDailySummary]
