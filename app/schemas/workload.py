"""
Workload (ACWR) schemas.

``TrainingLoadRecord`` is the engine's input: one logged session.
``WorkloadPoint`` is the engine's output: the acute/chronic state of one
training day.  Points are immutable and never persisted by the engine.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.schemas.alerts import AthleteRiskSummary


class TrainingLoadRecord(BaseModel):
    """A training session as seen by the workload engine."""

    model_config = ConfigDict(from_attributes=True)

    user_id: Optional[int] = Field(None, description="Athlete identifier (not used for filtering)")
    date: datetime.date = Field(..., description="Calendar day of the session")
    rpe: Optional[float] = Field(None, description="Session rating of perceived exertion")
    duration_min: Optional[float] = Field(None, description="Session duration in minutes")
    load: Optional[float] = Field(None, description="Precomputed session load; derived from sRPE when absent")


class WorkloadPoint(BaseModel):
    """Acute/chronic workload state for a single training day."""

    model_config = ConfigDict(frozen=True)

    date: datetime.date
    acute_load: float = Field(..., description="Sum of daily loads over the trailing 7 days")
    chronic_load: float = Field(..., description="Trailing 28-day load expressed as a weekly average")
    ratio: float = Field(..., description="acute_load / chronic_load, 0 when chronic_load is 0")
    has_enough_history: bool = Field(..., description="Whether the series spans the minimum history window")
    last_training_date: datetime.date = Field(..., description="Most recent training day in the input")
    days_since_last_training: int = Field(..., description="Whole days between evaluation day and last training")


class WorkloadSeriesResponse(BaseModel):
    """Workload series for one athlete, as served to the chart."""

    athlete_id: int
    as_of: datetime.date
    points: list[WorkloadPoint]
    latest: Optional[AthleteRiskSummary] = Field(None, description="Risk summary of the last point, if any")
