"""
ACWR (Acute:Chronic Workload Ratio) — daily time series.

Turns an athlete's raw training log into a rolling load-ratio series,
one point per day that has at least one session:

- session load = stored ``load``, or ``rpe × duration_min`` (sRPE),
- daily load   = sum of the day's session loads,
- acute load   = sum of daily loads over the trailing 7 days,
- chronic load = sum over the trailing 28 days ÷ 4 (average weekly load),
- ratio        = acute / chronic, 0 when chronic is 0.

Days without sessions produce no point and count as zero inside the
windows of other points.  Ratios computed before 21 days of history are
flagged through ``has_enough_history``, not dropped.

The computation is a pure function of its input, the evaluation time and
the calendar-day policy: nothing is cached between calls and nothing is
raised for missing numeric fields.
"""

from __future__ import annotations

import bisect
import datetime
from collections import defaultdict
from typing import Iterable, Optional

from pydantic import BaseModel, Field

from app.schemas.workload import TrainingLoadRecord, WorkloadPoint
from app.workload.calendar import DayPolicy, UTC_DAYS, days_between


class WorkloadConfig(BaseModel):
    """Window sizes for the workload series."""

    acute_days: int = Field(7, ge=1, le=14)
    chronic_days: int = Field(28, ge=7, le=56)
    min_history_days: int = Field(21, ge=1)

    @property
    def chronic_weeks(self) -> float:
        return self.chronic_days / 7.0


DEFAULT_CONFIG = WorkloadConfig()


def session_load(record: TrainingLoadRecord) -> float:
    """Load of one session: stored ``load`` or sRPE, missing values as 0."""
    if record.load is not None:
        return float(record.load)
    return float(record.rpe or 0) * float(record.duration_min or 0)


def _daily_loads(records: Iterable[TrainingLoadRecord], day_policy: DayPolicy) -> dict[datetime.date, float]:
    daily: dict[datetime.date, float] = defaultdict(float)
    for record in records:
        daily[day_policy.to_calendar_day(record.date)] += session_load(record)
    return daily


def _window_sum(days: list[datetime.date], loads: list[float], index: int, length: int) -> float:
    """Sum loads of known days in the ``length``-day window ending at ``days[index]``."""
    start = days[index] - datetime.timedelta(days=length - 1)
    lo = bisect.bisect_left(days, start, 0, index + 1)
    total = 0.0
    for load in loads[lo:index + 1]:
        total += load
    return total


def calculate_workload_series(records: Iterable[TrainingLoadRecord],
                              evaluation_time: Optional[datetime.datetime] = None,
                              config: Optional[WorkloadConfig] = None,
                              day_policy: Optional[DayPolicy] = None, ) -> list[WorkloadPoint]:
    """Compute the workload series for one athlete.

    Args:
        records: Training records of a single athlete (not filtered here).
        evaluation_time: Instant used for ``days_since_last_training``;
            the current time when ``None``.
        config: Optional :class:`WorkloadConfig` override.
        day_policy: Calendar-day policy (UTC when ``None``).

    Returns:
        One :class:`WorkloadPoint` per distinct training day, ascending.
    """
    cfg = config or DEFAULT_CONFIG
    policy = day_policy or UTC_DAYS

    daily = _daily_loads(records, policy)
    if not daily:
        return []

    days = sorted(daily)
    loads = [daily[d] for d in days]

    first_day = days[0]
    last_training_date = days[-1]
    days_since_last = days_between(last_training_date, policy.today(evaluation_time))

    points: list[WorkloadPoint] = []
    for i, day in enumerate(days):
        acute = _window_sum(days, loads, i, cfg.acute_days)
        chronic_sum = _window_sum(days, loads, i, cfg.chronic_days)

        chronic = chronic_sum / cfg.chronic_weeks if chronic_sum > 0 else 0.0
        ratio = acute / chronic if chronic > 0 else 0.0

        points.append(WorkloadPoint(date=day, acute_load=acute, chronic_load=chronic, ratio=ratio,
                                    has_enough_history=days_between(first_day, day) + 1 >= cfg.min_history_days,
                                    last_training_date=last_training_date,
                                    days_since_last_training=days_since_last, ))
    return points
