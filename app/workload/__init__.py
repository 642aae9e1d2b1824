"""Workload core — ACWR series, calendar-day policy, risk tiers."""

from app.workload.acwr import WorkloadConfig, calculate_workload_series
from app.workload.calendar import DayPolicy
from app.workload.risk import RiskPolicy, classify_ratio, summarize_latest

__all__ = [
    "WorkloadConfig",
    "calculate_workload_series",
    "DayPolicy",
    "RiskPolicy",
    "classify_ratio",
    "summarize_latest",
]
