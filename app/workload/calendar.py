"""
Calendar-day policy.

Training records are aggregated per calendar day, and "days since last
training" is measured against the current day.  Where a day begins is a
reporting decision (UTC vs. the team's local timezone), so it is carried
by an explicit :class:`DayPolicy` instead of being read from the clock
inside the engine.
"""

from __future__ import annotations

import datetime
from typing import Optional, Union
from zoneinfo import ZoneInfo

DayLike = Union[datetime.date, datetime.datetime, str]


def _resolve_timezone(name: str) -> datetime.tzinfo:
    if name.upper() in ("UTC", "Z"):
        return datetime.timezone.utc
    return ZoneInfo(name)


class DayPolicy:
    """Maps instants to calendar days in a reporting timezone.

    Naive datetimes are interpreted as UTC.
    """

    def __init__(self, timezone: str = "UTC"):
        self.timezone_name = timezone
        self.tz = _resolve_timezone(timezone)

    def __repr__(self) -> str:
        return f"DayPolicy({self.timezone_name!r})"

    def day_of(self, moment: datetime.datetime) -> datetime.date:
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=datetime.timezone.utc)
        return moment.astimezone(self.tz).date()

    def today(self, evaluation_time: Optional[datetime.datetime] = None) -> datetime.date:
        """Calendar day of *evaluation_time* (defaults to now)."""
        if evaluation_time is None:
            evaluation_time = datetime.datetime.now(datetime.timezone.utc)
        return self.day_of(evaluation_time)

    def to_calendar_day(self, value: DayLike) -> datetime.date:
        """Normalise a record date to a :class:`datetime.date`.

        Accepts dates, datetimes (converted through the policy timezone)
        and ISO strings, either ``YYYY-MM-DD`` or a full ISO datetime
        (converted like a datetime).  Raises ``ValueError`` on a
        malformed string.
        """
        if isinstance(value, datetime.datetime):
            return self.day_of(value)
        if isinstance(value, datetime.date):
            return value

        text = value.strip()
        if len(text) == 10:
            return datetime.date.fromisoformat(text)
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return self.day_of(datetime.datetime.fromisoformat(text))


UTC_DAYS = DayPolicy("UTC")


def days_between(start: datetime.date, end: datetime.date) -> int:
    """Whole days from *start* to *end* (negative if *end* is earlier)."""
    return (end - start).days
