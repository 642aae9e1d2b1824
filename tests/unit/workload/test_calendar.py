"""Tests for the calendar-day policy."""

import datetime

import pytest

from app.workload.calendar import UTC_DAYS, DayPolicy, days_between


class TestDayPolicy:
    def test_naive_datetime_is_utc(self):
        assert UTC_DAYS.day_of(datetime.datetime(2025, 3, 1, 23, 30)) == datetime.date(2025, 3, 1)

    def test_tokyo_day_boundary(self):
        policy = DayPolicy("Asia/Tokyo")
        # 15:00 UTC is midnight in Tokyo
        assert policy.day_of(datetime.datetime(2025, 3, 1, 14, 59)) == datetime.date(2025, 3, 1)
        assert policy.day_of(datetime.datetime(2025, 3, 1, 15, 0)) == datetime.date(2025, 3, 2)

    def test_aware_datetime_converted(self):
        jst = datetime.timezone(datetime.timedelta(hours=9))
        moment = datetime.datetime(2025, 3, 2, 1, 0, tzinfo=jst)
        assert UTC_DAYS.day_of(moment) == datetime.date(2025, 3, 1)

    def test_today_uses_evaluation_time(self):
        at = datetime.datetime(2024, 2, 29, 12, 0, tzinfo=datetime.timezone.utc)
        assert UTC_DAYS.today(at) == datetime.date(2024, 2, 29)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (datetime.date(2025, 1, 5), datetime.date(2025, 1, 5)),
            ("2025-01-05", datetime.date(2025, 1, 5)),
            (" 2025-01-05 ", datetime.date(2025, 1, 5)),
            ("2025-01-05T22:00:00Z", datetime.date(2025, 1, 5)),
            (datetime.datetime(2025, 1, 5, 22, 0), datetime.date(2025, 1, 5)),
        ],
    )
    def test_to_calendar_day(self, value, expected):
        assert UTC_DAYS.to_calendar_day(value) == expected

    @pytest.mark.parametrize("value", ["01/05/2025", "2025-01-01garbage", "2025-13-01", "2025-01-05T25:00:00"])
    def test_malformed_string_raises(self, value):
        with pytest.raises(ValueError):
            UTC_DAYS.to_calendar_day(value)

    def test_iso_datetime_string_follows_policy(self):
        assert DayPolicy("Asia/Tokyo").to_calendar_day("2025-01-05T22:00:00Z") == datetime.date(2025, 1, 6)

    def test_repr(self):
        assert repr(DayPolicy("Europe/Rome")) == "DayPolicy('Europe/Rome')"


class TestDaysBetween:
    @pytest.mark.parametrize(
        "start, end, expected",
        [
            (datetime.date(2025, 1, 1), datetime.date(2025, 1, 1), 0),
            (datetime.date(2025, 1, 1), datetime.date(2025, 1, 31), 30),
            (datetime.date(2025, 2, 1), datetime.date(2025, 1, 31), -1),
            (datetime.date(2024, 2, 28), datetime.date(2024, 3, 1), 2),
        ],
    )
    def test_whole_days(self, start, end, expected):
        assert days_between(start, end) == expected
