"""Tests for the daily summary email rendering."""

import datetime

from app.schemas.alerts import AthleteRiskSummary
from app.workload.summary import build_daily_summary

DAY = datetime.date(2025, 2, 1)


def _athlete(name: str, ratio: float, level: str, team: str = "Varsity") -> AthleteRiskSummary:
    return AthleteRiskSummary(
        athlete_name=name,
        team_name=team,
        latest_ratio=ratio,
        risk_level=level,
        last_training_date=datetime.date(2025, 1, 30),
        days_since_last_training=2,
    )


class TestBuildDailySummary:
    def test_subject_contains_date(self):
        email = build_daily_summary("Coach K", DAY, [], [])
        assert email.subject == "[Workload] High-risk alert summary (2025-02-01)"

    def test_no_high_risk_message(self):
        email = build_daily_summary("Coach K", DAY, [], [_athlete("Ken", 1.4, "caution")])
        assert "No high-risk athletes." in email.text
        assert "No high-risk athletes." in email.html
        assert "Ken" in email.text

    def test_high_risk_rows(self):
        email = build_daily_summary("Coach K", DAY, [_athlete("Mai", 1.8, "high")], [])
        assert "- Varsity / Mai : ACWR 1.80, last training 2025-01-30 (2 days ago)" in email.text
        assert "No high-risk" not in email.text
        assert "<td" in email.html and "1.80" in email.html

    def test_caution_section_omitted_when_empty(self):
        email = build_daily_summary("Coach K", DAY, [_athlete("Mai", 1.8, "high")], [])
        assert "Caution" not in email.text

    def test_no_data_section(self):
        stale = _athlete("Ren", 1.0, "good")
        email = build_daily_summary("Coach K", DAY, [], [], [stale])
        assert "[No recent training data]" in email.text
        assert "Ren" in email.html

    def test_names_are_escaped_in_html(self):
        email = build_daily_summary("<Coach>", DAY, [_athlete("<b>x</b>", 2.0, "high")], [])
        assert "<b>x</b>" not in email.html
        assert "&lt;b&gt;x&lt;/b&gt;" in email.html
        assert "&lt;Coach&gt;" in email.html
