"""Tests for application settings validation."""

import pytest
from pydantic import ValidationError

from app.core.config import Settings


class TestReportingTimezone:
    @pytest.mark.parametrize("name", ["UTC", "Asia/Tokyo", "Europe/Rome"])
    def test_known_zones_accepted(self, name):
        assert Settings(REPORTING_TIMEZONE=name).REPORTING_TIMEZONE == name

    @pytest.mark.parametrize("name", ["Mars/Olympus", "Asia/Tokio", ""])
    def test_unknown_zone_rejected(self, name):
        with pytest.raises(ValidationError):
            Settings(REPORTING_TIMEZONE=name)
