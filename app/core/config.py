"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Athlete Workload Monitor"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = []
    PROJECT_URL: str = ""

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_USER: str = "postgres"
    DATABASE_PASSWORD: str = ""
    DATABASE_HOST: str = "localhost"
    DATABASE_PORT: int = 5432
    DATABASE_DBNAME: str = "postgres"

    # Full URL override (e.g. "sqlite://" for local runs)
    DATABASE_URL_OVERRIDE: str = ""

    # Reporting
    REPORTING_TIMEZONE: str = "UTC"
    ALERT_LOOKBACK_DAYS: int = 35
    NO_DATA_ALERT_DAYS: int = 7

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    @field_validator("REPORTING_TIMEZONE")
    @classmethod
    def _check_timezone(cls, value: str) -> str:
        if value.upper() in ("UTC", "Z"):
            return value
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise ValueError(f"Unknown timezone '{value}'") from e
        return value

    @property
    def DATABASE_URL(self) -> str:
        if self.DATABASE_URL_OVERRIDE:
            return self.DATABASE_URL_OVERRIDE
        return (f"postgresql://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}@{self.DATABASE_HOST}"
                f":{self.DATABASE_PORT}"
                f"/{self.DATABASE_DBNAME}")


# Global settings instance
settings = Settings()
