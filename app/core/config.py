"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "Athlete Monitoring - Training Load Analytics Engine"
    VERSION: str = "0.1.0"
    AUTHORS: List[str] = ["Athlete Monitoring contributors"]
    PROJECT_URL: str = ""

    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None

    # Training load model
    CTL_TAU_DAYS: float = 42.0
    ATL_TAU_DAYS: float = 7.0
    ACWR_ACUTE_DAYS: int = 7
    ACWR_CHRONIC_DAYS: int = 28
    TSB_PERCENT_LIMIT: float = 40.0
    # Longest dense daily series one request may produce
    MAX_SERIES_DAYS: int = 3660

    # Readiness estimator: used only when the athlete's birth date is unknown
    DEFAULT_ASSUMED_AGE: int = 25

    # Batch computation (fleet-wide dashboards)
    BATCH_MAX_WORKERS: int = 4

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
