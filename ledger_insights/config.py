"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ledger_insights.domain.models import WeekStart


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # External Services
    ledger_api_base: str = "http://localhost:8002"

    # Service
    service_name: str = "ledger-insights"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0

    # Periods
    week_start: WeekStart = WeekStart.MON

    # Detectors (the two trailing windows are tuned independently)
    outlier_factor: float = 2.0
    outlier_window_days: int = 90
    recurring_window_days: int = 90
    recurring_min_occurrences: int = 2


settings = Settings()
