"""
Configuration management for the favorites store
"""

import threading

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from favorites_store.infrastructure.utilities.constants import PerformanceSettings


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Database configuration
    database_url: str = Field(
        default="sqlite:///data/favorites_store.db", description="Database connection URL"
    )
    echo_sql: bool = Field(default=False, description="Echo SQL statements to the log")
    slow_query_threshold_ms: int = Field(
        default=PerformanceSettings.SLOW_QUERY_THRESHOLD_MS,
        description="Queries slower than this are logged as warnings",
        gt=0,
    )

    # Application settings
    log_level: str = Field(default="INFO", description="Logging level")
    environment: str = Field(
        default="development", description="Application environment"
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Invalid log level: {value}")
        return level

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


_settings_instance: Settings | None = None
_settings_lock = threading.Lock()


def get_config() -> Settings:
    """Get the global settings instance, ensuring thread safety."""
    global _settings_instance
    if _settings_instance is None:
        with _settings_lock:
            if _settings_instance is None:
                _settings_instance = Settings()
    return _settings_instance


def reset_config() -> None:
    """Forget the global settings so the next get_config() re-reads the environment"""
    global _settings_instance
    with _settings_lock:
        _settings_instance = None
