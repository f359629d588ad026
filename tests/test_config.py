"""
Tests for configuration management
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from favorites_store.infrastructure.configuration.config import Settings, get_config, reset_config


class TestSettings:
    """Test Settings model"""

    def test_settings_from_environment(self):
        """Values come from the environment set up by mock_env"""
        settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite://"
        assert settings.environment == "test"
        assert settings.log_level == "DEBUG"

    def test_settings_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings(_env_file=None)
        assert settings.database_url == "sqlite:///data/favorites_store.db"
        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.echo_sql is False
        assert settings.slow_query_threshold_ms == 1000

    def test_settings_custom_values(self):
        with patch.dict(os.environ, {
            "DATABASE_URL": "postgresql://user:secret@db/favorites",
            "ENVIRONMENT": "production",
            "LOG_LEVEL": "error",
            "ECHO_SQL": "true",
            "SLOW_QUERY_THRESHOLD_MS": "250",
        }):
            settings = Settings(_env_file=None)
        assert settings.database_url == "postgresql://user:secret@db/favorites"
        assert settings.is_production
        assert not settings.is_sqlite
        assert settings.log_level == "ERROR"
        assert settings.echo_sql is True
        assert settings.slow_query_threshold_ms == 250

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD", _env_file=None)

    def test_invalid_slow_query_threshold(self):
        with pytest.raises(ValidationError):
            Settings(slow_query_threshold_ms=0, _env_file=None)

    def test_sqlite_detection(self):
        assert Settings(database_url="sqlite://", _env_file=None).is_sqlite


class TestGetConfig:
    """Test the settings singleton"""

    def test_get_config_returns_same_instance(self):
        assert get_config() is get_config()

    def test_reset_config_rereads_environment(self):
        first = get_config()
        with patch.dict(os.environ, {"ENVIRONMENT": "staging"}):
            reset_config()
            second = get_config()
        assert second is not first
        assert second.environment == "staging"
