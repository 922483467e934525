"""
Tests for configuration validation
"""
import pytest
from pydantic import ValidationError
from masterdata.core.config import Settings


def test_prod_settings_rejects_wildcard_origins():
    """Production refuses a wildcard CORS origin"""
    settings = Settings(DATABASE_URL="postgresql://test", APP_ENV="prod", ALLOWED_ORIGINS="*")

    with pytest.raises(ValueError, match="ALLOWED_ORIGINS"):
        settings.validate_production()


def test_prod_settings_accepts_explicit_origins():
    settings = Settings(
        DATABASE_URL="postgresql://test",
        APP_ENV="prod",
        ALLOWED_ORIGINS="https://hr.example.com",
    )
    settings.validate_production()


def test_local_settings_allows_wildcard_origins():
    """Test that local settings allow wildcard origins"""
    settings = Settings(DATABASE_URL="postgresql://test", APP_ENV="local", ALLOWED_ORIGINS="*")

    # Should not raise error
    settings.validate_production()

    assert settings.get_allowed_origins_list() == ["*"]


def test_get_allowed_origins_list():
    """Test parsing of ALLOWED_ORIGINS"""
    settings = Settings(
        DATABASE_URL="postgresql://test",
        ALLOWED_ORIGINS="https://example.com, https://app.example.com,",
    )
    assert settings.get_allowed_origins_list() == ["https://example.com", "https://app.example.com"]


def test_unknown_app_env_is_rejected():
    with pytest.raises(ValidationError):
        Settings(DATABASE_URL="postgresql://test", APP_ENV="production")


def test_log_level_is_normalised():
    settings = Settings(DATABASE_URL="postgresql://test", LOG_LEVEL="debug")
    assert settings.LOG_LEVEL == "DEBUG"


def test_database_url_wins_when_set():
    settings = Settings(DATABASE_URL="sqlite:///./masterdata.db", DB_HOST="ignored")
    assert settings.get_database_url() == "sqlite:///./masterdata.db"


def test_database_url_assembled_from_parts():
    settings = Settings(
        DATABASE_URL=None,
        DB_HOST="db",
        DB_PORT=5433,
        DB_USER="hr",
        DB_PASSWORD="secret",
        DB_NAME="hrms",
        DB_SSLMODE="require",
    )
    assert settings.get_database_url() == "postgresql+psycopg2://hr:secret@db:5433/hrms?sslmode=require"
