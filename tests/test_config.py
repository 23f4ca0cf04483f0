import pytest
import structlog
from pydantic import ValidationError as SettingsValidationError

from usercrud.config import Settings, configure_logging, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test default configuration values."""
    for name in ("DATABASE_URL", "DATABASE_ECHO", "STORAGE_BACKEND", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite:///./users.db"
    assert settings.DATABASE_ECHO is False
    assert settings.STORAGE_BACKEND == "orm"
    assert settings.ENVIRONMENT == "development"


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test reading configuration from environment variables."""
    monkeypatch.setenv("DATABASE_URL", "  sqlite://  ")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    monkeypatch.setenv("DATABASE_ECHO", "true")

    settings = Settings(_env_file=None)

    assert settings.DATABASE_URL == "sqlite://"
    assert settings.STORAGE_BACKEND == "sql"
    assert settings.DATABASE_ECHO is True


def test_unknown_backend_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that only the two storage backends are accepted."""
    monkeypatch.setenv("STORAGE_BACKEND", "mongo")

    with pytest.raises(SettingsValidationError):
        Settings(_env_file=None)


def test_empty_database_url_rejected() -> None:
    """Test that a blank database URL is a configuration error."""
    with pytest.raises(SettingsValidationError, match="DATABASE_URL cannot be empty"):
        Settings(DATABASE_URL="   ", _env_file=None)


def test_get_settings_is_cached() -> None:
    """Test that settings are built once."""
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()


@pytest.mark.parametrize("environment", ["development", "production", "test"])
def test_configure_logging(environment: str) -> None:
    """Test that logging can be configured for every environment."""
    try:
        configure_logging(environment)

        assert structlog.is_configured()
        structlog.get_logger("usercrud.tests").info("logging_configured", environment=environment)
    finally:
        structlog.reset_defaults()
