"""Application configuration."""

import logging
import sys
from collections.abc import Callable
from functools import lru_cache
from typing import Any, Literal

import structlog
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Database
    DATABASE_URL: str = "sqlite:///./users.db"
    DATABASE_ECHO: bool = False

    # Which storage adapter the composition root wires
    STORAGE_BACKEND: Literal["sql", "orm"] = "orm"

    # Environment
    ENVIRONMENT: Literal["development", "production", "test"] = "development"

    @field_validator("DATABASE_URL", mode="after")
    @classmethod
    def strip_database_url(cls, value: str) -> str:
        """Strip whitespace from the database URL and reject empty values."""
        value = value.strip()
        if not value:
            msg = "DATABASE_URL cannot be empty"
            raise ValueError(msg)
        return value


_LOG_LEVELS = {
    "development": logging.DEBUG,
    "production": logging.INFO,
    "test": logging.WARNING,
}


def configure_logging(environment: str = "development", level: int | None = None) -> None:
    """
    Configure structured logging with structlog.

    Production renders JSON lines; other environments render for the console.

    Args:
        environment: One of "development", "production", "test"
        level: Explicit stdlib level overriding the per-environment default
    """
    use_json = environment == "production"
    if level is None:
        level = _LOG_LEVELS.get(environment, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)

    # Configure structlog
    processors: list[Callable[..., Any]] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if use_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
