"""Composition root: wires settings, engine, storage adapter and service."""

import structlog
from sqlalchemy.engine import Engine

from usercrud.application.identity.protocols.user_repository import UserRepositoryProtocol
from usercrud.application.identity.services.user_service import UserService
from usercrud.config import Settings, get_settings
from usercrud.database import create_db_engine, create_session_factory, init_schema
from usercrud.infrastructure.identity.repositories.sql_user_repository import SQLUserRepository
from usercrud.infrastructure.identity.repositories.user_repository import UserRepository

logger = structlog.get_logger(__name__)


def build_user_repository(settings: Settings, engine: Engine) -> UserRepositoryProtocol:
    """
    Build the storage adapter selected by ``settings.STORAGE_BACKEND``.

    Raises:
        ValueError: If the backend name is unknown
    """
    if settings.STORAGE_BACKEND == "sql":
        return SQLUserRepository(engine)
    if settings.STORAGE_BACKEND == "orm":
        init_schema(engine)
        return UserRepository(create_session_factory(engine))
    raise ValueError(f"Unknown storage backend: {settings.STORAGE_BACKEND!r}")


def build_user_service(
    settings: Settings | None = None, engine: Engine | None = None
) -> UserService:
    """Build a UserService from settings, creating the engine when none is given."""
    settings = settings or get_settings()
    if engine is None:
        engine = create_db_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

    repository = build_user_repository(settings, engine)
    logger.debug("user_service_built", backend=settings.STORAGE_BACKEND)
    return UserService(repository)
