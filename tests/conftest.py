"""Pytest configuration and fixtures."""

from collections.abc import Generator, Sequence

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool

from usercrud.application.identity.protocols.user_repository import UserRepositoryProtocol
from usercrud.application.identity.services.user_service import UserService
from usercrud.database import create_session_factory, init_schema
from usercrud.domain.common.value_objects.ids import UserId
from usercrud.domain.identity.entities.user import User
from usercrud.infrastructure.identity.repositories.sql_user_repository import SQLUserRepository
from usercrud.infrastructure.identity.repositories.user_repository import UserRepository

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite://"


class RecordingUserRepository:
    """In-memory repository that records every call it receives."""

    def __init__(self) -> None:
        self.rows: dict[int, tuple[str, str]] = {}
        self.calls: list[tuple[str, object]] = []
        self.next_id = 1
        # Simulates a row vanishing between the existence check and the write
        self.drop_writes = False

    @property
    def writes(self) -> list[tuple[str, object]]:
        return [call for call in self.calls if call[0] in ("save", "update", "delete_by_id")]

    def save(self, user: User) -> User:
        self.calls.append(("save", user.name))
        user.assign_id(self.next_id)
        self.rows[self.next_id] = (user.name, user.email)
        self.next_id += 1
        return user

    def find_all(self) -> Sequence[User]:
        self.calls.append(("find_all", None))
        return [User.reconstruct(id, name, email) for id, (name, email) in self.rows.items()]

    def find_by_id(self, user_id: UserId) -> User | None:
        self.calls.append(("find_by_id", user_id.value))
        row = self.rows.get(user_id.value)
        return User.reconstruct(user_id, *row) if row else None

    def update(self, user: User) -> bool:
        assert user.id is not None
        self.calls.append(("update", user.id.value))
        if self.drop_writes or user.id.value not in self.rows:
            return False
        self.rows[user.id.value] = (user.name, user.email)
        return True

    def delete_by_id(self, user_id: UserId) -> bool:
        self.calls.append(("delete_by_id", user_id.value))
        if self.drop_writes:
            return False
        return self.rows.pop(user_id.value, None) is not None


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """Create a fresh in-memory database for each test."""
    test_engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    try:
        yield test_engine
    finally:
        test_engine.dispose()


@pytest.fixture
def sql_repository(engine: Engine) -> SQLUserRepository:
    """Statement-based repository on the test database."""
    return SQLUserRepository(engine)


@pytest.fixture
def orm_repository(engine: Engine) -> UserRepository:
    """Mapped-object repository on the test database."""
    init_schema(engine)
    return UserRepository(create_session_factory(engine))


@pytest.fixture(params=["sql", "orm"])
def repository(request: pytest.FixtureRequest, engine: Engine) -> UserRepositoryProtocol:
    """Each storage adapter in turn."""
    if request.param == "sql":
        return SQLUserRepository(engine)
    init_schema(engine)
    return UserRepository(create_session_factory(engine))


@pytest.fixture
def user_service(repository: UserRepositoryProtocol) -> UserService:
    """Service wired to each storage adapter in turn."""
    return UserService(repository)


@pytest.fixture
def fake_repository() -> RecordingUserRepository:
    """Recording in-memory repository."""
    return RecordingUserRepository()
