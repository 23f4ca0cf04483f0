"""Statement-based repository for User domain entities.

Issues parameterized SQLAlchemy Core statements. Every call opens its own
connection and transaction with ``engine.begin()``, which commits on success,
rolls back on error and returns the connection to the pool on every path.
"""

from collections.abc import Sequence

import structlog
from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine

from usercrud.domain.common.exceptions import StateError
from usercrud.domain.common.value_objects.ids import UserId
from usercrud.domain.identity.entities.user import User
from usercrud.infrastructure.common.errors import storage_errors
from usercrud.infrastructure.identity.mappers.user_mapper import UserMapper
from usercrud.infrastructure.identity.schema import users

logger = structlog.get_logger(__name__)


class SQLUserRepository:
    """Repository for User domain entities backed by SQL statements."""

    def __init__(self, engine: Engine) -> None:
        self.engine = engine
        self.mapper = UserMapper()
        self._ensure_table()

    def _ensure_table(self) -> None:
        with storage_errors("create table for"):
            users.create(self.engine, checkfirst=True)

    def save(self, user: User) -> User:
        """
        Insert a new user.

        Args:
            user: The unpersisted user entity

        Returns:
            The same entity with its generated id assigned

        Raises:
            StateError: If the user already has an id
            StorageError: If the insert fails
        """
        if user.id is not None:
            raise StateError("User", f"User {user.id} is already persisted")

        stmt = insert(users).values(**self.mapper.to_values(user))
        with storage_errors("save"), self.engine.begin() as conn:
            result = conn.execute(stmt)
            generated_id = result.inserted_primary_key[0]

        user.assign_id(generated_id)
        logger.info("user_saved", user_id=generated_id, backend="sql")
        return user

    def find_all(self) -> Sequence[User]:
        """
        Get all users.

        Returns:
            List of user entities in storage order
        """
        stmt = select(users.c.id, users.c.name, users.c.email)
        with storage_errors("list"), self.engine.begin() as conn:
            rows = conn.execute(stmt).all()
        return [self.mapper.row_to_domain(row) for row in rows]

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(users.c.id, users.c.name, users.c.email).where(users.c.id == user_id.value)
        with storage_errors("find", user_id=user_id.value), self.engine.begin() as conn:
            row = conn.execute(stmt).one_or_none()
        return self.mapper.row_to_domain(row) if row is not None else None

    def update(self, user: User) -> bool:
        """
        Overwrite name and email of a persisted user.

        Args:
            user: The persisted user entity

        Returns:
            True if exactly one row was updated, False otherwise

        Raises:
            StateError: If the user has no id
        """
        if user.id is None:
            raise StateError("User", "Cannot update a user that has not been saved")

        stmt = (
            update(users)
            .where(users.c.id == user.id.value)
            .values(**self.mapper.to_values(user))
        )
        with storage_errors("update", user_id=user.id.value), self.engine.begin() as conn:
            updated = conn.execute(stmt).rowcount == 1

        if updated:
            logger.info("user_updated", user_id=user.id.value, backend="sql")
        return updated

    def delete_by_id(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Args:
            user_id: The user ID

        Returns:
            True if exactly one row was deleted, False otherwise
        """
        stmt = delete(users).where(users.c.id == user_id.value)
        with storage_errors("delete", user_id=user_id.value), self.engine.begin() as conn:
            deleted = conn.execute(stmt).rowcount == 1

        if deleted:
            logger.info("user_deleted", user_id=user_id.value, backend="sql")
        return deleted
