"""Mapped-object repository for User domain entities."""

from collections.abc import Sequence

import structlog
from sqlalchemy import select
from sqlalchemy.orm import Session, sessionmaker

from usercrud.domain.common.exceptions import StateError
from usercrud.domain.common.value_objects.ids import UserId
from usercrud.domain.identity.entities.user import User
from usercrud.infrastructure.common.errors import storage_errors
from usercrud.infrastructure.common.unit_of_work import SQLAlchemyUnitOfWork
from usercrud.infrastructure.identity.mappers.user_mapper import UserMapper
from usercrud.models import User as UserORM

logger = structlog.get_logger(__name__)


class UserRepository:
    """
    Repository for User domain entities backed by the SQLAlchemy ORM.

    Each call runs in its own unit of work; mutations are committed only
    when the whole call succeeds and rolled back otherwise.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self.mapper = UserMapper()

    def _unit_of_work(self) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(self.session_factory)

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

        with storage_errors("save"), self._unit_of_work() as uow:
            orm_model = self.mapper.to_orm(user)
            uow.session.add(orm_model)
            uow.session.flush()
            generated_id = orm_model.id
            uow.commit()

        user.assign_id(generated_id)
        logger.info("user_saved", user_id=generated_id, backend="orm")
        return user

    def find_all(self) -> Sequence[User]:
        """
        Get all users.

        Returns:
            List of user entities in storage order
        """
        with storage_errors("list"), self._unit_of_work() as uow:
            orm_models = uow.session.execute(select(UserORM)).scalars().all()
            return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        with storage_errors("find", user_id=user_id.value), self._unit_of_work() as uow:
            orm_model = uow.session.get(UserORM, user_id.value)
            return self.mapper.to_domain(orm_model) if orm_model else None

    def update(self, user: User) -> bool:
        """
        Overwrite name and email of a persisted user.

        Args:
            user: The persisted user entity

        Returns:
            True if the user row was updated, False if it does not exist

        Raises:
            StateError: If the user has no id
        """
        if user.id is None:
            raise StateError("User", "Cannot update a user that has not been saved")

        with storage_errors("update", user_id=user.id.value), self._unit_of_work() as uow:
            if uow.session.get(UserORM, user.id.value) is None:
                return False
            uow.session.merge(self.mapper.to_orm(user))
            uow.commit()

        logger.info("user_updated", user_id=user.id.value, backend="orm")
        return True

    def delete_by_id(self, user_id: UserId) -> bool:
        """
        Delete a user.

        Args:
            user_id: The user ID

        Returns:
            True if deleted, False if not found
        """
        with storage_errors("delete", user_id=user_id.value), self._unit_of_work() as uow:
            orm_model = uow.session.get(UserORM, user_id.value)
            if orm_model is None:
                return False
            uow.session.delete(orm_model)
            uow.commit()

        logger.info("user_deleted", user_id=user_id.value, backend="orm")
        return True
