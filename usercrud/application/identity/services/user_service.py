"""Application service for user management."""

from collections.abc import Sequence

import structlog

from usercrud.application.identity.protocols.user_repository import UserRepositoryProtocol
from usercrud.domain.common.value_objects.ids import UserId
from usercrud.domain.identity.entities.user import User
from usercrud.domain.identity.exceptions import UserNotFoundError
from usercrud.exceptions import StorageError

logger = structlog.get_logger(__name__)


class UserService:
    """
    Application service for user operations.

    Mediates between the I/O adapters and the storage port. It owns the
    identifier and existence rules; the entity owns field validation and
    the repository owns storage access.
    """

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        """Initialize service with its storage port."""
        if user_repository is None:
            raise ValueError("user_repository is required")
        self.user_repository = user_repository

    def create(self, name: str, email: str) -> User:
        """
        Create and persist a new user.

        Args:
            name: User's name
            email: User's email address

        Returns:
            The persisted user, carrying its generated id

        Raises:
            ValidationError: If name or email is invalid
            StorageError: If the user could not be stored
        """
        user = User.create(name, email)
        user = self.user_repository.save(user)
        logger.info("user_created", user_id=user.id.value if user.id else None)
        return user

    def find_all(self) -> Sequence[User]:
        """Return every stored user, in no guaranteed order."""
        return self.user_repository.find_all()

    def find_by_id(self, user_id: int) -> User:
        """
        Get a user by ID.

        Args:
            user_id: User's ID

        Returns:
            User entity

        Raises:
            ValidationError: If the id is absent or not positive
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user

    def update(self, user_id: int, name: str, email: str) -> None:
        """
        Replace the name and email of an existing user.

        Args:
            user_id: ID of the user to update
            name: New name
            email: New email address

        Raises:
            ValidationError: If the id, name or email is invalid
            UserNotFoundError: If user is not found
            StorageError: If the confirmed row was not updated
        """
        user = self.find_by_id(user_id)

        user.rename(name)
        user.change_email(email)

        if not self.user_repository.update(user):
            raise StorageError(f"User with id {user_id} was not updated", operation="update")

        logger.info("user_updated", user_id=user_id)

    def delete_by_id(self, user_id: int) -> None:
        """
        Delete an existing user.

        Args:
            user_id: ID of the user to delete

        Raises:
            ValidationError: If the id is absent or not positive
            UserNotFoundError: If user is not found
            StorageError: If the confirmed row was not removed
        """
        user_id_vo = UserId(user_id)
        self.find_by_id(user_id)

        if not self.user_repository.delete_by_id(user_id_vo):
            raise StorageError(f"User with id {user_id} was not deleted", operation="delete")

        logger.info("user_deleted", user_id=user_id)
