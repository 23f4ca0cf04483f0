"""Storage contract for users.

Implementations report mechanical outcomes only: absence is ``None`` and
rows affected are booleans. Deciding whether either is an error belongs to
the service.
"""

from collections.abc import Sequence
from typing import Protocol

from usercrud.domain.common.value_objects.ids import UserId
from usercrud.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    def save(self, user: User) -> User:
        """Insert an unpersisted user and assign the generated id to it."""
        ...

    def find_all(self) -> Sequence[User]: ...

    def find_by_id(self, user_id: UserId) -> User | None: ...

    def update(self, user: User) -> bool:
        """Overwrite name and email of a persisted user; True if one row changed."""
        ...

    def delete_by_id(self, user_id: UserId) -> bool:
        """Remove the row with that id; True if one row was removed."""
        ...
