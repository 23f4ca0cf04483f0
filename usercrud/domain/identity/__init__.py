"""Identity domain layer."""

from usercrud.domain.identity.entities.user import User
from usercrud.domain.identity.exceptions import UserNotFoundError

__all__ = [
    "User",
    "UserNotFoundError",
]
