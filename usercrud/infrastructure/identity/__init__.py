"""Identity infrastructure: storage adapters for users."""

from usercrud.infrastructure.identity.repositories.sql_user_repository import SQLUserRepository
from usercrud.infrastructure.identity.repositories.user_repository import UserRepository

__all__ = [
    "SQLUserRepository",
    "UserRepository",
]
