from .sql_user_repository import SQLUserRepository
from .user_repository import UserRepository

__all__ = [
    "SQLUserRepository",
    "UserRepository",
]
