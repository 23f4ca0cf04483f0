"""Identity application layer."""

from usercrud.application.identity.protocols.user_repository import UserRepositoryProtocol
from usercrud.application.identity.services.user_service import UserService

__all__ = [
    "UserRepositoryProtocol",
    "UserService",
]
