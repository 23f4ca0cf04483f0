"""Application-level exception hierarchy."""


class UserCrudError(Exception):
    """Base exception for errors raised outside the domain layer."""

    def __init__(self, message: str) -> None:
        """Initialize exception with message."""
        self.message = message
        super().__init__(self.message)


class StorageError(UserCrudError):
    """
    Storage I/O, constraint failure, or a storage outcome that contradicts
    what the caller has just confirmed (e.g. deleting a row that was found
    but then reported as not removed).
    """

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        """Initialize with message and the storage operation that failed."""
        self.operation = operation
        super().__init__(message)
