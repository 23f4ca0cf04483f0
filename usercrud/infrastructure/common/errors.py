"""Translation of database driver errors into StorageError."""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog
from sqlalchemy.exc import SQLAlchemyError

from usercrud.exceptions import StorageError

logger = structlog.get_logger(__name__)


@contextmanager
def storage_errors(operation: str, **context: object) -> Iterator[None]:
    """
    Re-raise any SQLAlchemy error raised inside the block as StorageError.

    Domain errors pass through untouched.

    Args:
        operation: Name of the storage operation, e.g. "save"
        **context: Extra fields for the failure log entry
    """
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("storage_operation_failed", operation=operation, error=str(e), **context)
        raise StorageError(f"Failed to {operation} user: {e}", operation=operation) from e
