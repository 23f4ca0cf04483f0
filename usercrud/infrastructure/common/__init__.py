from .errors import storage_errors
from .unit_of_work import SQLAlchemyUnitOfWork

__all__ = ["SQLAlchemyUnitOfWork", "storage_errors"]
