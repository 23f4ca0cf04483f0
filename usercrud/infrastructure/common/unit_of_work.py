"""SQLAlchemy implementation of the Unit of Work port."""

from types import TracebackType
from typing import Self

from sqlalchemy.orm import Session, sessionmaker

from usercrud.application.common.unit_of_work import UnitOfWork


class SQLAlchemyUnitOfWork(UnitOfWork):
    """
    Unit of Work owning one SQLAlchemy session.

    The session is opened on enter and closed on exit. Exiting with an
    exception rolls back; exiting without commit discards pending changes.
    """

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self.session_factory = session_factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work has not been entered")
        return self._session

    def __enter__(self) -> Self:
        self._session = self.session_factory()
        return super().__enter__()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        try:
            super().__exit__(exc_type, exc_val, exc_tb)
        finally:
            self.session.close()
            self._session = None

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
