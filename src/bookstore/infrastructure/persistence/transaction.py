"""SQLAlchemy-backed transactional resource.

Each placement gets its own Session; the repositories write through
``SqlAlchemyTransaction.session`` so every insert shares one database
transaction.
"""

from __future__ import annotations

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from bookstore.domain.exceptions import PersistenceError
from bookstore.domain.repository.transaction import Transaction, TransactionManager


class SqlAlchemyTransaction(Transaction):

    def __init__(self, session: Session) -> None:
        self.session = session

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()

    def close(self) -> None:
        self.session.close()


class SqlAlchemyTransactionManager(TransactionManager):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def begin(self) -> SqlAlchemyTransaction:
        session = self._session_factory()
        try:
            session.begin()
            # force a connection checkout so an unreachable database fails here
            session.connection()
        except SQLAlchemyError as exc:
            session.close()
            logger.error("Could not begin transaction: {error}", error=str(exc))
            raise PersistenceError("Could not begin a database transaction") from exc
        return SqlAlchemyTransaction(session)
