"""SQLAlchemy implementations of the bookstore repositories.

Writes go through the caller's transaction; reads open a short session
of their own and therefore only ever see committed rows.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from typing import Iterator

from loguru import logger
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from bookstore.domain.exceptions import PersistenceError
from bookstore.domain.model.book import Book
from bookstore.domain.model.customer import Customer
from bookstore.domain.model.order import LineItem, Order
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.infrastructure.persistence.models import (
    BookRow,
    CustomerRow,
    LineItemRow,
    OrderRow,
)
from bookstore.infrastructure.persistence.transaction import SqlAlchemyTransaction


@contextmanager
def _session_scope(
    session_factory: sessionmaker[Session], begin: bool = False
) -> Iterator[Session]:
    """Short-lived session whose driver errors surface as PersistenceError."""
    try:
        if begin:
            with session_factory.begin() as session:
                yield session
        else:
            with session_factory() as session:
                yield session
    except SQLAlchemyError as exc:
        logger.error("Database request failed: {error}", error=str(exc))
        raise PersistenceError("Could not reach the database") from exc


class SqlAlchemyBookRepository(BookRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def find_by_book_id(self, book_id: int) -> Book | None:
        with _session_scope(self._session_factory) as session:
            row = session.get(BookRow, book_id)
            return self._to_domain(row) if row is not None else None

    def list_all(self) -> list[Book]:
        with _session_scope(self._session_factory) as session:
            rows = session.scalars(select(BookRow).order_by(BookRow.book_id))
            return [self._to_domain(row) for row in rows]

    def add(self, title: str, author: str, price: Money, category_id: int) -> Book:
        with _session_scope(self._session_factory, begin=True) as session:
            row = BookRow(
                title=title, author=author, price=price.amount, category_id=category_id
            )
            session.add(row)
            session.flush()
            return self._to_domain(row)

    @staticmethod
    def _to_domain(row: BookRow) -> Book:
        return Book(
            book_id=row.book_id,
            title=row.title,
            author=row.author,
            price=Money.of(row.price),
            category_id=row.category_id,
        )


class SqlAlchemyCustomerRepository(CustomerRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(
        self,
        tx: SqlAlchemyTransaction,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: date | None,
    ) -> int:
        row = CustomerRow(
            customer_name=name,
            address=address,
            phone=phone,
            email=email,
            cc_number=cc_number,
            cc_exp_date=cc_expiry_date,
        )
        tx.session.add(row)
        tx.session.flush()
        return row.customer_id

    def find_by_customer_id(self, customer_id: int) -> Customer | None:
        with _session_scope(self._session_factory) as session:
            row = session.get(CustomerRow, customer_id)
            if row is None:
                return None
            return Customer(
                customer_id=row.customer_id,
                name=row.customer_name,
                address=row.address,
                phone=row.phone,
                email=row.email,
                cc_number=row.cc_number,
                cc_expiry_date=row.cc_exp_date,
            )


class SqlAlchemyOrderRepository(OrderRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(
        self,
        tx: SqlAlchemyTransaction,
        amount: Money,
        confirmation_number: int,
        customer_id: int,
    ) -> int:
        row = OrderRow(
            amount=amount.amount,
            confirmation_number=confirmation_number,
            customer_id=customer_id,
        )
        tx.session.add(row)
        tx.session.flush()
        return row.customer_order_id

    def find_by_order_id(self, order_id: int) -> Order | None:
        with _session_scope(self._session_factory) as session:
            row = session.get(OrderRow, order_id)
            if row is None:
                return None
            return Order(
                order_id=row.customer_order_id,
                amount=Money.of(row.amount),
                date_created=row.date_created,
                confirmation_number=row.confirmation_number,
                customer_id=row.customer_id,
            )


class SqlAlchemyLineItemRepository(LineItemRepository):

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    def create(
        self, tx: SqlAlchemyTransaction, order_id: int, book_id: int, quantity: int
    ) -> None:
        tx.session.add(
            LineItemRow(customer_order_id=order_id, book_id=book_id, quantity=quantity)
        )
        tx.session.flush()

    def find_by_order_id(self, order_id: int) -> list[LineItem]:
        with _session_scope(self._session_factory) as session:
            rows = session.scalars(
                select(LineItemRow)
                .where(LineItemRow.customer_order_id == order_id)
                .order_by(LineItemRow.line_item_id)
            )
            return [
                LineItem(
                    order_id=row.customer_order_id,
                    book_id=row.book_id,
                    quantity=row.quantity,
                )
                for row in rows
            ]
