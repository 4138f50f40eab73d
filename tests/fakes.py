"""In-memory fake repositories and transactions for testing.

These implement the same abstract interfaces as the SQLAlchemy
repositories but keep everything in dicts. Writes are staged on the
FakeTransaction and only land in a repository's store on commit, so
rollback behaves like a real database.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Callable

from bookstore.domain.exceptions import PersistenceError
from bookstore.domain.model.book import Book
from bookstore.domain.model.customer import Customer
from bookstore.domain.model.order import LineItem, Order
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.repository.transaction import Transaction, TransactionManager


class FakeTransaction(Transaction):

    def __init__(self, fail_on_rollback: bool = False) -> None:
        self._pending: list[Callable[[], None]] = []
        self._fail_on_rollback = fail_on_rollback
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def stage(self, write: Callable[[], None]) -> None:
        self._pending.append(write)

    def commit(self) -> None:
        for write in self._pending:
            write()
        self._pending.clear()
        self.committed = True

    def rollback(self) -> None:
        if self._fail_on_rollback:
            raise RuntimeError("connection lost during rollback")
        self._pending.clear()
        self.rolled_back = True

    def close(self) -> None:
        self.closed = True


class FakeTransactionManager(TransactionManager):

    def __init__(self, fail_on_begin: bool = False, fail_on_rollback: bool = False) -> None:
        self._fail_on_begin = fail_on_begin
        self._fail_on_rollback = fail_on_rollback
        self.transactions: list[FakeTransaction] = []

    def begin(self) -> FakeTransaction:
        if self._fail_on_begin:
            raise PersistenceError("Could not begin a database transaction")
        tx = FakeTransaction(fail_on_rollback=self._fail_on_rollback)
        self.transactions.append(tx)
        return tx


class FakeBookRepository(BookRepository):

    def __init__(self, books: list[Book] | None = None) -> None:
        self._store: dict[int, Book] = {}
        for b in books or []:
            self._store[b.book_id] = b

    def find_by_book_id(self, book_id: int) -> Book | None:
        return self._store.get(book_id)

    def list_all(self) -> list[Book]:
        return list(self._store.values())

    def add(self, title: str, author: str, price: Money, category_id: int) -> Book:
        book = Book(max(self._store, default=0) + 1, title, author, price, category_id)
        self._store[book.book_id] = book
        return book

    def remove(self, book_id: int) -> None:
        del self._store[book_id]


class FakeCustomerRepository(CustomerRepository):

    def __init__(self) -> None:
        self._store: dict[int, Customer] = {}
        self._next_id = 1

    def create(
        self,
        tx: FakeTransaction,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: date | None,
    ) -> int:
        customer = Customer(
            self._next_id, name, address, phone, email, cc_number, cc_expiry_date
        )
        self._next_id += 1
        tx.stage(lambda: self._store.__setitem__(customer.customer_id, customer))
        return customer.customer_id

    def find_by_customer_id(self, customer_id: int) -> Customer | None:
        return self._store.get(customer_id)

    def all(self) -> list[Customer]:
        return list(self._store.values())

    def remove(self, customer_id: int) -> None:
        del self._store[customer_id]


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def create(
        self,
        tx: FakeTransaction,
        amount: Money,
        confirmation_number: int,
        customer_id: int,
    ) -> int:
        order = Order(
            order_id=self._next_id,
            amount=amount,
            date_created=datetime.now(timezone.utc),
            confirmation_number=confirmation_number,
            customer_id=customer_id,
        )
        self._next_id += 1
        tx.stage(lambda: self._store.__setitem__(order.order_id, order))
        return order.order_id

    def find_by_order_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def all(self) -> list[Order]:
        return list(self._store.values())


class FakeLineItemRepository(LineItemRepository):
    """Pass ``fail_on_call=n`` to raise on the n-th ``create`` (1-based)."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self._store: list[LineItem] = []
        self._fail_on_call = fail_on_call
        self._calls = 0

    def create(self, tx: FakeTransaction, order_id: int, book_id: int, quantity: int) -> None:
        self._calls += 1
        if self._fail_on_call == self._calls:
            raise RuntimeError("disk full")
        line_item = LineItem(order_id=order_id, book_id=book_id, quantity=quantity)
        tx.stage(lambda: self._store.append(line_item))

    def find_by_order_id(self, order_id: int) -> list[LineItem]:
        return [item for item in self._store if item.order_id == order_id]

    def all(self) -> list[LineItem]:
        return list(self._store)
