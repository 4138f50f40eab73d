"""Order records and the read-side OrderDetails composite.

Orders and their line items are written once, inside the placement
transaction, and never changed afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator

from bookstore.domain.model.book import Book
from bookstore.domain.model.customer import Customer
from bookstore.domain.model.value_objects import Money


@dataclass(frozen=True)
class Order:
    """A committed customer order.

    ``amount`` is the cart's subtotal plus surcharge at placement time.
    ``confirmation_number`` is a human-facing code, not a key.
    """

    order_id: int
    amount: Money
    date_created: datetime
    confirmation_number: int
    customer_id: int


@dataclass(frozen=True)
class LineItem:
    order_id: int
    book_id: int
    quantity: int


@dataclass(frozen=True)
class OrderDetails:
    """Order joined with its customer, line items and their books.

    ``line_items`` and ``books`` are parallel: ``books[i]`` is the book
    referenced by ``line_items[i]``.
    """

    order: Order
    customer: Customer
    line_items: list[LineItem]
    books: list[Book]

    @property
    def items(self) -> Iterator[tuple[LineItem, Book]]:
        return zip(self.line_items, self.books)
