"""Abstract repository for order LineItems."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.order import LineItem
from bookstore.domain.repository.transaction import Transaction


class LineItemRepository(ABC):

    @abstractmethod
    def create(self, tx: Transaction, order_id: int, book_id: int, quantity: int) -> None:
        """Insert a line item for ``order_id`` inside ``tx``."""

    @abstractmethod
    def find_by_order_id(self, order_id: int) -> list[LineItem]:
        """Return the committed line items of an order, in storage order."""
