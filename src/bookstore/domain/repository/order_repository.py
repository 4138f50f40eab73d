"""Abstract repository for Order records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.order import Order
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.transaction import Transaction


class OrderRepository(ABC):

    @abstractmethod
    def create(
        self,
        tx: Transaction,
        amount: Money,
        confirmation_number: int,
        customer_id: int,
    ) -> int:
        """Insert an order inside ``tx`` and return its new ID."""

    @abstractmethod
    def find_by_order_id(self, order_id: int) -> Order | None:
        """Return a committed order by ID, or None if not found."""
