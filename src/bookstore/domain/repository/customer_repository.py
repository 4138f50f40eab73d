"""Abstract repository for Customer records."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from bookstore.domain.model.customer import Customer
from bookstore.domain.repository.transaction import Transaction


class CustomerRepository(ABC):

    @abstractmethod
    def create(
        self,
        tx: Transaction,
        name: str,
        address: str,
        phone: str,
        email: str,
        cc_number: str,
        cc_expiry_date: date | None,
    ) -> int:
        """Insert a customer inside ``tx`` and return its new ID."""

    @abstractmethod
    def find_by_customer_id(self, customer_id: int) -> Customer | None:
        """Return a committed customer by ID, or None if not found."""
