"""Abstract transactional resource.

A Transaction is leased to exactly one in-flight placement. Writes made
through it become visible to readers only after ``commit()``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Transaction(ABC):

    @abstractmethod
    def commit(self) -> None:
        """Make every write made through this transaction durable."""

    @abstractmethod
    def rollback(self) -> None:
        """Discard every write made through this transaction."""

    @abstractmethod
    def close(self) -> None:
        """Release the underlying resource. Safe to call after commit or rollback."""


class TransactionManager(ABC):

    @abstractmethod
    def begin(self) -> Transaction:
        """Acquire a resource and open a transaction on it.

        Raises PersistenceError if no transaction can be started.
        """
