"""Abstract repository for the Book catalog.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (SQL, in-memory) live in the
infrastructure layer and the test suite.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from bookstore.domain.model.book import Book
from bookstore.domain.model.value_objects import Money


class BookRepository(ABC):

    @abstractmethod
    def find_by_book_id(self, book_id: int) -> Book | None:
        """Return a book by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in the catalog."""

    @abstractmethod
    def add(self, title: str, author: str, price: Money, category_id: int) -> Book:
        """Add a book to the catalog and return it with its new ID."""
