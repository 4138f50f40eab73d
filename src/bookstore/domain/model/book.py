"""Book catalog entry.

Books are owned by the catalog. The order placement path only reads
them, to check that a cart was priced against the current catalog.
"""

from __future__ import annotations

from dataclasses import dataclass

from bookstore.domain.model.value_objects import Money


@dataclass(frozen=True)
class Book:
    book_id: int
    title: str
    author: str
    price: Money
    category_id: int
