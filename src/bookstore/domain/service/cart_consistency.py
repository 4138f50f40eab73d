"""Domain service: cart consistency check at checkout.

Between add-to-cart and checkout a book's price or category may change,
or the cart may have been tampered with. Every cart line is compared
against the authoritative catalog record before anything is written.
"""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError, ValidationError
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.repository.book_repository import BookRepository

MIN_QUANTITY = 0
MAX_QUANTITY = 99


class CartConsistencyChecker:

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def validate(self, cart: ShoppingCart) -> None:
        """Raise on the first inconsistent cart line, in cart order.

        Only reads the catalog; never writes.
        """
        if not cart.items:
            raise ValidationError("Cart is empty.")

        for item in cart.items:
            if not MIN_QUANTITY <= item.quantity <= MAX_QUANTITY:
                raise ValidationError(
                    f"Invalid quantity {item.quantity} for book #{item.book_id}"
                )

            book = self._book_repo.find_by_book_id(item.book_id)
            if book is None:
                raise EntityNotFoundError(f"Book #{item.book_id} not found")

            if item.book.price != book.price:
                raise ValidationError(
                    f"Invalid price for book #{item.book_id}: "
                    f"cart has {item.book.price}, catalog has {book.price}"
                )

            if item.book.category_id != book.category_id:
                raise ValidationError(f"Invalid category for book #{item.book_id}")
