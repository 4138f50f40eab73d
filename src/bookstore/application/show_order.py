"""Application service: Show Order use case (query).

Joins an order with its customer, line items and books. A missing
record anywhere along the way is a consistency fault and is raised,
never papered over.
"""

from __future__ import annotations

from bookstore.domain.exceptions import EntityNotFoundError
from bookstore.domain.model.order import OrderDetails
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(
        self,
        book_repo: BookRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
    ) -> None:
        self._book_repo = book_repo
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo

    def handle(self, order_id: int) -> OrderDetails:
        order = self._order_repo.find_by_order_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        customer = self._customer_repo.find_by_customer_id(order.customer_id)
        if customer is None:
            raise EntityNotFoundError(
                f"Customer #{order.customer_id} of order #{order_id} not found"
            )

        line_items = self._line_item_repo.find_by_order_id(order_id)
        books = []
        for line_item in line_items:
            book = self._book_repo.find_by_book_id(line_item.book_id)
            if book is None:
                raise EntityNotFoundError(
                    f"Book #{line_item.book_id} of order #{order_id} not found"
                )
            books.append(book)

        return OrderDetails(
            order=order, customer=customer, line_items=line_items, books=books
        )
