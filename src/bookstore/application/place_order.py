"""Application service: Place Order use case.

Validates the billing form and the cart, then writes the customer, the
order and its line items inside a single transaction. Either all of
them are committed or none are.
"""

from __future__ import annotations

from loguru import logger

from bookstore.domain.exceptions import (
    EntityNotFoundError,
    PlacementFailedError,
    RollbackFailedError,
    ValidationError,
)
from bookstore.domain.model.cart import ShoppingCart
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.domain.repository.customer_repository import CustomerRepository
from bookstore.domain.repository.line_item_repository import LineItemRepository
from bookstore.domain.repository.order_repository import OrderRepository
from bookstore.domain.repository.transaction import Transaction, TransactionManager
from bookstore.domain.service.cart_consistency import CartConsistencyChecker
from bookstore.domain.service.confirmation_number import ConfirmationNumberGenerator
from bookstore.domain.service.field_validator import parse_expiry, validate_customer_form


class PlaceOrderHandler:

    def __init__(
        self,
        book_repo: BookRepository,
        customer_repo: CustomerRepository,
        order_repo: OrderRepository,
        line_item_repo: LineItemRepository,
        transaction_manager: TransactionManager,
        confirmation_numbers: ConfirmationNumberGenerator | None = None,
    ) -> None:
        self._cart_checker = CartConsistencyChecker(book_repo)
        self._customer_repo = customer_repo
        self._order_repo = order_repo
        self._line_item_repo = line_item_repo
        self._transaction_manager = transaction_manager
        self._confirmation_numbers = confirmation_numbers or ConfirmationNumberGenerator()

    def handle(self, form: CustomerForm, cart: ShoppingCart) -> int:
        """Place an order and return the new order ID.

        Steps:
        1. Validate the form, then the cart. Nothing is written on failure.
        2. Begin a transaction (PersistenceError if that is impossible).
        3. Create customer, order, and one line item per cart item.
        4. Commit, or roll back and raise PlacementFailedError.
        """
        try:
            validate_customer_form(form)
            self._cart_checker.validate(cart)
        except (ValidationError, EntityNotFoundError) as exc:
            logger.warning("Order rejected before persistence: {error}", error=str(exc))
            raise

        tx = self._transaction_manager.begin()
        try:
            return self._perform_transaction(tx, form, cart)
        finally:
            tx.close()

    def _perform_transaction(
        self, tx: Transaction, form: CustomerForm, cart: ShoppingCart
    ) -> int:
        try:
            customer_id = self._customer_repo.create(
                tx,
                name=form.name,
                address=form.address,
                phone=form.phone,
                email=form.email,
                cc_number=form.cc_number,
                cc_expiry_date=parse_expiry(form.cc_expiry_month, form.cc_expiry_year),
            )
            order_id = self._order_repo.create(
                tx,
                amount=cart.total,
                confirmation_number=self._confirmation_numbers.generate(),
                customer_id=customer_id,
            )
            for item in cart.items:
                self._line_item_repo.create(tx, order_id, item.book_id, item.quantity)
            tx.commit()
        except Exception as exc:
            logger.exception("Order placement failed, rolling back")
            try:
                tx.rollback()
            except Exception as rollback_exc:
                raise RollbackFailedError("Failed to roll back transaction") from rollback_exc
            raise PlacementFailedError("Order could not be placed", cause=exc) from exc

        logger.info(
            "Order placed. order_id={order_id}, customer_id={customer_id}, items={items}",
            order_id=order_id,
            customer_id=customer_id,
            items=len(cart.items),
        )
        return order_id
