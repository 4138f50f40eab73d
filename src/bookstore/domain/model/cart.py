"""Shopping cart as handed over at checkout.

The cart model owns pricing: each item carries a snapshot of the
book's price and category taken when it was added, and the cart
supplies its own subtotal and surcharge. Checkout never reprices.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bookstore.domain.model.value_objects import Money


@dataclass(frozen=True)
class BookSnapshot:
    """Price and category of a book as the cart last saw them."""

    price: Money
    category_id: int


@dataclass(frozen=True)
class ShoppingCartItem:
    book_id: int
    quantity: int
    book: BookSnapshot

    @property
    def line_total(self) -> Money:
        return self.book.price * self.quantity


@dataclass
class ShoppingCart:
    items: list[ShoppingCartItem] = field(default_factory=list)
    surcharge: Money = field(default_factory=Money.zero)

    @property
    def computed_subtotal(self) -> Money:
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result

    @property
    def total(self) -> Money:
        return self.computed_subtotal + self.surcharge
