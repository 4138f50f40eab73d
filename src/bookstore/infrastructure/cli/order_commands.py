"""CLI commands for placing and inspecting orders."""

from __future__ import annotations

import click

from bookstore.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from bookstore.domain.model.cart import BookSnapshot, ShoppingCart, ShoppingCartItem
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.model.order import OrderDetails
from bookstore.domain.model.value_objects import Money
from bookstore.domain.repository.book_repository import BookRepository
from bookstore.infrastructure.cli.context import get_container


def _parse_items(raw: str) -> list[tuple[int, int]]:
    """Parse '1:3,4:1' into (book_id, quantity) pairs."""
    pairs: list[tuple[int, int]] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'BookId:Quantity'."
            )
        book_id, qty = pair.split(":", 1)
        try:
            pairs.append((int(book_id), int(qty)))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return pairs


def _build_cart(
    book_repo: BookRepository, pairs: list[tuple[int, int]], surcharge: Money
) -> ShoppingCart:
    """Snapshot current catalog prices into a cart, as add-to-cart would."""
    items = []
    for book_id, quantity in pairs:
        book = book_repo.find_by_book_id(book_id)
        if book is None:
            raise EntityNotFoundError(f"Book #{book_id} not found")
        items.append(
            ShoppingCartItem(
                book_id=book_id,
                quantity=quantity,
                book=BookSnapshot(price=book.price, category_id=book.category_id),
            )
        )
    return ShoppingCart(items=items, surcharge=surcharge)


@click.command("place")
@click.option("--name", required=True, help="Customer name.")
@click.option("--address", required=True, help="Billing address.")
@click.option("--phone", required=True, help="Phone number.")
@click.option("--email", required=True, help="Email address.")
@click.option("--cc-number", required=True, help="Credit card number.")
@click.option("--cc-month", required=True, help="Card expiry month (1-12).")
@click.option("--cc-year", required=True, help="Card expiry year (e.g. 2030).")
@click.option("--items", required=True, help="Items as 'BookId:Qty,BookId:Qty'.")
@click.pass_context
def order_place(
    ctx: click.Context,
    name: str,
    address: str,
    phone: str,
    email: str,
    cc_number: str,
    cc_month: str,
    cc_year: str,
    items: str,
) -> None:
    """Place an order for the given books."""
    pairs = _parse_items(items)
    container = get_container(ctx)
    settings = ctx.find_root().obj["settings"]

    form = CustomerForm(
        name=name,
        address=address,
        phone=phone,
        email=email,
        cc_number=cc_number,
        cc_expiry_month=cc_month,
        cc_expiry_year=cc_year,
    )

    try:
        cart = _build_cart(container.book_repo, pairs, Money.of(settings.CART_SURCHARGE))
        order_id = container.place_order_handler().handle(form, cart)
        details = container.show_order_handler().handle(order_id)
    except ValidationError as exc:
        where = f" ({exc.field})" if exc.field else ""
        raise click.ClickException(f"{exc.message}{where}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} placed.")
    click.echo()
    _display_order(details)


def _display_order(details: OrderDetails) -> None:
    order = details.order
    customer = details.customer
    click.echo(f"Order #{order.order_id}  (confirmation={order.confirmation_number})")
    click.echo(f"Customer: {customer.name} <{customer.email}>")
    click.echo(f"Created:  {order.date_created:%Y-%m-%d %H:%M}")
    click.echo()
    click.echo(f"  {'Book':<30} {'Qty':>5} {'Price':>10}")
    click.echo(f"  {'-'*47}")
    for line_item, book in details.items:
        click.echo(f"  {book.title:<30} {line_item.quantity:>5} {str(book.price):>10}")
    click.echo(f"  {'-'*47}")
    click.echo(f"  {'Order Total':<27} {str(order.amount):>20}")


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_context
def order_show(ctx: click.Context, order_id: int) -> None:
    """Show details of an existing order."""
    handler = get_container(ctx).show_order_handler()

    try:
        details = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(details)
