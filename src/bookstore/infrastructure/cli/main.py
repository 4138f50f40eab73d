import click

from bookstore.infrastructure.cli.book_commands import book_add, book_list
from bookstore.infrastructure.cli.order_commands import order_place, order_show


@click.group()
def cli() -> None:
    """Bookstore order placement."""


@cli.group()
def order() -> None:
    """Place and inspect orders."""


@cli.group()
def book() -> None:
    """Manage the book catalog."""


# Register subcommands
order.add_command(order_place)
order.add_command(order_show)
book.add_command(book_add)
book.add_command(book_list)
