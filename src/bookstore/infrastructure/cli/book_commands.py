"""CLI commands for the book catalog."""

from __future__ import annotations

import click

from bookstore.domain.exceptions import DomainException
from bookstore.domain.model.value_objects import Money
from bookstore.infrastructure.cli.context import get_container


@click.command("add")
@click.option("--title", required=True, help="Book title.")
@click.option("--author", required=True, help="Author name.")
@click.option("--price", required=True, help="Price (e.g. 15.00).")
@click.option("--category", "category_id", required=True, type=int, help="Category ID.")
@click.pass_context
def book_add(ctx: click.Context, title: str, author: str, price: str, category_id: int) -> None:
    """Add a book to the catalog."""
    container = get_container(ctx)

    try:
        book = container.book_repo.add(title, author, Money.of(price), category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Book #{book.book_id} '{book.title}' added at {book.price}")


@click.command("list")
@click.pass_context
def book_list(ctx: click.Context) -> None:
    """List all books in the catalog."""
    books = get_container(ctx).book_repo.list_all()

    if not books:
        click.echo("No books found.")
        return

    click.echo(f"{'ID':<6} {'Title':<30} {'Category':>8} {'Price':>10}")
    click.echo("-" * 57)
    for b in books:
        click.echo(f"{b.book_id:<6} {b.title:<30} {b.category_id:>8} {str(b.price):>10}")
