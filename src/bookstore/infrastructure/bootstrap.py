"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from sqlalchemy import Engine, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

from bookstore.application.place_order import PlaceOrderHandler
from bookstore.application.show_order import ShowOrderHandler
from bookstore.infrastructure.config import Settings
from bookstore.infrastructure.persistence.models import Base
from bookstore.infrastructure.persistence.sqlalchemy_repositories import (
    SqlAlchemyBookRepository,
    SqlAlchemyCustomerRepository,
    SqlAlchemyLineItemRepository,
    SqlAlchemyOrderRepository,
)
from bookstore.infrastructure.persistence.transaction import SqlAlchemyTransactionManager


def create_db_engine(settings: Settings) -> Engine:
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    engine = create_engine(url, echo=settings.SQL_ECHO)
    Base.metadata.create_all(engine)
    return engine


@dataclass
class Container:
    """Repositories and use-case handlers sharing one engine."""

    session_factory: sessionmaker[Session]

    def __post_init__(self) -> None:
        self.book_repo = SqlAlchemyBookRepository(self.session_factory)
        self.customer_repo = SqlAlchemyCustomerRepository(self.session_factory)
        self.order_repo = SqlAlchemyOrderRepository(self.session_factory)
        self.line_item_repo = SqlAlchemyLineItemRepository(self.session_factory)
        self.transaction_manager = SqlAlchemyTransactionManager(self.session_factory)

    def place_order_handler(self) -> PlaceOrderHandler:
        return PlaceOrderHandler(
            book_repo=self.book_repo,
            customer_repo=self.customer_repo,
            order_repo=self.order_repo,
            line_item_repo=self.line_item_repo,
            transaction_manager=self.transaction_manager,
        )

    def show_order_handler(self) -> ShowOrderHandler:
        return ShowOrderHandler(
            book_repo=self.book_repo,
            customer_repo=self.customer_repo,
            order_repo=self.order_repo,
            line_item_repo=self.line_item_repo,
        )


def build_container(settings: Settings) -> Container:
    engine = create_db_engine(settings)
    return Container(sessionmaker(bind=engine, expire_on_commit=False))
