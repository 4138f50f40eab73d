from datetime import date, datetime
from decimal import Decimal

from sqlalchemy import Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    pass


class BookRow(Base):
    __tablename__ = "book"

    book_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(60), nullable=False)
    author: Mapped[str] = mapped_column(String(60), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    category_id: Mapped[int] = mapped_column(Integer, nullable=False)


class CustomerRow(Base):
    __tablename__ = "customer"

    customer_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_name: Mapped[str] = mapped_column(String(45), nullable=False)
    address: Mapped[str] = mapped_column(String(45), nullable=False)
    phone: Mapped[str] = mapped_column(String(45), nullable=False)
    email: Mapped[str] = mapped_column(String(45), nullable=False)
    cc_number: Mapped[str] = mapped_column(String(45), nullable=False)
    cc_exp_date: Mapped[date | None] = mapped_column(Date, nullable=True)


class OrderRow(Base):
    __tablename__ = "customer_order"

    customer_order_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    date_created: Mapped[datetime] = mapped_column(DateTime, server_default=func.now(), nullable=False)
    confirmation_number: Mapped[int] = mapped_column(Integer, nullable=False)
    customer_id: Mapped[int] = mapped_column(ForeignKey("customer.customer_id"), nullable=False)


class LineItemRow(Base):
    __tablename__ = "customer_order_line_item"

    line_item_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    customer_order_id: Mapped[int] = mapped_column(
        ForeignKey("customer_order.customer_order_id"), nullable=False
    )
    book_id: Mapped[int] = mapped_column(ForeignKey("book.book_id"), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)
