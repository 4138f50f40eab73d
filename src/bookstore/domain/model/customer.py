"""Customer billing data: the raw form and the persisted record."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CustomerForm:
    """Input: billing details exactly as the caller submitted them.

    Every field is a raw string; nothing here has been validated.
    """

    name: str
    address: str
    phone: str
    email: str
    cc_number: str
    cc_expiry_month: str
    cc_expiry_year: str


@dataclass(frozen=True)
class Customer:
    """A customer row. A new one is written for every placed order."""

    customer_id: int
    name: str
    address: str
    phone: str
    email: str
    cc_number: str
    cc_expiry_date: date | None
