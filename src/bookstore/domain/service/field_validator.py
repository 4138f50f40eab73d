"""Field-level validation of the customer billing form.

Pure functions, no I/O. Rules run in a fixed order (name, address,
phone, email, card number, expiry) and the first failure is raised as
a ValidationError naming the offending field.
"""

from __future__ import annotations

import re
from datetime import date

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.customer import CustomerForm

MIN_TEXT_LENGTH = 4
MAX_TEXT_LENGTH = 45
PHONE_DIGITS = 10

# character classes are ASCII-only: a phone or card number is Western digits
_NON_DIGITS = re.compile(r"\D", re.ASCII)
_CARD_SEPARATORS = re.compile(r"[\s-]+", re.ASCII)
_CARD_NUMBER = re.compile(r"[0-9]{14,16}")
_EMAIL = re.compile(r"[^\s]+@\w+\.\w+[^.]", re.ASCII)
_EXPIRY_MONTH = re.compile(r"[0-9]{1,2}")
_EXPIRY_YEAR = re.compile(r"[0-9]{4}")


def validate_customer_form(form: CustomerForm, today: date | None = None) -> None:
    """Raise ValidationError for the first invalid field of ``form``."""
    if not _is_valid_text(form.name):
        raise ValidationError("Invalid name field", field="name")

    if not _is_valid_text(form.address):
        raise ValidationError("Invalid address field", field="address")

    if not form.phone or len(_NON_DIGITS.sub("", form.phone)) != PHONE_DIGITS:
        raise ValidationError("Invalid phone field", field="phone")

    if not form.email or _EMAIL.fullmatch(form.email) is None:
        raise ValidationError("Invalid email field", field="email")

    if not form.cc_number or _CARD_NUMBER.fullmatch(
        _CARD_SEPARATORS.sub("", form.cc_number)
    ) is None:
        raise ValidationError("Invalid cc_number field", field="cc_number")

    expiry = parse_expiry(form.cc_expiry_month, form.cc_expiry_year)
    today = today or date.today()
    if (expiry.year, expiry.month) < (today.year, today.month):
        raise ValidationError("Please enter a valid expiration date.", field="cc_expiry")


def parse_expiry(month: str, year: str) -> date:
    """Turn a card's expiry month/year into the first day of that month.

    A card is valid through the end of its expiry month, so only the
    month and year are meaningful.
    """
    if (
        _EXPIRY_MONTH.fullmatch(month or "") is None
        or _EXPIRY_YEAR.fullmatch(year or "") is None
    ):
        raise ValidationError("Please enter a valid expiration date.", field="cc_expiry")
    try:
        return date(int(year), int(month), 1)
    except (TypeError, ValueError) as exc:
        raise ValidationError(
            "Please enter a valid expiration date.", field="cc_expiry"
        ) from exc


def _is_valid_text(value: str) -> bool:
    return bool(value) and MIN_TEXT_LENGTH <= len(value) <= MAX_TEXT_LENGTH
