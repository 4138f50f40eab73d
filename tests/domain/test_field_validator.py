"""Unit tests for customer form validation."""

from dataclasses import replace
from datetime import date

import pytest

from bookstore.domain.exceptions import ValidationError
from bookstore.domain.model.customer import CustomerForm
from bookstore.domain.service.field_validator import parse_expiry, validate_customer_form

TODAY = date(2026, 10, 19)


def _form(**overrides) -> CustomerForm:
    form = CustomerForm(
        name="Alice Smith",
        address="12 Elm Street",
        phone="555-123-4567",
        email="alice@example.com",
        cc_number="4111 1111 1111 1111",
        cc_expiry_month="12",
        cc_expiry_year="2028",
    )
    return replace(form, **overrides)


def _failing_field(form: CustomerForm) -> str | None:
    with pytest.raises(ValidationError) as exc_info:
        validate_customer_form(form, today=TODAY)
    return exc_info.value.field


class TestValidForm:

    def test_valid_form_passes(self):
        validate_customer_form(_form(), today=TODAY)

    def test_defaults_to_current_date(self):
        validate_customer_form(_form(cc_expiry_year=str(date.today().year + 5)))


# ── Name and address ─────────────────────────────────────────────────────────


class TestTextFields:

    @pytest.mark.parametrize("name", ["", "Bob", "x" * 46])
    def test_bad_name_rejected(self, name):
        assert _failing_field(_form(name=name)) == "name"

    @pytest.mark.parametrize("name", ["Anna", "x" * 45])
    def test_name_length_bounds_accepted(self, name):
        validate_customer_form(_form(name=name), today=TODAY)

    @pytest.mark.parametrize("address", ["", "Elm", "x" * 46])
    def test_bad_address_rejected(self, address):
        assert _failing_field(_form(address=address)) == "address"


# ── Phone ────────────────────────────────────────────────────────────────────


class TestPhone:

    @pytest.mark.parametrize("phone", ["555-123-4567", "(555) 123 4567", "5551234567"])
    def test_ten_digits_accepted(self, phone):
        validate_customer_form(_form(phone=phone), today=TODAY)

    @pytest.mark.parametrize("phone", ["", "555-123-456", "1-555-123-4567", "phone"])
    def test_other_digit_counts_rejected(self, phone):
        assert _failing_field(_form(phone=phone)) == "phone"

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic 555-123-4567
        phone = "\u0665\u0665\u0665\u0661\u0662\u0663\u0664\u0665\u0666\u0667"
        assert _failing_field(_form(phone=phone)) == "phone"

    def test_non_ascii_digits_do_not_count_towards_ten(self):
        assert _failing_field(_form(phone="555-123-456\u0667")) == "phone"


# ── Email ────────────────────────────────────────────────────────────────────


class TestEmail:

    @pytest.mark.parametrize("email", ["alice@example.com", "a.b+c@mail.org"])
    def test_valid_email_accepted(self, email):
        validate_customer_form(_form(email=email), today=TODAY)

    @pytest.mark.parametrize(
        "email",
        ["", "alice", "alice@example", "alice@example.com.", "al ice@example.com"],
    )
    def test_invalid_email_rejected(self, email):
        assert _failing_field(_form(email=email)) == "email"

    @pytest.mark.parametrize(
        "email", ["alice@b\u00fccher.com", "alice@example.\u00e7om"]
    )
    def test_non_ascii_domain_rejected(self, email):
        assert _failing_field(_form(email=email)) == "email"


# ── Card number ──────────────────────────────────────────────────────────────


class TestCardNumber:

    @pytest.mark.parametrize(
        "cc_number",
        ["41111111111111", "4111-1111-1111-1111", "4111 1111 1111 111"],
    )
    def test_14_to_16_digits_accepted(self, cc_number):
        validate_customer_form(_form(cc_number=cc_number), today=TODAY)

    @pytest.mark.parametrize(
        "cc_number",
        ["", "4111 1111 1111", "41111111111111111", "4111-1111-1111-111x"],
    )
    def test_invalid_card_number_rejected(self, cc_number):
        assert _failing_field(_form(cc_number=cc_number)) == "cc_number"


# ── Expiry ───────────────────────────────────────────────────────────────────


class TestExpiry:

    def test_current_month_accepted(self):
        validate_customer_form(
            _form(cc_expiry_month="10", cc_expiry_year="2026"), today=TODAY
        )

    def test_previous_month_rejected(self):
        form = _form(cc_expiry_month="9", cc_expiry_year="2026")
        assert _failing_field(form) == "cc_expiry"

    def test_previous_year_rejected(self):
        form = _form(cc_expiry_month="12", cc_expiry_year="2025")
        assert _failing_field(form) == "cc_expiry"

    @pytest.mark.parametrize(
        "month, year",
        [
            ("ab", "2030"),
            ("12", ""),
            ("13", "2030"),
            ("0", "2030"),
            ("1_2", "2099"),
            ("12", " 20_99 "),
            (" 12", "2099"),
            ("+1", "2099"),
            ("\uff11\uff12", "2099"),
            ("12", "\u0662\u0660\u0669\u0669"),
        ],
    )
    def test_unparseable_expiry_rejected(self, month, year):
        form = _form(cc_expiry_month=month, cc_expiry_year=year)
        assert _failing_field(form) == "cc_expiry"

    def test_parse_expiry_returns_first_of_month(self):
        assert parse_expiry("03", "2029") == date(2029, 3, 1)


class TestRuleOrder:

    def test_first_failing_field_wins(self):
        form = _form(name="", phone="123", email="nope")
        assert _failing_field(form) == "name"

    def test_phone_checked_before_email(self):
        form = _form(phone="123", email="nope")
        assert _failing_field(form) == "phone"
