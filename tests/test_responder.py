"""Tests for reply formatting."""

from datetime import datetime

from payment_tracker.core.db import Payment
from payment_tracker.services.responder import format_amount, format_payment_recorded


def test_amount_drops_trailing_zero_only_for_whole_numbers() -> None:
    if (format_amount(25.5), format_amount(25.0), format_amount(0.99)) != ("25.5", "25", "0.99"):
        msg = "Unexpected amount formatting"
        raise AssertionError(msg)


def test_confirmation_lists_core_fields_and_present_details() -> None:
    payment = Payment(
        value=12.0,
        description="taxi home",
        category="transport",
        payed_at=datetime(2025, 3, 7, 22, 15),  # noqa: DTZ001
        data={"merchant": "Uber", "payment_method": "card", "location": None, "notes": ""},
    )
    text = format_payment_recorded(payment)
    expected = (
        "✅ Payment recorded!\n\n"
        "Amount: $12\n"
        "Description: taxi home\n"
        "Category: transport\n"
        "Date: 3/7/2025\n"
        "Merchant: Uber\n"
        "Payment Method: card"
    )
    if text != expected:
        msg = f"Unexpected confirmation text:\n{text}"
        raise AssertionError(msg)


def test_confirmation_without_details() -> None:
    payment = Payment(value=4.5, description="coffee", category="food", payed_at=datetime(2025, 1, 1), data=None)  # noqa: DTZ001
    text = format_payment_recorded(payment)
    if not text.endswith("Date: 1/1/2025"):
        msg = f"Expected the date to be the last line, got:\n{text}"
        raise AssertionError(msg)
