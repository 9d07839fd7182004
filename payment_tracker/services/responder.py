"""Reply texts sent back to the chat for each pipeline outcome."""

from datetime import datetime

from payment_tracker.core.db import Payment
from payment_tracker.core.models import DETAIL_LABELS

UNSUPPORTED_CONTENT = "Please send a text message or an image containing payment information."
NOT_UNDERSTOOD = "Sorry, I couldn't understand the financial information in your message."
NO_PAYMENT_FOUND = (
    "I couldn't find any payment information in your message. "
    "Please make sure to include an amount and description."
)
SAVE_FAILED = "Sorry, there was an error saving your payment information."
PROCESSING_FAILED = "Sorry, there was an error processing your message."


def format_amount(value: float) -> str:
    """Render an amount without a trailing '.0' for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_date(value: datetime) -> str:
    """Render a date as M/D/YYYY."""
    return f"{value.month}/{value.day}/{value.year}"


def format_payment_recorded(payment: Payment) -> str:
    """Build the confirmation message for a stored payment."""
    lines = [
        "✅ Payment recorded!",
        "",
        f"Amount: ${format_amount(payment.value)}",
        f"Description: {payment.description}",
        f"Category: {payment.category}",
        f"Date: {format_date(payment.payed_at)}",
    ]
    details = payment.data or {}
    lines.extend(f"{label}: {details[key]}" for key, label in DETAIL_LABELS.items() if details.get(key))
    return "\n".join(lines)
