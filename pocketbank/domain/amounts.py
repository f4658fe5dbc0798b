"""Pure functions for parsing and formatting money.

All amounts are Decimal values with two decimal places (Money type).
"""

from decimal import Decimal, InvalidOperation

from pocketbank.domain.errors import InvalidAmount
from pocketbank.domain.models import CENT, MAX_BALANCE, Money


def to_money(value: Decimal | int | str) -> Money:
    """Quantize a value to two decimal places.

    Args:
        value: Decimal, integer or decimal string.

    Returns:
        Money with exactly two decimal places.
    """
    return Money(Decimal(value).quantize(CENT))


def parse_amount(text: str) -> Money:
    """Parse a user-supplied amount string.

    Grouping commas and surrounding whitespace are removed before parsing,
    so "1,234.50" parses to 1234.50.

    Args:
        text: Raw amount text.

    Returns:
        Parsed amount (always greater than zero).

    Raises:
        InvalidAmount: If the text is not a finite, positive amount with at
            most two decimal places, or is larger than MAX_BALANCE.
    """
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        raise InvalidAmount("Amount is empty")

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmount(f"Not a number: {text!r}") from None

    if not value.is_finite():
        raise InvalidAmount(f"Not a finite amount: {text!r}")
    if value <= 0:
        raise InvalidAmount("Amount must be positive")
    if value > MAX_BALANCE:
        raise InvalidAmount(f"Amount is too large: {text!r}")

    amount = to_money(value)
    if amount != value:
        raise InvalidAmount("Amount can't have more than two decimal places")

    return amount


def format_money(amount: Decimal) -> str:
    """Format money for display, e.g. 1500 -> "1,500.00"."""
    return f"{amount:,.2f}"
