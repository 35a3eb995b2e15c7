"""Formatting utilities for amounts and dates shown to employers."""

from datetime import datetime
from typing import Optional


CURRENCY_SYMBOLS = {
    "AUD": "A$",
    "USD": "$",
}


def format_order_amount(amount_cents: int, currency: str) -> str:
    """
    Format an order amount for display.

    Args:
        amount_cents: Amount in the currency's minor unit
        currency: ISO currency code, any case

    Returns:
        Formatted amount (e.g., "A$9.99", "$12.34", "EUR12.34")
    """
    code = currency.upper()
    symbol = CURRENCY_SYMBOLS.get(code, code)
    return f"{symbol}{amount_cents / 100:.2f}"


def format_order_date(dt: datetime) -> str:
    """
    Format an order timestamp the way receipts show it.

    Returns:
        e.g. "19 October 2026, 09:05 am"
    """
    return f"{dt.day} {dt:%B %Y}, {dt:%I:%M} {dt:%p}".replace("AM", "am").replace("PM", "pm")


def format_salary_range(
    salary_min: Optional[int], salary_max: Optional[int], currency: str = "AUD"
) -> Optional[str]:
    """
    Format a salary range, or None unless both bounds are known.

    Example:
        format_salary_range(65000, 80000)  # "A$65,000 - A$80,000"
    """
    if salary_min is None or salary_max is None:
        return None
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), currency.upper())
    return f"{symbol}{salary_min:,} - {symbol}{salary_max:,}"
