from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation


def format_currency(amount: int) -> str:
    """Minor units (cents) -> US dollar text, e.g. 123456 -> "$1,234.56"."""
    return f"${int(amount) / 100:,.2f}"


def parse_currency(text: str) -> int:
    """Inverse of `format_currency`: "$1,234.56" -> 123456."""
    cleaned = text.strip().replace("$", "").replace(",", "")
    try:
        value = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Not a currency amount: {text!r}") from e
    return int((value * 100).quantize(Decimal("1")))


def format_date_to_local(date_str: str) -> str:
    # "2024-01-01" -> "Jan 1, 2024"
    d = date.fromisoformat(str(date_str)[:10])
    return f"{d:%b} {d.day}, {d.year}"
