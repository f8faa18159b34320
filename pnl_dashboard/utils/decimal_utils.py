"""Helpers for Decimal and date normalization."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation

# Accepted monetary magnitudes lie within 1e-30 .. 1e31.
MAX_MONETARY_EXPONENT = 30


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a trusted source.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_monetary_or_zero(value) -> Decimal:
    """Parse a monetary value, falling back to zero.

    Monetary fields often travel as text. Anything that is not a finite
    decimal (None, blank or garbage strings, booleans, NaN, Infinity) is
    read as zero instead of raising. Magnitudes outside the monetary range
    (for example "1e1000000") are read as zero as well.

    Args:
        value: Raw monetary value from an API payload.

    Returns:
        Decimal: Parsed finite amount, or Decimal("0").
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, Decimal):
        parsed = value
    else:
        raw = str(value).strip()
        if not raw:
            return Decimal("0")
        try:
            parsed = Decimal(raw)
        except (InvalidOperation, ValueError):
            return Decimal("0")
    if not parsed.is_finite() or parsed.is_zero():
        return Decimal("0")
    if abs(parsed.adjusted()) > MAX_MONETARY_EXPONENT:
        return Decimal("0")
    return parsed


def parse_iso_date(value) -> date | None:
    """Parse an ISO date, ignoring any time component.

    Args:
        value: date, datetime, or string such as "2024-01-28" or
            "2024-01-28T00:00:00Z".

    Returns:
        date | None: Parsed calendar date, or None when invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raw = str(value).strip()[:10]
    try:
        return date.fromisoformat(raw)
    except ValueError:
        return None


__all__ = [
    "MAX_MONETARY_EXPONENT",
    "coerce_decimal",
    "parse_monetary_or_zero",
    "parse_iso_date",
]
