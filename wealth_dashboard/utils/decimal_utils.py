"""Helpers for Decimal normalization."""

from decimal import Decimal


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def decimal_sum(values) -> Decimal:
    """Sum an iterable of amounts starting from Decimal zero."""
    return sum((coerce_decimal(value) for value in values), Decimal("0"))


def json_number(value: Decimal) -> int | float | str:
    """Return a JSON-friendly value for a Decimal amount.

    Integral amounts become ``int`` and amounts that survive a float round
    trip become ``float``. Anything else is kept as its decimal string so a
    reload restores the same value.
    """
    if value == value.to_integral_value():
        return int(value)
    as_float = float(value)
    if Decimal(repr(as_float)) == value:
        return as_float
    return str(value)


__all__ = ["coerce_decimal", "decimal_sum", "json_number"]
