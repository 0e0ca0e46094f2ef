"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation

HUNDRED = Decimal("100")
ZERO = Decimal("0")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from SQL, JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric value: {value!r}") from exc


def percent_of(part: Decimal, whole: Decimal) -> Decimal:
    """Return ``part / whole * 100``, or zero when ``whole`` is not positive."""
    if whole <= 0:
        return ZERO
    return part / whole * HUNDRED


__all__ = ["coerce_decimal", "percent_of", "HUNDRED", "ZERO"]
