"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

CENT = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from JSON payloads or adapters.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        InvalidOperation: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidOperation(f"Boolean is not a numeric value: {value}")
    return Decimal(str(value).strip())


def quantize_money(value: Decimal) -> Decimal:
    """Round a monetary amount to cents, half-up."""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)


__all__ = ["CENT", "coerce_decimal", "quantize_money"]
