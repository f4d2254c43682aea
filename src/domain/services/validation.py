"""Domain validation helpers."""

from decimal import Decimal, InvalidOperation

from src.domain.errors import LedgerDataIntegrityError
from src.utils.decimal_utils import coerce_decimal


def validate_amount(
    value,
    *,
    document_id: str | None = None,
    field_name: str = "amount",
) -> Decimal:
    """Return a monetary amount after checking it can enter a balance.

    Args:
        value: Raw amount from a payload or event.
        document_id: Document the amount belongs to, for error reporting.
        field_name: Payload field the amount was read from.

    Returns:
        Decimal: The amount as a finite, non-negative Decimal.

    Raises:
        LedgerDataIntegrityError: If the amount is non-numeric, non-finite or
            negative.
    """
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError) as exc:
        raise LedgerDataIntegrityError(
            f"Non-numeric {field_name}: {value!r}",
            document_id=document_id,
        ) from exc
    if not amount.is_finite():
        raise LedgerDataIntegrityError(
            f"Non-finite {field_name}: {value!r}",
            document_id=document_id,
        )
    if amount < 0:
        raise LedgerDataIntegrityError(
            f"Negative {field_name}: {amount}",
            document_id=document_id,
        )
    return amount


__all__ = ["validate_amount"]
