"""Invoice arithmetic."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models.documents import InvoiceAmounts, InvoiceLine
from src.utils.decimal_utils import quantize_money

PAID = "Paid"
OVERDUE = "Overdue"
PENDING = "Pending"


def compute_invoice_amounts(
    lines: Iterable[InvoiceLine],
    *,
    tax: Decimal = Decimal("0"),
    discount: Decimal = Decimal("0"),
    paid: Decimal = Decimal("0"),
) -> InvoiceAmounts:
    """Compute subtotal, total and due for an invoice.

    Args:
        lines: Product lines of the invoice.
        tax: Tax added on top of the subtotal.
        discount: Discount subtracted from the subtotal.
        paid: Amount already paid.

    Returns:
        InvoiceAmounts: Figures rounded to cents.
    """
    subtotal = quantize_money(
        sum(
            (line.quantity * line.price for line in lines),
            start=Decimal("0"),
        )
    )
    total = quantize_money(subtotal + tax - discount)
    due = quantize_money(total - paid)
    return InvoiceAmounts(subtotal=subtotal, total=total, due=due)


def invoice_status(
    due: Decimal,
    due_date: date | None,
    today: date,
) -> str:
    """Return Paid, Overdue or Pending for an invoice."""
    if due <= 0:
        return PAID
    if due_date is not None and due_date < today:
        return OVERDUE
    return PENDING


__all__ = [
    "PAID",
    "OVERDUE",
    "PENDING",
    "compute_invoice_amounts",
    "invoice_status",
]
