"""Domain models for invoice and document details."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal

from .ledger import DocumentKind, Payment


@dataclass(frozen=True)
class InvoiceLine:
    """Product line on an invoice."""

    name: str
    quantity: Decimal
    price: Decimal


@dataclass(frozen=True)
class InvoiceAmounts:
    """Derived invoice figures.

    Attributes:
        subtotal: Sum of quantity times price over all lines.
        total: Subtotal plus tax minus discount.
        due: Total minus the amount already paid.
    """

    subtotal: Decimal
    total: Decimal
    due: Decimal


@dataclass(frozen=True)
class DocumentDetail:
    """Full view of a single source document."""

    document_id: str
    kind: DocumentKind
    number: str | None
    date: datetime
    counterparty_name: str | None
    total: Decimal
    paid: Decimal
    due: Decimal
    status: str | None
    lines: list[InvoiceLine] = field(default_factory=list)
    payments: list[Payment] = field(default_factory=list)
    subtotal: Decimal | None = None
    tax: Decimal = Decimal("0")
    discount: Decimal = Decimal("0")
    due_date: date | None = None


__all__ = ["InvoiceLine", "InvoiceAmounts", "DocumentDetail"]
