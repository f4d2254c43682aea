"""Domain models for counterparty ledgers."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class LedgerType(str, Enum):
    """Kind of counterparty a ledger is built for."""

    CUSTOMER = "customer"
    VENDOR = "vendor"
    EMPLOYEE = "employee"


class DocumentKind(str, Enum):
    """Kind of source document feeding a ledger."""

    INVOICE = "invoice"
    GATE_ENTRY = "gate-entry"
    ADVANCE = "advance"


class EventKind(str, Enum):
    """Direction of a ledger event."""

    CHARGE = "charge"
    PAYMENT = "payment"


@dataclass(frozen=True)
class Payment:
    """Payment recorded against a source document."""

    date: datetime
    amount: Decimal
    method: str | None = None


@dataclass(frozen=True)
class SourceDocument:
    """Invoice, gate entry or advance as read from the data service.

    Attributes:
        document_id: Backend identifier of the document.
        kind: Document kind, used for numbering and descriptions.
        counterparty_refs: Raw counterparty references (id strings or
            embedded objects with an ``_id``).
        date: Creation timestamp of the document.
        total: Amount charged to the counterparty.
        number: Human document number when the backend assigns one.
        payments: Embedded payments, or None when the payload has no list.
        amount_paid: Legacy aggregate amount paid.
        defect: Reason the payload could not be read, when it is malformed.
            Only the ledger of the owning counterparty is rejected for it.
    """

    document_id: str
    kind: DocumentKind
    counterparty_refs: tuple[object, ...]
    date: datetime
    total: Decimal
    number: str | None = None
    payments: tuple[Payment, ...] | None = None
    amount_paid: Decimal = Decimal("0")
    defect: str | None = None


@dataclass(frozen=True)
class LedgerEvent:
    """Charge or payment derived from a source document."""

    kind: EventKind
    date: datetime
    document: SourceDocument
    amount: Decimal
    payment_index: int | None = None


@dataclass(frozen=True)
class LedgerEntry:
    """Ledger row with the running balance as of this entry."""

    id: str
    date: datetime
    kind: EventKind
    document_id: str
    document_number: str
    description: str
    debit: Decimal
    credit: Decimal
    balance: Decimal


@dataclass(frozen=True)
class Ledger:
    """Ordered ledger entries and the balance after the last one."""

    entries: list[LedgerEntry] = field(default_factory=list)
    final_balance: Decimal = Decimal("0.00")


@dataclass(frozen=True)
class LedgerTotals:
    """Debit and credit totals over a list of entries."""

    total_debit: Decimal
    total_credit: Decimal

    @property
    def net(self) -> Decimal:
        """Return total_debit minus total_credit."""
        return self.total_debit - self.total_credit


@dataclass(frozen=True)
class BalanceStatus:
    """Interpretation of a balance for a given ledger type."""

    label: str
    summary: str


@dataclass(frozen=True)
class LedgerView:
    """Ledger and its filtered rows, ready for UI rendering.

    Attributes:
        ledger_type: Ledger the view was built for.
        counterparty_id: Canonical id of the counterparty.
        ledger: Full ledger over every document of the counterparty.
        entries: Entries kept by the active filter.
        totals: Debit and credit totals over the kept entries.
        status: Label for the final balance.
    """

    ledger_type: LedgerType
    counterparty_id: str
    ledger: Ledger
    entries: list[LedgerEntry]
    totals: LedgerTotals
    status: BalanceStatus

    @property
    def final_balance(self) -> Decimal:
        """Return the balance after the last unfiltered entry."""
        return self.ledger.final_balance


__all__ = [
    "LedgerView",
    "LedgerType",
    "DocumentKind",
    "EventKind",
    "Payment",
    "SourceDocument",
    "LedgerEvent",
    "LedgerEntry",
    "Ledger",
    "LedgerTotals",
    "BalanceStatus",
]
