"""Domain models package."""

from .documents import DocumentDetail, InvoiceAmounts, InvoiceLine
from .ledger import (
    BalanceStatus,
    DocumentKind,
    EventKind,
    Ledger,
    LedgerEntry,
    LedgerEvent,
    LedgerTotals,
    LedgerType,
    LedgerView,
    Payment,
    SourceDocument,
)

__all__ = [
    "BalanceStatus",
    "DocumentDetail",
    "DocumentKind",
    "EventKind",
    "InvoiceAmounts",
    "InvoiceLine",
    "Ledger",
    "LedgerEntry",
    "LedgerEvent",
    "LedgerTotals",
    "LedgerType",
    "LedgerView",
    "Payment",
    "SourceDocument",
]
