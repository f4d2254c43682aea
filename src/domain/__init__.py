"""Domain package for ledger rules and core models."""

from .errors import LedgerDataIntegrityError, LedgerError
from .models import (
    BalanceStatus,
    DocumentDetail,
    DocumentKind,
    EventKind,
    InvoiceAmounts,
    InvoiceLine,
    Ledger,
    LedgerEntry,
    LedgerEvent,
    LedgerTotals,
    LedgerType,
    LedgerView,
    Payment,
    SourceDocument,
)
from .policies import LedgerFilter, apply_ledger_filters
from .services import (
    balance_status,
    compute_invoice_amounts,
    compute_totals,
    extract_events,
    invoice_status,
    normalize_counterparty_id,
    reduce_to_ledger,
    validate_amount,
)

__all__ = [
    "BalanceStatus",
    "DocumentDetail",
    "DocumentKind",
    "EventKind",
    "InvoiceAmounts",
    "InvoiceLine",
    "Ledger",
    "LedgerDataIntegrityError",
    "LedgerEntry",
    "LedgerError",
    "LedgerEvent",
    "LedgerFilter",
    "LedgerTotals",
    "LedgerType",
    "LedgerView",
    "Payment",
    "SourceDocument",
    "apply_ledger_filters",
    "balance_status",
    "compute_invoice_amounts",
    "compute_totals",
    "extract_events",
    "invoice_status",
    "normalize_counterparty_id",
    "reduce_to_ledger",
    "validate_amount",
]
