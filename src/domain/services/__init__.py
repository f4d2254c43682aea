"""Domain services package."""

from .documents import (
    compute_invoice_amounts,
    invoice_status,
)
from .events import extract_events
from .ledger import (
    balance_status,
    compute_totals,
    order_events,
    reduce_to_ledger,
)
from .normalization import normalize_counterparty_id
from .validation import validate_amount

__all__ = [
    "balance_status",
    "compute_invoice_amounts",
    "compute_totals",
    "extract_events",
    "invoice_status",
    "normalize_counterparty_id",
    "order_events",
    "reduce_to_ledger",
    "validate_amount",
]
