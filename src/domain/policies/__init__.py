"""Domain policies package."""

from .document_labels import describe, document_number, entry_id
from .ledger_filters import LedgerFilter, apply_ledger_filters

__all__ = [
    "LedgerFilter",
    "apply_ledger_filters",
    "describe",
    "document_number",
    "entry_id",
]
