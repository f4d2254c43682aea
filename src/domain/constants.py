"""Domain constants for ledger labelling."""

from src.domain.models.ledger import LedgerType

RECEIVABLE = "Receivable"
PAYABLE = "Payable"

# Label applied to a non-negative balance for each ledger type.
NON_NEGATIVE_BALANCE_LABELS = {
    LedgerType.CUSTOMER: RECEIVABLE,
    LedgerType.VENDOR: PAYABLE,
    LedgerType.EMPLOYEE: RECEIVABLE,
}

# (non-negative, negative) balance summaries for statements.
BALANCE_SUMMARIES = {
    LedgerType.CUSTOMER: ("Customer owes you", "You owe customer"),
    LedgerType.VENDOR: ("You owe vendor", "Vendor owes you"),
    LedgerType.EMPLOYEE: ("Employee owes you", "You owe employee"),
}


__all__ = [
    "RECEIVABLE",
    "PAYABLE",
    "NON_NEGATIVE_BALANCE_LABELS",
    "BALANCE_SUMMARIES",
]
