from decimal import Decimal

import pytest

from src.domain.models.ledger import LedgerType
from src.domain.services.ledger import balance_status


@pytest.mark.parametrize(
    ("ledger_type", "balance", "label", "summary"),
    [
        (LedgerType.CUSTOMER, "150.00", "Receivable", "Customer owes you"),
        (LedgerType.CUSTOMER, "0", "Receivable", "Customer owes you"),
        (LedgerType.CUSTOMER, "-20", "Payable", "You owe customer"),
        (LedgerType.VENDOR, "150.00", "Payable", "You owe vendor"),
        (LedgerType.VENDOR, "0", "Payable", "You owe vendor"),
        (LedgerType.VENDOR, "-20", "Receivable", "Vendor owes you"),
        (LedgerType.EMPLOYEE, "75", "Receivable", "Employee owes you"),
        (LedgerType.EMPLOYEE, "-5", "Payable", "You owe employee"),
    ],
)
def test_balance_status_labels(ledger_type, balance, label, summary):
    status = balance_status(Decimal(balance), ledger_type)

    assert status.label == label
    assert status.summary == summary
