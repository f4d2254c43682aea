"""Running-balance reduction over ledger events."""

from collections.abc import Iterable, Sequence
from decimal import Decimal, InvalidOperation

from src.domain.constants import (
    BALANCE_SUMMARIES,
    NON_NEGATIVE_BALANCE_LABELS,
    PAYABLE,
    RECEIVABLE,
)
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import (
    BalanceStatus,
    EventKind,
    Ledger,
    LedgerEntry,
    LedgerEvent,
    LedgerTotals,
    LedgerType,
)
from src.domain.policies.document_labels import (
    describe,
    document_number,
    entry_id,
)
from src.domain.services.validation import validate_amount
from src.utils.decimal_utils import quantize_money


def _ledger_order(events: Sequence[LedgerEvent]) -> list[int]:
    # Ties on the timestamp fall back to the extraction index.
    return sorted(
        range(len(events)),
        key=lambda index: (events[index].date, index),
    )


def order_events(events: Sequence[LedgerEvent]) -> list[LedgerEvent]:
    """Sort events by timestamp, keeping extraction order on ties.

    Args:
        events: Events in extraction order.

    Returns:
        list[LedgerEvent]: Events in ledger order.
    """
    return [events[index] for index in _ledger_order(events)]


def _event_amount(event: LedgerEvent) -> Decimal:
    document_id = event.document.document_id
    amount = validate_amount(event.amount, document_id=document_id)
    try:
        return quantize_money(amount)
    except InvalidOperation as exc:
        raise LedgerDataIntegrityError(
            f"Amount out of range: {amount}",
            document_id=document_id,
        ) from exc


def reduce_to_ledger(events: Sequence[LedgerEvent]) -> Ledger:
    """Build ledger entries with a running balance from events.

    Charges increase the balance and payments decrease it. Every amount is
    validated before any entry is produced.

    Args:
        events: Events for a single counterparty, in extraction order.

    Returns:
        Ledger: Entries in date order and the final balance.

    Raises:
        LedgerDataIntegrityError: If any event amount is non-numeric,
            non-finite, negative or too large to round to cents.
    """
    events = list(events)
    amounts = [_event_amount(event) for event in events]

    balance = Decimal("0.00")
    entries: list[LedgerEntry] = []
    for index in _ledger_order(events):
        event = events[index]
        amount = amounts[index]
        if event.kind == EventKind.CHARGE:
            debit, credit = amount, Decimal("0.00")
        else:
            debit, credit = Decimal("0.00"), amount
        balance = balance + debit - credit
        entries.append(
            LedgerEntry(
                id=entry_id(event),
                date=event.date,
                kind=event.kind,
                document_id=event.document.document_id,
                document_number=document_number(event),
                description=describe(event),
                debit=debit,
                credit=credit,
                balance=balance,
            )
        )
    return Ledger(entries=entries, final_balance=balance)


def compute_totals(entries: Iterable[LedgerEntry]) -> LedgerTotals:
    """Sum debits and credits over entries."""
    total_debit = Decimal("0.00")
    total_credit = Decimal("0.00")
    for entry in entries:
        total_debit += entry.debit
        total_credit += entry.credit
    return LedgerTotals(total_debit=total_debit, total_credit=total_credit)


def balance_status(balance: Decimal, ledger_type: LedgerType) -> BalanceStatus:
    """Interpret a balance for the given ledger type.

    Args:
        balance: Final or entry balance.
        ledger_type: Ledger the balance belongs to.

    Returns:
        BalanceStatus: Receivable/Payable label and a short summary.
    """
    non_negative_label = NON_NEGATIVE_BALANCE_LABELS[ledger_type]
    owed, owing = BALANCE_SUMMARIES[ledger_type]
    if balance >= 0:
        return BalanceStatus(label=non_negative_label, summary=owed)
    label = PAYABLE if non_negative_label == RECEIVABLE else RECEIVABLE
    return BalanceStatus(label=label, summary=owing)


__all__ = [
    "order_events",
    "reduce_to_ledger",
    "compute_totals",
    "balance_status",
]
