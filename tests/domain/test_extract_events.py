"""Tests for ledger event extraction."""

from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import (
    DocumentKind,
    EventKind,
    Payment,
    SourceDocument,
)
from src.domain.services.events import extract_events


def _day(day: int) -> datetime:
    return datetime(2024, 1, day, tzinfo=timezone.utc)


def _document(
    document_id: str = "doc-1",
    *,
    counterparty="c1",
    day: int = 1,
    total: str = "1000",
    payments: tuple[Payment, ...] | None = None,
    amount_paid: str = "0",
) -> SourceDocument:
    return SourceDocument(
        document_id=document_id,
        kind=DocumentKind.INVOICE,
        counterparty_refs=(counterparty,),
        date=_day(day),
        total=Decimal(total),
        payments=payments,
        amount_paid=Decimal(amount_paid),
    )


def test_one_charge_per_document_and_one_payment_per_recorded_payment():
    document = _document(
        payments=(
            Payment(date=_day(2), amount=Decimal("400")),
            Payment(date=_day(3), amount=Decimal("600")),
        )
    )

    events = extract_events([document], "c1")

    assert [event.kind for event in events] == [
        EventKind.CHARGE,
        EventKind.PAYMENT,
        EventKind.PAYMENT,
    ]
    assert [event.amount for event in events] == [
        Decimal("1000"),
        Decimal("400"),
        Decimal("600"),
    ]
    # Payments are dated at their own date, not the document's.
    assert [event.date for event in events] == [_day(1), _day(2), _day(3)]
    assert [event.payment_index for event in events] == [None, 0, 1]


def test_documents_of_other_counterparties_are_ignored():
    documents = [
        _document("doc-1", counterparty="c1"),
        _document("doc-2", counterparty="c2"),
    ]

    events = extract_events(documents, "c1")

    assert [event.document.document_id for event in events] == ["doc-1"]


def test_embedded_object_and_bare_string_references_are_equivalent():
    documents = [
        _document("doc-1", counterparty={"_id": "c1", "name": "X"}),
        _document("doc-2", counterparty="c1"),
    ]

    by_string = extract_events(documents, "c1")
    by_object = extract_events(documents, {"_id": "c1", "name": "X"})

    assert [event.document.document_id for event in by_string] == [
        "doc-1",
        "doc-2",
    ]
    assert by_object == by_string


def test_any_reference_of_a_document_can_match():
    document = SourceDocument(
        document_id="doc-1",
        kind=DocumentKind.INVOICE,
        counterparty_refs=("other", {"_id": "c1"}),
        date=_day(1),
        total=Decimal("10"),
    )

    assert len(extract_events([document], "c1")) == 1


def test_aggregate_paid_with_empty_payment_list_synthesizes_one_payment():
    document = _document(payments=(), amount_paid="200")

    events = extract_events([document], "c1")

    payments = [event for event in events if event.kind == EventKind.PAYMENT]
    assert len(payments) == 1
    assert payments[0].amount == Decimal("200")
    assert payments[0].date == document.date


def test_aggregate_paid_without_payment_list_synthesizes_one_payment():
    document = _document(payments=None, amount_paid="200")

    events = extract_events([document], "c1")

    assert [event.kind for event in events] == [
        EventKind.CHARGE,
        EventKind.PAYMENT,
    ]


def test_payment_list_wins_over_aggregate_paid_and_logs_mismatch():
    logger = MagicMock()
    document = _document(
        payments=(Payment(date=_day(2), amount=Decimal("100")),),
        amount_paid="250",
    )

    events = extract_events([document], "c1", logger=logger)

    assert [event.amount for event in events] == [
        Decimal("1000"),
        Decimal("100"),
    ]
    logger.warning.assert_called_once()
    assert "doc-1" in logger.warning.call_args.args[0]


def test_matching_aggregate_paid_does_not_warn():
    logger = MagicMock()
    document = _document(
        payments=(Payment(date=_day(2), amount=Decimal("100")),),
        amount_paid="100",
    )

    extract_events([document], "c1", logger=logger)

    logger.warning.assert_not_called()


def test_no_payment_events_without_payments_or_aggregate():
    events = extract_events([_document(payments=None)], "c1")

    assert [event.kind for event in events] == [EventKind.CHARGE]


def test_unknown_counterparty_yields_no_events():
    assert extract_events([_document()], "missing") == []
    assert extract_events([_document()], None) == []


def test_inputs_are_not_mutated():
    documents = [_document(payments=(), amount_paid="50")]
    snapshot = list(documents)

    extract_events(documents, "c1")

    assert documents == snapshot


def test_defective_document_only_fails_its_own_counterparty():
    broken = SourceDocument(
        document_id="doc-broken",
        kind=DocumentKind.GATE_ENTRY,
        counterparty_refs=("c2",),
        date=_day(1),
        total=Decimal("NaN"),
        defect="Missing date: None",
    )
    documents = [_document(), broken]

    events = extract_events(documents, "c1")

    assert [event.document.document_id for event in events] == ["doc-1"]
    with pytest.raises(LedgerDataIntegrityError) as excinfo:
        extract_events(documents, "c2")
    assert excinfo.value.document_id == "doc-broken"
    assert excinfo.value.reason == "Missing date: None"
