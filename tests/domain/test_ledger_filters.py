from datetime import date, datetime, timezone
from decimal import Decimal

from src.domain.models.ledger import (
    DocumentKind,
    EventKind,
    LedgerEntry,
    Payment,
    SourceDocument,
)
from src.domain.policies.ledger_filters import (
    LedgerFilter,
    apply_ledger_filters,
)
from src.domain.services.events import extract_events
from src.domain.services.ledger import reduce_to_ledger


def _entries() -> list[LedgerEntry]:
    def day(value: int, hour: int = 0) -> datetime:
        return datetime(2024, 3, value, hour, tzinfo=timezone.utc)

    documents = [
        SourceDocument(
            document_id="doc-1",
            kind=DocumentKind.INVOICE,
            counterparty_refs=("c1",),
            date=day(1),
            total=Decimal("1000"),
            number="INV-0001",
            payments=(Payment(date=day(10, 23), amount=Decimal("400")),),
        ),
        SourceDocument(
            document_id="doc-2",
            kind=DocumentKind.INVOICE,
            counterparty_refs=("c1",),
            date=day(15),
            total=Decimal("250"),
            number="INV-0002",
        ),
    ]
    return reduce_to_ledger(extract_events(documents, "c1")).entries


def test_no_filter_keeps_all_entries_in_order():
    entries = _entries()

    assert apply_ledger_filters(entries, None) == entries
    assert apply_ledger_filters(entries, LedgerFilter()) == entries


def test_filtering_never_changes_balances():
    entries = _entries()
    balances = {entry.id: entry.balance for entry in entries}

    kept = apply_ledger_filters(entries, LedgerFilter(kind=EventKind.CHARGE))

    assert [entry.id for entry in kept] == ["doc-1", "doc-2"]
    for entry in kept:
        assert entry.balance == balances[entry.id]
    assert kept[1].balance == Decimal("850.00")


def test_filtered_entries_are_the_same_objects():
    entries = _entries()

    kept = apply_ledger_filters(entries, LedgerFilter(search="inv-0002"))

    assert len(kept) == 1
    assert kept[0] is entries[2]


def test_search_matches_description_case_insensitively():
    entries = _entries()

    kept = apply_ledger_filters(entries, LedgerFilter(search="PAYMENT FOR"))

    assert [entry.kind for entry in kept] == [EventKind.PAYMENT]


def test_date_range_includes_both_bounds():
    entries = _entries()

    kept = apply_ledger_filters(
        entries,
        LedgerFilter(start_date=date(2024, 3, 1), end_date=date(2024, 3, 10)),
    )

    assert [entry.id for entry in kept] == ["doc-1", "doc-1-payment-0"]


def test_date_range_with_only_start():
    entries = _entries()

    kept = apply_ledger_filters(
        entries,
        LedgerFilter(start_date=date(2024, 3, 11)),
    )

    assert [entry.id for entry in kept] == ["doc-2"]


def test_combined_filters_do_not_depend_on_order():
    entries = _entries()
    search = LedgerFilter(search="0001")
    kind = LedgerFilter(kind=EventKind.PAYMENT)
    combined = LedgerFilter(search="0001", kind=EventKind.PAYMENT)

    search_then_kind = apply_ledger_filters(
        apply_ledger_filters(entries, search), kind
    )
    kind_then_search = apply_ledger_filters(
        apply_ledger_filters(entries, kind), search
    )

    assert search_then_kind == kind_then_search
    assert apply_ledger_filters(entries, combined) == search_then_kind
    assert [entry.id for entry in search_then_kind] == ["doc-1-payment-0"]
