"""View filters over computed ledger entries.

Filters select entries; they never touch the balances computed by the
reducer, so a filtered row still shows its balance in the full sequence.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from src.domain.models.ledger import EventKind, LedgerEntry


@dataclass(frozen=True)
class LedgerFilter:
    """Independent predicates applied to ledger entries.

    Attributes:
        search: Case-insensitive substring of document number or description.
        start_date: Inclusive lower bound on the entry date.
        end_date: Inclusive upper bound on the entry date.
        kind: Keep only charges or only payments.
    """

    search: str = ""
    start_date: date | None = None
    end_date: date | None = None
    kind: EventKind | None = None

    def matches(self, entry: LedgerEntry) -> bool:
        """Return True when the entry satisfies every active predicate."""
        return (
            matches_search(entry, self.search)
            and in_date_range(entry, self.start_date, self.end_date)
            and matches_kind(entry, self.kind)
        )


def matches_search(entry: LedgerEntry, search: str) -> bool:
    needle = search.strip().lower()
    if not needle:
        return True
    return (
        needle in entry.document_number.lower()
        or needle in entry.description.lower()
    )


def in_date_range(
    entry: LedgerEntry,
    start_date: date | None,
    end_date: date | None,
) -> bool:
    entry_date = entry.date.date()
    if start_date is not None and entry_date < start_date:
        return False
    if end_date is not None and entry_date > end_date:
        return False
    return True


def matches_kind(entry: LedgerEntry, kind: EventKind | None) -> bool:
    return kind is None or entry.kind == kind


def apply_ledger_filters(
    entries: Iterable[LedgerEntry],
    ledger_filter: LedgerFilter | None,
) -> list[LedgerEntry]:
    """Return the entries kept by the filter, in their original order.

    Args:
        entries: Entries produced by the reducer.
        ledger_filter: Filter to apply; None keeps every entry.

    Returns:
        list[LedgerEntry]: The same entry objects, unmodified.
    """
    if ledger_filter is None:
        return list(entries)
    return [entry for entry in entries if ledger_filter.matches(entry)]


__all__ = [
    "LedgerFilter",
    "apply_ledger_filters",
    "in_date_range",
    "matches_kind",
    "matches_search",
]
