"""Ledger presentation helpers for the Streamlit UI.

Pure transformations from a ``LedgerView`` to table rows and Altair chart
data. Loading the view and session state stay in ``app.py``.
"""

from collections.abc import Sequence

import altair as alt

from src.adapters.statement_export import format_amount, format_entry_date
from src.domain.models.ledger import EventKind, LedgerEntry, LedgerType

KIND_LABELS = {
    LedgerType.CUSTOMER: {
        EventKind.CHARGE: "Invoice",
        EventKind.PAYMENT: "Payment",
    },
    LedgerType.VENDOR: {
        EventKind.CHARGE: "Gate-in",
        EventKind.PAYMENT: "Payment",
    },
    LedgerType.EMPLOYEE: {
        EventKind.CHARGE: "Advance",
        EventKind.PAYMENT: "Repayment",
    },
}


def ledger_table_rows(
    entries: Sequence[LedgerEntry],
    ledger_type: LedgerType,
    currency_prefix: str = "R.s",
) -> list[dict[str, str]]:
    """Return display rows for the ledger table.

    Args:
        entries: Entries to show, usually already filtered.
        ledger_type: Ledger type, used for the kind column.
        currency_prefix: Prefix used for amounts.

    Returns:
        list[dict[str, str]]: One row per entry.
    """
    labels = KIND_LABELS[ledger_type]
    return [
        {
            "Date": format_entry_date(entry.date),
            "Type": labels[entry.kind],
            "Doc #": entry.document_number,
            "Description": entry.description,
            "Debit": (
                format_amount(entry.debit, currency_prefix)
                if entry.debit > 0
                else "-"
            ),
            "Credit": (
                format_amount(entry.credit, currency_prefix)
                if entry.credit > 0
                else "-"
            ),
            "Balance": format_amount(entry.balance, currency_prefix),
        }
        for entry in entries
    ]


def balance_chart_data(
    entries: Sequence[LedgerEntry],
) -> list[dict[str, str | float]]:
    """Return Altair-ready running balance points."""
    return [
        {
            "date": entry.date.isoformat(),
            "balance": float(entry.balance),
            "document": entry.document_number,
            "kind": entry.kind.value,
        }
        for entry in entries
    ]


def build_balance_chart(
    entries: Sequence[LedgerEntry],
    height: int = 260,
) -> alt.Chart:
    """Build a step line chart of the running balance."""
    data = balance_chart_data(entries)
    return alt.Chart(alt.Data(values=data)).mark_line(
        interpolate="step-after",
        point=True,
    ).encode(
        x=alt.X("date:T", title="Date"),
        y=alt.Y("balance:Q", title="Balance"),
        tooltip=[
            alt.Tooltip("date:T"),
            alt.Tooltip("document:N"),
            alt.Tooltip("kind:N"),
            alt.Tooltip("balance:Q", format=",.2f"),
        ],
    ).properties(height=height)


__all__ = [
    "KIND_LABELS",
    "balance_chart_data",
    "build_balance_chart",
    "ledger_table_rows",
]
