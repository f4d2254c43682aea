"""Tests for ledger presentation helpers."""

from datetime import datetime, timezone
from decimal import Decimal

import altair as alt

from src.adapters.interface.streamlit.ledger_presentation import (
    balance_chart_data,
    build_balance_chart,
    ledger_table_rows,
)
from src.domain.models.ledger import (
    DocumentKind,
    LedgerEntry,
    LedgerType,
    Payment,
    SourceDocument,
)
from src.domain.services.events import extract_events
from src.domain.services.ledger import reduce_to_ledger


def _entries(kind=DocumentKind.INVOICE) -> list[LedgerEntry]:
    document = SourceDocument(
        document_id="doc-000123",
        kind=kind,
        counterparty_refs=("x1",),
        date=datetime(2024, 7, 1, tzinfo=timezone.utc),
        total=Decimal("300"),
        number="INV-0123" if kind == DocumentKind.INVOICE else None,
        payments=(
            Payment(
                date=datetime(2024, 7, 9, tzinfo=timezone.utc),
                amount=Decimal("120.5"),
            ),
        ),
    )
    return reduce_to_ledger(extract_events([document], "x1")).entries


def test_ledger_table_rows_for_customer():
    rows = ledger_table_rows(_entries(), LedgerType.CUSTOMER)

    assert rows == [
        {
            "Date": "Jul 01, 2024",
            "Type": "Invoice",
            "Doc #": "INV-0123",
            "Description": "Invoice INV-0123",
            "Debit": "R.s 300.00",
            "Credit": "-",
            "Balance": "R.s 300.00",
        },
        {
            "Date": "Jul 09, 2024",
            "Type": "Payment",
            "Doc #": "PAY-0123",
            "Description": "Payment for Invoice INV-0123",
            "Debit": "-",
            "Credit": "R.s 120.50",
            "Balance": "R.s 179.50",
        },
    ]


def test_ledger_table_rows_use_employee_kind_labels():
    rows = ledger_table_rows(
        _entries(DocumentKind.ADVANCE),
        LedgerType.EMPLOYEE,
        currency_prefix="PKR",
    )

    assert [row["Type"] for row in rows] == ["Advance", "Repayment"]
    assert rows[0]["Doc #"] == "ADV-000123"
    assert rows[1]["Balance"] == "PKR 179.50"


def test_balance_chart_data():
    data = balance_chart_data(_entries())

    assert data[0] == {
        "date": "2024-07-01T00:00:00+00:00",
        "balance": 300.0,
        "document": "INV-0123",
        "kind": "charge",
    }
    assert data[1]["balance"] == 179.5


def test_build_balance_chart_returns_altair_chart():
    chart = build_balance_chart(_entries(), height=200)

    assert isinstance(chart, alt.Chart)
    spec = chart.to_dict()
    assert spec["height"] == 200
    assert spec["encoding"]["y"]["field"] == "balance"
    assert spec["mark"]["interpolate"] == "step-after"
