"""Tests for the ledger_statement_cli adapter."""

from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters import ledger_statement_cli
from src.application.ports.documents_repository import DocumentsFetchError
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import (
    DocumentKind,
    EventKind,
    LedgerType,
    LedgerView,
    SourceDocument,
)
from src.domain.services.events import extract_events
from src.domain.services.ledger import (
    balance_status,
    compute_totals,
    reduce_to_ledger,
)
from src.infrastructure.settings import LedgerApiSettings


def _view() -> LedgerView:
    document = SourceDocument(
        document_id="g1",
        kind=DocumentKind.GATE_ENTRY,
        counterparty_refs=("v1",),
        date=datetime(2024, 6, 3, tzinfo=timezone.utc),
        total=Decimal("750"),
        number="31",
        amount_paid=Decimal("250"),
    )
    ledger = reduce_to_ledger(extract_events([document], "v1"))
    return LedgerView(
        ledger_type=LedgerType.VENDOR,
        counterparty_id="v1",
        ledger=ledger,
        entries=ledger.entries,
        totals=compute_totals(ledger.entries),
        status=balance_status(ledger.final_balance, LedgerType.VENDOR),
    )


@pytest.fixture
def wiring(monkeypatch):
    fake_logger = MagicMock()
    fake_use_case = MagicMock()
    built_for = []

    def _build(ledger_type):
        built_for.append(ledger_type)
        return fake_use_case

    monkeypatch.setattr(
        ledger_statement_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        ledger_statement_cli.LedgerApiSettings,
        "from_env",
        classmethod(lambda cls: LedgerApiSettings()),
    )
    monkeypatch.setattr(ledger_statement_cli, "build_ledger_use_case", _build)
    return fake_logger, fake_use_case, built_for


def test_main_prints_ledger(wiring, capsys):
    """The CLI should print every entry, totals and the balance."""
    _, fake_use_case, built_for = wiring
    fake_use_case.execute.return_value = _view()

    exit_code = ledger_statement_cli.main(["vendor", "v1"])

    assert exit_code == 0
    assert built_for == [LedgerType.VENDOR]
    out = capsys.readouterr().out
    assert "GIN-31" in out
    assert "Payment for Invoice #31" in out
    assert "Totals: debit=R.s 750.00, credit=R.s 250.00" in out
    assert "Balance: R.s 500.00 (Payable)" in out


def test_main_passes_filters(wiring):
    """Command line filters should reach the use case."""
    _, fake_use_case, _ = wiring
    fake_use_case.execute.return_value = _view()

    ledger_statement_cli.main(
        [
            "customer",
            "c1",
            "--search",
            "INV",
            "--start",
            "2024-01-01",
            "--end",
            "2024-01-31",
            "--kind",
            "payment",
        ]
    )

    counterparty_id, ledger_filter = fake_use_case.execute.call_args.args
    assert counterparty_id == "c1"
    assert ledger_filter.search == "INV"
    assert ledger_filter.start_date == date(2024, 1, 1)
    assert ledger_filter.end_date == date(2024, 1, 31)
    assert ledger_filter.kind == EventKind.PAYMENT


def test_main_ignores_invalid_dates_with_warning(wiring):
    """Invalid dates should be dropped and logged."""
    fake_logger, fake_use_case, _ = wiring
    fake_use_case.execute.return_value = _view()

    ledger_statement_cli.main(["vendor", "v1", "--start", "03/01/2024"])

    ledger_filter = fake_use_case.execute.call_args.args[1]
    assert ledger_filter.start_date is None
    fake_logger.warning.assert_called_once()


def test_main_writes_html_statement(wiring, tmp_path, capsys):
    """--html should write a statement file."""
    _, fake_use_case, _ = wiring
    fake_use_case.execute.return_value = _view()
    target = tmp_path / "statement.html"

    exit_code = ledger_statement_cli.main(
        ["vendor", "v1", "--name", "Steel Co", "--html", str(target)]
    )

    assert exit_code == 0
    html = target.read_text(encoding="utf-8")
    assert "Vendor Ledger Statement" in html
    assert "Steel Co" in html
    assert str(target) in capsys.readouterr().out


def test_main_reports_fetch_errors(wiring, capsys):
    """Fetch failures should print a message and return 1."""
    fake_logger, fake_use_case, _ = wiring
    fake_use_case.execute.side_effect = DocumentsFetchError("timeout")

    exit_code = ledger_statement_cli.main(["customer", "c1"])

    assert exit_code == 1
    fake_logger.error.assert_called_once_with("timeout")
    assert "Could not reach the data service" in capsys.readouterr().out


def test_main_reports_integrity_errors(wiring, capsys):
    """Integrity failures should print the record and return 2."""
    fake_logger, fake_use_case, _ = wiring
    fake_use_case.execute.side_effect = LedgerDataIntegrityError(
        "Non-finite amount: 'NaN'",
        document_id="inv-9",
    )

    exit_code = ledger_statement_cli.main(["customer", "c1"])

    assert exit_code == 2
    out = capsys.readouterr().out
    assert "Ledger data is inconsistent for this record" in out
    assert "inv-9" in out
    fake_logger.error.assert_called_once()
