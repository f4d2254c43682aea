"""CLI adapter to print or export a counterparty ledger statement."""

import argparse
from datetime import date, datetime
from pathlib import Path

from src.adapters.statement_export import (
    format_amount,
    format_entry_date,
    render_statement_html,
)
from src.application.ports.documents_repository import DocumentsFetchError
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import EventKind, LedgerType
from src.domain.policies.ledger_filters import LedgerFilter
from src.infrastructure.container import build_ledger_use_case
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerApiSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Print the ledger of a customer, vendor or employee.",
    )
    parser.add_argument(
        "ledger_type",
        choices=[ledger_type.value for ledger_type in LedgerType],
    )
    parser.add_argument("counterparty_id")
    parser.add_argument("--search", default="")
    parser.add_argument("--start", help="First day included (YYYY-MM-DD).")
    parser.add_argument("--end", help="Last day included (YYYY-MM-DD).")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in EventKind],
        help="Show only charges or only payments.",
    )
    parser.add_argument("--name", help="Counterparty name for the statement.")
    parser.add_argument("--html", type=Path, help="Write an HTML statement.")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Compute a ledger and print it, optionally exporting HTML."""
    args = _build_parser().parse_args(argv)
    logger = get_app_logger()
    settings = LedgerApiSettings.from_env()
    ledger_filter = LedgerFilter(
        search=args.search,
        start_date=_parse_date(args.start, logger),
        end_date=_parse_date(args.end, logger),
        kind=EventKind(args.kind) if args.kind else None,
    )

    use_case = build_ledger_use_case(LedgerType(args.ledger_type))
    try:
        view = use_case.execute(args.counterparty_id, ledger_filter)
    except DocumentsFetchError as exc:
        logger.error(str(exc))
        print("Could not reach the data service. Try again later.")
        return 1
    except LedgerDataIntegrityError as exc:
        logger.error(str(exc))
        print(f"{exc.user_message}: {exc}")
        return 2

    prefix = settings.currency_prefix
    for entry in view.entries:
        print(
            f"{format_entry_date(entry.date)}  {entry.document_number:<12} "
            f"{entry.description:<32} "
            f"debit={format_amount(entry.debit, prefix)} "
            f"credit={format_amount(entry.credit, prefix)} "
            f"balance={format_amount(entry.balance, prefix)}"
        )
    print(
        f"Totals: debit={format_amount(view.totals.total_debit, prefix)}, "
        f"credit={format_amount(view.totals.total_credit, prefix)}"
    )
    print(
        f"Balance: {format_amount(view.final_balance, prefix)} "
        f"({view.status.label})"
    )

    if args.html:
        html = render_statement_html(
            view,
            counterparty_name=args.name,
            generated_at=datetime.now(),
            currency_prefix=prefix,
        )
        args.html.write_text(html, encoding="utf-8")
        print(f"Statement written to {args.html}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
