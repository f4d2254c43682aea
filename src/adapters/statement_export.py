"""Printable HTML ledger statements.

The statement shows the filtered rows of a ``LedgerView`` with their balances
from the full ledger. Amounts are formatted here only; the domain keeps plain
Decimal values.
"""

from datetime import datetime
from decimal import Decimal
from html import escape

from src.domain.models.ledger import LedgerEntry, LedgerType, LedgerView

TITLES = {
    LedgerType.CUSTOMER: "Customer Ledger Statement",
    LedgerType.VENDOR: "Vendor Ledger Statement",
    LedgerType.EMPLOYEE: "Employee Advance Statement",
}

STYLE = """
body { font-family: Arial, sans-serif; margin: 20mm; color: #333; }
.header { text-align: center; margin-bottom: 20px; }
.info { display: flex; justify-content: space-between; font-size: 14px; }
table { width: 100%; border-collapse: collapse; margin-bottom: 20px; }
th, td { border: 1px solid #ddd; padding: 8px; font-size: 12px; }
th { background-color: #2f80ed; color: white; }
.amount { text-align: right; }
.total-row { font-weight: bold; background-color: #f5f5f5; }
@page { size: A4; margin: 15mm; }
"""


def format_amount(value: Decimal, prefix: str = "R.s") -> str:
    """Format an amount with the currency prefix and two decimals."""
    return f"{prefix} {value:.2f}"


def format_entry_date(value: datetime) -> str:
    """Format an entry date as ``Jan 05, 2024``."""
    return value.strftime("%b %d, %Y")


def _amount_or_dash(value: Decimal, prefix: str) -> str:
    return format_amount(value, prefix) if value > 0 else "-"


def _row(entry: LedgerEntry, prefix: str) -> str:
    debit = _amount_or_dash(entry.debit, prefix)
    credit = _amount_or_dash(entry.credit, prefix)
    balance = format_amount(entry.balance, prefix)
    return (
        "<tr>"
        f"<td>{escape(format_entry_date(entry.date))}</td>"
        f"<td>{escape(entry.document_number)}</td>"
        f"<td>{escape(entry.description)}</td>"
        f'<td class="amount">{escape(debit)}</td>'
        f'<td class="amount">{escape(credit)}</td>'
        f'<td class="amount">{escape(balance)}</td>'
        "</tr>"
    )


def render_statement_html(
    view: LedgerView,
    *,
    counterparty_name: str | None,
    generated_at: datetime,
    currency_prefix: str = "R.s",
) -> str:
    """Render a ledger view as a printable HTML document.

    Args:
        view: Ledger view from ``GetLedgerUseCase``.
        counterparty_name: Display name of the counterparty.
        generated_at: Statement date stamped by the caller.
        currency_prefix: Prefix used for every amount.

    Returns:
        str: Standalone HTML document.
    """
    title = TITLES[view.ledger_type]
    name = escape(counterparty_name or view.counterparty_id)
    balance = format_amount(view.final_balance, currency_prefix)
    rows = "".join(_row(entry, currency_prefix) for entry in view.entries)
    total_debit = format_amount(view.totals.total_debit, currency_prefix)
    total_credit = format_amount(view.totals.total_credit, currency_prefix)
    return f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(title)} - {name}</title>
<style>{STYLE}</style>
</head>
<body>
<div class="header"><h1>{escape(title)}</h1></div>
<div class="info">
<div><p><strong>Name:</strong> {name}</p></div>
<div>
<p><strong>Statement Date:</strong> {generated_at.strftime("%B %d, %Y")}</p>
<p><strong>Current Balance:</strong> {escape(balance)}</p>
<p><strong>Balance Status:</strong> {escape(view.status.label)}</p>
</div>
</div>
<table>
<thead>
<tr><th>Date</th><th>Doc #</th><th>Description</th>
<th class="amount">Debit</th><th class="amount">Credit</th>
<th class="amount">Balance</th></tr>
</thead>
<tbody>
{rows}
<tr class="total-row">
<td colspan="3" class="amount">Totals:</td>
<td class="amount">{escape(total_debit)}</td>
<td class="amount">{escape(total_credit)}</td>
<td class="amount">{escape(balance)}</td>
</tr>
</tbody>
</table>
<div class="summary">
<p><strong>Net Balance:</strong> {escape(balance)}</p>
<p><strong>Balance Status:</strong> {escape(view.status.summary)}</p>
</div>
</body>
</html>
"""


def statement_filename(
    view: LedgerView,
    counterparty_name: str | None,
    generated_at: datetime,
) -> str:
    """Return a download file name for a statement."""
    base = (counterparty_name or view.counterparty_id).strip()
    safe_name = "_".join(base.split()) or view.counterparty_id
    return (
        f"Ledger_Statement_{safe_name}_"
        f"{generated_at.strftime('%Y%m%d')}.html"
    )


__all__ = [
    "format_amount",
    "format_entry_date",
    "render_statement_html",
    "statement_filename",
]
