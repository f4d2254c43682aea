"""Streamlit dashboard entry point."""

from datetime import date, datetime

import streamlit as st

from src.adapters.interface.streamlit.ledger_presentation import (
    build_balance_chart,
    ledger_table_rows,
)
from src.adapters.statement_export import (
    format_amount,
    render_statement_html,
    statement_filename,
)
from src.application.ports.documents_repository import DocumentsFetchError
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.documents import DocumentDetail
from src.domain.models.ledger import EventKind, LedgerType, LedgerView
from src.domain.policies.ledger_filters import LedgerFilter
from src.infrastructure.container import (
    build_document_detail_use_case,
    build_ledger_use_case,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import LedgerApiSettings

LEDGER_PAGES = {
    "Customer Ledger": LedgerType.CUSTOMER,
    "Vendor Ledger": LedgerType.VENDOR,
    "Employee Advances": LedgerType.EMPLOYEE,
}

KIND_OPTIONS = {
    "All": None,
    "Charges": EventKind.CHARGE,
    "Payments": EventKind.PAYMENT,
}

FETCH_ERROR_MESSAGE = (
    "Could not load documents from the data service. "
    "Check the connection and refresh."
)


def _fetch_ledger(
    ledger_type: LedgerType,
    counterparty_id: str,
    ledger_filter: LedgerFilter,
) -> LedgerView:
    """Compute the ledger from a fresh fetch. Never cached."""
    use_case = build_ledger_use_case(ledger_type)
    return use_case.execute(counterparty_id, ledger_filter)


def _fetch_document_detail(
    ledger_type: LedgerType,
    document_id: str,
) -> DocumentDetail:
    """Resolve a ledger row into its source document."""
    use_case = build_document_detail_use_case()
    return use_case.execute(ledger_type, document_id)


def _render_filters() -> LedgerFilter:
    """Render the search, date range and type filters."""
    search_col, start_col, end_col, kind_col = st.columns(4)
    search = search_col.text_input(
        "Search",
        placeholder="Doc # or description",
    )
    start_date = start_col.date_input("From", value=None)
    end_date = end_col.date_input("To", value=None)
    kind_label = kind_col.selectbox("Type", list(KIND_OPTIONS), index=0)
    return LedgerFilter(
        search=search or "",
        start_date=start_date if isinstance(start_date, date) else None,
        end_date=end_date if isinstance(end_date, date) else None,
        kind=KIND_OPTIONS[kind_label],
    )


def _render_summary(view: LedgerView, currency_prefix: str) -> None:
    """Render balance and totals metrics."""
    balance_col, debit_col, credit_col = st.columns(3)
    balance_col.metric(
        f"Balance ({view.status.label})",
        format_amount(view.final_balance, currency_prefix),
    )
    debit_col.metric(
        "Total Debit",
        format_amount(view.totals.total_debit, currency_prefix),
    )
    credit_col.metric(
        "Total Credit",
        format_amount(view.totals.total_credit, currency_prefix),
    )
    st.caption(view.status.summary)


def _render_ledger(view: LedgerView, currency_prefix: str) -> None:
    """Render the ledger table and running balance chart."""
    st.caption(
        f"{len(view.entries)} of {len(view.ledger.entries)} entries shown"
    )
    if not view.entries:
        st.info("No ledger entries match the current filters.")
        return
    rows = ledger_table_rows(view.entries, view.ledger_type, currency_prefix)
    st.dataframe(rows, width="stretch", hide_index=True, height=420)
    st.altair_chart(build_balance_chart(view.entries), width="stretch")


def _render_document_detail(
    view: LedgerView,
    currency_prefix: str,
) -> None:
    """Render the detail of a document picked from the ledger."""
    document_ids = list(
        dict.fromkeys(entry.document_id for entry in view.entries)
    )
    if not document_ids:
        return
    selected = st.selectbox("Document details", ["-"] + document_ids)
    if selected == "-":
        return
    try:
        detail = _fetch_document_detail(view.ledger_type, selected)
    except DocumentsFetchError:
        st.warning(FETCH_ERROR_MESSAGE)
        return
    except LedgerDataIntegrityError as exc:
        st.error(f"{exc.user_message}. {exc}")
        return
    st.subheader(f"Document {detail.number or detail.document_id}")
    st.write(
        {
            "Counterparty": detail.counterparty_name or "-",
            "Date": detail.date.strftime("%b %d, %Y"),
            "Total": format_amount(detail.total, currency_prefix),
            "Paid": format_amount(detail.paid, currency_prefix),
            "Due": format_amount(detail.due, currency_prefix),
            "Status": detail.status or "-",
        }
    )
    if detail.payments:
        st.dataframe(
            [
                {
                    "Date": payment.date.strftime("%b %d, %Y"),
                    "Amount": format_amount(payment.amount, currency_prefix),
                    "Method": payment.method or "-",
                }
                for payment in detail.payments
            ],
            hide_index=True,
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Ledger Dashboard", layout="wide")
    st.title("Ledger Dashboard")

    page = st.sidebar.selectbox("Ledger", list(LEDGER_PAGES))
    ledger_type = LEDGER_PAGES[page]
    counterparty_id = st.sidebar.text_input("Counterparty ID").strip()
    counterparty_name = st.sidebar.text_input("Counterparty name").strip()
    st.sidebar.button("Refresh")

    if not counterparty_id:
        st.info("Enter a counterparty ID to load its ledger.")
        return

    settings = LedgerApiSettings.from_env()
    ledger_filter = _render_filters()
    get_usage_logger().info(
        f"Ledger requested: type={ledger_type.value}, id={counterparty_id}"
    )
    try:
        view = _fetch_ledger(ledger_type, counterparty_id, ledger_filter)
    except DocumentsFetchError:
        st.warning(FETCH_ERROR_MESSAGE)
        return
    except LedgerDataIntegrityError as exc:
        st.error(f"{exc.user_message}. {exc}")
        return

    if not view.ledger.entries:
        st.info("No documents found for this counterparty.")
    _render_summary(view, settings.currency_prefix)
    _render_ledger(view, settings.currency_prefix)

    generated_at = datetime.now()
    st.download_button(
        "Download statement",
        data=render_statement_html(
            view,
            counterparty_name=counterparty_name or None,
            generated_at=generated_at,
            currency_prefix=settings.currency_prefix,
        ),
        file_name=statement_filename(
            view,
            counterparty_name or None,
            generated_at,
        ),
        mime="text/html",
    )
    _render_document_detail(view, settings.currency_prefix)


if __name__ == "__main__":  # pragma: no cover
    main()
