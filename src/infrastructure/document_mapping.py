"""Mapping of data-service JSON payloads to domain documents.

Payload shapes differ between endpoints and between older and newer records:
ids come as ``_id`` or ``id``, gate entries carry ``total`` or
``totalAmount``, and counterparties are either id strings or populated
objects. All of that is resolved here so the domain only sees
``SourceDocument`` and ``DocumentDetail`` values.
"""

from collections.abc import Mapping
from datetime import date, datetime, timezone
from decimal import Decimal, InvalidOperation

from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.documents import DocumentDetail, InvoiceLine
from src.domain.models.ledger import DocumentKind, Payment, SourceDocument
from src.domain.services.documents import compute_invoice_amounts
from src.utils.decimal_utils import coerce_decimal

NOT_A_NUMBER = Decimal("NaN")
UNKNOWN_DATE = datetime(1970, 1, 1, tzinfo=timezone.utc)
UNKNOWN_DOCUMENT_ID = "unknown"


def parse_timestamp(value, document_id: str | None = None) -> datetime:
    """Parse a payload timestamp into an aware UTC datetime.

    Args:
        value: ISO 8601 string, date or datetime from the payload.
        document_id: Document the value belongs to, for error reporting.

    Returns:
        datetime: Timezone-aware datetime in UTC.

    Raises:
        LedgerDataIntegrityError: If the value is missing or unparseable.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        raw = value.strip()
        if raw.endswith("Z"):
            raw = f"{raw[:-1]}+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise LedgerDataIntegrityError(
                f"Invalid date: {value!r}",
                document_id=document_id,
            ) from exc
    else:
        raise LedgerDataIntegrityError(
            f"Missing date: {value!r}",
            document_id=document_id,
        )
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def read_amount(value) -> Decimal:
    """Read a payload amount, keeping malformed values as NaN.

    Malformed amounts are left for the ledger reducer to reject, so a bad
    record only aborts the ledger of its own counterparty.
    """
    if value is None:
        return NOT_A_NUMBER
    try:
        return coerce_decimal(value)
    except (InvalidOperation, ValueError, TypeError):
        return NOT_A_NUMBER


def _read_optional_amount(value) -> Decimal:
    if value is None:
        return Decimal("0")
    return read_amount(value)


def raw_document_id(raw: Mapping) -> str | None:
    """Return the backend id of a payload, or None when it has none."""
    raw_id = raw.get("_id") or raw.get("id")
    return str(raw_id) if raw_id else None


def document_id_of(raw: Mapping) -> str:
    """Return the backend id of a payload."""
    raw_id = raw_document_id(raw)
    if raw_id is None:
        raise LedgerDataIntegrityError(f"Document without id: {dict(raw)!r}")
    return raw_id


def _records(raw_items, field_name: str, document_id: str) -> list[Mapping]:
    if not isinstance(raw_items, (list, tuple)):
        raise LedgerDataIntegrityError(
            f"Expected a list of {field_name}, got {raw_items!r}",
            document_id=document_id,
        )
    for item in raw_items:
        if not isinstance(item, Mapping):
            raise LedgerDataIntegrityError(
                f"Malformed {field_name} entry: {item!r}",
                document_id=document_id,
            )
    return list(raw_items)


def _read_payments(
    raw_payments,
    document_id: str,
) -> tuple[Payment, ...] | None:
    if raw_payments is None:
        return None
    return tuple(
        Payment(
            date=parse_timestamp(item.get("date"), document_id),
            amount=read_amount(item.get("amount")),
            method=item.get("method"),
        )
        for item in _records(raw_payments, "payments", document_id)
    )


def _read_lines(raw_products, document_id: str) -> list[InvoiceLine]:
    if raw_products is None:
        return []
    return [
        InvoiceLine(
            name=str(item.get("name", "")),
            quantity=read_amount(item.get("quantity")),
            price=read_amount(item.get("price")),
        )
        for item in _records(raw_products, "products", document_id)
    ]


def _invoice_total(raw: Mapping, document_id: str) -> Decimal:
    if raw.get("total") is not None:
        return read_amount(raw.get("total"))
    lines = _read_lines(raw.get("products"), document_id)
    if not lines:
        return NOT_A_NUMBER
    try:
        amounts = compute_invoice_amounts(
            lines,
            tax=_read_optional_amount(raw.get("tax")),
            discount=_read_optional_amount(raw.get("discount")),
        )
    except InvalidOperation:
        return NOT_A_NUMBER
    return amounts.total


def _gate_entry_number(raw: Mapping) -> str | None:
    number = raw.get("invoiceNumber")
    if number is None:
        number = raw.get("invoice")
    return None if number is None else str(number)


def _gate_entry_total(raw: Mapping) -> Decimal:
    if raw.get("totalAmount") is not None:
        return read_amount(raw.get("totalAmount"))
    return read_amount(raw.get("total"))


def _counterparty_name(reference) -> str | None:
    if isinstance(reference, Mapping):
        name = reference.get("name")
        return str(name) if name else None
    return None


def _flagged_document(
    raw: Mapping,
    kind: DocumentKind,
    counterparty_refs: tuple[object, ...],
    error: LedgerDataIntegrityError,
) -> SourceDocument:
    """Keep a malformed payload as a document marked with its defect.

    Collections such as gate entries hold every counterparty's records, so
    the error is raised later, and only for the counterparty it belongs to.
    """
    return SourceDocument(
        document_id=(
            error.document_id or raw_document_id(raw) or UNKNOWN_DOCUMENT_ID
        ),
        kind=kind,
        counterparty_refs=counterparty_refs,
        date=UNKNOWN_DATE,
        total=NOT_A_NUMBER,
        defect=error.reason,
    )


def map_invoice(raw: Mapping) -> SourceDocument:
    """Map an invoice payload to a source document."""
    refs = (raw.get("customer"), raw.get("customerDetails"))
    try:
        document_id = document_id_of(raw)
        return SourceDocument(
            document_id=document_id,
            kind=DocumentKind.INVOICE,
            counterparty_refs=refs,
            date=parse_timestamp(raw.get("date"), document_id),
            total=_invoice_total(raw, document_id),
            number=raw.get("invoiceNumber") or None,
            payments=_read_payments(raw.get("paymentHistory"), document_id),
            amount_paid=_read_optional_amount(raw.get("paid")),
        )
    except LedgerDataIntegrityError as exc:
        return _flagged_document(raw, DocumentKind.INVOICE, refs, exc)


def map_gate_entry(raw: Mapping) -> SourceDocument:
    """Map a vendor gate-in payload to a source document."""
    refs = (raw.get("vendor"),)
    try:
        document_id = document_id_of(raw)
        return SourceDocument(
            document_id=document_id,
            kind=DocumentKind.GATE_ENTRY,
            counterparty_refs=refs,
            date=parse_timestamp(raw.get("date"), document_id),
            total=_gate_entry_total(raw),
            number=_gate_entry_number(raw),
            payments=_read_payments(raw.get("payments"), document_id),
            amount_paid=_read_optional_amount(raw.get("paid")),
        )
    except LedgerDataIntegrityError as exc:
        return _flagged_document(raw, DocumentKind.GATE_ENTRY, refs, exc)


def map_advance(raw: Mapping) -> SourceDocument:
    """Map an employee salary advance payload to a source document."""
    refs = (raw.get("employeeId"),)
    try:
        document_id = document_id_of(raw)
        return SourceDocument(
            document_id=document_id,
            kind=DocumentKind.ADVANCE,
            counterparty_refs=refs,
            date=parse_timestamp(raw.get("date"), document_id),
            total=read_amount(raw.get("amount")),
            payments=_read_payments(raw.get("repayments"), document_id),
        )
    except LedgerDataIntegrityError as exc:
        return _flagged_document(raw, DocumentKind.ADVANCE, refs, exc)


def _readable(document: SourceDocument) -> SourceDocument:
    if document.defect is not None:
        raise LedgerDataIntegrityError(
            document.defect,
            document_id=document.document_id,
        )
    return document


def map_invoice_detail(raw: Mapping) -> DocumentDetail:
    """Map an invoice payload to its detail view."""
    document = _readable(map_invoice(raw))
    customer = raw.get("customerDetails") or raw.get("customer")
    due_date = raw.get("dueDate")
    paid = _read_optional_amount(raw.get("paid"))
    return DocumentDetail(
        document_id=document.document_id,
        kind=document.kind,
        number=document.number,
        date=document.date,
        counterparty_name=_counterparty_name(customer),
        total=document.total,
        paid=paid,
        due=_read_optional_amount(raw.get("due")),
        status=raw.get("status"),
        lines=_read_lines(raw.get("products"), document.document_id),
        payments=list(document.payments or ()),
        subtotal=(
            read_amount(raw.get("subtotal"))
            if raw.get("subtotal") is not None
            else None
        ),
        tax=_read_optional_amount(raw.get("tax")),
        discount=_read_optional_amount(raw.get("discount")),
        due_date=(
            parse_timestamp(due_date, document.document_id).date()
            if due_date
            else None
        ),
    )


def _paid_from_payments(document: SourceDocument) -> Decimal:
    if document.payments:
        return sum(
            (payment.amount for payment in document.payments),
            start=Decimal("0"),
        )
    return document.amount_paid


def _vendor_name(reference) -> str | None:
    if isinstance(reference, Mapping):
        return _counterparty_name(reference)
    return str(reference) if reference else None


def map_gate_entry_detail(raw: Mapping) -> DocumentDetail:
    """Map a gate-in payload to its detail view."""
    document = _readable(map_gate_entry(raw))
    paid = _paid_from_payments(document)
    return DocumentDetail(
        document_id=document.document_id,
        kind=document.kind,
        number=document.number,
        date=document.date,
        counterparty_name=_vendor_name(raw.get("vendor")),
        total=document.total,
        paid=paid,
        due=document.total - paid,
        status=raw.get("paymentStatus"),
        payments=list(document.payments or ()),
    )


def map_advance_detail(raw: Mapping) -> DocumentDetail:
    """Map an advance payload to its detail view."""
    document = _readable(map_advance(raw))
    paid = _paid_from_payments(document)
    return DocumentDetail(
        document_id=document.document_id,
        kind=document.kind,
        number=None,
        date=document.date,
        counterparty_name=(
            raw.get("employeeName") or _counterparty_name(raw.get("employeeId"))
        ),
        total=document.total,
        paid=paid,
        due=document.total - paid,
        status=raw.get("status"),
        payments=list(document.payments or ()),
    )


__all__ = [
    "document_id_of",
    "map_advance",
    "map_advance_detail",
    "map_gate_entry",
    "map_gate_entry_detail",
    "map_invoice",
    "map_invoice_detail",
    "parse_timestamp",
    "raw_document_id",
    "read_amount",
]
