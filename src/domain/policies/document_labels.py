"""Document numbers and descriptions shown on ledger entries."""

from src.domain.models.ledger import DocumentKind, EventKind, LedgerEvent


def _short_id(document_id: str, length: int) -> str:
    return document_id[-length:]


def document_number(event: LedgerEvent) -> str:
    """Return the short document code for a ledger event.

    Args:
        event: Charge or payment event.

    Returns:
        str: Code such as ``INV-000012``, ``GIN-42`` or ``PAY-0012``.
    """
    document = event.document
    number = document.number
    if document.kind == DocumentKind.GATE_ENTRY:
        reference = number or _short_id(document.document_id, 6)
        if event.kind == EventKind.CHARGE:
            return f"GIN-{reference}"
        return f"PAY-{reference}"
    if document.kind == DocumentKind.ADVANCE:
        if event.kind == EventKind.CHARGE:
            return f"ADV-{_short_id(document.document_id, 6)}"
        return f"REP-{_short_id(document.document_id, 4)}"
    if event.kind == EventKind.CHARGE:
        return number or f"INV-{_short_id(document.document_id, 6)}"
    if number:
        return f"PAY-{number[-4:]}"
    return f"PAY-{_short_id(document.document_id, 4)}"


def describe(event: LedgerEvent) -> str:
    """Return the human description for a ledger event."""
    document = event.document
    if document.kind == DocumentKind.GATE_ENTRY:
        reference = document.number or document.document_id
        if event.kind == EventKind.CHARGE:
            return f"Invoice #{reference}"
        return f"Payment for Invoice #{reference}"
    if document.kind == DocumentKind.ADVANCE:
        if event.kind == EventKind.CHARGE:
            return f"Salary advance {document.document_id}"
        return f"Repayment for advance {document.document_id}"
    reference = document.number or document.document_id
    if event.kind == EventKind.CHARGE:
        return f"Invoice {reference}"
    return f"Payment for Invoice {reference}"


def entry_id(event: LedgerEvent) -> str:
    """Return an id unique per document and per payment within it."""
    document_id = event.document.document_id
    if event.kind == EventKind.CHARGE:
        return document_id
    return f"{document_id}-payment-{event.payment_index or 0}"


__all__ = ["document_number", "describe", "entry_id"]
