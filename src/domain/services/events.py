"""Extraction of ledger events from source documents."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.ledger import (
    EventKind,
    LedgerEvent,
    SourceDocument,
)
from src.domain.services.normalization import normalize_counterparty_id


def belongs_to(document: SourceDocument, counterparty_id: str) -> bool:
    """Return True when any of the document references is the counterparty."""
    return any(
        normalize_counterparty_id(reference) == counterparty_id
        for reference in document.counterparty_refs
    )


def extract_events(
    documents: Iterable[SourceDocument],
    counterparty_id: object,
    logger: Logger | None = None,
) -> list[LedgerEvent]:
    """Flatten a counterparty's documents into charge and payment events.

    Events come out in extraction order: per document, the charge first and
    then its payments in list order. Chronological ordering is the reducer's
    job.

    Args:
        documents: Documents for any number of counterparties.
        counterparty_id: Id string or embedded object of the counterparty.
        logger: Optional logger for payment-list inconsistencies.

    Returns:
        list[LedgerEvent]: Events for the matching documents only.

    Raises:
        LedgerDataIntegrityError: If a matching document is malformed.
            Malformed documents of other counterparties are skipped.
    """
    wanted = normalize_counterparty_id(counterparty_id)
    if wanted is None:
        return []

    events: list[LedgerEvent] = []
    for document in documents:
        if not belongs_to(document, wanted):
            continue
        if document.defect is not None:
            raise LedgerDataIntegrityError(
                document.defect,
                document_id=document.document_id,
            )
        events.append(
            LedgerEvent(
                kind=EventKind.CHARGE,
                date=document.date,
                document=document,
                amount=document.total,
            )
        )
        if document.payments:
            _warn_on_paid_mismatch(document, logger)
            for index, payment in enumerate(document.payments):
                events.append(
                    LedgerEvent(
                        kind=EventKind.PAYMENT,
                        date=payment.date,
                        document=document,
                        amount=payment.amount,
                        payment_index=index,
                    )
                )
        elif document.amount_paid != 0:
            # Legacy records only carry the aggregate amount paid.
            events.append(
                LedgerEvent(
                    kind=EventKind.PAYMENT,
                    date=document.date,
                    document=document,
                    amount=document.amount_paid,
                    payment_index=0,
                )
            )
    return events


def _warn_on_paid_mismatch(
    document: SourceDocument,
    logger: Logger | None,
) -> None:
    if logger is None or document.amount_paid == 0:
        return
    listed = sum(
        (payment.amount for payment in document.payments or ()),
        start=Decimal("0"),
    )
    if listed != document.amount_paid:
        logger.warning(
            f"Payment list total {listed} differs from paid amount "
            f"{document.amount_paid} for document {document.document_id}; "
            "using the payment list"
        )


__all__ = ["extract_events", "belongs_to"]
