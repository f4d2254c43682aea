"""Use case to resolve a ledger row into its source document."""

from dataclasses import replace
from datetime import date
from decimal import InvalidOperation

from src.application.ports.documents_repository import DocumentsRepositoryPort
from src.domain.errors import LedgerDataIntegrityError
from src.domain.models.documents import DocumentDetail
from src.domain.models.ledger import LedgerType
from src.domain.services.documents import (
    compute_invoice_amounts,
    invoice_status,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDocumentDetailUseCase:
    """Fetch a document and recompute its invoice figures."""

    def __init__(
        self,
        documents_repository: DocumentsRepositoryPort,
        logger=None,
    ) -> None:
        self._documents_repository = documents_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        ledger_type: LedgerType,
        document_id: str,
        today: date | None = None,
    ) -> DocumentDetail:
        """Return the document detail with derived amounts.

        Args:
            ledger_type: Ledger the clicked row belongs to.
            document_id: Backend id of the document.
            today: Reference day for the overdue status.

        Returns:
            DocumentDetail: Detail with subtotal, total, due and status
            recomputed from product lines when the document has any.

        Raises:
            DocumentsFetchError: If the data service cannot be reached.
            LedgerDataIntegrityError: If the document payload is malformed.
        """
        detail = self._documents_repository.fetch_document_detail(
            ledger_type,
            document_id,
        )
        if not detail.lines:
            return detail

        try:
            amounts = compute_invoice_amounts(
                detail.lines,
                tax=detail.tax,
                discount=detail.discount,
                paid=detail.paid,
            )
            status = invoice_status(
                amounts.due,
                detail.due_date,
                today or date.today(),
            )
        except InvalidOperation as exc:
            raise LedgerDataIntegrityError(
                "Invoice amounts are not valid numbers",
                document_id=document_id,
            ) from exc
        if amounts.total != detail.total:
            self._logger.warning(
                f"Stored total {detail.total} differs from computed total "
                f"{amounts.total} for document {document_id}"
            )
        return replace(
            detail,
            subtotal=amounts.subtotal,
            total=amounts.total,
            due=amounts.due,
            status=status,
        )


__all__ = ["GetDocumentDetailUseCase", "DocumentDetail"]
