"""Application port for the document data service."""

from typing import Protocol

from src.domain.models.documents import DocumentDetail
from src.domain.models.ledger import LedgerType, SourceDocument


class DocumentsFetchError(Exception):
    """Raised when source documents cannot be fetched from the data service.

    Fetch failures are retryable from the user's point of view and must not
    be confused with ledger data integrity errors.
    """


class DocumentNotFoundError(DocumentsFetchError):
    """Raised when a requested document does not exist."""


class DocumentsRepositoryPort(Protocol):
    """Port exposing read access to invoices, gate entries and advances."""

    def fetch_documents(
        self,
        ledger_type: LedgerType,
        counterparty_id: str,
    ) -> list[SourceDocument]:
        """Return the source documents feeding a ledger.

        The collection may contain documents of other counterparties.
        """

    def fetch_document_detail(
        self,
        ledger_type: LedgerType,
        document_id: str,
    ) -> DocumentDetail:
        """Return the full detail of a single document."""


__all__ = [
    "DocumentsFetchError",
    "DocumentNotFoundError",
    "DocumentsRepositoryPort",
]
