"""Composition root for wiring infrastructure adapters."""

from src.application.ports.documents_repository import DocumentsRepositoryPort
from src.application.use_cases.get_document_detail import (
    GetDocumentDetailUseCase,
)
from src.application.use_cases.get_ledger import GetLedgerUseCase
from src.domain.models.ledger import LedgerType
from src.infrastructure.documents_repository import RestDocumentsRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import LedgerApiSettings


def build_documents_repository(
    settings: LedgerApiSettings | None = None,
) -> DocumentsRepositoryPort:
    """Return the REST documents repository."""
    resolved_settings = settings or LedgerApiSettings.from_env()
    return RestDocumentsRepository(resolved_settings)


def build_ledger_use_case(
    ledger_type: LedgerType,
    documents_repository: DocumentsRepositoryPort | None = None,
) -> GetLedgerUseCase:
    """Return the ledger use case for a ledger type."""
    repository = documents_repository or build_documents_repository()
    return GetLedgerUseCase(
        documents_repository=repository,
        ledger_type=ledger_type,
        logger=get_app_logger(),
    )


def build_document_detail_use_case(
    documents_repository: DocumentsRepositoryPort | None = None,
) -> GetDocumentDetailUseCase:
    """Return the document detail use case."""
    repository = documents_repository or build_documents_repository()
    return GetDocumentDetailUseCase(
        documents_repository=repository,
        logger=get_app_logger(),
    )


__all__ = [
    "build_documents_repository",
    "build_ledger_use_case",
    "build_document_detail_use_case",
]
