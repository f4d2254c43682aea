"""Application use cases package."""

from .get_document_detail import DocumentDetail, GetDocumentDetailUseCase
from .get_ledger import GetLedgerUseCase, LedgerView

__all__ = [
    "DocumentDetail",
    "GetDocumentDetailUseCase",
    "GetLedgerUseCase",
    "LedgerView",
]
