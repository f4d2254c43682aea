"""Application ports package."""

from .documents_repository import (
    DocumentNotFoundError,
    DocumentsFetchError,
    DocumentsRepositoryPort,
)

__all__ = [
    "DocumentNotFoundError",
    "DocumentsFetchError",
    "DocumentsRepositoryPort",
]
